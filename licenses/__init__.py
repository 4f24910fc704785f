"""
Licenses module - License keys, plans and license lifecycle.

This module handles:
- License key generation and format checks
- Plan policies (device limits, seat bounds, update windows)
- License provisioning, revocation, expiry and seat changes
"""
