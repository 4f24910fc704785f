"""
Activations module - Device activation against license keys.

This module handles:
- Activation entity and domain logic
- Device limits per license
- Key resolution for the desktop app and device deactivation
"""
