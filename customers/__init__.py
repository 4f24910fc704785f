"""
Customers module - people who buy or use licenses.

This module handles:
- Customer entity, identified by a case-insensitive email
- Customer lookup and get-or-create on purchase, invite and activation
"""
