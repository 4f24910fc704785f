"""
Teams module - seat-based team licenses.

This module handles:
- Team and TeamMember entities
- Seat accounting, invitations, removals and the member roster
"""
