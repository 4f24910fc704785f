"""
ListTeamMembersQuery.

Query for the roster of a team license.
"""
from dataclasses import dataclass


@dataclass
class ListTeamMembersQuery:
    """Query to list every member of a license's team."""

    license_key: str
