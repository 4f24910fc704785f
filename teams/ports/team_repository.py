"""
Team repository ports (interfaces).

This defines the contract for team and membership persistence.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
import uuid

from teams.domain.team import Team, TeamMember


class TeamRepository(ABC):
    """Abstract repository for Team entities."""

    @abstractmethod
    def save(self, team: Team) -> Team:
        """
        Save a team entity.

        Args:
            team: Team entity to save

        Returns:
            Saved team entity
        """
        pass

    @abstractmethod
    def find_by_id(self, team_id: uuid.UUID) -> Optional[Team]:
        """
        Find a team by ID.

        Args:
            team_id: Team UUID

        Returns:
            Team entity or None if not found
        """
        pass

    @abstractmethod
    def find_by_id_for_update(self, team_id: uuid.UUID) -> Optional[Team]:
        """
        Find a team by ID and lock the row.

        Must be called inside a transaction. Roster changes for the
        same team are serialized on this lock.

        Args:
            team_id: Team UUID

        Returns:
            Team entity or None if not found
        """
        pass


class TeamMemberRepository(ABC):
    """Abstract repository for TeamMember entities."""

    @abstractmethod
    def save(self, member: TeamMember) -> TeamMember:
        """
        Save a team member entity.

        Args:
            member: TeamMember entity to save

        Returns:
            Saved team member entity
        """
        pass

    @abstractmethod
    def find_by_id(self, member_id: uuid.UUID) -> Optional[TeamMember]:
        """
        Find a team member by ID.

        Args:
            member_id: TeamMember UUID

        Returns:
            TeamMember entity or None if not found
        """
        pass

    @abstractmethod
    def find_by_team_and_customer(
        self, team_id: uuid.UUID, customer_id: uuid.UUID
    ) -> Optional[TeamMember]:
        """
        Find the membership row of a customer in a team.

        Args:
            team_id: Team UUID
            customer_id: Customer UUID

        Returns:
            TeamMember entity (any status) or None if not found
        """
        pass

    @abstractmethod
    def find_by_team(self, team_id: uuid.UUID) -> List[TeamMember]:
        """
        Find every member of a team, whatever their status.

        Args:
            team_id: Team UUID

        Returns:
            List of TeamMember entities
        """
        pass

    @abstractmethod
    def count_active_by_team(self, team_id: uuid.UUID) -> int:
        """
        Count active members of a team.

        Args:
            team_id: Team UUID

        Returns:
            Number of members with status ACTIVE
        """
        pass
