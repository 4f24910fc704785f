"""
Django implementation of TeamMemberRepository port.

This adapter converts between domain entities and Django ORM models.
"""
import uuid
from typing import List, Optional

from core.domain.value_objects import MemberRole, MemberStatus
from teams.domain.team import TeamMember
from teams.infrastructure.models import TeamMember as TeamMemberModel
from teams.ports.team_repository import TeamMemberRepository


class DjangoTeamMemberRepository(TeamMemberRepository):
    """
    Django ORM implementation of TeamMemberRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: TeamMemberModel) -> TeamMember:
        """
        Convert Django model to domain entity.

        Args:
            model: Django TeamMember model

        Returns:
            TeamMember domain entity
        """
        return TeamMember(
            id=model.id,
            team_id=model.team_id,
            customer_id=model.customer_id,
            role=MemberRole(model.role),
            status=MemberStatus(model.status),
            invited_by_id=model.invited_by_id,
            invited_at=model.invited_at,
            joined_at=model.joined_at,
        )

    def save(self, member: TeamMember) -> TeamMember:
        """
        Save a team member entity.

        Args:
            member: TeamMember entity to save

        Returns:
            Saved team member entity
        """
        model, _ = TeamMemberModel.objects.update_or_create(
            id=member.id,
            defaults={
                "team_id": member.team_id,
                "customer_id": member.customer_id,
                "role": member.role.value,
                "status": member.status.value,
                "invited_by_id": member.invited_by_id,
                "invited_at": member.invited_at,
                "joined_at": member.joined_at,
            },
        )
        return self._to_domain(model)

    def find_by_id(self, member_id: uuid.UUID) -> Optional[TeamMember]:
        """
        Find a team member by ID.

        Args:
            member_id: TeamMember UUID

        Returns:
            TeamMember entity or None if not found
        """
        try:
            return self._to_domain(TeamMemberModel.objects.get(id=member_id))
        except TeamMemberModel.DoesNotExist:
            return None

    def find_by_team_and_customer(
        self, team_id: uuid.UUID, customer_id: uuid.UUID
    ) -> Optional[TeamMember]:
        """
        Find the membership row of a customer in a team.

        Args:
            team_id: Team UUID
            customer_id: Customer UUID

        Returns:
            TeamMember entity or None if not found
        """
        try:
            model = TeamMemberModel.objects.get(team_id=team_id, customer_id=customer_id)
            return self._to_domain(model)
        except TeamMemberModel.DoesNotExist:
            return None

    def find_by_team(self, team_id: uuid.UUID) -> List[TeamMember]:
        models = TeamMemberModel.objects.filter(team_id=team_id).order_by("invited_at")
        return [self._to_domain(model) for model in models]

    def count_active_by_team(self, team_id: uuid.UUID) -> int:
        return TeamMemberModel.objects.filter(
            team_id=team_id, status=MemberStatus.ACTIVE.value
        ).count()
