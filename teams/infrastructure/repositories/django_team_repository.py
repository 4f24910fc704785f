"""
Django implementation of TeamRepository port.

This adapter converts between domain entities and Django ORM models.
"""
import uuid
from typing import Optional

from teams.domain.team import Team
from teams.infrastructure.models import Team as TeamModel
from teams.ports.team_repository import TeamRepository


class DjangoTeamRepository(TeamRepository):
    """Django ORM implementation of TeamRepository."""

    def _to_domain(self, model: TeamModel) -> Team:
        return Team(
            id=model.id,
            name=model.name,
            owner_id=model.owner_id,
            created_at=model.created_at,
        )

    def save(self, team: Team) -> Team:
        """
        Save a team entity.

        Args:
            team: Team entity to save

        Returns:
            Saved team entity
        """
        model, _ = TeamModel.objects.update_or_create(
            id=team.id,
            defaults={
                "name": team.name,
                "owner_id": team.owner_id,
                "created_at": team.created_at,
            },
        )
        return self._to_domain(model)

    def find_by_id(self, team_id: uuid.UUID) -> Optional[Team]:
        try:
            return self._to_domain(TeamModel.objects.get(id=team_id))
        except TeamModel.DoesNotExist:
            return None

    def find_by_id_for_update(self, team_id: uuid.UUID) -> Optional[Team]:
        try:
            return self._to_domain(TeamModel.objects.select_for_update().get(id=team_id))
        except TeamModel.DoesNotExist:
            return None
