"""Model registration for the teams app."""
from teams.infrastructure.models import Team, TeamMember  # noqa: F401
