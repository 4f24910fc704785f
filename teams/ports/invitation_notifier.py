"""
Invitation notifier port (interface).

Sends the message that tells a new member how to start using a
team license. Delivery is best-effort.
"""
from abc import ABC, abstractmethod


class InvitationNotifier(ABC):
    """Abstract sender of team invitation messages."""

    @abstractmethod
    def send_invitation(self, recipient: str, team_name: str, license_key: str) -> None:
        """
        Send a team invitation.

        Args:
            recipient: Member email address
            team_name: Team display name
            license_key: Team license key the member activates with

        Raises:
            Exception: Any delivery failure; callers log and drop it
        """
        pass
