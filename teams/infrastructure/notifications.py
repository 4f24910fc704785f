"""
Django mail implementation of InvitationNotifier port.
"""
import logging

from django.conf import settings
from django.core.mail import send_mail

from teams.ports.invitation_notifier import InvitationNotifier

logger = logging.getLogger(__name__)

INVITATION_BODY = """Hi there,

You've been added to the {team_name} team.

Team license key: {license_key}

Get started:
1. Download the app from {download_url}
2. Open the app and go to Settings > License
3. Enter the team license key above
4. Use your email ({recipient}) when activating
"""


class DjangoMailInvitationNotifier(InvitationNotifier):
    """Sends plain-text invitations through Django's email backend."""

    def send_invitation(self, recipient: str, team_name: str, license_key: str) -> None:
        """
        Send a team invitation email.

        Args:
            recipient: Member email address
            team_name: Team display name
            license_key: Team license key
        """
        send_mail(
            subject=f"You've been added to {team_name}",
            message=INVITATION_BODY.format(
                team_name=team_name,
                license_key=license_key,
                download_url=settings.INVITATION_DOWNLOAD_URL,
                recipient=recipient,
            ),
            from_email=settings.INVITATION_FROM_EMAIL,
            recipient_list=[recipient],
            fail_silently=False,
        )
        logger.info("Invitation email sent", extra={"team_name": team_name})
