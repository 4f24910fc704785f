"""
Celery tasks for team notifications.
"""
import logging

from DeviceLicenseService.celery import app

from teams.infrastructure.notifications import DjangoMailInvitationNotifier

logger = logging.getLogger(__name__)


@app.task(bind=True, max_retries=3)
def send_team_invitation_task(self, recipient: str, team_name: str, license_key: str):
    """
    Celery task for invitation delivery.

    Retries with exponential backoff. After the last attempt the
    failure is logged and dropped; the membership is already stored.

    Args:
        recipient: Member email address
        team_name: Team display name
        license_key: Team license key

    Returns:
        True if the invitation was sent, False otherwise
    """
    try:
        DjangoMailInvitationNotifier().send_invitation(recipient, team_name, license_key)
    except Exception as exc:
        if self.request.retries >= self.max_retries:
            logger.error(
                "Invitation delivery failed: %s",
                exc,
                exc_info=True,
                extra={"team_name": team_name},
            )
            return False
        logger.warning(
            "Invitation delivery failed, retrying: %s",
            exc,
            extra={"attempt": self.request.retries + 1},
        )
        raise self.retry(exc=exc, countdown=2 ** self.request.retries)
    return True
