"""
Event handlers for domain events.

These handlers run side effects (audit logging, notifications) after
the operation that raised the event has committed.
"""

import logging

from activations.domain.events import DeviceDeactivated, LicenseActivated
from core.domain.events import DomainEvent, EventHandler
from licenses.domain.events import (
    LicenseExpired,
    LicenseProvisioned,
    LicenseRevoked,
    SeatCountChanged,
)
from teams.domain.events import TeamMemberInvited, TeamMemberRemoved

logger = logging.getLogger(__name__)

AUDITED_EVENTS = (
    LicenseProvisioned,
    LicenseRevoked,
    LicenseExpired,
    SeatCountChanged,
    LicenseActivated,
    DeviceDeactivated,
    TeamMemberInvited,
    TeamMemberRemoved,
)


class AuditLogEventHandler(EventHandler):
    """
    Event handler for audit logging.

    Writes every domain event to the audit logger as a structured record.
    """

    def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for audit logging.

        Args:
            event: Domain event to log
        """
        logger.info(
            "Audit log: %s - %s",
            event.event_type,
            event.aggregate_id,
            extra={
                "event_id": str(event.event_id),
                "event_type": event.event_type,
                "aggregate_id": event.aggregate_id,
                "occurred_at": event.occurred_at.isoformat(),
            },
        )


class TeamInvitationNotificationHandler(EventHandler):
    """
    Event handler for invitation emails.

    Enqueues delivery for new members. Members brought back from
    removal already know the key and get no message.
    """

    def handle(self, event: DomainEvent) -> None:
        """
        Handle TeamMemberInvited by enqueuing the invitation task.

        Args:
            event: TeamMemberInvited event
        """
        from teams.tasks import send_team_invitation_task

        if event.reactivated:
            logger.debug("Skipping invitation for reactivated member %s", event.member_id)
            return

        try:
            send_team_invitation_task.delay(event.member_email, event.team_name, event.license_key)
        except Exception as e:
            logger.error(
                "Could not enqueue invitation for member %s: %s",
                event.member_id,
                e,
                exc_info=True,
            )


# Register event handlers
def register_event_handlers():
    """Register all event handlers with the event bus."""
    from core.infrastructure.events import event_bus

    audit_handler = AuditLogEventHandler()
    for event_type in AUDITED_EVENTS:
        event_bus.subscribe(event_type, audit_handler)

    event_bus.subscribe(TeamMemberInvited, TeamInvitationNotificationHandler())

    logger.info("Event handlers registered")
