"""Business rules for admin users, invitations and event types."""

from datetime import datetime

from picpeak_admin.domain.accounts import (
    AdminInvitation,
    AdminUser,
    EventType,
    InvitationStatus,
)
from picpeak_admin.errors import ValidationError

SUPER_ADMIN_ROLE = "super_admin"


def invitation_status(invitation: AdminInvitation, now: datetime) -> InvitationStatus:
    """Return whether an invitation is pending, accepted or expired."""
    if invitation.accepted_at is not None:
        return InvitationStatus.ACCEPTED
    if invitation.expires_at <= now:
        return InvitationStatus.EXPIRED
    return InvitationStatus.PENDING


def pending_invitations(
    invitations: list[AdminInvitation], now: datetime
) -> list[AdminInvitation]:
    """Return invitations that can still be accepted, newest first."""
    pending = [
        invitation
        for invitation in invitations
        if invitation_status(invitation, now) == InvitationStatus.PENDING
    ]
    return sorted(pending, key=lambda invitation: invitation.created_at, reverse=True)


def ensure_can_deactivate(
    user: AdminUser, acting_user_id: int, active_super_admins: int
) -> None:
    """Raise if deactivating the user would lock admins out.

    Raises:
        ValidationError: For self-deactivation or the last active super admin.
    """
    if user.id == acting_user_id:
        raise ValidationError("Cannot deactivate your own account")
    if user.role_name == SUPER_ADMIN_ROLE and user.is_active and active_super_admins <= 1:
        raise ValidationError("Cannot deactivate the last Super Admin")


def ensure_can_delete_event_type(event_type: EventType, events_using: int) -> None:
    """Raise if an event type must be deactivated instead of deleted.

    Raises:
        ValidationError: For system types and types still in use.
    """
    if event_type.is_system:
        raise ValidationError(
            "Cannot delete system event types. You can deactivate them instead."
        )
    if events_using > 0:
        raise ValidationError(
            f"Cannot delete: {events_using} events are using this type. "
            "Deactivate it instead or reassign those events."
        )


def sort_event_types(event_types: list[EventType], active_only: bool = False) -> list[EventType]:
    """Return event types in display order, optionally only active ones."""
    selected = [t for t in event_types if t.is_active or not active_only]
    return sorted(selected, key=lambda t: (t.display_order, t.name.lower()))
