"""Admin account and event type models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class InvitationStatus(str, Enum):
    """Lifecycle state of an admin invitation."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    EXPIRED = "expired"


@dataclass(frozen=True)
class AdminUser:
    """Staff account as shown in user management."""

    id: int
    username: str
    email: str
    role_name: str
    is_active: bool


@dataclass(frozen=True)
class AdminInvitation:
    """Single-use, time-bound invitation for a new staff account."""

    id: int
    email: str
    role_name: str
    created_at: datetime
    expires_at: datetime
    accepted_at: datetime | None = None


@dataclass(frozen=True)
class EventType:
    """Orderable event category with an emoji and default theme."""

    id: int
    name: str
    slug_prefix: str
    emoji: str | None
    theme_preset: str | None
    display_order: int
    is_system: bool
    is_active: bool
