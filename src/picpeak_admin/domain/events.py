"""Domain models for gallery events."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from picpeak_admin.parsers import (
    to_boolean,
    to_datetime,
    to_int,
    to_optional_str,
)


class EventStatus(str, Enum):
    """Display status of a gallery."""

    ACTIVE = "active"
    EXPIRING = "expiring"
    EXPIRED = "expired"
    ARCHIVED = "archived"
    INACTIVE = "inactive"


@dataclass(frozen=True)
class ExpirationResult:
    """Expiration bucket and whole days left, if tracked."""

    status: EventStatus
    days_remaining: int | None


@dataclass(frozen=True)
class Event:
    """Request-scoped copy of a backend event."""

    id: int
    slug: str
    event_name: str
    event_type: str
    event_date: datetime | None
    is_active: bool
    is_archived: bool
    require_password: bool
    share_link: str
    created_at: datetime | None
    expires_at: datetime | None
    archived_at: datetime | None = None
    color_theme: str | None = None
    hero_photo_id: int | None = None
    customer_email: str | None = None
    version: str | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, object]) -> "Event":
        """Build an event from a REST payload, normalizing loose field types."""
        version = payload.get("version", payload.get("updated_at"))
        return cls(
            id=to_int(payload.get("id"), 0) or 0,
            slug=str(payload.get("slug") or ""),
            event_name=str(payload.get("event_name") or ""),
            event_type=str(payload.get("event_type") or ""),
            event_date=to_datetime(payload.get("event_date")),
            is_active=to_boolean(payload.get("is_active"), default=True),
            is_archived=to_boolean(payload.get("is_archived"), default=False),
            require_password=to_boolean(
                payload.get("require_password"), default=True
            ),
            share_link=str(payload.get("share_link") or ""),
            created_at=to_datetime(payload.get("created_at")),
            expires_at=to_datetime(payload.get("expires_at")),
            archived_at=to_datetime(payload.get("archived_at")),
            color_theme=to_optional_str(payload.get("color_theme")),
            hero_photo_id=to_int(payload.get("hero_photo_id")),
            customer_email=to_optional_str(payload.get("customer_email")),
            version=None if version is None else str(version),
        )


@dataclass(frozen=True)
class EventSummary:
    """Everything a page needs to render an event row or header."""

    event: Event
    status: EventStatus
    label_status: EventStatus
    days_remaining: int | None
    can_extend: bool
    is_public: bool
    share_url: str
    theme_preset: str
