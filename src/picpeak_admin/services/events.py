"""Event lifecycle service over the PicPeak REST API."""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime

from picpeak_admin.adapters.picpeak_client import PicPeakClient
from picpeak_admin.domain.events import Event, EventSummary
from picpeak_admin.domain.feedback import FeedbackSettings
from picpeak_admin.domain.themes import ResolvedTheme
from picpeak_admin.parsers import to_datetime
from picpeak_admin.services.access import (
    DEFAULT_GALLERY_PREFIX,
    is_public,
    resolve_share_link,
)
from picpeak_admin.services.expiration import (
    DEFAULT_EXTENSION_DAYS,
    EXPIRING_THRESHOLD_DAYS,
    can_extend,
    classify_event,
    display_status,
    extend_expiration,
    is_expiring_soon,
)
from picpeak_admin.services.feedback import FeedbackSettingsValidator
from picpeak_admin.services.themes import ThemeResolver

_STATUS_FILTERS = {"active", "expiring", "archived"}

_logger = logging.getLogger(__name__)


@dataclass
class EventService:
    """Loads events, derives their display policy and applies admin actions."""

    client: PicPeakClient
    theme_resolver: ThemeResolver
    feedback_validator: FeedbackSettingsValidator = field(
        default_factory=FeedbackSettingsValidator
    )
    expiring_threshold_days: int = EXPIRING_THRESHOLD_DAYS
    extension_days: int = DEFAULT_EXTENSION_DAYS
    gallery_prefix: str = DEFAULT_GALLERY_PREFIX

    async def list_events(
        self, now: datetime, status: str | None = None, search: str | None = None
    ) -> list[Event]:
        """Return events filtered by status and search term, newest first.

        Raises:
            ValueError: If status is not active, expiring or archived.
        """
        if status is not None and status not in _STATUS_FILTERS:
            raise ValueError(f"Unknown status filter: {status}")
        payloads = await self.client.list_events()
        events = [Event.from_payload(payload) for payload in payloads]

        if status == "active":
            events = [e for e in events if e.is_active and not e.is_archived]
        elif status == "expiring":
            events = [
                e
                for e in events
                if is_expiring_soon(e, now, self.expiring_threshold_days)
            ]
        elif status == "archived":
            events = [e for e in events if e.is_archived]

        if search:
            term = search.lower()
            events = [e for e in events if _matches(e, term)]

        return sorted(events, key=_created_sort_key, reverse=True)

    async def get_event(self, event_id: int) -> Event:
        """Return a single event.

        Raises:
            EventNotFoundError: If the backend does not know the event.
        """
        payload = await self.client.get_event(event_id)
        return Event.from_payload(payload)

    def summarize(self, event: Event, now: datetime) -> EventSummary:
        """Derive everything a page renders for an event."""
        expiration = classify_event(event, now, self.expiring_threshold_days)
        label = display_status(event, now, self.expiring_threshold_days)
        theme = self.theme_resolver.resolve_or_default(event.color_theme)
        return EventSummary(
            event=event,
            status=expiration.status,
            label_status=label,
            days_remaining=expiration.days_remaining,
            can_extend=can_extend(expiration),
            is_public=is_public(event.require_password),
            share_url=resolve_share_link(event.share_link, self.gallery_prefix),
            theme_preset=theme.preset_name,
        )

    async def extend_expiration(self, event: Event, days: int | None = None) -> Event:
        """Push the expiry out; archived events are returned unchanged.

        Raises:
            ValueError: If days is outside 1..365.
            ConflictError: If the event changed since it was loaded.
        """
        days = self.extension_days if days is None else days
        local_expiry = extend_expiration(event.expires_at, days, event.is_archived)
        if event.is_archived:
            _logger.info("Skipping extend for archived event %s", event.id)
            return event

        payload = await self.client.extend_expiration(event.id, days, event.version)
        new_expiry = to_datetime(payload.get("expires_at")) or local_expiry
        _logger.info("Extended event %s by %s days", event.id, days)
        return replace(
            event,
            expires_at=new_expiry,
            is_active=True,
            version=_version_from(payload, event.version),
        )

    async def archive_event(self, event: Event) -> Event:
        """Archive an event; archiving twice is a no-op."""
        if event.is_archived:
            return event
        await self.client.archive_event(event.id, event.version)
        _logger.info("Archived event %s", event.id)
        return replace(event, is_archived=True, is_active=False)

    async def save_theme(self, event: Event, theme: ResolvedTheme) -> Event:
        """Persist a theme as a preset key or as custom JSON."""
        stored = self.theme_resolver.serialize_for_storage(theme)
        payload = await self.client.update_event(
            event.id, {"color_theme": stored}, event.version
        )
        return replace(
            event, color_theme=stored, version=_version_from(payload, event.version)
        )

    async def get_feedback_settings(self, event_id: int) -> FeedbackSettings:
        """Return the event's feedback settings."""
        payload = await self.client.get_feedback_settings(event_id)
        return FeedbackSettings.model_validate(payload)

    async def save_feedback_settings(
        self, event_id: int, settings: FeedbackSettings, version: str | None = None
    ) -> FeedbackSettings:
        """Validate and persist feedback settings as a whole.

        Raises:
            ConfigError: For the first inconsistent field; nothing is sent.
            ConflictError: If the event changed since it was loaded.
        """
        result = self.feedback_validator.validate(settings)
        if not result.is_valid:
            raise result.errors[0]
        if result.inactive_fields:
            _logger.info(
                "Feedback disabled for event %s; inactive toggles: %s",
                event_id,
                ", ".join(result.inactive_fields),
            )
        payload = await self.client.update_feedback_settings(
            event_id, settings.model_dump(), version
        )
        return FeedbackSettings.model_validate(payload or settings.model_dump())


def _matches(event: Event, term: str) -> bool:
    return (
        term in event.event_name.lower()
        or term in event.event_type.lower()
        or term in (event.customer_email or "").lower()
    )


def _created_sort_key(event: Event) -> float:
    return event.created_at.timestamp() if event.created_at else 0.0


def _version_from(payload: dict[str, object], fallback: str | None) -> str | None:
    version = payload.get("version", payload.get("updated_at"))
    return fallback if version is None else str(version)
