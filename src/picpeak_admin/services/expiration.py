"""Gallery expiration classification."""

from datetime import UTC, datetime, timedelta

from picpeak_admin.domain.events import Event, EventStatus, ExpirationResult
from picpeak_admin.parsers import to_datetime

EXPIRING_THRESHOLD_DAYS = 7
DEFAULT_EXTENSION_DAYS = 7
MAX_EXTENSION_DAYS = 365

_ONE_DAY = timedelta(days=1)


def days_between(expires_at: datetime, now: datetime) -> int:
    """Return whole days from now until expires_at, truncated toward zero."""
    return int((_as_utc(expires_at) - _as_utc(now)) / _ONE_DAY)


def classify(
    expires_at: datetime | str | None,
    now: datetime,
    is_archived: bool,
    threshold_days: int = EXPIRING_THRESHOLD_DAYS,
) -> ExpirationResult:
    """Bucket an expiry timestamp into active, expiring, expired or archived.

    Archived events are not tracked for expiration. A missing or unparseable
    expiry means the gallery never expires.
    """
    if is_archived:
        return ExpirationResult(status=EventStatus.ARCHIVED, days_remaining=None)
    parsed = expires_at if isinstance(expires_at, datetime) else to_datetime(expires_at)
    if parsed is None:
        return ExpirationResult(status=EventStatus.ACTIVE, days_remaining=None)

    days = days_between(parsed, now)
    if days <= 0:
        status = EventStatus.EXPIRED
    elif days <= threshold_days:
        status = EventStatus.EXPIRING
    else:
        status = EventStatus.ACTIVE
    return ExpirationResult(status=status, days_remaining=days)


def classify_event(
    event: Event, now: datetime, threshold_days: int = EXPIRING_THRESHOLD_DAYS
) -> ExpirationResult:
    """Classify an event record."""
    return classify(event.expires_at, now, event.is_archived, threshold_days)


def can_extend(result: ExpirationResult) -> bool:
    """Return True when the extend affordance should be offered."""
    return result.status in {EventStatus.EXPIRING, EventStatus.EXPIRED}


def extend_expiration(
    expires_at: datetime | None,
    days: int = DEFAULT_EXTENSION_DAYS,
    is_archived: bool = False,
) -> datetime | None:
    """Return the expiry pushed out by ``days``; archived events are unchanged.

    Raises:
        ValueError: If days is outside 1..365.
    """
    if isinstance(days, bool) or not 1 <= days <= MAX_EXTENSION_DAYS:
        raise ValueError(f"Extension must be 1-{MAX_EXTENSION_DAYS} days")
    if is_archived or expires_at is None:
        return expires_at
    return expires_at + timedelta(days=days)


def is_expiring_soon(
    event: Event, now: datetime, threshold_days: int = EXPIRING_THRESHOLD_DAYS
) -> bool:
    """Return True for live events inside the warning window."""
    if not event.is_active or event.is_archived:
        return False
    return classify_event(event, now, threshold_days).status == EventStatus.EXPIRING


def display_status(
    event: Event, now: datetime, threshold_days: int = EXPIRING_THRESHOLD_DAYS
) -> EventStatus:
    """Status label for lists and headers.

    A deactivated, non-archived event shows as inactive, overriding whatever
    its expiry date says.
    """
    if event.is_archived:
        return EventStatus.ARCHIVED
    if not event.is_active:
        return EventStatus.INACTIVE
    return classify_event(event, now, threshold_days).status


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
