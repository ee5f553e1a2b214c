"""Boundary parsers for loosely typed backend fields.

The backend has sent the same field as a bool, a number or a string across
API versions. Everything that comes off the wire goes through these helpers
once, so the rest of the package only sees canonical Python types.
"""

import logging
import math
from datetime import UTC, date, datetime, time

from picpeak_admin.errors import DateParseError

_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off", ""})

_logger = logging.getLogger(__name__)


def to_boolean(value: object, default: bool = False) -> bool:
    """Parse a bool, number or string representation into a bool.

    >>> to_boolean("false")
    False
    >>> to_boolean(1)
    True
    >>> to_boolean(None, default=True)
    True
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int | float):
        if isinstance(value, float) and math.isnan(value):
            return default
        return value != 0
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_STRINGS:
            return True
        if normalized in _FALSE_STRINGS:
            return False
    return default


def to_int(value: object, default: int | None = None) -> int | None:
    """Parse an integral number or numeric string; anything else gives default."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        return default
    if isinstance(value, str):
        cleaned = value.strip()
        try:
            return int(cleaned)
        except ValueError:
            return default
    return default


def parse_timestamp(value: object) -> datetime:
    """Parse an ISO-8601 string or datetime into an aware UTC datetime.

    Raises:
        DateParseError: If the value is not a timestamp.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise DateParseError(value) from exc
    else:
        raise DateParseError(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def to_datetime(value: object) -> datetime | None:
    """Parse a timestamp, degrading malformed input to None."""
    if value is None or value == "":
        return None
    try:
        return parse_timestamp(value)
    except DateParseError:
        _logger.warning("Ignoring unparseable timestamp: %r", value)
        return None


def to_optional_str(value: object) -> str | None:
    """Return a trimmed string, or None for empty input."""
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip() or None
    return str(value)
