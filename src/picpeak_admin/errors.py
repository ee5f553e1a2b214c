"""Domain error codes for the admin policy layer."""

from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    THEME_PARSE = "THEME_PARSE"
    UNKNOWN_PRESET = "UNKNOWN_PRESET"
    CONFIG = "CONFIG"
    DATE_PARSE = "DATE_PARSE"
    CONFLICT = "CONFLICT"
    VALIDATION = "VALIDATION"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"


class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ThemeParseError(DomainError):
    """Raised when a stored theme looks like JSON but cannot be parsed."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            code=ErrorCode.THEME_PARSE,
            message=f"Stored theme is not a valid theme config: {detail}",
        )


class UnknownPresetError(DomainError):
    """Raised when a stored preset key is not in the registry."""

    def __init__(self, preset_name: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_PRESET,
            message=f"Unknown theme preset '{preset_name}'",
        )
        self.preset_name = preset_name


class ConfigError(DomainError):
    """Feedback settings field that is inconsistent with the rest."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(code=ErrorCode.CONFIG, message=message)
        self.field = field

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigError):
            return NotImplemented
        return self.field == other.field and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.field, self.message))


class DateParseError(DomainError):
    """Raised when a timestamp cannot be parsed."""

    def __init__(self, value: object) -> None:
        super().__init__(
            code=ErrorCode.DATE_PARSE,
            message=f"Unparseable timestamp: {value!r}",
        )
        self.value = value


class ConflictError(DomainError):
    """Raised when a write is rejected because the event changed meanwhile."""

    def __init__(self, event_id: int, version: str | None = None) -> None:
        super().__init__(
            code=ErrorCode.CONFLICT,
            message="Event was modified by another session",
        )
        self.event_id = event_id
        self.version = version


class ValidationError(DomainError):
    """Raised when an admin action violates a business rule."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION, message=message)


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id
