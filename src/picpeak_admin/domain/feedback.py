"""Guest feedback settings models."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, field_validator

from picpeak_admin.errors import ConfigError
from picpeak_admin.parsers import to_boolean, to_int

DEPENDENT_TOGGLES = (
    "allow_ratings",
    "allow_likes",
    "allow_comments",
    "allow_favorites",
    "moderate_comments",
)


class FeedbackSettings(BaseModel):
    """Per-event feedback configuration, edited and saved as a whole."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    feedback_enabled: bool = False
    allow_ratings: bool = True
    allow_likes: bool = True
    allow_comments: bool = True
    allow_favorites: bool = True
    require_name_email: bool = False
    moderate_comments: bool = True
    show_feedback_to_guests: bool = True
    enable_rate_limiting: bool = False
    rate_limit_window_minutes: int | None = 15
    rate_limit_max_requests: int | None = 10

    @field_validator(
        "feedback_enabled",
        "allow_ratings",
        "allow_likes",
        "allow_comments",
        "allow_favorites",
        "require_name_email",
        "moderate_comments",
        "show_feedback_to_guests",
        "enable_rate_limiting",
        mode="before",
    )
    @classmethod
    def _loose_bool(cls, value: object) -> bool:
        return to_boolean(value, default=False)

    @field_validator(
        "rate_limit_window_minutes", "rate_limit_max_requests", mode="before"
    )
    @classmethod
    def _loose_int(cls, value: object) -> int | None:
        return to_int(value)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating feedback settings."""

    errors: tuple[ConfigError, ...] = ()
    inactive_fields: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def error_for(self, field: str) -> ConfigError | None:
        """Return the error for a field, if any."""
        for error in self.errors:
            if error.field == field:
                return error
        return None
