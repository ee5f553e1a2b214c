"""Validation of per-event guest feedback settings."""

import re
from dataclasses import dataclass

from picpeak_admin.domain.feedback import (
    DEPENDENT_TOGGLES,
    FeedbackSettings,
    ValidationResult,
)
from picpeak_admin.errors import ConfigError

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_RATE_LIMIT_FIELDS = ("rate_limit_window_minutes", "rate_limit_max_requests")


@dataclass
class FeedbackSettingsValidator:
    """Checks that feedback settings are internally consistent."""

    def validate(self, settings: FeedbackSettings) -> ValidationResult:
        """Return field errors and the toggles that have no effect yet."""
        errors: list[ConfigError] = []
        if settings.enable_rate_limiting:
            for field in _RATE_LIMIT_FIELDS:
                value = getattr(settings, field)
                if not _is_positive_int(value):
                    errors.append(
                        ConfigError(
                            field,
                            f"{field} must be a positive integer when "
                            "rate limiting is enabled",
                        )
                    )

        inactive: tuple[str, ...] = ()
        if not settings.feedback_enabled:
            inactive = tuple(
                field for field in DEPENDENT_TOGGLES if getattr(settings, field)
            )
        return ValidationResult(errors=tuple(errors), inactive_fields=inactive)

    def validate_payload(self, payload: dict[str, object]) -> ValidationResult:
        """Validate a raw settings dict as received from a form or the API."""
        return self.validate(FeedbackSettings.model_validate(payload))


def validate_guest_identity(
    settings: FeedbackSettings, guest_name: str | None, guest_email: str | None
) -> list[str]:
    """Return messages for missing guest identity when it is required."""
    if not settings.require_name_email:
        return []
    problems = []
    if not guest_name or not guest_name.strip():
        problems.append("Name is required")
    if not guest_email or not _EMAIL_RE.match(guest_email.strip()):
        problems.append("Valid email is required")
    return problems


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
