"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from picpeak_admin.adapters.picpeak_client import PicPeakClient
from picpeak_admin.config import Settings
from picpeak_admin.containers import AppContainer, build_theme_resolver
from picpeak_admin.errors import ConflictError, EventNotFoundError
from picpeak_admin.services.events import EventService
from picpeak_admin.services.feedback import FeedbackSettingsValidator

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


@dataclass
class FakePicPeakClient(PicPeakClient):
    """In-memory PicPeak backend for tests.

    Every write bumps the stored ``version``; writes carrying a stale version
    raise ``ConflictError`` the way the real API answers 409.
    """

    events: dict[int, dict[str, object]] = field(default_factory=dict)
    feedback: dict[int, dict[str, object]] = field(default_factory=dict)
    calls: list[tuple[str, int | None]] = field(default_factory=list)

    def add_event(self, **payload: object) -> dict[str, object]:
        payload.setdefault("version", "1")
        self.events[int(payload["id"])] = payload
        return payload

    async def list_events(self, status: str | None = None) -> list[dict[str, object]]:
        self.calls.append(("list_events", None))
        return list(self.events.values())

    async def get_event(self, event_id: int) -> dict[str, object]:
        self.calls.append(("get_event", event_id))
        return self._event(event_id)

    async def update_event(
        self, event_id: int, data: dict[str, object], version: str | None = None
    ) -> dict[str, object]:
        self.calls.append(("update_event", event_id))
        event = self._checked(event_id, version)
        event.update(data)
        return self._bump(event)

    async def extend_expiration(
        self, event_id: int, days: int, version: str | None = None
    ) -> dict[str, object]:
        self.calls.append(("extend_expiration", event_id))
        event = self._checked(event_id, version)
        expires_at = datetime.fromisoformat(str(event["expires_at"]))
        event["expires_at"] = (expires_at + timedelta(days=days)).isoformat()
        event["is_active"] = True
        return self._bump(event)

    async def archive_event(self, event_id: int, version: str | None = None) -> None:
        self.calls.append(("archive_event", event_id))
        event = self._checked(event_id, version)
        event["is_archived"] = True
        event["is_active"] = False
        self._bump(event)

    async def get_feedback_settings(self, event_id: int) -> dict[str, object]:
        self.calls.append(("get_feedback_settings", event_id))
        return dict(self.feedback.get(event_id, {}))

    async def update_feedback_settings(
        self, event_id: int, settings: dict[str, object], version: str | None = None
    ) -> dict[str, object]:
        self.calls.append(("update_feedback_settings", event_id))
        self._checked(event_id, version)
        self.feedback[event_id] = dict(settings)
        return dict(settings)

    def _event(self, event_id: int) -> dict[str, object]:
        event = self.events.get(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def _checked(self, event_id: int, version: str | None) -> dict[str, object]:
        event = self._event(event_id)
        if version is not None and version != event["version"]:
            raise ConflictError(event_id, version)
        return event

    def _bump(self, event: dict[str, object]) -> dict[str, object]:
        event["version"] = str(int(str(event["version"])) + 1)
        return dict(event)


@dataclass
class FakeClock:
    """Manually advanced monotonic clock."""

    now: float = 0.0

    def monotonic(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def settings() -> Settings:
    return Settings(
        picpeak_api_url="https://picpeak.test/api",
        picpeak_admin_token="admin-token",
    )


@pytest.fixture
def picpeak_client() -> FakePicPeakClient:
    return FakePicPeakClient()


@pytest.fixture
def container(settings: Settings, picpeak_client: FakePicPeakClient) -> AppContainer:
    theme_resolver = build_theme_resolver(settings)
    feedback_validator = FeedbackSettingsValidator()
    event_service = EventService(
        client=picpeak_client,
        theme_resolver=theme_resolver,
        feedback_validator=feedback_validator,
        expiring_threshold_days=settings.expiring_threshold_days,
        extension_days=settings.extension_days,
        gallery_prefix=settings.gallery_path_prefix,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        picpeak_client=picpeak_client,
        theme_resolver=theme_resolver,
        feedback_validator=feedback_validator,
        event_service=event_service,
        close_resources=close_resources,
    )
