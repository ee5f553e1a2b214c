"""Tests for the event lifecycle service."""

import asyncio
from datetime import timedelta

import pytest

from picpeak_admin.domain.events import EventStatus
from picpeak_admin.domain.feedback import FeedbackSettings
from picpeak_admin.domain.themes import ResolvedTheme, ThemeConfig
from picpeak_admin.errors import ConfigError, ConflictError, EventNotFoundError
from tests.conftest import NOW, FakePicPeakClient


def _seed(client: FakePicPeakClient) -> None:
    client.add_event(
        id=1,
        slug="anna-ben",
        event_name="Anna & Ben",
        event_type="wedding",
        is_active=True,
        is_archived=False,
        require_password=True,
        share_link="tok-1",
        customer_email="anna@example.com",
        created_at=(NOW - timedelta(days=20)).isoformat(),
        expires_at=(NOW + timedelta(days=5)).isoformat(),
    )
    client.add_event(
        id=2,
        slug="acme-gala",
        event_name="ACME Gala",
        event_type="corporate",
        is_active=1,
        is_archived=0,
        require_password="false",
        share_link="https://photos.example.com/gallery/acme/tok-2",
        created_at=(NOW - timedelta(days=2)).isoformat(),
        expires_at=(NOW + timedelta(days=60)).isoformat(),
        color_theme="darkModern",
    )
    client.add_event(
        id=3,
        slug="old-party",
        event_name="Old Party",
        event_type="birthday",
        is_active=False,
        is_archived=True,
        require_password=True,
        share_link="",
        created_at=(NOW - timedelta(days=400)).isoformat(),
        expires_at=(NOW - timedelta(days=300)).isoformat(),
        color_theme="{broken",
    )


def test_list_events_newest_first(container, picpeak_client) -> None:
    _seed(picpeak_client)

    events = asyncio.run(container.event_service.list_events(NOW))

    assert [event.id for event in events] == [2, 1, 3]


@pytest.mark.parametrize(
    ("status", "expected"),
    [("active", [2, 1]), ("expiring", [1]), ("archived", [3])],
)
def test_list_events_by_status(container, picpeak_client, status, expected) -> None:
    _seed(picpeak_client)

    events = asyncio.run(container.event_service.list_events(NOW, status=status))

    assert [event.id for event in events] == expected


def test_list_events_search(container, picpeak_client) -> None:
    _seed(picpeak_client)
    service = container.event_service

    by_email = asyncio.run(service.list_events(NOW, search="ANNA@"))
    by_type = asyncio.run(service.list_events(NOW, search="corp"))

    assert [event.id for event in by_email] == [1]
    assert [event.id for event in by_type] == [2]


def test_list_events_rejects_unknown_status(container) -> None:
    with pytest.raises(ValueError, match="Unknown status filter"):
        asyncio.run(container.event_service.list_events(NOW, status="deleted"))


def test_get_event_not_found(container) -> None:
    with pytest.raises(EventNotFoundError):
        asyncio.run(container.event_service.get_event(99))


def test_summarize_expiring_event(container, picpeak_client) -> None:
    _seed(picpeak_client)
    service = container.event_service
    event = asyncio.run(service.get_event(1))

    summary = service.summarize(event, NOW)

    assert summary.status == EventStatus.EXPIRING
    assert summary.label_status == EventStatus.EXPIRING
    assert summary.days_remaining == 5
    assert summary.can_extend is True
    assert summary.is_public is False
    assert summary.share_url == "/gallery/tok-1"
    assert summary.theme_preset == "default"


def test_summarize_public_event_with_preset(container, picpeak_client) -> None:
    _seed(picpeak_client)
    service = container.event_service
    event = asyncio.run(service.get_event(2))

    summary = service.summarize(event, NOW)

    assert summary.status == EventStatus.ACTIVE
    assert summary.can_extend is False
    assert summary.is_public is True
    assert summary.share_url == "https://photos.example.com/gallery/acme/tok-2"
    assert summary.theme_preset == "darkModern"


def test_summarize_archived_event_with_broken_theme(container, picpeak_client) -> None:
    _seed(picpeak_client)
    service = container.event_service
    event = asyncio.run(service.get_event(3))

    summary = service.summarize(event, NOW)

    assert summary.status == EventStatus.ARCHIVED
    assert summary.days_remaining is None
    assert summary.can_extend is False
    assert summary.share_url == "#"
    assert summary.theme_preset == "default"


def test_extend_expiring_event_becomes_active(container, picpeak_client) -> None:
    _seed(picpeak_client)
    service = container.event_service
    event = asyncio.run(service.get_event(1))

    extended = asyncio.run(service.extend_expiration(event))
    summary = service.summarize(extended, NOW)

    assert extended.expires_at == NOW + timedelta(days=12)
    assert extended.version == "2"
    assert summary.status == EventStatus.ACTIVE
    assert summary.days_remaining == 12
    assert summary.can_extend is False


def test_extend_archived_event_is_noop(container, picpeak_client) -> None:
    _seed(picpeak_client)
    service = container.event_service
    event = asyncio.run(service.get_event(3))

    result = asyncio.run(service.extend_expiration(event, days=30))

    assert result == event
    assert ("extend_expiration", 3) not in picpeak_client.calls


def test_extend_rejects_invalid_days(container, picpeak_client) -> None:
    _seed(picpeak_client)
    service = container.event_service
    event = asyncio.run(service.get_event(1))

    with pytest.raises(ValueError):
        asyncio.run(service.extend_expiration(event, days=0))


def test_stale_write_raises_conflict(container, picpeak_client) -> None:
    _seed(picpeak_client)
    service = container.event_service
    first_copy = asyncio.run(service.get_event(1))
    second_copy = asyncio.run(service.get_event(1))

    asyncio.run(service.extend_expiration(first_copy))

    with pytest.raises(ConflictError) as exc_info:
        asyncio.run(service.archive_event(second_copy))

    assert exc_info.value.event_id == 1
    assert picpeak_client.events[1]["is_archived"] is False


def test_archive_event(container, picpeak_client) -> None:
    _seed(picpeak_client)
    service = container.event_service
    event = asyncio.run(service.get_event(1))

    archived = asyncio.run(service.archive_event(event))
    again = asyncio.run(service.archive_event(archived))

    assert archived.is_archived is True
    assert archived.is_active is False
    assert again is archived
    assert picpeak_client.calls.count(("archive_event", 1)) == 1
    assert service.summarize(archived, NOW).status == EventStatus.ARCHIVED


def test_save_theme_stores_preset_key_or_json(container, picpeak_client) -> None:
    _seed(picpeak_client)
    service = container.event_service
    event = asyncio.run(service.get_event(1))

    preset = container.theme_resolver.resolve("galleryStory")
    updated = asyncio.run(service.save_theme(event, preset))
    custom = ResolvedTheme(config=ThemeConfig(primaryColor="#000"), preset_name="custom")
    updated = asyncio.run(service.save_theme(updated, custom))

    assert picpeak_client.events[1]["color_theme"] == '{"primaryColor":"#000"}'
    assert updated.version == "3"
    assert service.summarize(updated, NOW).theme_preset == "custom"


def test_save_feedback_settings_rejects_invalid(container, picpeak_client) -> None:
    _seed(picpeak_client)
    settings = FeedbackSettings(
        feedback_enabled=True,
        enable_rate_limiting=True,
        rate_limit_window_minutes=0,
        rate_limit_max_requests=10,
    )

    with pytest.raises(ConfigError) as exc_info:
        asyncio.run(container.event_service.save_feedback_settings(1, settings))

    assert exc_info.value.field == "rate_limit_window_minutes"
    assert ("update_feedback_settings", 1) not in picpeak_client.calls


def test_save_and_load_feedback_settings(container, picpeak_client, caplog) -> None:
    _seed(picpeak_client)
    service = container.event_service
    settings = FeedbackSettings(feedback_enabled=False, allow_comments=False)

    with caplog.at_level("INFO", logger="picpeak_admin.services.events"):
        saved = asyncio.run(service.save_feedback_settings(1, settings))
    loaded = asyncio.run(service.get_feedback_settings(1))

    assert saved == settings
    assert loaded == settings
    assert "inactive toggles" in caplog.text
