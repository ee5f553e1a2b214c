"""Tests for container wiring."""

import asyncio

from picpeak_admin.config import Settings
from picpeak_admin.containers import (
    build_autosave_scheduler,
    build_container,
    build_theme_resolver,
)
from picpeak_admin.services.themes import DEFAULT_PRESET
from tests.conftest import FakeClock


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert container.event_service is not None
    assert container.event_service.theme_resolver is container.theme_resolver
    assert container.event_service.gallery_prefix == "/gallery"
    asyncio.run(container.close_resources())


def test_build_theme_resolver_honours_allowlist() -> None:
    settings = Settings(
        picpeak_api_url="https://picpeak.test/api",
        picpeak_admin_token="admin-token",
        enabled_theme_presets="darkModern, galleryStory",
    )

    resolver = build_theme_resolver(settings)

    assert set(resolver.presets) == {DEFAULT_PRESET, "darkModern", "galleryStory"}


def test_build_theme_resolver_enables_all_presets_by_default(settings) -> None:
    resolver = build_theme_resolver(settings)

    assert "elegantWedding" in resolver.presets
    assert len(resolver.presets) == 11


def test_build_autosave_scheduler_uses_configured_interval(settings) -> None:
    committed: list[str] = []
    clock = FakeClock()

    scheduler = build_autosave_scheduler(settings, committed.append, clock=clock)

    assert scheduler.interval_seconds == settings.autosave_interval_seconds
    assert scheduler.clock is clock
