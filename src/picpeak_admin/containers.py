"""Dependency container wiring for the admin policy layer."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from picpeak_admin.adapters.picpeak_client import HttpxPicPeakClient, PicPeakClient
from picpeak_admin.config import Settings, parse_preset_allowlist
from picpeak_admin.domain.theme_presets import DEFAULT_PRESET_CONFIGS
from picpeak_admin.domain.themes import ThemeConfig
from picpeak_admin.services.autosave import AutoSaveScheduler, Clock, SystemClock
from picpeak_admin.services.events import EventService
from picpeak_admin.services.feedback import FeedbackSettingsValidator
from picpeak_admin.services.themes import DEFAULT_PRESET, ThemeResolver

T = TypeVar("T")


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    picpeak_client: PicPeakClient
    theme_resolver: ThemeResolver
    feedback_validator: FeedbackSettingsValidator
    event_service: EventService
    close_resources: Callable[[], Awaitable[None]]


def build_theme_resolver(settings: Settings) -> ThemeResolver:
    """Create a resolver over the shipped presets enabled in settings."""
    allowlist = parse_preset_allowlist(settings.enabled_theme_presets)
    presets: dict[str, ThemeConfig] = {
        key: config
        for key, config in DEFAULT_PRESET_CONFIGS.items()
        if allowlist is None or key in allowlist or key == DEFAULT_PRESET
    }
    return ThemeResolver(presets)


def build_autosave_scheduler(
    settings: Settings, commit: Callable[[T], None], clock: Clock | None = None
) -> AutoSaveScheduler[T]:
    """Create an auto-save scheduler using the configured interval."""
    return AutoSaveScheduler(
        commit=commit,
        interval_seconds=settings.autosave_interval_seconds,
        clock=clock or SystemClock(),
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    client = HttpxPicPeakClient.create(
        base_url=resolved_settings.picpeak_api_url,
        admin_token=resolved_settings.picpeak_admin_token,
        timeout=resolved_settings.http_timeout_seconds,
    )
    theme_resolver = build_theme_resolver(resolved_settings)
    feedback_validator = FeedbackSettingsValidator()
    event_service = EventService(
        client=client,
        theme_resolver=theme_resolver,
        feedback_validator=feedback_validator,
        expiring_threshold_days=resolved_settings.expiring_threshold_days,
        extension_days=resolved_settings.extension_days,
        gallery_prefix=resolved_settings.gallery_path_prefix,
    )

    async def close_resources() -> None:
        await client.close()

    return AppContainer(
        settings=resolved_settings,
        picpeak_client=client,
        theme_resolver=theme_resolver,
        feedback_validator=feedback_validator,
        event_service=event_service,
        close_resources=close_resources,
    )
