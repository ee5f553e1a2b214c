"""Resolution of stored gallery themes against the preset registry."""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import ValidationError as PydanticValidationError

from picpeak_admin.domain.themes import ResolvedTheme, ThemeConfig
from picpeak_admin.errors import ThemeParseError, UnknownPresetError

DEFAULT_PRESET = "default"
CUSTOM_PRESET = "custom"

_logger = logging.getLogger(__name__)


def canonical_json(config: ThemeConfig) -> str:
    """Serialize a config with sorted keys and unset fields dropped."""
    return json.dumps(
        config.model_dump(mode="json", exclude_none=True),
        sort_keys=True,
        separators=(",", ":"),
    )


def parse_theme_json(raw: str) -> ThemeConfig:
    """Parse a stored theme JSON object.

    Raises:
        ThemeParseError: If the text is not a JSON object or has invalid fields.
    """
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise ThemeParseError(str(exc)) from exc
    if not isinstance(data, dict):
        raise ThemeParseError("expected a JSON object")
    try:
        return ThemeConfig.model_validate(data)
    except PydanticValidationError as exc:
        raise ThemeParseError(f"{exc.error_count()} invalid field(s)") from exc


def migrate_theme_config(config: ThemeConfig) -> ThemeConfig:
    """Upgrade legacy configs that used ``hero`` as a gallery layout."""
    if config.galleryLayout == "hero":
        return config.model_copy(
            update={
                "headerStyle": "hero",
                "galleryLayout": "grid",
                "heroDividerStyle": config.heroDividerStyle or "wave",
            }
        )
    if config.headerStyle is None and config.galleryLayout is not None:
        return config.model_copy(update={"headerStyle": "standard"})
    return config


@dataclass
class ThemeResolver:
    """Resolves ``color_theme`` values using an injected preset registry."""

    presets: Mapping[str, ThemeConfig]
    default_key: str = DEFAULT_PRESET

    def __post_init__(self) -> None:
        if self.default_key not in self.presets:
            raise ValueError(f"Preset registry has no '{self.default_key}' entry")
        self._by_canonical = {
            canonical_json(config): key for key, config in self.presets.items()
        }

    @property
    def default(self) -> ResolvedTheme:
        return ResolvedTheme(
            config=self.presets[self.default_key], preset_name=self.default_key
        )

    def resolve(self, stored: str | None) -> ResolvedTheme:
        """Resolve a stored theme to a config and preset name.

        Raises:
            ThemeParseError: If a JSON-looking value cannot be parsed.
            UnknownPresetError: If a preset key is not in the registry.
        """
        if not stored or not stored.strip():
            return self.default
        value = stored.strip()
        if value.startswith("{"):
            parsed = parse_theme_json(value)
            preset_name = self.match_preset(parsed) or CUSTOM_PRESET
            return ResolvedTheme(config=parsed, preset_name=preset_name)
        config = self.presets.get(value)
        if config is None:
            raise UnknownPresetError(value)
        return ResolvedTheme(config=config, preset_name=value)

    def resolve_or_default(self, stored: str | None) -> ResolvedTheme:
        """Resolve a stored theme, falling back to the default preset."""
        try:
            return self.resolve(stored)
        except (ThemeParseError, UnknownPresetError) as exc:
            _logger.warning("Falling back to default theme: %s", exc)
            return self.default

    def resolve_for_gallery(self, stored: str | None) -> ResolvedTheme:
        """Resolve for rendering a guest gallery, upgrading legacy layouts.

        The admin editor uses ``resolve`` so stored configs are saved back
        exactly as they were loaded.
        """
        resolved = self.resolve_or_default(stored)
        return resolved.model_copy(
            update={"config": migrate_theme_config(resolved.config)}
        )

    def match_preset(self, config: ThemeConfig) -> str | None:
        """Return the key of a structurally equal preset, if any."""
        return self._by_canonical.get(canonical_json(config))

    def serialize_for_storage(self, resolved: ResolvedTheme) -> str:
        """Return the ``color_theme`` value to persist for a resolved theme."""
        if resolved.preset_name != CUSTOM_PRESET and resolved.preset_name in self.presets:
            return resolved.preset_name
        return canonical_json(resolved.config)
