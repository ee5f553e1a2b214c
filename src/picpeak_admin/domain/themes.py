"""Theme configuration models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

GalleryLayout = Literal[
    "grid",
    "masonry",
    "carousel",
    "timeline",
    "mosaic",
    "gallery-premium",
    "gallery-story",
    "hero",
]
HeaderStyle = Literal["hero", "standard", "minimal", "none"]
HeroDividerStyle = Literal["wave", "straight", "angle", "curve", "none"]


class GridColumns(BaseModel):
    """Responsive column counts for the grid layout."""

    model_config = ConfigDict(frozen=True)

    mobile: int
    tablet: int
    desktop: int


class GalleryLayoutSettings(BaseModel):
    """Layout-specific gallery settings."""

    model_config = ConfigDict(frozen=True, extra="allow")

    spacing: Literal["tight", "normal", "relaxed"] | None = None
    photoAnimation: Literal["none", "fade", "scale", "slide"] | None = None
    photoShape: Literal["square", "rounded", "circle"] | None = None
    gridColumns: GridColumns | None = None
    masonryMode: str | None = None
    masonryGutter: int | None = None
    masonryRowHeight: int | None = None
    masonryLastRowBehavior: Literal["justify", "left", "center"] | None = None
    carouselAutoplay: bool | None = None
    carouselInterval: int | None = None
    carouselShowThumbnails: bool | None = None
    timelineGrouping: Literal["day", "week", "month"] | None = None
    timelineShowDates: bool | None = None
    heroImageId: int | None = None
    heroOverlayOpacity: float | None = None
    mosaicPattern: Literal["random", "structured", "alternating"] | None = None


class ThemeConfig(BaseModel):
    """Gallery colors, typography and layout.

    Field names follow the backend's stored JSON. Instances are frozen; an edit
    is ``config.model_copy(update={...})``.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    primaryColor: str | None = None
    accentColor: str | None = None
    backgroundColor: str | None = None
    textColor: str | None = None
    surfaceColor: str | None = None
    surfaceBorderColor: str | None = None
    mutedTextColor: str | None = None
    colorMode: Literal["light", "dark", "auto"] | None = None
    fontFamily: str | None = None
    headingFontFamily: str | None = None
    fontSize: Literal["small", "normal", "large"] | None = None
    borderRadius: Literal["none", "sm", "md", "lg"] | None = None
    buttonStyle: Literal["solid", "outline", "ghost"] | None = None
    shadowStyle: Literal["none", "subtle", "normal", "dramatic"] | None = None
    galleryLayout: GalleryLayout | None = None
    gallerySettings: GalleryLayoutSettings | None = None
    headerStyle: HeaderStyle | None = None
    heroDividerStyle: HeroDividerStyle | None = None
    controlsStyle: Literal["sidebar", "classic"] | None = None
    legacyHeaderStyle: Literal["minimal", "standard", "full"] | None = None
    footerStyle: Literal["minimal", "standard", "full"] | None = None
    showEventInfo: bool | None = None
    showBranding: bool | None = None
    logoUrl: str | None = None
    customCss: str | None = None
    backgroundPattern: Literal["none", "dots", "grid", "waves"] | None = None


class ThemePreset(BaseModel):
    """A named theme shipped with the product."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None
    config: ThemeConfig


class ResolvedTheme(BaseModel):
    """Theme config together with the preset it came from, or ``custom``."""

    model_config = ConfigDict(frozen=True)

    config: ThemeConfig
    preset_name: str
