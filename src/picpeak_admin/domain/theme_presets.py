"""Theme presets shipped with PicPeak."""

from picpeak_admin.domain.themes import (
    GalleryLayoutSettings,
    GridColumns,
    ThemeConfig,
    ThemePreset,
)

_STANDARD_GRID = GridColumns(mobile=2, tablet=3, desktop=4)

THEME_PRESETS: dict[str, ThemePreset] = {
    "default": ThemePreset(
        name="Classic Grid",
        description="Clean and organized grid layout",
        config=ThemeConfig(
            primaryColor="#5C8762",
            accentColor="#22c55e",
            backgroundColor="#fafafa",
            textColor="#171717",
            borderRadius="md",
            galleryLayout="grid",
            gallerySettings=GalleryLayoutSettings(
                spacing="normal",
                photoAnimation="fade",
                gridColumns=_STANDARD_GRID,
            ),
            headerStyle="standard",
            footerStyle="standard",
        ),
    ),
    "elegantWedding": ThemePreset(
        name="Elegant Wedding",
        description="Sophisticated layout with hero image and timeline",
        config=ThemeConfig(
            primaryColor="#c9a961",
            accentColor="#e6ddd4",
            backgroundColor="#fdfcfb",
            textColor="#3f3f3f",
            fontFamily="Playfair Display, serif",
            headingFontFamily="Playfair Display, serif",
            borderRadius="lg",
            shadowStyle="subtle",
            galleryLayout="grid",
            headerStyle="hero",
            heroDividerStyle="wave",
            gallerySettings=GalleryLayoutSettings(
                spacing="relaxed",
                photoAnimation="scale",
                photoShape="rounded",
                heroOverlayOpacity=0.3,
            ),
            legacyHeaderStyle="full",
            footerStyle="minimal",
        ),
    ),
    "modernMasonry": ThemePreset(
        name="Modern Masonry",
        description="Pinterest-style columns or Google Photos-style rows",
        config=ThemeConfig(
            primaryColor="#3b82f6",
            accentColor="#1e40af",
            backgroundColor="#ffffff",
            textColor="#0f172a",
            fontFamily="Inter, sans-serif",
            borderRadius="sm",
            galleryLayout="masonry",
            gallerySettings=GalleryLayoutSettings(
                spacing="tight",
                photoAnimation="fade",
                masonryMode="columns",
                masonryGutter=16,
                masonryRowHeight=250,
                masonryLastRowBehavior="left",
            ),
            headerStyle="minimal",
            footerStyle="minimal",
            shadowStyle="normal",
        ),
    ),
    "birthdayFun": ThemePreset(
        name="Birthday Celebration",
        description="Vibrant carousel with playful animations",
        config=ThemeConfig(
            primaryColor="#ec4899",
            accentColor="#fbbf24",
            backgroundColor="#fef3c7",
            textColor="#451a03",
            fontFamily="Comic Neue, cursive",
            borderRadius="lg",
            galleryLayout="carousel",
            gallerySettings=GalleryLayoutSettings(
                spacing="normal",
                photoAnimation="slide",
                carouselAutoplay=True,
                carouselInterval=5000,
                carouselShowThumbnails=True,
            ),
            headerStyle="standard",
            footerStyle="standard",
            backgroundPattern="dots",
        ),
    ),
    "corporateTimeline": ThemePreset(
        name="Corporate Timeline",
        description="Professional chronological layout",
        config=ThemeConfig(
            primaryColor="#1f2937",
            accentColor="#059669",
            backgroundColor="#f9fafb",
            textColor="#111827",
            fontFamily="IBM Plex Sans, sans-serif",
            borderRadius="sm",
            galleryLayout="timeline",
            gallerySettings=GalleryLayoutSettings(
                spacing="normal",
                photoAnimation="none",
                timelineGrouping="day",
                timelineShowDates=True,
            ),
            headerStyle="standard",
            footerStyle="full",
            buttonStyle="outline",
        ),
    ),
    "artisticMosaic": ThemePreset(
        name="Artistic Mosaic",
        description="Creative layout with varied photo sizes",
        config=ThemeConfig(
            primaryColor="#7c3aed",
            accentColor="#f59e0b",
            backgroundColor="#faf5ff",
            textColor="#1e1b4b",
            fontFamily="Montserrat, sans-serif",
            borderRadius="none",
            galleryLayout="mosaic",
            gallerySettings=GalleryLayoutSettings(
                spacing="tight",
                photoAnimation="scale",
                mosaicPattern="structured",
            ),
            headerStyle="minimal",
            footerStyle="minimal",
            shadowStyle="dramatic",
        ),
    ),
    "darkClassic": ThemePreset(
        name="Dark Classic",
        description="Dark theme with green accents",
        config=ThemeConfig(
            primaryColor="#5C8762",
            accentColor="#22c55e",
            backgroundColor="#0f0f0f",
            textColor="#e5e5e5",
            surfaceColor="#1a1a1a",
            surfaceBorderColor="#2e2e2e",
            mutedTextColor="#a3a3a3",
            colorMode="dark",
            borderRadius="md",
            galleryLayout="grid",
            gallerySettings=GalleryLayoutSettings(
                spacing="normal",
                photoAnimation="fade",
                gridColumns=_STANDARD_GRID,
            ),
            headerStyle="standard",
            footerStyle="standard",
            shadowStyle="subtle",
        ),
    ),
    "darkElegant": ThemePreset(
        name="Dark Elegant",
        description="Dark theme with gold accents",
        config=ThemeConfig(
            primaryColor="#c9a961",
            accentColor="#e6ddd4",
            backgroundColor="#121212",
            textColor="#f0ebe5",
            surfaceColor="#1e1e1e",
            surfaceBorderColor="#333333",
            mutedTextColor="#a3a3a3",
            colorMode="dark",
            fontFamily="Playfair Display, serif",
            headingFontFamily="Playfair Display, serif",
            borderRadius="lg",
            galleryLayout="grid",
            headerStyle="hero",
            heroDividerStyle="wave",
            gallerySettings=GalleryLayoutSettings(
                spacing="relaxed",
                photoAnimation="scale",
                photoShape="rounded",
                heroOverlayOpacity=0.4,
            ),
            footerStyle="minimal",
            shadowStyle="subtle",
        ),
    ),
    "darkModern": ThemePreset(
        name="Dark Modern",
        description="Dark theme with blue accents",
        config=ThemeConfig(
            primaryColor="#3b82f6",
            accentColor="#1e40af",
            backgroundColor="#0a0a0a",
            textColor="#f5f5f5",
            surfaceColor="#171717",
            surfaceBorderColor="#262626",
            mutedTextColor="#a3a3a3",
            colorMode="dark",
            fontFamily="Inter, sans-serif",
            borderRadius="sm",
            galleryLayout="masonry",
            gallerySettings=GalleryLayoutSettings(
                spacing="tight",
                photoAnimation="fade",
                masonryMode="columns",
                masonryGutter=16,
            ),
            headerStyle="minimal",
            footerStyle="minimal",
            shadowStyle="normal",
        ),
    ),
    "galleryPremium": ThemePreset(
        name="Gallery Premium (Beta)",
        description="Clean light theme with elegant serif typography and masonry grid",
        config=ThemeConfig(
            primaryColor="#18181b",
            accentColor="#ef4444",
            backgroundColor="#ffffff",
            textColor="#18181b",
            surfaceColor="#ffffff",
            surfaceBorderColor="#f4f4f5",
            mutedTextColor="#71717a",
            colorMode="light",
            fontFamily="Inter, sans-serif",
            headingFontFamily="'Playfair Display', serif",
            borderRadius="sm",
            galleryLayout="gallery-premium",
            gallerySettings=GalleryLayoutSettings(
                spacing="normal", photoAnimation="fade"
            ),
            headerStyle="none",
            footerStyle="minimal",
            shadowStyle="subtle",
        ),
    ),
    "galleryStory": ThemePreset(
        name="Gallery Story (Beta)",
        description="Dark cinematic theme with gold accents and scene-based sections",
        config=ThemeConfig(
            primaryColor="#c9a961",
            accentColor="#c9a961",
            backgroundColor="#0d0d0d",
            textColor="#f2f2f2",
            surfaceColor="#1a1a1a",
            surfaceBorderColor="#262626",
            mutedTextColor="#a3a3a3",
            colorMode="dark",
            fontFamily="Inter, sans-serif",
            headingFontFamily="'Playfair Display', serif",
            borderRadius="sm",
            galleryLayout="gallery-story",
            gallerySettings=GalleryLayoutSettings(
                spacing="normal", photoAnimation="fade"
            ),
            headerStyle="none",
            footerStyle="minimal",
            shadowStyle="subtle",
        ),
    ),
}

DEFAULT_PRESET_CONFIGS: dict[str, ThemeConfig] = {
    key: preset.config for key, preset in THEME_PRESETS.items()
}
