"""Theme-derived colors, including the dark-background rule for content pages."""

from dataclasses import dataclass
from typing import Tuple

from proposal_studio.models import DesignSettings
from proposal_studio.models.theme import normalize_hex

DARK_BACKGROUND_VALUES = {"000", "000000", "black"}

WHITE = "#ffffff"
BLACK = "#000000"
LIGHT_GRAY = "#e5e5e5"
NEAR_BLACK = "#2c2c2c"


def is_dark_background(value: str) -> bool:
    """Pure black in any accepted spelling switches content pages to dark mode."""
    return (value or "").strip().lstrip("#").lower() in DARK_BACKGROUND_VALUES


def tint(color: str, alpha: str) -> str:
    """Append a two-digit hex alpha suffix to a base color."""
    return f"{normalize_hex(color)}{alpha}"


def split_alpha(color: str) -> Tuple[str, float]:
    """
    Split a color into ``#rrggbb`` and an opacity.

    ``#rrggbbaa`` carries its alpha in the last two digits; anything that is
    not a hex color (named colors) passes through fully opaque.
    """
    raw = color.strip()
    digits = raw.lstrip("#")
    if raw.startswith("#") and len(digits) == 8:
        try:
            return f"#{digits[:6].lower()}", round(int(digits[6:], 16) / 255, 3)
        except ValueError:
            return raw, 1.0
    if raw.startswith("#") and len(digits) in (3, 6):
        return normalize_hex(raw), 1.0
    return raw, 1.0


@dataclass(frozen=True)
class ContentPalette:
    """Colors for content pages, computed once per render."""
    is_dark: bool
    page_background: str
    heading: str
    body: str
    muted: str
    card_background: str
    card_border: str
    primary: str
    secondary: str
    accent: str


def content_palette(theme: DesignSettings) -> ContentPalette:
    """Resolve heading/body/card colors for the theme's background."""
    primary = theme.primary_color
    secondary = theme.secondary_color
    accent = theme.accent_color

    if is_dark_background(theme.background_color):
        return ContentPalette(
            is_dark=True,
            page_background=BLACK,
            heading="#ffffff",
            body="#d4d4d8",
            muted="#a1a1aa",
            card_background="#18181b",
            card_border="#3f3f46",
            primary=primary,
            secondary=secondary,
            accent=accent,
        )

    return ContentPalette(
        is_dark=False,
        page_background=theme.background_hex,
        heading=secondary,
        body="#555555",
        muted="#666666",
        card_background="#ffffff",
        card_border=tint(primary, "33"),
        primary=primary,
        secondary=secondary,
        accent=accent,
    )
