"""Theme (design settings) model."""

import re
from typing import Optional
from pydantic import Field, field_validator

from proposal_studio.models.base import CamelModel
from proposal_studio.models.enums import FontFamily, HeaderStyle

HEX_COLOR = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
NAMED_BACKGROUNDS = {"black": "#000000", "white": "#ffffff"}


def normalize_hex(value: str) -> str:
    """
    Normalize a hex color to ``#rrggbb`` lowercase.

    Accepts ``#rgb``, ``#rrggbb`` and the same forms without the leading ``#``.
    """
    raw = value.strip().lstrip("#")
    if len(raw) == 3:
        raw = "".join(c * 2 for c in raw)
    return f"#{raw.lower()}"


class DesignSettings(CamelModel):
    """Palette, font and branding applied across a proposal render."""
    primary_color: str = Field("#0d4f4f", description="Main brand color")
    secondary_color: str = Field("#1a1a2e", description="Headings and dark fills")
    accent_color: str = Field("#3498db", description="Bars, bullets and highlights")
    background_color: str = Field(
        "#ffffff",
        description="Content page background; pure black switches to dark mode"
    )
    logo_url: Optional[str] = Field(None, description="Own company logo (top left)")
    client_logo_url: Optional[str] = Field(None, description="Client logo (top right)")
    company_name: str = Field("Your Company", description="Own company name")
    font_family: FontFamily = Field(FontFamily.POPPINS, description="Document font")
    header_style: HeaderStyle = Field(HeaderStyle.GRADIENT, description="Header style (advisory)")

    @field_validator("primary_color", "secondary_color", "accent_color")
    @classmethod
    def validate_hex(cls, value: str) -> str:
        """Theme colors must be opaque hex strings."""
        if not HEX_COLOR.match(value.strip()):
            raise ValueError(f"'{value}' is not a hex color")
        return normalize_hex(value)

    @field_validator("background_color", mode="before")
    @classmethod
    def validate_background(cls, value: Optional[str]) -> str:
        """Background accepts hex or the names black/white; empty means white."""
        if value is None or not str(value).strip():
            return "#ffffff"
        value = str(value).strip()
        if value.lower() in NAMED_BACKGROUNDS:
            return value
        if not HEX_COLOR.match(value):
            raise ValueError(f"'{value}' is not a hex color or 'black'/'white'")
        return value

    @field_validator("company_name", mode="before")
    @classmethod
    def none_to_empty(cls, value: Optional[str]) -> str:
        return value or ""

    @property
    def background_hex(self) -> str:
        """Background as ``#rrggbb`` whatever form it was given in."""
        named = NAMED_BACKGROUNDS.get(self.background_color.lower())
        return named or normalize_hex(self.background_color)
