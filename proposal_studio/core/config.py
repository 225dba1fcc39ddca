"""Configuration management for Proposal Studio."""

import re
from functools import lru_cache
from typing import Dict
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ===========================================
    # Server Configuration
    # ===========================================
    DEBUG: bool = Field(default=True, description="Debug mode")

    # ===========================================
    # OpenAI Configuration (for CrewAI)
    # ===========================================
    OPENAI_API_KEY: str = Field(default="", description="OpenAI API key")
    OPENAI_MODEL: str = Field(default="gpt-4o-mini", description="Model for the analysis agent")
    ANALYSIS_SUMMARY_FALLBACK_CHARS: int = Field(
        default=500,
        description="Raw text length used as summary when analysis degrades"
    )

    # ===========================================
    # Export Configuration
    # ===========================================
    EXPORT_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        description="Time allowed for one export to settle"
    )
    EXPORT_RESOURCE_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="Timeout for each image/logo fetched while rendering"
    )
    EXPORT_MIN_BYTES: int = Field(
        default=1024,
        description="Smallest PDF accepted as a valid document"
    )
    EXPORT_MAX_CONCURRENCY: int = Field(
        default=2,
        ge=1,
        description="Maximum simultaneous exports per process"
    )

    # ===========================================
    # Preview Configuration
    # ===========================================
    PREVIEW_SCALE: float = Field(default=0.5, gt=0, description="Default preview scale factor")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# ===========================================
# Font Families
# ===========================================
# Maps the theme font choice to a CSS font stack

FONT_STACKS: Dict[str, str] = {
    "inter": "'Inter', -apple-system, BlinkMacSystemFont, 'Helvetica Neue', Arial, sans-serif",
    "poppins": "'Poppins', -apple-system, BlinkMacSystemFont, 'Helvetica Neue', Arial, sans-serif",
    "outfit": "'Outfit', -apple-system, BlinkMacSystemFont, 'Helvetica Neue', Arial, sans-serif",
}

GOOGLE_FONTS_URL = (
    "https://fonts.googleapis.com/css2?"
    "family=Inter:wght@300;400;500;600;700"
    "&family=Poppins:wght@300;400;500;600;700;800"
    "&family=Outfit:wght@300;400;500;600;700&display=swap"
)


def font_stack(font_family: str) -> str:
    """Get the CSS font stack for a theme font, Poppins when unknown."""
    return FONT_STACKS.get(font_family, FONT_STACKS["poppins"])


def sanitize_filename(title: str, extension: str = "pdf") -> str:
    """
    Build a download filename from a proposal title.

    Every character outside ASCII letters and digits becomes an underscore.

    Args:
        title: Proposal title
        extension: File extension without the dot

    Returns:
        Safe filename such as ``Website_Redesign.pdf``
    """
    safe_name = re.sub(r"[^A-Za-z0-9]", "_", title or "")
    if not safe_name:
        safe_name = "proposal"
    return f"{safe_name}.{extension}"


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
