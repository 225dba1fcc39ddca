"""Enumeration types for proposals and themes."""

from enum import Enum


class SectionType(str, Enum):
    """Closed set of section variants a proposal can hold."""
    COVER = "cover"
    PROJECT_SUMMARY = "project-summary"
    DELIVERABLES = "deliverables"
    APPROACH = "approach"
    TIMELINE = "timeline"
    WHY_CHOOSE_US = "why-choose-us"
    PRICING = "pricing"
    NEXT_STEPS = "next-steps"
    TERMS = "terms"
    CONTACT = "contact"


class FontFamily(str, Enum):
    """Supported document font families."""
    INTER = "inter"
    POPPINS = "poppins"
    OUTFIT = "outfit"


class HeaderStyle(str, Enum):
    """Header style preference (advisory)."""
    GRADIENT = "gradient"
    SOLID = "solid"
    MINIMAL = "minimal"


class WhyChooseUsMode(str, Enum):
    """Rendering mode for a why-choose-us section."""
    CIRCULAR = "circular"
    IMAGE = "image"
    GRID = "grid"


class PricingMode(str, Enum):
    """Presentation path for a pricing section."""
    TABLE = "table"
    TERMS = "terms"


# Section types that always occupy a page alone
EXCLUSIVE_SECTION_TYPES = frozenset({
    SectionType.COVER,
    SectionType.CONTACT,
    SectionType.WHY_CHOOSE_US,
})
