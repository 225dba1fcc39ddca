"""Layouts package - one layout routine per section type."""

from typing import Callable, Dict

from proposal_studio.models import SectionType
from proposal_studio.rendering.layouts.common import LayoutContext
from proposal_studio.rendering.layouts.contact import layout_contact
from proposal_studio.rendering.layouts.content import layout_text
from proposal_studio.rendering.layouts.cover import layout_cover
from proposal_studio.rendering.layouts.deliverables import layout_deliverables
from proposal_studio.rendering.layouts.next_steps import layout_next_steps
from proposal_studio.rendering.layouts.pricing import layout_pricing, layout_terms
from proposal_studio.rendering.layouts.timeline import layout_timeline
from proposal_studio.rendering.layouts.why_choose_us import layout_why_choose_us

LayoutFn = Callable[..., None]

# Section type -> layout routine
LAYOUTS: Dict[SectionType, LayoutFn] = {
    SectionType.COVER: layout_cover,
    SectionType.PROJECT_SUMMARY: layout_text,
    SectionType.APPROACH: layout_text,
    SectionType.DELIVERABLES: layout_deliverables,
    SectionType.TIMELINE: layout_timeline,
    SectionType.WHY_CHOOSE_US: layout_why_choose_us,
    SectionType.PRICING: layout_pricing,
    SectionType.TERMS: layout_terms,
    SectionType.NEXT_STEPS: layout_next_steps,
    SectionType.CONTACT: layout_contact,
}


def get_layout(section_type: SectionType) -> LayoutFn:
    """Get the layout routine for a section type."""
    return LAYOUTS[SectionType(section_type)]


__all__ = [
    "LAYOUTS",
    "LayoutContext",
    "get_layout",
]
