"""
Proposal editor - editing-session operations on the in-memory proposal.

Every operation returns a new Proposal; the input value is never mutated.
"""

import logging
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import TypeAdapter, ValidationError

from proposal_studio.core.errors import ProposalValidationError
from proposal_studio.models import (
    DEFAULT_PAYMENT_TERMS,
    AnalysisResult,
    ContactSection,
    CoverSection,
    DeliverableItem,
    DeliverablesSection,
    DesignSettings,
    FeatureItem,
    NextStepItem,
    NextStepsSection,
    PricingSection,
    PricingTableRow,
    Proposal,
    Section,
    SectionType,
    TermItem,
    TermsSection,
    TextSection,
    TimelineItem,
    TimelineSection,
    WhyChooseUsSection,
)
from proposal_studio.models.proposal import utc_now

logger = logging.getLogger(__name__)

SECTION_ADAPTER = TypeAdapter(Section)

SECTION_DISPLAY_NAMES: Dict[SectionType, str] = {
    SectionType.COVER: "Cover Page",
    SectionType.PROJECT_SUMMARY: "Project Summary",
    SectionType.DELIVERABLES: "Deliverables",
    SectionType.APPROACH: "Approach",
    SectionType.TIMELINE: "Timeline",
    SectionType.WHY_CHOOSE_US: "Why Choose Us",
    SectionType.PRICING: "Pricing & Terms",
    SectionType.NEXT_STEPS: "Next Steps",
    SectionType.TERMS: "Terms & Conditions",
    SectionType.CONTACT: "Contact",
}


# ===========================================
# Default Content
# ===========================================

def _default_deliverables() -> List[DeliverableItem]:
    return [
        DeliverableItem(
            title="Phase 1: Foundation",
            items=[
                "Market research and competitor analysis",
                "Brand positioning document",
                "Complete brand kit (logo, colors, typography)",
                "Brand voice and messaging framework",
            ],
        ),
        DeliverableItem(
            title="Phase 2: Content Creation",
            items=[
                "12 Instagram posts introducing your brand",
                "4 professionally edited Reels",
                "4 Instagram Stories",
                "Content calendar and hashtag strategy",
            ],
        ),
    ]


def _default_timeline() -> List[TimelineItem]:
    return [
        TimelineItem(
            period="Days 1-10",
            title="Foundation Phase",
            description="Initial consultation, brand positioning, and photography",
            items=["Client onboarding", "Brand positioning document", "Product photography"],
        ),
        TimelineItem(
            period="Weeks 1-4",
            title="Content Phase",
            description="Script development, content creation, and publishing",
            items=["Weekly content publishing", "Engagement optimization"],
        ),
    ]


def _default_features() -> List[FeatureItem]:
    return [
        FeatureItem(
            number="01",
            title="PROVEN ROI ACCELERATION",
            description="We make brands impossible to ignore. Your growth becomes our legacy.",
        ),
        FeatureItem(
            number="02",
            title="FULL-SPECTRUM CREATIVE POWERHOUSE",
            description="We don't make ads, we craft experiences. From CGI magic to viral content that converts.",
        ),
        FeatureItem(
            number="03",
            title="STRATEGIC PARTNERSHIP APPROACH",
            description="We succeed when you dominate. Your competitors become our case studies.",
        ),
        FeatureItem(
            number="04",
            title="CUTTING-EDGE TECHNOLOGY & INSIGHTS",
            description="While others catch up, we stay ahead. Next-gen strategies for tomorrow's market.",
        ),
    ]


def _default_terms() -> List[TermItem]:
    return [
        TermItem(
            title="Investment & Payment",
            content=(
                "Total Month 1: Rs. 115,000\n"
                "• Rs. 72,500 due upon contract signing\n"
                "• Rs. 42,500 due December 20th, 2025"
            ),
        ),
        TermItem(
            title="Scope & Timeline",
            content=(
                "This agreement covers all deliverables outlined. The timeline depends "
                "on client approvals within 24 hours at each stage."
            ),
        ),
        TermItem(
            title="Revisions",
            content=(
                "• Brand identity: 2 rounds of revisions\n"
                "• Content pieces: 2 rounds per piece\n"
                "• Additional revisions at hourly rate"
            ),
        ),
    ]


def _default_next_steps() -> List[NextStepItem]:
    return [
        NextStepItem(step="Step 1", description="Sign agreement and process the initial payment"),
        NextStepItem(step="Step 2", description="Complete onboarding form within 24 hours"),
        NextStepItem(step="Step 3", description="Brand positioning review (Days 3-4)"),
        NextStepItem(step="Step 4", description="Product photography coordination (Days 5-7)"),
        NextStepItem(step="Step 5", description="Brand identity approval meeting (Days 8-10)"),
    ]


DEFAULT_CLIENT_REQUIREMENTS = [
    "Timely approvals within 24 hours to maintain timeline",
    "Product samples for photography",
    "Account credentials or collaboration to create account",
    "Prompt responses during research phase",
]


def create_section(
    section_type: Union[SectionType, str],
    title: str = "",
    content: str = ""
) -> Section:
    """
    Create a section with variant-specific default content.

    Args:
        section_type: Section type
        title: Heading; the type's display name when empty
        content: Body text for summary/approach sections, subtitle for the cover

    Returns:
        New section with a fresh id
    """
    section_type = SectionType(section_type)
    title = title or SECTION_DISPLAY_NAMES[section_type]

    if section_type == SectionType.COVER:
        return CoverSection(title=title, subtitle=content or None)
    if section_type in (SectionType.PROJECT_SUMMARY, SectionType.APPROACH):
        return TextSection(type=section_type.value, title=title, content=content)
    if section_type == SectionType.DELIVERABLES:
        return DeliverablesSection(title=title, deliverable_items=_default_deliverables())
    if section_type == SectionType.TIMELINE:
        return TimelineSection(title=title, timeline_items=_default_timeline())
    if section_type == SectionType.WHY_CHOOSE_US:
        return WhyChooseUsSection(title=title, feature_items=_default_features())
    if section_type == SectionType.PRICING:
        return PricingSection(
            title=title,
            term_items=_default_terms(),
            total_amount="Rs. 115,000",
        )
    if section_type == SectionType.TERMS:
        return TermsSection(title=title, term_items=_default_terms())
    if section_type == SectionType.NEXT_STEPS:
        return NextStepsSection(
            title=title,
            next_step_items=_default_next_steps(),
            items=list(DEFAULT_CLIENT_REQUIREMENTS),
        )
    return ContactSection(
        title=title,
        contact_name="Your Name",
        contact_title="Business Development Executive",
        contact_phone="+1 234 567 8900",
        contact_email="hello@yourcompany.com",
        closing_message="LOOKING FORWARD TO WORKING TOGETHER",
    )


def create_default_proposal() -> Proposal:
    """Starting document for a new editing session."""
    return Proposal(
        title="Project Proposal",
        client_name="Client Name",
        sections=[
            create_section(SectionType.COVER, "LET'S GROW TOGETHER."),
            create_section(
                SectionType.PROJECT_SUMMARY,
                "Project Summary",
                "Enter your project summary here. Describe the scope, objectives, "
                "and key outcomes of the project.",
            ),
            create_section(SectionType.DELIVERABLES, "Project Deliverables"),
            create_section(
                SectionType.APPROACH,
                "Creative Concept & Approach",
                "Our research-driven approach ensures your content resonates with "
                "target audiences and stands out in the market.",
            ),
            create_section(SectionType.TIMELINE, "Implementation Timeline"),
            create_section(SectionType.WHY_CHOOSE_US, "Why Choose Us?"),
            create_section(SectionType.PRICING, "Terms & Conditions"),
            create_section(SectionType.NEXT_STEPS, "Next Steps & Project Onboarding"),
            create_section(SectionType.CONTACT, "Contact"),
        ],
        design_settings=DesignSettings(),
    )


# ===========================================
# Editing Operations
# ===========================================

def _as_section(section: Union[Section, Dict[str, Any]]) -> Section:
    if isinstance(section, dict):
        try:
            return SECTION_ADAPTER.validate_python(section)
        except ValidationError as e:
            raise ProposalValidationError.from_pydantic(e) from e
    return section


def _check_index(proposal: Proposal, index: int) -> None:
    if not 0 <= index < len(proposal.sections):
        raise IndexError(f"section index {index} out of range")


def _with_sections(proposal: Proposal, sections: List[Section]) -> Proposal:
    seen = set()
    for section in sections:
        if section.id in seen:
            raise ProposalValidationError(f"Duplicate section id '{section.id}'")
        seen.add(section.id)
    return proposal.model_copy(update={"sections": sections, "updated_at": utc_now()})


def add_section(
    proposal: Proposal,
    section: Union[Section, Dict[str, Any]],
    index: Optional[int] = None
) -> Proposal:
    """Insert a section at ``index`` (append when omitted)."""
    sections = list(proposal.sections)
    if index is None:
        sections.append(_as_section(section))
    else:
        if not 0 <= index <= len(sections):
            raise IndexError(f"section index {index} out of range")
        sections.insert(index, _as_section(section))
    return _with_sections(proposal, sections)


def update_section(
    proposal: Proposal,
    index: int,
    section: Union[Section, Dict[str, Any]]
) -> Proposal:
    """Replace the section at ``index`` wholesale."""
    _check_index(proposal, index)
    sections = list(proposal.sections)
    sections[index] = _as_section(section)
    return _with_sections(proposal, sections)


def delete_section(proposal: Proposal, index: int) -> Proposal:
    _check_index(proposal, index)
    sections = list(proposal.sections)
    del sections[index]
    return _with_sections(proposal, sections)


def move_section(proposal: Proposal, index: int, direction: Literal["up", "down"]) -> Proposal:
    """
    Swap a section with its neighbour.

    Moving the first section up or the last one down changes nothing.
    """
    _check_index(proposal, index)
    if direction not in ("up", "down"):
        raise ValueError(f"direction must be 'up' or 'down', got '{direction}'")

    target = index - 1 if direction == "up" else index + 1
    if not 0 <= target < len(proposal.sections):
        return proposal

    sections = list(proposal.sections)
    sections[index], sections[target] = sections[target], sections[index]
    return _with_sections(proposal, sections)


def update_theme(proposal: Proposal, theme: Union[DesignSettings, Dict[str, Any]]) -> Proposal:
    """Replace the design settings wholesale."""
    if isinstance(theme, dict):
        try:
            theme = DesignSettings.model_validate(theme)
        except ValidationError as e:
            raise ProposalValidationError.from_pydantic(e) from e
    return proposal.model_copy(update={"design_settings": theme, "updated_at": utc_now()})


# ===========================================
# Analysis Merge
# ===========================================

def _merge_section(section: Section, analysis: AnalysisResult) -> Section:
    """Copy the analysis fields that target this section type, if any."""
    section_type = section.section_type

    if section_type == SectionType.PROJECT_SUMMARY and analysis.summary:
        return section.model_copy(update={"content": analysis.summary})
    if section_type == SectionType.APPROACH and analysis.suggested_approach:
        return section.model_copy(update={"content": analysis.suggested_approach})
    if section_type == SectionType.DELIVERABLES and analysis.deliverables:
        return section.model_copy(update={"deliverable_items": [
            DeliverableItem(title=item.title, items=list(item.items))
            for item in analysis.deliverables
        ]})
    if section_type == SectionType.TIMELINE and analysis.timeline:
        return section.model_copy(update={"timeline_items": [
            TimelineItem(period=entry.period, title=entry.title, description=entry.description)
            for entry in analysis.timeline
        ]})
    if section_type == SectionType.PRICING:
        update: Dict[str, Any] = {}
        if analysis.suggested_terms:
            update["term_items"] = [
                TermItem(title=term.title, content=term.content)
                for term in analysis.suggested_terms
            ]
        if analysis.pricing_table_rows:
            update["pricing_table_rows"] = [
                PricingTableRow(service=row.service, description=row.description, investment=row.investment)
                for row in analysis.pricing_table_rows
            ]
            update["payment_terms"] = DEFAULT_PAYMENT_TERMS
        if analysis.total_amount:
            update["total_amount"] = analysis.total_amount
        return section.model_copy(update=update) if update else section
    if section_type == SectionType.NEXT_STEPS and analysis.next_step_items:
        return section.model_copy(update={"next_step_items": [
            NextStepItem(step=item.step, description=item.description)
            for item in analysis.next_step_items
        ]})
    return section


def apply_analysis(proposal: Proposal, analysis: AnalysisResult) -> Proposal:
    """
    Merge an analysis bundle into the matching sections.

    Sections whose bundle fields are empty are left untouched; the title and
    client name are replaced only when the bundle provides them.
    """
    update: Dict[str, Any] = {
        "sections": [_merge_section(section, analysis) for section in proposal.sections],
        "updated_at": utc_now(),
    }
    if analysis.project_name:
        update["title"] = analysis.project_name
    if analysis.client_name:
        update["client_name"] = analysis.client_name

    logger.info(f"Applied analysis to proposal {proposal.id} (degraded={analysis.degraded})")
    return proposal.model_copy(update=update)
