"""Section models - one variant per section type, discriminated on ``type``."""

from typing import Annotated, List, Literal, Optional, Union
from pydantic import Field, field_validator

from proposal_studio.models.base import CamelModel, new_id
from proposal_studio.models.enums import (
    EXCLUSIVE_SECTION_TYPES,
    PricingMode,
    SectionType,
    WhyChooseUsMode,
)


# ===========================================
# List Item Models
# ===========================================

class TimelineItem(CamelModel):
    """One entry on the timeline."""
    id: str = Field(default_factory=new_id)
    period: str = Field("", description="Time period label, e.g. 'Weeks 1-4'")
    title: str = ""
    description: str = ""
    items: List[str] = Field(default_factory=list, description="Optional sub-items")


class DeliverableItem(CamelModel):
    """A deliverables phase with its items."""
    id: str = Field(default_factory=new_id)
    title: str = ""
    items: List[str] = Field(default_factory=list)


class FeatureItem(CamelModel):
    """A numbered feature call-out in the why-choose-us grid."""
    id: str = Field(default_factory=new_id)
    number: str = ""
    title: str = ""
    description: str = ""


class StatItem(CamelModel):
    """A 'by the numbers' statistic."""
    value: str = ""
    label: str = ""


class NextStepItem(CamelModel):
    """An onboarding step."""
    id: str = Field(default_factory=new_id)
    step: str = ""
    description: str = ""


class TermItem(CamelModel):
    """A legacy pricing/terms entry with freeform content."""
    id: str = Field(default_factory=new_id)
    title: str = ""
    content: str = ""


class PricingTableRow(CamelModel):
    """A row of the pricing table."""
    id: str = Field(default_factory=new_id)
    service: str = ""
    description: str = ""
    investment: str = ""

    @property
    def is_total(self) -> bool:
        """Total rows are detected by 'total' anywhere in the service text."""
        return "total" in self.service.lower()


class TableHeaders(CamelModel):
    """Column captions of the pricing table."""
    service: str = "Service"
    description: str = "Description"
    investment: str = "Investment"


DEFAULT_PAYMENT_TERMS = "70% payment should be upfront and 30% on completion of project"

DEFAULT_STAT_ITEMS = (
    StatItem(value="500+", label="Projects Delivered"),
    StatItem(value="98%", label="Client Satisfaction"),
    StatItem(value="10+", label="Years Experience"),
    StatItem(value="24/7", label="Support"),
)


# ===========================================
# Section Variants
# ===========================================

class SectionBase(CamelModel):
    """Fields shared by every section variant."""
    id: str = Field(default_factory=new_id, description="Stable unique id within a proposal")
    title: str = Field("", description="Section heading")

    @field_validator("title", mode="before")
    @classmethod
    def none_to_empty(cls, value: Optional[str]) -> str:
        return value or ""

    @property
    def section_type(self) -> SectionType:
        return SectionType(self.type)

    @property
    def is_exclusive(self) -> bool:
        """Exclusive sections always occupy a page alone."""
        return self.section_type in EXCLUSIVE_SECTION_TYPES


class CoverSection(SectionBase):
    type: Literal["cover"] = "cover"
    subtitle: Optional[str] = None


class TextSection(SectionBase):
    """Project summary or approach - a header over a body text block."""
    type: Literal["project-summary", "approach"] = "project-summary"
    content: str = ""

    @field_validator("content", mode="before")
    @classmethod
    def content_none_to_empty(cls, value: Optional[str]) -> str:
        return value or ""


class DeliverablesSection(SectionBase):
    type: Literal["deliverables"] = "deliverables"
    deliverable_items: List[DeliverableItem] = Field(default_factory=list)


class TimelineSection(SectionBase):
    type: Literal["timeline"] = "timeline"
    timeline_items: List[TimelineItem] = Field(default_factory=list)


class WhyChooseUsSection(SectionBase):
    """Why-choose-us page: circular diagram, image, or feature grid."""
    type: Literal["why-choose-us"] = "why-choose-us"
    mode: Optional[WhyChooseUsMode] = Field(
        None,
        description="Explicit mode; derived from the data when absent"
    )
    use_circular_logo: bool = False
    company_name: str = ""
    center_text: str = "WHY CHOOSE"
    stat_items: Optional[List[StatItem]] = None
    image_url: Optional[str] = None
    feature_items: List[FeatureItem] = Field(default_factory=list)

    @field_validator("company_name", "center_text", mode="before")
    @classmethod
    def text_none_to_empty(cls, value: Optional[str]) -> str:
        return value or ""

    @property
    def resolved_mode(self) -> WhyChooseUsMode:
        """Explicit mode, else circular > image > grid by data presence."""
        if self.mode is not None:
            return self.mode
        if self.use_circular_logo:
            return WhyChooseUsMode.CIRCULAR
        if self.image_url:
            return WhyChooseUsMode.IMAGE
        return WhyChooseUsMode.GRID

    @property
    def effective_stat_items(self) -> List[StatItem]:
        """Supplied stats, or the default strip when none were given."""
        if self.stat_items:
            return list(self.stat_items)
        return [item.model_copy() for item in DEFAULT_STAT_ITEMS]


class PricingSection(SectionBase):
    """Pricing: a service table, or the legacy term list with a total."""
    type: Literal["pricing"] = "pricing"
    mode: Optional[PricingMode] = Field(
        None,
        description="Explicit path; derived from the data when absent"
    )
    pricing_table_rows: List[PricingTableRow] = Field(default_factory=list)
    table_headers: TableHeaders = Field(default_factory=TableHeaders)
    payment_terms: str = ""
    term_items: List[TermItem] = Field(default_factory=list)
    total_amount: Optional[str] = None

    @field_validator("payment_terms", mode="before")
    @classmethod
    def terms_none_to_empty(cls, value: Optional[str]) -> str:
        return value or ""

    @property
    def resolved_mode(self) -> PricingMode:
        """Explicit mode, else the table whenever it has rows."""
        if self.mode is not None:
            return self.mode
        return PricingMode.TABLE if self.pricing_table_rows else PricingMode.TERMS

    @property
    def effective_payment_terms(self) -> str:
        return self.payment_terms.strip() or DEFAULT_PAYMENT_TERMS


class TermsSection(SectionBase):
    """Standalone terms & conditions list."""
    type: Literal["terms"] = "terms"
    term_items: List[TermItem] = Field(default_factory=list)
    total_amount: Optional[str] = None


class NextStepsSection(SectionBase):
    type: Literal["next-steps"] = "next-steps"
    next_step_items: List[NextStepItem] = Field(default_factory=list)
    items: List[str] = Field(default_factory=list, description="What we need from the client")


class ContactSection(SectionBase):
    type: Literal["contact"] = "contact"
    contact_name: str = ""
    contact_title: str = ""
    contact_phone: str = ""
    contact_email: str = ""
    closing_message: str = ""

    @field_validator(
        "contact_name", "contact_title", "contact_phone",
        "contact_email", "closing_message",
        mode="before"
    )
    @classmethod
    def contact_none_to_empty(cls, value: Optional[str]) -> str:
        return value or ""


Section = Annotated[
    Union[
        CoverSection,
        TextSection,
        DeliverablesSection,
        TimelineSection,
        WhyChooseUsSection,
        PricingSection,
        TermsSection,
        NextStepsSection,
        ContactSection,
    ],
    Field(discriminator="type"),
]
