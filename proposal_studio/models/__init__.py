"""Models package - All Pydantic models organized by domain."""

from proposal_studio.models.enums import (
    SectionType,
    FontFamily,
    HeaderStyle,
    WhyChooseUsMode,
    PricingMode,
    EXCLUSIVE_SECTION_TYPES,
)
from proposal_studio.models.theme import DesignSettings
from proposal_studio.models.sections import (
    Section,
    SectionBase,
    CoverSection,
    TextSection,
    DeliverablesSection,
    TimelineSection,
    WhyChooseUsSection,
    PricingSection,
    TermsSection,
    NextStepsSection,
    ContactSection,
    TimelineItem,
    DeliverableItem,
    FeatureItem,
    StatItem,
    NextStepItem,
    TermItem,
    PricingTableRow,
    TableHeaders,
    DEFAULT_STAT_ITEMS,
    DEFAULT_PAYMENT_TERMS,
)
from proposal_studio.models.proposal import Proposal, parse_proposal
from proposal_studio.models.analysis import (
    AnalysisResult,
    AnalysisDeliverable,
    AnalysisTimelineEntry,
    AnalysisTerm,
    AnalysisPricingRow,
    AnalysisNextStep,
    StrategicQuestions,
    AnalyzeRequest,
)
from proposal_studio.models.export import ExportedDocument

__all__ = [
    # Enums
    "SectionType",
    "FontFamily",
    "HeaderStyle",
    "WhyChooseUsMode",
    "PricingMode",
    "EXCLUSIVE_SECTION_TYPES",
    # Theme
    "DesignSettings",
    # Sections
    "Section",
    "SectionBase",
    "CoverSection",
    "TextSection",
    "DeliverablesSection",
    "TimelineSection",
    "WhyChooseUsSection",
    "PricingSection",
    "TermsSection",
    "NextStepsSection",
    "ContactSection",
    "TimelineItem",
    "DeliverableItem",
    "FeatureItem",
    "StatItem",
    "NextStepItem",
    "TermItem",
    "PricingTableRow",
    "TableHeaders",
    "DEFAULT_STAT_ITEMS",
    "DEFAULT_PAYMENT_TERMS",
    # Proposal
    "Proposal",
    "parse_proposal",
    # Analysis
    "AnalysisResult",
    "AnalysisDeliverable",
    "AnalysisTimelineEntry",
    "AnalysisTerm",
    "AnalysisPricingRow",
    "AnalysisNextStep",
    "StrategicQuestions",
    "AnalyzeRequest",
    # Export
    "ExportedDocument",
]
