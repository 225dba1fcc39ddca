"""Text-analysis models - the structured content bundle and its request."""

from typing import List, Optional
from pydantic import Field

from proposal_studio.models.base import CamelModel


class AnalysisDeliverable(CamelModel):
    title: str = ""
    items: List[str] = Field(default_factory=list)


class AnalysisTimelineEntry(CamelModel):
    period: str = ""
    title: str = ""
    description: str = ""


class AnalysisTerm(CamelModel):
    title: str = ""
    content: str = ""


class AnalysisPricingRow(CamelModel):
    service: str = ""
    description: str = ""
    investment: str = ""


class AnalysisNextStep(CamelModel):
    step: str = ""
    description: str = ""


class AnalysisResult(CamelModel):
    """Structured content extracted from freeform requirements text."""
    project_name: str = Field("Project Proposal", description="Name of the project")
    client_name: str = Field("Client", description="Client name if mentioned")
    summary: str = Field("", description="2-3 paragraph project summary")
    deliverables: List[AnalysisDeliverable] = Field(default_factory=list)
    timeline: List[AnalysisTimelineEntry] = Field(default_factory=list)
    suggested_approach: str = Field("", description="Recommended approach paragraph")
    key_requirements: List[str] = Field(default_factory=list)
    suggested_terms: List[AnalysisTerm] = Field(default_factory=list)
    total_amount: Optional[str] = None
    pricing_table_rows: List[AnalysisPricingRow] = Field(default_factory=list)
    next_step_items: List[AnalysisNextStep] = Field(default_factory=list)
    degraded: bool = Field(
        False,
        description="True when this bundle is a fallback rather than agent output"
    )


class StrategicQuestions(CamelModel):
    """Optional structured hints that sharpen the analysis."""
    project_goal: Optional[str] = None
    key_deliverables: Optional[str] = None
    budget: Optional[str] = None
    timeline: Optional[str] = None
    target_audience: Optional[str] = None
    success_criteria: Optional[str] = None
    constraints: Optional[str] = None


class AnalyzeRequest(CamelModel):
    """Request body for requirements analysis."""
    text: str = Field(..., min_length=1)
    strategic_questions: Optional[StrategicQuestions] = None
