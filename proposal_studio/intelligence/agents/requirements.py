"""Requirements Analyst agent - turns freeform project notes into proposal content."""

import logging
from typing import Optional
from crewai import Agent, Task

from proposal_studio.core.config import get_settings
from proposal_studio.models import AnalysisResult, StrategicQuestions

logger = logging.getLogger(__name__)

# Labels for the optional strategic hints, in prompt order
QUESTION_LABELS = {
    "project_goal": "Project Goal",
    "key_deliverables": "Key Deliverables",
    "budget": "Budget",
    "timeline": "Timeline",
    "target_audience": "Target Audience",
    "success_criteria": "Success Criteria",
    "constraints": "Constraints",
}


class RequirementsAnalystFactory:
    """Factory for creating the Requirements Analyst agent."""

    @staticmethod
    def create() -> Agent:
        """Create a Requirements Analyst agent."""
        settings = get_settings()
        return Agent(
            role="Proposal Writer & Business Analyst",
            goal="""Analyze project requirements and extract the key information
            needed to produce a professional, high-end agency proposal.""",
            backstory="""You are an expert proposal writer who has scoped hundreds
            of agency projects. From messy notes, call transcripts and briefs you
            reliably pull out:
            - The project's name, client and objectives
            - Deliverables grouped into phases
            - A realistic timeline
            - A sound delivery approach
            - Pricing lines and commercial terms when they are mentioned

            Your writing is clear, confident and client-ready.""",
            llm=settings.OPENAI_MODEL,
            verbose=settings.DEBUG,
            allow_delegation=False,
            memory=True
        )

    @staticmethod
    def create_analysis_task(
        agent: Agent,
        text: str,
        questions: Optional[StrategicQuestions] = None
    ) -> Task:
        """Create the requirements analysis task."""
        hints = ""
        if questions:
            answered = [
                f"        - {label}: {getattr(questions, field)}"
                for field, label in QUESTION_LABELS.items()
                if getattr(questions, field)
            ]
            if answered:
                hints = "\n        **Strategic Context:**\n" + "\n".join(answered) + "\n"

        description = f"""
        Analyze the following project requirements and generate proposal content.
        {hints}
        **REQUIREMENTS:**
        ---
        {text}
        ---

        **Extract the Following:**

        1. **projectName** - Name of the project
        2. **clientName** - Client name if mentioned, or "Client"
        3. **summary** - A professional 2-3 paragraph summary of the project
           scope, objectives and expected outcomes
        4. **deliverables** - Phases, each with a title and a list of items
        5. **timeline** - Entries with period (e.g. "Week 1-2"), title and description
        6. **suggestedApproach** - A paragraph on the recommended approach and methodology
        7. **keyRequirements** - List of the key requirements
        8. **pricingTableRows** - Service / description / investment rows when pricing
           is discussed; the last row is the total, e.g. "Total Investment"
        9. **suggestedTerms** - Commercial terms (title and content) if any
        10. **totalAmount** - Overall investment if stated
        11. **nextStepItems** - Onboarding steps, each with step and description

        Leave anything not supported by the requirements empty rather than inventing it.
        """

        return Task(
            description=description,
            expected_output="Structured JSON matching AnalysisResult schema",
            agent=agent,
            output_pydantic=AnalysisResult
        )
