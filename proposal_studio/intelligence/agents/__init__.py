"""Agent factories for CrewAI agents."""

from proposal_studio.intelligence.agents.requirements import RequirementsAnalystFactory

__all__ = [
    "RequirementsAnalystFactory",
]
