"""Crew orchestrators for agent workflows."""

from proposal_studio.intelligence.crews.analysis import AnalysisCrew, parse_analysis_text

__all__ = [
    "AnalysisCrew",
    "parse_analysis_text",
]
