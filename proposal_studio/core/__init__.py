"""Core module - Configuration and error types."""

from proposal_studio.core.config import get_settings, Settings
from proposal_studio.core.errors import (
    ProposalStudioError,
    ProposalValidationError,
    RenderError,
    ExportError,
    ExportEngineUnavailable,
    ExportTimeout,
    ExportContentError,
    AnalysisError,
)

__all__ = [
    "get_settings",
    "Settings",
    "ProposalStudioError",
    "ProposalValidationError",
    "RenderError",
    "ExportError",
    "ExportEngineUnavailable",
    "ExportTimeout",
    "ExportContentError",
    "AnalysisError",
]
