"""Error types shared by the renderer, export pipeline and API."""

from typing import List, Optional


class ProposalStudioError(Exception):
    """Base exception for Proposal Studio operations."""

    kind = "proposal_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ProposalValidationError(ProposalStudioError):
    """Proposal input is malformed or missing required fields."""

    kind = "validation_error"

    def __init__(self, message: str, details: Optional[List[str]] = None):
        self.details = details or []
        super().__init__(message)

    @classmethod
    def from_pydantic(cls, exc) -> "ProposalValidationError":
        """Build from a pydantic ValidationError."""
        details = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error.get("loc", ()))
            details.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
        return cls("Invalid proposal data", details)


class RenderError(ProposalStudioError):
    """A section layout failed; the whole render fails with it."""

    kind = "render_error"


class ExportError(ProposalStudioError):
    """Base exception for export failures."""

    kind = "export_error"


class ExportEngineUnavailable(ExportError):
    """The raster engine could not be loaded or started."""

    kind = "engine_unavailable"


class ExportTimeout(ExportError):
    """The document did not settle within the export timeout."""

    kind = "export_timeout"


class ExportContentError(ExportError):
    """The engine rejected the content or produced an invalid document."""

    kind = "content_error"


class AnalysisError(ProposalStudioError):
    """Text analysis failed; handled inside the analysis crew."""

    kind = "analysis_error"

    def __init__(self, message: str, raw_output: Optional[str] = None):
        self.raw_output = raw_output
        super().__init__(message)
