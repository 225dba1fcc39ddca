"""Proposal API Routes - defaults, analysis, preview and PDF export."""

import asyncio
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse, Response
from pydantic import BaseModel, Field, ValidationError

from proposal_studio import __version__
from proposal_studio.core.errors import ProposalValidationError
from proposal_studio.integrations.pdf import pdf_exporter
from proposal_studio.intelligence.crews.analysis import AnalysisCrew
from proposal_studio.models import AnalyzeRequest, Proposal, SectionType, parse_proposal
from proposal_studio.rendering.preview import build_preview_html, preview_instructions
from proposal_studio.services.proposal_editor import create_default_proposal, create_section

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["proposals"])


class DefaultSectionRequest(BaseModel):
    """Request for a new section with default content."""
    type: SectionType
    title: str = ""
    content: str = ""


class AnalyzeResponse(BaseModel):
    """Response for requirements analysis."""
    success: bool
    degraded: bool = False
    data: Dict[str, Any] = Field(default_factory=dict)


async def _read_body(request: Request) -> Dict[str, Any]:
    """Parse a JSON object body, unwrapping a nested ``body`` key."""
    try:
        data = await request.json()
    except ValueError as e:
        raise ProposalValidationError("Request body must be valid JSON") from e
    if not isinstance(data, dict):
        raise ProposalValidationError("Request body must be a JSON object")
    if "body" in data and isinstance(data["body"], dict):
        data = data["body"]
    return data


async def _read_proposal(request: Request) -> Proposal:
    """Accept ``{"proposal": {...}}`` or the bare proposal object."""
    data = await _read_body(request)
    return parse_proposal(data.get("proposal", data))


# ===========================================
# Health & Defaults
# ===========================================

@router.get("/health", summary="Health Check")
async def health_check() -> Dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": "proposal-studio", "version": __version__}


@router.get("/proposals/default", summary="Default Proposal")
async def default_proposal() -> Dict[str, Any]:
    """A fresh proposal with the default sections and theme."""
    return create_default_proposal().to_wire()


@router.post("/sections/default", summary="Default Section")
async def default_section(payload: DefaultSectionRequest) -> Dict[str, Any]:
    """A new section of the requested type with its default content."""
    return create_section(payload.type, payload.title, payload.content).to_wire()


# ===========================================
# Requirements Analysis
# ===========================================

@router.post("/analyze", response_model=AnalyzeResponse, summary="Analyze Requirements")
async def analyze_requirements(request: Request) -> AnalyzeResponse:
    """
    Extract proposal content from freeform requirements.

    Always answers with a content bundle; when the analyst is unavailable the
    bundle is a degraded fallback.
    """
    data = await _read_body(request)
    try:
        analyze_request = AnalyzeRequest.model_validate(data)
    except ValidationError as e:
        raise ProposalValidationError.from_pydantic(e) from e

    logger.info(f"Received analysis request ({len(analyze_request.text)} chars)")

    crew = AnalysisCrew()
    result = await crew.run_async(analyze_request.text, analyze_request.strategic_questions)

    return AnalyzeResponse(
        success=True,
        degraded=result.degraded,
        data=result.to_wire()
    )


# ===========================================
# Preview
# ===========================================

@router.post("/preview", response_class=HTMLResponse, summary="Preview Document")
async def preview(request: Request, scale: Optional[float] = None) -> HTMLResponse:
    """Scaled HTML preview built from the same pages as the export."""
    proposal = await _read_proposal(request)
    if scale is not None and scale <= 0:
        raise HTTPException(status_code=400, detail="scale must be positive")

    html = await asyncio.to_thread(build_preview_html, proposal, scale)
    return HTMLResponse(html)


@router.post("/preview/instructions", summary="Preview Instructions")
async def preview_instruction_stream(request: Request) -> Dict[str, Any]:
    """Drawing instructions per page for an interactive client."""
    proposal = await _read_proposal(request)
    return await asyncio.to_thread(preview_instructions, proposal)


# ===========================================
# PDF Export
# ===========================================

@router.post("/generate-pdf", summary="Generate PDF")
async def generate_pdf(request: Request) -> Response:
    """Export the proposal to an A4 PDF download."""
    proposal = await _read_proposal(request)
    logger.info(f"Received PDF request for '{proposal.title}' ({len(proposal.sections)} sections)")

    document = await pdf_exporter.export_async(proposal)

    return Response(
        content=document.content,
        media_type=document.content_type,
        headers={
            "Content-Disposition": f'attachment; filename="{document.filename}"'
        }
    )
