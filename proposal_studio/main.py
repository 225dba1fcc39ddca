"""
Proposal Studio - FastAPI Application Entry Point.

Proposal document builder:
- Typed sections and theme settings
- Optional content extraction with a CrewAI analyst
- Shared layout engine for the live preview and the A4 PDF export

Run with:
    uvicorn proposal_studio.main:app --reload --port 8000
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from proposal_studio import __version__
from proposal_studio.core.config import get_settings
from proposal_studio.core.errors import (
    ExportContentError,
    ExportEngineUnavailable,
    ExportError,
    ExportTimeout,
    ProposalStudioError,
    ProposalValidationError,
    RenderError,
)
from proposal_studio.api.routes import router as proposal_router


# ===========================================
# Logging Configuration
# ===========================================

def setup_logging():
    """Configure application logging."""
    settings = get_settings()

    # Create formatter
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)
    root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("weasyprint").setLevel(logging.WARNING)
    logging.getLogger("fontTools").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("crewai").setLevel(logging.WARNING)

    return logging.getLogger(__name__)


logger = setup_logging()


# ===========================================
# Application Lifespan
# ===========================================

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    logger.info("=" * 50)
    logger.info("Proposal Studio Starting Up")
    logger.info("=" * 50)
    logger.info(f"Environment: {'Development' if settings.DEBUG else 'Production'}")
    logger.info(f"Export timeout: {settings.EXPORT_TIMEOUT_SECONDS}s")
    logger.info(f"Export concurrency: {settings.EXPORT_MAX_CONCURRENCY}")

    if not settings.OPENAI_API_KEY:
        logger.warning("OpenAI API key not configured - analysis will use the fallback!")

    logger.info("Startup complete - ready to build proposals")

    yield

    # Shutdown
    logger.info("Proposal Studio shutting down...")


# ===========================================
# Error Handlers
# ===========================================

# Most specific first
ERROR_STATUS = (
    (ProposalValidationError, 422),
    (ExportEngineUnavailable, 503),
    (ExportTimeout, 504),
    (ExportContentError, 500),
    (RenderError, 500),
    (ExportError, 500),
)


def status_for(exc: ProposalStudioError) -> int:
    """HTTP status code for a domain error."""
    for error_type, status_code in ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return 500


async def proposal_error_handler(request: Request, exc: ProposalStudioError) -> JSONResponse:
    """Map domain errors to JSON error bodies."""
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(f"{exc.kind} on {request.url.path}: {exc.message}")
    else:
        logger.info(f"{exc.kind} on {request.url.path}: {exc.message}")

    content = {"error": exc.kind, "message": exc.message}
    if isinstance(exc, ProposalValidationError) and exc.details:
        content["details"] = exc.details
    return JSONResponse(status_code=status_code, content=content)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler for unhandled errors."""
    logger.error(f"Unhandled error: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_error",
            "message": str(exc) if get_settings().DEBUG else "An error occurred"
        }
    )


# ===========================================
# FastAPI Application
# ===========================================

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Proposal Studio",
        description="""
        Proposal document builder with a shared layout engine.

        ## Endpoints

        - `GET /api/proposals/default` - Default proposal
        - `POST /api/sections/default` - Default section of a type
        - `POST /api/analyze` - Extract content from requirements text
        - `POST /api/preview` - Scaled HTML preview
        - `POST /api/preview/instructions` - Drawing instructions per page
        - `POST /api/generate-pdf` - A4 PDF download
        - `GET /api/health` - Health check
        """,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ProposalStudioError, proposal_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    # Include routers
    app.include_router(proposal_router)

    @app.get("/", tags=["root"])
    async def root():
        """Root endpoint with API information."""
        return JSONResponse({
            "service": "Proposal Studio",
            "version": __version__,
            "status": "running",
            "endpoints": {
                "proposals": {
                    "default": "GET /api/proposals/default",
                    "default_section": "POST /api/sections/default",
                    "analyze": "POST /api/analyze",
                },
                "rendering": {
                    "preview": "POST /api/preview",
                    "instructions": "POST /api/preview/instructions",
                    "pdf": "POST /api/generate-pdf",
                },
                "health": "GET /api/health",
                "docs": "GET /docs"
            }
        })

    return app


# Create app instance
app = create_app()


# ===========================================
# Main Entry Point
# ===========================================

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "proposal_studio.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info"
    )
