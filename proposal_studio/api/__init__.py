"""API module - HTTP routes."""

from proposal_studio.api.routes import router

__all__ = [
    "router",
]
