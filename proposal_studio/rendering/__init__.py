"""Rendering package - compositor, layouts, diagram and output adapters."""

from proposal_studio.rendering.compositor import compose, Page
from proposal_studio.rendering.diagram import Diagram, generate_diagram
from proposal_studio.rendering.instructions import (
    PAGE_WIDTH,
    PAGE_HEIGHT,
    RenderedPage,
)
from proposal_studio.rendering.palette import ContentPalette, content_palette, is_dark_background
from proposal_studio.rendering.renderer import render_page, render_proposal
from proposal_studio.rendering.svg import page_to_svg
from proposal_studio.rendering.preview import build_preview_html, preview_instructions

__all__ = [
    # Composition
    "compose",
    "Page",
    # Diagram
    "Diagram",
    "generate_diagram",
    # Instructions
    "PAGE_WIDTH",
    "PAGE_HEIGHT",
    "RenderedPage",
    # Palette
    "ContentPalette",
    "content_palette",
    "is_dark_background",
    # Rendering
    "render_page",
    "render_proposal",
    # Adapters
    "page_to_svg",
    "build_preview_html",
    "preview_instructions",
]
