"""Preview adapter - scaled on-screen view of the rendered pages."""

import logging
from typing import Any, Dict, Optional

from jinja2 import Template

from proposal_studio.core.config import GOOGLE_FONTS_URL, get_settings
from proposal_studio.models import Proposal
from proposal_studio.rendering.instructions import PAGE_HEIGHT, PAGE_WIDTH
from proposal_studio.rendering.renderer import render_proposal
from proposal_studio.rendering.svg import page_to_svg

logger = logging.getLogger(__name__)

PREVIEW_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{{ title | e }} - Preview</title>
    <link rel="stylesheet" href="{{ fonts_url }}">
    <style>
        body { margin: 0; padding: 24px; background: #e4e4e7; }
        .preview { display: flex; flex-direction: column; align-items: center; gap: 24px; }
        .page {
            width: {{ page_width }}px;
            height: {{ page_height }}px;
            background: #ffffff;
            box-shadow: 0 4px 24px rgba(0, 0, 0, 0.15);
            overflow: hidden;
        }
        .page > svg { display: block; width: 100%; height: 100%; }
    </style>
</head>
<body>
    <div class="preview" data-scale="{{ scale }}">
    {% for page in pages %}
        <div class="page" data-page="{{ loop.index }}">{{ page }}</div>
    {% endfor %}
    </div>
</body>
</html>
"""


def build_preview_html(proposal: Proposal, scale: Optional[float] = None) -> str:
    """
    Build the live preview document.

    Pages are the exact SVG the export embeds, displayed at ``scale``.

    Args:
        proposal: Proposal to preview
        scale: Display scale; ``PREVIEW_SCALE`` when omitted

    Returns:
        HTML document
    """
    if scale is None:
        scale = get_settings().PREVIEW_SCALE
    if scale <= 0:
        raise ValueError("preview scale must be positive")

    pages = [page_to_svg(page) for page in render_proposal(proposal)]
    logger.debug(f"Preview built: {len(pages)} page(s) at scale {scale}")

    return Template(PREVIEW_TEMPLATE).render(
        title=proposal.title,
        fonts_url=GOOGLE_FONTS_URL,
        scale=scale,
        page_width=round(PAGE_WIDTH * scale, 2),
        page_height=round(PAGE_HEIGHT * scale, 2),
        pages=pages,
    )


def preview_instructions(proposal: Proposal) -> Dict[str, Any]:
    """
    JSON-ready instruction stream for an interactive client.

    Returns:
        ``{"pageWidth", "pageHeight", "pages": [...]}`` where each page carries
        its section ids/types and the nested instruction list
    """
    pages = render_proposal(proposal)
    return {
        "pageWidth": PAGE_WIDTH,
        "pageHeight": PAGE_HEIGHT,
        "pages": [
            {
                "index": page.index,
                "sectionIds": page.section_ids,
                "sectionTypes": page.section_types,
                "instructions": [
                    item.model_dump(mode="json", exclude_none=True)
                    for item in page.instructions
                ],
            }
            for page in pages
        ],
    }
