"""
Layout renderer - turns composed pages into drawing instructions.

Both output adapters (preview and export) consume what this module returns,
so every section is positioned by exactly one layout routine.
"""

import logging
from typing import List, Optional

from proposal_studio.core.config import font_stack
from proposal_studio.core.errors import RenderError
from proposal_studio.models import DesignSettings, Proposal
from proposal_studio.rendering.canvas import Canvas, Frame
from proposal_studio.rendering.compositor import Page, compose
from proposal_studio.rendering.instructions import PAGE_HEIGHT, PAGE_WIDTH, RenderedPage
from proposal_studio.rendering.layouts import LayoutContext, get_layout
from proposal_studio.rendering.layouts.common import draw_page_background
from proposal_studio.rendering.palette import ContentPalette, content_palette, tint

logger = logging.getLogger(__name__)


def page_frames(page: Page) -> List[Frame]:
    """
    Frames for the sections of a page.

    A page with one section gives it the full sheet; two paired sections
    each get a compact half.
    """
    if len(page) <= 1:
        return [Frame(0, 0, PAGE_WIDTH, PAGE_HEIGHT)]
    half = PAGE_HEIGHT / 2
    return [
        Frame(0, 0, PAGE_WIDTH, half, compact=True),
        Frame(0, half, PAGE_WIDTH, half, compact=True),
    ]


def render_page(
    page: Page,
    theme: DesignSettings,
    client_name: str = "",
    index: int = 0,
    palette: Optional[ContentPalette] = None
) -> RenderedPage:
    """
    Render one composed page.

    Args:
        page: One or two sections from the compositor
        theme: Design settings for the whole proposal
        client_name: Shown on the cover
        index: Page position in the document
        palette: Precomputed content palette; derived from the theme if omitted

    Returns:
        RenderedPage with its instruction stream

    Raises:
        RenderError: If any section layout fails
    """
    palette = palette or content_palette(theme)
    canvas = Canvas(font_family=font_stack(theme.font_family))
    ctx = LayoutContext(canvas=canvas, theme=theme, palette=palette, client_name=client_name)
    frames = page_frames(page)

    # Exclusive sections paint their own full-page background
    if page and not page[0].is_exclusive:
        draw_page_background(ctx, Frame(0, 0, PAGE_WIDTH, PAGE_HEIGHT))

    for position, (section, frame) in enumerate(zip(page, frames)):
        layout = get_layout(section.section_type)
        try:
            with canvas.group(clip=frame.box(), role=f"section:{section.type}"):
                layout(section, frame, ctx)
        except RenderError:
            raise
        except Exception as e:
            logger.error(f"Layout failed for section {section.id} ({section.type}): {e}")
            raise RenderError(f"Failed to render section '{section.title or section.type}': {e}") from e

        if position == 0 and len(page) > 1:
            canvas.line(
                frame.inner_x, frame.bottom, frame.x + frame.width - frame.padding, frame.bottom,
                stroke=tint(palette.primary, "1a"),
                stroke_width=1,
                role="page-divider",
            )

    return RenderedPage(
        index=index,
        section_ids=[section.id for section in page],
        section_types=[section.type for section in page],
        instructions=canvas.instructions,
    )


def render_proposal(proposal: Proposal) -> List[RenderedPage]:
    """
    Compose and render every page of a proposal.

    The content palette (including the dark-background rule) is computed
    once and shared by all pages.
    """
    theme = proposal.design_settings
    palette = content_palette(theme)
    pages = compose(proposal.sections)

    rendered = [
        render_page(page, theme, proposal.client_name, index, palette)
        for index, page in enumerate(pages)
    ]
    logger.debug(f"Rendered {len(rendered)} page(s) for proposal {proposal.id}")
    return rendered
