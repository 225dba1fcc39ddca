"""Project summary / approach layout."""

from proposal_studio.models import TextSection
from proposal_studio.rendering.canvas import Frame
from proposal_studio.rendering.layouts.common import LayoutContext, draw_header

BODY_SIZE = 13
BODY_LINE_HEIGHT = 24.7
BODY_WIDTH_RATIO = 0.95


def layout_text(section: TextSection, frame: Frame, ctx: LayoutContext) -> None:
    """Header over a preformatted, soft-wrapped body block."""
    top = draw_header(ctx, frame, section.title)
    ctx.canvas.paragraph(
        frame.inner_x, top, section.content, BODY_SIZE,
        frame.inner_width * BODY_WIDTH_RATIO,
        line_height=BODY_LINE_HEIGHT,
        preformatted=True,
        color=ctx.palette.body,
        role="body-text",
    )
