"""Deliverables layout - numbered phases with bulleted items."""

from proposal_studio.models import DeliverablesSection
from proposal_studio.rendering.canvas import Frame
from proposal_studio.rendering.layouts.common import LayoutContext, draw_bullet_list, draw_header
from proposal_studio.rendering.palette import WHITE

COMPACT_MAX_PHASES = 3
BADGE_RADIUS = 18
ITEM_INDENT = 52


def layout_deliverables(section: DeliverablesSection, frame: Frame, ctx: LayoutContext) -> None:
    """
    Phases in input order, each with a numbered badge and its items.

    Numbering is 1-based over the visible phases. The compact (half page)
    variant shows at most ``COMPACT_MAX_PHASES`` phases.
    """
    canvas = ctx.canvas
    palette = ctx.palette
    y = draw_header(ctx, frame, section.title)

    phases = section.deliverable_items
    if frame.compact:
        phases = phases[:COMPACT_MAX_PHASES]

    x = frame.inner_x
    for number, phase in enumerate(phases, start=1):
        canvas.circle(
            x + BADGE_RADIUS, y + BADGE_RADIUS, BADGE_RADIUS,
            fill=palette.primary,
            role="phase-badge",
        )
        canvas.text_centered(
            x + BADGE_RADIUS, y + BADGE_RADIUS, str(number), 14,
            font_weight=700,
            color=WHITE,
            role="phase-number",
        )
        canvas.text(
            x + ITEM_INDENT, y + BADGE_RADIUS + 17 * 0.35, phase.title, 17,
            font_weight=600,
            color=palette.heading,
            role="phase-title",
        )
        y = draw_bullet_list(
            ctx, x + ITEM_INDENT, y + 2 * BADGE_RADIUS + 12, phase.items,
            frame.inner_width - ITEM_INDENT,
            bullet_color=palette.primary,
            role="phase-item",
        )
        y += 12 if frame.compact else 24
