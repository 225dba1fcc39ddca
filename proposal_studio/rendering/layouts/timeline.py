"""Timeline layout - period badges on a vertical connector."""

from proposal_studio.models import TimelineSection
from proposal_studio.rendering.canvas import Frame
from proposal_studio.rendering.instructions import Line
from proposal_studio.rendering.layouts.common import LayoutContext, draw_header
from proposal_studio.rendering.metrics import text_width
from proposal_studio.rendering.palette import WHITE, tint

DOT_RADIUS = 11
DOT_OFFSET = 20
CONTENT_OFFSET = 56
BADGE_HEIGHT = 22
BADGE_FONT = 11


def layout_timeline(section: TimelineSection, frame: Frame, ctx: LayoutContext) -> None:
    """
    Items in input order, each with a dot, period badge and content block.

    Connector segments join consecutive dots only, drawn beneath them.
    """
    canvas = ctx.canvas
    palette = ctx.palette
    y = draw_header(ctx, frame, section.title)

    dot_x = frame.inner_x + DOT_OFFSET
    content_x = frame.inner_x + CONTENT_OFFSET
    content_width = frame.inner_width - CONTENT_OFFSET
    connectors_at = canvas.mark()
    dot_centers = []

    for item in section.timeline_items:
        dot_y = y + BADGE_HEIGHT / 2 + 3
        dot_centers.append(dot_y)
        canvas.circle(
            dot_x, dot_y, DOT_RADIUS,
            fill=palette.card_background,
            stroke=palette.primary,
            stroke_width=4,
            role="timeline-dot",
        )

        badge_width = text_width(item.period, BADGE_FONT, 700) + 28
        canvas.rect(
            content_x, y + 3, badge_width, BADGE_HEIGHT,
            fill=palette.primary,
            rx=BADGE_HEIGHT / 2,
            role="period-badge",
        )
        canvas.text_centered(
            content_x + badge_width / 2, dot_y, item.period, BADGE_FONT,
            font_weight=700,
            color=WHITE,
            role="period-text",
        )
        canvas.text(
            content_x + badge_width + 14, dot_y + 16 * 0.35, item.title, 16,
            font_weight=600,
            color=palette.heading,
            role="timeline-title",
        )

        y = canvas.paragraph(
            content_x, y + BADGE_HEIGHT + 12, item.description, 13, content_width,
            line_height=22,
            color=palette.body,
            role="timeline-description",
        )
        if item.items:
            y += 6
            for sub_item in item.items:
                canvas.circle(content_x + 2.5, y + 9.5, 2.5, fill=palette.accent, role="mini-bullet")
                y = canvas.paragraph(
                    content_x + 12, y, sub_item, 12, content_width - 12,
                    line_height=19,
                    color=palette.body,
                    role="timeline-subitem",
                )
        y += 14 if frame.compact else 28

    # Inserted in reverse so the segments keep their order under the dots
    segments = list(zip(dot_centers, dot_centers[1:]))
    for start_y, end_y in reversed(segments):
        canvas.insert(connectors_at, Line(
            x1=dot_x, y1=start_y, x2=dot_x, y2=end_y,
            stroke=tint(palette.primary, "40"),
            stroke_width=3,
            role="timeline-connector",
        ))
