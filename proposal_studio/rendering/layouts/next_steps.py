"""Next steps layout - five-column step cards and the client checklist."""

from proposal_studio.models import NextStepsSection
from proposal_studio.rendering.canvas import Frame
from proposal_studio.rendering.layouts.common import (
    LayoutContext,
    draw_bullet_list,
    draw_header,
    draw_subheading,
)
from proposal_studio.rendering.metrics import wrap_text
from proposal_studio.rendering.palette import WHITE

MAX_VISIBLE_STEPS = 5
CARD_GAP = 24
CARD_HEIGHT = 170
BADGE_RADIUS = 16


def layout_next_steps(section: NextStepsSection, frame: Frame, ctx: LayoutContext) -> None:
    """
    Steps beyond the fifth are not shown. The last visible card is always
    filled with the primary color, whatever the number of steps.
    """
    canvas = ctx.canvas
    palette = ctx.palette
    y = draw_header(ctx, frame, section.title)

    visible = section.next_step_items[:MAX_VISIBLE_STEPS]
    if visible:
        y = draw_subheading(ctx, frame.inner_x, y, "Getting Started")
        card_width = (frame.inner_width - CARD_GAP * (MAX_VISIBLE_STEPS - 1)) / MAX_VISIBLE_STEPS

        for index, step in enumerate(visible):
            emphasis = index == len(visible) - 1
            x = frame.inner_x + index * (card_width + CARD_GAP)
            center_x = x + card_width / 2

            canvas.rect(
                x, y, card_width, CARD_HEIGHT,
                fill=palette.primary if emphasis else palette.card_background,
                stroke=None if emphasis else palette.card_border,
                stroke_width=0 if emphasis else 1,
                rx=10,
                role="step-card-emphasis" if emphasis else "step-card",
            )
            canvas.circle(
                center_x, y + 30, BADGE_RADIUS,
                fill=WHITE if emphasis else palette.primary,
                role="step-badge",
            )
            canvas.text_centered(
                center_x, y + 30, str(index + 1), 14,
                font_weight=700,
                color=palette.primary if emphasis else WHITE,
                role="step-number",
            )
            text_width = card_width - 16
            name_bottom = canvas.text_lines(
                center_x, y + 58, wrap_text(step.step, 12, text_width, 600), 12, 16,
                font_weight=600,
                color=WHITE if emphasis else palette.heading,
                anchor="middle",
                role="step-name",
            )
            canvas.text_lines(
                center_x, name_bottom + 6, wrap_text(step.description, 10, text_width), 10, 14,
                color=WHITE if emphasis else palette.body,
                opacity=0.85 if emphasis else 1.0,
                anchor="middle",
                role="step-description",
            )
            if index < len(visible) - 1:
                canvas.text_centered(
                    x + card_width + CARD_GAP / 2, y + CARD_HEIGHT / 2, "→", 16,
                    font_weight=700,
                    color=palette.primary,
                    role="step-arrow",
                )
        y += CARD_HEIGHT + (24 if frame.compact else 40)

    if section.items:
        y = draw_subheading(ctx, frame.inner_x, y, "What We Need From You")
        draw_bullet_list(
            ctx, frame.inner_x, y, section.items, frame.inner_width,
            bullet_color=palette.accent,
            role="client-item",
        )
