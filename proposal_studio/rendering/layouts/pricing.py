"""Pricing layouts - service table, legacy term list, and the terms section."""

from typing import List, Optional

from proposal_studio.models import PricingMode, PricingSection, TermItem, TermsSection
from proposal_studio.rendering.canvas import Frame
from proposal_studio.rendering.layouts.common import LayoutContext, draw_header
from proposal_studio.rendering.metrics import wrap_text
from proposal_studio.rendering.palette import WHITE, tint

COLUMN_FRACTIONS = (0.3, 0.45, 0.25)
CELL_PADDING_X = 14
CELL_PADDING_Y = 12
CELL_FONT = 12
CELL_LINE_HEIGHT = 18
HEADER_HEIGHT = 40


def layout_pricing(section: PricingSection, frame: Frame, ctx: LayoutContext) -> None:
    """The table path wins whenever the resolved mode is the table."""
    top = draw_header(ctx, frame, section.title)
    if section.resolved_mode == PricingMode.TABLE:
        _draw_table(section, frame, ctx, top)
    else:
        _draw_terms(section.term_items, section.total_amount, frame, ctx, top)


def layout_terms(section: TermsSection, frame: Frame, ctx: LayoutContext) -> None:
    top = draw_header(ctx, frame, section.title)
    _draw_terms(section.term_items, section.total_amount, frame, ctx, top)


def _draw_table(section: PricingSection, frame: Frame, ctx: LayoutContext, top: float) -> None:
    """
    Three-column table with an emphasised total row, then the payment terms.

    Row heights grow with the tallest wrapped cell.
    """
    canvas = ctx.canvas
    palette = ctx.palette
    x = frame.inner_x
    width = frame.inner_width
    widths = [width * fraction for fraction in COLUMN_FRACTIONS]
    lefts = [x, x + widths[0], x + widths[0] + widths[1]]

    headers = section.table_headers
    canvas.rect(x, top, width, HEADER_HEIGHT, fill=palette.primary, role="pricing-header")
    for left, caption in zip(lefts, (headers.service, headers.description, headers.investment)):
        canvas.text(
            left + CELL_PADDING_X, top + HEADER_HEIGHT / 2 + CELL_FONT * 0.35, caption, CELL_FONT,
            font_weight=700,
            color=WHITE,
            letter_spacing=0.5,
            role="pricing-header-cell",
        )

    y = top + HEADER_HEIGHT
    for index, row in enumerate(section.pricing_table_rows):
        emphasis = row.is_total
        cells = [row.service, row.description, row.investment]
        wrapped = [
            wrap_text(text, CELL_FONT, column_width - 2 * CELL_PADDING_X, 700 if emphasis else 400)
            for text, column_width in zip(cells, widths)
        ]
        height = max(len(lines) for lines in wrapped) * CELL_LINE_HEIGHT + 2 * CELL_PADDING_Y

        if emphasis:
            fill = palette.primary
        elif index % 2:
            fill = tint(palette.primary, "08")
        else:
            fill = palette.card_background
        canvas.rect(
            x, y, width, height,
            fill=fill,
            stroke=palette.card_border,
            stroke_width=1,
            role="pricing-row-total" if emphasis else "pricing-row",
        )
        for column, (left, lines) in enumerate(zip(lefts, wrapped)):
            if emphasis:
                color = WHITE
            elif column == 0:
                color = palette.heading
            else:
                color = palette.body
            canvas.text_lines(
                left + CELL_PADDING_X, y + CELL_PADDING_Y, lines, CELL_FONT, CELL_LINE_HEIGHT,
                font_weight=700 if emphasis or column != 1 else 400,
                color=color,
                role="pricing-cell-total" if emphasis else "pricing-cell",
            )
        y += height

    canvas.paragraph(
        x, y + 20, section.effective_payment_terms, 12, width,
        line_height=19,
        color=palette.muted,
        role="payment-terms",
    )


def _draw_terms(
    term_items: List[TermItem],
    total_amount: Optional[str],
    frame: Frame,
    ctx: LayoutContext,
    top: float
) -> None:
    """Legacy path: titled term blocks with a left rule, then the total callout."""
    canvas = ctx.canvas
    palette = ctx.palette
    x = frame.inner_x
    width = frame.inner_width

    y = top
    for term in term_items:
        block_top = y
        canvas.text(
            x + 16, y + 15, term.title, 15,
            font_weight=600,
            color=palette.heading,
            role="term-title",
        )
        y = canvas.paragraph(
            x + 16, y + 26, term.content, 12, width - 16,
            line_height=19,
            preformatted=True,
            color=palette.body,
            role="term-content",
        )
        canvas.rect(
            x, block_top, 3, y - block_top,
            fill=tint(palette.primary, "35"),
            role="term-border",
        )
        y += 20

    if total_amount:
        canvas.rect(
            x, y + 8, width, 84,
            fill=tint(palette.primary, "08"),
            stroke=tint(palette.primary, "33"),
            stroke_width=1,
            rx=10,
            role="total-box",
        )
        canvas.text(
            x + 24, y + 44, "Total Investment", 13,
            font_weight=600,
            color=palette.muted,
            letter_spacing=1,
            role="total-label",
        )
        canvas.text(
            x + width - 24, y + 64, total_amount, 32,
            font_weight=700,
            color=palette.primary,
            anchor="end",
            role="total-amount",
        )
