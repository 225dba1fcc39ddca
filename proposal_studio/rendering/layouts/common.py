"""Shared pieces of the section layouts: context, headers, lists, stat strip."""

import math
from dataclasses import dataclass
from typing import List

from proposal_studio.models import DesignSettings, StatItem
from proposal_studio.rendering.canvas import Canvas, Frame, gradient
from proposal_studio.rendering.palette import ContentPalette, WHITE


@dataclass
class LayoutContext:
    """Everything a layout routine needs besides its section and frame."""
    canvas: Canvas
    theme: DesignSettings
    palette: ContentPalette
    client_name: str = ""


def draw_page_background(ctx: LayoutContext, frame: Frame) -> None:
    ctx.canvas.rect(
        frame.x, frame.y, frame.width, frame.height,
        fill=ctx.palette.page_background,
        role="page-background",
    )


def draw_header(ctx: LayoutContext, frame: Frame, title: str, light: bool = False) -> float:
    """
    Section title with the short underline bar.

    Args:
        ctx: Layout context
        frame: Section frame
        title: Heading text
        light: White heading and solid accent bar, for dark gradient pages

    Returns:
        Y coordinate where the section body starts
    """
    canvas = ctx.canvas
    size = 22 if frame.compact else 28
    color = WHITE if light else ctx.palette.heading

    bottom = canvas.paragraph(
        frame.inner_x, frame.inner_y, title, size, frame.inner_width,
        line_height=size * 1.25,
        font_weight=700,
        color=color,
        letter_spacing=-0.5,
        role="section-title",
    )
    bar_fill = ctx.theme.accent_color if light else gradient(
        ctx.theme.primary_color, ctx.theme.accent_color, y2=0.0
    )
    canvas.rect(frame.inner_x, bottom + 12, 70, 4, fill=bar_fill, rx=2, role="header-bar")
    return bottom + 16 + (24 if frame.compact else 40)


def draw_bullet_list(
    ctx: LayoutContext,
    x: float,
    top: float,
    items: List[str],
    max_width: float,
    bullet_color: str,
    font_size: float = 13,
    line_height: float = 22,
    gap: float = 8,
    role: str = "list-item"
) -> float:
    """Bulleted list; returns the y below the last item."""
    canvas = ctx.canvas
    y = top
    for item in items:
        canvas.circle(x + 3.5, y + line_height / 2, 3.5, fill=bullet_color, role="bullet")
        y = canvas.paragraph(
            x + 18, y, item, font_size, max_width - 18,
            line_height=line_height,
            color=ctx.palette.body,
            role=role,
        ) + gap
    return y


def draw_subheading(ctx: LayoutContext, x: float, top: float, text: str, color: str = None) -> float:
    ctx.canvas.text(
        x, top + 15, text, 15,
        font_weight=600,
        color=color or ctx.palette.heading,
        role="subheading",
    )
    return top + 36


def draw_stat_strip(
    ctx: LayoutContext,
    x: float,
    top: float,
    width: float,
    stats: List[StatItem],
    on_dark: bool = False
) -> float:
    """
    "By the numbers" strip.

    Column count is ``min(len(stats), 4)``; further stats wrap onto new rows.

    Returns:
        Y coordinate below the strip
    """
    if not stats:
        return top

    canvas = ctx.canvas
    palette = ctx.palette
    heading_color = WHITE if on_dark else palette.muted
    canvas.text(
        x + width / 2, top + 14, "BY THE NUMBERS", 12,
        font_weight=700,
        color=heading_color,
        anchor="middle",
        letter_spacing=2,
        role="stats-heading",
    )

    columns = min(len(stats), 4)
    gap = 16
    cell_width = (width - (columns - 1) * gap) / columns
    cell_height = 96
    grid_top = top + 34

    for index, stat in enumerate(stats):
        row, column = divmod(index, columns)
        cell_x = x + column * (cell_width + gap)
        cell_y = grid_top + row * (cell_height + gap)
        canvas.rect(
            cell_x, cell_y, cell_width, cell_height,
            fill="#ffffff14" if on_dark else palette.card_background,
            stroke=None if on_dark else palette.card_border,
            stroke_width=0 if on_dark else 1,
            rx=10,
            role="stat-card",
        )
        canvas.text_centered(
            cell_x + cell_width / 2, cell_y + 40, stat.value, 32,
            font_weight=700,
            color=WHITE if on_dark else palette.primary,
            role="stat-value",
        )
        canvas.text_centered(
            cell_x + cell_width / 2, cell_y + 74, stat.label, 12,
            color=WHITE if on_dark else palette.muted,
            opacity=0.7 if on_dark else 1.0,
            role="stat-label",
        )

    rows = math.ceil(len(stats) / columns)
    return grid_top + rows * cell_height + (rows - 1) * gap
