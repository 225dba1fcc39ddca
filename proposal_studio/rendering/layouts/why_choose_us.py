"""Why-choose-us layout: circular diagram, image, or feature grid."""

from proposal_studio.models import WhyChooseUsMode, WhyChooseUsSection
from proposal_studio.rendering.canvas import Frame, gradient
from proposal_studio.rendering.diagram import generate_diagram
from proposal_studio.rendering.layouts.common import (
    LayoutContext,
    draw_header,
    draw_page_background,
    draw_stat_strip,
)
from proposal_studio.rendering.palette import WHITE, tint

DIAGRAM_SIZE = 400
# Vertical space kept free below the diagram for the stat strip
STAT_STRIP_HEIGHT = 150
IMAGE_MAX_HEIGHT = 700
GRID_COLUMNS = 2
GRID_GAP = 32
FEATURE_ROW_HEIGHT = 150


def layout_why_choose_us(section: WhyChooseUsSection, frame: Frame, ctx: LayoutContext) -> None:
    """Dispatch on the resolved mode; the section always has the page to itself."""
    mode = section.resolved_mode
    if mode == WhyChooseUsMode.CIRCULAR:
        _layout_circular(section, frame, ctx)
    elif mode == WhyChooseUsMode.IMAGE and section.image_url:
        _layout_image(section, frame, ctx)
    else:
        _layout_grid(section, frame, ctx)


def _layout_circular(section: WhyChooseUsSection, frame: Frame, ctx: LayoutContext) -> None:
    canvas = ctx.canvas
    draw_page_background(ctx, frame)
    top = draw_header(ctx, frame, section.title)

    diagram = generate_diagram(
        section.center_text,
        section.company_name or ctx.theme.company_name,
        ctx.theme.primary_color,
        DIAGRAM_SIZE,
    )

    # Fit the padded square into the space left above the stat strip
    available = frame.inner_bottom - top - STAT_STRIP_HEIGHT
    side = max(min(frame.inner_width, available), 1.0)
    scale = side / diagram.view_size
    left = frame.inner_x + (frame.inner_width - side) / 2

    with canvas.group(translate_x=left, translate_y=top, scale=scale, role="circular-diagram") as group:
        group.children.extend(diagram.instructions)

    draw_stat_strip(
        ctx, frame.inner_x, top + side + 8, frame.inner_width,
        section.effective_stat_items,
    )


def _layout_image(section: WhyChooseUsSection, frame: Frame, ctx: LayoutContext) -> None:
    draw_page_background(ctx, frame)
    top = draw_header(ctx, frame, section.title)
    height = min(IMAGE_MAX_HEIGHT, frame.inner_bottom - top)
    ctx.canvas.image(
        frame.inner_x, top, frame.inner_width, max(height, 0.0),
        section.image_url,
        role="section-image",
    )


def _layout_grid(section: WhyChooseUsSection, frame: Frame, ctx: LayoutContext) -> None:
    """Dark gradient page with numbered feature call-outs in two columns."""
    canvas = ctx.canvas
    theme = ctx.theme
    canvas.rect(
        frame.x, frame.y, frame.width, frame.height,
        fill=gradient(theme.secondary_color, tint(theme.primary_color, "ee")),
        role="why-background",
    )
    top = draw_header(ctx, frame, section.title, light=True)

    column_width = (frame.inner_width - GRID_GAP * (GRID_COLUMNS - 1)) / GRID_COLUMNS
    bottom = top
    for index, feature in enumerate(section.feature_items):
        row, column = divmod(index, GRID_COLUMNS)
        x = frame.inner_x + column * (column_width + GRID_GAP)
        y = top + row * FEATURE_ROW_HEIGHT

        number = feature.number or f"{index + 1:02d}"
        canvas.text(
            x, y + 46, number, 52,
            font_weight=700,
            color=WHITE,
            opacity=0.15,
            role="feature-number",
        )
        title_bottom = canvas.paragraph(
            x, y + 58, feature.title.upper(), 12, column_width,
            line_height=18,
            font_weight=700,
            color=WHITE,
            letter_spacing=1.5,
            role="feature-title",
        )
        text_bottom = canvas.paragraph(
            x, title_bottom + 6, feature.description, 12, column_width,
            line_height=19,
            color=WHITE,
            opacity=0.7,
            role="feature-description",
        )
        bottom = max(bottom, y + FEATURE_ROW_HEIGHT, text_bottom)

    if section.stat_items:
        draw_stat_strip(
            ctx, frame.inner_x, bottom + 24, frame.inner_width,
            section.stat_items,
            on_dark=True,
        )
