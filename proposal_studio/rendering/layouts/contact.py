"""Contact page layout."""

from proposal_studio.models import ContactSection
from proposal_studio.rendering.canvas import Frame, gradient
from proposal_studio.rendering.layouts.common import LayoutContext
from proposal_studio.rendering.palette import WHITE

PLACEHOLDER_CELL = 26
PLACEHOLDER_GAP = 4
LOGO_TILE_PADDING = 10


def layout_contact(section: ContactSection, frame: Frame, ctx: LayoutContext) -> None:
    """
    Angular gradient banner over the upper half, contact block bottom-left.

    A black theme background turns the block's text light and sets the logo on
    a white tile so dark artwork stays legible.
    """
    canvas = ctx.canvas
    theme = ctx.theme
    palette = ctx.palette
    x, y, width, height = frame.x, frame.y, frame.width, frame.height

    canvas.rect(x, y, width, height, fill=palette.page_background, role="page-background")

    # Banner: two overlaid gradient fills
    canvas.path(
        f"M {x} {y} L {x + width} {y} L {x + width} {y + height * 0.42} "
        f"L {x} {y + height * 0.55} Z",
        fill=gradient(theme.primary_color, theme.secondary_color),
        role="contact-banner",
    )
    canvas.path(
        f"M {x + width * 0.35} {y} L {x + width} {y} L {x + width} {y + height * 0.3} "
        f"L {x + width * 0.6} {y + height * 0.2} Z",
        fill=gradient(theme.secondary_color, theme.primary_color, x1=1.0, x2=0.0),
        opacity=0.35,
        role="contact-banner-overlay",
    )

    inner_x = frame.inner_x
    title_bottom = canvas.paragraph(
        inner_x, y + 110, section.title, 40, width * 0.7,
        line_height=48,
        font_weight=700,
        color=WHITE,
        letter_spacing=-0.5,
        role="section-title",
    )
    canvas.rect(inner_x, title_bottom + 12, 70, 4, fill=theme.accent_color, rx=2, role="header-bar")
    message_bottom = canvas.paragraph(
        inner_x, title_bottom + 40, section.closing_message, 16, width * 0.6,
        line_height=24,
        font_weight=700,
        color=WHITE,
        letter_spacing=2,
        role="closing-message",
    )
    if section.contact_name:
        canvas.text(
            inner_x, message_bottom + 34, section.contact_name, 15,
            font_weight=500, color=WHITE, role="contact-name",
        )
    if section.contact_title:
        canvas.text(
            inner_x, message_bottom + 56, section.contact_title, 12,
            color=WHITE, opacity=0.75, role="contact-title",
        )

    # Bottom-left block
    text_color = WHITE if palette.is_dark else theme.secondary_color
    detail_color = palette.body
    top = y + height - 300

    if theme.logo_url:
        if palette.is_dark:
            canvas.rect(
                inner_x - LOGO_TILE_PADDING, top - LOGO_TILE_PADDING,
                160 + 2 * LOGO_TILE_PADDING, 70 + 2 * LOGO_TILE_PADDING,
                fill=WHITE, rx=8, role="logo-tile",
            )
        canvas.image(inner_x, top, 160, 70, theme.logo_url, role="contact-logo")
    else:
        quadrant_colors = [
            theme.primary_color, theme.accent_color,
            theme.secondary_color, theme.primary_color,
        ]
        for index, color in enumerate(quadrant_colors):
            row, column = divmod(index, 2)
            canvas.rect(
                inner_x + column * (PLACEHOLDER_CELL + PLACEHOLDER_GAP),
                top + row * (PLACEHOLDER_CELL + PLACEHOLDER_GAP),
                PLACEHOLDER_CELL, PLACEHOLDER_CELL,
                fill=WHITE if palette.is_dark and color == theme.secondary_color else color,
                rx=3,
                role="logo-placeholder",
            )

    canvas.text(
        inner_x, top + 112, theme.company_name, 26,
        font_weight=700,
        color=text_color,
        role="contact-company",
    )
    canvas.rect(
        inner_x, top + 130, 120, 3,
        fill=gradient(theme.accent_color, theme.primary_color, y2=0.0),
        role="contact-separator",
    )
    canvas.text(inner_x, top + 164, section.contact_email, 14, color=detail_color, role="contact-email")
    canvas.text(inner_x, top + 188, section.contact_phone, 14, color=detail_color, role="contact-phone")
