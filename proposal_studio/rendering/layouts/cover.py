"""Cover page layout."""

from proposal_studio.models import CoverSection
from proposal_studio.rendering.canvas import Frame, gradient
from proposal_studio.rendering.layouts.common import LayoutContext
from proposal_studio.rendering.metrics import wrap_text
from proposal_studio.rendering.palette import WHITE

LOGO_WIDTH = 140
LOGO_HEIGHT = 70
LOGO_MARGIN_X = 48
LOGO_MARGIN_Y = 40
TITLE_SIZE = 56
TITLE_LINE_HEIGHT = 62
SUBTITLE_SIZE = 22
SUBTITLE_LINE_HEIGHT = 32


def layout_cover(section: CoverSection, frame: Frame, ctx: LayoutContext) -> None:
    """Full-bleed gradient cover with logos, centered title and client caption."""
    canvas = ctx.canvas
    theme = ctx.theme
    width, height = frame.width, frame.height
    center_x = frame.x + width / 2

    canvas.rect(
        frame.x, frame.y, width, height,
        fill=gradient(theme.primary_color, theme.secondary_color),
        role="cover-background",
    )

    # Own logo top-left, client logo top-right; each optional
    if theme.logo_url:
        canvas.image(
            frame.x + LOGO_MARGIN_X, frame.y + LOGO_MARGIN_Y, LOGO_WIDTH, LOGO_HEIGHT,
            theme.logo_url,
            role="own-logo",
        )
    elif theme.company_name:
        canvas.text(
            frame.x + LOGO_MARGIN_X, frame.y + LOGO_MARGIN_Y + 22, theme.company_name.lower(), 13,
            font_weight=500,
            color=WHITE,
            opacity=0.8,
            letter_spacing=3,
            role="company-name",
        )
    if theme.client_logo_url:
        canvas.image(
            frame.x + width - LOGO_MARGIN_X - LOGO_WIDTH, frame.y + LOGO_MARGIN_Y,
            LOGO_WIDTH, LOGO_HEIGHT,
            theme.client_logo_url,
            role="client-logo",
        )

    title_lines = wrap_text(section.title, TITLE_SIZE, width - 160, font_weight=700)
    subtitle_lines = (
        wrap_text(section.subtitle, SUBTITLE_SIZE, 600) if section.subtitle else []
    )
    block_height = len(title_lines) * TITLE_LINE_HEIGHT
    if subtitle_lines:
        block_height += 32 + len(subtitle_lines) * SUBTITLE_LINE_HEIGHT
    top = frame.y + (height - block_height) / 2

    bottom = canvas.text_lines(
        center_x, top, title_lines, TITLE_SIZE, TITLE_LINE_HEIGHT,
        font_weight=700,
        color=WHITE,
        anchor="middle",
        letter_spacing=-2,
        role="cover-title",
    )
    if subtitle_lines:
        canvas.text_lines(
            center_x, bottom + 32, subtitle_lines, SUBTITLE_SIZE, SUBTITLE_LINE_HEIGHT,
            color=WHITE,
            opacity=0.8,
            anchor="middle",
            role="cover-subtitle",
        )

    canvas.line(
        center_x - 40, frame.y + height - 110, center_x + 40, frame.y + height - 110,
        stroke=WHITE,
        stroke_width=2,
        opacity=0.3,
        role="cover-rule",
    )
    canvas.text(
        center_x, frame.y + height - 80, f"Proposal for {ctx.client_name}", 11,
        color=WHITE,
        opacity=0.6,
        anchor="middle",
        letter_spacing=4,
        role="cover-caption",
    )
    canvas.rect(
        frame.x, frame.y + height - 5, width, 5,
        fill=theme.accent_color,
        role="accent-bar",
    )
