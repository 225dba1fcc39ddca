"""
Circular diagram generator.

Produces the four-segment "why choose us" ring with a center medallion as
drawing instructions in its own square coordinate space. The why-choose-us
layout places it on the page with a translate/scale group, so the preview and
the export draw exactly the same geometry.
"""

import math
from dataclasses import dataclass
from typing import List, Tuple

from pydantic import BaseModel, Field

from proposal_studio.rendering.canvas import BASELINE_SHIFT, Canvas, gradient
from proposal_studio.rendering.instructions import Box, Instruction
from proposal_studio.rendering.metrics import text_width
from proposal_studio.rendering.palette import BLACK, LIGHT_GRAY, NEAR_BLACK, WHITE


@dataclass(frozen=True)
class SegmentCopy:
    number: str
    title: str
    description: str


# Fixed marketing copy; not configurable
DIAGRAM_SEGMENTS: Tuple[SegmentCopy, ...] = (
    SegmentCopy(
        number="01",
        title="PROVEN ROI\nACCELERATION",
        description="We make brands impossible\nto ignore. Your growth\nbecomes our legacy.",
    ),
    SegmentCopy(
        number="02",
        title="FULL-SPECTRUM\nCREATIVE\nPOWERHOUSE",
        description="We don't make ads,\nwe craft experiences.\nFrom CGI to viral content.",
    ),
    SegmentCopy(
        number="03",
        title="STRATEGIC\nPARTNERSHIP\nAPPROACH",
        description="We succeed when you\ndominate. Your competitors\nbecome our case studies.",
    ),
    SegmentCopy(
        number="04",
        title="CUTTING-EDGE\nTECHNOLOGY\n& INSIGHTS",
        description="While others catch up,\nwe stay ahead. Next-gen\nstrategies for tomorrow.",
    ),
)

CENTER_CAPTION = "OVER OTHERS"
DIAGRAM_FONT = "Arial, Helvetica, sans-serif"

NUMBER_SIZE = 48
TITLE_SIZE = 16
TITLE_LINE_HEIGHT = 18
TITLE_LETTER_SPACING = 1.2
DESCRIPTION_SIZE = 13
DESCRIPTION_LINE_HEIGHT = 15
CENTER_TEXT_SIZE = 18
CENTER_LINE_HEIGHT = 20
COMPANY_SIZE = 22
CAPTION_SIZE = 14

# Padding is at least half the ring size, more when labels would overflow
BASE_PADDING_RATIO = 0.5
LABEL_MARGIN = 20.0


class DiagramSegment(BaseModel):
    index: int
    number: str
    title_lines: List[str]
    description_lines: List[str]
    fill: str
    text_color: str
    start_angle: float = Field(..., description="Degrees, -90 is 12 o'clock")
    end_angle: float
    path: str
    label_box: Box


class Diagram(BaseModel):
    """Vector drawing of the circular diagram."""
    size: float
    padding: float
    view_size: float
    outer_radius: float
    inner_radius: float
    segments: List[DiagramSegment]
    label_boxes: List[Box]
    instructions: List[Instruction]


@dataclass
class _Label:
    """A text line positioned relative to the ring center."""
    dx: float
    dy: float
    text: str
    font_size: float
    font_weight: int
    color: str
    letter_spacing: float = 0.0
    opacity: float = 1.0
    role: str = "diagram-label"

    def box(self, cx: float, cy: float) -> Box:
        width = text_width(self.text, self.font_size, self.font_weight, self.letter_spacing)
        return Box(
            x=cx + self.dx - width / 2,
            y=cy + self.dy - self.font_size * 0.6,
            width=width,
            height=self.font_size * 1.2,
        )


def segment_color(index: int, primary_color: str) -> str:
    """Alternating fills: light gray, primary, near-black, primary."""
    colors = [LIGHT_GRAY, primary_color, NEAR_BLACK, primary_color]
    return colors[index % len(colors)]


def _point(cx: float, cy: float, radius: float, angle: float) -> Tuple[float, float]:
    return cx + radius * math.cos(angle), cy + radius * math.sin(angle)


def _fmt(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".") or "0"


def annular_wedge_path(
    cx: float,
    cy: float,
    start_angle: float,
    end_angle: float,
    outer_radius: float,
    inner_radius: float
) -> str:
    """
    SVG path for a ring segment.

    Outer arc clockwise, radial line inward, inner arc back, close.
    Angles are in radians.
    """
    sox, soy = _point(cx, cy, outer_radius, start_angle)
    eox, eoy = _point(cx, cy, outer_radius, end_angle)
    six, siy = _point(cx, cy, inner_radius, end_angle)
    eix, eiy = _point(cx, cy, inner_radius, start_angle)
    large_arc = 1 if (end_angle - start_angle) > math.pi else 0

    return " ".join([
        f"M {_fmt(sox)} {_fmt(soy)}",
        f"A {_fmt(outer_radius)} {_fmt(outer_radius)} 0 {large_arc} 1 {_fmt(eox)} {_fmt(eoy)}",
        f"L {_fmt(six)} {_fmt(siy)}",
        f"A {_fmt(inner_radius)} {_fmt(inner_radius)} 0 {large_arc} 0 {_fmt(eix)} {_fmt(eiy)}",
        "Z",
    ])


def _segment_labels(
    copy: SegmentCopy,
    mid_angle: float,
    text_radius: float,
    is_light: bool
) -> List[_Label]:
    tx = text_radius * math.cos(mid_angle)
    ty = text_radius * math.sin(mid_angle)
    heading_color = BLACK if is_light else WHITE
    body_color = "#444444" if is_light else WHITE
    body_opacity = 1.0 if is_light else 0.95

    labels = [_Label(tx, ty - 50, copy.number, NUMBER_SIZE, 700, heading_color)]
    for line_index, line in enumerate(copy.title.split("\n")):
        labels.append(_Label(
            tx, ty - 15 + line_index * TITLE_LINE_HEIGHT, line, TITLE_SIZE, 700,
            heading_color, letter_spacing=TITLE_LETTER_SPACING,
        ))
    for line_index, line in enumerate(copy.description.split("\n")):
        labels.append(_Label(
            tx, ty + 40 + line_index * DESCRIPTION_LINE_HEIGHT, line, DESCRIPTION_SIZE, 400,
            body_color, opacity=body_opacity,
        ))
    return labels


def _medallion_labels(center_text: str, company_name: str, primary_color: str) -> List[_Label]:
    labels = []
    for index, line in enumerate(center_text.split("\n")):
        if line:
            labels.append(_Label(
                0, -22 + index * CENTER_LINE_HEIGHT, line, CENTER_TEXT_SIZE, 700, BLACK,
                role="diagram-center-text",
            ))
    if company_name:
        labels.append(_Label(0, 2, company_name, COMPANY_SIZE, 700, primary_color, role="diagram-company"))
    labels.append(_Label(0, 28, CENTER_CAPTION, CAPTION_SIZE, 700, BLACK, role="diagram-caption"))
    return labels


def _union(boxes: List[Box]) -> Box:
    left = min(box.x for box in boxes)
    top = min(box.y for box in boxes)
    right = max(box.right for box in boxes)
    bottom = max(box.bottom for box in boxes)
    return Box(x=left, y=top, width=right - left, height=bottom - top)


def generate_diagram(
    center_text: str,
    company_name: str,
    primary_color: str,
    size: float = 400
) -> Diagram:
    """
    Build the circular diagram.

    Args:
        center_text: Medallion heading; ``\\n`` separates lines
        company_name: Highlighted in the primary color under the heading
        primary_color: Theme primary color
        size: Ring diameter before padding

    Returns:
        Diagram with instructions in a ``view_size`` square
    """
    if size <= 0:
        raise ValueError("diagram size must be positive")

    center_text = center_text or ""
    company_name = company_name or ""
    segment_count = len(DIAGRAM_SEGMENTS)
    angle_per_segment = 2 * math.pi / segment_count
    outer_radius = size / 2 - min(15.0, size * 0.0375)
    inner_radius = size / 7
    text_radius = (outer_radius + inner_radius) / 2

    # Lay labels out around the origin first to size the padding
    segment_labels = []
    for index, copy in enumerate(DIAGRAM_SEGMENTS):
        mid_angle = -math.pi / 2 + angle_per_segment * index + angle_per_segment / 2
        is_light = segment_color(index, primary_color) == LIGHT_GRAY
        segment_labels.append(_segment_labels(copy, mid_angle, text_radius, is_light))
    medallion = _medallion_labels(center_text, company_name, primary_color)

    all_labels = [label for labels in segment_labels for label in labels] + medallion
    extent = max(
        max(abs(box.x), abs(box.right), abs(box.y), abs(box.bottom))
        for box in (label.box(0, 0) for label in all_labels)
    )
    padding = max(size * BASE_PADDING_RATIO, extent - size / 2 + LABEL_MARGIN)
    view_size = size + 2 * padding
    cx = cy = view_size / 2

    canvas = Canvas(font_family=DIAGRAM_FONT)
    segments: List[DiagramSegment] = []

    for index, copy in enumerate(DIAGRAM_SEGMENTS):
        start_angle = -math.pi / 2 + angle_per_segment * index
        end_angle = start_angle + angle_per_segment
        fill = segment_color(index, primary_color)
        path = annular_wedge_path(cx, cy, start_angle, end_angle, outer_radius, inner_radius)
        canvas.path(path, fill=fill, stroke=WHITE, stroke_width=3, role="diagram-segment")

        labels = segment_labels[index]
        for label in labels:
            _draw_label(canvas, cx, cy, label)

        title_lines = copy.title.split("\n")
        segments.append(DiagramSegment(
            index=index,
            number=copy.number,
            title_lines=title_lines,
            description_lines=copy.description.split("\n"),
            fill=fill,
            text_color=labels[0].color,
            start_angle=math.degrees(start_angle),
            end_angle=math.degrees(end_angle),
            path=path,
            label_box=_union([label.box(cx, cy) for label in labels]),
        ))

    # Center medallion
    canvas.circle(
        cx, cy, inner_radius + 12,
        fill=WHITE,
        stroke=gradient(primary_color, BLACK, primary_color),
        stroke_width=8,
        role="diagram-medallion",
    )
    canvas.circle(cx, cy, inner_radius, fill=WHITE, role="diagram-medallion-inner")
    for label in medallion:
        _draw_label(canvas, cx, cy, label)

    return Diagram(
        size=size,
        padding=padding,
        view_size=view_size,
        outer_radius=outer_radius,
        inner_radius=inner_radius,
        segments=segments,
        label_boxes=[label.box(cx, cy) for label in all_labels],
        instructions=canvas.instructions,
    )


def _draw_label(canvas: Canvas, cx: float, cy: float, label: _Label) -> None:
    canvas.text(
        cx + label.dx,
        cy + label.dy + label.font_size * BASELINE_SHIFT,
        label.text,
        label.font_size,
        font_weight=label.font_weight,
        color=label.color,
        anchor="middle",
        letter_spacing=label.letter_spacing,
        opacity=label.opacity,
        role=label.role,
    )
