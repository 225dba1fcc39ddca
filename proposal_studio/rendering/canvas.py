"""Canvas - collects drawing instructions for one page."""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import List, Optional

from proposal_studio.rendering.instructions import (
    Box,
    Circle,
    GradientStop,
    Group,
    Image,
    Instruction,
    Line,
    LinearGradient,
    Paint,
    Path,
    Rect,
    Text,
)
from proposal_studio.rendering.metrics import wrap_preformatted, wrap_text

# Vertical offset from a line's center to its alphabetic baseline, in em
BASELINE_SHIFT = 0.35


@dataclass(frozen=True)
class Frame:
    """The region of a page a section lays itself out in."""
    x: float
    y: float
    width: float
    height: float
    compact: bool = False

    @property
    def padding(self) -> float:
        return 40.0 if self.compact else 60.0

    @property
    def inner_x(self) -> float:
        return self.x + self.padding

    @property
    def inner_y(self) -> float:
        return self.y + self.padding

    @property
    def inner_width(self) -> float:
        return self.width - 2 * self.padding

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def inner_bottom(self) -> float:
        return self.bottom - self.padding

    def box(self) -> Box:
        return Box(x=self.x, y=self.y, width=self.width, height=self.height)


def gradient(*colors: str, x1=0.0, y1=0.0, x2=1.0, y2=1.0) -> LinearGradient:
    """Evenly spaced gradient through the given colors."""
    count = len(colors)
    stops = [
        GradientStop(offset=round(i / (count - 1), 4) if count > 1 else 0.0, color=color)
        for i, color in enumerate(colors)
    ]
    return LinearGradient(x1=x1, y1=y1, x2=x2, y2=y2, stops=stops)


class Canvas:
    """
    Instruction builder used by every layout routine.

    Holds a stack of instruction lists so ``group()`` can nest output.
    """

    def __init__(self, font_family: Optional[str] = None):
        self.font_family = font_family
        self._stack: List[List[Instruction]] = [[]]

    @property
    def instructions(self) -> List[Instruction]:
        return self._stack[0]

    def add(self, instruction: Instruction) -> Instruction:
        self._stack[-1].append(instruction)
        return instruction

    def mark(self) -> int:
        """Position in the current list, for drawing underneath later output."""
        return len(self._stack[-1])

    def insert(self, mark: int, instruction: Instruction) -> Instruction:
        self._stack[-1].insert(mark, instruction)
        return instruction

    @contextmanager
    def group(
        self,
        clip: Optional[Box] = None,
        translate_x: float = 0.0,
        translate_y: float = 0.0,
        scale: float = 1.0,
        role: Optional[str] = None
    ):
        """Collect nested instructions into a Group."""
        group = Group(
            clip=clip,
            translate_x=translate_x,
            translate_y=translate_y,
            scale=scale,
            role=role,
        )
        self._stack.append(group.children)
        try:
            yield group
        finally:
            self._stack.pop()
        self.add(group)

    # ===========================================
    # Primitives
    # ===========================================

    def rect(self, x, y, width, height, fill: Optional[Paint] = None, **kwargs) -> Rect:
        return self.add(Rect(x=x, y=y, width=width, height=height, fill=fill, **kwargs))

    def circle(self, cx, cy, r, fill: Optional[Paint] = None, **kwargs) -> Circle:
        return self.add(Circle(cx=cx, cy=cy, r=r, fill=fill, **kwargs))

    def line(self, x1, y1, x2, y2, stroke: str, stroke_width: float = 1.0, **kwargs) -> Line:
        return self.add(Line(x1=x1, y1=y1, x2=x2, y2=y2, stroke=stroke, stroke_width=stroke_width, **kwargs))

    def path(self, d: str, fill: Optional[Paint] = None, **kwargs) -> Path:
        return self.add(Path(d=d, fill=fill, **kwargs))

    def image(self, x, y, width, height, href: str, **kwargs) -> Image:
        return self.add(Image(x=x, y=y, width=width, height=height, href=href, **kwargs))

    def text(self, x, y, text: str, font_size: float, **kwargs) -> Text:
        kwargs.setdefault("font_family", self.font_family)
        return self.add(Text(x=x, y=y, text=text or "", font_size=font_size, **kwargs))

    def text_centered(self, cx, cy, text: str, font_size: float, **kwargs) -> Text:
        """Text horizontally and vertically centered on a point."""
        return self.text(
            cx, cy + font_size * BASELINE_SHIFT, text, font_size, anchor="middle", **kwargs
        )

    # ===========================================
    # Text Blocks
    # ===========================================

    def text_lines(
        self,
        x: float,
        top: float,
        lines: List[str],
        font_size: float,
        line_height: float,
        **kwargs
    ) -> float:
        """Draw pre-wrapped lines from ``top``; returns the y below the block."""
        for index, line in enumerate(lines):
            baseline = top + index * line_height + (line_height + font_size) / 2 - font_size * 0.15
            if line:
                self.text(x, baseline, line, font_size, **kwargs)
        return top + len(lines) * line_height

    def paragraph(
        self,
        x: float,
        top: float,
        text: str,
        font_size: float,
        max_width: float,
        line_height: Optional[float] = None,
        preformatted: bool = False,
        **kwargs
    ) -> float:
        """Wrap and draw text; returns the y below the block."""
        weight = kwargs.get("font_weight", 400)
        if preformatted:
            lines = wrap_preformatted(text, font_size, max_width, weight)
        else:
            lines = wrap_text(text or "", font_size, max_width, weight, kwargs.get("letter_spacing", 0.0))
        return self.text_lines(x, top, lines, font_size, line_height or font_size * 1.6, **kwargs)
