"""
Drawing instructions - the stream every layout routine emits.

Coordinates are CSS pixels on an A4 page (794 x 1123). Both the preview and
the export adapter consume the same instruction list for a page.
"""

from typing import List, Literal, Optional, Union
from pydantic import BaseModel, Field

# A4 at 96 dpi
PAGE_WIDTH = 794
PAGE_HEIGHT = 1123


class GradientStop(BaseModel):
    offset: float = Field(..., ge=0, le=1)
    color: str
    opacity: float = 1.0


class LinearGradient(BaseModel):
    """Gradient across the shape's bounding box; endpoints are 0-1 fractions."""
    kind: Literal["linear-gradient"] = "linear-gradient"
    x1: float = 0.0
    y1: float = 0.0
    x2: float = 1.0
    y2: float = 1.0
    stops: List[GradientStop]


Paint = Union[str, LinearGradient]


class Box(BaseModel):
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


class Rect(BaseModel):
    kind: Literal["rect"] = "rect"
    x: float
    y: float
    width: float
    height: float
    fill: Optional[Paint] = None
    stroke: Optional[str] = None
    stroke_width: float = 0.0
    rx: float = 0.0
    opacity: float = 1.0
    role: Optional[str] = None


class Circle(BaseModel):
    kind: Literal["circle"] = "circle"
    cx: float
    cy: float
    r: float
    fill: Optional[Paint] = None
    stroke: Optional[Paint] = None
    stroke_width: float = 0.0
    opacity: float = 1.0
    role: Optional[str] = None


class Line(BaseModel):
    kind: Literal["line"] = "line"
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: float = 1.0
    opacity: float = 1.0
    role: Optional[str] = None


class Path(BaseModel):
    kind: Literal["path"] = "path"
    d: str
    fill: Optional[Paint] = None
    stroke: Optional[str] = None
    stroke_width: float = 0.0
    opacity: float = 1.0
    role: Optional[str] = None


class Text(BaseModel):
    """A single line of text; ``y`` is the alphabetic baseline."""
    kind: Literal["text"] = "text"
    x: float
    y: float
    text: str
    font_size: float
    font_weight: int = 400
    color: str = "#333333"
    anchor: Literal["start", "middle", "end"] = "start"
    letter_spacing: float = 0.0
    opacity: float = 1.0
    font_family: Optional[str] = None
    role: Optional[str] = None


class Image(BaseModel):
    kind: Literal["image"] = "image"
    x: float
    y: float
    width: float
    height: float
    href: str
    opacity: float = 1.0
    role: Optional[str] = None


class Group(BaseModel):
    """Nested instructions, optionally clipped, translated and scaled."""
    kind: Literal["group"] = "group"
    children: List["Instruction"] = Field(default_factory=list)
    translate_x: float = 0.0
    translate_y: float = 0.0
    scale: float = 1.0
    clip: Optional[Box] = None
    role: Optional[str] = None


Instruction = Union[Rect, Circle, Line, Path, Text, Image, Group]

Group.model_rebuild()


class RenderedPage(BaseModel):
    """One composed page turned into drawing instructions."""
    index: int
    width: float = PAGE_WIDTH
    height: float = PAGE_HEIGHT
    section_ids: List[str] = Field(default_factory=list)
    section_types: List[str] = Field(default_factory=list)
    instructions: List[Instruction] = Field(default_factory=list)

    def walk(self):
        """Yield every instruction, descending into groups."""
        yield from walk_instructions(self.instructions)

    def find(self, role: Optional[str] = None, kind: Optional[str] = None) -> List[Instruction]:
        """Instructions matching a role and/or kind."""
        return [
            item for item in self.walk()
            if (role is None or item.role == role) and (kind is None or item.kind == kind)
        ]

    def texts(self) -> List[str]:
        return [item.text for item in self.walk() if item.kind == "text"]


def walk_instructions(instructions: List[Instruction]):
    for item in instructions:
        yield item
        if item.kind == "group":
            yield from walk_instructions(item.children)
