"""
SVG adapter - serializes a rendered page's instruction stream.

The preview and the print document embed the output of ``page_to_svg``
unchanged, so both targets draw from byte-identical markup.
"""

from typing import Dict, List, Optional

from markupsafe import escape

from proposal_studio.rendering.instructions import (
    Box,
    Instruction,
    LinearGradient,
    Paint,
    RenderedPage,
)
from proposal_studio.rendering.palette import split_alpha

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"


def _num(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".") or "0"


def _num_precise(value: float) -> str:
    return f"{value:.6f}".rstrip("0").rstrip(".") or "0"


def _attr(name: str, value) -> str:
    return f'{name}="{escape(str(value))}"'


class _SvgWriter:
    """Accumulates body markup and the page's <defs>."""

    def __init__(self, page_index: int):
        self.prefix = f"p{page_index}"
        self.defs: List[str] = []
        self.body: List[str] = []
        self._gradients: Dict[str, str] = {}
        self._clip_count = 0

    # ===========================================
    # Defs
    # ===========================================

    def gradient_id(self, paint: LinearGradient) -> str:
        """Register a gradient once per page; identical gradients share an id."""
        key = paint.model_dump_json()
        if key in self._gradients:
            return self._gradients[key]

        gradient_id = f"{self.prefix}-g{len(self._gradients)}"
        self._gradients[key] = gradient_id
        stops = []
        for stop in paint.stops:
            color, alpha = split_alpha(stop.color)
            stops.append(
                f'<stop offset="{_num(stop.offset)}" '
                f'stop-color="{escape(color)}" '
                f'stop-opacity="{_num(alpha * stop.opacity)}"/>'
            )
        self.defs.append(
            f'<linearGradient id="{gradient_id}" '
            f'x1="{_num(paint.x1)}" y1="{_num(paint.y1)}" '
            f'x2="{_num(paint.x2)}" y2="{_num(paint.y2)}">'
            + "".join(stops)
            + "</linearGradient>"
        )
        return gradient_id

    def clip_id(self, box: Box) -> str:
        clip_id = f"{self.prefix}-c{self._clip_count}"
        self._clip_count += 1
        self.defs.append(
            f'<clipPath id="{clip_id}"><rect x="{_num(box.x)}" y="{_num(box.y)}" '
            f'width="{_num(box.width)}" height="{_num(box.height)}"/></clipPath>'
        )
        return clip_id

    # ===========================================
    # Paint
    # ===========================================

    def paint(self, name: str, paint: Optional[Paint]) -> List[str]:
        """Attributes for a fill or stroke; hex alpha becomes *-opacity."""
        if paint is None:
            return [f'{name}="none"']
        if isinstance(paint, LinearGradient):
            return [f'{name}="url(#{self.gradient_id(paint)})"']
        color, alpha = split_alpha(paint)
        attrs = [_attr(name, color)]
        if alpha < 1:
            attrs.append(f'{name}-opacity="{_num(alpha)}"')
        return attrs

    @staticmethod
    def common(item: Instruction) -> List[str]:
        attrs = []
        if item.opacity != 1:
            attrs.append(f'opacity="{_num(item.opacity)}"')
        if item.role:
            attrs.append(_attr("data-role", item.role))
        return attrs

    def stroke(self, item) -> List[str]:
        if item.stroke is None or not item.stroke_width:
            return []
        return self.paint("stroke", item.stroke) + [f'stroke-width="{_num(item.stroke_width)}"']

    # ===========================================
    # Elements
    # ===========================================

    def write(self, item: Instruction) -> None:
        handler = getattr(self, f"_write_{item.kind}")
        handler(item)

    def _element(self, tag: str, attrs: List[str], content: Optional[str] = None) -> None:
        opening = f"<{tag} " + " ".join(attrs)
        if content is None:
            self.body.append(opening + "/>")
        else:
            self.body.append(f"{opening}>{content}</{tag}>")

    def _write_rect(self, item) -> None:
        attrs = [
            f'x="{_num(item.x)}"', f'y="{_num(item.y)}"',
            f'width="{_num(item.width)}"', f'height="{_num(item.height)}"',
        ]
        if item.rx:
            attrs.append(f'rx="{_num(item.rx)}"')
        attrs += self.paint("fill", item.fill) + self.stroke(item) + self.common(item)
        self._element("rect", attrs)

    def _write_circle(self, item) -> None:
        attrs = [f'cx="{_num(item.cx)}"', f'cy="{_num(item.cy)}"', f'r="{_num(item.r)}"']
        attrs += self.paint("fill", item.fill) + self.stroke(item) + self.common(item)
        self._element("circle", attrs)

    def _write_line(self, item) -> None:
        attrs = [
            f'x1="{_num(item.x1)}"', f'y1="{_num(item.y1)}"',
            f'x2="{_num(item.x2)}"', f'y2="{_num(item.y2)}"',
        ]
        attrs += self.stroke(item) + self.common(item)
        self._element("line", attrs)

    def _write_path(self, item) -> None:
        attrs = [_attr("d", item.d)]
        attrs += self.paint("fill", item.fill) + self.stroke(item) + self.common(item)
        self._element("path", attrs)

    def _write_text(self, item) -> None:
        attrs = [
            f'x="{_num(item.x)}"', f'y="{_num(item.y)}"',
            f'font-size="{_num(item.font_size)}"',
            f'font-weight="{item.font_weight}"',
        ]
        if item.font_family:
            attrs.append(_attr("font-family", item.font_family))
        if item.anchor != "start":
            attrs.append(f'text-anchor="{item.anchor}"')
        if item.letter_spacing:
            attrs.append(f'letter-spacing="{_num(item.letter_spacing)}"')
        attrs += self.paint("fill", item.color) + self.common(item)
        self._element("text", attrs, str(escape(item.text)))

    def _write_image(self, item) -> None:
        attrs = [
            f'x="{_num(item.x)}"', f'y="{_num(item.y)}"',
            f'width="{_num(item.width)}"', f'height="{_num(item.height)}"',
            _attr("href", item.href),
            _attr("xlink:href", item.href),
            'preserveAspectRatio="xMidYMid meet"',
        ]
        attrs += self.common(item)
        self._element("image", attrs)

    def _write_group(self, item) -> None:
        outer = []
        if item.role:
            outer.append(_attr("data-role", item.role))
        if item.clip is not None:
            outer.append(f'clip-path="url(#{self.clip_id(item.clip)})"')

        transforms = []
        if item.translate_x or item.translate_y:
            transforms.append(f"translate({_num(item.translate_x)} {_num(item.translate_y)})")
        if item.scale != 1:
            transforms.append(f"scale({_num_precise(item.scale)})")

        # Clip applies in the parent's coordinates, the transform inside it
        self.body.append("<g" + "".join(f" {attr}" for attr in outer) + ">")
        if transforms:
            self.body.append(f'<g transform="{" ".join(transforms)}">')
        for child in item.children:
            self.write(child)
        if transforms:
            self.body.append("</g>")
        self.body.append("</g>")


def page_to_svg(page: RenderedPage) -> str:
    """
    Serialize a rendered page to a standalone SVG document fragment.

    The SVG is sized to a physical A4 sheet with a viewBox in CSS pixels.
    Gradient and clip ids are prefixed with the page index so several pages
    can live in one HTML document.

    Args:
        page: Rendered page

    Returns:
        SVG markup
    """
    writer = _SvgWriter(page.index)
    for item in page.instructions:
        writer.write(item)

    header = " ".join([
        f'xmlns="{SVG_NS}"',
        f'xmlns:xlink="{XLINK_NS}"',
        'width="210mm"',
        'height="297mm"',
        f'viewBox="0 0 {_num(page.width)} {_num(page.height)}"',
        f'data-page-index="{page.index}"',
        _attr("data-sections", " ".join(page.section_types)),
    ])
    defs = f"<defs>{''.join(writer.defs)}</defs>" if writer.defs else ""
    return f"<svg {header}>{defs}{''.join(writer.body)}</svg>"
