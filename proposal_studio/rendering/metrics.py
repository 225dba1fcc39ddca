"""Approximate sans-serif text metrics for line wrapping and label boxes."""

from typing import List

# Advance widths in em for a geometric sans (Poppins/Inter class)
_NARROW = set("il.,:;'|!`")
_SEMI_NARROW = set("fjtrI()[]{}- ")
_WIDE = set("mwMW@%")
_UPPER_WIDTH = 0.68
_DIGIT_WIDTH = 0.58
_LOWER_WIDTH = 0.54
_BOLD_FACTOR = 1.06


def char_width(char: str) -> float:
    """Advance width of one character in em."""
    if char in _NARROW:
        return 0.28
    if char in _SEMI_NARROW:
        return 0.36
    if char in _WIDE:
        return 0.88
    if char.isdigit():
        return _DIGIT_WIDTH
    if char.isupper():
        return _UPPER_WIDTH
    return _LOWER_WIDTH


def text_width(
    text: str,
    font_size: float,
    font_weight: int = 400,
    letter_spacing: float = 0.0
) -> float:
    """Estimated rendered width of a single line in pixels."""
    if not text:
        return 0.0
    width = sum(char_width(c) for c in text) * font_size
    if font_weight >= 600:
        width *= _BOLD_FACTOR
    return width + letter_spacing * len(text)


def _break_word(
    word: str,
    font_size: float,
    max_width: float,
    font_weight: int = 400,
    letter_spacing: float = 0.0
) -> List[str]:
    """Split a word that cannot fit on one line, in a single pass over it."""
    scale = font_size * (_BOLD_FACTOR if font_weight >= 600 else 1.0)
    pieces: List[str] = []
    start = 0
    width = 0.0
    for index, char in enumerate(word):
        advance = char_width(char) * scale + letter_spacing
        # Every piece keeps at least one character
        if width + advance > max_width and index > start:
            pieces.append(word[start:index])
            start = index
            width = 0.0
        width += advance
    pieces.append(word[start:])
    return pieces


def wrap_text(
    text: str,
    font_size: float,
    max_width: float,
    font_weight: int = 400,
    letter_spacing: float = 0.0
) -> List[str]:
    """
    Greedy word wrap of one paragraph.

    Words longer than a line are broken by character. An empty paragraph
    yields a single empty line so blank lines keep their height.
    """
    words = text.split()
    if not words:
        return [""]

    lines: List[str] = []
    current = ""
    for word in words:
        candidate = f"{current} {word}" if current else word
        if text_width(candidate, font_size, font_weight, letter_spacing) <= max_width:
            current = candidate
            continue
        if current:
            lines.append(current)
            current = ""
        if text_width(word, font_size, font_weight, letter_spacing) > max_width:
            *full, word = _break_word(word, font_size, max_width, font_weight, letter_spacing)
            lines.extend(full)
        current = word
    if current:
        lines.append(current)
    return lines


def wrap_preformatted(
    text: str,
    font_size: float,
    max_width: float,
    font_weight: int = 400
) -> List[str]:
    """Soft-wrap text while keeping its explicit line breaks."""
    lines: List[str] = []
    for paragraph in (text or "").split("\n"):
        lines.extend(wrap_text(paragraph, font_size, max_width, font_weight))
    return lines
