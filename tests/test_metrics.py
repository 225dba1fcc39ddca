"""Tests for approximate text metrics and wrapping."""

import time

import pytest

from proposal_studio.rendering.metrics import text_width, wrap_preformatted, wrap_text


class TestWrapText:
    """Tests for wrap_text."""

    def test_short_text_single_line(self):
        assert wrap_text("Hello world", 13, 600) == ["Hello world"]

    def test_empty_paragraph_keeps_a_line(self):
        assert wrap_text("   ", 13, 600) == [""]

    def test_lines_fit_width(self):
        text = "We design and build digital products for ambitious teams " * 6
        lines = wrap_text(text, 14, 300)

        assert len(lines) > 1
        assert all(text_width(line, 14) <= 300 for line in lines)
        assert " ".join(lines) == " ".join(text.split())

    @pytest.mark.parametrize("font_weight, letter_spacing", [(400, 0.0), (700, 1.5)])
    def test_long_word_broken_by_character(self, font_weight, letter_spacing):
        word = "https://cdn.example.com/assets/" + "a1B2c3" * 40
        lines = wrap_text(word, 13, 200, font_weight, letter_spacing)

        assert "".join(lines) == word
        assert all(
            text_width(line, 13, font_weight, letter_spacing) <= 200 + 1e-6 for line in lines
        )

    def test_long_word_between_short_words(self):
        lines = wrap_text("see " + "x" * 300 + " for details", 13, 200)

        assert lines[0] == "see"
        assert lines[-1] == "details"
        assert "".join(lines) == "see" + "x" * 300 + " fordetails"

    def test_narrow_width_keeps_one_character_per_line(self):
        assert wrap_text("WWW", 20, 5) == ["W", "W", "W"]

    def test_very_long_token_wraps_quickly(self):
        token = "x" * 20000
        started = time.perf_counter()

        lines = wrap_text(token, 13, 600)

        assert time.perf_counter() - started < 1.0
        assert "".join(lines) == token
        assert len(lines) > 200


class TestWrapPreformatted:
    def test_explicit_breaks_kept(self):
        assert wrap_preformatted("One\n\nTwo", 12, 400) == ["One", "", "Two"]

    def test_none_is_one_empty_line(self):
        assert wrap_preformatted(None, 12, 400) == [""]
