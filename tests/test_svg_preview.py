"""Tests for the SVG serializer, the preview adapter and the print document."""

import json

import pytest

from proposal_studio.integrations.pdf import build_print_html
from proposal_studio.models import CoverSection, DesignSettings, Proposal
from proposal_studio.rendering import (
    build_preview_html,
    page_to_svg,
    preview_instructions,
    render_page,
    render_proposal,
)
from proposal_studio.rendering.instructions import Group, Rect, RenderedPage, Text
from proposal_studio.rendering.canvas import gradient


class TestPageToSvg:
    """Tests for page_to_svg."""

    def test_a4_sheet(self, cover_section):
        svg = page_to_svg(render_page([cover_section], DesignSettings()))

        assert svg.startswith("<svg ")
        assert 'width="210mm"' in svg
        assert 'height="297mm"' in svg
        assert 'viewBox="0 0 794 1123"' in svg
        assert 'data-sections="cover"' in svg

    def test_deterministic(self, sample_proposal):
        first = [page_to_svg(page) for page in render_proposal(sample_proposal)]
        second = [page_to_svg(page) for page in render_proposal(sample_proposal)]

        assert first == second

    def test_text_is_escaped(self):
        section = CoverSection(id="cover", title="R&D <Plan>")
        svg = page_to_svg(render_page([section], DesignSettings()))

        assert "R&amp;D &lt;Plan&gt;" in svg
        assert "<Plan>" not in svg

    def test_hex_alpha_becomes_opacity(self):
        page = RenderedPage(index=0, instructions=[
            Rect(x=0, y=0, width=10, height=10, fill="#0d4f4f33", stroke="#ffffff80", stroke_width=1),
        ])
        svg = page_to_svg(page)

        assert 'fill="#0d4f4f" fill-opacity="0.2"' in svg
        assert 'stroke="#ffffff" stroke-opacity="0.5"' in svg

    def test_gradients_are_shared_per_page(self):
        paint = gradient("#0d4f4f", "#1a1a2e")
        page = RenderedPage(index=3, instructions=[
            Rect(x=0, y=0, width=10, height=10, fill=paint),
            Rect(x=0, y=20, width=10, height=10, fill=paint),
        ])
        svg = page_to_svg(page)

        assert svg.count("<linearGradient") == 1
        assert svg.count('fill="url(#p3-g0)"') == 2

    def test_group_clip_and_transform(self):
        page = RenderedPage(index=0, instructions=[
            Group(
                clip={"x": 0, "y": 0, "width": 100, "height": 50},
                translate_x=10,
                translate_y=20,
                scale=0.5,
                role="circular-diagram",
                children=[Text(x=0, y=0, text="Hi", font_size=12)],
            ),
        ])
        svg = page_to_svg(page)

        assert '<clipPath id="p0-c0"><rect x="0" y="0" width="100" height="50"/></clipPath>' in svg
        assert '<g data-role="circular-diagram" clip-path="url(#p0-c0)">' in svg
        assert '<g transform="translate(10 20) scale(0.5)">' in svg

    def test_dark_logo_drawn_without_css_filters(self, contact_section, dark_theme):
        svg = page_to_svg(render_page([contact_section], dark_theme))

        assert "filter" not in svg
        assert svg.index('data-role="logo-tile"') < svg.index('data-role="contact-logo"')
        assert 'href="https://cdn.example.com/logo.png"' in svg


class TestPreview:
    """Tests for the preview adapter."""

    def test_preview_embeds_every_page(self, sample_proposal):
        html = build_preview_html(sample_proposal)

        assert html.count("<svg ") == 3
        assert 'data-scale="0.5"' in html
        assert "width: 397.0px" in html

    def test_custom_scale(self, sample_proposal):
        html = build_preview_html(sample_proposal, scale=1)

        assert "width: 794px" in html

    @pytest.mark.parametrize("scale", [0, -1])
    def test_invalid_scale(self, sample_proposal, scale):
        with pytest.raises(ValueError):
            build_preview_html(sample_proposal, scale=scale)

    def test_title_is_escaped(self, cover_section):
        proposal = Proposal(title="<Acme & Co>", sections=[cover_section])
        html = build_preview_html(proposal)

        assert "<title>&lt;Acme &amp; Co&gt; - Preview</title>" in html

    def test_empty_proposal(self):
        html = build_preview_html(Proposal(title="Empty"))

        assert "<svg " not in html

    def test_instructions_are_json(self, sample_proposal):
        stream = preview_instructions(sample_proposal)

        assert stream["pageWidth"] == 794
        assert stream["pageHeight"] == 1123
        assert [page["sectionTypes"] for page in stream["pages"]] == [
            ["cover"], ["project-summary", "deliverables"], ["contact"]
        ]
        assert stream["pages"][1]["sectionIds"] == ["summary", "deliverables"]
        group = next(item for item in stream["pages"][0]["instructions"] if item["kind"] == "group")
        assert group["children"]
        json.dumps(stream)


class TestRoundTrip:
    """Preview and print draw from identical page markup."""

    def test_preview_and_print_share_pages(self, sample_proposal, dark_theme):
        proposal = sample_proposal.model_copy(update={"design_settings": dark_theme})
        pages = [page_to_svg(page) for page in render_proposal(proposal)]

        preview_html = build_preview_html(proposal)
        print_html = build_print_html(proposal)

        for svg in pages:
            assert svg in preview_html
            assert svg in print_html

    def test_print_document_is_a4(self, sample_proposal):
        html = build_print_html(sample_proposal)

        assert "@page { size: A4; margin: 0; }" in html
        assert html.count('<div class="page">') == 3
