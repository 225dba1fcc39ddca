"""Tests for the section layouts and the page renderer."""

import pytest
from unittest.mock import patch

from proposal_studio.core.errors import RenderError
from proposal_studio.models import (
    DeliverableItem,
    DeliverablesSection,
    DesignSettings,
    FeatureItem,
    NextStepsSection,
    PricingMode,
    PricingSection,
    Proposal,
    SectionType,
    StatItem,
    TermsSection,
    TextSection,
    TimelineItem,
    TimelineSection,
    WhyChooseUsMode,
    WhyChooseUsSection,
)
from proposal_studio.rendering import generate_diagram, render_page, render_proposal
from proposal_studio.rendering.layouts import LAYOUTS
from proposal_studio.rendering.palette import content_palette, is_dark_background, split_alpha, tint


def _render(section, theme=None, client_name=""):
    return render_page([section], theme or DesignSettings(), client_name)


class TestPalette:
    """Tests for the dark-background rule."""

    @pytest.mark.parametrize("value", ["#000000", "#000", "000", "black", "BLACK", " Black "])
    def test_dark_spellings(self, value):
        assert is_dark_background(value)

    @pytest.mark.parametrize("value", ["#ffffff", "#111111", "#0000", "white", "", None])
    def test_not_dark(self, value):
        assert not is_dark_background(value)

    def test_dark_palette_uses_light_text(self, dark_theme):
        palette = content_palette(dark_theme)

        assert palette.is_dark
        assert palette.heading == "#ffffff"
        assert palette.page_background == "#000000"

    def test_light_palette_follows_theme(self, light_theme):
        palette = content_palette(light_theme)

        assert not palette.is_dark
        assert palette.heading == light_theme.secondary_color
        assert palette.card_border == tint(light_theme.primary_color, "33")

    def test_split_alpha(self):
        assert split_alpha("#0d4f4f33") == ("#0d4f4f", 0.2)
        assert split_alpha("#ABC") == ("#aabbcc", 1.0)
        assert split_alpha("black") == ("black", 1.0)


class TestRenderPage:
    """Tests for frames, backgrounds and error wrapping."""

    def test_content_page_gets_background(self, summary_section, dark_theme):
        page = _render(summary_section, dark_theme)
        background = page.instructions[0]

        assert background.role == "page-background"
        assert background.fill == "#000000"
        assert page.find(role="section-title")[0].color == "#ffffff"

    def test_paired_sections_share_page(self, summary_section, deliverables_section):
        page = render_page([summary_section, deliverables_section], DesignSettings())
        groups = [item for item in page.instructions if item.kind == "group"]

        assert page.section_ids == ["summary", "deliverables"]
        assert [group.role for group in groups] == ["section:project-summary", "section:deliverables"]
        assert groups[0].clip.height == pytest.approx(561.5)
        assert groups[1].clip.y == pytest.approx(561.5)
        assert len(page.find(role="page-divider")) == 1

    def test_single_section_gets_full_page(self, timeline_section):
        page = _render(timeline_section)
        group = next(item for item in page.instructions if item.kind == "group")

        assert group.clip.height == 1123
        assert not page.find(role="page-divider")

    def test_layout_failure_raises_render_error(self, timeline_section):
        def broken(section, frame, ctx):
            raise ValueError("boom")

        with patch.dict(LAYOUTS, {SectionType.TIMELINE: broken}):
            with pytest.raises(RenderError) as exc_info:
                _render(timeline_section)

        assert "boom" in exc_info.value.message

    def test_empty_sections_render(self):
        """Every section type renders with no content arrays."""
        for section_type in SectionType:
            section = Proposal.model_validate(
                {"title": "T", "sections": [{"type": section_type.value}]}
            ).sections[0]
            page = _render(section)
            assert page.instructions


class TestCover:
    def test_caption_and_title(self, cover_section):
        page = _render(cover_section, client_name="Acme Corp")

        assert page.find(role="cover-caption")[0].text == "Proposal for Acme Corp"
        assert " ".join(t.text for t in page.find(role="cover-title")) == "LET'S GROW TOGETHER."
        assert page.find(role="cover-subtitle")[0].text == "Brand launch 2025"

    def test_logos_are_optional(self, cover_section):
        theme = DesignSettings(
            logo_url="https://cdn.example.com/own.png",
            client_logo_url="https://cdn.example.com/client.png",
        )
        with_logos = _render(cover_section, theme)
        without = _render(cover_section)

        assert with_logos.find(role="own-logo")[0].href == "https://cdn.example.com/own.png"
        assert with_logos.find(role="client-logo")
        assert not without.find(kind="image")
        assert without.find(role="company-name")[0].text == "your company"


class TestDeliverables:
    def test_phases_numbered_in_order(self, deliverables_section):
        page = _render(deliverables_section)

        assert [t.text for t in page.find(role="phase-number")] == ["1", "2"]
        assert [t.text for t in page.find(role="phase-title")] == [
            "Phase 1: Foundation", "Phase 2: Content"
        ]
        assert len(page.find(role="phase-item")) == 4

    def test_compact_variant_limits_phases(self, summary_section):
        section = DeliverablesSection(
            id="many",
            title="Deliverables",
            deliverable_items=[DeliverableItem(title=f"Phase {n}") for n in range(5)],
        )
        page = render_page([summary_section, section], DesignSettings())

        assert len(page.find(role="phase-badge")) == 3


class TestTimeline:
    def test_connectors_join_consecutive_dots(self, timeline_section):
        page = _render(timeline_section)
        connectors = page.find(role="timeline-connector")
        dots = page.find(role="timeline-dot")

        assert len(dots) == 3
        assert len(connectors) == 2
        assert [(c.y1, c.y2) for c in connectors] == [
            (dots[0].cy, dots[1].cy), (dots[1].cy, dots[2].cy)
        ]

    def test_connectors_drawn_beneath_dots(self, timeline_section):
        roles = [item.role for item in _render(timeline_section).walk()]

        assert roles.index("timeline-dot") > max(
            i for i, role in enumerate(roles) if role == "timeline-connector"
        )

    def test_single_item_has_no_connector(self):
        section = TimelineSection(timeline_items=[TimelineItem(period="Week 1", title="Start")])
        page = _render(section)

        assert len(page.find(role="timeline-dot")) == 1
        assert not page.find(role="timeline-connector")

    def test_sub_items(self, timeline_section):
        page = _render(timeline_section)

        assert [t.text for t in page.find(role="timeline-subitem")] == ["Kickoff"]
        assert [t.text for t in page.find(role="period-text")] == ["Days 1-10", "Weeks 1-4", "Month 2"]


class TestWhyChooseUs:
    def test_circular_mode(self, circular_section):
        page = _render(circular_section)

        assert len(page.find(role="diagram-segment")) == 4
        assert page.find(role="diagram-company")[0].text == "ACME"
        assert [t.text for t in page.find(role="stat-value")] == ["500+", "98%", "10+", "24/7"]

    def test_default_stats_in_one_row(self, circular_section):
        cards = _render(circular_section).find(role="stat-card")

        assert len(cards) == 4
        assert len({card.y for card in cards}) == 1
        assert len({card.x for card in cards}) == 4

    def test_diagram_fits_frame(self, circular_section):
        group = _render(circular_section).find(role="circular-diagram")[0]
        diagram_view = generate_diagram("WHY CHOOSE", "ACME", "#0d4f4f", 400).view_size

        assert group.scale > 0
        assert group.translate_x >= 60
        assert group.translate_x + diagram_view * group.scale <= 794 - 60 + 1e-6

    def test_company_name_falls_back_to_theme(self):
        section = WhyChooseUsSection(use_circular_logo=True)
        page = _render(section, DesignSettings(company_name="Nodari"))

        assert page.find(role="diagram-company")[0].text == "Nodari"

    def test_custom_stats_wrap_after_four(self):
        stats = [StatItem(value=str(n), label=f"Stat {n}") for n in range(6)]
        section = WhyChooseUsSection(use_circular_logo=True, stat_items=stats)
        cards = _render(section).find(role="stat-card")

        assert len(cards) == 6
        assert len({card.y for card in cards}) == 2

    def test_image_mode(self):
        section = WhyChooseUsSection(image_url="https://cdn.example.com/why.png")
        page = _render(section)

        assert section.resolved_mode == WhyChooseUsMode.IMAGE
        assert page.find(role="section-image")[0].href == "https://cdn.example.com/why.png"
        assert not page.find(role="diagram-segment")

    def test_grid_mode(self):
        section = WhyChooseUsSection(feature_items=[
            FeatureItem(number="01", title="Speed", description="Fast delivery"),
            FeatureItem(title="Care", description="We listen"),
        ])
        page = _render(section)

        assert page.find(role="why-background")
        assert [t.text for t in page.find(role="feature-number")] == ["01", "02"]
        assert [t.text for t in page.find(role="feature-title")] == ["SPEED", "CARE"]
        assert not page.find(role="stats-heading")

    def test_explicit_mode_overrides_presence(self):
        section = WhyChooseUsSection(
            mode=WhyChooseUsMode.GRID,
            use_circular_logo=True,
            image_url="https://cdn.example.com/why.png",
        )
        page = _render(section)

        assert not page.find(role="diagram-segment")
        assert not page.find(role="section-image")
        assert page.find(role="why-background")

    def test_image_mode_without_image_falls_back(self):
        page = _render(WhyChooseUsSection(mode=WhyChooseUsMode.IMAGE))

        assert page.find(role="why-background")


class TestPricing:
    def test_table_rows(self, pricing_table_section, light_theme):
        page = _render(pricing_table_section, light_theme)
        rows = [item for item in page.walk() if item.role in ("pricing-row", "pricing-row-total")]

        assert [row.role for row in rows] == ["pricing-row", "pricing-row-total"]
        assert rows[1].fill == light_theme.primary_color
        assert [t.text for t in page.find(role="pricing-header-cell")] == [
            "Service", "Description", "Investment"
        ]
        assert [t.text for t in page.find(role="pricing-cell-total")] == [
            "Total Investment", "Rs 10,000"
        ]

    def test_default_payment_terms(self, pricing_table_section):
        page = _render(pricing_table_section)

        assert "70% payment" in " ".join(t.text for t in page.find(role="payment-terms"))

    def test_table_wins_over_terms(self, pricing_table_section, pricing_terms_section):
        section = pricing_table_section.model_copy(
            update={"term_items": pricing_terms_section.term_items, "total_amount": "Rs 1"}
        )
        page = _render(section)

        assert page.find(role="pricing-row")
        assert not page.find(role="term-title")
        assert not page.find(role="total-amount")

    def test_legacy_terms_path(self, pricing_terms_section):
        page = _render(pricing_terms_section)

        assert not page.find(role="pricing-header")
        assert [t.text for t in page.find(role="term-title")] == ["Investment & Payment", "Revisions"]
        assert page.find(role="total-amount")[0].text == "Rs. 115,000"
        assert len(page.find(role="term-border")) == 2

    def test_explicit_terms_mode(self, pricing_table_section):
        section = pricing_table_section.model_copy(update={"mode": PricingMode.TERMS})
        page = _render(section)

        assert not page.find(role="pricing-row")

    def test_no_total_box_without_amount(self):
        page = _render(PricingSection())

        assert not page.find(role="total-box")

    def test_terms_section(self, pricing_terms_section):
        section = TermsSection(term_items=pricing_terms_section.term_items, total_amount="Rs. 5")
        page = _render(section)

        assert len(page.find(role="term-title")) == 2
        assert page.find(role="total-amount")[0].text == "Rs. 5"


class TestNextSteps:
    def test_at_most_five_cards(self, next_steps_section):
        page = _render(next_steps_section)
        cards = [item for item in page.walk() if item.role in ("step-card", "step-card-emphasis")]

        assert len(cards) == 5
        assert [card.role for card in cards][-1] == "step-card-emphasis"
        assert len(page.find(role="step-card-emphasis")) == 1
        assert len(page.find(role="step-arrow")) == 4
        assert [t.text for t in page.find(role="step-number")] == ["1", "2", "3", "4", "5"]

    def test_last_visible_card_emphasized(self):
        section = NextStepsSection.model_validate(
            {"nextStepItems": [{"step": "One"}, {"step": "Two"}]}
        )
        page = _render(section)

        assert len(page.find(role="step-card")) == 1
        assert len(page.find(role="step-card-emphasis")) == 1
        assert len(page.find(role="step-arrow")) == 1

    def test_client_items(self, next_steps_section):
        page = _render(next_steps_section)

        assert [t.text for t in page.find(role="client-item")] == ["Timely approvals", "Product samples"]
        assert [t.text for t in page.find(role="subheading")] == [
            "Getting Started", "What We Need From You"
        ]


class TestContact:
    def test_contact_details(self, contact_section):
        page = _render(contact_section)

        assert page.find(role="contact-name")[0].text == "Jane Doe"
        assert page.find(role="contact-email")[0].text == "hello@acme.test"
        assert len(page.find(role="logo-placeholder")) == 4

    def test_dark_theme_sets_logo_on_tile(self, contact_section, dark_theme):
        page = _render(contact_section, dark_theme)
        tile = page.find(role="logo-tile")[0]
        logo = page.find(role="contact-logo")[0]

        assert tile.fill == "#ffffff"
        assert tile.x < logo.x and tile.x + tile.width > logo.x + logo.width
        assert tile.y < logo.y and tile.y + tile.height > logo.y + logo.height
        assert page.find(role="contact-company")[0].color == "#ffffff"

    def test_light_theme_keeps_logo(self, contact_section):
        theme = DesignSettings(logo_url="https://cdn.example.com/logo.png")
        page = _render(contact_section, theme)

        assert page.find(role="contact-logo")
        assert not page.find(role="logo-tile")


class TestRenderProposal:
    def test_pages_follow_composition(self, sample_proposal):
        pages = render_proposal(sample_proposal)

        assert [page.section_types for page in pages] == [
            ["cover"], ["project-summary", "deliverables"], ["contact"]
        ]
        assert [page.index for page in pages] == [0, 1, 2]

    def test_text_section_body(self):
        section = TextSection(type="approach", title="Approach", content="Line one\nLine two")
        page = _render(section)

        assert [t.text for t in page.find(role="body-text")] == ["Line one", "Line two"]
