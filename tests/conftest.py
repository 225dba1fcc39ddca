"""Pytest fixtures and configuration for Proposal Studio tests."""

import os
import pytest
from typing import Any, Dict, Generator
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

# Set test environment variables before importing app
os.environ.setdefault("OPENAI_API_KEY", "")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("CREWAI_DISABLE_TELEMETRY", "true")
os.environ.setdefault("OTEL_SDK_DISABLED", "true")

from proposal_studio.core.config import Settings  # noqa: E402
from proposal_studio.models import (  # noqa: E402
    ContactSection,
    CoverSection,
    DeliverableItem,
    DeliverablesSection,
    DesignSettings,
    NextStepItem,
    NextStepsSection,
    PricingSection,
    PricingTableRow,
    Proposal,
    TermItem,
    TextSection,
    TimelineItem,
    TimelineSection,
    WhyChooseUsSection,
)


# ===========================================
# Theme Fixtures
# ===========================================

@pytest.fixture
def light_theme() -> DesignSettings:
    """Default theme on a white background."""
    return DesignSettings(company_name="Nodari Studio")


@pytest.fixture
def dark_theme() -> DesignSettings:
    """Theme with a pure black content background."""
    return DesignSettings(
        company_name="Nodari Studio",
        background_color="#000000",
        logo_url="https://cdn.example.com/logo.png",
    )


# ===========================================
# Section Fixtures
# ===========================================

@pytest.fixture
def cover_section() -> CoverSection:
    return CoverSection(id="cover", title="LET'S GROW TOGETHER.", subtitle="Brand launch 2025")


@pytest.fixture
def summary_section() -> TextSection:
    return TextSection(
        id="summary",
        type="project-summary",
        title="Project Summary",
        content="A full brand launch for Acme.\n\nIncludes identity, content and rollout.",
    )


@pytest.fixture
def deliverables_section() -> DeliverablesSection:
    return DeliverablesSection(
        id="deliverables",
        title="Project Deliverables",
        deliverable_items=[
            DeliverableItem(title="Phase 1: Foundation", items=["Market research", "Brand kit"]),
            DeliverableItem(title="Phase 2: Content", items=["12 posts", "4 Reels"]),
        ],
    )


@pytest.fixture
def timeline_section() -> TimelineSection:
    return TimelineSection(
        id="timeline",
        title="Implementation Timeline",
        timeline_items=[
            TimelineItem(period="Days 1-10", title="Foundation", description="Onboarding", items=["Kickoff"]),
            TimelineItem(period="Weeks 1-4", title="Content", description="Publishing"),
            TimelineItem(period="Month 2", title="Scale", description="Optimization"),
        ],
    )


@pytest.fixture
def pricing_table_section() -> PricingSection:
    """Pricing section from the table scenario: one service row and a total."""
    return PricingSection(
        id="pricing",
        title="Investment",
        pricing_table_rows=[
            PricingTableRow(service="Design", investment="Included"),
            PricingTableRow(service="Total Investment", investment="Rs 10,000"),
        ],
    )


@pytest.fixture
def pricing_terms_section() -> PricingSection:
    return PricingSection(
        id="pricing-terms",
        title="Terms & Conditions",
        term_items=[
            TermItem(title="Investment & Payment", content="Total Month 1: Rs. 115,000"),
            TermItem(title="Revisions", content="• 2 rounds\n• Hourly after that"),
        ],
        total_amount="Rs. 115,000",
    )


@pytest.fixture
def next_steps_section() -> NextStepsSection:
    """Seven steps; only five are ever shown."""
    return NextStepsSection(
        id="next-steps",
        title="Next Steps",
        next_step_items=[
            NextStepItem(step=f"Step {n}", description=f"Do thing {n}") for n in range(1, 8)
        ],
        items=["Timely approvals", "Product samples"],
    )


@pytest.fixture
def circular_section() -> WhyChooseUsSection:
    return WhyChooseUsSection(
        id="why",
        title="Why Choose Us?",
        use_circular_logo=True,
        company_name="ACME",
    )


@pytest.fixture
def contact_section() -> ContactSection:
    return ContactSection(
        id="contact",
        title="Contact",
        contact_name="Jane Doe",
        contact_title="Director",
        contact_phone="+1 234 567 8900",
        contact_email="hello@acme.test",
        closing_message="LOOKING FORWARD TO WORKING TOGETHER",
    )


# ===========================================
# Proposal Fixtures
# ===========================================

@pytest.fixture
def sample_proposal(
    cover_section,
    summary_section,
    deliverables_section,
    contact_section,
    light_theme
) -> Proposal:
    """Cover, summary, deliverables, contact: composes to three pages."""
    return Proposal(
        id="prop-1",
        title="Website Redesign",
        client_name="Acme Corp",
        sections=[cover_section, summary_section, deliverables_section, contact_section],
        design_settings=light_theme,
    )


@pytest.fixture
def cover_only_proposal(cover_section, light_theme) -> Proposal:
    return Proposal(
        title="Cover Only",
        client_name="Acme Corp",
        sections=[cover_section],
        design_settings=light_theme,
    )


@pytest.fixture
def proposal_payload(sample_proposal) -> Dict[str, Any]:
    """Wire (camelCase) form of the sample proposal."""
    return sample_proposal.to_wire()


# ===========================================
# Engine Fixtures
# ===========================================

@pytest.fixture
def export_settings() -> Settings:
    """Settings with short timeouts for export tests."""
    return Settings(
        EXPORT_TIMEOUT_SECONDS=2.0,
        EXPORT_RESOURCE_TIMEOUT_SECONDS=1.5,
        EXPORT_MIN_BYTES=1024,
        EXPORT_MAX_CONCURRENCY=1,
    )


@pytest.fixture
def mock_engine():
    """Mock WeasyPrint module producing a plausible PDF."""
    engine = MagicMock()
    document = engine.HTML.return_value.render.return_value
    document.pages = [MagicMock()]
    document.write_pdf.return_value = b"%PDF-1.7\n" + b"0" * 4096
    with patch("proposal_studio.integrations.pdf._load_engine", return_value=engine):
        yield engine


# ===========================================
# Client Fixtures
# ===========================================

@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Test client for the FastAPI app."""
    from proposal_studio.main import app
    with TestClient(app) as test_client:
        yield test_client


# ===========================================
# Pytest Configuration
# ===========================================

def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
