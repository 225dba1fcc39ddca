"""
Tests for the PDF export pipeline.

Most tests replace WeasyPrint with a mock. TestWeasyPrintExport drives the
real engine and is skipped when WeasyPrint or its native libraries cannot be
loaded. To run it, install the package with its test extra and Pango:

    apt-get install libpango-1.0-0 libpangoft2-1.0-0 libharfbuzz0b  # Debian/Ubuntu
    brew install pango                                              # macOS
    pytest -m integration tests/test_export.py

The print document links the Google Fonts stylesheet. Offline, that fetch
fails after EXPORT_RESOURCE_TIMEOUT_SECONDS and the fallback fonts are used.
"""

import os
import sys
import tempfile
import threading
import time

import pytest
from unittest.mock import patch

from proposal_studio.core.config import Settings
from proposal_studio.core.errors import (
    ExportContentError,
    ExportEngineUnavailable,
    ExportTimeout,
    RenderError,
)
from proposal_studio.integrations.pdf import PDFExporter, _load_engine
from proposal_studio.models import SectionType
from proposal_studio.rendering.layouts import LAYOUTS

REAL_MKDTEMP = tempfile.mkdtemp


def _weasyprint_available() -> bool:
    try:
        import weasyprint  # noqa: F401
    except (ImportError, OSError):
        return False
    return True


@pytest.fixture
def exporter(export_settings) -> PDFExporter:
    exporter = PDFExporter()
    exporter._settings = export_settings
    return exporter


class TestPDFExporter:
    """Tests for PDFExporter with a mocked engine."""

    def test_export_success(self, exporter, mock_engine, sample_proposal):
        document = exporter.export(sample_proposal)

        assert document.filename == "Website_Redesign.pdf"
        assert document.content_type == "application/pdf"
        assert document.content.startswith(b"%PDF")
        assert document.page_count == 3
        assert document.size > 1024

    def test_engine_receives_print_html(self, exporter, mock_engine, sample_proposal):
        exporter.export(sample_proposal)

        kwargs = mock_engine.HTML.call_args.kwargs
        assert "@page { size: A4; margin: 0; }" in kwargs["string"]
        assert kwargs["string"].count("<svg ") == 3
        render_kwargs = mock_engine.HTML.return_value.render.call_args.kwargs
        assert render_kwargs["cache"].startswith(tempfile.gettempdir())

    def test_resource_fetch_uses_timeout(self, exporter, mock_engine, sample_proposal):
        exporter.export(sample_proposal)

        url_fetcher = mock_engine.HTML.call_args.kwargs["url_fetcher"]
        url_fetcher("https://cdn.example.com/logo.png")
        mock_engine.default_url_fetcher.assert_called_once_with(
            "https://cdn.example.com/logo.png", timeout=1.5
        )

    def test_filename_sanitized(self, exporter, mock_engine, sample_proposal):
        proposal = sample_proposal.model_copy(update={"title": "Q3 / Acme: Rebrand!"})

        assert exporter.export(proposal).filename == "Q3___Acme__Rebrand_.pdf"

    def test_too_small_output(self, exporter, mock_engine, sample_proposal):
        mock_engine.HTML.return_value.render.return_value.write_pdf.return_value = b"%PDF"

        with pytest.raises(ExportContentError):
            exporter.export(sample_proposal)

    def test_engine_failure_is_content_error(self, exporter, mock_engine, sample_proposal):
        mock_engine.HTML.return_value.render.side_effect = RuntimeError("bad markup")

        with pytest.raises(ExportContentError) as exc_info:
            exporter.export(sample_proposal)

        assert "bad markup" in exc_info.value.message

    def test_engine_unavailable(self, exporter, sample_proposal):
        with patch(
            "proposal_studio.integrations.pdf._load_engine",
            side_effect=ExportEngineUnavailable("PDF engine unavailable: no cairo"),
        ):
            with pytest.raises(ExportEngineUnavailable):
                exporter.export(sample_proposal)

    def test_load_engine_wraps_import_error(self):
        with patch.dict(sys.modules, {"weasyprint": None}):
            with pytest.raises(ExportEngineUnavailable):
                _load_engine()

    def test_timeout(self, mock_engine, sample_proposal):
        exporter = PDFExporter()
        exporter._settings = Settings(EXPORT_TIMEOUT_SECONDS=0.1)

        def slow_write():
            time.sleep(1)
            return b"%PDF" + b"0" * 4096

        mock_engine.HTML.return_value.render.return_value.write_pdf.side_effect = slow_write

        with pytest.raises(ExportTimeout):
            exporter.export(sample_proposal)

    def test_timed_out_engine_keeps_its_slot(self, mock_engine, sample_proposal):
        """A timed-out engine holds its slot and scratch directory until it returns."""
        exporter = PDFExporter()
        exporter._settings = Settings(
            EXPORT_TIMEOUT_SECONDS=0.2, EXPORT_MAX_CONCURRENCY=1, EXPORT_MIN_BYTES=1024
        )
        document = mock_engine.HTML.return_value.render.return_value
        release_first = threading.Event()
        lock = threading.Lock()
        active = []
        peak = []
        cache_dirs = []

        def render(cache):
            with lock:
                cache_dirs.append(cache)
                active.append(cache)
                peak.append(len(active))
            try:
                release_first.wait(5)
                return document
            finally:
                with lock:
                    active.remove(cache)

        mock_engine.HTML.return_value.render.side_effect = render

        with pytest.raises(ExportTimeout):
            exporter.export(sample_proposal)
        assert os.path.isdir(cache_dirs[0])

        with pytest.raises(ExportTimeout) as exc_info:
            exporter.export(sample_proposal)
        assert "free export slot" in exc_info.value.message
        assert len(cache_dirs) == 1

        release_first.set()
        assert exporter.slots.acquire(timeout=5)
        exporter.slots.release()
        assert not os.path.exists(cache_dirs[0])

        assert exporter.export(sample_proposal).page_count == 3
        assert max(peak) == 1

    def test_render_error_propagates(self, exporter, mock_engine, sample_proposal):
        def broken(section, frame, ctx):
            raise ValueError("boom")

        with patch.dict(LAYOUTS, {SectionType.DELIVERABLES: broken}):
            with pytest.raises(RenderError):
                exporter.export(sample_proposal)

        mock_engine.HTML.assert_not_called()

    def test_scratch_directory_removed_on_failure(self, exporter, mock_engine, sample_proposal):
        created = []

        def record_mkdtemp(*args, **kwargs):
            path = REAL_MKDTEMP(*args, **kwargs)
            created.append(path)
            return path

        mock_engine.HTML.return_value.render.side_effect = RuntimeError("bad markup")
        with patch("proposal_studio.integrations.pdf.tempfile.mkdtemp", side_effect=record_mkdtemp):
            with pytest.raises(ExportContentError):
                exporter.export(sample_proposal)

        assert len(created) == 1
        assert not os.path.exists(created[0])

    def test_slot_released_after_failure(self, exporter, mock_engine, sample_proposal):
        """With one slot, repeated failures must not starve later exports."""
        render = mock_engine.HTML.return_value.render
        render.side_effect = RuntimeError("bad markup")
        for _ in range(3):
            with pytest.raises(ExportContentError):
                exporter.export(sample_proposal)

        render.side_effect = None
        assert exporter.export(sample_proposal).page_count == 3

    def test_export_async(self, exporter, mock_engine, sample_proposal):
        import asyncio

        document = asyncio.run(exporter.export_async(sample_proposal))

        assert document.filename == "Website_Redesign.pdf"


@pytest.mark.integration
@pytest.mark.skipif(
    not _weasyprint_available(), reason="WeasyPrint or its Pango libraries are not installed"
)
class TestWeasyPrintExport:
    """Export through the real engine."""

    @pytest.mark.slow
    def test_cover_only_proposal(self, cover_only_proposal):
        exporter = PDFExporter()
        exporter._settings = Settings(EXPORT_TIMEOUT_SECONDS=120, EXPORT_RESOURCE_TIMEOUT_SECONDS=2)

        document = exporter.export(cover_only_proposal)

        assert document.content.startswith(b"%PDF")
        assert document.size > 1024
        assert document.page_count == 1
        assert document.filename == "Cover_Only.pdf"
