"""PDF export for proposals."""

import asyncio
import logging
import shutil
import tempfile
import threading
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout
from typing import List, Optional

from jinja2 import Template

from proposal_studio.core.config import GOOGLE_FONTS_URL, get_settings, sanitize_filename
from proposal_studio.core.errors import (
    ExportContentError,
    ExportEngineUnavailable,
    ExportError,
    ExportTimeout,
)
from proposal_studio.models import ExportedDocument, Proposal
from proposal_studio.rendering import RenderedPage, page_to_svg, render_proposal

logger = logging.getLogger(__name__)

PRINT_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{{ title | e }}</title>
    <link rel="stylesheet" href="{{ fonts_url }}">
    <style>
        @page { size: A4; margin: 0; }
        html, body { margin: 0; padding: 0; }
        * { -webkit-print-color-adjust: exact; print-color-adjust: exact; }
        .page {
            width: 210mm;
            height: 297mm;
            overflow: hidden;
            page-break-after: always;
            break-after: page;
        }
        .page:last-child { page-break-after: auto; break-after: auto; }
        .page > svg { display: block; }
    </style>
</head>
<body>
{% for page in pages %}
    <div class="page">{{ page }}</div>
{% endfor %}
</body>
</html>
"""


def _print_html(title: str, pages: List[RenderedPage]) -> str:
    return Template(PRINT_TEMPLATE).render(
        title=title,
        fonts_url=GOOGLE_FONTS_URL,
        pages=[page_to_svg(page) for page in pages],
    )


def build_print_html(proposal: Proposal) -> str:
    """
    Build the static print document.

    One A4 sheet per composed page, zero margins, each sheet holding the same
    SVG the preview shows.
    """
    return _print_html(proposal.title, render_proposal(proposal))


def _load_engine():
    """Import WeasyPrint; its native libraries are loaded at import time."""
    try:
        import weasyprint
    except (ImportError, OSError) as e:
        logger.error(f"PDF engine unavailable: {e}")
        raise ExportEngineUnavailable(f"PDF engine unavailable: {e}") from e
    return weasyprint


class PDFExporter:
    """
    Service for exporting proposals to PDF.

    Uses WeasyPrint for rendering. Every export gets its own engine scope
    (document, image cache directory, worker thread, concurrency slot). The
    scope is released when the engine returns, so an export that timed out
    keeps holding it until its worker finishes.
    """

    def __init__(self):
        """Initialize exporter."""
        self._settings = None
        self._slots = None
        self._slots_lock = threading.Lock()

    @property
    def settings(self):
        """Lazy load settings."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def slots(self) -> threading.BoundedSemaphore:
        """Concurrency bound, created on first use."""
        with self._slots_lock:
            if self._slots is None:
                self._slots = threading.BoundedSemaphore(self.settings.EXPORT_MAX_CONCURRENCY)
            return self._slots

    def export(self, proposal: Proposal) -> ExportedDocument:
        """
        Export a proposal to PDF.

        Args:
            proposal: Proposal to export

        Returns:
            ExportedDocument with the PDF bytes and a sanitized filename

        Raises:
            ExportEngineUnavailable: WeasyPrint cannot be loaded
            ExportTimeout: The document did not settle in time
            ExportContentError: Rendering failed or produced a near-empty file
            RenderError: A section layout failed
        """
        logger.info(f"Starting PDF export for '{proposal.title}'")

        pages = render_proposal(proposal)
        html = _print_html(proposal.title, pages)
        content = self._render(html, len(pages))

        if len(content) < self.settings.EXPORT_MIN_BYTES:
            logger.error(f"PDF export produced only {len(content)} bytes")
            raise ExportContentError(
                f"Generated PDF is too small ({len(content)} bytes)"
            )

        document = ExportedDocument(
            filename=sanitize_filename(proposal.title),
            content=content,
            page_count=len(pages),
        )
        logger.info(
            f"Generated PDF: {document.filename} - "
            f"{document.page_count} page(s), {document.size} bytes"
        )
        return document

    async def export_async(self, proposal: Proposal) -> ExportedDocument:
        """Export in a worker thread so the event loop stays free."""
        return await asyncio.to_thread(self.export, proposal)

    def _render(self, html: str, expected_pages: int) -> bytes:
        """Render the print document inside a bounded, per-call engine scope."""
        timeout = self.settings.EXPORT_TIMEOUT_SECONDS
        if not self.slots.acquire(timeout=timeout):
            raise ExportTimeout("Timed out waiting for a free export slot")

        cache_dir = None
        detached = False
        try:
            weasyprint = _load_engine()
            cache_dir = tempfile.mkdtemp(prefix="proposal-export-")
            executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="pdf-export")
            future = executor.submit(self._write_pdf, weasyprint, html, cache_dir, expected_pages)
            executor.shutdown(wait=False)
            try:
                return future.result(timeout=timeout)
            except FutureTimeout as e:
                # The engine cannot be interrupted: its slot and scratch
                # directory stay held until the worker returns.
                detached = True
                future.add_done_callback(lambda _: self._release_scope(cache_dir))
                logger.error(f"PDF export timed out after {timeout}s")
                raise ExportTimeout(f"PDF export timed out after {timeout}s") from e
            except ExportError:
                raise
            except Exception as e:
                logger.error(f"Failed to generate PDF: {e}")
                raise ExportContentError(f"Failed to generate PDF: {e}") from e
        finally:
            if not detached:
                self._release_scope(cache_dir)

    def _release_scope(self, cache_dir: Optional[str]) -> None:
        """Remove the engine's scratch directory, then free its slot."""
        if cache_dir is not None:
            shutil.rmtree(cache_dir, ignore_errors=True)
        self.slots.release()

    def _write_pdf(self, weasyprint, html: str, cache_dir: str, expected_pages: int) -> bytes:
        resource_timeout = self.settings.EXPORT_RESOURCE_TIMEOUT_SECONDS

        def url_fetcher(url: str):
            return weasyprint.default_url_fetcher(url, timeout=resource_timeout)

        document = weasyprint.HTML(string=html, url_fetcher=url_fetcher).render(cache=cache_dir)
        if len(document.pages) != expected_pages:
            logger.warning(
                f"PDF has {len(document.pages)} page(s), expected {expected_pages}"
            )
        return document.write_pdf()


# Singleton instance
pdf_exporter = PDFExporter()
