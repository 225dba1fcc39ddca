"""Integrations module - External engines."""

from proposal_studio.integrations.pdf import PDFExporter, build_print_html, pdf_exporter

__all__ = [
    "PDFExporter",
    "build_print_html",
    "pdf_exporter",
]
