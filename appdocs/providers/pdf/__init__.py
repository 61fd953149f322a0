"""PDF document renderers."""

from appdocs.providers.pdf.xhtml2pdf_adapter import XhtmlPdfRenderer

__all__ = ["XhtmlPdfRenderer"]
