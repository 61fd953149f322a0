"""xhtml2pdf document renderer.

Converts rendered HTML documents to PDF with xhtml2pdf (pisa), which lays
pages out with ReportLab. PdfOptions become xhtml2pdf page templates:

- The header markup sits in a static frame at the top of the page. With
  HeaderRepeat.FIRST_PAGE_ONLY the document switches to a header-less
  template after the first page.
- PageNumbers.NUMERIC adds a footer static frame holding the page number.
"""

import io
import re

import structlog
from reportlab.lib.pagesizes import A4
from reportlab.platypus.doctemplate import LayoutError
from xhtml2pdf import pisa

from appdocs.providers.base import (
    DocumentRenderer,
    HeaderRepeat,
    PageNumbers,
    PdfOptions,
)
from appdocs.providers.errors import PdfRenderError

logger = structlog.get_logger()

HEADER_FRAME_ID = "appdocs-page-header"
FOOTER_FRAME_ID = "appdocs-page-footer"
LATER_PAGES_TEMPLATE = "later_pages"

_PAGE_MARGINS = "2.5cm 2cm 2cm 2cm"
_HEADER_FRAME = "top: 1cm; left: 2cm; right: 2cm; height: 1cm;"
_FOOTER_FRAME = "bottom: 0.8cm; left: 2cm; right: 2cm; height: 0.8cm;"
_FRAME_STYLES = (
    f"#{HEADER_FRAME_ID} {{ font-size: 8pt; color: #444444; }}\n"
    f"#{FOOTER_FRAME_ID} {{ font-size: 8pt; text-align: right; }}\n"
)

_HEAD_CLOSE_RE = re.compile(r"</head\s*>", re.IGNORECASE)
_BODY_OPEN_RE = re.compile(r"<body\b[^>]*>", re.IGNORECASE)


# =============================================================================
# Page Templates
# =============================================================================


def _page_rule(
    name: str | None,
    pagesize: tuple[float, float],
    *,
    header: bool,
    page_numbers: bool,
) -> str:
    prefix = name or "first"
    frames = []
    if header:
        frames.append(
            f"@frame {prefix}_header {{ -pdf-frame-content: {HEADER_FRAME_ID}; "
            f"{_HEADER_FRAME} }}"
        )
    if page_numbers:
        frames.append(
            f"@frame {prefix}_footer {{ -pdf-frame-content: {FOOTER_FRAME_ID}; "
            f"{_FOOTER_FRAME} }}"
        )

    width, height = pagesize
    selector = f"@page {name}" if name else "@page"
    return (
        f"{selector} {{\n"
        f"  size: {width:.2f}pt {height:.2f}pt;\n"
        f"  margin: {_PAGE_MARGINS};\n"
        + "".join(f"  {frame}\n" for frame in frames)
        + "}\n"
    )


def page_template_css(options: PdfOptions, pagesize: tuple[float, float] = A4) -> str:
    """Build the @page rules for the given options.

    The unnamed template applies to the first page. A second template,
    LATER_PAGES_TEMPLATE, is defined only for first-page-only headers.
    """
    header = options.header_options
    numbered = options.page_numbers is PageNumbers.NUMERIC

    css = _page_rule(None, pagesize, header=header is not None, page_numbers=numbered)
    if header is not None and header.header_repeat is HeaderRepeat.FIRST_PAGE_ONLY:
        css += _page_rule(
            LATER_PAGES_TEMPLATE, pagesize, header=False, page_numbers=numbered
        )
    return css + _FRAME_STYLES


def prepare_markup(
    markup: str,
    options: PdfOptions,
    pagesize: tuple[float, float] = A4,
) -> str:
    """Add page templates and frame content to a rendered document.

    The stylesheet goes before </head> when the document has one. The frame
    content goes right after <body ...>, or in front of a bare fragment.
    """
    style = f"<style>\n{page_template_css(options, pagesize)}</style>\n"
    header = options.header_options

    prologue = []
    if header is not None:
        prologue.append(f'<div id="{HEADER_FRAME_ID}">{header.header_html}</div>')
    if options.page_numbers is PageNumbers.NUMERIC:
        prologue.append(
            f'<div id="{FOOTER_FRAME_ID}"><pdf:pagenumber></pdf:pagenumber></div>'
        )
    if header is not None and header.header_repeat is HeaderRepeat.FIRST_PAGE_ONLY:
        prologue.append(
            f'<pdf:nexttemplate name="{LATER_PAGES_TEMPLATE}"></pdf:nexttemplate>'
        )
    frames = "\n".join(prologue) + "\n"

    head_close = _HEAD_CLOSE_RE.search(markup)
    if head_close is not None:
        markup = markup[: head_close.start()] + style + markup[head_close.start() :]
    else:
        frames = style + frames

    body_open = _BODY_OPEN_RE.search(markup)
    if body_open is None:
        return frames + markup
    return markup[: body_open.end()] + "\n" + frames + markup[body_open.end() :]


# =============================================================================
# Renderer
# =============================================================================


class XhtmlPdfRenderer(DocumentRenderer):
    """Renders HTML documents to PDF with xhtml2pdf."""

    def __init__(self, pagesize: tuple[float, float] = A4) -> None:
        self._pagesize = pagesize

    def render_pdf(self, markup: str, options: PdfOptions) -> bytes:
        """Render markup to PDF bytes.

        Raises:
            PdfRenderError: If the markup is empty or xhtml2pdf reports
                errors while laying it out.
        """
        if not markup.strip():
            raise PdfRenderError("Markup is empty")

        source = prepare_markup(markup, options, self._pagesize)
        buffer = io.BytesIO()

        try:
            status = pisa.CreatePDF(
                io.BytesIO(source.encode("utf-8")),
                dest=buffer,
                encoding="utf-8",
            )
        except LayoutError as e:
            logger.error("pdf_render_failed", error=str(e), error_type="LayoutError")
            raise PdfRenderError(f"Failed to lay out PDF: {e}") from e

        if status.err:
            logger.error("pdf_render_failed", error_count=status.err)
            raise PdfRenderError(
                f"xhtml2pdf reported {status.err} error(s) rendering the document"
            )

        pdf_bytes = buffer.getvalue()
        logger.info(
            "pdf_render_complete",
            size_bytes=len(pdf_bytes),
            page_numbers=options.page_numbers.value,
        )
        return pdf_bytes
