"""Abstract base classes and types for document generation collaborators.

The document generator depends only on these interfaces:

- ApplicationDataProvider: find an application by id
- TemplatePathProvider: map a template name to a path fragment
- ViewRenderer: render a template path + view model to markup
- DocumentRenderer: convert markup + PdfOptions to PDF bytes

Concrete adapters live in the data/, templates/, views/ and pdf/
subpackages; factory.py wires them from settings.
"""

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any

from appdocs.models.application import Application


class PageNumbers(Enum):
    """Page numbering mode for rendered PDFs."""

    NONE = "none"
    NUMERIC = "numeric"


class HeaderRepeat(Enum):
    """Which pages carry the header markup."""

    FIRST_PAGE_ONLY = "first_page_only"
    ALL_PAGES = "all_pages"


@dataclass(frozen=True)
class HeaderOptions:
    """Header configuration for rendered PDFs.

    Attributes:
        header_repeat: Which pages show the header.
        header_html: Inline markup drawn as the header.
    """

    header_repeat: HeaderRepeat
    header_html: str


@dataclass(frozen=True)
class PdfOptions:
    """Options passed to a DocumentRenderer.

    Attributes:
        page_numbers: Page numbering mode.
        header_options: Header configuration, or None for no header.
    """

    page_numbers: PageNumbers = PageNumbers.NONE
    header_options: HeaderOptions | None = None


class ApplicationDataProvider(ABC):
    """Source of Application entities."""

    @abstractmethod
    def find_application(self, application_id: uuid.UUID) -> Application | None:
        """Look up an application by identifier.

        Args:
            application_id: Identifier to match by equality.

        Returns:
            The matching Application, or None if no application has that id.

        Raises:
            DataIntegrityError: If more than one application has that id.
        """
        ...


class TemplatePathProvider(ABC):
    """Maps template names to path fragments."""

    @abstractmethod
    def get(self, name: str) -> str:
        """Resolve a template name.

        Args:
            name: Template name (e.g., "PendingApplication").

        Returns:
            Path fragment to append to a base URI.

        Raises:
            TemplateNotFoundError: If the name is not registered.
        """
        ...


class ViewRenderer(ABC):
    """Renders a template with a view model into markup."""

    @abstractmethod
    def render(self, full_path: str, view_model: Any) -> str:
        """Render the template at full_path.

        Args:
            full_path: Base URI concatenated with the template path fragment.
            view_model: Object exposed to the template as ``model``.

        Returns:
            Rendered markup.

        Raises:
            TemplateNotFoundError: If no template exists at full_path.
            ViewRenderError: If rendering fails.
        """
        ...


class DocumentRenderer(ABC):
    """Converts markup into a PDF document."""

    @abstractmethod
    def render_pdf(self, markup: str, options: PdfOptions) -> bytes:
        """Render markup to PDF.

        Args:
            markup: Markup produced by a ViewRenderer.
            options: Page numbering and header options.

        Returns:
            PDF file as bytes.

        Raises:
            PdfRenderError: If the markup cannot be laid out.
        """
        ...
