"""Collaborator abstraction layer.

Exports:
    Base interfaces and PDF option types
    Error classes for provider error handling

Factory functions live in appdocs.providers.factory.
"""

from appdocs.providers.base import (
    ApplicationDataProvider,
    DocumentRenderer,
    HeaderOptions,
    HeaderRepeat,
    PageNumbers,
    PdfOptions,
    TemplatePathProvider,
    ViewRenderer,
)
from appdocs.providers.errors import (
    DataSourceError,
    PdfRenderError,
    ProviderError,
    TemplateNotFoundError,
    ViewRenderError,
)

__all__ = [
    # Interfaces
    "ApplicationDataProvider",
    "DocumentRenderer",
    "TemplatePathProvider",
    "ViewRenderer",
    # PDF options
    "HeaderOptions",
    "HeaderRepeat",
    "PageNumbers",
    "PdfOptions",
    # Errors
    "ProviderError",
    "DataSourceError",
    "PdfRenderError",
    "TemplateNotFoundError",
    "ViewRenderError",
]
