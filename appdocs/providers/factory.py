"""Provider factory functions.

Singleton collaborators built from settings, and the DocumentGenerator
wired from them.
"""

from appdocs.core.config import Settings, settings
from appdocs.providers.base import (
    ApplicationDataProvider,
    DocumentRenderer,
    TemplatePathProvider,
    ViewRenderer,
)
from appdocs.providers.data.json_file_adapter import JsonFileApplicationProvider
from appdocs.providers.data.memory_adapter import InMemoryApplicationProvider
from appdocs.providers.pdf.xhtml2pdf_adapter import XhtmlPdfRenderer
from appdocs.providers.templates.path_provider import MappingTemplatePathProvider
from appdocs.providers.views.jinja_adapter import JinjaViewRenderer
from appdocs.services.application_document import DocumentGenerator

_data_provider: ApplicationDataProvider | None = None
_template_path_provider: TemplatePathProvider | None = None
_view_renderer: ViewRenderer | None = None
_document_renderer: DocumentRenderer | None = None


def get_data_provider(config: Settings | None = None) -> ApplicationDataProvider:
    """Get or create the application data provider singleton.

    Uses the JSON data file from settings when one is configured, otherwise
    an empty in-memory provider.

    Args:
        config: Optional settings. Only used on first call.

    Returns:
        ApplicationDataProvider instance.

    Raises:
        DataSourceError: If the configured data file cannot be loaded.
    """
    global _data_provider

    if _data_provider is None:
        config = config or settings
        if config.data_file is not None:
            _data_provider = JsonFileApplicationProvider(config.data_file)
        else:
            _data_provider = InMemoryApplicationProvider()

    return _data_provider


def get_template_path_provider(
    config: Settings | None = None,
) -> TemplatePathProvider:
    """Get or create the template path provider singleton."""
    global _template_path_provider

    if _template_path_provider is None:
        config = config or settings
        _template_path_provider = MappingTemplatePathProvider(config.template_paths)

    return _template_path_provider


def get_view_renderer() -> ViewRenderer:
    """Get or create the view renderer singleton."""
    global _view_renderer

    if _view_renderer is None:
        _view_renderer = JinjaViewRenderer()

    return _view_renderer


def get_document_renderer() -> DocumentRenderer:
    """Get or create the PDF document renderer singleton."""
    global _document_renderer

    if _document_renderer is None:
        _document_renderer = XhtmlPdfRenderer()

    return _document_renderer


def build_document_generator(
    config: Settings | None = None,
    data_provider: ApplicationDataProvider | None = None,
) -> DocumentGenerator:
    """Wire a DocumentGenerator from the provider singletons.

    Args:
        config: Settings to read content and header values from.
        data_provider: Override for the data provider singleton.

    Returns:
        A new DocumentGenerator.
    """
    config = config or settings
    return DocumentGenerator(
        data_provider=data_provider or get_data_provider(config),
        template_paths=get_template_path_provider(config),
        view_renderer=get_view_renderer(),
        document_renderer=get_document_renderer(),
        configuration=config,
        header_html=config.pdf_header_html,
    )


def reset_providers() -> None:
    """Reset provider singletons.

    Used in tests to ensure isolation between test cases.
    """
    global _data_provider, _template_path_provider, _view_renderer
    global _document_renderer
    _data_provider = None
    _template_path_provider = None
    _view_renderer = None
    _document_renderer = None
