"""Provider error taxonomy.

Error classes raised by the collaborator adapters (data source, template
locator, view renderer, PDF renderer). The document generator never catches
these; they propagate to the caller unchanged.
"""


__all__ = [
    "ProviderError",
    "DataSourceError",
    "TemplateNotFoundError",
    "ViewRenderError",
    "PdfRenderError",
]


class ProviderError(Exception):
    """Base class for all provider errors.

    Callers can catch every collaborator failure with a single handler.
    """

    pass


class DataSourceError(ProviderError):
    """Application data could not be read or parsed."""

    pass


class TemplateNotFoundError(ProviderError):
    """Template name is not registered, or the template file is missing.

    Attributes:
        template: The template name or path that could not be resolved.
    """

    def __init__(self, template: str, message: str | None = None):
        """Initialize TemplateNotFoundError.

        Args:
            template: Template name or path that failed to resolve.
            message: Optional override for the default message.
        """
        super().__init__(message or f"Template not found: '{template}'")
        self.template = template


class ViewRenderError(ProviderError):
    """A template was found but failed to render with the given view model."""

    pass


class PdfRenderError(ProviderError):
    """Markup could not be converted to a PDF document."""

    pass
