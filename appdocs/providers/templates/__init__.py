"""Template path providers."""

from appdocs.providers.templates.path_provider import MappingTemplatePathProvider

__all__ = ["MappingTemplatePathProvider"]
