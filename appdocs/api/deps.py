"""Shared dependencies for API endpoints.

Endpoints receive their DocumentGenerator and settings through these
dependencies; tests override them with app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends

from appdocs.core.config import Settings, settings
from appdocs.providers.factory import build_document_generator
from appdocs.services.application_document import DocumentGenerator


def get_settings() -> Settings:
    """Return the process-wide settings."""
    return settings


def get_document_generator(
    config: Annotated[Settings, Depends(get_settings)],
) -> DocumentGenerator:
    """Build a DocumentGenerator wired from the provider singletons."""
    return build_document_generator(config)


AppSettings = Annotated[Settings, Depends(get_settings)]
DocumentGeneratorDep = Annotated[DocumentGenerator, Depends(get_document_generator)]
