"""Domain models for application documents.

All models are exported from this module for convenient imports:
    from appdocs.models import Application, ApplicationState, Fund, ...
"""

from appdocs.models.application import (
    Application,
    ApplicationState,
    Fund,
    LegalEntity,
    Person,
    Product,
    Review,
)

__all__ = [
    "Application",
    "ApplicationState",
    "Fund",
    "LegalEntity",
    "Person",
    "Product",
    "Review",
]
