"""Pydantic schemas for application data files."""

from appdocs.schemas.application import (
    ApplicationDataFile,
    ApplicationRecord,
    FundRecord,
    LegalEntityRecord,
    PersonRecord,
    ProductRecord,
    ReviewRecord,
)

__all__ = [
    "ApplicationDataFile",
    "ApplicationRecord",
    "FundRecord",
    "LegalEntityRecord",
    "PersonRecord",
    "ProductRecord",
    "ReviewRecord",
]
