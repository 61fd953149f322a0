"""Application record schemas.

Validates application records read from JSON data files and converts them
into the frozen domain models in appdocs.models.application.

Document shape:
    {"applications": [ApplicationRecord, ...]}
"""

import uuid
from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from appdocs.models.application import (
    Application,
    ApplicationState,
    Fund,
    LegalEntity,
    Person,
    Product,
    Review,
)


class PersonRecord(BaseModel):
    """Applicant name."""

    model_config = ConfigDict(extra="forbid")

    first_name: str
    surname: str

    def to_domain(self) -> Person:
        return Person(first_name=self.first_name, surname=self.surname)


class LegalEntityRecord(BaseModel):
    """Company details."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    registration_number: str = Field(..., min_length=1)
    vat_number: str | None = None

    def to_domain(self) -> LegalEntity:
        return LegalEntity(
            name=self.name,
            registration_number=self.registration_number,
            vat_number=self.vat_number,
        )


class FundRecord(BaseModel):
    """A fund with its invested amount and fees."""

    model_config = ConfigDict(extra="forbid")

    name: str
    amount: Decimal
    fees: Decimal = Decimal(0)

    def to_domain(self) -> Fund:
        return Fund(name=self.name, amount=self.amount, fees=self.fees)


class ProductRecord(BaseModel):
    """A product and its funds, in display order."""

    model_config = ConfigDict(extra="forbid")

    name: str
    funds: list[FundRecord] = Field(default_factory=list)

    def to_domain(self) -> Product:
        return Product(
            name=self.name,
            funds=tuple(fund.to_domain() for fund in self.funds),
        )


class ReviewRecord(BaseModel):
    """Review reason for an application in review."""

    model_config = ConfigDict(extra="forbid")

    reason: str
    reviewed_on: date | None = None

    def to_domain(self) -> Review:
        return Review(reason=self.reason, reviewed_on=self.reviewed_on)


class ApplicationRecord(BaseModel):
    """A single application as stored in a data file.

    Attributes:
        id: Unique identifier.
        state: Lifecycle state value (e.g., "Pending", "InReview").
        reference_number: Customer-facing reference.
        person: Applicant name.
        application_date: Date applied (ISO 8601).
        is_legal_entity: Whether the applicant is a company.
        legal_entity: Company details (kept even when the flag is false).
        products: Products in display order.
        current_review: Review record, if any.
    """

    model_config = ConfigDict(extra="forbid")

    id: uuid.UUID
    state: ApplicationState
    reference_number: str = Field(..., min_length=1)
    person: PersonRecord
    application_date: date
    is_legal_entity: bool = False
    legal_entity: LegalEntityRecord | None = None
    products: list[ProductRecord] = Field(default_factory=list)
    current_review: ReviewRecord | None = None

    def to_domain(self) -> Application:
        return Application(
            id=self.id,
            state=self.state,
            reference_number=self.reference_number,
            person=self.person.to_domain(),
            application_date=self.application_date,
            is_legal_entity=self.is_legal_entity,
            legal_entity=self.legal_entity.to_domain() if self.legal_entity else None,
            products=tuple(product.to_domain() for product in self.products),
            current_review=(
                self.current_review.to_domain() if self.current_review else None
            ),
        )


class ApplicationDataFile(BaseModel):
    """Top-level JSON data file."""

    model_config = ConfigDict(extra="forbid")

    applications: list[ApplicationRecord] = Field(default_factory=list)
