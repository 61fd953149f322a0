"""Application domain models.

An Application is the entity a document is generated for: the applicant,
the lifecycle state, the products (each holding funds) and, while the
application is in review, the review record explaining why.

All types are frozen dataclasses. Document generation only reads them.
"""

import uuid
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


class ApplicationState(Enum):
    """Lifecycle state of an application.

    Only Pending, Activated and InReview produce documents. The remaining
    states exist in the data but resolve to "no document".
    """

    PENDING = "Pending"
    ACTIVATED = "Activated"
    IN_REVIEW = "InReview"
    CLOSED = "Closed"
    WITHDRAWN = "Withdrawn"

    @property
    def description(self) -> str:
        """Human-readable label shown on documents."""
        return _STATE_DESCRIPTIONS[self]


_STATE_DESCRIPTIONS: dict[ApplicationState, str] = {
    ApplicationState.PENDING: "Pending",
    ApplicationState.ACTIVATED: "Activated",
    ApplicationState.IN_REVIEW: "In Review",
    ApplicationState.CLOSED: "Closed",
    ApplicationState.WITHDRAWN: "Withdrawn",
}


@dataclass(frozen=True)
class Person:
    """The applicant."""

    first_name: str
    surname: str


@dataclass(frozen=True)
class LegalEntity:
    """Company details for applications made on behalf of a legal entity."""

    name: str
    registration_number: str
    vat_number: str | None = None


@dataclass(frozen=True)
class Fund:
    """A fund held within a product.

    Attributes:
        name: Display name of the fund.
        amount: Invested amount.
        fees: Fees charged against the amount (expected to be <= amount,
            not enforced).
    """

    name: str
    amount: Decimal
    fees: Decimal


@dataclass(frozen=True)
class Product:
    """A product on the application, owning an ordered collection of funds."""

    name: str
    funds: tuple[Fund, ...] = ()


@dataclass(frozen=True)
class Review:
    """Review record attached to an application in review.

    Attributes:
        reason: Free-text reason the application was placed in review.
        reviewed_on: Date the review was opened, if recorded.
    """

    reason: str
    reviewed_on: date | None = None


@dataclass(frozen=True)
class Application:
    """An application and everything needed to produce its document.

    Attributes:
        id: Unique identifier.
        state: Current lifecycle state.
        reference_number: Customer-facing reference.
        person: The applicant.
        application_date: Date the application was made.
        is_legal_entity: True if applying on behalf of a company.
        legal_entity: Company details; only meaningful when is_legal_entity.
        products: Ordered products, each with ordered funds.
        current_review: Review record; present while state is IN_REVIEW.
    """

    id: uuid.UUID
    state: ApplicationState
    reference_number: str
    person: Person
    application_date: date
    is_legal_entity: bool = False
    legal_entity: LegalEntity | None = None
    products: tuple[Product, ...] = field(default_factory=tuple)
    current_review: Review | None = None
