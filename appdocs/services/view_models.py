"""View models fed into application document templates.

One view model per document-producing state. Templates receive the
view model as ``model``.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from appdocs.models.application import Fund, LegalEntity, Review


@dataclass(frozen=True)
class PendingApplicationViewModel:
    """Fields shown on every application document."""

    reference_number: str
    state: str
    full_name: str
    applied_on: date
    support_email: str
    signature: str


@dataclass(frozen=True)
class ActivatedApplicationViewModel(PendingApplicationViewModel):
    """Adds the portfolio summary shown once an application is active.

    Attributes:
        legal_entity: Company details, or None when not a legal entity.
        portfolio_funds: All funds across all products, in product order.
        portfolio_total_amount: Sum of (amount - fees) * tax rate.
    """

    legal_entity: LegalEntity | None
    portfolio_funds: tuple[Fund, ...]
    portfolio_total_amount: Decimal


@dataclass(frozen=True)
class InReviewApplicationViewModel(ActivatedApplicationViewModel):
    """Adds the review explanation for applications under review."""

    in_review_message: str
    in_review_information: Review
