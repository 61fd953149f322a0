"""Shared fixtures for application document tests.

Provides sample applications in each state, isolated settings that ignore
the environment's .env file, and provider singleton resets.
"""

import json
import uuid
from collections.abc import Iterator
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from appdocs.core.config import Settings
from appdocs.models.application import (
    Application,
    ApplicationState,
    Fund,
    LegalEntity,
    Person,
    Product,
    Review,
)
from appdocs.providers import factory

PENDING_ID = uuid.UUID("00000000-0000-0000-0000-00000000000a")
ACTIVATED_ID = uuid.UUID("00000000-0000-0000-0000-00000000000b")
IN_REVIEW_ID = uuid.UUID("00000000-0000-0000-0000-00000000000c")
CLOSED_ID = uuid.UUID("00000000-0000-0000-0000-00000000000d")


def _products() -> tuple[Product, ...]:
    return (
        Product(
            name="Retirement Annuity",
            funds=(Fund(name="Balanced Fund", amount=Decimal("100"), fees=Decimal("10")),),
        ),
        Product(
            name="Tax-Free Savings",
            funds=(Fund(name="Equity Fund", amount=Decimal("50"), fees=Decimal("5")),),
        ),
    )


@pytest.fixture
def document_settings() -> Settings:
    """Settings with fixed document content, independent of .env."""
    return Settings(
        _env_file=None,
        support_email="help@example.com",
        signature="The Applications Team",
        tax_rate=Decimal("0.2"),
    )


@pytest.fixture
def pending_application() -> Application:
    """Pending application for an individual."""
    return Application(
        id=PENDING_ID,
        state=ApplicationState.PENDING,
        reference_number="APP-0001",
        person=Person(first_name="Thandi", surname="Nkosi"),
        application_date=date(2026, 3, 14),
    )


@pytest.fixture
def activated_application() -> Application:
    """Activated application for a legal entity with two products."""
    return Application(
        id=ACTIVATED_ID,
        state=ApplicationState.ACTIVATED,
        reference_number="APP-0002",
        person=Person(first_name="Pieter", surname="van Wyk"),
        application_date=date(2026, 2, 1),
        is_legal_entity=True,
        legal_entity=LegalEntity(
            name="Van Wyk Holdings", registration_number="2019/123456/07"
        ),
        products=_products(),
    )


@pytest.fixture
def in_review_application() -> Application:
    """Application held for address verification."""
    return Application(
        id=IN_REVIEW_ID,
        state=ApplicationState.IN_REVIEW,
        reference_number="APP-0003",
        person=Person(first_name="Lerato", surname="Dlamini"),
        application_date=date(2026, 1, 20),
        products=_products(),
        current_review=Review(
            reason="Outstanding address proof required",
            reviewed_on=date(2026, 1, 22),
        ),
    )


@pytest.fixture
def closed_application() -> Application:
    """Application in a state that produces no document."""
    return Application(
        id=CLOSED_ID,
        state=ApplicationState.CLOSED,
        reference_number="APP-0004",
        person=Person(first_name="Sipho", surname="Mokoena"),
        application_date=date(2025, 11, 5),
    )


@pytest.fixture(autouse=True)
def reset_provider_singletons() -> Iterator[None]:
    """Reset provider singletons so tests never share collaborators."""
    factory.reset_providers()
    yield
    factory.reset_providers()


@pytest.fixture
def application_data_file(tmp_path: Path) -> Path:
    """JSON data file holding one application in each sample state."""
    funds = [
        {"name": "Balanced Fund", "amount": "100", "fees": "10"},
        {"name": "Equity Fund", "amount": "50", "fees": "5"},
    ]
    person = {"first_name": "Thandi", "surname": "Nkosi"}
    records = [
        {
            "id": str(PENDING_ID),
            "state": "Pending",
            "reference_number": "APP-0001",
            "person": person,
            "application_date": "2026-03-14",
        },
        {
            "id": str(ACTIVATED_ID),
            "state": "Activated",
            "reference_number": "APP-0002",
            "person": person,
            "application_date": "2026-02-01",
            "is_legal_entity": True,
            "legal_entity": {
                "name": "Van Wyk Holdings",
                "registration_number": "2019/123456/07",
            },
            "products": [{"name": "Retirement Annuity", "funds": funds}],
        },
        {
            "id": str(IN_REVIEW_ID),
            "state": "InReview",
            "reference_number": "APP-0003",
            "person": person,
            "application_date": "2026-01-20",
            "current_review": {"reason": "Bank details pending"},
        },
        {
            "id": str(CLOSED_ID),
            "state": "Closed",
            "reference_number": "APP-0004",
            "person": person,
            "application_date": "2025-11-05",
        },
    ]
    path = tmp_path / "applications.json"
    path.write_text(json.dumps({"applications": records}), encoding="utf-8")
    return path
