"""Tests for application domain models."""

import dataclasses
from datetime import date

import pytest

from appdocs.models.application import ApplicationState, Product, Review


class TestApplicationState:
    """Tests for ApplicationState."""

    @pytest.mark.parametrize(
        ("state", "description"),
        [
            (ApplicationState.PENDING, "Pending"),
            (ApplicationState.ACTIVATED, "Activated"),
            (ApplicationState.IN_REVIEW, "In Review"),
            (ApplicationState.CLOSED, "Closed"),
            (ApplicationState.WITHDRAWN, "Withdrawn"),
        ],
    )
    def test_description(self, state, description) -> None:
        """Every state has a human-readable description."""
        assert state.description == description

    def test_lookup_by_value(self) -> None:
        """States are addressed by their stored value."""
        assert ApplicationState("InReview") is ApplicationState.IN_REVIEW


class TestModels:
    """Tests for the frozen model dataclasses."""

    def test_application_is_frozen(self, pending_application) -> None:
        """Applications cannot be mutated in place."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            pending_application.reference_number = "changed"

    def test_product_defaults_to_no_funds(self) -> None:
        """A product without funds has an empty tuple."""
        assert Product(name="Empty").funds == ()

    def test_review_date_optional(self) -> None:
        """A review may omit the date it was opened."""
        review = Review(reason="bank")

        assert review.reviewed_on is None
        assert Review(reason="bank", reviewed_on=date(2026, 1, 1)) != review
