"""Tests for the application document download endpoint.

GET /api/v1/applications/{application_id}/document

- 200 application/pdf with an attachment filename for documented states
- 404 NOT_FOUND envelope for unknown ids
- 422 INVALID_STATE_TRANSITION envelope for states without a document
- 400 VALIDATION_ERROR envelope for malformed ids
- 500 INTERNAL_ERROR envelope for data integrity failures
"""

import dataclasses
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient

from appdocs.api.deps import get_document_generator, get_settings
from appdocs.core.config import Settings
from appdocs.core.errors import InvalidStateError, NotFoundError
from appdocs.main import create_app
from appdocs.providers.data.memory_adapter import InMemoryApplicationProvider
from appdocs.providers.factory import build_document_generator
from tests.conftest import ACTIVATED_ID, CLOSED_ID, IN_REVIEW_ID, PENDING_ID

_URL = "/api/v1/applications/{}/document"


@pytest.fixture
def api_settings(application_data_file) -> Settings:
    """Settings pointing at the sample data file."""
    return Settings(
        _env_file=None,
        data_file=application_data_file,
        support_email="help@example.com",
        tax_rate=Decimal("0.2"),
    )


@pytest.fixture
def app(api_settings):
    """Create test application with settings overridden."""
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: api_settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    """Create async HTTP client for testing."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# =============================================================================
# Tests: successful downloads
# =============================================================================


class TestDownloadDocument:
    """Tests for documents that can be generated."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("application_id", "reference"),
        [
            (PENDING_ID, "APP-0001"),
            (ACTIVATED_ID, "APP-0002"),
            (IN_REVIEW_ID, "APP-0003"),
        ],
    )
    async def test_returns_pdf(self, client, application_id, reference):
        """Documented states return a PDF attachment named by reference."""
        response = await client.get(_URL.format(application_id))

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.headers["content-disposition"] == (
            f'attachment; filename="{reference}.pdf"'
        )
        assert response.content.startswith(b"%PDF-")


# =============================================================================
# Tests: error envelopes
# =============================================================================


class TestDownloadDocumentErrors:
    """Tests for requests that produce no document."""

    @pytest.mark.asyncio
    async def test_unknown_id_returns_404(self, client):
        """An unknown id returns the NOT_FOUND envelope."""
        missing = "00000000-0000-0000-0000-0000000000ff"

        response = await client.get(_URL.format(missing))

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "NOT_FOUND"
        assert error["message"] == f"Application with id '{missing}' not found"

    @pytest.mark.asyncio
    async def test_unsupported_state_returns_422(self, client):
        """A closed application returns the INVALID_STATE_TRANSITION envelope."""
        response = await client.get(_URL.format(CLOSED_ID))

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "INVALID_STATE_TRANSITION"
        assert str(CLOSED_ID) in error["message"]

    @pytest.mark.asyncio
    async def test_malformed_id_returns_400(self, client):
        """A path id that is not a UUID fails request validation."""
        response = await client.get(_URL.format("not-a-uuid"))

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"][0]["loc"] == ["path", "application_id"]

    @pytest.mark.asyncio
    async def test_data_integrity_failure_returns_500(
        self, app, client, api_settings, pending_application
    ):
        """Duplicate ids surface as a generic internal error."""
        duplicate = dataclasses.replace(pending_application, reference_number="DUP")
        app.dependency_overrides[get_document_generator] = (
            lambda: build_document_generator(
                api_settings,
                data_provider=InMemoryApplicationProvider(
                    [pending_application, duplicate]
                ),
            )
        )

        response = await client.get(_URL.format(PENDING_ID))

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "INTERNAL_ERROR"
        assert "share id" not in error["message"]


class TestErrorClasses:
    """Tests for the API errors raised by the endpoint."""

    def test_not_found_error(self):
        """NotFoundError maps to 404 with a resource message."""
        error = NotFoundError("Application", "abc")

        assert error.status_code == 404
        assert error.code == "NOT_FOUND"
        assert error.message == "Application with id 'abc' not found"

    def test_invalid_state_error(self):
        """InvalidStateError maps to 422."""
        error = InvalidStateError("no document")

        assert error.status_code == 422
        assert error.code == "INVALID_STATE_TRANSITION"
        assert str(error) == "no document"


# =============================================================================
# Tests: application
# =============================================================================


class TestHealthEndpoint:
    """Tests for health check endpoint."""

    @pytest.mark.asyncio
    async def test_health_returns_healthy_status(self, client):
        """Health endpoint returns 200 and a healthy status."""
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
