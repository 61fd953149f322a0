"""JSON file application data provider.

Loads application records from a JSON document once, validates them with
the pydantic schemas in appdocs.schemas.application, and serves lookups
from memory.
"""

import uuid
from pathlib import Path

import structlog
from pydantic import ValidationError

from appdocs.models.application import Application
from appdocs.providers.base import ApplicationDataProvider
from appdocs.providers.data.memory_adapter import InMemoryApplicationProvider
from appdocs.providers.errors import DataSourceError
from appdocs.schemas.application import ApplicationDataFile

logger = structlog.get_logger()


def load_applications(path: Path) -> tuple[Application, ...]:
    """Read and validate an application data file.

    Args:
        path: Path to a JSON document of the form {"applications": [...]}.

    Returns:
        Domain applications in file order.

    Raises:
        DataSourceError: If the file is unreadable or fails validation.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("application_data_read_failed", path=str(path), error=str(e))
        raise DataSourceError(f"Cannot read application data file '{path}'") from e

    try:
        data_file = ApplicationDataFile.model_validate_json(raw)
    except ValidationError as e:
        logger.error(
            "application_data_invalid",
            path=str(path),
            error_count=e.error_count(),
        )
        raise DataSourceError(f"Invalid application data file '{path}': {e}") from e

    applications = tuple(record.to_domain() for record in data_file.applications)
    logger.info(
        "application_data_loaded",
        path=str(path),
        application_count=len(applications),
    )
    return applications


class JsonFileApplicationProvider(ApplicationDataProvider):
    """Application provider backed by a JSON data file."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._store = InMemoryApplicationProvider(load_applications(path))

    @property
    def path(self) -> Path:
        """Source data file."""
        return self._path

    def find_application(self, application_id: uuid.UUID) -> Application | None:
        return self._store.find_application(application_id)
