"""In-memory application data provider.

Holds a fixed collection of applications. Also the store behind the JSON
file provider.
"""

import uuid
from collections.abc import Iterable

from appdocs.core.errors import DataIntegrityError
from appdocs.models.application import Application
from appdocs.providers.base import ApplicationDataProvider


class InMemoryApplicationProvider(ApplicationDataProvider):
    """Application provider backed by an immutable tuple."""

    def __init__(self, applications: Iterable[Application] = ()) -> None:
        self._applications: tuple[Application, ...] = tuple(applications)

    @property
    def applications(self) -> tuple[Application, ...]:
        """All applications held by this provider."""
        return self._applications

    def find_application(self, application_id: uuid.UUID) -> Application | None:
        """Find the single application whose id equals application_id.

        Raises:
            DataIntegrityError: If more than one application has the id.
        """
        matches = [app for app in self._applications if app.id == application_id]
        if len(matches) > 1:
            raise DataIntegrityError(
                f"{len(matches)} applications share id '{application_id}'",
                application_id=application_id,
            )
        return matches[0] if matches else None
