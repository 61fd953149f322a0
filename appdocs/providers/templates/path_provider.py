"""Template path provider backed by a name -> fragment mapping."""

from collections.abc import Mapping
from types import MappingProxyType

from appdocs.providers.base import TemplatePathProvider
from appdocs.providers.errors import TemplateNotFoundError


class MappingTemplatePathProvider(TemplatePathProvider):
    """Resolves template names from a fixed mapping.

    The mapping is copied at construction; later changes to the source
    mapping are not seen.
    """

    def __init__(self, paths: Mapping[str, str]) -> None:
        self._paths: Mapping[str, str] = MappingProxyType(dict(paths))

    @property
    def paths(self) -> Mapping[str, str]:
        """Read-only view of registered template names and fragments."""
        return self._paths

    def get(self, name: str) -> str:
        try:
            return self._paths[name]
        except KeyError:
            raise TemplateNotFoundError(
                name, f"No template registered under name '{name}'"
            ) from None
