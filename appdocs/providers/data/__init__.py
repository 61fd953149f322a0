"""Application data providers."""

from appdocs.providers.data.json_file_adapter import (
    JsonFileApplicationProvider,
    load_applications,
)
from appdocs.providers.data.memory_adapter import InMemoryApplicationProvider

__all__ = [
    "InMemoryApplicationProvider",
    "JsonFileApplicationProvider",
    "load_applications",
]
