"""Abstract repository interface for dictionary persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from gboard_dictionary.models.record import DictionaryRecord


class DictionaryRepository(ABC):
    """Abstract base for dictionary storage backends.

    Implementations load and save the full record list of one file; every
    mutation is a complete read-modify-write round trip.
    """

    @abstractmethod
    def save(self, records: list[DictionaryRecord], path: Path) -> None:
        """Persist records to the given path, replacing its content.

        Args:
            records: The records to save.
            path: File path to write to.

        Raises:
            StorageError: On I/O failures.
        """

    @abstractmethod
    def load(self, path: Path) -> list[DictionaryRecord]:
        """Load every record stored at the given path.

        Args:
            path: File path to read from.

        Returns:
            The records in storage order.

        Raises:
            StorageError: On I/O failures or missing file.
            DictionaryFormatError: On data format errors.
        """

    @abstractmethod
    def find(self, key: str, path: Path) -> DictionaryRecord | None:
        """Return the first record stored under *key*, or ``None``."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check whether a persisted dictionary exists at *path*."""
