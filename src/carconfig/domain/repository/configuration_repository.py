"""Abstract repository for saved configurations (the persistence gateway).

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and in the test fakes.

Implementations raise ``PersistenceError`` when the underlying store
cannot be read or written.  An unknown id is never an error: lookups
return ``None`` and deletes return ``False``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from carconfig.domain.model.configuration import SavedConfiguration


class ConfigurationRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a new unique id for a saved configuration."""

    @abstractmethod
    def list_all(self) -> list[SavedConfiguration]:
        """Return every saved configuration, oldest first."""

    @abstractmethod
    def get_by_id(self, config_id: str) -> SavedConfiguration | None:
        """Return a saved configuration by its id, or None if not found."""

    @abstractmethod
    def save(self, saved: SavedConfiguration) -> str:
        """Persist a new or updated configuration and return its id.

        Assigns an id when ``saved.id`` is None; replaces the stored
        entry in place when the id already exists.
        """

    @abstractmethod
    def delete_by_id(self, config_id: str) -> bool:
        """Delete a saved configuration. Return False if it did not exist."""
