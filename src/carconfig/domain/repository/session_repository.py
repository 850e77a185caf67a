"""Abstract repository for the working session.

A session is the configuration being edited plus the recent save
history, kept between runs of the configurator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from carconfig.domain.model.configuration import Configuration, SavedConfiguration


@dataclass
class SessionState:
    configuration: Configuration
    history: list[SavedConfiguration] = field(default_factory=list)


class SessionRepository(ABC):

    @abstractmethod
    def load(self) -> SessionState | None:
        """Return the stored session, or None if there is none."""

    @abstractmethod
    def save(self, state: SessionState) -> None:
        """Replace the stored session."""
