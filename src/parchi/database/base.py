"""Abstract storage interface."""

from abc import ABC, abstractmethod
from typing import Optional


class Storage(ABC):
    """Abstract durable key-value storage for parchi.

    Each key holds one opaque string document that is overwritten wholesale.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the storage backend."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the storage backend."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get the document stored under key, or None if the key is missing."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous document."""
        pass
