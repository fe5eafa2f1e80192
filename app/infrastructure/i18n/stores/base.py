"""Translation cache store abstract base class."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class TranslationCacheStore(ABC):
    """Abstract base class for persistent translation cache stores.

    Stores keep exported translation caches (plain nested dicts) under opaque
    string keys, one per route. Last write wins; no transactions.
    """

    @abstractmethod
    def read(self, key: str) -> Optional[Dict[str, Any]]:
        """Read the cache stored under ``key``.

        Args:
            key: Cache key (e.g., "TranslatorAutoload.posts.index").

        Returns:
            The stored mapping, or None if nothing is stored.
        """
        pass

    @abstractmethod
    def write(self, key: str, data: Dict[str, Any]) -> None:
        """Store ``data`` under ``key``, replacing any previous value.

        Args:
            key: Cache key.
            data: JSON-serializable nested mapping.
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove the cache stored under ``key`` if any."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all stored caches (for testing).

        Note: Implementation-specific, may be expensive for remote backends.
        """
        pass
