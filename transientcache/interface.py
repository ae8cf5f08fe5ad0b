"""Abstract cache interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any

from .ttl import TTL


class CacheInterface(ABC):
    """Simple key/value cache contract shared by pools and their decorators."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get value from cache by key, or ``default`` if not found."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any, ttl: TTL | None = None) -> bool:
        """Set value in cache with optional TTL."""
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete value from cache by key."""
        pass

    @abstractmethod
    def clear(self) -> bool:
        """Delete every entry of this cache."""
        pass

    @abstractmethod
    def has(self, key: str) -> bool:
        """Check if key exists in cache."""
        pass

    @abstractmethod
    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        """Get several values at once, keyed by cache key."""
        pass

    @abstractmethod
    def set_multiple(
        self,
        values: Mapping[str, Any] | Iterable[tuple[str, Any]],
        ttl: TTL | None = None,
    ) -> bool:
        """Set several values with the same TTL."""
        pass

    @abstractmethod
    def delete_multiple(self, keys: Iterable[str]) -> bool:
        """Delete several values."""
        pass
