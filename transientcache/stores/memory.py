"""In-memory store."""

from collections.abc import Iterable
from typing import Any

from .base import OptionTableStore


class MemoryStore(OptionTableStore):
    """In-memory options table with transient support."""

    def __init__(self):
        """Initialize an empty memory store."""
        self._options: dict[str, Any] = {}

    def _load(self, name: str, default: Any) -> Any:
        return self._options.get(name, default)

    def _save(self, name: str, value: Any) -> None:
        self._options[name] = value

    def _remove(self, name: str) -> bool:
        if name in self._options:
            del self._options[name]
            return True
        return False

    def _names(self) -> Iterable[str]:
        # Copy, so callers may delete while iterating.
        return list(self._options)

    def clear_store(self) -> None:
        """Remove every record."""
        self._options.clear()

    def __len__(self) -> int:
        return len(self._options)
