"""Disk-based store using diskcache."""

import sqlite3
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import diskcache

from ..exceptions import StoreError
from .base import OptionTableStore


@contextmanager
def _store_errors(action: str, name: str) -> Iterator[None]:
    try:
        yield
    except (diskcache.Timeout, sqlite3.Error, OSError) as e:
        raise StoreError(f'Could not {action} option "{name}": {e}') from e


class DiskStore(OptionTableStore):
    """Options table persisted with diskcache, safe to share between processes."""

    def __init__(self, cache_dir: str = "./.cache"):
        """Initialize disk store."""
        self.cache_dir = cache_dir
        Path(cache_dir).mkdir(parents=True, exist_ok=True)
        self._cache = diskcache.Cache(cache_dir)

    def _load(self, name: str, default: Any) -> Any:
        with _store_errors("read", name):
            return self._cache.get(name, default)

    def _save(self, name: str, value: Any) -> None:
        with _store_errors("write", name):
            self._cache.set(name, value)

    def _remove(self, name: str) -> bool:
        with _store_errors("delete", name):
            return self._cache.delete(name)

    def _names(self) -> Iterable[str]:
        with _store_errors("list", "*"):
            return list(self._cache)

    def clear_store(self) -> None:
        """Remove every record."""
        with _store_errors("clear", "*"):
            self._cache.clear()

    def close(self) -> None:
        """Close the underlying cache."""
        self._cache.close()

    def __len__(self) -> int:
        return len(self._cache)

    def __del__(self):
        """Close the cache when the object is destroyed."""
        if hasattr(self, "_cache"):
            self._cache.close()
