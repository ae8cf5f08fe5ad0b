"""Store contracts consumed by cache pools."""

import time
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from ..keys import OPTION_NAME_PREFIX_TRANSIENT, TIMEOUT_OPTION_NAME_PREFIX

_ABSENT = object()


def is_identical(current: Any, value: Any) -> bool:
    """Compare two values by type as well as by value, recursing into containers.

    ``False``, ``0`` and ``0.0`` are equal but not identical.
    """
    if type(current) is not type(value):
        return False
    if isinstance(value, (list, tuple)):
        return len(current) == len(value) and all(
            is_identical(a, b) for a, b in zip(current, value)
        )
    if isinstance(value, dict):
        return current.keys() == value.keys() and all(
            is_identical(current[k], value[k]) for k in value
        )
    return current == value


class TransientStore(ABC):
    """Key/value store with per-entry expiry.

    ``get_transient`` returns ``NOT_FOUND`` both for a missing key and for a
    key whose stored value is ``NOT_FOUND`` itself.
    """

    NOT_FOUND: Any = False

    @abstractmethod
    def get_transient(self, key: str) -> Any:
        """Get a transient value, or ``NOT_FOUND``."""
        pass

    @abstractmethod
    def set_transient(self, key: str, value: Any, ttl: int) -> bool:
        """Store a transient for ``ttl`` seconds (0 means no expiry)."""
        pass

    @abstractmethod
    def delete_transient(self, key: str) -> bool:
        """Delete a transient. Returns True if it existed."""
        pass


class OptionsStore(ABC):
    """Flat name/value record set, searchable by name prefix."""

    @abstractmethod
    def get_option(self, name: str, default: Any = None) -> Any:
        """Get an option value, or ``default`` if there is no such record."""
        pass

    @abstractmethod
    def query_options(self, prefix: str) -> list[str]:
        """List the names of all options starting with ``prefix``."""
        pass


class OptionTableStore(TransientStore, OptionsStore):
    """Transients kept as records of an options table.

    A transient ``key`` lives in the ``_transient_<key>`` record, and its
    expiry time, when it has one, in ``_transient_timeout_<key>``. Expired
    transients are removed lazily when read.

    Subclasses provide the raw record primitives.
    """

    @abstractmethod
    def _load(self, name: str, default: Any) -> Any:
        pass

    @abstractmethod
    def _save(self, name: str, value: Any) -> None:
        pass

    @abstractmethod
    def _remove(self, name: str) -> bool:
        pass

    @abstractmethod
    def _names(self) -> Iterable[str]:
        pass

    def get_transient(self, key: str) -> Any:
        """Get a transient value, or ``NOT_FOUND`` if missing or expired."""
        timeout = self._load(TIMEOUT_OPTION_NAME_PREFIX + key, None)
        if timeout is not None and timeout < time.time():
            self.delete_transient(key)
            return self.NOT_FOUND

        return self._load(OPTION_NAME_PREFIX_TRANSIENT + key, self.NOT_FOUND)

    def set_transient(self, key: str, value: Any, ttl: int) -> bool:
        """
        Store a transient.

        Like the host store this emulates, rewriting a transient with the value
        it already holds reports failure and writes nothing.
        """
        timeout_name = TIMEOUT_OPTION_NAME_PREFIX + key
        if ttl:
            self._save(timeout_name, int(time.time()) + ttl)
        else:
            self._remove(timeout_name)

        name = OPTION_NAME_PREFIX_TRANSIENT + key
        current = self._load(name, _ABSENT)
        if current is not _ABSENT and is_identical(current, value):
            return False

        self._save(name, value)
        return True

    def delete_transient(self, key: str) -> bool:
        """Delete a transient and its expiry record."""
        self._remove(TIMEOUT_OPTION_NAME_PREFIX + key)
        return self._remove(OPTION_NAME_PREFIX_TRANSIENT + key)

    def get_option(self, name: str, default: Any = None) -> Any:
        """Get an option value, or ``default`` if there is no such record."""
        return self._load(name, default)

    def query_options(self, prefix: str) -> list[str]:
        """List the names of all options starting with ``prefix``."""
        return [name for name in self._names() if name.startswith(prefix)]

    @abstractmethod
    def clear_store(self) -> None:
        """Remove every record."""
        pass
