"""Cache pool stored in transients."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .accessor import get_with_existence
from .exceptions import CacheError, InvalidArgumentError, StoreError
from .interface import CacheInterface
from .keys import (
    NAMESPACE_SEPARATOR,
    OPTION_NAME_MAX_LENGTH,
    OPTION_NAME_PREFIX_TIMEOUT,
    OPTION_NAME_PREFIX_TRANSIENT,
    RESERVED_KEY_SYMBOLS,
    KeyCodec,
)
from .stores.base import OptionsStore, TransientStore, is_identical
from .ttl import TTL, normalize_ttl

logger = logging.getLogger(__name__)


def _require_iterable(values: Any, what: str) -> None:
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise InvalidArgumentError(f"List of {what} is not an iterable value")


class CachePool(CacheInterface):
    """
    A namespaced cache that keeps its entries in a transient store.

    Several pools can share one store; each only sees keys under its own
    name. The transient store cannot tell a missing key from a key holding
    its ``NOT_FOUND`` value, so such reads are double-checked against the
    options store.

    The pool keeps no state between calls and does no locking. Consistency
    under concurrent access is whatever the stores provide.
    """

    RESERVED_KEY_SYMBOLS = RESERVED_KEY_SYMBOLS
    NAMESPACE_SEPARATOR = NAMESPACE_SEPARATOR
    OPTION_NAME_PREFIX_TRANSIENT = OPTION_NAME_PREFIX_TRANSIENT
    OPTION_NAME_PREFIX_TIMEOUT = OPTION_NAME_PREFIX_TIMEOUT
    OPTION_NAME_MAX_LENGTH = OPTION_NAME_MAX_LENGTH

    def __init__(
        self,
        transients: TransientStore,
        options: OptionsStore,
        pool_name: str,
        default_value: Any,
        default_ttl: TTL = 0,
        *,
        tolerate_unchanged_writes: bool = True,
        debug: bool = False,
    ):
        """
        Initialize a cache pool.

        Args:
            transients: Store holding the cached values
            options: Options table backing ``transients``, used to verify existence
            pool_name: Name of this pool, unique among pools sharing the stores.
                Must not contain reserved key symbols.
            default_value: Value that is never cached; used to detect misses.
                The more random, the better.
            default_ttl: TTL for entries written without one
            tolerate_unchanged_writes: Accept a failed write when the store
                already holds the same value
            debug: Log cache hits and misses
        """
        if pool_name.startswith(OPTION_NAME_PREFIX_TIMEOUT):
            raise ValueError(
                f'Pool name cannot be "{OPTION_NAME_PREFIX_TIMEOUT}" or start with it'
            )
        reserved = [c for c in RESERVED_KEY_SYMBOLS if c in pool_name]
        if reserved:
            raise ValueError(
                f'Pool name "{pool_name}" contains reserved symbols: {"".join(reserved)}'
            )

        normalize_ttl(default_ttl)

        self._transients = transients
        self._options = options
        self._codec = KeyCodec(pool_name)
        self._default_value = default_value
        self._default_ttl = default_ttl
        self._tolerate_unchanged_writes = tolerate_unchanged_writes
        self._debug = debug

    @property
    def name(self) -> str:
        return self._codec.pool_name

    @property
    def default_ttl(self) -> TTL:
        return self._default_ttl

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get value from cache by key.

        Raises:
            InvalidKeyError: If the key is invalid.
            CacheError: If the stores fail.
        """
        self._codec.validate(key)
        storage_key = self._codec.encode(key)

        try:
            lookup = get_with_existence(
                self._transients, self._options, storage_key, self._default_value
            )
        except StoreError as e:
            raise CacheError(f'Could not retrieve cache for key "{key}": {e}') from e

        if not lookup.found:
            if self._debug:
                logger.info(f"Cache miss in pool {self.name}: {key}")
            return default

        if self._debug:
            logger.info(f"Cache hit in pool {self.name}: {key}")
        return lookup.value

    def set(self, key: str, value: Any, ttl: TTL | None = None) -> bool:
        """
        Set value in cache, using the pool's default TTL if none is given.

        Some stores report failure when a value is rewritten unchanged. Unless
        ``tolerate_unchanged_writes`` is off, a failed write is re-read, and
        counts as success if the stored value is identical to ``value``, type
        included.

        Raises:
            InvalidKeyError: If the key is invalid.
            InvalidTtlError: If the TTL is invalid.
            CacheError: If the TTL cannot be resolved or the write fails.
        """
        self._codec.validate(key)
        storage_key = self._codec.encode(key)
        seconds = self._normalize_ttl(ttl)

        try:
            written = self._transients.set_transient(storage_key, value, seconds)
        except StoreError as e:
            raise CacheError(f'Could not write value for key "{key}" to cache: {e}') from e

        if written:
            return True

        if self._tolerate_unchanged_writes:
            try:
                lookup = get_with_existence(
                    self._transients, self._options, storage_key, self._default_value
                )
            except StoreError as e:
                raise CacheError(
                    f'Could not verify write of key "{key}" to cache: {e}'
                ) from e

            if lookup.found and is_identical(lookup.value, value):
                logger.warning(
                    f'Store reported failure writing unchanged value for key "{key}" '
                    f"in pool {self.name}; treating as success"
                )
                return True

        raise CacheError(
            f'Could not write value for key "{key}" to cache: set_transient() failed '
            f'with key "{storage_key}" with TTL {seconds}s'
        )

    def delete(self, key: str) -> bool:
        """
        Delete value from cache by key.

        Raises:
            InvalidKeyError: If the key is invalid.
            CacheError: If the key is not in the cache or the store fails.
        """
        self._codec.validate(key)
        storage_key = self._codec.encode(key)

        try:
            deleted = self._transients.delete_transient(storage_key)
        except StoreError as e:
            raise CacheError(f'Failed to delete cache for key "{key}": {e}') from e

        if not deleted:
            raise CacheError(
                f'Failed to delete cache for key "{key}": '
                f'delete_transient() failed for key "{storage_key}"'
            )
        return True

    def clear(self) -> bool:
        """
        Delete every entry of this pool, leaving other pools untouched.

        Raises:
            CacheError: If the entries cannot be listed or deleted.
        """
        try:
            names = self._options.query_options(self._codec.option_prefix)
            keys = [self._codec.decode_option_name(name) for name in names]
            self.delete_multiple(keys)
        except (CacheError, StoreError) as e:
            raise CacheError(f"Failed to clear cache: {e}") from e

        if self._debug:
            logger.info(f"Cleared {len(keys)} entries from pool {self.name}")
        return True

    def has(self, key: str) -> bool:
        """Check if key exists in cache."""
        default = self._default_value
        return self.get(key, default) is not default

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        """Get several values at once, in the order of ``keys``."""
        _require_iterable(keys, "keys")

        return {key: self.get(key, default) for key in keys}

    def set_multiple(
        self,
        values: Mapping[str, Any] | Iterable[tuple[str, Any]],
        ttl: TTL | None = None,
    ) -> bool:
        """
        Set several values with the same TTL.

        Writes are not transactional: on failure, values already written stay.
        """
        _require_iterable(values, "values")
        seconds = self._normalize_ttl(ttl)

        pairs = values.items() if isinstance(values, Mapping) else values
        for pair in pairs:
            try:
                key, value = pair
            except (TypeError, ValueError) as e:
                raise InvalidArgumentError(
                    f"Expected a (key, value) pair, got {pair!r}"
                ) from e
            self.set(key, value, seconds)

        return True

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        """
        Delete several values.

        Deletes are not transactional: on failure, values already deleted stay deleted.
        """
        _require_iterable(keys, "keys")

        for key in keys:
            self.delete(key)

        return True

    def _normalize_ttl(self, ttl: TTL | None) -> int:
        return normalize_ttl(self._default_ttl if ttl is None else ttl)
