"""Error-swallowing cache decorator."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .exceptions import InvalidArgumentError
from .interface import CacheInterface
from .ttl import TTL

logger = logging.getLogger(__name__)


class SilentPool(CacheInterface):
    """
    Wraps a cache so that only invalid-argument errors reach the caller.

    Any other failure is logged and turned into a benign result: the default
    for ``get``, an empty dict for ``get_multiple``, and False for everything
    else. ``clear`` takes no arguments, so it never raises.
    """

    def __init__(self, cache: CacheInterface):
        self.cache = cache

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return self.cache.get(key, default)
        except InvalidArgumentError:
            raise
        except Exception as e:
            logger.warning(f'Cache get failed for key "{key}": {e}')
            return default

    def set(self, key: str, value: Any, ttl: TTL | None = None) -> bool:
        try:
            return self.cache.set(key, value, ttl)
        except InvalidArgumentError:
            raise
        except Exception as e:
            logger.warning(f'Cache set failed for key "{key}": {e}')
            return False

    def delete(self, key: str) -> bool:
        try:
            return self.cache.delete(key)
        except InvalidArgumentError:
            raise
        except Exception as e:
            logger.warning(f'Cache delete failed for key "{key}": {e}')
            return False

    def clear(self) -> bool:
        try:
            return self.cache.clear()
        except Exception as e:
            logger.warning(f"Cache clear failed: {e}")
            return False

    def has(self, key: str) -> bool:
        try:
            return self.cache.has(key)
        except InvalidArgumentError:
            raise
        except Exception as e:
            logger.warning(f'Cache has failed for key "{key}": {e}')
            return False

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        try:
            return self.cache.get_multiple(keys, default)
        except InvalidArgumentError:
            raise
        except Exception as e:
            logger.warning(f"Cache get_multiple failed: {e}")
            return {}

    def set_multiple(
        self,
        values: Mapping[str, Any] | Iterable[tuple[str, Any]],
        ttl: TTL | None = None,
    ) -> bool:
        try:
            return self.cache.set_multiple(values, ttl)
        except InvalidArgumentError:
            raise
        except Exception as e:
            logger.warning(f"Cache set_multiple failed: {e}")
            return False

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        try:
            return self.cache.delete_multiple(keys)
        except InvalidArgumentError:
            raise
        except Exception as e:
            logger.warning(f"Cache delete_multiple failed: {e}")
            return False
