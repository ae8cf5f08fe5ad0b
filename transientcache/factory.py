"""Cache pool factories."""

import uuid
from abc import ABC, abstractmethod
from typing import Any

from .interface import CacheInterface
from .pool import CachePool
from .silent import SilentPool
from .stores.base import OptionsStore, TransientStore
from .ttl import TTL


class CachePoolFactoryInterface(ABC):
    """Creates cache pools by name."""

    @abstractmethod
    def create_cache_pool(self, pool_name: str) -> CacheInterface:
        """Create a new cache pool. The name must be unique to the pool."""
        pass


class CachePoolFactory(CachePoolFactoryInterface):
    """Creates transient cache pools sharing one store."""

    def __init__(
        self,
        transients: TransientStore,
        options: OptionsStore | None = None,
        default_ttl: TTL = 0,
        **pool_kwargs: Any,
    ):
        """
        Args:
            transients: Store the pools keep their entries in
            options: Options table backing ``transients``; defaults to
                ``transients`` itself
            default_ttl: TTL for entries written without one
            **pool_kwargs: Extra keyword arguments for every ``CachePool``
        """
        if options is None:
            if not isinstance(transients, OptionsStore):
                raise ValueError("An options store is required for this transient store")
            options = transients

        self.transients = transients
        self.options = options
        self.default_ttl = default_ttl
        self.pool_kwargs = pool_kwargs

    def create_cache_pool(self, pool_name: str) -> CacheInterface:
        """Create a pool with its own random miss-detection value."""
        default_value = f"default{uuid.uuid4().hex}"
        return CachePool(
            self.transients,
            self.options,
            pool_name,
            default_value,
            self.default_ttl,
            **self.pool_kwargs,
        )


class SilentPoolFactory(CachePoolFactoryInterface):
    """Creates pools that raise only invalid-argument errors."""

    def __init__(self, factory: CachePoolFactoryInterface):
        self.factory = factory

    def create_cache_pool(self, pool_name: str) -> CacheInterface:
        return SilentPool(self.factory.create_cache_pool(pool_name))
