"""Configuration system for transientcache."""

import os
from dataclasses import dataclass, field
from typing import Any

from .factory import CachePoolFactory, CachePoolFactoryInterface, SilentPoolFactory
from .stores import DiskStore, MemoryStore, OptionTableStore


@dataclass
class CacheConfig:
    """Configuration for cache pools created through the module helpers."""

    backend: str = "disk"
    cache_dir: str = "./.cache"
    default_ttl: int = 0
    silent: bool = False
    tolerate_unchanged_writes: bool = True
    debug: bool = False

    # Internal
    _store_instance: OptionTableStore | None = field(default=None, init=False)

    def __post_init__(self):
        """Load configuration from environment variables."""
        self.backend = os.getenv("TRANSIENTCACHE_BACKEND", self.backend)
        self.cache_dir = os.getenv("TRANSIENTCACHE_CACHE_DIR", self.cache_dir)
        self.default_ttl = self._get_int_env("TRANSIENTCACHE_DEFAULT_TTL", self.default_ttl)
        self.silent = self._get_bool_env("TRANSIENTCACHE_SILENT", self.silent)
        self.tolerate_unchanged_writes = self._get_bool_env(
            "TRANSIENTCACHE_TOLERATE_UNCHANGED_WRITES", self.tolerate_unchanged_writes
        )
        self.debug = self._get_bool_env("TRANSIENTCACHE_DEBUG", self.debug)

    def _get_bool_env(self, key: str, default: bool) -> bool:
        """Get boolean value from environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("true", "1", "yes", "on")

    def _get_int_env(self, key: str, default: int) -> int:
        """Get integer value from environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def get_store(self) -> OptionTableStore:
        """Get or create the store instance."""
        if self._store_instance is None:
            self._store_instance = create_store(self.backend, cache_dir=self.cache_dir)
        return self._store_instance

    def reset_store(self) -> None:
        """Reset the store instance (useful for testing)."""
        self._store_instance = None

    def get_factory(self) -> CachePoolFactoryInterface:
        """Build a pool factory over the configured store."""
        factory: CachePoolFactoryInterface = CachePoolFactory(
            self.get_store(),
            default_ttl=self.default_ttl,
            tolerate_unchanged_writes=self.tolerate_unchanged_writes,
            debug=self.debug,
        )
        if self.silent:
            factory = SilentPoolFactory(factory)
        return factory


def create_store(backend: str, **kwargs: Any) -> OptionTableStore:
    """Create a store instance based on configuration."""
    if backend == "disk":
        return DiskStore(cache_dir=kwargs.get("cache_dir", "./.cache"))
    elif backend == "memory":
        return MemoryStore()
    else:
        raise ValueError(f"Unknown backend: {backend}")


# Global configuration instance
_config = CacheConfig()


def configure(**kwargs: Any) -> None:
    """Update global cache configuration."""
    for key, value in kwargs.items():
        if hasattr(_config, key) and not key.startswith("_"):
            setattr(_config, key, value)
        else:
            raise ValueError(f"Unknown configuration key: {key}")

    # Reset store if store-related settings changed
    if any(key in kwargs for key in ["backend", "cache_dir"]):
        _config.reset_store()


def get_config() -> CacheConfig:
    """Get current global configuration."""
    return _config


def reset_config() -> None:
    """Reset configuration to defaults (useful for testing)."""
    global _config  # noqa: PLW0603
    _config = CacheConfig()
