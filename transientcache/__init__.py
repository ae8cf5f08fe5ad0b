"""transientcache - Namespaced key/value cache pools over a transient store."""

__version__ = "0.1.0"

# Accessor
from .accessor import Lookup, get_with_existence

# Configuration
from .config import configure, get_config, reset_config

# Module helpers
from .core import clear_pool, create_pool

# Errors
from .exceptions import (
    CacheError,
    InvalidArgumentError,
    InvalidKeyError,
    InvalidTtlError,
    NamespaceError,
    StoreError,
)

# Pools and factories
from .factory import CachePoolFactory, CachePoolFactoryInterface, SilentPoolFactory
from .interface import CacheInterface
from .keys import KeyCodec
from .pool import CachePool
from .silent import SilentPool

# Stores
from .stores import DiskStore, MemoryStore, OptionsStore, OptionTableStore, TransientStore

# TTL
from .ttl import Interval, normalize_ttl

__all__ = [
    # Errors
    "CacheError",
    # Core
    "CacheInterface",
    "CachePool",
    "CachePoolFactory",
    "CachePoolFactoryInterface",
    # Stores
    "DiskStore",
    "Interval",
    "InvalidArgumentError",
    "InvalidKeyError",
    "InvalidTtlError",
    "KeyCodec",
    "Lookup",
    "MemoryStore",
    "NamespaceError",
    "OptionTableStore",
    "OptionsStore",
    "SilentPool",
    "SilentPoolFactory",
    "StoreError",
    "TransientStore",
    "clear_pool",
    # Configuration
    "configure",
    "create_pool",
    "get_config",
    "get_with_existence",
    "normalize_ttl",
    "reset_config",
]
