"""Pool helpers bound to the global configuration."""

import logging

from .config import get_config
from .interface import CacheInterface

logger = logging.getLogger(__name__)


def create_pool(name: str) -> CacheInterface:
    """Create a cache pool on the configured store."""
    config = get_config()
    pool = config.get_factory().create_cache_pool(name)

    if config.debug:
        logger.info(f"Created cache pool {name} on {config.backend} store")

    return pool


def clear_pool(name: str) -> bool:
    """Delete every entry of the named pool."""
    return create_pool(name).clear()
