"""Pytest configuration and fixtures for transientcache tests."""

import shutil
import tempfile
import uuid

import pytest

from transientcache.config import configure, reset_config
from transientcache.pool import CachePool
from transientcache.stores.disk import DiskStore
from transientcache.stores.memory import MemoryStore


@pytest.fixture(autouse=True)
def reset_cache_config():
    """Reset cache configuration before each test."""
    reset_config()
    # Use memory store for testing to avoid persistent cache
    configure(backend="memory")
    yield
    reset_config()


@pytest.fixture
def memory_store():
    """Provide a fresh memory store for testing."""
    return MemoryStore()


@pytest.fixture
def temp_cache_dir():
    """Provide a temporary directory for disk store tests."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def disk_store(temp_cache_dir):
    """Provide a disk store in a temporary directory."""
    store = DiskStore(cache_dir=temp_cache_dir)
    yield store
    store.close()


@pytest.fixture
def default_value():
    """Provide a random miss-detection value."""
    return f"default{uuid.uuid4().hex}"


@pytest.fixture
def make_pool(memory_store, default_value):
    """Provide a function building pools over the shared memory store."""

    def _make_pool(name="p1", store=None, **kwargs):
        if store is None:
            store = memory_store
        return CachePool(store, store, name, default_value, **kwargs)

    return _make_pool


@pytest.fixture
def pool(make_pool):
    """Provide a pool named p1 over a fresh memory store."""
    return make_pool()
