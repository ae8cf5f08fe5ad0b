"""Unit tests for the error-swallowing pool decorator."""

import logging
from unittest.mock import patch

import pytest

from transientcache.exceptions import CacheError, InvalidKeyError, InvalidTtlError
from transientcache.silent import SilentPool


@pytest.fixture
def silent(pool):
    """Provide a silent pool over a memory-backed pool."""
    return SilentPool(pool)


class TestSilentPoolPassThrough:
    """Test that a healthy pool behaves the same when wrapped."""

    def test_get_and_set(self, silent):
        assert silent.set("a", False) is True
        assert silent.get("a", "caller-default") is False

    def test_get_forwards_default(self, silent):
        assert silent.get("missing", "caller-default") == "caller-default"

    def test_has_and_delete(self, silent):
        silent.set("a", 1)
        assert silent.has("a") is True

        assert silent.delete("a") is True
        assert silent.has("a") is False

    def test_multiple(self, silent):
        assert silent.set_multiple({"a": 1, "b": 2}) is True
        assert silent.get_multiple(["a", "b", "c"]) == {"a": 1, "b": 2, "c": None}
        assert silent.delete_multiple(["a", "b"]) is True

    def test_clear(self, silent):
        silent.set("a", 1)

        assert silent.clear() is True
        assert silent.has("a") is False


class TestSilentPoolErrors:
    """Test downgrading of store failures."""

    @pytest.fixture
    def broken(self, memory_store):
        """Make every store operation fail."""
        error = RuntimeError("Random exception")
        with (
            patch.object(memory_store, "get_transient", side_effect=error),
            patch.object(memory_store, "set_transient", side_effect=error),
            patch.object(memory_store, "delete_transient", side_effect=error),
            patch.object(memory_store, "query_options", side_effect=error),
        ):
            yield

    def test_get_returns_default(self, silent, broken):
        assert silent.get("a", "caller-default") == "caller-default"

    def test_set_returns_false(self, silent, broken):
        assert silent.set("a", "value") is False

    def test_delete_returns_false(self, silent, broken):
        assert silent.delete("a") is False

    def test_has_returns_false(self, silent, broken):
        assert silent.has("a") is False

    def test_clear_returns_false(self, silent, broken):
        assert silent.clear() is False

    def test_get_multiple_returns_empty_dict(self, silent, broken):
        assert silent.get_multiple(["a"], "caller-default") == {}

    def test_set_multiple_returns_false(self, silent, broken):
        assert silent.set_multiple({"a": "value"}) is False

    def test_delete_multiple_returns_false(self, silent, broken):
        assert silent.delete_multiple(["a", "b"]) is False

    def test_cache_errors_are_swallowed(self, silent):
        # Deleting a missing key is a CacheError in the wrapped pool
        assert silent.delete("missing") is False

    def test_failure_is_logged(self, silent, broken, caplog):
        with caplog.at_level(logging.WARNING, logger="transientcache.silent"):
            silent.get("a")

        assert "Random exception" in caplog.text


class TestSilentPoolInvalidArguments:
    """Test that invalid arguments still raise."""

    def test_get_invalid_key(self, silent):
        with pytest.raises(InvalidKeyError):
            silent.get("my/key")

    def test_set_invalid_key(self, silent):
        with pytest.raises(InvalidKeyError):
            silent.set("my/key", "value")

    def test_set_invalid_ttl(self, silent):
        with pytest.raises(InvalidTtlError):
            silent.set("a", "value", "whenever")

    def test_delete_invalid_key(self, silent):
        with pytest.raises(InvalidKeyError):
            silent.delete("my:key")

    def test_has_invalid_key(self, silent):
        with pytest.raises(InvalidKeyError):
            silent.has("(key)")

    def test_multiple_invalid_keys(self, silent):
        with pytest.raises(InvalidKeyError):
            silent.get_multiple(["@"])
        with pytest.raises(InvalidKeyError):
            silent.set_multiple({"@": 1})
        with pytest.raises(InvalidKeyError):
            silent.delete_multiple(["@"])

    def test_clear_never_raises(self, silent, memory_store):
        with patch.object(memory_store, "query_options", side_effect=CacheError("nope")):
            assert silent.clear() is False
