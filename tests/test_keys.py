"""Unit tests for key validation and namespacing."""

import pytest

from transientcache.exceptions import InvalidArgumentError, InvalidKeyError, NamespaceError
from transientcache.keys import (
    OPTION_NAME_MAX_LENGTH,
    RESERVED_KEY_SYMBOLS,
    KeyCodec,
)


class TestKeyCodecValidation:
    """Test key validation rules."""

    @pytest.fixture
    def codec(self):
        return KeyCodec("p1")

    def test_plain_key_is_valid(self, codec):
        codec.validate("user_42.profile-v2")

    def test_empty_key_is_valid(self, codec):
        codec.validate("")

    @pytest.mark.parametrize("symbol", list(RESERVED_KEY_SYMBOLS))
    def test_reserved_symbol_is_rejected(self, codec, symbol):
        with pytest.raises(InvalidKeyError):
            codec.validate(f"my{symbol}key")

    def test_namespace_separator_is_rejected(self, codec):
        with pytest.raises(InvalidKeyError, match="my/key"):
            codec.validate("my/key")

    def test_non_string_key_is_rejected(self, codec):
        with pytest.raises(InvalidKeyError):
            codec.validate(42)

    def test_invalid_key_is_invalid_argument(self, codec):
        with pytest.raises(InvalidArgumentError):
            codec.validate("a:b")

    def test_max_key_length_accounts_for_timeout_prefix(self, codec):
        # "_transient_timeout_" + "p1/"
        assert codec.max_key_length == OPTION_NAME_MAX_LENGTH - 22

    def test_key_at_length_budget_is_valid(self, codec):
        key = "k" * codec.max_key_length
        assert len(codec.timeout_option_prefix + key) == 191
        codec.validate(key)

    def test_key_one_over_length_budget_is_rejected(self, codec):
        key = "k" * (codec.max_key_length + 1)
        assert len(codec.timeout_option_prefix + key) == 192

        with pytest.raises(InvalidKeyError, match="must not exceed 169 chars"):
            codec.validate(key)

    def test_long_pool_name_shrinks_budget(self):
        codec = KeyCodec("x" * 108)

        with pytest.raises(InvalidKeyError):
            codec.validate("k" * 64)


class TestKeyCodecEncoding:
    """Test namespacing of keys."""

    def test_encode(self):
        assert KeyCodec("p1").encode("a") == "p1/a"

    def test_encode_empty_key(self):
        assert KeyCodec("p1").encode("") == "p1/"

    @pytest.mark.parametrize("key", ["a", "", "user.42", "with space", "ünïcode"])
    def test_decode_reverses_encode(self, key):
        codec = KeyCodec("pool")
        assert codec.decode(codec.encode(key)) == key

    def test_decode_foreign_key_fails(self):
        with pytest.raises(NamespaceError):
            KeyCodec("p1").decode("p2/a")

    def test_decode_requires_separator(self):
        with pytest.raises(NamespaceError):
            KeyCodec("p1").decode("p1a")

    def test_prefixes(self):
        codec = KeyCodec("p1")
        assert codec.namespace_prefix == "p1/"
        assert codec.option_prefix == "_transient_p1/"
        assert codec.timeout_option_prefix == "_transient_timeout_p1/"

    def test_decode_option_name(self):
        assert KeyCodec("p1").decode_option_name("_transient_p1/abc") == "abc"

    def test_decode_option_name_of_other_pool_fails(self):
        with pytest.raises(NamespaceError, match="not formed according"):
            KeyCodec("p1").decode_option_name("_transient_p2/abc")

    def test_decode_timeout_option_name_fails(self):
        with pytest.raises(NamespaceError):
            KeyCodec("p1").decode_option_name("_transient_timeout_p1/abc")
