"""Cache key validation and namespacing."""

from .exceptions import InvalidKeyError, NamespaceError

RESERVED_KEY_SYMBOLS = "{}()/\\@:"
NAMESPACE_SEPARATOR = "/"

OPTION_NAME_PREFIX_TRANSIENT = "_transient_"
OPTION_NAME_PREFIX_TIMEOUT = "timeout_"
OPTION_NAME_MAX_LENGTH = 191

# Longest prefix the options table ever puts in front of a storage key.
TIMEOUT_OPTION_NAME_PREFIX = OPTION_NAME_PREFIX_TRANSIENT + OPTION_NAME_PREFIX_TIMEOUT


class KeyCodec:
    """Maps raw cache keys to namespaced storage keys for one pool."""

    def __init__(self, pool_name: str):
        self.pool_name = pool_name

    @property
    def namespace_prefix(self) -> str:
        """Prefix shared by every storage key of this pool."""
        return f"{self.pool_name}{NAMESPACE_SEPARATOR}"

    @property
    def option_prefix(self) -> str:
        """Prefix of the option names holding this pool's values."""
        return f"{OPTION_NAME_PREFIX_TRANSIENT}{self.namespace_prefix}"

    @property
    def timeout_option_prefix(self) -> str:
        """Prefix of the option names holding this pool's expiry times."""
        return f"{TIMEOUT_OPTION_NAME_PREFIX}{self.namespace_prefix}"

    @property
    def max_key_length(self) -> int:
        """Longest raw key this pool accepts."""
        return OPTION_NAME_MAX_LENGTH - len(self.timeout_option_prefix)

    def validate(self, key: str) -> None:
        """
        Validate a raw cache key.

        The length budget is measured against the timeout record, the longest
        name derived from a key, so every record written for a valid key fits.

        Raises:
            InvalidKeyError: If the key is not a string, is too long, or
                contains a reserved symbol.
        """
        if not isinstance(key, str):
            raise InvalidKeyError(
                f"Cache key must be a string, got {type(key).__name__}"
            )

        if len(self.timeout_option_prefix) + len(key) > OPTION_NAME_MAX_LENGTH:
            raise InvalidKeyError(
                f"Given the {len(self.pool_name)} char length of this cache pool's "
                f"name, the key length must not exceed {self.max_key_length} chars"
            )

        for symbol in RESERVED_KEY_SYMBOLS:
            if symbol in key:
                raise InvalidKeyError(f'Cache key "{key}" is invalid')

    def encode(self, key: str) -> str:
        """Give a raw key this pool's namespace."""
        return f"{self.namespace_prefix}{key}"

    def decode(self, storage_key: str) -> str:
        """Strip this pool's namespace from a storage key."""
        prefix = self.namespace_prefix
        if not storage_key.startswith(prefix):
            raise NamespaceError(
                f'Storage key "{storage_key}" does not belong to pool "{self.pool_name}"'
            )
        return storage_key[len(prefix) :]

    def decode_option_name(self, option_name: str) -> str:
        """Get the raw cache key stored under a value option name."""
        if not option_name.startswith(self.option_prefix):
            raise NamespaceError(
                f'Option name "{option_name}" is not formed according to this cache pool'
            )
        return self.decode(option_name[len(OPTION_NAME_PREFIX_TRANSIENT) :])
