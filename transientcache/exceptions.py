"""Exception hierarchy for transientcache."""


class CacheError(Exception):
    """A cache operation could not be completed."""


class InvalidArgumentError(CacheError, ValueError):
    """The caller passed an argument the cache cannot accept."""


class InvalidKeyError(InvalidArgumentError):
    """Cache key contains a reserved symbol or is too long for this pool."""


class InvalidTtlError(InvalidArgumentError):
    """TTL is neither a whole number of seconds nor a resolvable interval."""


class NamespaceError(CacheError):
    """A storage key or option name does not belong to the pool's namespace."""


class StoreError(Exception):
    """A store failed for a reason other than the record being absent."""
