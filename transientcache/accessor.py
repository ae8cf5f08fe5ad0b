"""Existence-safe transient lookup."""

from typing import Any, NamedTuple

from .exceptions import StoreError
from .keys import OPTION_NAME_PREFIX_TRANSIENT
from .stores.base import OptionsStore, TransientStore


class Lookup(NamedTuple):
    """Outcome of a transient lookup."""

    found: bool
    value: Any = None


def get_with_existence(
    transients: TransientStore,
    options: OptionsStore,
    storage_key: str,
    marker: Any,
) -> Lookup:
    """
    Look up a transient, telling a stored ``NOT_FOUND`` value from a missing key.

    The transient store answers ``NOT_FOUND`` both when the key is absent and
    when the value stored under it is ``NOT_FOUND`` itself. Only in that case
    is the transient's value record checked in the options store, with
    ``marker`` as the fallback so its absence can be recognized.

    The two reads are not isolated: a concurrent write or delete between them
    can produce an outdated answer.

    Raises:
        StoreError: If either store fails.
    """
    value = transients.get_transient(storage_key)
    if value is not transients.NOT_FOUND:
        return Lookup(True, value)

    option_name = f"{OPTION_NAME_PREFIX_TRANSIENT}{storage_key}"
    try:
        record = options.get_option(option_name, marker)
    except StoreError as e:
        raise StoreError(f'Could not verify existence of transient "{storage_key}"') from e

    if record is marker:
        return Lookup(False)

    return Lookup(True, value)
