"""Helpers shared by the batch loaders."""

from typing import Callable, Hashable, Iterable, Optional, Sequence, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def order_by_keys(
    keys: Sequence[K], rows: Iterable[V], key_of: Callable[[V], K]
) -> list[Optional[V]]:
    """Line bulk-query rows up with the keys that were requested.

    The store returns rows in whatever order it likes and skips keys that
    have no row. The loader contract is one result per key, in key order.

    Args:
        keys: Keys in the order the loader received them
        rows: Rows returned by the bulk query
        key_of: Extracts a row's key

    Returns:
        The row for each key, or None where there was no row
    """
    by_key = {key_of(row): row for row in rows}
    return [by_key.get(key) for key in keys]
