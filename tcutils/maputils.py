"""Helpers for dictionaries and dictionary-backed multimaps."""

from __future__ import annotations

from typing import Hashable, Mapping, MutableMapping, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def map_get_value(mapping: Mapping[K, V], key: K) -> V | None:
    """Return the value stored under ``key``, or ``None`` if it is absent."""
    return mapping.get(key)


def multimap_erase_pair(multimap: MutableMapping[K, list[V]], key: K, value: V) -> int:
    """Remove every ``value`` stored under ``key``; return how many were removed.

    The key is dropped once no values remain under it.
    """
    values = multimap.get(key)
    if values is None:
        return 0
    kept = [item for item in values if item != value]
    removed = len(values) - len(kept)
    if kept:
        multimap[key] = kept
    else:
        del multimap[key]
    return removed