"""Small hashing helpers: FNV-1a and hash combining."""

from __future__ import annotations

from typing import Hashable

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x1000193
_GOLDEN = 0x9E3779B9


def fnv1a(data: str | bytes | bytearray) -> int:
    """Return the 32-bit FNV-1a hash of ``data``.

    Text is hashed as UTF-8. Bytes above 0x7F are folded in as signed
    characters, sign-extended to 32 bits.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    value = _FNV_OFFSET
    for byte in bytes(data):
        signed = byte - 0x100 if byte & 0x80 else byte
        value ^= signed & _MASK32
        value = (value * _FNV_PRIME) & _MASK32
    return value


def hash_combine(seed: int, value: Hashable) -> int:
    """Mix the hash of ``value`` into ``seed`` and return the new 64-bit seed."""
    seed &= _MASK64
    mixed = (hash(value) & _MASK64) + _GOLDEN + ((seed << 6) & _MASK64) + (seed >> 2)
    return (seed ^ mixed) & _MASK64


def hash_pair(first: Hashable, second: Hashable) -> int:
    """Hash a pair by combining the hashes of both members in order."""
    return hash_combine(hash_combine(0, first), second)