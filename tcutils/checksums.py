"""Adler-32 and the bzip2 flavour of CRC-32."""

from __future__ import annotations

from itertools import accumulate

ADLER_BASE = 65521
_CRC_POLYNOMIAL = 0x04C11DB7
_MASK32 = 0xFFFFFFFF


def _make_crc_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte << 24
        for _ in range(8):
            crc = (crc << 1) ^ _CRC_POLYNOMIAL if crc & 0x80000000 else crc << 1
            crc &= _MASK32
        table.append(crc)
    return tuple(table)


BZ_CRC32_TABLE: tuple[int, ...] = _make_crc_table()


def adler32(data: bytes | bytearray | memoryview | None, value: int = 1) -> int:
    """Update an Adler-32 checksum with ``data``.

    ``value`` is the checksum so far; ``None`` data yields the initial value 1.
    """
    if data is None:
        return 1
    data = bytes(data)
    a = value & 0xFFFF
    b = (value >> 16) & 0xFFFF
    b = (b + a * len(data) + sum(accumulate(data))) % ADLER_BASE
    a = (a + sum(data)) % ADLER_BASE
    return a | (b << 16)


def adler32_combine(adler1: int, adler2: int, length: int) -> int:
    """Combine two Adler-32 checksums; ``length`` is the size of the second block.

    A negative length yields 0xFFFFFFFF, an invalid checksum.
    """
    if length < 0:
        return 0xFFFFFFFF
    rem = length % ADLER_BASE
    sum1 = adler1 & 0xFFFF
    sum2 = (rem * sum1) % ADLER_BASE
    sum1 += (adler2 & 0xFFFF) + ADLER_BASE - 1
    sum2 += ((adler1 >> 16) & 0xFFFF) + ((adler2 >> 16) & 0xFFFF) + ADLER_BASE - rem
    if sum1 >= ADLER_BASE:
        sum1 -= ADLER_BASE
    if sum1 >= ADLER_BASE:
        sum1 -= ADLER_BASE
    if sum2 >= ADLER_BASE << 1:
        sum2 -= ADLER_BASE << 1
    if sum2 >= ADLER_BASE:
        sum2 -= ADLER_BASE
    return sum1 | (sum2 << 16)


def bz_crc32(data: bytes | bytearray | memoryview, crc: int = 0) -> int:
    """Update a bzip2 (MSB-first) CRC-32 with ``data``.

    ``crc`` is a previously returned, finalised CRC, so calls can be chained.
    """
    state = crc ^ _MASK32
    for byte in bytes(data):
        state = ((state << 8) & _MASK32) ^ BZ_CRC32_TABLE[(state >> 24) ^ byte]
    return state ^ _MASK32