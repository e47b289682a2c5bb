"""Pieces of the bzip2 block encoder: bit output, MTF coding and selectors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

RUNA = 0
RUNB = 1
N_GROUPS = 6
GROUP_SIZE = 50


class BitWriter:
    """Accumulates values of arbitrary bit width, most significant bit first."""

    def __init__(self) -> None:
        self._buffer = 0
        self._live = 0
        self._out = bytearray()

    def __len__(self) -> int:
        """Number of whole bytes emitted so far."""
        return len(self._out)

    @property
    def bit_count(self) -> int:
        """Total number of bits written, including those not yet flushed."""
        return len(self._out) * 8 + self._live

    def _flush_full_bytes(self) -> None:
        while self._live >= 8:
            self._live -= 8
            self._out.append((self._buffer >> self._live) & 0xFF)
        self._buffer &= (1 << self._live) - 1

    def write(self, nbits: int, value: int) -> None:
        """Append the low ``nbits`` bits of ``value``.

        Raises ValueError if ``nbits`` is negative or ``value`` does not fit.
        """
        if nbits < 0:
            raise ValueError(f"bit count must not be negative: {nbits}")
        if value < 0 or value >> nbits:
            raise ValueError(f"value {value} does not fit in {nbits} bits")
        self._buffer = (self._buffer << nbits) | value
        self._live += nbits
        self._flush_full_bytes()

    def put_uint32(self, value: int) -> None:
        """Append a 32-bit big-endian unsigned integer."""
        for shift in (24, 16, 8, 0):
            self.write(8, (value >> shift) & 0xFF)

    def put_byte(self, value: int) -> None:
        """Append a single byte."""
        self.write(8, value)

    def finish(self) -> bytes:
        """Pad the pending bits with zeros to a byte boundary and return all output."""
        if self._live:
            pad = 8 - self._live
            self._buffer <<= pad
            self._live += pad
            self._flush_full_bytes()
        return bytes(self._out)


@dataclass
class MtfResult:
    """Move-to-front values of a sorted block and the statistics around them."""

    values: list[int]
    frequencies: list[int]
    in_use: list[bool] = field(default_factory=lambda: [False] * 256)

    @property
    def n_in_use(self) -> int:
        return sum(self.in_use)

    @property
    def end_of_block(self) -> int:
        return self.n_in_use + 1

    @property
    def alpha_size(self) -> int:
        return self.n_in_use + 2


def _run_symbols(z_pend: int) -> Iterator[int]:
    """Encode a run of ``z_pend`` zeros in bijective base 2 using RUNA/RUNB."""
    z_pend -= 1
    while True:
        yield RUNB if z_pend & 1 else RUNA
        if z_pend < 2:
            return
        z_pend = (z_pend - 2) // 2


def generate_mtf_values(block: bytes | bytearray | Sequence[int], ptr: Sequence[int]) -> MtfResult:
    """Produce the MTF/RLE symbol stream for ``block`` sorted into order ``ptr``.

    ``ptr[i]`` is the start of the i-th smallest rotation; the symbol coded is
    the byte preceding it. The stream ends with the end-of-block symbol.
    """
    data = bytes(block)
    nblock = len(data)
    if len(ptr) != nblock:
        raise ValueError("sort order and block differ in length")
    if any(not 0 <= p < nblock for p in ptr):
        raise ValueError("sort order holds an index outside the block")

    in_use = [False] * 256
    for byte in data:
        in_use[byte] = True
    unseq_to_seq = {}
    for byte, used in enumerate(in_use):
        if used:
            unseq_to_seq[byte] = len(unseq_to_seq)
    n_in_use = len(unseq_to_seq)
    eob = n_in_use + 1

    values: list[int] = []
    order = list(range(n_in_use))
    z_pend = 0
    for start in ptr:
        symbol = unseq_to_seq[data[start - 1]]
        if order[0] == symbol:
            z_pend += 1
            continue
        if z_pend:
            values.extend(_run_symbols(z_pend))
            z_pend = 0
        position = order.index(symbol)
        del order[position]
        order.insert(0, symbol)
        values.append(position + 1)
    if z_pend:
        values.extend(_run_symbols(z_pend))
    values.append(eob)

    frequencies = [0] * (eob + 1)
    for value in values:
        frequencies[value] += 1
    return MtfResult(values=values, frequencies=frequencies, in_use=in_use)


def selector_mtf(selectors: Iterable[int], n_groups: int) -> list[int]:
    """Move-to-front code a sequence of coding-table selectors."""
    order = list(range(n_groups))
    coded: list[int] = []
    for selector in selectors:
        if not 0 <= selector < n_groups:
            raise ValueError(f"selector {selector} outside 0..{n_groups - 1}")
        position = order.index(selector)
        del order[position]
        order.insert(0, selector)
        coded.append(position)
    return coded


def choose_group_count(n_mtf: int) -> int:
    """Number of Huffman tables to use for a block of ``n_mtf`` MTF symbols."""
    if n_mtf <= 0:
        raise ValueError("a block must hold at least one MTF symbol")
    if n_mtf < 200:
        return 2
    if n_mtf < 600:
        return 3
    if n_mtf < 1200:
        return 4
    if n_mtf < 2400:
        return 5
    return 6