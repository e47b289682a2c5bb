import pytest
from hypothesis import given, strategies as st

from tcutils.bzip2 import (
    RUNA,
    RUNB,
    BitWriter,
    choose_group_count,
    generate_mtf_values,
    selector_mtf,
)


def _sort_order(block: bytes) -> list[int]:
    n = len(block)
    doubled = block + block
    return sorted(range(n), key=lambda i: (doubled[i : i + n], i))


def _undo_mtf(values: list[int], symbols: list[int]) -> list[int]:
    """Rebuild the coded byte column from MTF/RLE output."""
    order = list(symbols)
    out: list[int] = []
    run = 0
    weight = 1
    for value in values[:-1]:
        if value in (RUNA, RUNB):
            run += weight * (value + 1)
            weight *= 2
            continue
        out.extend([order[0]] * run)
        run, weight = 0, 1
        sym = order.pop(value - 1)
        order.insert(0, sym)
        out.append(sym)
    out.extend([order[0]] * run)
    return out


def test_stream_header_bytes():
    writer = BitWriter()
    for byte in b"BZh":
        writer.put_byte(byte)
    writer.put_byte(ord("0") + 9)
    assert writer.finish() == b"BZh9"


def test_block_magic():
    writer = BitWriter()
    for byte in (0x31, 0x41, 0x59, 0x26, 0x53, 0x59):
        writer.put_byte(byte)
    assert writer.finish() == bytes.fromhex("314159265359")


def test_put_uint32_big_endian():
    writer = BitWriter()
    writer.put_uint32(0x17724538)
    assert writer.finish() == bytes.fromhex("17724538")


def test_finish_pads_with_zero_bits():
    writer = BitWriter()
    writer.write(1, 1)
    assert writer.bit_count == 1
    assert writer.finish() == b"\x80"


def test_write_rejects_oversized_value():
    writer = BitWriter()
    with pytest.raises(ValueError):
        writer.write(3, 8)


@given(st.lists(st.tuples(st.integers(1, 24), st.integers(0, 2**24 - 1))))
def test_bits_round_trip(fields):
    writer = BitWriter()
    expected_bits = ""
    for nbits, value in fields:
        value &= (1 << nbits) - 1
        writer.write(nbits, value)
        expected_bits += format(value, f"0{nbits}b")
    data = writer.finish()
    assert len(data) == (len(expected_bits) + 7) // 8
    got_bits = "".join(format(b, "08b") for b in data)
    assert got_bits[: len(expected_bits)] == expected_bits
    assert set(got_bits[len(expected_bits) :]) <= {"0"}


def test_single_symbol_run():
    block = b"aaa"
    result = generate_mtf_values(block, _sort_order(block))
    assert result.values == [RUNA, RUNA, 2]
    assert result.n_in_use == 1
    assert result.frequencies == [2, 0, 1]


def test_mismatched_order_length():
    with pytest.raises(ValueError):
        generate_mtf_values(b"abc", [0, 1])


@given(st.binary(min_size=1, max_size=200))
def test_mtf_reconstructs_last_column(block):
    ptr = _sort_order(block)
    result = generate_mtf_values(block, ptr)
    assert result.values[-1] == result.end_of_block
    assert sum(result.frequencies) == len(result.values)
    for value, count in enumerate(result.frequencies):
        assert result.values.count(value) == count
    symbols = sorted(set(block))
    rebuilt = _undo_mtf(result.values, list(range(len(symbols))))
    assert [symbols[s] for s in rebuilt] == [block[p - 1] for p in ptr]


def test_selector_mtf_example():
    assert selector_mtf([0, 0, 1, 0], 2) == [0, 0, 1, 1]


def test_selector_out_of_range():
    with pytest.raises(ValueError):
        selector_mtf([0, 6], 6)


@given(st.lists(st.integers(0, 5)))
def test_selector_mtf_round_trip(selectors):
    coded = selector_mtf(selectors, 6)
    order = list(range(6))
    decoded = []
    for position in coded:
        sel = order.pop(position)
        order.insert(0, sel)
        decoded.append(sel)
    assert decoded == selectors


@pytest.mark.parametrize(
    "n_mtf, groups",
    [(1, 2), (199, 2), (200, 3), (599, 3), (600, 4), (1199, 4), (1200, 5), (2399, 5), (2400, 6)],
)
def test_choose_group_count(n_mtf, groups):
    assert choose_group_count(n_mtf) == groups


def test_choose_group_count_rejects_empty():
    with pytest.raises(ValueError):
        choose_group_count(0)