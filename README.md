# tcutils

Small, self-contained utilities in plain Python, with no dependencies
outside the standard library.

## Modules

- `tcutils.checksums`
  - `adler32(data, value=1)`: updates an Adler-32 checksum; `None` data
    gives the initial value 1.
  - `adler32_combine(adler1, adler2, length)`: combines two Adler-32
    checksums, `length` being the size of the second block; a negative
    length gives `0xFFFFFFFF`.
  - `bz_crc32(data, crc=0)`: the MSB-first CRC-32 used by bzip2; calls can be
    chained by passing the previous result.
- `tcutils.hashing`
  - `fnv1a(data)`: 32-bit FNV-1a of bytes or text (text is hashed as UTF-8;
    bytes above 0x7F are folded in as sign-extended characters).
  - `hash_combine(seed, value)`: mixes `hash(value)` into a 64-bit seed.
  - `hash_pair(first, second)`: combines the hashes of both members in order.
- `tcutils.maputils`
  - `map_get_value(mapping, key)`: the stored value, or `None` when the key
    is missing.
  - `multimap_erase_pair(multimap, key, value)`: for a dictionary of lists,
    removes every `value` under `key`, drops the key once its list is empty,
    and returns how many entries were removed.
- `tcutils.utf8`
  - `append(codepoint, buffer)`, `utf32_to_utf8`, `utf8_to_utf32`,
    `utf16_to_utf8`, `utf8_to_utf16`: conversions; decoding bad input raises
    `InvalidUtf8Error` (a `ValueError` carrying `position` and `reason`), and
    encoding a surrogate, a value above U+10FFFF or unpaired UTF-16 raises
    `ValueError`.
  - `find_invalid(data)`: offset of the first invalid sequence, or `None`.
  - `is_valid(data)`, `starts_with_bom(data)`.
  - `replace_invalid(data, replacement=0xFFFD)`: replaces each invalid
    sequence with one replacement character.
- `tcutils.cmdline`
  - `parse_command_line(cmdline)`: splits a flat command line on whitespace;
    a double quote starts an argument that runs to the next double quote or
    to the end, and a NUL character ends the line.
- `tcutils.printf`
  - `sprintf(fmt, *args)`, `fprintf(file, fmt, *args)`, `printf(fmt, *args)`:
    C-style formatting with flags, width, precision, `*` arguments, `n$`
    positional arguments and length modifiers (`hh`, `h`, `l`, `ll`, `j`,
    `z`, `t`, `L`). `fprintf` and `printf` return the number of characters
    written. A malformed format string or an unusable argument raises
    `FormatError`.
- `tcutils.bzip2`
  - `BitWriter`: MSB-first bit output with `write(nbits, value)`,
    `put_uint32`, `put_byte`, `finish()` (pads to a byte boundary and returns
    the bytes), `bit_count` and `len()`.
  - `generate_mtf_values(block, ptr)`: move-to-front and RUNA/RUNB run-length
    coding of a block in a given rotation order, returning an `MtfResult`
    (`values`, `frequencies`, `in_use`, `n_in_use`, `end_of_block`,
    `alpha_size`).
  - `selector_mtf(selectors, n_groups)`: move-to-front coding of table
    selectors.
  - `choose_group_count(n_mtf)`: how many coding tables (2 to 6) a block of
    that many MTF symbols uses.
- `tcutils.threat`
  - `ThreatReference`: one threat-list entry with `owner`, `victim`,
    `base_amount`, `temp_modifier`, `online` and `taunted`; `threat()` is the
    base amount plus the modifier, never below zero, and `is_online`,
    `is_available`, `is_suppressed`, `is_offline`, `taunt_state`,
    `is_taunting` and `is_detaunted` report its state.
  - `TauntState` (`DETAUNT`, `NONE`, `TAUNT`) and `OnlineState` (`OFFLINE`,
    `SUPPRESSED`, `ONLINE`).

## Examples

```python
from tcutils.checksums import adler32
from tcutils.hashing import fnv1a
from tcutils.printf import sprintf
from tcutils.cmdline import parse_command_line

adler32(b"Wikipedia")               # 0x11E60398
fnv1a("")                           # 0x811C9DC5
sprintf("%5.2f|%-4d|", 3.14159, 7)  # ' 3.14|7   |'
parse_command_line('prog "a b" c')  # ['prog', 'a b', 'c']
```

## What it does not do

- `tcutils.bzip2` holds only some stages of the encoder. It does not sort
  blocks, build Huffman tables or write a complete compressed stream, and it
  cannot decompress.
- `tcutils.threat` models single threat-list entries only; there is no
  manager that keeps, sorts or selects from a whole threat list.
- The package provides no command-line programs.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Running the tests

```
pytest
```