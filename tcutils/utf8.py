"""UTF-8 validation, repair and conversion to and from UTF-16 and UTF-32."""

from __future__ import annotations

from enum import Enum, auto
from typing import Iterable, Iterator

BOM = b"\xef\xbb\xbf"
REPLACEMENT_CHARACTER = 0xFFFD

_LEAD_MASKS = {1: 0x7F, 2: 0x1F, 3: 0x0F, 4: 0x07}


class InvalidUtf8Error(ValueError):
    """Raised when a byte sequence is not valid UTF-8."""

    def __init__(self, position: int, reason: str) -> None:
        super().__init__(f"invalid UTF-8 at byte {position}: {reason}")
        self.position = position
        self.reason = reason


class _Status(Enum):
    OK = auto()
    NOT_ENOUGH_ROOM = auto()
    INVALID_LEAD = auto()
    INCOMPLETE_SEQUENCE = auto()
    OVERLONG_SEQUENCE = auto()
    INVALID_CODE_POINT = auto()


def _is_surrogate(cp: int) -> bool:
    return 0xD800 <= cp <= 0xDFFF


def _is_code_point_valid(cp: int) -> bool:
    return 0 <= cp <= 0x10FFFF and not _is_surrogate(cp)


def _is_trail(byte: int) -> bool:
    return byte & 0xC0 == 0x80


def _sequence_length(lead: int) -> int:
    if lead < 0x80:
        return 1
    if lead >> 5 == 0x6:
        return 2
    if lead >> 4 == 0xE:
        return 3
    if lead >> 3 == 0x1E:
        return 4
    return 0


def _is_overlong(cp: int, length: int) -> bool:
    if cp < 0x80:
        return length != 1
    if cp < 0x800:
        return length != 2
    if cp < 0x10000:
        return length != 3
    return False


def _decode_at(data: bytes, pos: int) -> tuple[_Status, int, int]:
    """Decode the sequence starting at ``pos``: (status, code point, length)."""
    lead = data[pos]
    length = _sequence_length(lead)
    if length == 0:
        return _Status.INVALID_LEAD, 0, 0
    cp = lead & _LEAD_MASKS[length]
    trails = data[pos + 1 : pos + length]
    for byte in trails:
        if not _is_trail(byte):
            return _Status.INCOMPLETE_SEQUENCE, 0, 0
        cp = (cp << 6) | (byte & 0x3F)
    if len(trails) < length - 1:
        return _Status.NOT_ENOUGH_ROOM, 0, 0
    if not _is_code_point_valid(cp):
        return _Status.INVALID_CODE_POINT, 0, 0
    if _is_overlong(cp, length):
        return _Status.OVERLONG_SEQUENCE, 0, 0
    return _Status.OK, cp, length


def _decode(data: bytes) -> Iterator[int]:
    pos = 0
    while pos < len(data):
        status, cp, length = _decode_at(data, pos)
        if status is not _Status.OK:
            raise InvalidUtf8Error(pos, status.name.lower().replace("_", " "))
        yield cp
        pos += length


def _encode(cp: int) -> bytes:
    if not _is_code_point_valid(cp):
        raise ValueError(f"invalid code point: {cp:#x}")
    if cp < 0x80:
        return bytes((cp,))
    if cp < 0x800:
        return bytes((0xC0 | (cp >> 6), 0x80 | (cp & 0x3F)))
    if cp < 0x10000:
        return bytes((0xE0 | (cp >> 12), 0x80 | ((cp >> 6) & 0x3F), 0x80 | (cp & 0x3F)))
    return bytes(
        (
            0xF0 | (cp >> 18),
            0x80 | ((cp >> 12) & 0x3F),
            0x80 | ((cp >> 6) & 0x3F),
            0x80 | (cp & 0x3F),
        )
    )


def _code_point(value: int | str) -> int:
    return ord(value) if isinstance(value, str) else value


def append(codepoint: int | str, buffer: bytearray) -> None:
    """Append the UTF-8 encoding of ``codepoint`` to ``buffer``.

    Raises ValueError for surrogates and values above U+10FFFF.
    """
    buffer.extend(_encode(_code_point(codepoint)))


def utf16_to_utf8(units: Iterable[int]) -> bytes:
    """Encode a sequence of UTF-16 code units as UTF-8.

    Raises ValueError on an unpaired surrogate.
    """
    out = bytearray()
    iterator = iter(units)
    for unit in iterator:
        cp = unit & 0xFFFF
        if 0xD800 <= cp <= 0xDBFF:
            trail = next(iterator, None)
            if trail is None:
                raise ValueError(f"invalid UTF-16: lead surrogate {cp:#x} at end")
            trail &= 0xFFFF
            if not 0xDC00 <= trail <= 0xDFFF:
                raise ValueError(f"invalid UTF-16: unexpected unit {trail:#x}")
            cp = 0x10000 + ((cp - 0xD800) << 10) + (trail - 0xDC00)
        elif 0xDC00 <= cp <= 0xDFFF:
            raise ValueError(f"invalid UTF-16: lone trail surrogate {cp:#x}")
        append(cp, out)
    return bytes(out)


def utf8_to_utf16(data: bytes | bytearray) -> list[int]:
    """Decode UTF-8 into a list of UTF-16 code units."""
    units: list[int] = []
    for cp in _decode(bytes(data)):
        if cp > 0xFFFF:
            cp -= 0x10000
            units.extend((0xD800 + (cp >> 10), 0xDC00 + (cp & 0x3FF)))
        else:
            units.append(cp)
    return units


def utf32_to_utf8(codepoints: Iterable[int] | str) -> bytes:
    """Encode code points (integers or characters) as UTF-8."""
    out = bytearray()
    for cp in codepoints:
        append(cp, out)
    return bytes(out)


def utf8_to_utf32(data: bytes | bytearray) -> list[int]:
    """Decode UTF-8 into a list of code points."""
    return list(_decode(bytes(data)))


def find_invalid(data: bytes | bytearray) -> int | None:
    """Return the offset of the first invalid sequence, or None if all is valid."""
    data = bytes(data)
    pos = 0
    while pos < len(data):
        status, _, length = _decode_at(data, pos)
        if status is not _Status.OK:
            return pos
        pos += length
    return None


def is_valid(data: bytes | bytearray) -> bool:
    """Tell whether ``data`` is entirely valid UTF-8."""
    return find_invalid(data) is None


def replace_invalid(
    data: bytes | bytearray, replacement: int | str = REPLACEMENT_CHARACTER
) -> bytes:
    """Return ``data`` with each invalid sequence replaced by one ``replacement``."""
    data = bytes(data)
    marker = _encode(_code_point(replacement))
    out = bytearray()
    pos = 0
    end = len(data)
    while pos < end:
        status, _, length = _decode_at(data, pos)
        if status is _Status.OK:
            out += data[pos : pos + length]
            pos += length
        elif status is _Status.NOT_ENOUGH_ROOM:
            out += marker
            break
        elif status is _Status.INVALID_LEAD:
            out += marker
            pos += 1
        else:
            out += marker
            pos += 1
            while pos < end and _is_trail(data[pos]):
                pos += 1
    return bytes(out)


def starts_with_bom(data: bytes | bytearray) -> bool:
    """Tell whether ``data`` begins with the UTF-8 byte order mark."""
    return bytes(data[:3]) == BOM