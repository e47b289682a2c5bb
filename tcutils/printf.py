"""printf-style formatting with C conversion rules and positional arguments."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, TextIO

INT_MAX = 2**31 - 1

_LENGTH_BITS = {"hh": 8, "h": 16, "l": 64, "ll": 64, "j": 64, "z": 64, "t": 64}
_VALID_TYPES = set("dioxXbBcspeEfFgGaAu")
_INT_TYPES = set("doxXbB")
_FLOAT_TYPES = set("eEfFgGaA")


class FormatError(ValueError):
    """Raised for a malformed format string or an unusable argument."""


@dataclass
class _Spec:
    align: str = "right"
    fill: str = " "
    sign: str = ""
    alt: bool = False
    width: int = 0
    precision: int = -1


def _isdigit(c: str) -> bool:
    return len(c) == 1 and "0" <= c <= "9"


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def _is_integral(arg: Any) -> bool:
    return isinstance(arg, int)


def _convert(arg: Any, length: str, typ: str) -> Any:
    """Convert an integer argument to the width implied by the length modifier."""
    if isinstance(arg, bool) and typ == "s":
        return arg
    if not isinstance(arg, int) or length == "L":
        return arg
    value = int(arg)
    is_signed = typ in ("d", "i")
    natural = 32 if -(2**31) <= value < 2**32 else 64
    bits = _LENGTH_BITS.get(length, natural)
    if bits <= 32:
        return _wrap(value, bits, is_signed)
    if is_signed:
        return _wrap(value, 64, True)
    return _wrap(value, natural, False)


def _pad(prefix: str, body: str, spec: _Spec) -> str:
    total = len(prefix) + len(body)
    missing = spec.width - total
    if missing <= 0:
        return prefix + body
    if spec.align == "numeric":
        return prefix + "0" * missing + body
    if spec.align == "left":
        return prefix + body + " " * missing
    return " " * missing + prefix + body


def _format_int(value: int, spec: _Spec, typ: str) -> str:
    magnitude = abs(value)
    digits = {
        "d": str,
        "o": lambda m: format(m, "o"),
        "x": lambda m: format(m, "x"),
        "X": lambda m: format(m, "X"),
        "b": lambda m: format(m, "b"),
        "B": lambda m: format(m, "b"),
    }[typ](magnitude)
    prefix = "-" if value < 0 else spec.sign
    if spec.alt:
        if typ in "xXbB":
            prefix += "0" + typ
        elif typ == "o" and spec.precision <= len(digits) and not digits.startswith("0"):
            digits = "0" + digits
    if spec.precision > len(digits):
        digits = digits.rjust(spec.precision, "0")
    return _pad(prefix, digits, spec)


def _format_float(value: float, spec: _Spec, typ: str) -> str:
    if typ in "aA":
        prefix = "-" if value < 0 or str(value).startswith("-") else spec.sign
        text = float.hex(abs(value))
        if "." in text:
            mantissa, _, exponent = text.partition("p")
            mantissa = mantissa.rstrip("0").rstrip(".")
            text = f"{mantissa}p{exponent}"
        if typ == "A":
            text = text.upper()
        return _pad(prefix, text, spec)
    flags = ""
    if spec.align == "left":
        flags += "-"
    flags += spec.sign
    if spec.alt:
        flags += "#"
    if spec.align == "numeric":
        flags += "0"
    width = str(spec.width) if spec.width else ""
    precision = f".{spec.precision}" if spec.precision >= 0 else ""
    return f"%{flags}{width}{precision}{typ}" % value


def _format_arg(arg: Any, spec: _Spec, typ: str) -> str:
    if arg is None:
        return _pad("", "(nil)" if typ == "p" else "(null)", spec)
    if typ == "p":
        if isinstance(arg, int) and not isinstance(arg, bool):
            return _pad("", "0x" + format(arg, "x"), spec)
        raise FormatError("invalid type specifier")
    if isinstance(arg, bool) and typ == "s":
        return _pad("", "true" if arg else "false", spec)
    if isinstance(arg, int):
        if typ == "s":
            typ = "d"
        if typ in _INT_TYPES:
            return _format_int(int(arg), spec, typ)
        raise FormatError("invalid type specifier")
    if isinstance(arg, float):
        if typ in _FLOAT_TYPES:
            return _format_float(arg, spec, typ)
        if typ == "s":
            text = repr(arg)
            if text.endswith(".0"):
                text = text[:-2]
            prefix = ""
            if not text.startswith("-"):
                prefix = spec.sign
            return _pad(prefix, text, spec)
        raise FormatError("invalid type specifier")
    if isinstance(arg, str):
        if typ == "s" or (typ == "c" and len(arg) == 1):
            return _pad("", arg, spec)
        raise FormatError("invalid type specifier")
    if typ == "s":
        return _pad("", str(arg), spec)
    raise FormatError("invalid type specifier")


class _Formatter:
    def __init__(self, fmt: str, args: tuple[Any, ...]) -> None:
        self.fmt = fmt
        self.args = args
        self.next_auto = 0
        self.mode: str | None = None

    def _char(self, i: int) -> str:
        return self.fmt[i] if i < len(self.fmt) else ""

    def get_arg(self, index: int) -> Any:
        if index < 0:
            if self.mode == "manual":
                raise FormatError("cannot switch from manual to automatic argument indexing")
            self.mode = "auto"
            position = self.next_auto
            self.next_auto += 1
        else:
            if self.mode == "auto":
                raise FormatError("cannot switch from automatic to manual argument indexing")
            self.mode = "manual"
            position = index - 1
        if position >= len(self.args):
            raise FormatError("argument not found")
        return self.args[position]

    def _parse_int(self, i: int) -> tuple[int, int]:
        j = i
        while _isdigit(self._char(j)):
            j += 1
        return int(self.fmt[i:j]), j

    def _header(self, i: int, spec: _Spec) -> tuple[int, int]:
        arg_index = -1
        c = self._char(i)
        if _isdigit(c):
            value, i = self._parse_int(i)
            if self._char(i) == "$":
                i += 1
                arg_index = min(value, INT_MAX)
            else:
                if c == "0":
                    spec.fill = "0"
                if value != 0:
                    if value > INT_MAX:
                        raise FormatError("number is too big")
                    spec.width = value
                    return i, arg_index
        while True:
            c = self._char(i)
            if c == "-":
                spec.align = "left"
            elif c == "+":
                spec.sign = "+"
            elif c == "0":
                spec.fill = "0"
            elif c == " ":
                if spec.sign != "+":
                    spec.sign = " "
            elif c == "#":
                spec.alt = True
            else:
                break
            i += 1
        c = self._char(i)
        if _isdigit(c):
            width, i = self._parse_int(i)
            if width > INT_MAX:
                raise FormatError("number is too big")
            spec.width = width
        elif c == "*":
            i += 1
            width = self.get_arg(-1)
            if not _is_integral(width):
                raise FormatError("width is not integer")
            width = int(width)
            if width < 0:
                spec.align = "left"
                width = -width
            if width > INT_MAX:
                raise FormatError("number is too big")
            spec.width = width
        return i, arg_index

    def run(self) -> str:
        fmt = self.fmt
        out: list[str] = []
        pos = 0
        while True:
            pct = fmt.find("%", pos)
            if pct == -1:
                out.append(fmt[pos:])
                break
            out.append(fmt[pos:pct])
            i = pct + 1
            if self._char(i) == "%":
                out.append("%")
                pos = i + 1
                continue

            spec = _Spec()
            i, arg_index = self._header(i, spec)
            if arg_index == 0:
                raise FormatError("argument not found")

            if self._char(i) == ".":
                i += 1
                c = self._char(i)
                if _isdigit(c):
                    spec.precision, i = self._parse_int(i)
                elif c == "*":
                    i += 1
                    precision = self.get_arg(-1)
                    if not _is_integral(precision):
                        raise FormatError("precision is not integer")
                    precision = int(precision)
                    if not -(2**31) <= precision <= INT_MAX:
                        raise FormatError("number is too big")
                    spec.precision = max(precision, 0)
                else:
                    spec.precision = 0

            arg = self.get_arg(arg_index)
            if spec.precision >= 0 and _is_integral(arg):
                spec.fill = " "
            if spec.precision >= 0 and isinstance(arg, str):
                arg = arg[: spec.precision]
            if spec.alt and _is_integral(arg) and arg == 0:
                spec.alt = False
            if spec.fill == "0":
                if isinstance(arg, (int, float)) and spec.align != "left":
                    spec.align = "numeric"
                else:
                    spec.fill = " "

            length = ""
            c = self._char(i)
            if c in ("h", "l") and self._char(i + 1) == c:
                length = c + c
                i += 2
            elif c and c in "hljztL":
                length = c
                i += 1

            typ = self._char(i)
            if not typ:
                raise FormatError("invalid format string")
            i += 1
            arg = _convert(arg, length, typ)
            if _is_integral(arg):
                if typ in ("i", "u"):
                    typ = "d"
                elif typ == "c":
                    arg = chr(_wrap(int(arg), 8, False))
            if typ not in _VALID_TYPES:
                raise FormatError("invalid type specifier")
            out.append(_format_arg(arg, spec, typ))
            pos = i
        return "".join(out)


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to the printf-style ``fmt`` and return the text."""
    return _Formatter(fmt, args).run()


def fprintf(file: TextIO, fmt: str, *args: Any) -> int:
    """Write formatted text to ``file``; return the number of characters written."""
    text = sprintf(fmt, *args)
    file.write(text)
    return len(text)


def printf(fmt: str, *args: Any) -> int:
    """Write formatted text to standard output; return the character count."""
    return fprintf(sys.stdout, fmt, *args)