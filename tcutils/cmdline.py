"""Splitting a flat command line into arguments."""

from __future__ import annotations

import re

_WHITESPACE = " \t\n\v\f\r"
_LEADING_SPACE = re.compile(r"[ \t\n\v\f\r]*")
_WORD = re.compile(r"[^ \t\n\v\f\r]*")


def parse_command_line(cmdline: str) -> list[str]:
    """Split ``cmdline`` into arguments.

    Arguments are separated by whitespace; a double quote starts an argument
    that runs to the next double quote or to the end. The character ending an
    argument is consumed. A NUL character ends the command line.
    """
    cmdline = cmdline.split("\0", 1)[0]
    end = len(cmdline)
    args: list[str] = []
    pos = 0
    while pos < end:
        pos = _LEADING_SPACE.match(cmdline, pos).end()
        if pos < end and cmdline[pos] == '"':
            pos += 1
            stop = cmdline.find('"', pos)
            if stop == -1:
                stop = end
        else:
            stop = _WORD.match(cmdline, pos).end()
        if pos < end:
            args.append(cmdline[pos:stop])
        pos = stop + 1
    return args