"""Checksums, hashing, map and UTF-8 helpers, command-line splitting, printf-style formatting, bzip2 encoder stages and threat-list entries."""

__version__ = "0.1.0"

__all__ = [
    "checksums",
    "hashing",
    "maputils",
    "utf8",
    "cmdline",
    "printf",
    "bzip2",
    "threat",
]