"""Utilities for measuring strings that carry terminal control sequences."""

import functools
import re


@functools.lru_cache(maxsize=None)
def _get_ansi_pattern() -> re.Pattern:
    # https://stackoverflow.com/a/14693789
    return re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def strip_ansi_sequences(x: str) -> str:
    return _get_ansi_pattern().sub("", x)


def display_width(x: str) -> int:
    """Number of characters `x` occupies on a terminal. Escape sequences take up no
    room, so they're stripped before counting."""
    return len(strip_ansi_sequences(x))


def pad_to_width(x: str, width: int) -> str:
    """Right-pad `x` with spaces until its display width reaches `width`."""
    return x + " " * max(width - display_width(x), 0)
