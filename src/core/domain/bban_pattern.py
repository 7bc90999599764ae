"""BBAN pattern parsing.

Country profiles describe their BBAN as a concatenation of segments such as
``[A-Z]{4}\\d{6}\\d{8}``. Each segment is one character class plus a count:

- ``\\d``        decimal digit
- ``[A-Z]``     uppercase letter
- ``[A-Z0-9]``  uppercase letter or digit

A missing ``{n}`` means a single position. Anything else is rejected so that a
typo in the country table fails loudly at import time.
"""

from __future__ import annotations

import re
import string
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache


class CharClass(str, Enum):
    """Character class of a single BBAN position."""

    DIGIT = "n"
    LETTER = "a"
    ALNUM = "c"

    @property
    def alphabet(self) -> str:
        if self is CharClass.DIGIT:
            return string.digits
        if self is CharClass.LETTER:
            return string.ascii_uppercase
        return string.ascii_uppercase + string.digits

    @property
    def admits_letters(self) -> bool:
        return self is not CharClass.DIGIT


_CLASS_TOKENS: dict[str, CharClass] = {
    "\\d": CharClass.DIGIT,
    "[A-Z]": CharClass.LETTER,
    "[A-Z0-9]": CharClass.ALNUM,
}

_SEGMENT_RE = re.compile(r"(\\d|\[A-Z\]|\[A-Z0-9\])(?:\{(\d+)\})?")


@dataclass(frozen=True)
class BbanSegment:
    char_class: CharClass
    count: int


@lru_cache(maxsize=None)
def parse_bban_pattern(pattern: str) -> tuple[BbanSegment, ...]:
    """Split a BBAN pattern into its segments.

    Raises:
        ValueError: on an empty pattern, an unknown token or a zero count.
    """

    if not pattern:
        raise ValueError("BBAN pattern must not be empty")

    segments: list[BbanSegment] = []
    pos = 0
    while pos < len(pattern):
        match = _SEGMENT_RE.match(pattern, pos)
        if match is None:
            raise ValueError(f"Unsupported BBAN pattern token at offset {pos}: {pattern!r}")
        count = int(match.group(2)) if match.group(2) else 1
        if count < 1:
            raise ValueError(f"BBAN pattern segment with zero length: {pattern!r}")
        segments.append(BbanSegment(char_class=_CLASS_TOKENS[match.group(1)], count=count))
        pos = match.end()
    return tuple(segments)


def expand_positions(pattern: str) -> tuple[CharClass, ...]:
    """One `CharClass` per BBAN position, in order."""

    positions: list[CharClass] = []
    for segment in parse_bban_pattern(pattern):
        positions.extend([segment.char_class] * segment.count)
    return tuple(positions)


def pattern_length(pattern: str) -> int:
    return sum(segment.count for segment in parse_bban_pattern(pattern))


def pattern_has_letters(pattern: str) -> bool:
    return any(segment.char_class.admits_letters for segment in parse_bban_pattern(pattern))


@lru_cache(maxsize=None)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compiled regex for full-matching a BBAN (ASCII digits only)."""

    parse_bban_pattern(pattern)
    return re.compile(pattern, re.ASCII)
