"""IBAN string transforms: normalize, group in blocks of 4, mask.

All functions are total and idempotent on their own output.
"""

from __future__ import annotations

import re

GROUP_SIZE = 4
MASK_CHAR = "*"
_VISIBLE_HEAD = 4
_VISIBLE_TAIL = 2

_WHITESPACE_RE = re.compile(r"\s+")


def normalize(value: str) -> str:
    """Drop all whitespace and uppercase."""

    return _WHITESPACE_RE.sub("", value or "").upper()


def format_iban(value: str) -> str:
    """Human readable form: ``DE89 3704 0044 0532 0130 00``.

    The last group keeps whatever is left (1-4 characters) and is never padded.
    """

    clean = normalize(value)
    return " ".join(clean[i : i + GROUP_SIZE] for i in range(0, len(clean), GROUP_SIZE))


def mask_iban(value: str) -> str:
    """Keep the first 4 and the last 2 characters, replace the rest with ``*``.

    Inputs shorter than 6 characters are too short to mask and are returned
    formatted but unmasked.
    """

    clean = normalize(value)
    if len(clean) < _VISIBLE_HEAD + _VISIBLE_TAIL:
        return format_iban(clean)

    hidden = len(clean) - _VISIBLE_HEAD - _VISIBLE_TAIL
    masked = clean[:_VISIBLE_HEAD] + MASK_CHAR * hidden + clean[-_VISIBLE_TAIL:]
    return format_iban(masked)
