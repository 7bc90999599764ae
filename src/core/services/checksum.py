"""ISO 7064 MOD 97-10 check digits.

Generation and validation are two call sites of one primitive: both rearrange
the IBAN so that the country code and check digits come last, substitute
letters with numbers (A=10 ... Z=35) and reduce modulo 97 digit by digit.

- generation: ``bban + country + "00"``, check digits = 98 - remainder
- validation: ``iban[4:] + iban[:4]``, valid iff remainder == 1
"""

from __future__ import annotations

import re

_ALPHANUMERIC_RE = re.compile(r"[A-Z0-9]+")
_CHECK_DIGITS_RE = re.compile(r"[0-9]{2}")
_WHITESPACE_RE = re.compile(r"\s+")

# ISO 13616: 00, 01 and 99 are never issued. The remaining 97 values cover
# every residue exactly once, so exactly one pair validates for a given BBAN.
MIN_CHECK_DIGITS = 2
MAX_CHECK_DIGITS = 98


def char_value(char: str) -> int:
    """Numeric value of one IBAN character (0-9 unchanged, A=10 ... Z=35)."""

    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    raise ValueError(f"Invalid IBAN character: {char!r}")


def mod97(value: str) -> int:
    """MOD 97 of the numeric expansion of an alphanumeric string.

    Processes one decimal digit at a time so the length of the input is
    irrelevant.

    Raises:
        ValueError: when `value` contains anything but 0-9 and A-Z.
    """

    remainder = 0
    for char in value:
        for digit in str(char_value(char)):
            remainder = (remainder * 10 + int(digit)) % 97
    return remainder


def rearrange_for_generation(country_code: str, bban: str) -> str:
    return bban + country_code + "00"


def rearrange_for_validation(iban: str) -> str:
    return iban[4:] + iban[:4]


def compute_check_digits(country_code: str, bban: str) -> str:
    """Two check digits (``"02"`` ... ``"98"``) for `country_code` + `bban`."""

    remainder = mod97(rearrange_for_generation(country_code.upper(), bban.upper()))
    return f"{98 - remainder:02d}"


def validate_checksum(iban: str) -> bool:
    """True iff `iban` passes MOD 97-10 with check digits in 02...98.

    Whitespace is ignored and letters are case-insensitive. Any other
    character makes the checksum invalid.
    """

    clean = _WHITESPACE_RE.sub("", iban or "").upper()
    if len(clean) < 5 or not _ALPHANUMERIC_RE.fullmatch(clean):
        return False

    check_digits = clean[2:4]
    if not _CHECK_DIGITS_RE.fullmatch(check_digits):
        return False
    if not MIN_CHECK_DIGITS <= int(check_digits) <= MAX_CHECK_DIGITS:
        return False

    return mod97(rearrange_for_validation(clean)) == 1
