"""Structural and arithmetic IBAN validation.

Never raises. Structural problems are collected together so a caller can
show all of them at once; the checksum is only evaluated when the structure
is sound.
"""

from __future__ import annotations

import re

from core.domain.countries import DEFAULT_REGISTRY, CountryRegistry
from core.domain.models import ValidationDetails, ValidationResult
from core.logger import get_logger
from core.services.checksum import validate_checksum
from core.services.formatter import format_iban, mask_iban, normalize

logger = get_logger("validator")

_COUNTRY_CODE_RE = re.compile(r"[A-Z]{2}")
_CHECK_DIGITS_RE = re.compile(r"[0-9]{2}")
_CHARSET_RE = re.compile(r"[A-Z0-9]+")

ERROR_REQUIRED = "IBAN is required"
ERROR_TOO_SHORT = "IBAN must be at least 4 characters long"
ERROR_COUNTRY_FORMAT = "Country code must be 2 uppercase letters"
ERROR_CHECK_DIGITS_FORMAT = "Check digits must be 2 numbers"
ERROR_CHARSET = "IBAN contains invalid characters (only A-Z and 0-9 allowed)"
ERROR_CHECKSUM = "Invalid checksum (MOD 97-10 validation failed)"


def unsupported_country_message(country_code: str) -> str:
    return f"Unsupported country code: {country_code}"


def length_mismatch_message(country_code: str, expected: int, actual: int) -> str:
    return f"Invalid length for {country_code}: expected {expected}, got {actual}"


class IbanValidator:
    def __init__(self, registry: CountryRegistry | None = None) -> None:
        self._registry = registry if registry is not None else DEFAULT_REGISTRY

    def validate(self, value: str | None) -> ValidationResult:
        if not isinstance(value, str) or not value.strip():
            return ValidationResult(is_valid=False, errors=[ERROR_REQUIRED])

        clean = normalize(value)
        if len(clean) < 4:
            return ValidationResult(is_valid=False, errors=[ERROR_TOO_SHORT])

        country_code = clean[:2]
        check_digits = clean[2:4]
        errors: list[str] = []

        if not _COUNTRY_CODE_RE.fullmatch(country_code):
            errors.append(ERROR_COUNTRY_FORMAT)
        if not _CHECK_DIGITS_RE.fullmatch(check_digits):
            errors.append(ERROR_CHECK_DIGITS_FORMAT)

        profile = self._registry.lookup(country_code)
        if profile is None:
            errors.append(unsupported_country_message(country_code))
        else:
            if len(clean) != profile.length:
                errors.append(length_mismatch_message(country_code, profile.length, len(clean)))
            if not _CHARSET_RE.fullmatch(clean):
                errors.append(ERROR_CHARSET)

        if not errors and not validate_checksum(clean):
            errors.append(ERROR_CHECKSUM)

        details = ValidationDetails(
            country=country_code,
            length=len(clean),
            check_digits=check_digits,
        )
        if errors:
            logger.debug("Rejected %s: %s", mask_iban(clean), "; ".join(errors))
            return ValidationResult(is_valid=False, details=details, errors=errors)

        return ValidationResult(is_valid=True, formatted=format_iban(clean), details=details)
