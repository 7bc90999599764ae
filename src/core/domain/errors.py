"""Domain errors.

Only generation raises: without a country profile there is nothing to build.
Validation never raises and reports problems inside `ValidationResult`.
"""

from __future__ import annotations


class IbanError(Exception):
    """Base class for fakeiban errors."""


class UnsupportedCountryError(IbanError, KeyError):
    """The country code has no registered IBAN profile."""

    def __init__(self, country_code: str) -> None:
        self.country_code = country_code
        super().__init__(f"Unsupported country code: {country_code}")

    def __str__(self) -> str:
        # KeyError would repr() the message.
        return str(self.args[0])
