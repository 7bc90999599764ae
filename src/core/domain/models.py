"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  core to any I/O library.
- Stable serialization: fields are snake_case in Python and camelCase on the
  wire (``isValid``, ``generatedAt``, ``bbanPattern``...).

Note:
- These models describe *what* an IBAN result is, not *how* it is produced.
  Every model is frozen: a value is built once per call and never mutated.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from core.domain.bban_pattern import (
    BbanSegment,
    compile_pattern,
    parse_bban_pattern,
    pattern_has_letters,
    pattern_length,
)

MAX_BATCH_QUANTITY = 1000

_BANK_FIELD_RE = re.compile(r"\bBank\((\d+)\)")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GenerationMode(str, Enum):
    """Whether generated check digits are arithmetically correct."""

    VALID = "valid"
    INVALID = "invalid"


class FillPolicy(str, Enum):
    """How the free BBAN positions are filled.

    - ``approximate``: random digits, with a flat chance of a letter per
      position when the country's pattern admits letters anywhere.
    - ``structural``: each position is drawn from its own declared class.
    """

    APPROXIMATE = "approximate"
    STRUCTURAL = "structural"


class _ValueModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CountryProfile(_ValueModel):
    """IBAN format of one country."""

    code: str = Field(
        ...,
        pattern=r"^[A-Z]{2}$",
        description="ISO 3166-1 alpha-2 country code.",
    )
    name: str = Field(..., min_length=1, description="Country name used for display/sorting.")
    length: int = Field(
        ...,
        ge=15,
        le=32,
        description="Total IBAN length (country code + check digits + BBAN).",
    )
    bban_description: str = Field(
        ...,
        min_length=1,
        description="Human readable field breakdown, e.g. 'Bank(8) + Account(10)'.",
    )
    bban_pattern: str = Field(
        ...,
        min_length=1,
        description="Character-class pattern of the BBAN, e.g. '\\d{8}\\d{10}'.",
    )
    example: str = Field(..., description="One canonical valid IBAN of this country.")

    @model_validator(mode="after")
    def _check_layout(self) -> "CountryProfile":
        bban_length = pattern_length(self.bban_pattern)
        if self.length != 4 + bban_length:
            raise ValueError(
                f"{self.code}: length {self.length} does not match 4 + BBAN length {bban_length}"
            )
        if len(self.example) != self.length or not self.example.startswith(self.code):
            raise ValueError(f"{self.code}: example {self.example!r} does not fit the profile")
        return self

    @property
    def bban_length(self) -> int:
        return self.length - 4

    @property
    def segments(self) -> tuple[BbanSegment, ...]:
        return parse_bban_pattern(self.bban_pattern)

    @property
    def has_letters(self) -> bool:
        """True when any BBAN segment admits letters."""

        return pattern_has_letters(self.bban_pattern)

    @property
    def bank_code_length(self) -> int | None:
        """Length of the ``Bank(n)`` field, if the description declares one."""

        match = _BANK_FIELD_RE.search(self.bban_description)
        return int(match.group(1)) if match else None

    def matches_bban(self, bban: str) -> bool:
        """Strict per-position check of a BBAN against `bban_pattern`."""

        return compile_pattern(self.bban_pattern).fullmatch(bban) is not None


class GeneratedIBAN(_ValueModel):
    """Result of one generation call."""

    raw: str = Field(..., description="Unformatted IBAN, e.g. 'DE89370400440532013000'.")
    pretty: str = Field(..., description="Raw grouped in blocks of 4 separated by spaces.")
    masked: str = Field(..., description="Pretty form with the interior replaced by '*'.")
    country: str = Field(..., pattern=r"^[A-Z]{2}$")
    length: int = Field(..., ge=1)
    is_valid: bool = Field(..., description="Whether the check digits are arithmetically correct.")
    generated_at: datetime = Field(
        default_factory=_utcnow,
        description="Generation timestamp (UTC, ISO-8601 when serialized).",
    )

    @model_validator(mode="after")
    def _check_length(self) -> "GeneratedIBAN":
        if len(self.raw) != self.length:
            raise ValueError(f"raw has {len(self.raw)} characters, expected {self.length}")
        return self


class ValidationDetails(_ValueModel):
    country: str
    length: int
    check_digits: str


class ValidationResult(_ValueModel):
    """Outcome of validating an arbitrary input string.

    `formatted` is only set when valid; `errors` only when invalid.
    """

    is_valid: bool
    formatted: str | None = None
    details: ValidationDetails | None = None
    errors: list[str] | None = None


class GenerationOptions(_ValueModel):
    mode: GenerationMode = GenerationMode.VALID
    custom_bank_code: str | None = Field(
        default=None,
        description="Optional bank code used as BBAN prefix (sanitized, never rejected).",
    )
    fill_policy: FillPolicy = FillPolicy.APPROXIMATE


class BatchRequest(_ValueModel):
    """Parameters of a batch generation (one country, one mode)."""

    country: str = Field(..., min_length=1)
    mode: GenerationMode = GenerationMode.VALID
    quantity: int = Field(default=5, ge=1, le=MAX_BATCH_QUANTITY)
    custom_bank_code: str | None = None
    fill_policy: FillPolicy = FillPolicy.APPROXIMATE

    @field_validator("country", mode="before")
    @classmethod
    def _normalize_country(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("quantity", mode="before")
    @classmethod
    def _clamp_quantity(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return max(1, min(MAX_BATCH_QUANTITY, value))
        return value

    def options(self) -> GenerationOptions:
        return GenerationOptions(
            mode=self.mode,
            custom_bank_code=self.custom_bank_code,
            fill_policy=self.fill_policy,
        )


class BatchResult(_ValueModel):
    request: BatchRequest
    ibans: list[GeneratedIBAN] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=_utcnow)

    @property
    def quantity(self) -> int:
        """Number of IBANs actually generated (may be below the requested amount)."""

        return len(self.ibans)

    @property
    def valid_count(self) -> int:
        return sum(1 for iban in self.ibans if iban.is_valid)
