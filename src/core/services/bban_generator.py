"""Random BBAN generation.

Two fill policies:

- approximate: every free position is a random digit; if the country's
  pattern admits letters anywhere, each position independently has a
  `letter_probability` chance of being a random letter instead. Plausible,
  not positionally exact.
- structural: every free position is drawn from the character class the
  pattern declares for it.

A custom bank code becomes a fixed prefix (see `sanitize_bank_code`).
"""

from __future__ import annotations

import random
import re
import string

from core.domain.bban_pattern import CharClass, expand_positions
from core.domain.countries import DEFAULT_REGISTRY, CountryRegistry
from core.domain.errors import UnsupportedCountryError
from core.domain.models import CountryProfile, FillPolicy
from core.interfaces.random_source import RandomSource
from core.logger import get_logger

logger = get_logger("bban")

DEFAULT_LETTER_PROBABILITY = 0.1
DEFAULT_BANK_CODE_MAX = 8

_NOT_ALPHANUMERIC_RE = re.compile(r"[^A-Z0-9]")


def sanitize_bank_code(value: str | None, *, max_length: int = DEFAULT_BANK_CODE_MAX) -> str:
    """Uppercase, drop anything outside A-Z/0-9 and keep the first `max_length` characters.

    Never fails: malformed input just shrinks.
    """

    if not value:
        return ""
    return _NOT_ALPHANUMERIC_RE.sub("", value.upper())[: max(0, max_length)]


def bank_code_prefix(
    profile: CountryProfile,
    custom_bank_code: str | None,
    *,
    max_length: int = DEFAULT_BANK_CODE_MAX,
) -> str:
    """Fixed BBAN prefix derived from a caller supplied bank code.

    Shorter codes are right-padded with ``0`` up to the country's ``Bank(n)``
    field (capped at `max_length`); the prefix never exceeds the BBAN length.
    """

    prefix = sanitize_bank_code(custom_bank_code, max_length=max_length)
    if not prefix:
        return ""

    target = min(profile.bank_code_length or 0, max_length)
    if len(prefix) < target:
        prefix = prefix.ljust(target, "0")
    return prefix[: profile.bban_length]


class BbanGenerator:
    """Produces BBANs of exactly ``profile.length - 4`` characters."""

    def __init__(
        self,
        registry: CountryRegistry | None = None,
        rng: RandomSource | None = None,
        *,
        letter_probability: float = DEFAULT_LETTER_PROBABILITY,
        bank_code_max: int = DEFAULT_BANK_CODE_MAX,
    ) -> None:
        if not 0.0 <= letter_probability <= 1.0:
            raise ValueError("letter_probability must be within [0, 1]")
        self._registry = registry if registry is not None else DEFAULT_REGISTRY
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._letter_probability = letter_probability
        self._bank_code_max = bank_code_max

    @property
    def rng(self) -> RandomSource:
        return self._rng

    def generate(
        self,
        country_code: str,
        custom_bank_code: str | None = None,
        *,
        fill_policy: FillPolicy = FillPolicy.APPROXIMATE,
    ) -> str:
        profile = self._registry.lookup(country_code)
        if profile is None:
            raise UnsupportedCountryError(country_code)
        return self.generate_for(profile, custom_bank_code, fill_policy=fill_policy)

    def generate_for(
        self,
        profile: CountryProfile,
        custom_bank_code: str | None = None,
        *,
        fill_policy: FillPolicy = FillPolicy.APPROXIMATE,
    ) -> str:
        prefix = bank_code_prefix(profile, custom_bank_code, max_length=self._bank_code_max)
        positions = expand_positions(profile.bban_pattern)

        chars = list(prefix)
        for index in range(len(chars), profile.bban_length):
            if fill_policy is FillPolicy.STRUCTURAL:
                chars.append(self._draw(positions[index]))
            else:
                chars.append(self._draw_approximate(profile))

        bban = "".join(chars)
        logger.debug(
            "BBAN for %s: %d chars, prefix=%d, policy=%s",
            profile.code,
            len(bban),
            len(prefix),
            fill_policy.value,
        )
        return bban

    def _draw_approximate(self, profile: CountryProfile) -> str:
        if profile.has_letters and self._rng.random() < self._letter_probability:
            return self._rng.choice(string.ascii_uppercase)
        return self._rng.choice(string.digits)

    def _draw(self, char_class: CharClass) -> str:
        return self._rng.choice(char_class.alphabet)
