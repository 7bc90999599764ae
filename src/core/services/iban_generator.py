"""IBAN generation: registry -> BBAN -> check digits -> formatting."""

from __future__ import annotations

import random

from core.domain.countries import DEFAULT_REGISTRY, CountryRegistry
from core.domain.errors import UnsupportedCountryError
from core.domain.models import GeneratedIBAN, GenerationMode, GenerationOptions
from core.interfaces.random_source import RandomSource
from core.logger import get_logger
from core.services.bban_generator import BbanGenerator
from core.services.checksum import compute_check_digits
from core.services.formatter import format_iban, mask_iban

logger = get_logger("generator")

# 100 possible two-digit strings, exactly one of them is correct.
MAX_INVALID_ATTEMPTS = 100


class IbanGenerator:
    """Builds `GeneratedIBAN` values in "valid" or deliberately "invalid" mode."""

    def __init__(
        self,
        registry: CountryRegistry | None = None,
        bban_generator: BbanGenerator | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self._registry = registry if registry is not None else DEFAULT_REGISTRY
        if rng is None:
            rng = bban_generator.rng if bban_generator is not None else random.Random()
        self._rng = rng
        self._bban = bban_generator or BbanGenerator(self._registry, rng)

    def generate(
        self,
        country_code: str,
        options: GenerationOptions | None = None,
    ) -> GeneratedIBAN:
        """Generate one IBAN.

        Raises:
            UnsupportedCountryError: when `country_code` is not registered.
        """

        profile = self._registry.lookup(country_code)
        if profile is None:
            raise UnsupportedCountryError(country_code)

        options = options or GenerationOptions()
        bban = self._bban.generate_for(
            profile,
            options.custom_bank_code,
            fill_policy=options.fill_policy,
        )

        correct = compute_check_digits(profile.code, bban)
        if options.mode is GenerationMode.VALID:
            check_digits = correct
            is_valid = True
        else:
            check_digits = self._draw_wrong_check_digits(correct)
            is_valid = False

        raw = profile.code + check_digits + bban
        pretty = format_iban(raw)
        masked = mask_iban(pretty)
        logger.debug("Generated %s IBAN %s (%s)", options.mode.value, masked, profile.code)

        return GeneratedIBAN(
            raw=raw,
            pretty=pretty,
            masked=masked,
            country=profile.code,
            length=len(raw),
            is_valid=is_valid,
        )

    def _draw_wrong_check_digits(self, correct: str) -> str:
        for _ in range(MAX_INVALID_ATTEMPTS):
            candidate = f"{self._rng.randrange(100):02d}"
            if candidate != correct:
                return candidate

        # Only reachable with a degenerate random source.
        fallback = f"{(int(correct) + 1) % 100:02d}"
        logger.warning(
            "Random source repeated the correct check digits %d times; using %s",
            MAX_INVALID_ATTEMPTS,
            fallback,
        )
        return fallback
