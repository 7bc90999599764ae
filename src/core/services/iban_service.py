"""Public entry points of the IBAN engine.

This module is what the embedding application (CLI, tool pages, tests)
talks to. It wires the registry, generators and validator together and keeps
randomness injectable: pass `rng` (e.g. ``random.Random(42)``) to get
reproducible output.
"""

from __future__ import annotations

from typing import Any, Mapping

from core.config import AppSettings
from core.domain.countries import DEFAULT_REGISTRY, CountryRegistry
from core.domain.errors import UnsupportedCountryError
from core.domain.models import (
    BatchRequest,
    BatchResult,
    CountryProfile,
    GeneratedIBAN,
    GenerationOptions,
    ValidationResult,
)
from core.interfaces.random_source import RandomSource
from core.logger import get_logger
from core.services.bban_generator import BbanGenerator
from core.services.iban_generator import IbanGenerator
from core.services.iban_validator import IbanValidator

logger = get_logger("service")

_VALIDATOR = IbanValidator(DEFAULT_REGISTRY)


def build_generator(
    *,
    rng: RandomSource | None = None,
    settings: AppSettings | None = None,
    registry: CountryRegistry | None = None,
) -> IbanGenerator:
    """IbanGenerator configured from `settings` (letter probability, bank code cap)."""

    registry = registry if registry is not None else DEFAULT_REGISTRY
    bban_kwargs: dict[str, Any] = {}
    if settings is not None:
        bban_kwargs = {
            "letter_probability": settings.letter_probability,
            "bank_code_max": settings.custom_bank_code_max,
        }
    bban_generator = BbanGenerator(registry, rng, **bban_kwargs)
    return IbanGenerator(registry, bban_generator)


def _coerce_options(options: GenerationOptions | Mapping[str, Any] | None) -> GenerationOptions:
    if options is None:
        return GenerationOptions()
    if isinstance(options, GenerationOptions):
        return options
    return GenerationOptions.model_validate(dict(options))


def generate_fake_iban(
    country_code: str,
    options: GenerationOptions | Mapping[str, Any] | None = None,
    *,
    rng: RandomSource | None = None,
) -> GeneratedIBAN:
    """Generate one test IBAN for `country_code`.

    `options` may be a `GenerationOptions` or a mapping such as
    ``{"mode": "invalid", "customBankCode": "3704"}``.

    Raises:
        UnsupportedCountryError: when the country is not registered.
    """

    return build_generator(rng=rng).generate(country_code, _coerce_options(options))


def validate_iban(value: str) -> ValidationResult:
    """Validate any input string. Never raises."""

    return _VALIDATOR.validate(value)


def get_country_info(country_code: str) -> CountryProfile | None:
    return DEFAULT_REGISTRY.lookup(country_code)


def get_supported_countries() -> list[CountryProfile]:
    """All profiles, sorted by country name."""

    return DEFAULT_REGISTRY.list()


def generate_batch(
    request: BatchRequest,
    *,
    rng: RandomSource | None = None,
    settings: AppSettings | None = None,
) -> BatchResult:
    """Generate `request.quantity` IBANs for one country and mode.

    Raises:
        UnsupportedCountryError: before anything is generated.
    """

    if DEFAULT_REGISTRY.lookup(request.country) is None:
        raise UnsupportedCountryError(request.country)

    quantity = request.quantity
    if settings is not None:
        quantity = min(quantity, settings.max_quantity)

    generator = build_generator(rng=rng, settings=settings)
    options = request.options()
    ibans = [generator.generate(request.country, options) for _ in range(quantity)]

    logger.info(
        "Generated %d %s IBAN(s) for %s",
        len(ibans),
        request.mode.value,
        request.country,
    )
    return BatchResult(request=request, ibans=ibans)
