import random

import pytest

from core.config import AppSettings
from core.domain.errors import UnsupportedCountryError
from core.domain.models import BatchRequest, FillPolicy, GenerationMode
from core.services.iban_service import (
    generate_batch,
    generate_fake_iban,
    get_country_info,
    get_supported_countries,
    validate_iban,
)


def test_generate_with_mapping_options():
    iban = generate_fake_iban("GB", {"mode": "invalid"}, rng=random.Random(1))
    assert iban.is_valid is False
    assert validate_iban(iban.raw).is_valid is False

    iban = generate_fake_iban("GB", {"mode": "valid", "customBankCode": "nwbk"}, rng=random.Random(1))
    assert iban.raw[4:8] == "NWBK"
    assert validate_iban(iban.raw).is_valid


def test_generate_defaults_to_valid():
    iban = generate_fake_iban("DE")
    assert iban.is_valid
    assert validate_iban(iban.raw).is_valid


def test_generate_unsupported_country():
    with pytest.raises(UnsupportedCountryError):
        generate_fake_iban("ZZ", {"mode": "valid"})


def test_validate_unsupported_country():
    result = validate_iban("ZZ1234567890")
    assert result.is_valid is False
    assert any("unsupported country code" in error.lower() for error in result.errors)


def test_known_vector():
    assert validate_iban("DE89370400440532013000").is_valid is True


def test_country_info():
    info = get_country_info("GB")
    assert info.length == 22
    assert info.example == "GB29NWBK60161331926819"
    assert get_country_info("ZZ") is None


def test_supported_countries_sorted_by_name():
    profiles = get_supported_countries()
    assert len(profiles) == 71
    assert [p.name for p in profiles] == sorted((p.name for p in profiles), key=str.casefold)


def test_batch_request_clamps_quantity():
    assert BatchRequest(country="de", quantity=5000).quantity == 1000
    assert BatchRequest(country="de", quantity=0).quantity == 1
    assert BatchRequest(country=" de ").country == "DE"


def test_generate_batch():
    request = BatchRequest(country="NL", mode=GenerationMode.VALID, quantity=4)
    batch = generate_batch(request, rng=random.Random(3))
    assert len(batch.ibans) == 4
    assert batch.valid_count == 4
    assert all(iban.country == "NL" and len(iban.raw) == 18 for iban in batch.ibans)


def test_generate_batch_structural_invalid():
    request = BatchRequest(
        country="GB",
        mode=GenerationMode.INVALID,
        quantity=3,
        fill_policy=FillPolicy.STRUCTURAL,
    )
    batch = generate_batch(request, rng=random.Random(8))
    assert batch.valid_count == 0
    assert all(iban.raw[4:8].isalpha() for iban in batch.ibans)


def test_generate_batch_respects_settings_cap():
    settings = AppSettings(_env_file=None, max_quantity=2)
    batch = generate_batch(BatchRequest(country="DE", quantity=5), settings=settings)
    assert len(batch.ibans) == 2
    assert batch.quantity == 2


def test_generate_batch_unsupported_country():
    with pytest.raises(UnsupportedCountryError):
        generate_batch(BatchRequest(country="ZZ", quantity=3))


@pytest.mark.parametrize("code", ["AD", "CH", "SA", "UA"])
def test_digit_only_countries_generate_numeric_bbans(code):
    rng = random.Random(0)
    for _ in range(200):
        iban = generate_fake_iban(code, {"mode": "valid"}, rng=rng)
        assert iban.raw[4:].isdigit()
