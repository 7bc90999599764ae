import pytest

from core.domain.countries import DEFAULT_REGISTRY
from core.services.checksum import (
    char_value,
    compute_check_digits,
    mod97,
    rearrange_for_generation,
    rearrange_for_validation,
    validate_checksum,
)


def test_char_value_maps_letters_from_ten():
    assert char_value("0") == 0
    assert char_value("9") == 9
    assert char_value("A") == 10
    assert char_value("Z") == 35


def test_mod97_rejects_non_alphanumeric():
    with pytest.raises(ValueError):
        mod97("12-34")


def test_mod97_handles_long_strings():
    # 30 nines followed by letters: wider than a 64-bit integer.
    value = "9" * 30 + "ABC"
    expected = int("9" * 30 + "101112") % 97
    assert mod97(value) == expected


def test_rearrangements_are_complementary():
    iban = "DE89370400440532013000"
    assert rearrange_for_validation(iban) == "370400440532013000DE89"
    assert rearrange_for_generation("DE", "370400440532013000") == "370400440532013000DE00"


@pytest.mark.parametrize(
    "country, bban, expected",
    [
        ("DE", "370400440532013000", "89"),
        ("GB", "NWBK60161331926819", "29"),
        ("NL", "ABNA0417164300", "91"),
        ("NO", "86011117947", "93"),
    ],
)
def test_compute_check_digits_known_vectors(country, bban, expected):
    assert compute_check_digits(country, bban) == expected


def test_validate_checksum_known_vector():
    assert validate_checksum("DE89370400440532013000")
    assert validate_checksum("de89 3704 0044 0532 0130 00")
    assert not validate_checksum("DE88370400440532013000")


@pytest.mark.parametrize("value", ["", "DE8", "DE89", "DE89-3704", "DEXX370400440532013000"])
def test_validate_checksum_rejects_malformed(value):
    assert validate_checksum(value) is False


def test_validate_checksum_rejects_reserved_check_digits():
    for check_digits in ("00", "01", "99"):
        assert not validate_checksum("DE" + check_digits + "370400440532013000")


@pytest.mark.parametrize("profile", DEFAULT_REGISTRY.list(), ids=lambda p: p.code)
def test_exactly_one_check_digit_pair_validates(profile):
    bban = profile.example[4:]
    passing = [
        f"{n:02d}"
        for n in range(100)
        if validate_checksum(profile.code + f"{n:02d}" + bban)
    ]
    assert passing == [compute_check_digits(profile.code, bban)]
    assert passing == [profile.example[2:4]]
