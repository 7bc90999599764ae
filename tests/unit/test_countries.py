import pytest
from pydantic import ValidationError

from core.domain.countries import DEFAULT_REGISTRY, CountryRegistry
from core.domain.models import CountryProfile
from core.services.checksum import validate_checksum
from core.services.iban_validator import IbanValidator

ALL_PROFILES = DEFAULT_REGISTRY.list()

# Published examples that carry letters where the profile pattern declares digits.
EXAMPLES_OUTSIDE_PATTERN = {"BY", "FR", "KZ", "LI", "MT", "QA", "RO"}

DIGIT_ONLY = ("AD", "AE", "AL", "CH", "CY", "GR", "LB", "LU", "MC", "MK", "SA", "TR", "UA")


def test_registry_size():
    assert len(DEFAULT_REGISTRY) == 71
    assert len(DEFAULT_REGISTRY.codes()) == 71


def test_lookup_known_and_unknown():
    germany = DEFAULT_REGISTRY.lookup("DE")
    assert germany is not None
    assert germany.name == "Germany"
    assert germany.length == 22
    assert germany.bank_code_length == 8

    assert DEFAULT_REGISTRY.lookup("ZZ") is None
    assert DEFAULT_REGISTRY.lookup("") is None
    assert "ZZ" not in DEFAULT_REGISTRY


def test_lookup_is_case_insensitive():
    assert DEFAULT_REGISTRY.lookup(" gb ") is DEFAULT_REGISTRY.lookup("GB")
    assert "gb" in DEFAULT_REGISTRY


def test_list_sorted_by_name():
    names = [profile.name for profile in ALL_PROFILES]
    assert names == sorted(names, key=str.casefold)
    assert names[0] == "Albania"


@pytest.mark.parametrize("profile", ALL_PROFILES, ids=lambda p: p.code)
def test_profile_invariants(profile):
    assert profile.length == 4 + sum(segment.count for segment in profile.segments)
    assert 15 <= profile.length <= 32
    assert profile.matches_bban(profile.example[4:]) is (profile.code not in EXAMPLES_OUTSIDE_PATTERN)
    assert validate_checksum(profile.example)
    assert IbanValidator().validate(profile.example).is_valid


@pytest.mark.parametrize("code", DIGIT_ONLY)
def test_digit_only_profiles_have_no_letter_class(code):
    profile = DEFAULT_REGISTRY.lookup(code)
    assert not profile.has_letters


def test_profile_rows_keep_published_layout():
    switzerland = DEFAULT_REGISTRY.lookup("CH")
    assert switzerland.bban_pattern == r"\d{5}\d{12}"
    assert switzerland.bban_description == "Bank(5) + Account(12)"

    bulgaria = DEFAULT_REGISTRY.lookup("BG")
    assert bulgaria.bban_description == "Bank(4) + Branch(4) + Account(2) + Account(8)"


def test_rows_corrected_for_length():
    assert DEFAULT_REGISTRY.lookup("AD").bban_pattern == r"\d{4}\d{4}\d{12}"
    assert DEFAULT_REGISTRY.lookup("BR").bban_pattern == r"\d{8}\d{5}\d{10}[A-Z]{1}[A-Z0-9]{1}"
    assert DEFAULT_REGISTRY.lookup("MU").bban_length == 26


def test_uae_sorts_under_its_short_name():
    names = [profile.name for profile in ALL_PROFILES]
    assert DEFAULT_REGISTRY.lookup("AE").name == "UAE"
    assert names.index("UAE") == names.index("Tunisia") + 2


def test_profiles_are_immutable():
    profile = DEFAULT_REGISTRY.lookup("DE")
    with pytest.raises(ValidationError):
        profile.length = 30


def test_profile_rejects_inconsistent_length():
    with pytest.raises(ValidationError):
        CountryProfile(
            code="XX",
            name="Nowhere",
            length=20,
            bban_description="Bank(4) + Account(10)",
            bban_pattern=r"\d{4}\d{10}",
            example="XX00" + "0" * 16,
        )


def test_registry_rejects_duplicates():
    germany = DEFAULT_REGISTRY.lookup("DE")
    with pytest.raises(ValueError):
        CountryRegistry([germany, germany])


def test_bank_code_length_absent_when_not_described():
    profile = CountryProfile(
        code="XX",
        name="Nowhere",
        length=18,
        bban_description="Account(14)",
        bban_pattern=r"\d{14}",
        example="XX00" + "0" * 14,
    )
    assert profile.bank_code_length is None
