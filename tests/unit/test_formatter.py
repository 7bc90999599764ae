import pytest

from core.services.formatter import format_iban, mask_iban, normalize


def test_normalize_strips_all_whitespace_and_uppercases():
    assert normalize(" de89 3704\t0044\n0532 0130 00 ") == "DE89370400440532013000"


def test_format_groups_of_four():
    assert format_iban("DE89370400440532013000") == "DE89 3704 0044 0532 0130 00"


def test_format_last_group_not_padded():
    assert format_iban("NO9386011117947") == "NO93 8601 1117 947"


@pytest.mark.parametrize(
    "raw",
    ["DE89370400440532013000", "NO9386011117947", "LC55HEMM000100010012001200023015"],
)
def test_format_is_idempotent(raw):
    once = format_iban(raw)
    assert format_iban(once) == once


def test_mask_keeps_first_four_and_last_two():
    masked = mask_iban("DE89 3704 0044 0532 0130 00")
    assert masked == "DE89 **** **** **** **** 00"
    clean = masked.replace(" ", "")
    assert clean[:4] == "DE89"
    assert clean[-2:] == "00"
    assert set(clean[4:-2]) == {"*"}


def test_mask_pretty_and_masked_differ_only_inside():
    pretty = format_iban("GB29NWBK60161331926819")
    masked = mask_iban(pretty)
    assert len(masked) == len(pretty)
    assert masked[:4] == pretty[:4]
    assert masked[-2:] == pretty[-2:]


def test_mask_short_input_is_returned_unmasked():
    assert mask_iban("DE89 3") == "DE89 3"
    assert mask_iban("AB") == "AB"


def test_mask_at_boundary_of_six():
    assert mask_iban("ABCDEF") == "ABCD EF"
    assert mask_iban("ABCDEFG") == "ABCD *FG"


def test_mask_is_idempotent():
    once = mask_iban("DE89370400440532013000")
    assert mask_iban(once) == once
