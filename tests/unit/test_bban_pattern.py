import pytest

from core.domain.bban_pattern import (
    BbanSegment,
    CharClass,
    compile_pattern,
    expand_positions,
    parse_bban_pattern,
    pattern_has_letters,
    pattern_length,
)


def test_parse_segments():
    assert parse_bban_pattern(r"[A-Z]{4}\d{6}[A-Z0-9]{8}") == (
        BbanSegment(CharClass.LETTER, 4),
        BbanSegment(CharClass.DIGIT, 6),
        BbanSegment(CharClass.ALNUM, 8),
    )


def test_missing_count_means_one():
    assert parse_bban_pattern(r"\d[A-Z]") == (
        BbanSegment(CharClass.DIGIT, 1),
        BbanSegment(CharClass.LETTER, 1),
    )


@pytest.mark.parametrize("pattern", ["", r"\w{4}", r"\d{0}", "[a-z]{3}", r"\d{4}x"])
def test_parse_rejects_unknown_tokens(pattern):
    with pytest.raises(ValueError):
        parse_bban_pattern(pattern)


def test_expand_positions_and_length():
    pattern = r"[A-Z]{2}\d{3}"
    assert expand_positions(pattern) == (
        CharClass.LETTER,
        CharClass.LETTER,
        CharClass.DIGIT,
        CharClass.DIGIT,
        CharClass.DIGIT,
    )
    assert pattern_length(pattern) == 5


def test_letter_detection_covers_alphanumeric_class():
    assert not pattern_has_letters(r"\d{8}\d{10}")
    assert pattern_has_letters(r"\d{5}[A-Z0-9]{12}")
    assert pattern_has_letters(r"[A-Z]{4}\d{10}")


def test_compiled_pattern_only_accepts_ascii_digits():
    regex = compile_pattern(r"\d{3}")
    assert regex.fullmatch("123")
    assert not regex.fullmatch("١٢٣")
