"""Test bionic emphasis of words and lines."""

import pytest
from bionicpager.constants import PagerConstants
from bionicpager.formatter import format_word, format_line


def B(ch):
    """Expected rendering of one emphasized character."""
    return PagerConstants.BOLD_ON + ch + PagerConstants.BOLD_OFF


def bold_count(text):
    return text.count(PagerConstants.BOLD_ON)


def test_pure_punctuation_unchanged():
    """Tokens without letters come back byte-identical."""
    for word in ["...", "--", "42", "(1)", "-", "!?", "—"]:
        assert format_word(word) == word


def test_empty_token_unchanged():
    assert format_word("") == ""


def test_single_letter_fully_bold():
    assert format_word("a") == B("a")
    assert format_word("I") == B("I")


def test_two_letter_word_bolds_first_letter():
    assert format_word("on") == B("o") + "n"


def test_three_letter_word_bolds_two_letters():
    assert format_word("the") == B("t") + B("h") + "e"


def test_even_length_word():
    assert format_word("word") == B("w") + B("o") + "rd"


def test_apostrophe_not_counted():
    """don't has four letters, so d and o are bold and ' is copied through."""
    assert format_word("don't") == B("d") + B("o") + "n't"


def test_interior_punctuation_not_bolded():
    """x-ray: letters x, r, a, y -> two bold letters, the hyphen stays plain."""
    assert format_word("x-ray") == B("x") + "-" + B("r") + "ay"


def test_leading_and_trailing_punctuation_preserved():
    """(hello), has five letters, so three are bold."""
    result = format_word("(hello),")
    assert result == "(" + B("h") + B("e") + B("l") + "lo),"


def test_unicode_letters_count():
    assert format_word("élan") == B("é") + B("l") + "an"
    assert format_word("Straße") == B("S") + B("t") + B("r") + "aße"


def test_single_non_letter_char_unchanged():
    assert format_word("&") == "&"


def test_digits_inside_word_are_not_letters():
    """a1b has two letters; only the first is bold, the digit is copied."""
    assert format_word("a1b") == B("a") + "1b"


@pytest.mark.parametrize("word,letters", [
    ("a", 1), ("it", 2), ("cat", 3), ("read", 4), ("speed", 5),
    ("reading", 7), ("can't", 4), ("'quoted'", 6), ("e.g.", 2),
])
def test_bold_count_is_half_rounded_up(word, letters):
    expected = max(1, -(-letters // 2))
    assert bold_count(format_word(word)) == expected


def test_stripping_escapes_restores_word():
    for word in ["don't", "(hello),", "x-ray", "Straße", "a"]:
        formatted = format_word(word)
        plain = formatted.replace(PagerConstants.BOLD_ON, "").replace(PagerConstants.BOLD_OFF, "")
        assert plain == word


def test_format_line_formats_each_word():
    assert format_line("go on") == B("g") + "o " + B("o") + "n"


def test_format_line_keeps_whitespace_runs():
    result = format_line("  hi   there\t!")
    assert result == "  " + B("h") + "i   " + B("t") + B("h") + B("e") + "re\t!"


def test_format_line_empty():
    assert format_line("") == ""
