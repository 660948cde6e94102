"""Test greedy word wrapping."""

import pytest
from bionicpager.wrapper import wrap_line


SAMPLE_LINES = [
    "",
    "short",
    "The quick brown fox jumps over the lazy dog",
    "a b c d e f g h i j k l m n o p q r s t u v w x y z",
    "Supercalifragilisticexpialidocious is a long word indeed",
    "   leading   and   repeated   spaces   everywhere   ",
    "tab\tseparated\twords\tare\twhitespace\ttoo",
    "one reallyreallyreallylongwordthatdoesnotfit two",
]


def test_short_line_returned_unchanged():
    assert wrap_line("hello world", 80) == ["hello world"]


def test_line_exactly_width_not_wrapped():
    line = "x" * 20
    assert wrap_line(line, 20) == [line]


def test_empty_line_preserved():
    assert wrap_line("", 10) == [""]


def test_greedy_packing():
    assert wrap_line("aaa bbb ccc ddd", 7) == ["aaa bbb", "ccc ddd"]


def test_separator_space_is_counted():
    """'aaa bbb' is 7 columns, so it doesn't fit in 6."""
    assert wrap_line("aaa bbb ccc", 6) == ["aaa", "bbb", "ccc"]


def test_long_word_gets_own_line_unsplit():
    result = wrap_line("hi extraordinarily ok", 8)
    assert result == ["hi", "extraordinarily", "ok"]


def test_first_word_longer_than_width():
    assert wrap_line("abcdefghij k", 5) == ["abcdefghij", "k"]


def test_whitespace_is_normalized_when_wrapping():
    assert wrap_line("a    b    c    d", 5) == ["a b c", "d"]


def test_whitespace_only_line_longer_than_width():
    assert wrap_line(" " * 30, 10) == [""]


def test_invalid_width():
    with pytest.raises(ValueError):
        wrap_line("text", 0)


@pytest.mark.parametrize("width", [1, 3, 5, 10, 17, 40, 80])
def test_lines_fit_unless_single_long_word(width):
    for line in SAMPLE_LINES:
        for out in wrap_line(line, width):
            assert len(out) <= width or " " not in out


@pytest.mark.parametrize("width", [1, 3, 5, 10, 17, 40])
def test_rejoined_output_preserves_words(width):
    for line in SAMPLE_LINES:
        if len(line) <= width:
            continue
        result = wrap_line(line, width)
        assert " ".join(result).split() == line.split()


def test_deterministic():
    line = SAMPLE_LINES[2]
    assert wrap_line(line, 12) == wrap_line(line, 12)
