"""Bionic reading emphasis for words and display lines."""

import re

from .constants import PagerConstants

_WHITESPACE_RUN = re.compile(r"(\s+)")


def _emphasize(ch: str) -> str:
    return PagerConstants.BOLD_ON + ch + PagerConstants.BOLD_OFF


def format_word(word: str) -> str:
    """Bold the leading half of the letters in a single token.

    Only letters (``str.isalpha``, so unicode letters count) are counted
    and emphasized. Punctuation before the first letter or after the last
    one is copied through, as is anything in between that isn't a letter,
    e.g. the apostrophe in "don't". The number of bold letters is
    ``ceil(letters / 2)``, never less than one.

    Each emphasized character is wrapped on its own so that interior
    punctuation keeps the normal weight.

    Args:
        word: A token without whitespace

    Returns:
        The token with bold escape sequences inserted, or the token
        unchanged when it contains no letters.
    """
    letter_positions = [i for i, ch in enumerate(word) if ch.isalpha()]
    if not letter_positions:
        return word

    if len(word) == 1:
        return _emphasize(word)

    first, last = letter_positions[0], letter_positions[-1]
    bold_count = max(1, (len(letter_positions) + 1) // 2)

    out = [word[:first]]
    emphasized = 0
    for ch in word[first:last + 1]:
        if ch.isalpha() and emphasized < bold_count:
            out.append(_emphasize(ch))
            emphasized += 1
        else:
            out.append(ch)
    out.append(word[last + 1:])
    return "".join(out)


def format_line(line: str) -> str:
    """Apply ``format_word`` to every token of a line, keeping its spacing."""
    parts = _WHITESPACE_RUN.split(line)
    # Odd indices hold the whitespace separators
    return "".join(
        part if i % 2 else format_word(part)
        for i, part in enumerate(parts)
    )
