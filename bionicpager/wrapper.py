"""Greedy word wrapping of source lines into display lines."""


def wrap_line(line: str, width: int) -> list[str]:
    """Wrap a single source line to at most ``width`` columns.

    Lines that already fit (including empty ones) are returned as is.
    Longer lines are split on whitespace and packed greedily: a word joins
    the current line when ``len(current) + 1 + len(word) <= width``,
    otherwise the current line is flushed and the word starts a new one.
    Words are never broken, so a word longer than ``width`` ends up alone
    on an over-long line.

    Args:
        line: Source line without its line break
        width: Maximum number of columns per display line

    Returns:
        The display lines, in order. Never empty.
    """
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")

    if len(line) <= width:
        return [line]

    lines: list[str] = []
    current = ""
    for word in line.split():
        if not current:
            current = word
        elif len(current) + 1 + len(word) <= width:
            current += " " + word
        else:
            lines.append(current)
            current = word

    # A whitespace-only line still occupies one (blank) row
    lines.append(current)
    return lines
