"""Document model: wrapped display lines loaded from a text file."""

import logging
from dataclasses import dataclass

from .constants import PagerConstants
from .errors import FileAccessError, ReadError
from .wrapper import wrap_line

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """An immutable, ordered sequence of display lines."""

    lines: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.lines)

    def page_count(self, lines_per_page: int = PagerConstants.LINES_PER_PAGE) -> int:
        """Number of pages needed to show every line. Always at least 1."""
        return max(1, -(-len(self.lines) // lines_per_page))

    def page_lines(self, page_index: int,
                   lines_per_page: int = PagerConstants.LINES_PER_PAGE) -> tuple[str, ...]:
        """Return the lines shown on the given 0-based page."""
        start = page_index * lines_per_page
        end = min(start + lines_per_page, len(self.lines))
        return self.lines[start:end]

    @classmethod
    def from_lines(cls, source_lines, width: int) -> "Document":
        """Wrap each source line to ``width`` and concatenate the results."""
        display: list[str] = []
        for source_line in source_lines:
            display.extend(wrap_line(source_line, width))
        return cls(tuple(display))


def _strip_line_break(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


def load_document(path: str, width: int) -> Document:
    """Load a text file and wrap it for a terminal ``width`` columns wide.

    Args:
        path: Path of the file to read
        width: Terminal width in columns

    Returns:
        The wrapped document

    Raises:
        FileAccessError: The file can't be opened
        ReadError: Reading or decoding fails part way through
    """
    try:
        f = open(path, 'r', encoding='utf-8', newline='')
    except OSError as e:
        raise FileAccessError(f"Cannot open {path}: {e.strerror or e}") from e

    with f:
        try:
            # newline='' keeps '\r\n' and '\r' intact so we strip them ourselves
            source_lines = [_strip_line_break(line) for line in f]
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(f"Error reading {path}: {e}") from e

    document = Document.from_lines(source_lines, width)
    logger.debug("Loaded %s: %d source lines, %d display lines at width %d",
                 path, len(source_lines), len(document), width)
    return document
