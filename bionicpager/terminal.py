"""Terminal interface using Blessed for geometry and raw keyboard mode."""

import logging
import os
import sys
from typing import ContextManager, Optional

import blessed

from .constants import PagerConstants
from .errors import TerminalModeError

logger = logging.getLogger(__name__)


class TerminalInterface:
    """Handles terminal I/O for the pager."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None, in_stream=None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.in_stream = in_stream if in_stream is not None else sys.stdin

    @property
    def out_stream(self):
        return self.term.stream

    def detect_width(self) -> int:
        """Return the output's column count, or 80 when it can't be determined."""
        default = PagerConstants.DEFAULT_TERMINAL_WIDTH
        if not self.term.is_a_tty:
            logger.debug("Output is not a terminal, using width %d", default)
            return default
        try:
            width = int(self.term.width)
        except (OSError, TypeError, ValueError) as e:
            logger.debug("Terminal width query failed (%s), using width %d", e, default)
            return default
        if width <= 0:
            logger.debug("Terminal reported width %d, using width %d", width, default)
            return default
        return width

    def _input_fd(self) -> int:
        try:
            fd = self.in_stream.fileno()
        except (AttributeError, ValueError, OSError) as e:
            raise TerminalModeError(f"Standard input has no file descriptor: {e}") from e
        if not os.isatty(fd):
            raise TerminalModeError("Standard input is not a terminal")
        return fd

    def raw_mode(self) -> ContextManager[None]:
        """Return Blessed's raw-mode context for the keyboard, to be used in ``with``.

        Raw mode turns off echo, line buffering and signal keys; Blessed
        restores the saved terminal settings when the block exits, however
        it exits.

        Raises:
            TerminalModeError: Standard input or output is not a terminal.
                Raised before anything has been changed.
        """
        self._input_fd()
        if not self.term.is_a_tty:
            raise TerminalModeError("Standard output is not a terminal")
        return self.term.raw()

    def read_byte(self) -> bytes:
        """Block until one byte of input is available and return it.

        Returns ``b''`` at end of input.
        """
        return os.read(self._input_fd(), 1)

    def write(self, text: str) -> None:
        self.out_stream.write(text)
        self.out_stream.flush()

    def clear_screen(self) -> None:
        """Clear the entire screen and home the cursor."""
        self.write(PagerConstants.CLEAR_SCREEN)

    def ljust(self, text: str, width: int) -> str:
        """Pad or clip ``text`` to exactly ``width`` display cells."""
        return self.term.ljust(self.term.truncate(text, width), width)
