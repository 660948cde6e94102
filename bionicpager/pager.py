"""Main pager controller: raw-mode lifecycle and the page/keystroke loop."""

import logging
import os
import signal
from typing import Optional

from .document import load_document
from .keyboard import KeyboardHandler
from .session import PagerSession
from .terminal import TerminalInterface
from .view import PageRenderer

logger = logging.getLogger(__name__)

# Signals that would otherwise kill the process with the terminal still raw
EXIT_SIGNALS = tuple(
    getattr(signal, name) for name in ("SIGTERM", "SIGHUP") if hasattr(signal, name)
)


class Pager:
    """Interactive full-screen pager application controller."""

    def __init__(self, session: PagerSession, terminal: Optional[TerminalInterface] = None):
        """Initialize the pager components."""
        self.session = session
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.renderer = PageRenderer(self.terminal)

    @classmethod
    def from_path(cls, path: str, terminal: Optional[TerminalInterface] = None) -> "Pager":
        """Load ``path`` wrapped to the terminal's width and build a pager for it.

        Raises:
            FileAccessError: The file can't be opened
            ReadError: Reading the file fails
        """
        terminal = terminal or TerminalInterface()
        width = terminal.detect_width()
        document = load_document(path, width)
        session = PagerSession(
            document=document,
            source_name=os.path.basename(path),
            term_width=width,
        )
        return cls(session, terminal)

    def _handle_exit_signal(self, signum, frame):
        """Turn SIGTERM/SIGHUP into SystemExit so the raw-mode block unwinds."""
        del frame  # Unused
        logger.debug("Received signal %d, exiting", signum)
        raise SystemExit(128 + signum)

    def run(self) -> None:
        """Run the main pager loop until the user quits.

        Raw mode is held for exactly the duration of the loop and restored
        on every way out of it, including SIGTERM and SIGHUP, which are
        turned into ``SystemExit`` while the loop runs. The screen is
        cleared once the terminal is back to normal.

        Raises:
            TerminalModeError: Standard input can't be put into raw mode.
                Nothing has been drawn when this is raised.
        """
        original_handlers = {
            signum: signal.signal(signum, self._handle_exit_signal)
            for signum in EXIT_SIGNALS
        }
        entered = False
        try:
            with self.terminal.raw_mode():
                entered = True
                self._event_loop()
        finally:
            if entered:
                self.terminal.clear_screen()
            # Restore original signal handlers
            for signum, handler in original_handlers.items():
                if handler is not None:
                    signal.signal(signum, handler)

    def _event_loop(self) -> None:
        session = self.session
        logger.debug("Paging %s: %d lines, %d pages",
                     session.source_name, len(session.document), session.total_pages)
        while not session.is_terminated:
            self.renderer.render(session)
            session.apply(self.keyboard.get_action())
