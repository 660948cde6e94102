"""Page rendering: one full-screen frame per keystroke."""

from .constants import PagerConstants
from .formatter import format_line
from .navigation import PagerState


class PageRenderer:
    """Composes and writes the frame for the session's current page."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def status_text(self, session) -> str:
        return PagerConstants.STATUS_TEMPLATE.format(
            page=session.page_index + 1,
            total=session.total_pages,
            percent=session.percent_complete,
            name=session.source_name,
            help=PagerConstants.HELP_TEXT,
        )

    def compose(self, session) -> str:
        """Build the frame for the current page.

        The frame clears the screen, draws the page's lines with bionic
        emphasis, pads short pages with blank rows so the reverse-video
        status bar always lands on ``STATUS_ROW``, and, at the end of the
        document, adds the end-of-file message below the bar. Every frame
        starts from a cleared screen, so redrawing is idempotent.
        """
        eol = PagerConstants.LINE_END
        lines = session.visible_lines()

        out = [PagerConstants.CLEAR_SCREEN]
        for line in lines:
            out.append(format_line(line) + eol)
        out.append(eol * (PagerConstants.LINES_PER_PAGE - len(lines)))

        status = self.terminal.ljust(self.status_text(session), session.term_width)
        out.append(PagerConstants.MOVE_TO_ROW.format(row=PagerConstants.STATUS_ROW))
        out.append(PagerConstants.REVERSE_ON + status + PagerConstants.REVERSE_OFF)

        if session.state is PagerState.END_REACHED:
            out.append(eol + PagerConstants.END_OF_FILE_MESSAGE)
        return "".join(out)

    def render(self, session) -> None:
        """Write the current page to the terminal."""
        self.terminal.write(self.compose(session))
