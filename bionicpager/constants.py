"""Constants and configuration for the bionicpager reader."""


class PagerConstants:
    """Central configuration constants for the pager."""

    # Page layout
    LINES_PER_PAGE = 20  # Display lines shown per page
    STATUS_ROW = LINES_PER_PAGE + 2  # 1-based screen row of the status bar
    DEFAULT_TERMINAL_WIDTH = 80  # Used when the column count can't be queried

    # Key bindings (raw bytes read in raw mode)
    QUIT_KEYS = frozenset(b"qQ\x03")  # q, Q, Ctrl-C
    ADVANCE_KEYS = frozenset(b"\n\r ")  # Enter (LF or CR), space

    # Escape sequences
    CLEAR_SCREEN = "\x1b[2J\x1b[H"  # Clear and home the cursor
    BOLD_ON = "\x1b[1m"
    BOLD_OFF = "\x1b[0m"
    REVERSE_ON = "\x1b[7m"
    REVERSE_OFF = "\x1b[0m"
    MOVE_TO_ROW = "\x1b[{row};1H"  # Cursor to column 1 of a 1-based row
    LINE_END = "\r\n"  # Raw mode disables CR translation

    # Status messages
    HELP_TEXT = "Space/Enter: next page  q: quit"
    STATUS_TEMPLATE = " Page {page}/{total} ({percent:.1f}%) | {name} | {help}"
    END_OF_FILE_MESSAGE = "End of file reached. Press q to quit."
    USAGE_MESSAGE = "Usage: bionicpager [--] <file>"


class FlashConstants:
    """Defaults for the word-at-a-time flash reader."""

    DEFAULT_WPM = 300
    BLANK_WIDTH = 50  # Columns blanked out before each word
    SPECIAL_CHARACTERS = ("\n", "\r", "\t")  # Replaced with spaces unless kept
