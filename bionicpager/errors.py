"""Exception types for fatal pager errors.

Every error here ends the session. They propagate up to the CLI entry
point, which reports them on stderr and exits with a non-zero status.
"""


class PagerError(Exception):
    """Base class for all bionicpager errors."""


class UsageError(PagerError):
    """The command line did not have exactly one file argument."""


class FileAccessError(PagerError):
    """The document path could not be opened."""


class ReadError(PagerError):
    """Reading the document failed part way through."""


class TerminalModeError(PagerError):
    """Raw mode could not be entered on the controlling terminal."""
