"""Bionicpager CLI entry point.

Allows running via `python -m bionicpager FILE` and provides the console
script defined in `pyproject.toml`.
"""

from __future__ import annotations

import sys
from typing import Optional

from .constants import PagerConstants
from .errors import PagerError, UsageError
from .pager import Pager
from .version import get_version_string


def parse_args(args: list[str]) -> str:
    """Return the single file argument.

    A leading ``--`` ends option parsing, so ``bionicpager -- -V`` pages a
    file named ``-V``.

    Raises:
        UsageError: Not exactly one argument was given
    """
    if args[:1] == ["--"]:
        args = args[1:]
    if len(args) != 1:
        raise UsageError(PagerConstants.USAGE_MESSAGE)
    return args[0]


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args in (["--version"], ["-V"]):
        print(get_version_string())
        return 0

    try:
        path = parse_args(args)
    except UsageError as e:
        print(e, file=sys.stderr)
        return 1

    try:
        pager = Pager.from_path(path)
        pager.run()
    except PagerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
