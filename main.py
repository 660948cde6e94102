#!/usr/bin/env python3
"""Bionicpager - a terminal pager with bionic reading emphasis.

Usage:
    python main.py <file>

Controls:
    Space / Enter: Next page
    q / Q / Ctrl-C: Quit
"""

import sys
from bionicpager.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
