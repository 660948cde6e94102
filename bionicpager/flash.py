"""Word-at-a-time flash reader.

Shows one word at a time at a fixed pace and reports the achieved reading
speed at the end. Runs as the ``bionicpager-flash`` console script.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, TextIO

from .constants import FlashConstants, PagerConstants

logger = logging.getLogger(__name__)


def prepare_text(text: str, keep_special: bool = False) -> list[str]:
    """Split text into the words to flash.

    Newlines, carriage returns and tabs are turned into spaces first unless
    ``keep_special`` is set.
    """
    if not keep_special:
        for ch in FlashConstants.SPECIAL_CHARACTERS:
            text = text.replace(ch, " ")
    return text.split()


@dataclass
class FlashSession:
    """Timing and progress for one flash-reading run."""

    clock: Callable[[], float] = time.monotonic
    started_at: float = 0.0
    word_count: int = 0

    def __post_init__(self):
        self.started_at = self.clock()

    def record_word(self) -> None:
        self.word_count += 1

    def words_per_minute(self) -> Optional[float]:
        """Return the reading speed so far, or None if no time has passed."""
        minutes = (self.clock() - self.started_at) / 60
        if minutes <= 0:
            return None
        return self.word_count / minutes


class FlashReader:
    """Displays words one at a time at a fixed words-per-minute pace."""

    def __init__(self, wpm: int = FlashConstants.DEFAULT_WPM, clear_each: bool = False,
                 out: Optional[TextIO] = None, sleep: Callable[[float], None] = time.sleep):
        if wpm <= 0:
            raise ValueError(f"wpm must be positive, got {wpm}")
        self.wpm = wpm
        self.clear_each = clear_each
        self.out = out or sys.stdout
        self.sleep = sleep

    @property
    def delay(self) -> float:
        """Seconds each word stays on screen."""
        return 60.0 / self.wpm

    def show(self, word: str) -> None:
        if self.clear_each:
            self.out.write(PagerConstants.CLEAR_SCREEN)
        # Blank out the previous word before drawing the next one
        self.out.write("\r" + " " * FlashConstants.BLANK_WIDTH + "\r" + word)
        self.out.flush()

    def run(self, words: Iterable[str], session: Optional[FlashSession] = None) -> FlashSession:
        session = session or FlashSession()
        for word in words:
            self.show(word)
            session.record_word()
            self.sleep(self.delay)
        self.out.write("\n")
        wpm = session.words_per_minute()
        if wpm is not None:
            self.out.write(f"\nWords Per Minute: {wpm:.2f}\n")
        self.out.flush()
        return session


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bionicpager-flash",
        description="Flash a text file one word at a time.",
    )
    parser.add_argument("file", help="file to read")
    parser.add_argument("--wpm", type=_positive_int, default=FlashConstants.DEFAULT_WPM,
                        help="words per minute (default: %(default)s)")
    parser.add_argument("-k", "--keep-special", action="store_true",
                        help="keep newlines and tabs instead of treating them as spaces")
    parser.add_argument("-c", "--clear", action="store_true",
                        help="clear the screen before each word")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the flash reader."""
    args = build_parser().parse_args(argv)
    try:
        with open(args.file, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    words = prepare_text(text, keep_special=args.keep_special)
    logger.debug("Flashing %d words from %s at %d wpm", len(words), args.file, args.wpm)
    FlashReader(wpm=args.wpm, clear_each=args.clear).run(words)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
