"""Keyboard input handling: raw bytes to pager actions."""

from enum import Enum
from typing import Union

from .constants import PagerConstants


class PagerAction(Enum):
    """Actions a single keystroke can trigger."""
    QUIT = "quit"
    ADVANCE = "advance"
    NONE = "none"


def action_for_byte(key: Union[bytes, int]) -> PagerAction:
    """Map one raw input byte to a pager action.

    Args:
        key: A single byte, as ``bytes`` of length one or its integer value.
            Empty ``bytes`` means end of input.

    Returns:
        The action for that byte. Unbound keys map to ``PagerAction.NONE``.
    """
    if isinstance(key, (bytes, bytearray)):
        if not key:
            # End of input: nothing more can be read, so stop
            return PagerAction.QUIT
        key = key[0]
    if key in PagerConstants.QUIT_KEYS:
        return PagerAction.QUIT
    if key in PagerConstants.ADVANCE_KEYS:
        return PagerAction.ADVANCE
    return PagerAction.NONE


class KeyboardHandler:
    """Reads keystrokes from the terminal and maps them to actions."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_action(self) -> PagerAction:
        """Block for one byte of input and return its action."""
        return action_for_byte(self.terminal.read_byte())
