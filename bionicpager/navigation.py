"""Page navigation state machine.

The pager is always in one of three states. Each keystroke is mapped to a
``PagerAction`` and looked up in ``TRANSITIONS`` together with the current
state; the handler found there returns the new state and page index.
"""

from enum import Enum
from typing import Callable, Dict, Tuple

from .keyboard import PagerAction


class PagerState(Enum):
    """States of the pager's input loop."""
    READING = "reading"
    END_REACHED = "end_reached"
    TERMINATED = "terminated"


Transition = Callable[[PagerState, int, int], Tuple[PagerState, int]]


def _terminate(state: PagerState, page_index: int, total_pages: int) -> Tuple[PagerState, int]:
    return PagerState.TERMINATED, page_index


def _advance(state: PagerState, page_index: int, total_pages: int) -> Tuple[PagerState, int]:
    if page_index < total_pages - 1:
        return PagerState.READING, page_index + 1
    return PagerState.END_REACHED, page_index


def _stay(state: PagerState, page_index: int, total_pages: int) -> Tuple[PagerState, int]:
    return state, page_index


TRANSITIONS: Dict[Tuple[PagerState, PagerAction], Transition] = {
    (PagerState.READING, PagerAction.QUIT): _terminate,
    (PagerState.READING, PagerAction.ADVANCE): _advance,
    (PagerState.READING, PagerAction.NONE): _stay,
    (PagerState.END_REACHED, PagerAction.QUIT): _terminate,
    # The last page stays put; the end message is shown again
    (PagerState.END_REACHED, PagerAction.ADVANCE): _stay,
    (PagerState.END_REACHED, PagerAction.NONE): _stay,
    (PagerState.TERMINATED, PagerAction.QUIT): _stay,
    (PagerState.TERMINATED, PagerAction.ADVANCE): _stay,
    (PagerState.TERMINATED, PagerAction.NONE): _stay,
}


def transition(state: PagerState, action: PagerAction,
               page_index: int, total_pages: int) -> Tuple[PagerState, int]:
    """Apply one action to the navigation state.

    Args:
        state: Current state
        action: Action triggered by the keystroke
        page_index: Current 0-based page index
        total_pages: Number of pages in the document (at least 1)

    Returns:
        Tuple of (new state, new page index)
    """
    return TRANSITIONS[(state, action)](state, page_index, total_pages)
