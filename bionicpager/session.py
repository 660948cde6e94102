"""Per-invocation reading session state."""

import logging
from dataclasses import dataclass

from .constants import PagerConstants
from .document import Document
from .keyboard import PagerAction
from .navigation import PagerState, transition

logger = logging.getLogger(__name__)


@dataclass
class PagerSession:
    """State of one reading session.

    The document and geometry are fixed when the session starts; only
    ``page_index`` and ``state`` change, and only through ``apply``.
    """

    document: Document
    source_name: str
    term_width: int = PagerConstants.DEFAULT_TERMINAL_WIDTH
    page_index: int = 0
    state: PagerState = PagerState.READING

    @property
    def total_pages(self) -> int:
        return self.document.page_count(PagerConstants.LINES_PER_PAGE)

    @property
    def percent_complete(self) -> float:
        return (self.page_index + 1) / self.total_pages * 100

    @property
    def is_terminated(self) -> bool:
        return self.state is PagerState.TERMINATED

    def visible_lines(self) -> tuple[str, ...]:
        return self.document.page_lines(self.page_index, PagerConstants.LINES_PER_PAGE)

    def apply(self, action: PagerAction) -> PagerState:
        """Run one action through the navigation state machine."""
        new_state, new_index = transition(self.state, action, self.page_index, self.total_pages)
        if new_state is not self.state or new_index != self.page_index:
            logger.debug("%s on page %d: %s -> %s, page %d",
                         action.value, self.page_index + 1, self.state.value,
                         new_state.value, new_index + 1)
        self.state, self.page_index = new_state, new_index
        return new_state
