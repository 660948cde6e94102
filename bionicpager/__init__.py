"""Bionicpager - a terminal pager with bionic reading emphasis."""

from .document import Document, load_document
from .formatter import format_line, format_word
from .pager import Pager
from .session import PagerSession
from .wrapper import wrap_line

__all__ = [
    'Document',
    'Pager',
    'PagerSession',
    'format_line',
    'format_word',
    'load_document',
    'wrap_line',
]
