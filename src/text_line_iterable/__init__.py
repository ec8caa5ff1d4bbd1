"""Memory-bounded, closeable iteration over the lines of text."""

from __future__ import annotations

__version__ = "1.0.0"

from text_line_iterable.char_source import CharSource, FileCharSource, StringCharSource
from text_line_iterable.closeable import CloseableIterator
from text_line_iterable.line_iterator import LineIterator, UnsupportedOperationError
from text_line_iterable.line_reader import read_line
from text_line_iterable.text_line_iterable import TextLineIterable

__all__ = [
    "CharSource",
    "CloseableIterator",
    "FileCharSource",
    "LineIterator",
    "StringCharSource",
    "TextLineIterable",
    "UnsupportedOperationError",
    "read_line",
]
