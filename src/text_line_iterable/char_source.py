"""Character source adapters.

A character source is a re-openable provider of text. Every call to
``open_stream()`` returns a fresh, independently positioned, buffered text
stream, so several readers can walk the same text without interfering.
"""

from __future__ import annotations

import io
import logging
import os
from typing import Protocol, TextIO, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class CharSource(Protocol):
    """Protocol for anything that can repeatedly open a text stream."""

    def open_stream(self) -> TextIO: ...


class FileCharSource:
    """Character source bound lazily to a file path and encoding.

    Construction never touches the filesystem. A missing or unreadable file is
    reported by ``open_stream()`` as an ``OSError``.
    """

    def __init__(self, path: str | os.PathLike[str], encoding: str = "utf-8", errors: str = "strict") -> None:
        """Initialize the source.

        Args:
            path: Path of the text file.
            encoding: Character encoding used to decode the file.
            errors: Decoding error policy, as accepted by ``open()``.
        """
        self.path = os.fspath(path)
        self.encoding = encoding
        self.errors = errors

    def open_stream(self) -> TextIO:
        # newline="" leaves terminators untranslated for read_line()
        stream = open(self.path, encoding=self.encoding, errors=self.errors, newline="")  # noqa: SIM115, PTH123
        logger.debug("Opened %s (%s)", self.path, self.encoding)
        return stream

    def __repr__(self) -> str:
        return f"FileCharSource({self.path!r}, encoding={self.encoding!r})"


class StringCharSource:
    """Character source over in-memory text."""

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            error_msg = f"text must be str, got {type(text).__name__}"
            raise TypeError(error_msg)
        self.text = text

    def open_stream(self) -> TextIO:
        return io.StringIO(self.text, newline="")

    def __repr__(self) -> str:
        return f"StringCharSource(<{len(self.text)} chars>)"
