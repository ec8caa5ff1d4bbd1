"""Line iterator module.

This module contains the LineIterator class, a single-pass, closeable iterator
over the lines of one open text stream with one line of lookahead.
"""

from __future__ import annotations

import contextlib
import logging
import threading
from collections.abc import Iterator
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Any, TextIO

if TYPE_CHECKING:
    from text_line_iterable.iterator_registry import IteratorRegistry

from text_line_iterable.line_reader import read_line

logger = logging.getLogger(__name__)

# Failures raised while reading a line from a text stream
READ_ERRORS = (OSError, UnicodeError)


class UnsupportedOperationError(Exception):
    """Raised when an iterator is asked to mutate its source."""


class LineIterator(AbstractContextManager["LineIterator"], Iterator[str]):
    """Closeable iterator over the lines of a text stream.

    The next line is always read ahead of time, so ``has_next()`` never does
    I/O. The iterator closes itself once the stream is exhausted or a read
    fails; in the latter case the line already buffered is still returned and
    the failure is reported by the following call to ``next()``.

    Lines never include their terminator.
    """

    def __init__(self, stream: TextIO, registry: IteratorRegistry | None = None) -> None:
        """Prime the lookahead and register with ``registry``.

        Args:
            stream: Open text stream. The iterator takes ownership of it.
            registry: Live-set to join while open. None for a free-standing iterator.

        Raises:
            OSError: If the first line cannot be read. The stream is closed and
                nothing is registered.
            UnicodeError: If the first line cannot be decoded. Same cleanup, as
                for any other exception raised by the first read.
        """
        self._stream = stream
        self._registry = registry
        self._peek: str | None = None
        self._error: BaseException | None = None
        self._closed = False
        self._close_lock = threading.Lock()
        try:
            self._peek = read_line(stream)
        except BaseException:
            self._closed = True
            with contextlib.suppress(OSError):
                stream.close()
            raise
        if self._peek is None:
            # Empty source: nothing to hand out, release the stream right away
            self._closed = True
            stream.close()
            return
        if registry is not None:
            registry.register(self)

    # Context manager protocol
    def __enter__(self) -> LineIterator:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: Any | None,
    ) -> bool:
        self.close()
        # Do not suppress exceptions
        return False

    # Iterator protocol
    def __iter__(self) -> LineIterator:
        return self

    def __next__(self) -> str:
        if self._peek is None:
            if self._error is not None:
                raise StopIteration(str(self._error)) from self._error
            raise StopIteration
        result = self._peek
        try:
            self._peek = read_line(self._stream)
        except READ_ERRORS as e:
            self._error = e
            self._peek = None
            logger.warning("Read failed, closing %r: %s", self, e)
            try:
                self.close()
            except OSError as close_error:
                logger.warning("Ignoring close failure after read error: %s", close_error)
        else:
            if self._peek is None:
                self._close_exhausted()
        return result

    def _close_exhausted(self) -> None:
        try:
            self.close()
        except OSError as e:
            # Keep it for the next call; this one still has a line to return
            self._error = e
            logger.warning("Close failed at end of input for %r: %s", self, e)

    def has_next(self) -> bool:
        """Return True if another line is buffered."""
        return self._peek is not None

    def close(self) -> None:
        """Release the stream and leave the registry.

        Safe to call more than once, also from another thread than the one
        iterating. A second caller waits until the first has deregistered.
        Deregistration and clearing the lookahead happen even if closing the
        stream fails; that failure is re-raised.
        """
        with self._close_lock:
            if self._closed:
                return
            self._closed = True
            try:
                self._stream.close()
            finally:
                if self._registry is not None:
                    self._registry.unregister(self)
                self._peek = None
                logger.debug("Closed %r", self)

    def remove(self) -> None:
        """Not supported: line iterators never modify their source."""
        error_msg = "LineIterator does not support remove()"
        raise UnsupportedOperationError(error_msg)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def last_error(self) -> BaseException | None:
        """The read or close failure that ended iteration early, if any."""
        return self._error

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<LineIterator {state} at {id(self):#x}>"
