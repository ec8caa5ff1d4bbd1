"""Registry of iterators that have not been closed yet."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from text_line_iterable.line_iterator import LineIterator

logger = logging.getLogger(__name__)


class IteratorRegistry:
    """Thread-safe set of open line iterators, owned by one TextLineIterable.

    Iterators keep a reference to the registry rather than to the iterable
    that owns it, which is enough to deregister themselves on close.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._open: set[LineIterator] = set()

    def register(self, iterator: LineIterator) -> None:
        """Register an open iterator."""
        with self._lock:
            self._open.add(iterator)
            count = len(self._open)
        logger.debug("Registered %r (%d open)", iterator, count)

    def unregister(self, iterator: LineIterator) -> None:
        """Unregister an iterator. Unknown iterators are ignored."""
        with self._lock:
            self._open.discard(iterator)

    def snapshot(self) -> tuple[LineIterator, ...]:
        """Point-in-time copy of the open iterators."""
        with self._lock:
            return tuple(self._open)

    def __contains__(self, iterator: object) -> bool:
        with self._lock:
            return iterator in self._open

    def __len__(self) -> int:
        with self._lock:
            return len(self._open)
