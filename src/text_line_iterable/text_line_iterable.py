"""Memory-bounded iteration over the lines of a text source.

## Basic Usage

### Iterating a File
```python
with TextLineIterable.from_file("numbers.txt", encoding="utf-8") as lines:
    total = sum(len(line) for line in lines)
```

### Several Passes
```python
lines = TextLineIterable.from_text("one\\rtwo\\r\\nthree\\nfour")
first = next(iter(lines))       # "one"
everything = list(lines)         # ["one", "two", "three", "four"]
lines.close()                    # closes the partially consumed first pass
```

### Partial Consumption
```python
lines = TextLineIterable.from_file(path)
it = lines.iterator()
header = next(it)
...
lines.close()  # releases `it` and any other pass still open
```

## Key Features

- **Bounded memory**: Only the current and the next line are held in memory
- **Independent passes**: Every iterator opens its own stream
- **Automatic release**: Exhausted iterators close themselves
- **Central close**: Closing the iterable closes every iterator it handed out
- **Thread-safe bookkeeping**: Different iterators can be used and closed from different threads
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from typing import Any

from text_line_iterable.char_source import CharSource, FileCharSource, StringCharSource
from text_line_iterable.iterator_registry import IteratorRegistry
from text_line_iterable.line_iterator import LineIterator

logger = logging.getLogger(__name__)


class TextLineIterable(Iterable[str]):
    """All lines of a character source, as many times as needed.

    Each call to ``iterator()`` (or ``iter()``) opens a fresh stream and returns
    a LineIterator over it. Lines do not include their terminator (``\\n``,
    ``\\r\\n`` or ``\\r``). Iterators that have not been closed are tracked so
    that ``close()`` can release all of them.
    """

    def __init__(self, source: CharSource) -> None:
        """
        Initialize the iterable. No I/O happens here.

        Args:
            source: Character source to read lines from. Kept by reference.
        """
        if not isinstance(source, CharSource):
            error_msg = f"source must provide open_stream(), got {type(source).__name__}"
            raise TypeError(error_msg)
        self.source = source
        self._registry = IteratorRegistry()

    @classmethod
    def from_file(
        cls, path: str | os.PathLike[str], encoding: str = "utf-8", errors: str = "strict"
    ) -> TextLineIterable:
        """Lines of a text file. A missing file is reported on first iteration."""
        return cls(FileCharSource(path, encoding=encoding, errors=errors))

    @classmethod
    def from_text(cls, text: str) -> TextLineIterable:
        """Lines of an in-memory string."""
        return cls(StringCharSource(text))

    def iterator(self) -> LineIterator:
        """Return a new iterator over the lines of this source.

        Returns:
            A LineIterator producing zero or more lines.

        Raises:
            OSError: If the stream cannot be opened or its first line cannot be read.
            UnicodeError: If the first line cannot be decoded.
        """
        stream = self.source.open_stream()
        return LineIterator(stream, self._registry)

    def __iter__(self) -> LineIterator:
        return self.iterator()

    def close(self) -> None:
        """Close every iterator created here that is still open.

        Every iterator is attempted even if some fail to close. The last
        failure is raised once all attempts are done.

        Raises:
            OSError: If closing at least one iterator's stream failed.
            RuntimeError: If an iterator failed to deregister itself.
        """
        failure: OSError | None = None
        # Snapshot, since LineIterator.close() deregisters as a side effect
        pending = self._registry.snapshot()
        for line_iterator in pending:
            try:
                line_iterator.close()
            except OSError as e:
                logger.debug("Failed to close %r: %s", line_iterator, e)
                failure = e
        leftover = [it for it in pending if it in self._registry]
        if leftover:
            error_msg = f"{len(leftover)} iterator(s) did not deregister on close"
            raise RuntimeError(error_msg)
        if pending:
            logger.debug("Closed %d open iterator(s) of %r", len(pending), self.source)
        if failure is not None:
            raise failure

    @property
    def open_iterators(self) -> tuple[LineIterator, ...]:
        """Iterators created here that have not been closed yet."""
        return self._registry.snapshot()

    def __enter__(self) -> TextLineIterable:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: Any | None,
    ) -> bool:
        if exc_type is None:
            self.close()
            return False
        # An exception is already on its way out; it takes precedence
        try:
            self.close()
        except OSError as close_error:
            logger.warning("Suppressed close failure while handling %s: %s", exc_type.__name__, close_error)
        return False

    def __repr__(self) -> str:
        return f"TextLineIterable({self.source!r})"
