from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class CloseableIterator(Protocol[T_co]):
    """Protocol for iterators backed by a resource other than memory.

    Implementations release the resource on their own once fully consumed. A
    partially consumed iterator is released with ``close()``, which is
    idempotent. After ``close()``, ``has_next()`` returns False and ``next()``
    raises StopIteration.
    """

    def __iter__(self) -> Iterator[T_co]: ...

    def __next__(self) -> T_co: ...

    def has_next(self) -> bool: ...

    def close(self) -> None: ...

    @property
    def closed(self) -> bool: ...

    def __enter__(self) -> Any: ...

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> bool: ...
