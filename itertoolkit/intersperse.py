"""Insert a generated separator between the elements of an iterable."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")
B = TypeVar("B")

_NOT_STARTED = object()
_NEED_SEPARATOR = object()


class IntersperseWith(Generic[T]):
    """Iterate ``iterable`` with ``element()`` called between each pair of items.

    The iterator is fused: once the source is exhausted it stays exhausted.
    """

    def __init__(self, iterable: Iterable[T], element: Callable[[], T]) -> None:
        self._iter = iter(iterable)
        self._element = element
        self._exhausted = False
        # _NOT_STARTED before the first item, _NEED_SEPARATOR when the next
        # output is a separator (if the source has more), otherwise a held item.
        self._peek: object = _NOT_STARTED

    def _pull(self) -> T:
        if self._exhausted:
            raise StopIteration
        try:
            return next(self._iter)
        except StopIteration:
            self._exhausted = True
            raise

    def _remaining(self) -> Iterator[T]:
        if self._exhausted:
            return
        yield from self._iter
        self._exhausted = True

    def __iter__(self) -> IntersperseWith[T]:
        return self

    def __next__(self) -> T:
        peek = self._peek
        if peek is _NOT_STARTED:
            self._peek = _NEED_SEPARATOR
            return self._pull()
        if peek is _NEED_SEPARATOR:
            self._peek = self._pull()
            return self._element()
        self._peek = _NEED_SEPARATOR
        return peek  # type: ignore[return-value]

    def fold(self, init: B, function: Callable[[B, T], B]) -> B:
        """Consume the rest of the iterator, folding every output into ``init``."""
        accum = init
        peek, self._peek = self._peek, _NEED_SEPARATOR
        if peek is _NOT_STARTED:
            try:
                peek = self._pull()
            except StopIteration:
                return accum
        if peek is not _NEED_SEPARATOR:
            accum = function(accum, peek)  # type: ignore[arg-type]
        for item in self._remaining():
            accum = function(accum, self._element())
            accum = function(accum, item)
        return accum