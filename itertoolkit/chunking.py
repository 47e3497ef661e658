"""Lazy grouping of consecutive elements by key, and lazy fixed-size chunking.

Groups share one source iterator. Elements are buffered only when several
group iterators are alive and consumed out of order.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")
K = TypeVar("K")

_NONE: Any = object()


class _ChunkIndex:
    """Key function that numbers consecutive runs of ``size`` elements."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.index = 0
        self.key = 0

    def __call__(self, _item: Any) -> int:
        if self.index == self.size:
            self.key += 1
            self.index = 0
        self.index += 1
        return self.key


class _GroupInner:
    """Shared state for all group iterators of one grouping."""

    def __init__(self, iterable: Iterable[Any], key: Callable[[Any], Any]) -> None:
        self.key = key
        self.iter = iter(iterable)
        self.current_key: Any = _NONE
        self.current_elt: Any = _NONE
        self.done = False
        # Index of the group currently being buffered or visited.
        self.top_group = 0
        # Least index for which elements are still buffered.
        self.oldest_buffered_group = 0
        # Group index of buffer[0].
        self.bottom_group = 0
        self.buffer: list[deque[Any]] = []
        # Highest index of a closed group, -1 when none.
        self.dropped_group = -1

    def step(self, client: int) -> Any:
        """Next element for group ``client``, or ``_NONE``."""
        if client < self.oldest_buffered_group:
            return _NONE
        if client < self.top_group or (
            client == self.top_group
            and len(self.buffer) > self.top_group - self.bottom_group
        ):
            return self._lookup_buffer(client)
        if self.done:
            return _NONE
        if self.top_group == client:
            return self._step_current()
        return self._step_buffering(client)

    def _lookup_buffer(self, client: int) -> Any:
        if client < self.oldest_buffered_group:
            return _NONE
        bufidx = client - self.bottom_group
        elt = _NONE
        if bufidx < len(self.buffer) and self.buffer[bufidx]:
            elt = self.buffer[bufidx].popleft()
        if elt is _NONE and client == self.oldest_buffered_group:
            self.oldest_buffered_group += 1
            while True:
                pos = self.oldest_buffered_group - self.bottom_group
                if pos < len(self.buffer) and not self.buffer[pos]:
                    self.oldest_buffered_group += 1
                else:
                    break
            nclear = self.oldest_buffered_group - self.bottom_group
            if nclear > 0 and nclear >= len(self.buffer) // 2:
                del self.buffer[:nclear]
                self.bottom_group = self.oldest_buffered_group
        return elt

    def _next_element(self) -> Any:
        if self.done:
            return _NONE
        try:
            return next(self.iter)
        except StopIteration:
            self.done = True
            return _NONE

    def _step_buffering(self, client: int) -> Any:
        keep = self.top_group != self.dropped_group
        group: list[Any] = []
        if self.current_elt is not _NONE:
            elt, self.current_elt = self.current_elt, _NONE
            if keep:
                group.append(elt)
        first_elt = _NONE
        while (elt := self._next_element()) is not _NONE:
            key = self.key(elt)
            old_key, self.current_key = self.current_key, key
            if old_key is not _NONE and old_key != key:
                first_elt = elt
                break
            if keep:
                group.append(elt)
        if keep:
            self._push_next_group(group)
        if first_elt is not _NONE:
            self.top_group += 1
        return first_elt

    def _push_next_group(self, group: list[Any]) -> None:
        while self.top_group - self.bottom_group > len(self.buffer):
            if not self.buffer:
                self.bottom_group += 1
                self.oldest_buffered_group += 1
            else:
                self.buffer.append(deque())
        self.buffer.append(deque(group))

    def _step_current(self) -> Any:
        if self.current_elt is not _NONE:
            elt, self.current_elt = self.current_elt, _NONE
            return elt
        elt = self._next_element()
        if elt is _NONE:
            return _NONE
        key = self.key(elt)
        old_key, self.current_key = self.current_key, key
        if old_key is not _NONE and old_key != key:
            self.current_elt = elt
            self.top_group += 1
            return _NONE
        return elt

    def group_key(self, client: int) -> Any:
        """Key of the group whose first element was just returned."""
        old_key, self.current_key = self.current_key, _NONE
        elt = self._next_element()
        if elt is not _NONE:
            key = self.key(elt)
            if old_key != key:
                self.top_group += 1
            self.current_key = key
            self.current_elt = elt
        return old_key

    def drop_group(self, client: int) -> None:
        if self.dropped_group == -1 or client > self.dropped_group:
            self.dropped_group = client


class _Member(Generic[T]):
    """Shared state and stepping for the iterator over one group."""

    def __init__(self, inner: _GroupInner, index: int, first: T) -> None:
        self._inner = inner
        self._index = index
        self._first: Any = first
        self._closed = False

    def _advance(self) -> T:
        if self._closed:
            raise StopIteration
        if self._first is not _NONE:
            elt, self._first = self._first, _NONE
            return elt
        elt = self._inner.step(self._index)
        if elt is _NONE:
            raise StopIteration
        return elt

    def _close(self) -> None:
        if not self._closed:
            self._closed = True
            self._first = _NONE
            self._inner.drop_group(self._index)

    def __del__(self) -> None:
        if getattr(self, "_inner", None) is not None:
            self._close()


class Group(_Member[T]):
    """The elements of one run of equal keys."""

    def __iter__(self) -> Group[T]:
        return self

    def __next__(self) -> T:
        return self._advance()

    def close(self) -> None:
        """Give up this group; its remaining elements are no longer buffered."""
        self._close()


class Chunk(_Member[T]):
    """The elements of one fixed-size chunk."""

    def __iter__(self) -> Chunk[T]:
        return self

    def __next__(self) -> T:
        return self._advance()

    def close(self) -> None:
        """Give up this chunk; its remaining elements are no longer buffered."""
        self._close()


class ChunkBy(Generic[K, T]):
    """Lazily split an iterable into runs of consecutive elements with equal keys.

    Iterating yields ``(key, Group)`` pairs. All iterators over one
    ``ChunkBy`` share its position.
    """

    def __init__(self, iterable: Iterable[T], key: Callable[[T], K]) -> None:
        self._inner = _GroupInner(iterable, key)
        self._index = 0

    def __iter__(self) -> Iterator[tuple[K, Group[T]]]:
        inner = self._inner
        while True:
            index = self._index
            self._index += 1
            first = inner.step(index)
            if first is _NONE:
                return
            key = inner.group_key(index)
            yield key, Group(inner, index, first)


class IntoChunks(Generic[T]):
    """Lazily split an iterable into chunks of ``size`` elements (the last may be shorter)."""

    def __init__(self, iterable: Iterable[T], size: int) -> None:
        if size < 1:
            raise ValueError("chunk size must be at least 1")
        self._inner = _GroupInner(iterable, _ChunkIndex(size))
        self._index = 0

    def __iter__(self) -> Iterator[Chunk[T]]:
        inner = self._inner
        while True:
            index = self._index
            self._index += 1
            first = inner.step(index)
            if first is _NONE:
                return
            yield Chunk(inner, index, first)


def chunk_by(iterable: Iterable[T], key: Callable[[T], K]) -> ChunkBy[K, T]:
    """Group consecutive elements of ``iterable`` that share ``key(element)``."""
    return ChunkBy(iterable, key)


def chunks(iterable: Iterable[T], size: int) -> IntoChunks[T]:
    """Split ``iterable`` into lazy chunks of ``size`` elements."""
    return IntoChunks(iterable, size)