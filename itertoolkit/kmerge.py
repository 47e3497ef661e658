"""Merge any number of iterables into one, ordered by a less-than predicate."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class _HeadTail(Generic[T]):
    head: T
    tail: Iterator[T]

    def advance(self) -> tuple[bool, T]:
        """Replace the head with the tail's next item, returning the old head."""
        try:
            nxt = next(self.tail)
        except StopIteration:
            return False, self.head
        old, self.head = self.head, nxt
        return True, old


def _sift_down(heap: list, index: int, less_than: Callable[[Any, Any], bool]) -> None:
    pos = index
    child = 2 * pos + 1
    length = len(heap)
    while child + 1 < length:
        if less_than(heap[child + 1], heap[child]):
            child += 1
        if not less_than(heap[child], heap[pos]):
            return
        heap[pos], heap[child] = heap[child], heap[pos]
        pos = child
        child = 2 * pos + 1
    if child + 1 == length and less_than(heap[child], heap[pos]):
        heap[pos], heap[child] = heap[child], heap[pos]


class KMergeBy(Generic[T]):
    """Merge iterables; the result is sorted if every input is sorted."""

    def __init__(self, iterables: Iterable[Iterable[T]], less_than: Callable[[T, T], bool]) -> None:
        self._less_than = less_than
        self._heap: list[_HeadTail[T]] = []
        for iterable in iterables:
            tail = iter(iterable)
            for head in tail:
                self._heap.append(_HeadTail(head, tail))
                break
        for i in reversed(range(len(self._heap) // 2)):
            _sift_down(self._heap, i, self._heads_less)

    def _heads_less(self, a: _HeadTail[T], b: _HeadTail[T]) -> bool:
        return self._less_than(a.head, b.head)

    def __iter__(self) -> KMergeBy[T]:
        return self

    def __next__(self) -> T:
        heap = self._heap
        if not heap:
            raise StopIteration
        advanced, result = heap[0].advance()
        if not advanced:
            last = heap.pop()
            if heap:
                heap[0] = last
        _sift_down(heap, 0, self._heads_less)
        return result

    def __length_hint__(self) -> int:
        return sum(1 + operator.length_hint(entry.tail) for entry in self._heap)


def kmerge_by(iterables: Iterable[Iterable[T]], less_than: Callable[[T, T], bool]) -> KMergeBy[T]:
    """Merge ``iterables`` using ``less_than`` to order their heads."""
    return KMergeBy(iterables, less_than)


def kmerge(iterables: Iterable[Iterable[T]]) -> KMergeBy[T]:
    """Merge ``iterables`` in ascending order."""
    return KMergeBy(iterables, operator.lt)