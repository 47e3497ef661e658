"""A buffer that pulls items from an iterator only on request."""

from __future__ import annotations

import operator
from collections.abc import Iterable
from itertools import islice
from typing import Generic, TypeVar

T = TypeVar("T")


class LazyBuffer(Generic[T]):
    """Items read so far from a (fused) iterator, extended on demand."""

    def __init__(self, iterable: Iterable[T]) -> None:
        self._it = iter(iterable)
        self._exhausted = False
        self._buffer: list[T] = []

    def __len__(self) -> int:
        return len(self._buffer)

    def __getitem__(self, index):
        return self._buffer[index]

    def __length_hint__(self) -> int:
        if self._exhausted:
            return len(self._buffer)
        return len(self._buffer) + operator.length_hint(self._it)

    def get_next(self) -> bool:
        """Buffer one more item; return False if the source is exhausted."""
        if self._exhausted:
            return False
        try:
            self._buffer.append(next(self._it))
        except StopIteration:
            self._exhausted = True
            return False
        return True

    def prefill(self, length: int) -> None:
        """Buffer items until ``length`` are held or the source runs out."""
        missing = length - len(self._buffer)
        if missing <= 0 or self._exhausted:
            return
        before = len(self._buffer)
        self._buffer.extend(islice(self._it, missing))
        if len(self._buffer) - before < missing:
            self._exhausted = True

    def count(self) -> int:
        """Total number of items, consuming the rest of the source."""
        remaining = 0
        if not self._exhausted:
            remaining = sum(1 for _ in self._it)
            self._exhausted = True
        return len(self._buffer) + remaining