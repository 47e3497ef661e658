"""Select the k smallest elements of an iterable with a custom comparator."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from itertools import islice
from typing import Any, TypeVar

T = TypeVar("T")

Comparator = Callable[[Any, Any], int]


def _sift_down(heap: list, length: int, is_less_than: Callable[[Any, Any], bool], origin: int) -> None:
    """Move ``heap[origin]`` away from the root, keeping larger items near the top."""
    while origin < length:
        left, right = 2 * origin + 1, 2 * origin + 2
        if left >= length:
            return
        replacement = right if right < length and is_less_than(heap[left], heap[right]) else left
        if not is_less_than(heap[origin], heap[replacement]):
            return
        heap[origin], heap[replacement] = heap[replacement], heap[origin]
        origin = replacement


def k_smallest_general(iterable: Iterable[T], k: int, comparator: Comparator) -> list[T]:
    """Return the ``k`` smallest elements in ascending order.

    ``comparator(a, b)`` returns a negative number when ``a < b``, zero when
    equal and a positive number otherwise.
    """
    if k < 0:
        raise ValueError("k must be non-negative")
    if k == 0:
        return []

    it = iter(iterable)
    storage = list(islice(it, k))

    def is_less_than(a: Any, b: Any) -> bool:
        return comparator(a, b) < 0

    for i in reversed(range(len(storage) // 2 + 1)):
        _sift_down(storage, len(storage), is_less_than, i)

    if len(storage) == k:
        for value in it:
            if is_less_than(value, storage[0]):
                storage[0] = value
                _sift_down(storage, k, is_less_than, 0)

    end = len(storage)
    while end > 1:
        end -= 1
        storage[0], storage[end] = storage[end], storage[0]
        _sift_down(storage, end, is_less_than, 0)
    return storage


def key_to_cmp(key: Callable[[T], Any]) -> Comparator:
    """Build a three-way comparator from a key function."""

    def compare(a: T, b: T) -> int:
        ka, kb = key(a), key(b)
        return (ka > kb) - (ka < kb)

    return compare