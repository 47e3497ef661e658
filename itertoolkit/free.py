"""Free functions that accept any iterable and build or consume an iterator."""

from __future__ import annotations

import builtins
import copy
import functools
import itertools
from collections.abc import Callable, Iterable, Iterator, Reversible
from typing import Any, TypeVar

from itertoolkit.intersperse import IntersperseWith

T = TypeVar("T")
U = TypeVar("U")
B = TypeVar("B")


def intersperse(iterable: Iterable[T], element: T) -> IntersperseWith[T]:
    """Iterate ``iterable`` with ``element`` inserted between each item."""
    return IntersperseWith(iterable, lambda: element)


def intersperse_with(iterable: Iterable[T], element: Callable[[], T]) -> IntersperseWith[T]:
    """Iterate ``iterable`` with ``element()`` inserted between each item."""
    return IntersperseWith(iterable, element)


def enumerate(iterable: Iterable[T]) -> Iterator[tuple[int, T]]:
    """Iterate ``iterable`` with a running index starting at zero."""
    return builtins.enumerate(iterable)


def rev(iterable: Reversible[T]) -> Iterator[T]:
    """Iterate ``iterable`` in reverse; it must support ``reversed``."""
    return reversed(iterable)


def zip(first: Iterable[T], second: Iterable[U]) -> Iterator[tuple[T, U]]:
    """Pair up the items of two iterables, stopping at the shorter one."""
    return builtins.zip(first, second)


def chain(first: Iterable[T], second: Iterable[T]) -> Iterator[T]:
    """Iterate ``first`` and then ``second``."""
    return itertools.chain(first, second)


def cloned(iterable: Iterable[T]) -> Iterator[T]:
    """Yield a shallow copy of each item."""
    return builtins.map(copy.copy, iterable)


def fold(iterable: Iterable[T], init: B, function: Callable[[B, T], B]) -> B:
    """Fold the items of ``iterable`` into ``init`` with ``function(acc, item)``."""
    return functools.reduce(function, iterable, init)


def all(iterable: Iterable[T], predicate: Callable[[T], Any]) -> bool:
    """True if ``predicate`` holds for every item (short-circuiting)."""
    return builtins.all(predicate(item) for item in iterable)


def any(iterable: Iterable[T], predicate: Callable[[T], Any]) -> bool:
    """True if ``predicate`` holds for some item (short-circuiting)."""
    return builtins.any(predicate(item) for item in iterable)


def max(iterable: Iterable[T]) -> T | None:
    """Largest item, or ``None`` if empty; the last of equal maxima wins."""
    it = iter(iterable)
    try:
        best = next(it)
    except StopIteration:
        return None
    for item in it:
        if not best > item:  # type: ignore[operator]
            best = item
    return best


def min(iterable: Iterable[T]) -> T | None:
    """Smallest item, or ``None`` if empty; the first of equal minima wins."""
    it = iter(iterable)
    try:
        best = next(it)
    except StopIteration:
        return None
    for item in it:
        if item < best:  # type: ignore[operator]
            best = item
    return best


def join(iterable: Iterable[Any], sep: str) -> str:
    """Join the string form of every item, separated by ``sep``."""
    return sep.join(builtins.map(str, iterable))


def sorted(iterable: Iterable[T]) -> Iterator[T]:
    """Iterate the items in ascending order (stable)."""
    return iter(builtins.sorted(iterable))  # type: ignore[type-var]


def sorted_unstable(iterable: Iterable[T]) -> Iterator[T]:
    """Iterate the items in ascending order; equal items may be reordered."""
    return iter(builtins.sorted(iterable))  # type: ignore[type-var]