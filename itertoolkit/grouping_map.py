"""Group key/value pairs by key and fold each group in a single pass."""

from __future__ import annotations

import copy
import operator
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
R = TypeVar("R")

Compare = Callable[[Any, Any, Any], int]


@dataclass(frozen=True)
class NoElements:
    """No element was seen."""


@dataclass(frozen=True)
class OneElement(Generic[V]):
    """Exactly one element was seen; it is both minimum and maximum."""

    value: V


@dataclass(frozen=True)
class MinMax(Generic[V]):
    """The minimum and maximum of two or more elements."""

    min: V
    max: V


MinMaxResult = Union[NoElements, OneElement, MinMax]


def _natural(_key: Any, a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _by_key(key: Callable[[Any, Any], Any]) -> Compare:
    def compare(group_key: Any, a: Any, b: Any) -> int:
        ka, kb = key(group_key, a), key(group_key, b)
        return (ka > kb) - (ka < kb)

    return compare


class GroupingMap(Generic[K, V]):
    """Lazy source of ``(key, value)`` pairs, grouped and folded on demand.

    Every operation consumes the source and returns a ``dict`` mapping each
    key to the result for its group, in order of the keys' first appearance.
    """

    def __init__(self, pairs: Iterable[tuple[K, V]]) -> None:
        self._pairs = iter(pairs)

    def aggregate(self, operation: Callable[[R | None, K, V], R | None]) -> dict[K, R]:
        """Fold each group with ``operation(acc, key, value)``.

        ``acc`` is ``None`` when the group has no accumulator yet. Returning
        ``None`` discards the accumulator; a group whose last step discards it
        has no entry in the result.
        """
        destination: dict[K, R] = {}
        for key, value in self._pairs:
            result = operation(destination.get(key), key, value)
            if result is None:
                destination.pop(key, None)
            else:
                destination[key] = result
        return destination

    def fold_with(
        self,
        init: Callable[[K, V], R],
        operation: Callable[[R, K, V], R],
    ) -> dict[K, R]:
        """Fold each group, starting from ``init(key, first_value)``."""
        destination: dict[K, R] = {}
        for key, value in self._pairs:
            acc = destination[key] if key in destination else init(key, value)
            destination[key] = operation(acc, key, value)
        return destination

    def fold(self, init: R, operation: Callable[[R, K, V], R]) -> dict[K, R]:
        """Fold each group, starting from a copy of ``init``."""
        return self.fold_with(lambda _key, _value: copy.copy(init), operation)

    def fold_first(self, operation: Callable[[V, K, V], V]) -> dict[K, V]:
        """Fold each group, using its first element as the initial accumulator."""
        destination: dict[K, V] = {}
        for key, value in self._pairs:
            if key in destination:
                destination[key] = operation(destination[key], key, value)
            else:
                destination[key] = value
        return destination

    def collect(self, factory: Callable[[Iterable[V]], Any] = list) -> dict[K, Any]:
        """Build a collection per group with ``factory(values)``, values in order."""
        groups: dict[K, list[V]] = {}
        for key, value in self._pairs:
            groups.setdefault(key, []).append(value)
        return {key: factory(values) for key, values in groups.items()}

    def max(self) -> dict[K, V]:
        """Maximum of each group; the last of equal maxima wins."""
        return self.max_by(_natural)

    def max_by(self, compare: Compare) -> dict[K, V]:
        """Maximum of each group under ``compare(key, a, b)``; the last of equals wins."""
        return self.fold_first(
            lambda acc, key, value: acc if compare(key, acc, value) > 0 else value
        )

    def max_by_key(self, key: Callable[[K, V], Any]) -> dict[K, V]:
        """Element of each group with the largest ``key(group_key, value)``."""
        return self.max_by(_by_key(key))

    def min(self) -> dict[K, V]:
        """Minimum of each group; the first of equal minima wins."""
        return self.min_by(_natural)

    def min_by(self, compare: Compare) -> dict[K, V]:
        """Minimum of each group under ``compare(key, a, b)``; the first of equals wins."""
        return self.fold_first(
            lambda acc, key, value: value if compare(key, acc, value) > 0 else acc
        )

    def min_by_key(self, key: Callable[[K, V], Any]) -> dict[K, V]:
        """Element of each group with the smallest ``key(group_key, value)``."""
        return self.min_by(_by_key(key))

    def minmax(self) -> dict[K, MinMaxResult]:
        """Minimum and maximum of each group."""
        return self.minmax_by(_natural)

    def minmax_by(self, compare: Compare) -> dict[K, MinMaxResult]:
        """Minimum and maximum of each group under ``compare(key, a, b)``.

        The first of equal minima and the last of equal maxima win. A group
        is never ``NoElements``.
        """

        def step(acc: MinMaxResult | None, key: K, value: V) -> MinMaxResult:
            if acc is None:
                return OneElement(value)
            if isinstance(acc, OneElement):
                if compare(key, value, acc.value) < 0:
                    return MinMax(value, acc.value)
                return MinMax(acc.value, value)
            if isinstance(acc, MinMax):
                if compare(key, value, acc.min) < 0:
                    return MinMax(value, acc.max)
                if compare(key, value, acc.max) >= 0:
                    return MinMax(acc.min, value)
                return acc
            raise AssertionError("unexpected accumulator")

        return self.aggregate(step)

    def minmax_by_key(self, key: Callable[[K, V], Any]) -> dict[K, MinMaxResult]:
        """Minimum and maximum of each group by ``key(group_key, value)``."""
        return self.minmax_by(_by_key(key))

    def sum(self) -> dict[K, V]:
        """Sum of each group's elements, added in order."""
        return self.fold_first(lambda acc, _key, value: operator.add(acc, value))

    def product(self) -> dict[K, V]:
        """Product of each group's elements, multiplied in order."""
        return self.fold_first(lambda acc, _key, value: operator.mul(acc, value))


def into_grouping_map(pairs: Iterable[tuple[K, V]]) -> GroupingMap[K, V]:
    """Wrap an iterable of ``(key, value)`` pairs for grouped folding."""
    return GroupingMap(pairs)


def into_grouping_map_by(iterable: Iterable[V], key: Callable[[V], K]) -> GroupingMap[K, V]:
    """Group the elements of ``iterable`` under ``key(element)``."""
    return GroupingMap((key(value), value) for value in iterable)