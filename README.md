# itertoolkit

Lazy iterator adaptors and helpers that accept any iterable. Pure Python,
no dependencies.

## Installation

```
pip install itertoolkit
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "itertoolkit[test]"
pytest
```

## Modules

### `itertoolkit.intersperse`

`IntersperseWith(iterable, element)` is an iterator that yields the items of
`iterable` with `element()` called and yielded between each neighbouring pair.
It is fused: once the source is exhausted it stays exhausted.
`IntersperseWith.fold(init, function)` consumes the rest of it, folding each
output into the accumulator.

### `itertoolkit.k_smallest`

- `k_smallest_general(iterable, k, comparator)` keeps the `k` smallest
  elements with a bounded heap and returns them as a list in ascending order.
  `comparator(a, b)` returns a negative number when `a < b`, zero when equal
  and a positive number otherwise. A negative `k` raises `ValueError`;
  `k == 0` returns `[]` without reading the iterable.
- `key_to_cmp(key)` turns a key function into such a comparator.

### `itertoolkit.kmerge`

- `kmerge(iterables)` merges any number of iterables in ascending order.
- `kmerge_by(iterables, less_than)` merges them using the predicate
  `less_than(a, b)` to order their heads.

Both return a `KMergeBy` iterator; if every input is sorted, the output is
sorted. `operator.length_hint` on it reports the remaining item count as far
as the inputs can tell.

### `itertoolkit.lazy_buffer`

`LazyBuffer(iterable)` holds the items read so far and reads more only when
asked: `get_next()` buffers one more item and returns `False` once the source
is exhausted, `prefill(length)` reads until `length` items are held or the
source runs out, and `count()` returns the total item count, consuming the
rest of the source. `len()` and indexing work on the buffered items.

### `itertoolkit.group_map`

- `into_group_map(pairs)` maps each key to the list of its values, in
  iteration order.
- `into_group_map_by(iterable, key)` groups elements under `key(element)`.

### `itertoolkit.chunking`

- `chunk_by(iterable, key)` returns a `ChunkBy`; iterating it yields
  `(key, Group)` pairs, one per run of consecutive elements whose keys
  compare equal. The key function is called once per element.
- `chunks(iterable, size)` returns an `IntoChunks`; iterating it yields
  `Chunk` iterators of `size` elements each (the last may be shorter). A
  `size` below 1 raises `ValueError`.

All groups share one pass over the source. Groups may be consumed in any
order: elements are buffered only when a later group is requested before an
earlier one is finished. Calling `close()` on a `Group` or `Chunk` (or
letting it be garbage-collected) gives it up, so its remaining elements are
no longer kept.

### `itertoolkit.grouping_map`

`into_grouping_map(pairs)` and `into_grouping_map_by(iterable, key)` return a
`GroupingMap`, which groups and folds in one pass. Each operation consumes
the source and returns a `dict` in order of the keys' first appearance:

- `aggregate(operation)`: `operation(acc, key, value)`, where `acc` is `None`
  for a fresh group; returning `None` discards the accumulator, and a group
  whose last step discards it has no entry.
- `fold(init, operation)` (starts from a shallow copy of `init`),
  `fold_with(init, operation)` (starts from `init(key, first_value)`) and
  `fold_first(operation)` (starts from the group's first element).
- `collect(factory=list)`: builds each group's collection with
  `factory(values)`.
- `max`, `min`, `minmax` and their `_by(compare)` and `_by_key(key)` forms.
  `compare(key, a, b)` returns a negative, zero or positive number;
  `key(group_key, value)` gives the value to compare. `minmax` results are
  `OneElement(value)` or `MinMax(min, max)`; `NoElements` also exists but is
  never produced for a group.
- `sum()` and `product()`: `+` and `*` applied in order.

### `itertoolkit.free`

Functions that accept any iterable: `intersperse`, `intersperse_with`,
`enumerate`, `rev` (needs a reversible argument), `zip`, `chain`, `cloned`
(shallow copies), `fold`, `all` and `any` (with a predicate), `max` and `min`
(returning `None` when empty), `join` (string forms joined by a separator),
`sorted` and `sorted_unstable` (both return an iterator over a stable sort).

Maximum functions pick the last of several equal elements and minimum
functions the first.

## Examples

```python
from itertoolkit.chunking import chunk_by, chunks
from itertoolkit.free import intersperse, join
from itertoolkit.grouping_map import into_grouping_map_by
from itertoolkit.kmerge import kmerge

list(intersperse(range(3), 8))            # [0, 8, 1, 8, 2]
join([1, 2, 3], ", ")                     # "1, 2, 3"
list(kmerge([[0, 2, 4], [1, 3, 5]]))      # [0, 1, 2, 3, 4, 5]

for key, group in chunk_by("AABBCCC", lambda c: c):
    print(key, list(group))

for chunk in chunks([0, 0, 0, 1, 1, 0, 0], 3):
    print(list(chunk))                    # [0, 0, 0], [1, 1, 0], [0]

into_grouping_map_by(range(1, 8), lambda n: n % 3).fold(0, lambda acc, _key, val: acc + val)
# {1: 12, 2: 7, 0: 9}
```

## What it does not do

This is a library only: it has no command-line tool. It offers the adaptors
listed above, not a complete set of iterator tools such as combinations,
permutations, products, peeking or deduplication adaptors.