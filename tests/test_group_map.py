from hypothesis import given
from hypothesis import strategies as st

from itertoolkit.group_map import into_group_map, into_group_map_by


def test_into_group_map_keeps_order():
    pairs = [("a", 1), ("b", 2), ("a", 3)]
    assert into_group_map(pairs) == {"a": [1, 3], "b": [2]}


def test_into_group_map_empty():
    assert into_group_map([]) == {}


def test_into_group_map_by_example():
    words = ["apple", "avocado", "banana"]
    assert into_group_map_by(words, lambda w: w[0]) == {
        "a": ["apple", "avocado"],
        "b": ["banana"],
    }


@given(st.lists(st.tuples(st.integers(0, 5), st.integers())))
def test_into_group_map_invariants(pairs):
    lookup = into_group_map(pairs)
    assert set(lookup) == {k for k, _ in pairs}
    assert sum(len(v) for v in lookup.values()) == len(pairs)
    for key, values in lookup.items():
        assert values == [v for k, v in pairs if k == key]


@given(st.lists(st.integers()))
def test_into_group_map_by_agrees_with_pairs(items):
    def key(x):
        return x % 3

    assert into_group_map_by(items, key) == into_group_map((key(x), x) for x in items)