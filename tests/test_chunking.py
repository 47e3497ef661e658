import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from itertoolkit.chunking import chunk_by, chunks


def test_all_equal_within_each_group():
    seen = []
    for key, sub in chunk_by("AABBCCC", lambda x: x):
        items = list(sub)
        assert len(set(items)) == 1
        seen.append((key, "".join(items)))
    assert seen == [("A", "AA"), ("B", "BB"), ("C", "CCC")]


def test_groups_match_key_with_early_break():
    keys = []
    for ch1, sub in chunk_by("AAABBBCCCCDDDD", lambda x: x):
        keys.append(ch1)
        for ch2 in sub:
            assert ch1 == ch2
            if ch1 == "C":
                break
    assert keys == ["A", "B", "C", "D"]


@pytest.mark.parametrize("order", list(itertools.permutations(range(4))))
def test_all_orderings(order):
    subs = list(chunk_by("AaaBbbccCcDDDD", str.upper))
    expected = {0: ("A", "Aaa"), 1: ("B", "Bbb"), 2: ("C", "ccCc"), 3: ("D", "DDDD")}
    for idx in order:
        key, text = expected[idx]
        assert subs[idx][0] == key
        assert "".join(subs[idx][1]) == text


def test_groups_consumed_in_lockstep():
    subs = [g for _, g in chunk_by("AAABBBCCCCDDDD", lambda x: x)]
    sa, sb, sc, sd = subs
    assert list(zip(sa, sb, sc, sd)) == [("A", "B", "C", "D")] * 3


def test_key_called_once_per_element_when_consumed():
    text = "AABCCC"
    calls = []

    def key(x):
        calls.append(x)
        return x

    consumed = []
    for _, sub in chunk_by(text, key):
        consumed.extend(sub)
    assert "".join(consumed) == text
    assert len(calls) == len(text)


def test_key_called_once_per_element_when_not_consumed():
    text = "AABCCC"
    calls = []

    def key(x):
        calls.append(x)
        return x

    keys = [k for k, _ in chunk_by(text, key)]
    assert keys == ["A", "B", "C"]
    assert len(calls) == len(text)


def test_flat_map_restores_input():
    text = "ABCCCDEEFGHIJJKK"
    grouped = chunk_by(text, lambda x: x)
    assert "".join(itertools.chain.from_iterable(g for _, g in grouped)) == text


def test_lazy_two_elements_collected():
    data = [0, 1]
    gs = list(chunk_by(data, lambda k: k))
    assert [x for _, g in gs for x in g] == data


def test_lazy_reversed_groups():
    data = [0, 1, 1, 0, 0]
    gs = list(chunk_by(data, lambda k: k))
    gs[1:] = reversed(gs[1:])
    assert [x for _, g in gs for x in g] == [0, 0, 0, 1, 1]


def test_lazy_keep_only_selected_group():
    data = [0, 1, 1, 0, 0]
    kept = []
    for k, chunk in chunk_by(data, lambda k: k):
        if k == 1:
            kept.append(chunk)
    assert list(kept[0]) == [1, 1]


def test_lazy_mixed_keep_and_consume():
    data = [0, 0, 0, 1, 1, 0, 0, 2, 2, 3, 3]
    kept = []
    for i, (_, chunk) in enumerate(chunk_by(data, lambda k: k)):
        if i < 2:
            kept.append(chunk)
        elif i < 4:
            for _ in chunk:
                pass
        else:
            kept.append(chunk)
    assert list(kept[0]) == [0, 0, 0]
    assert list(kept[1]) == [1, 1]
    assert list(kept[2]) == [3, 3]


def test_lazy_counter_key():
    data = [0, 0, 0, 1, 1, 0, 0, 2, 2, 3, 3]
    counter = itertools.count()
    grouper = chunk_by(data, lambda _: next(counter) // 3)
    expected = {0: [0, 0, 0], 1: [1, 1, 0], 2: [0, 2, 2], 3: [3, 3]}
    result = {k: list(g) for k, g in grouper}
    assert result == expected


def test_consume_each_group_on_the_next_lap():
    data = [0, 0, 0, 1, 1, 0, 0, 1, 1, 2, 2]
    last = None
    checked = 0
    for key, chunk in chunk_by(data, lambda e: e):
        if last is not None:
            for elt in last:
                assert elt != key and abs(elt - key) == 1
                checked += 1
        last = chunk
    assert checked == 9
    assert list(last) == [2, 2]


def test_chunks_of_three():
    data = [0, 0, 0, 1, 1, 0, 0, 2, 2, 3, 3]
    result = [list(c) for c in chunks(data, 3)]
    assert result == [[0, 0, 0], [1, 1, 0], [0, 2, 2], [3, 3]]


def test_chunks_out_of_order():
    all_chunks = list(chunks(range(7), 2))
    assert [list(c) for c in reversed(all_chunks)] == [[6], [4, 5], [2, 3], [0, 1]]


def test_chunks_rejects_zero_size():
    with pytest.raises(ValueError):
        chunks([1, 2, 3], 0)


def test_empty_input():
    assert list(chunk_by([], lambda x: x)) == []
    assert list(chunks([], 3)) == []


def test_none_elements_and_keys():
    result = [(k, list(g)) for k, g in chunk_by([None, None, 1], lambda x: x)]
    assert result == [(None, [None, None]), (1, [1])]


def test_closed_group_yields_nothing_and_others_survive():
    groups = [g for _, g in chunk_by([1, 1, 2, 2, 3], lambda x: x)]
    groups[0].close()
    with pytest.raises(StopIteration):
        next(groups[0])
    assert list(groups[1]) == [2, 2]
    assert list(groups[2]) == [3]


def test_closed_chunk_yields_nothing_and_others_survive():
    all_chunks = list(chunks(range(5), 2))
    all_chunks[0].close()
    assert list(all_chunks[0]) == []
    assert list(all_chunks[1]) == [2, 3]
    assert list(all_chunks[2]) == [4]


def test_iteration_after_exhaustion_stays_empty():
    grouper = chunk_by([1, 2], lambda x: x)
    first = [k for k, _ in grouper]
    assert first == [1, 2]
    assert list(grouper) == []


@given(st.lists(st.integers(min_value=0, max_value=3)))
def test_property_groups_match_groupby(data):
    expected = [(k, list(g)) for k, g in itertools.groupby(data)]
    assert [(k, list(g)) for k, g in chunk_by(data, lambda x: x)] == expected


@given(st.lists(st.integers(min_value=0, max_value=3)))
def test_property_reverse_consumption(data):
    expected = [list(g) for _, g in itertools.groupby(data)]
    collected = [g for _, g in chunk_by(data, lambda x: x)]
    assert [list(g) for g in reversed(collected)] == list(reversed(expected))


@given(st.lists(st.integers()), st.integers(min_value=1, max_value=5))
def test_property_chunks_flatten_and_sizes(data, size):
    result = [list(c) for c in chunks(data, size)]
    assert [x for c in result for x in c] == data
    assert all(len(c) == size for c in result[:-1])
    if result:
        assert 1 <= len(result[-1]) <= size