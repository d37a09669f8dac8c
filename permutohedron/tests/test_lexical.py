import itertools

import pytest

from permutohedron import (
    LexicalList, LexicalPermutation,
    factorial, lexical_permutations, next_permutation, prev_permutation,
)


def test_lexical_1():
    data = [1, 2, 3]
    assert next_permutation(data)
    assert data == [1, 3, 2]
    assert next_permutation(data)
    assert data == [2, 1, 3]
    assert prev_permutation(data)
    assert data == [1, 3, 2]
    assert prev_permutation(data)
    assert data == [1, 2, 3]
    assert not prev_permutation(data)
    assert data == [1, 2, 3]
    c = 0
    while next_permutation(data):
        c += 1
    assert c == 5
    assert data == [3, 2, 1]


@pytest.mark.parametrize("func", (next_permutation, prev_permutation))
@pytest.mark.parametrize("data", ([], [7], [2, 2], [1, 1, 1]))
def test_lexical_no_neighbor(func, data):
    before = list(data)
    assert not func(data)
    assert data == before


def test_lexical_extremes():
    data = [4, 3, 2, 1]
    assert not next_permutation(data)
    assert data == [4, 3, 2, 1]
    assert prev_permutation(data)
    assert data == [4, 3, 1, 2]


@pytest.mark.parametrize("n", range(7))
def test_lexical_count(n):
    data = list(range(n))
    res = tuple(lexical_permutations(data))
    assert len(res) == factorial(n)
    assert len(set(res)) == factorial(n)
    # lexical order is exactly itertools' order for sorted distinct input
    assert list(res) == list(itertools.permutations(range(n)))
    assert data == sorted(data, reverse=True)


@pytest.mark.parametrize("n", range(6))
@pytest.mark.parametrize(
    "key", (lambda i: i, lambda i: i % 2, lambda i: i % 3),
    ids=("distinct", "mod2", "mod3")
)
def test_lexical_from_any_start(n, key):
    states = sorted(set(itertools.permutations(key(i) for i in range(n))))
    for rank, start in enumerate(states):
        data = list(start)
        steps = 0
        while next_permutation(data):
            steps += 1
            assert tuple(data) == states[rank + steps]
        assert steps == len(states) - rank - 1
        assert tuple(data) == states[-1]
        data = list(start)
        steps = 0
        while prev_permutation(data):
            steps += 1
            assert tuple(data) == states[rank - steps]
        assert steps == rank
        assert tuple(data) == states[0]


def test_lexical_multiset():
    data = ["b", "a", "b", "a"]
    data.sort()
    res = tuple(lexical_permutations(data))
    assert res == (
        ("a", "a", "b", "b"), ("a", "b", "a", "b"), ("a", "b", "b", "a"),
        ("b", "a", "a", "b"), ("b", "a", "b", "a"), ("b", "b", "a", "a")
    )
    # and walking back down visits the same states in reverse
    back = [tuple(data)]
    while prev_permutation(data):
        back.append(tuple(data))
    assert tuple(reversed(back)) == res


def test_lexical_roundtrip():
    for perm in itertools.permutations((1, 2, 2, 3, 5)):
        data = list(perm)
        if next_permutation(data):
            assert prev_permutation(data)
            assert data == list(perm)
        data = list(perm)
        if prev_permutation(data):
            assert next_permutation(data)
            assert data == list(perm)


def test_lexical_in_place():
    data = bytearray(b"abc")
    ident = id(data)
    assert next_permutation(data)
    assert data == bytearray(b"acb")
    assert id(data) == ident
    assert prev_permutation(data)
    assert data == bytearray(b"abc")


def test_lexical_list():
    data = LexicalList([1, 2, 3])
    assert isinstance(data, LexicalPermutation)
    assert not isinstance([1, 2, 3], LexicalPermutation)
    assert data.next_permutation()
    assert data == [1, 3, 2]
    assert data.prev_permutation()
    assert not data.prev_permutation()
    assert data == [1, 2, 3]
