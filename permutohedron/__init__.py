from typing import Iterable

from permutohedron.permtypes import LexicalPermutation, T
from permutohedron.combinatorics import factorial
from permutohedron.heap import MAX_HEAP, Heap
from permutohedron.lexical import (
    LexicalList, lexical_permutations, next_permutation, prev_permutation
)
from permutohedron.recursive import heap_recursive


def heap_permutations(elements: Iterable[T]) -> Heap[T]:
    try:
        elements = list(elements)
    except TypeError:
        raise TypeError("Elements must be iterable")
    return Heap(elements)
