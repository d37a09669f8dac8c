from typing import MutableSequence

from permutohedron.permtypes import HeapCallback, R, T


def heap_recursive(
    data: MutableSequence[T], f: HeapCallback[MutableSequence[T], R]
) -> R | None:
    """
    Call `f` on every permutation of `data`, produced in place by Heap's
    algorithm in the same order Heap.step() produces them.

    `f` always receives `data` itself. As soon as it returns something other
    than None, enumeration stops and that value is returned; otherwise the
    result is None. Exceptions raised by `f` propagate untouched. Unlike
    Heap, there is no limit on the length of `data`.
    """
    n = len(data)
    if n < 2:
        return f(data)
    if n == 2:
        if (x := f(data)) is not None:
            return x
        data[0], data[1] = data[1], data[0]
        return f(data)
    return _heap_unrolled(n, data, f)


def _swap(data: MutableSequence, i: int, j: int) -> None:
    data[i], data[j] = data[j], data[i]


def _heap_unrolled(
    n: int, data: MutableSequence[T], f: HeapCallback[MutableSequence[T], R]
) -> R | None:
    # permutes data[:n] only, leaving data[n:] fixed
    if n == 3:
        if (x := f(data)) is not None:
            return x
        _swap(data, 0, 1)
        if (x := f(data)) is not None:
            return x
        _swap(data, 0, 2)
        if (x := f(data)) is not None:
            return x
        _swap(data, 0, 1)
        if (x := f(data)) is not None:
            return x
        _swap(data, 0, 2)
        if (x := f(data)) is not None:
            return x
        _swap(data, 0, 1)
        return f(data)
    for i in range(n - 1):
        if (x := _heap_unrolled(n - 1, data, f)) is not None:
            return x
        _swap(data, i if n % 2 == 0 else 0, n - 1)
    return _heap_unrolled(n - 1, data, f)
