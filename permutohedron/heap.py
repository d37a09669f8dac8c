import logging
from typing import Iterator, MutableSequence

from permutohedron.permtypes import T

logger = logging.getLogger(__name__)

# largest sequence a Heap will step through
MAX_HEAP = 16


class Heap(Iterator[tuple[T, ...]]):
    """
    Resumable generator of every permutation of a mutable sequence, after
    B. R. Heap, "Permutations by Interchanges" (1963).

    Each call to step() rearranges the wrapped sequence in place by a single
    swap and hands it back; the per-position swap counts in `_c` stand in for
    the recursion stack of the textbook algorithm, so generation can be
    paused and picked up again at any point. The first step() returns the
    sequence exactly as it was found.

    Iterating a Heap yields tuple snapshots of the successive arrangements.
    """

    def __init__(self, data: MutableSequence[T]):
        """
        `data` may be shortened or lengthened between steps, so long as it
        never holds more than MAX_HEAP elements; call reset() after doing so.
        """
        try:
            size = len(data)
        except TypeError:
            raise TypeError("Heap requires a sized, mutable sequence")
        if size > MAX_HEAP:
            raise ValueError(
                f"Heap supports at most {MAX_HEAP} elements, got {size}"
            )
        self._data = data
        # None until the first step()
        self._n: int | None = None
        self._c = [0] * (MAX_HEAP - 1)
        self._exhausted = False
        logger.debug("heap over %d elements", size)

    @property
    def data(self) -> MutableSequence[T]:
        return self._data

    def reset(self) -> None:
        """
        Forget all progress. The sequence keeps its current arrangement,
        which the next step() returns as the first permutation.
        """
        self._n = None
        for i in range(len(self._c)):
            self._c[i] = 0
        self._exhausted = False
        logger.debug("heap reset at %s", self._data)

    def step(self) -> MutableSequence[T] | None:
        """
        Advance to the next permutation and return the (live) sequence,
        or None once every permutation has been produced.
        """
        if self._n is None:
            self._n = 0
            return self._data
        data, c = self._data, self._c
        while self._n + 1 < len(data):
            n = self._n
            if c[n] <= n:
                j = c[n] if n % 2 == 0 else 0
                data[j], data[n + 1] = data[n + 1], data[j]
                c[n] += 1
                self._n = 0
                return data
            c[n] = 0
            self._n += 1
        if not self._exhausted:
            self._exhausted = True
            logger.debug("heap exhausted at %s", data)
        return None

    def __iter__(self) -> "Heap[T]":
        return self

    def __next__(self) -> tuple[T, ...]:
        perm = self.step()
        if perm is None:
            raise StopIteration
        return tuple(perm)
