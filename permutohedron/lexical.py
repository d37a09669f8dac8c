from typing import Iterator, MutableSequence

from permutohedron.permtypes import OrderedT


def _reverse_tail(seq: MutableSequence, start: int) -> None:
    # in place, so slices of arbitrary sequence types are never rebuilt
    lo, hi = start, len(seq) - 1
    while lo < hi:
        seq[lo], seq[hi] = seq[hi], seq[lo]
        lo += 1
        hi -= 1


def next_permutation(seq: MutableSequence[OrderedT]) -> bool:
    """
    Rearrange `seq` in place into the next lexicographically greater
    permutation. Returns False, leaving `seq` as it was, if `seq` is
    already in its greatest (non-increasing) arrangement.
    """
    if len(seq) < 2:
        return False
    # pivot boundary: largest i such that seq[i - 1] < seq[i]
    i = len(seq) - 1
    while i > 0 and not seq[i - 1] < seq[i]:
        i -= 1
    if i == 0:
        return False
    # seq[i:] is non-increasing and seq[i] > seq[i - 1], so j stops at >= i
    j = len(seq) - 1
    while j >= i and not seq[i - 1] < seq[j]:
        j -= 1
    seq[j], seq[i - 1] = seq[i - 1], seq[j]
    _reverse_tail(seq, i)
    return True


def prev_permutation(seq: MutableSequence[OrderedT]) -> bool:
    """
    Rearrange `seq` in place into the previous lexicographically smaller
    permutation. Returns False, leaving `seq` as it was, if `seq` is
    already in its least (non-decreasing) arrangement.
    """
    if len(seq) < 2:
        return False
    # pivot boundary: largest i such that seq[i - 1] > seq[i]
    i = len(seq) - 1
    while i > 0 and not seq[i] < seq[i - 1]:
        i -= 1
    if i == 0:
        return False
    _reverse_tail(seq, i)
    # tail is now non-increasing; seek the last element still below the pivot
    j = len(seq) - 1
    while j >= i and seq[j - 1] < seq[i - 1]:
        j -= 1
    seq[i - 1], seq[j] = seq[j], seq[i - 1]
    return True


def lexical_permutations(
    seq: MutableSequence[OrderedT]
) -> Iterator[tuple[OrderedT, ...]]:
    """
    Yield the current arrangement of `seq` and every lexicographically
    greater one after it, as tuples. `seq` itself is stepped in place and
    ends up in its greatest arrangement.
    """
    yield tuple(seq)
    while next_permutation(seq):
        yield tuple(seq)


class LexicalList(list):
    """list that steps itself through lexicographic order"""

    def next_permutation(self) -> bool:
        return next_permutation(self)

    def prev_permutation(self) -> bool:
        return prev_permutation(self)
