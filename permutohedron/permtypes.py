from typing import (
    Callable, Protocol, TypeVar, TypeAlias, runtime_checkable
)

T = TypeVar('T')
R = TypeVar('R')


class SupportsOrder(Protocol):
    def __lt__(self: T, other: T) -> bool:
        pass

    def __eq__(self: T, other: T) -> bool:
        pass


@runtime_checkable
class LexicalPermutation(Protocol):
    """
    Something that can rearrange itself into its lexicographic neighbors.
    Both methods return False, leaving the arrangement alone, when there is
    no such neighbor.
    """

    def next_permutation(self) -> bool:
        pass

    def prev_permutation(self) -> bool:
        pass


OrderedT = TypeVar('OrderedT', bound=SupportsOrder)

HeapCallback: TypeAlias = Callable[[T], R | None]
