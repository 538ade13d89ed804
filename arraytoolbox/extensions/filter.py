from __future__ import annotations
from ..types import *
from ..strategies import CompareStrategy


class UniqueFilter(FilterPredicate[T]):
    """keeps an element only if nothing after it compares equal (last one wins)"""

    def __init__(self, strategy: CompareStrategy[T]):
        self._strategy = strategy

    def __call__(self, element: T, index: int, sequence: Sequence[T]) -> bool:
        # walk by index rather than slicing, the sequence may be large
        for later in range(index + 1, len(sequence)):
            if self._strategy.equal(element, sequence[later]):
                return False
        return True


@step_factory(arity=3, kind='filter')
def unique(cmp: Optional[Comparator[T]] = None) -> UniqueFilter[T]:
    """
    generates a filter keeping the unique elements of a sequence. when two
    elements compare equal, the rightmost one is kept.
    ex: keep([2, 1, 1, 3, 2], unique()) -> [1, 3, 2]
    """
    return UniqueFilter(CompareStrategy.of(cmp))
