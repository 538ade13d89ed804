"""
fold steps, to be passed to fold() / fold_right() or Enumerable.fold().

each public function here is a factory: call it to get the step. the steps
for first/last are direction duals of each other, so which element a fold
returns depends on the fold direction:

    fold(data, first_or_default_to(), None)        -> first element
    fold_right(data, first_or_default_to(), None)  -> last element
    fold(data, last_or_default_to(), None)         -> last element
    fold_right(data, last_or_default_to(), None)   -> first element
"""
from __future__ import annotations
import logging
from ..types import *
from ..strategies import CompareStrategy, as_sequence

logger = logging.getLogger(__name__)

FORWARD = FoldDirection.FORWARD


class DefaultIfEmptyStep(FoldStep[T, Sequence[T]]):
    """
    returns the sequence itself. the default stands in for an empty sequence,
    so it is used as the seed when the fold is given none, and any seed has
    to be a sequence. with no default at all the seed is an empty list, so
    the step always runs and an empty sequence stays empty.
    """

    def __init__(self, default: Optional[Sequence[T]] = None):
        self.default = None if default is None else as_sequence(default, 'default')

    def resolve_seed(self, seed: Any) -> Any:
        if seed is MISSING:
            return [] if self.default is None else self.default
        return as_sequence(seed, 'default')

    def __call__(self, accumulator, element, index, sequence, direction=FORWARD):
        return sequence


class FirstOrDefaultStep(FoldStep[T, T]):
    def __call__(self, accumulator, element, index, sequence, direction=FORWARD):
        return element if index == direction.first_index(len(sequence)) else accumulator


class LastOrDefaultStep(FoldStep[T, T]):
    def __call__(self, accumulator, element, index, sequence, direction=FORWARD):
        return element if index == direction.last_index(len(sequence)) else accumulator


class SingleOrDefaultStep(FirstOrDefaultStep[T]):
    def __call__(self, accumulator, element, index, sequence, direction=FORWARD):
        if len(sequence) > 1:
            raise CardinalityError("sequence must have length 0 or 1")
        return super().__call__(accumulator, element, index, sequence, direction)


class FindAllIndexesStep(FoldStep[T, Any]):
    """
    collects the indexes of every element equal to the needle.

    the accumulator starts as a Seed and becomes Collected on the first step,
    exactly once. when the seed was taken from the sequence itself (a fold
    with no caller seed) it is a real element, so it is tested against the
    needle during that transition.
    """

    def __init__(self, needle: T, strategy: CompareStrategy[T]):
        self._needle = needle
        self._strategy = strategy

    def initial(self, seed: Any, seed_index: Optional[int]) -> Union[Seed, Collected]:
        if isinstance(seed, (list, tuple)):
            # copy, the caller's seed is not ours to append to
            return Collected(list(seed), len(seed))
        return Seed(seed, seed_index)

    def finish(self, accumulator: Any) -> Any:
        match accumulator:
            case Collected(indexes):
                return indexes
            case Seed(value, None):
                return value
            case Seed():
                return self._upgrade(accumulator).indexes
        return accumulator

    def _upgrade(self, seed: Seed) -> Collected:
        collected = Collected()
        if seed.index is not None and self._strategy.equal(seed.value, self._needle):
            collected.indexes.append(seed.index)
        logger.debug(f"find_all_indexes seed at {seed.index} upgraded to {collected.indexes}")
        return collected

    def __call__(self, accumulator, element, index, sequence, direction=FORWARD):
        match accumulator:
            case Collected():
                collected = accumulator
            case Seed():
                collected = self._upgrade(accumulator)
            case _:
                # driven by something other than fold(), lift the raw accumulator first
                return self(self.initial(accumulator, None), element, index, sequence, direction)

        if self._strategy.equal(element, self._needle):
            if direction is FoldDirection.REVERSE:
                collected.indexes.insert(collected.offset, index)
            else:
                collected.indexes.append(index)
        return collected


@step_factory(arity=4, kind='accumulator')
def default_if_empty(default: Optional[Sequence[T]] = None) -> DefaultIfEmptyStep[T]:
    """
    a fold never calls its step for an empty sequence, so the default is the
    seed, and it has to be a sequence to stand in for the empty one. a default
    given here is used whenever the fold has no seed of its own.
    ex: fold([], default_if_empty([5])) -> [5]
        fold([], default_if_empty(), [5]) -> [5]
    """
    return DefaultIfEmptyStep(default)


@step_factory(arity=4, kind='accumulator')
def find_all_indexes(needle: T, cmp: Optional[Comparator[T]] = None) -> FindAllIndexesStep[T]:
    """
    like list.index except it returns every matching index.
    ex: fold([2, 1, 1, 3, 2], find_all_indexes(2), []) -> [0, 4]
    """
    return FindAllIndexesStep(needle, CompareStrategy.of(cmp))


@step_factory(arity=4, kind='accumulator')
def first_or_default_to() -> FirstOrDefaultStep:
    """the first element visited by the fold, or the seed if there is none"""
    return FirstOrDefaultStep()


@step_factory(arity=4, kind='accumulator')
def last_or_default_to() -> LastOrDefaultStep:
    """the last element visited by the fold, or the seed if there is none"""
    return LastOrDefaultStep()


@step_factory(arity=4, kind='accumulator')
def single_or_default_to() -> SingleOrDefaultStep:
    """
    the only element, or the seed for an empty sequence. raises
    CardinalityError for longer sequences, whatever the fold direction.
    """
    return SingleOrDefaultStep()
