from __future__ import annotations
import logging
from ..types import *
from ..strategies import CompareStrategy, SerializeStrategy, as_sequence

logger = logging.getLogger(__name__)


def intersection(left: Sequence[T], right: Sequence[T],
                 cmp: Optional[Comparator[T]] = None) -> List[T]:
    """
    finds the elements two sequences have in common, keeping multiplicity.
    ex: intersection([1, 2, 1, 3], [1, 1, 1]) -> [1, 1]

    each side is first reduced to the elements that have a counterpart on the
    other side, then the shorter of those two candidate lists is scanned
    against the longer one, each match using up one counterpart, so every
    group of equal elements appears min(left count, right count) times.
    worst case is quadratic; no hashing is attempted because the comparator
    is arbitrary.
    """
    left_items = as_sequence(left, 'leftArray')
    right_items = as_sequence(right, 'rightArray')
    strategy = CompareStrategy.of(cmp)

    def in_other(item: T, others: Sequence[T]) -> bool:
        return any(strategy.equal(item, other) for other in others)

    left_matched = [item for item in left_items if in_other(item, right_items)]
    right_matched = [item for item in right_items if in_other(item, left_items)]

    # ties scan the right side
    if len(left_matched) < len(right_matched):
        shorter, longer = left_matched, right_matched
    else:
        shorter, longer = right_matched, left_matched

    used = [False] * len(longer)
    result = []
    for item in shorter:
        for position, other in enumerate(longer):
            if not used[position] and strategy.equal(item, other):
                used[position] = True
                result.append(item)
                break

    logger.debug(f"intersection of {len(left_items)} and {len(right_items)} elements kept {len(result)}")
    return result


class _Tally(Generic[T]):
    """running count for one serialized key"""

    def __init__(self, index: int, value: T):
        self.count = 0
        self.index = index
        # the original value, so results are not returned as their serialized form
        self.value = value


def modal_values(array: Sequence[T], serialize: Optional[Serializer[T]] = None) -> List[T]:
    """
    finds the element(s) occurring most often, ordered by first occurrence.
    ex: modal_values([2, 1, 1, 3, 2]) -> [2, 1]

    stops scanning as soon as one value holds a strict majority
    (len // 2 + 1, so an even two-way split never stops early).
    """
    items = as_sequence(array, 'array')
    strategy = SerializeStrategy.of(serialize)

    majority = len(items) // 2 + 1
    tallies: Dict[str, _Tally[T]] = {}
    count_max = 0

    # a plain loop, since the majority check needs to break out early
    for index, value in enumerate(items):
        key = strategy.key(value)
        if key not in tallies:
            tallies[key] = _Tally(index, value)
        tally = tallies[key]
        tally.count += 1

        if tally.count >= majority:
            logger.debug(f"modal_values short-circuited at index {index} of {len(items)}")
            return [tally.value]
        count_max = max(count_max, tally.count)

    modal = [tally for tally in tallies.values() if tally.count == count_max]
    return [tally.value for tally in sorted(modal, key=lambda tally: tally.index)]
