"""
the filter and fold drivers.

both hand every callback (element, index, sequence). fold() also decides
what the step sees first: with a seed, every position is visited; without
one, the first visited element becomes the accumulator and the fold starts
at the next position.
"""
from __future__ import annotations
import logging
from .types import *
from .strategies import as_sequence

logger = logging.getLogger(__name__)


def _check_callback(callback: Any, kind: str) -> None:
    if getattr(callback, 'is_step_factory', False):
        raise FactoryMisuseError(f"this function must be called to generate the {kind}.")
    if not callable(callback):
        raise InvalidArgumentError(f"the {kind} must be a function, got {type(callback).__name__}.")


def keep(sequence: Sequence[T], predicate: FilterCallback[T]) -> List[T]:
    """keep the elements for which predicate(element, index, sequence) is truthy"""
    items = as_sequence(sequence, 'sequence')
    _check_callback(predicate, 'filter')
    return [element for index, element in enumerate(items) if predicate(element, index, items)]


def fold(sequence: Sequence[T], step: FoldCallback[U, T], seed: Any = MISSING,
         direction: Union[FoldDirection, str] = FoldDirection.FORWARD) -> Any:
    """
    reduce a sequence with step(accumulator, element, index, sequence).

    an empty sequence returns the seed verbatim without calling the step, or
    raises EmptySequenceError when there is no seed. configured FoldStep
    instances also receive the direction; their resolve_seed() hook may
    supply or reject the seed, and initial()/finish() are applied around
    the loop.
    """
    items = as_sequence(sequence, 'sequence')
    _check_callback(step, 'accumulator')
    direction = FoldDirection(direction)
    configured = isinstance(step, FoldStep)
    if configured:
        seed = step.resolve_seed(seed)
    positions = direction.indexes(len(items))
    logger.debug(f"fold {direction.value} over {len(items)} elements, seeded={seed is not MISSING}")

    if seed is MISSING:
        if not items:
            raise EmptySequenceError("cannot fold an empty sequence without a seed")
        seed_index = positions[0]
        accumulator = items[seed_index]
        positions = positions[1:]
    else:
        if not items:
            return seed
        seed_index = None
        accumulator = seed

    if configured:
        accumulator = step.initial(accumulator, seed_index)
        for index in positions:
            accumulator = step(accumulator, items[index], index, items, direction)
        return step.finish(accumulator)

    for index in positions:
        accumulator = step(accumulator, items[index], index, items)
    return accumulator


def fold_right(sequence: Sequence[T], step: FoldCallback[U, T], seed: Any = MISSING) -> Any:
    """fold from the last element to the first"""
    return fold(sequence, step, seed, FoldDirection.REVERSE)
