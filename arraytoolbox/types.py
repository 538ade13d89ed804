from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from functools import wraps
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Sequence
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Ordering = Union[int, float]
Comparator = Callable[[T, T], Ordering]
Serializer = Callable[[T], str]
FilterCallback = Callable[[T, int, Sequence[T]], bool]
FoldCallback = Callable[[U, T, int, Sequence[T]], U]


# --- errors ---

class ToolboxError(Exception):
    """base class for every error raised by arraytoolbox"""


class InvalidArgumentError(ToolboxError, TypeError):
    """a sequence or a callable was expected and something else was given"""


class CallbackContractError(ToolboxError, TypeError):
    """a caller-supplied comparator or serializer returned the wrong kind of value"""


class FactoryMisuseError(ToolboxError, TypeError):
    """a step factory was used as the step itself instead of being called first"""


class CardinalityError(ToolboxError, ValueError):
    """a sequence had more elements than the operation allows"""


class EmptySequenceError(ToolboxError, ValueError):
    """an empty sequence was folded without a seed"""


# --- omitted seed ---

class _Missing:
    """marks an omitted seed, since None is a legitimate seed"""

    def __repr__(self) -> str:
        return 'MISSING'


MISSING: Any = _Missing()


# --- fold direction ---

class FoldDirection(Enum):
    """which end of the sequence a fold starts from"""
    FORWARD = 'forward'
    REVERSE = 'reverse'

    def indexes(self, length: int) -> range:
        """positions in the order the fold visits them"""
        if self is FoldDirection.FORWARD:
            return range(length)
        return range(length - 1, -1, -1)

    def first_index(self, length: int) -> int:
        return 0 if self is FoldDirection.FORWARD else length - 1

    def last_index(self, length: int) -> int:
        return length - 1 if self is FoldDirection.FORWARD else 0


# --- tagged accumulator ---

@dataclass(frozen=True)
class Seed(Generic[T]):
    """
    an accumulator that has not started collecting yet.
    index is the position the seed was taken from when the fold had no
    caller seed, or None for a caller-supplied default.
    """
    value: T
    index: Optional[int] = None


@dataclass
class Collected:
    """
    an accumulator that is collecting indexes. the first `offset` entries came
    from the caller's seed list; found indexes follow them in ascending order.
    """
    indexes: List[int] = field(default_factory=list)
    offset: int = 0


# --- configured steps ---

class FilterPredicate(ABC, Generic[T]):
    """a configured per-element predicate, called as (element, index, sequence)"""

    @abstractmethod
    def __call__(self, element: T, index: int, sequence: Sequence[T]) -> bool:
        """true to keep the element"""
        pass


class FoldStep(ABC, Generic[T, U]):
    """
    a configured fold step.
    the fold driver passes the direction explicitly and lifts/lowers the
    accumulator through initial() and finish(); both default to identity.
    resolve_seed() sees the caller's seed (or MISSING) before anything else.
    """

    def resolve_seed(self, seed: Any) -> Any:
        return seed

    def initial(self, seed: Any, seed_index: Optional[int]) -> Any:
        return seed

    def finish(self, accumulator: Any) -> Any:
        return accumulator

    @abstractmethod
    def __call__(self, accumulator: U, element: T, index: int, sequence: Sequence[T],
                 direction: FoldDirection = FoldDirection.FORWARD) -> U:
        """return the next accumulator"""
        pass


def step_factory(arity: int, kind: str) -> Callable:
    """
    marks a function as a step factory. calling it with the generated step's
    own positional arity means it was handed to a pipeline without being
    called first.
    """
    def decorator(factory: Callable) -> Callable:
        @wraps(factory)
        def wrapper(*args, **kwargs):
            if len(args) == arity:
                raise FactoryMisuseError(f"this function must be called to generate the {kind}.")
            return factory(*args, **kwargs)

        wrapper.is_step_factory = True
        wrapper.step_kind = kind
        return wrapper

    return decorator
