"""
comparison and serialization strategies.

every algorithm takes its notion of equality from a caller-supplied
comparator or serializer. the strategy types below bundle that callable
and check its return value on every call, so a misbehaving callback is
reported at the offending call instead of silently corrupting a result.
"""
from __future__ import annotations

import json
import locale
import numbers
import re
from collections.abc import Sequence as AbcSequence

import numpy as np
import pandas as pd

from .types import *

_DIGIT_RUNS = re.compile(r'(\d+)')


# --- sequences ---

def as_sequence(value: Any, name: str = 'array') -> Sequence[Any]:
    """
    return value as an indexable sequence without copying plain python sequences.
    numpy arrays and pandas series are converted with tolist().
    """
    if isinstance(value, pd.Series):
        return value.tolist()
    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise InvalidArgumentError(f"'{name}' must be a one-dimensional array, got {value.ndim} dimensions.")
        return value.tolist()
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, AbcSequence):
        raise InvalidArgumentError(f"'{name}' must be a sequence, got {type(value).__name__}.")
    return value


# --- comparators ---

def default_comparator(left: Any, right: Any) -> int:
    """
    value equality first, then natural ordering. pairs that are neither
    equal nor ordered (mixed types, nan) order by type name and repr.
    """
    try:
        if left == right:
            return 0
        if left < right:
            return -1
        if right < left:
            return 1
    except TypeError:
        # unorderable, use the type name and repr ordering below
        pass
    left_key = (type(left).__name__, repr(left))
    right_key = (type(right).__name__, repr(right))
    return (left_key > right_key) - (left_key < right_key)


def collator_comparator(numeric: bool = False) -> Comparator[Any]:
    """
    locale-aware string collation using the current LC_COLLATE setting.
    with numeric=True, runs of digits compare by value ("item2" < "item10").
    """
    def collation_key(value: Any) -> Tuple:
        text = str(value)
        if not numeric:
            return (locale.strxfrm(text),)
        # digit runs sort ahead of text at the same position
        return tuple((0, int(part), '') if part.isdigit() else (1, 0, locale.strxfrm(part))
                     for part in _DIGIT_RUNS.split(text) if part)

    def compare(left: Any, right: Any) -> int:
        left_key, right_key = collation_key(left), collation_key(right)
        return (left_key > right_key) - (left_key < right_key)

    return compare


def key_comparator(key: Callable[[T], K], cmp: Optional[Comparator[K]] = None) -> Comparator[T]:
    """compare two elements by a projected key"""
    if not callable(key):
        raise InvalidArgumentError("'key' must be a function.")
    strategy = CompareStrategy.of(cmp)
    return lambda left, right: strategy.compare(key(left), key(right))


def reverse_comparator(cmp: Optional[Comparator[T]] = None) -> Comparator[T]:
    """invert another comparator's ordering"""
    strategy = CompareStrategy.of(cmp)
    return lambda left, right: -strategy.compare(left, right)


# --- serializers ---

def _encode_extra(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    return repr(value)


def default_serializer(value: Any) -> str:
    """compact json with sorted keys; values json cannot encode fall back to repr"""
    try:
        return json.dumps(value, sort_keys=True, separators=(',', ':'), default=_encode_extra)
    except (TypeError, ValueError):
        # mixed-type dict keys cannot be sorted, circular structures cannot be encoded
        return repr(value)


# --- strategy types ---

@dataclass(frozen=True)
class CompareStrategy(Generic[T]):
    """a comparator bundled with the check on what it returns"""
    comparator: Comparator[T]
    name: str = 'item_comparator'

    @classmethod
    def of(cls, cmp: Union[None, Comparator[T], 'CompareStrategy[T]'],
           name: str = 'item_comparator') -> 'CompareStrategy[T]':
        if cmp is None:
            return cls(default_comparator, name)
        if isinstance(cmp, CompareStrategy):
            return cmp
        if not callable(cmp):
            raise InvalidArgumentError(f"'{name}' must be a function.")
        return cls(cmp, name)

    def compare(self, left: T, right: T) -> Ordering:
        result = self.comparator(left, right)
        # bool is an int subclass but is not an ordering
        if isinstance(result, bool) or not isinstance(result, numbers.Real):
            raise CallbackContractError(
                f"'{self.name}' did not return a number (for example, -1, 0, or 1), got {type(result).__name__}.")
        return result

    def equal(self, left: T, right: T) -> bool:
        return self.compare(left, right) == 0


@dataclass(frozen=True)
class SerializeStrategy(Generic[T]):
    """a serializer bundled with the check that it returns a string"""
    serializer: Serializer[T]
    name: str = 'item_serializer'

    @classmethod
    def of(cls, serialize: Union[None, Serializer[T], 'SerializeStrategy[T]'],
           name: str = 'item_serializer') -> 'SerializeStrategy[T]':
        if serialize is None:
            return cls(default_serializer, name)
        if isinstance(serialize, SerializeStrategy):
            return serialize
        if not callable(serialize):
            raise InvalidArgumentError(f"'{name}' must be a function.")
        return cls(serialize, name)

    def key(self, value: T) -> str:
        result = self.serializer(value)
        if not isinstance(result, str):
            raise CallbackContractError(f"'{self.name}' did not return a string, got {type(result).__name__}.")
        return result
