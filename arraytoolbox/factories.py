"""
entry points that build an Enumerable.

every factory takes an optional ToolboxConfig, so a pipeline started from a
range or a repeated value compares and serializes the same way as one
started from caller data. counts are checked when the factory is called,
not when the pipeline is first read.
"""
from __future__ import annotations
import numbers
import typing
from .types import *
from .config import ToolboxConfig

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable


def _checked_int(value: Any, name: str, allow_negative: bool = False) -> int:
    # bool is an int subclass but is not a count
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(f"'{name}' must be an integer, got {type(value).__name__}.")
    if not allow_negative and value < 0:
        raise InvalidArgumentError(f"'{name}' must not be negative, got {value}.")
    return int(value)


def _build(data_func: Callable[[], Sequence[T]], config: Optional[ToolboxConfig]) -> 'Enumerable[T]':
    from .enumerable import Enumerable
    return Enumerable(data_func, config)


def from_iterable(data: Iterable[T], config: Optional[ToolboxConfig] = None) -> 'Enumerable[T]':
    """
    wrap caller data. numpy arrays and pandas series keep their own tolist()
    conversion; any other iterable is copied into a list on first read, so a
    generator is consumed once.
    """
    if hasattr(data, 'tolist'):
        return _build(lambda: data, config)
    if not isinstance(data, Iterable):
        raise InvalidArgumentError(f"'data' must be iterable, got {type(data).__name__}.")
    return _build(lambda: list(data), config)


def from_range(start: int, count: int, step: int = 1,
               config: Optional[ToolboxConfig] = None) -> 'Enumerable[int]':
    """count integers from start, step apart"""
    start = _checked_int(start, 'start', allow_negative=True)
    count = _checked_int(count, 'count')
    step = _checked_int(step, 'step', allow_negative=True)
    return _build(lambda: [start + i * step for i in range(count)], config)


def repeat(item: T, count: int, config: Optional[ToolboxConfig] = None) -> 'Enumerable[T]':
    count = _checked_int(count, 'count')
    return _build(lambda: [item] * count, config)


def empty(config: Optional[ToolboxConfig] = None) -> 'Enumerable[Any]':
    return _build(list, config)


# --- aliases ---
toolbox = from_iterable
P = from_iterable
