from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .config import ToolboxConfig, DEFAULT_CONFIG
from .engine import MISSING, keep, fold
from .strategies import as_sequence

# --- algorithms ---
from .extensions.core import intersection, modal_values
from .extensions.filter import unique
from .extensions.reduce import (
    default_if_empty,
    find_all_indexes,
    first_or_default_to,
    last_or_default_to,
    single_or_default_to
)

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> Sequence[T]:
        """get the underlying data as a sequence"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: Callable[[], Sequence[T]]):
        """init with a function that returns data when called"""
        self._data_func = data_func
        self._cached_result: Optional[Sequence[T]] = None
        self._is_cached = False

    def _get_data(self) -> Sequence[T]:
        """get the current data, caching the result"""
        if not self._is_cached:
            self._cached_result = as_sequence(self._data_func(), 'sequence')
            self._is_cached = True
        return self._cached_result

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return self.to.count()

# --- main enumerable class ---

class Enumerable(_BaseEnumerable[T]):
    """
    a lazy, chainable sequence whose filters and folds run through the
    toolbox drivers. comparator, serializer and fold direction default to
    the pipeline's config and can be overridden per call.
    """
    def __init__(self, data_func: Callable[[], Sequence[T]], config: Optional[ToolboxConfig] = None):
        super().__init__(data_func)
        self.config = config or DEFAULT_CONFIG
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    def _derive(self, data_func: Callable[[], Sequence[U]]) -> 'Enumerable[U]':
        """new enumerable sharing this pipeline's config"""
        return Enumerable(data_func, self.config)

    # --- filters ---

    def where(self, predicate: FilterCallback[T]) -> 'Enumerable[T]':
        """keep elements for which predicate(element, index, sequence) is truthy"""
        return self._derive(lambda: keep(self._get_data(), predicate))

    def unique(self, cmp: Optional[Comparator[T]] = None) -> 'Enumerable[T]':
        """drop elements that compare equal to a later one (last one wins)"""
        return self.where(unique(cmp or self.config.comparator))

    # --- whole-sequence algorithms ---

    def intersection(self, other: Sequence[T], cmp: Optional[Comparator[T]] = None) -> 'Enumerable[T]':
        """multiset intersection with another sequence"""
        return self._derive(lambda: intersection(self._get_data(), other, cmp or self.config.comparator))

    def modal_values(self, serialize: Optional[Serializer[T]] = None) -> 'Enumerable[T]':
        """the most frequent element(s), in order of first occurrence"""
        return self._derive(lambda: modal_values(self._get_data(), serialize or self.config.serializer))

    def default_if_empty(self, default: Sequence[T]) -> 'Enumerable[T]':
        """this sequence, or the default sequence when this one is empty"""
        return self._derive(lambda: fold(self._get_data(), default_if_empty(default)))

    # --- folds ---

    def fold(self, step: FoldCallback[U, T], seed: Any = MISSING,
             direction: Optional[FoldDirection] = None) -> Any:
        """eager fold in the given direction, or the config's direction"""
        return fold(self._get_data(), step, seed, direction or self.config.direction)

    def fold_right(self, step: FoldCallback[U, T], seed: Any = MISSING) -> Any:
        """eager fold from the last element to the first"""
        return fold(self._get_data(), step, seed, FoldDirection.REVERSE)

    def first_or_default(self, default: Optional[T] = None) -> Optional[T]:
        return self.fold(first_or_default_to(), default, FoldDirection.FORWARD)

    def last_or_default(self, default: Optional[T] = None) -> Optional[T]:
        return self.fold(last_or_default_to(), default, FoldDirection.FORWARD)

    def single_or_default(self, default: Optional[T] = None) -> Optional[T]:
        """the only element or the default; raises CardinalityError for longer sequences"""
        return self.fold(single_or_default_to(), default)

    def find_all_indexes(self, needle: T, cmp: Optional[Comparator[T]] = None) -> List[int]:
        """every index whose element compares equal to needle"""
        return self.fold(find_all_indexes(needle, cmp or self.config.comparator), [])
