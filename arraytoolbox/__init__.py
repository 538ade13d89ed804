"""
   __ _ _ __ _ __ __ _ _   _
  / _` | '__| '__/ _` | | | |
 | (_| | |  | | | (_| | |_| |
  \__,_|_|  |_|  \__,_|\__, |   toolbox
                       |___/

generic sequence algorithms for filter and fold pipelines.
"""
import logging

# expose the algorithms
from .extensions.core import intersection, modal_values
from .extensions.filter import unique
from .extensions.reduce import (
    default_if_empty,
    find_all_indexes,
    first_or_default_to,
    last_or_default_to,
    single_or_default_to
)

# expose the drivers
from .engine import MISSING, keep, fold, fold_right

# expose the main class and factory functions
from .enumerable import Enumerable
from .factories import from_iterable, from_range, repeat, empty, toolbox, P
from .config import ToolboxConfig, DEFAULT_CONFIG

# expose strategies and supporting types
from .strategies import (
    CompareStrategy,
    SerializeStrategy,
    default_comparator,
    default_serializer,
    collator_comparator,
    key_comparator,
    reverse_comparator
)
from .types import (
    FoldDirection,
    FoldStep,
    FilterPredicate,
    Seed,
    Collected,
    ToolboxError,
    InvalidArgumentError,
    CallbackContractError,
    FactoryMisuseError,
    CardinalityError,
    EmptySequenceError
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "intersection",
    "modal_values",
    "unique",
    "default_if_empty",
    "find_all_indexes",
    "first_or_default_to",
    "last_or_default_to",
    "single_or_default_to",
    "MISSING",
    "keep",
    "fold",
    "fold_right",
    "Enumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "toolbox",
    "P",
    "ToolboxConfig",
    "DEFAULT_CONFIG",
    "CompareStrategy",
    "SerializeStrategy",
    "default_comparator",
    "default_serializer",
    "collator_comparator",
    "key_comparator",
    "reverse_comparator",
    "FoldDirection",
    "FoldStep",
    "FilterPredicate",
    "Seed",
    "Collected",
    "ToolboxError",
    "InvalidArgumentError",
    "CallbackContractError",
    "FactoryMisuseError",
    "CardinalityError",
    "EmptySequenceError"
]
