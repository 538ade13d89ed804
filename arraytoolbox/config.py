from dataclasses import dataclass
from .types import Comparator, Serializer, FoldDirection, InvalidArgumentError
from .strategies import default_comparator, default_serializer


@dataclass(frozen=True)
class ToolboxConfig:
    """defaults used by an Enumerable pipeline when a call does not supply its own"""
    comparator: Comparator = default_comparator
    serializer: Serializer = default_serializer
    direction: FoldDirection = FoldDirection.FORWARD

    def __post_init__(self):
        if not callable(self.comparator):
            raise InvalidArgumentError("'comparator' must be a function.")
        if not callable(self.serializer):
            raise InvalidArgumentError("'serializer' must be a function.")
        # accept 'forward' / 'reverse' as well as the enum
        object.__setattr__(self, 'direction', FoldDirection(self.direction))


DEFAULT_CONFIG = ToolboxConfig()
