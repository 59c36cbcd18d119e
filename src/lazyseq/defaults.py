import enum
from typing import Literal


class Default(enum.Enum):
    """Sentinel values used for cursor state."""

    Empty = enum.auto()
    Exhausted = enum.auto()


# TODO: Replace with enum.global_enum if ever supported in pyright
Empty: Literal[Default.Empty] = Default.Empty
Exhausted: Literal[Default.Exhausted] = Default.Exhausted
