"""Selection orchestration: context flags, strategies and the driver."""

from .context import MODIFIER_KEYS, SelectionContext
from .orchestrator import (
    LineGroupStrategy,
    PerSelectionStrategy,
    SelectionSetStrategy,
    SelectionStrategy,
    WholeSetHandler,
    normalize_selections,
    with_multiple_selections,
)

__all__ = [
    "MODIFIER_KEYS",
    "SelectionContext",
    "SelectionStrategy",
    "PerSelectionStrategy",
    "LineGroupStrategy",
    "SelectionSetStrategy",
    "WholeSetHandler",
    "normalize_selections",
    "with_multiple_selections",
]
