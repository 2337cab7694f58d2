"""Buffer data model, the host capability protocol, and a reference buffer."""

from .buffer import Buffer, Transaction
from .document import BufferDocument
from .state import Position, Range
from .undo import UndoEntry, UndoTimeline
from .validation import clamp_position, ensure_position, ensure_range
from .view import BufferValidationError, BufferView

__all__ = [
    "Buffer",
    "BufferDocument",
    "BufferValidationError",
    "BufferView",
    "Position",
    "Range",
    "Transaction",
    "UndoEntry",
    "UndoTimeline",
    "clamp_position",
    "ensure_position",
    "ensure_range",
]
