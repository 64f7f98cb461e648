"""Text state machine: buffer, selection, watchers and span overlay."""

from .editable import EditableText
from .selection import Selection, adjust_selection
from .spans import SpanRecord, SpanTable
from .validation import InvalidRangeError, UnsupportedArgumentError, ensure_range
from .watchers import WatcherList

__all__ = [
    "EditableText",
    "Selection",
    "adjust_selection",
    "SpanRecord",
    "SpanTable",
    "InvalidRangeError",
    "UnsupportedArgumentError",
    "ensure_range",
    "WatcherList",
]
