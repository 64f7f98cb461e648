"""Host text types: span flags, span attributes, watchers and the span builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol, Sequence


class Spanned:
    """Span flag constants.

    The high nibble describes the start point and the low nibble the end
    point: ``MARK`` (``1``) stays put when text is inserted at it, ``POINT``
    (``2``) moves past inserted text.
    """

    SPAN_MARK_MARK = 0x11
    SPAN_MARK_POINT = 0x12
    SPAN_POINT_MARK = 0x21
    SPAN_POINT_POINT = 0x22
    SPAN_POINT_MARK_MASK = 0x33

    SPAN_INCLUSIVE_EXCLUSIVE = SPAN_MARK_MARK
    SPAN_INCLUSIVE_INCLUSIVE = SPAN_MARK_POINT
    SPAN_EXCLUSIVE_EXCLUSIVE = SPAN_POINT_MARK
    SPAN_EXCLUSIVE_INCLUSIVE = SPAN_POINT_POINT


class TypedValue:
    COMPLEX_UNIT_PX = 0
    COMPLEX_UNIT_DIP = 1
    COMPLEX_UNIT_SP = 2
    COMPLEX_UNIT_PT = 3
    COMPLEX_UNIT_IN = 4
    COMPLEX_UNIT_MM = 5


@dataclass(eq=False, slots=True)
class TypefaceSpan:
    family: str

    def get_family(self) -> str:
        return self.family


@dataclass(eq=False, slots=True)
class URLSpan:
    url: str

    def get_url(self) -> str:
        return self.url


@dataclass(eq=False, slots=True)
class StyleSpan:
    style: int

    def get_style(self) -> int:
        return self.style


class TextWatcher(Protocol):
    """Observer notified around every text mutation."""

    def before_text_changed(
        self, text: str, start: int, count: int, after: int
    ) -> None: ...

    def on_text_changed(self, text: str, start: int, before: int, count: int) -> None: ...

    def after_text_changed(self, editable: Any) -> None: ...


class SpannableStringBuilder:
    """Mutable text with attached spans."""

    def __init__(self, text: Any = "") -> None:
        del text

    def __str__(self) -> str:
        return self.to_string() or ""

    def __len__(self) -> int:
        return self.length() or 0

    def to_string(self) -> str:
        return ""

    def length(self) -> int:
        return 0

    def char_at(self, index: int) -> str:
        del index
        return ""

    def append(self, text: Any) -> "SpannableStringBuilder":
        del text
        return self

    def replace(
        self,
        start: int,
        end: int,
        text: Any,
        tb_start: Optional[int] = None,
        tb_end: Optional[int] = None,
    ) -> "SpannableStringBuilder":
        del start, end, text, tb_start, tb_end
        return self

    def insert(self, where: int, text: Any) -> "SpannableStringBuilder":
        del where, text
        return self

    def delete(self, start: int, end: int) -> "SpannableStringBuilder":
        del start, end
        return self

    def clear(self) -> None:
        pass

    def set_span(self, what: object, start: int, end: int, flags: int) -> None:
        del what, start, end, flags

    def remove_span(self, what: object) -> None:
        del what

    def get_spans(
        self, start: int, end: int, kind: Optional[type] = None
    ) -> Sequence[object]:
        del start, end, kind
        return ()

    def get_span_start(self, what: object) -> int:
        del what
        return -1

    def get_span_end(self, what: object) -> int:
        del what
        return -1

    def get_span_flags(self, what: object) -> int:
        del what
        return 0

    def next_span_transition(
        self, start: int, limit: int, kind: Optional[type] = None
    ) -> int:
        del start, kind
        return limit


__all__ = [
    "Spanned",
    "TypedValue",
    "TypefaceSpan",
    "URLSpan",
    "StyleSpan",
    "TextWatcher",
    "SpannableStringBuilder",
]
