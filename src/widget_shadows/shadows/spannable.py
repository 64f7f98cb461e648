"""Shadow for ``SpannableStringBuilder`` backed by :class:`EditableText`."""

from __future__ import annotations

from typing import Any, Optional

from widget_shadows.binding import RealObject, constructor, implementation, implements
from widget_shadows.host.text import SpannableStringBuilder

from .text import EditableText


@implements(SpannableStringBuilder)
class ShadowSpannableStringBuilder:
    real = RealObject()

    def __init__(self) -> None:
        self.editable = EditableText(name="spannable")

    @constructor
    def __constructor__(self, text: Any = "") -> None:
        if text:
            self.editable.set_text(text)

    # Builder-style calls hand back the real object so chains stay on the
    # host type.

    @implementation
    def append(self, text: Any) -> SpannableStringBuilder:
        self.editable.append(text)
        return self.real

    @implementation
    def replace(
        self,
        start: int,
        end: int,
        text: Any,
        tb_start: Optional[int] = None,
        tb_end: Optional[int] = None,
    ) -> SpannableStringBuilder:
        self.editable.replace(start, end, text, tb_start, tb_end)
        return self.real

    @implementation
    def insert(self, where: int, text: Any) -> SpannableStringBuilder:
        self.editable.insert(where, text)
        return self.real

    @implementation
    def delete(self, start: int, end: int) -> SpannableStringBuilder:
        self.editable.delete(start, end)
        return self.real

    @implementation
    def clear(self) -> None:
        self.editable.clear()

    @implementation
    def length(self) -> int:
        return len(self.editable)

    @implementation
    def to_string(self) -> str:
        return self.editable.text

    @implementation
    def char_at(self, index: int) -> str:
        return self.editable.char_at(index)

    @implementation
    def set_span(self, what: object, start: int, end: int, flags: int) -> None:
        self.editable.set_span(what, start, end, flags)

    @implementation
    def remove_span(self, what: object) -> None:
        self.editable.remove_span(what)

    @implementation
    def get_spans(
        self, start: int, end: int, kind: Optional[type] = None
    ) -> list[object]:
        return self.editable.get_spans(start, end, kind)

    @implementation
    def get_span_start(self, what: object) -> int:
        return self.editable.get_span_start(what)

    @implementation
    def get_span_end(self, what: object) -> int:
        return self.editable.get_span_end(what)

    @implementation
    def get_span_flags(self, what: object) -> int:
        return self.editable.get_span_flags(what)

    @implementation
    def next_span_transition(
        self, start: int, limit: int, kind: Optional[type] = None
    ) -> int:
        return self.editable.next_span_transition(start, limit, kind)

    def get_span_at(self, position: int) -> Optional[object]:
        """Test-only: the most recently set attribute covering ``position``."""

        return self.editable.span_at(position)


__all__ = ["ShadowSpannableStringBuilder"]
