"""Editable text state machine shared by the text-bearing shadows."""

from __future__ import annotations

from typing import Any, Optional

from widget_shadows.host.text import TextWatcher
from widget_shadows.runtime import telemetry

from .selection import Selection, adjust_selection
from .spans import SpanTable
from .validation import InvalidRangeError, ensure_range
from .watchers import WatcherList, notify_after, notify_before, notify_changed


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


class EditableText:
    """Text buffer with spans, an optional selection and change watchers.

    Every edit funnels through :meth:`mutate`, which validates the range,
    fires ``before_text_changed`` on every watcher, splices, then fires
    ``on_text_changed`` and finally ``after_text_changed`` on every watcher.
    """

    def __init__(
        self,
        text: Any = "",
        *,
        name: str = "editable",
        logger_name: str | None = None,
    ) -> None:
        self.name = name
        self.spans = SpanTable()
        self.watchers = WatcherList()
        self.version = 0
        self._text = _as_text(text)
        self._selection: Optional[Selection] = None
        self._logger_name = logger_name

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"EditableText({self._text!r}, selection={self._selection})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (str, EditableText)):
            return self._text == str(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    @property
    def text(self) -> str:
        return self._text

    # -- mutation ---------------------------------------------------------

    def mutate(
        self, start: int, end: int, replacement: Any, *, label: str = "replace"
    ) -> "EditableText":
        old_text = self._text
        ensure_range(start, end, len(old_text))
        replacement = _as_text(replacement)
        removed = end - start
        inserted = len(replacement)
        watchers = self.watchers.snapshot()

        with telemetry.span(
            f"text::{label}",
            logger_name=self._logger_name,
            component="text",
            metadata={
                "editable": self.name,
                "start": start,
                "removed": removed,
                "inserted": inserted,
                "watchers": len(watchers),
            },
        ):
            notify_before(watchers, old_text, start, removed, inserted)
            selection = adjust_selection(
                self._selection,
                start=start,
                end=end,
                inserted=inserted,
                old_length=len(old_text),
            )
            self._text = old_text[:start] + replacement + old_text[end:]
            self.spans.shift(start, end, inserted)
            self._selection = selection
            self.version += 1
            notify_changed(watchers, self._text, start, removed, inserted)
            notify_after(watchers, self)
        return self

    def replace(
        self,
        start: int,
        end: int,
        text: Any,
        tb_start: Optional[int] = None,
        tb_end: Optional[int] = None,
    ) -> "EditableText":
        source = _as_text(text)
        if tb_start is not None or tb_end is not None:
            first = 0 if tb_start is None else tb_start
            last = len(source) if tb_end is None else tb_end
            ensure_range(first, last, len(source), what="source range")
            source = source[first:last]
        return self.mutate(start, end, source, label="replace")

    def insert(self, where: int, text: Any) -> "EditableText":
        return self.mutate(where, where, text, label="insert")

    def delete(self, start: int, end: int) -> "EditableText":
        return self.mutate(start, end, "", label="delete")

    def append(self, text: Any) -> "EditableText":
        length = len(self._text)
        return self.mutate(length, length, text, label="append")

    def set_text(self, text: Any) -> "EditableText":
        return self.mutate(0, len(self._text), text, label="set_text")

    def clear(self) -> "EditableText":
        return self.set_text("")

    def char_at(self, index: int) -> str:
        if not 0 <= index < len(self._text):
            raise InvalidRangeError(
                "index out of bounds", start=index, end=index, length=len(self._text)
            )
        return self._text[index]

    def sub_sequence(self, start: int, end: int) -> str:
        ensure_range(start, end, len(self._text))
        return self._text[start:end]

    # -- selection --------------------------------------------------------

    @property
    def selection(self) -> Optional[Selection]:
        return self._selection

    def set_selection(self, start: int, end: Optional[int] = None) -> None:
        stop = start if end is None else end
        self._selection = Selection.checked(start, stop, len(self._text))

    def clear_selection(self) -> None:
        self._selection = None

    def selection_start(self) -> int:
        return self._selection.start if self._selection else -1

    def selection_end(self) -> int:
        return self._selection.end if self._selection else -1

    def has_selection(self) -> bool:
        return self._selection is not None

    # -- watchers ---------------------------------------------------------

    def add_watcher(self, watcher: TextWatcher) -> None:
        self.watchers.add(watcher)

    def remove_watcher(self, watcher: TextWatcher) -> bool:
        return self.watchers.remove(watcher)

    # -- spans ------------------------------------------------------------

    def set_span(self, what: object, start: int, end: int, flags: int = 0) -> None:
        self.spans.set_span(what, start, end, flags, length=len(self._text))

    def remove_span(self, what: object) -> None:
        self.spans.remove_span(what)

    def span_at(self, position: int) -> Optional[object]:
        if not 0 <= position < len(self._text):
            return None
        return self.spans.span_at(position)

    def get_spans(
        self, start: int, end: int, kind: Optional[type] = None
    ) -> list[object]:
        return self.spans.get_spans(start, end, kind)

    def get_span_start(self, what: object) -> int:
        record = self.spans.record_for(what)
        return record.start if record else -1

    def get_span_end(self, what: object) -> int:
        record = self.spans.record_for(what)
        return record.end if record else -1

    def get_span_flags(self, what: object) -> int:
        record = self.spans.record_for(what)
        return record.flags if record else 0

    def next_span_transition(
        self, start: int, limit: int, kind: Optional[type] = None
    ) -> int:
        return self.spans.next_transition(start, limit, kind)


__all__ = ["EditableText"]
