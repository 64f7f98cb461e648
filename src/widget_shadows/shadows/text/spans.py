"""Span overlay table.

Spans stack: setting a span never merges with or trims the spans it overlaps.
A point query answers with the most recently set span that covers it, so the
last write wins wherever spans overlap, and positions covered by no span
report ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from .validation import ensure_range

_START_MASK = 0x30
_END_MASK = 0x03
_POINT_START = 0x20
_POINT_END = 0x02


def start_is_point(flags: int) -> bool:
    return flags & _START_MASK == _POINT_START


def end_is_point(flags: int) -> bool:
    return flags & _END_MASK == _POINT_END


@dataclass(slots=True)
class SpanRecord:
    what: object
    start: int
    end: int
    flags: int = 0

    @property
    def closed(self) -> bool:
        """True when the end offset itself belongs to the span."""

        return end_is_point(self.flags)

    def covers(self, position: int) -> bool:
        if self.start == self.end:
            return position == self.start
        if self.start <= position < self.end:
            return True
        return self.closed and position == self.end

    def overlaps(self, start: int, end: int) -> bool:
        if start == end or self.start == self.end:
            return self.start <= end and self.end >= start
        return self.start < end and self.end > start


class SpanTable:
    """Span records in the order they were (last) set."""

    def __init__(self) -> None:
        self._records: List[SpanRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SpanRecord]:
        return iter(tuple(self._records))

    def set_span(
        self, what: object, start: int, end: int, flags: int, *, length: int
    ) -> SpanRecord:
        """Attach ``what`` to ``[start, end)``; re-setting an attached span moves it."""

        ensure_range(start, end, length, what="span")
        self._discard(what)
        record = SpanRecord(what, start, end, flags)
        self._records.append(record)
        return record

    def remove_span(self, what: object) -> bool:
        return self._discard(what)

    def span_at(self, position: int) -> Optional[object]:
        for record in reversed(self._records):
            if record.covers(position):
                return record.what
        return None

    def get_spans(
        self, start: int, end: int, kind: Optional[type] = None
    ) -> list[object]:
        return [
            record.what
            for record in self._records
            if record.overlaps(start, end)
            and (kind is None or isinstance(record.what, kind))
        ]

    def record_for(self, what: object) -> Optional[SpanRecord]:
        for record in self._records:
            if record.what is what:
                return record
        return None

    def next_transition(
        self, start: int, limit: int, kind: Optional[type] = None
    ) -> int:
        best = limit
        for record in self._records:
            if kind is not None and not isinstance(record.what, kind):
                continue
            for boundary in (record.start, record.end):
                if start < boundary < best:
                    best = boundary
        return best

    def shift(self, start: int, end: int, inserted: int) -> None:
        """Move span endpoints for a splice of ``[start, end)`` to ``inserted`` chars.

        Endpoints before the splice stay, endpoints after it move by the length
        delta, and endpoints inside the removed range land after the new text
        when POINT and before it when MARK. A pure insertion exactly at an
        endpoint moves POINT endpoints past the new text and leaves MARK
        endpoints where they were.
        """

        for record in self._records:
            record.start = _shift(
                record.start,
                start,
                end,
                inserted,
                point=start_is_point(record.flags),
            )
            record.end = _shift(
                record.end,
                start,
                end,
                inserted,
                point=end_is_point(record.flags),
            )
            if record.end < record.start:
                record.end = record.start

    def clear(self) -> None:
        self._records.clear()

    def _discard(self, what: object) -> bool:
        for index, record in enumerate(self._records):
            if record.what is what:
                del self._records[index]
                return True
        return False


def _shift(position: int, start: int, end: int, inserted: int, *, point: bool) -> int:
    delta = inserted - (end - start)
    if position < start:
        return position
    if start == end:
        if position > start or point:
            return position + inserted
        return position
    if position >= end:
        return position + delta
    if position == start:
        return position
    return start + inserted if point else start


__all__ = [
    "SpanRecord",
    "SpanTable",
    "start_is_point",
    "end_is_point",
]
