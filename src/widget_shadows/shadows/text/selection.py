"""Selection range and its adjustment when the buffer is spliced."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .validation import ensure_range


@dataclass(frozen=True, slots=True)
class Selection:
    start: int
    end: int

    @property
    def is_caret(self) -> bool:
        return self.start == self.end

    @classmethod
    def checked(cls, start: int, end: int, length: int) -> "Selection":
        ensure_range(start, end, length, what="selection")
        return cls(start, end)


def adjust_selection(
    selection: Optional[Selection],
    *,
    start: int,
    end: int,
    inserted: int,
    old_length: int,
) -> Optional[Selection]:
    """Selection after replacing ``[start, end)`` with ``inserted`` characters.

    Uses the pre-splice selection and length. An insertion at the tail drags a
    selection that ends at the tail along with it: a range keeps its start and
    grows, a caret stays a caret at the new tail. Anything else is clamped to
    the new length.
    """

    if selection is None:
        return None

    new_length = old_length - (end - start) + inserted
    if start == end == old_length:
        if selection.end != old_length:
            return selection
        if selection.is_caret:
            return Selection(new_length, new_length)
        return Selection(selection.start, selection.end + inserted)

    return Selection(min(selection.start, new_length), min(selection.end, new_length))


__all__ = ["Selection", "adjust_selection"]
