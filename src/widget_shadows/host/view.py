"""Host view hierarchy: ``View``, ``ViewGroup`` and ``LinearLayout``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from .content import Context


@dataclass(frozen=True, slots=True)
class MotionEvent:
    ACTION_DOWN = 0
    ACTION_UP = 1
    ACTION_MOVE = 2

    down_time: int
    event_time: int
    action: int
    x: float
    y: float
    meta_state: int = 0

    @classmethod
    def obtain(
        cls,
        down_time: int,
        event_time: int,
        action: int,
        x: float,
        y: float,
        meta_state: int = 0,
    ) -> "MotionEvent":
        return cls(down_time, event_time, action, x, y, meta_state)


class OnTouchListener(Protocol):
    def on_touch(self, view: "View", event: MotionEvent) -> bool: ...


class View:
    VISIBLE = 0
    INVISIBLE = 4
    GONE = 8

    def __init__(self, context: Optional[Context] = None) -> None:
        del context

    def get_context(self) -> Optional[Context]:
        return None

    def set_on_touch_listener(self, listener: Optional[OnTouchListener]) -> None:
        del listener

    def dispatch_touch_event(self, event: MotionEvent) -> bool:
        del event
        return False

    def on_touch_event(self, event: MotionEvent) -> bool:
        del event
        return False

    def set_visibility(self, visibility: int) -> None:
        del visibility

    def get_visibility(self) -> int:
        return View.VISIBLE


class ViewGroup(View):
    def add_view(self, child: View, index: int = -1) -> None:
        del child, index

    def remove_view(self, child: View) -> None:
        del child

    def remove_all_views(self) -> None:
        pass

    def get_child_count(self) -> int:
        return 0

    def get_child_at(self, index: int) -> Optional[View]:
        del index
        return None


class LinearLayout(ViewGroup):
    HORIZONTAL = 0
    VERTICAL = 1


__all__ = [
    "MotionEvent",
    "OnTouchListener",
    "View",
    "ViewGroup",
    "LinearLayout",
]
