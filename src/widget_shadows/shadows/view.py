"""Shadows for the view hierarchy."""

from __future__ import annotations

from typing import List, Optional

from widget_shadows.binding import RealObject, constructor, implementation, implements
from widget_shadows.host.content import Context
from widget_shadows.host.view import MotionEvent, OnTouchListener, View, ViewGroup


@implements(View)
class ShadowView:
    real = RealObject()

    def __init__(self) -> None:
        self._context: Optional[Context] = None
        self._touch_listener: Optional[OnTouchListener] = None
        self._visibility = View.VISIBLE

    @constructor
    def __constructor__(self, context: Optional[Context] = None) -> None:
        self._context = context

    @implementation
    def get_context(self) -> Optional[Context]:
        return self._context

    @implementation
    def set_on_touch_listener(self, listener: Optional[OnTouchListener]) -> None:
        self._touch_listener = listener

    @implementation
    def dispatch_touch_event(self, event: MotionEvent) -> bool:
        if self._touch_listener is not None and self._touch_listener.on_touch(
            self.real, event
        ):
            return True
        # goes back through dispatch so subclasses' on_touch_event applies
        return bool(self.real.on_touch_event(event))

    @implementation
    def on_touch_event(self, event: MotionEvent) -> bool:
        del event
        return False

    @implementation
    def set_visibility(self, visibility: int) -> None:
        self._visibility = visibility

    @implementation
    def get_visibility(self) -> int:
        return self._visibility


@implements(ViewGroup)
class ShadowViewGroup(ShadowView):
    def __init__(self) -> None:
        super().__init__()
        self._children: List[View] = []

    @implementation
    def add_view(self, child: View, index: int = -1) -> None:
        if index < 0 or index >= len(self._children):
            self._children.append(child)
        else:
            self._children.insert(index, child)

    @implementation
    def remove_view(self, child: View) -> None:
        self._children = [view for view in self._children if view is not child]

    @implementation
    def remove_all_views(self) -> None:
        self._children.clear()

    @implementation
    def get_child_count(self) -> int:
        return len(self._children)

    @implementation
    def get_child_at(self, index: int) -> Optional[View]:
        if 0 <= index < len(self._children):
            return self._children[index]
        return None


__all__ = ["ShadowView", "ShadowViewGroup"]
