"""Shadow for ``PopupWindow``."""

from __future__ import annotations

from typing import Any, Optional

from widget_shadows.binding import RealObject, constructor, implementation, implements
from widget_shadows.host.content import Context
from widget_shadows.host.view import LinearLayout, MotionEvent, OnTouchListener, View
from widget_shadows.host.widget import PopupWindow


@implements(PopupWindow)
class ShadowPopupWindow:
    """Stores popup state; ``show_as_drop_down`` attaches to the window manager.

    Showing is only ever flipped by :meth:`set_showing` and :meth:`dismiss`,
    so tests decide when the popup counts as visible.
    """

    real = RealObject()

    def __init__(self) -> None:
        self._content_view: Optional[View] = None
        self._width = 0
        self._height = 0
        self._focusable = False
        self._touchable = False
        self._outside_touchable = False
        self._showing = False
        self._background: Any = None
        self._touch_interceptor: Optional[OnTouchListener] = None
        self._context: Optional[Context] = None
        self._window_manager: Any = None

    @constructor
    def __constructor__(
        self,
        content_view: Optional[View] = None,
        width: int = 0,
        height: int = 0,
        focusable: bool = False,
    ) -> None:
        self._content_view = content_view
        self._width = width
        self._height = height
        self._focusable = focusable
        if content_view is not None:
            self._context = content_view.get_context()
        if self._context is not None:
            self._window_manager = self._context.get_system_service(
                Context.WINDOW_SERVICE
            )

    @implementation
    def set_content_view(self, content_view: Optional[View]) -> None:
        self._content_view = content_view

    @implementation
    def get_content_view(self) -> Optional[View]:
        return self._content_view

    @implementation
    def set_width(self, width: int) -> None:
        self._width = width

    @implementation
    def get_width(self) -> int:
        return self._width

    @implementation
    def set_height(self, height: int) -> None:
        self._height = height

    @implementation
    def get_height(self) -> int:
        return self._height

    @implementation
    def set_focusable(self, focusable: bool) -> None:
        self._focusable = focusable

    @implementation
    def is_focusable(self) -> bool:
        return self._focusable

    @implementation
    def set_touchable(self, touchable: bool) -> None:
        self._touchable = touchable

    @implementation
    def is_touchable(self) -> bool:
        return self._touchable

    @implementation
    def set_outside_touchable(self, touchable: bool) -> None:
        self._outside_touchable = touchable

    @implementation
    def is_outside_touchable(self) -> bool:
        return self._outside_touchable

    def set_showing(self, showing: bool) -> None:
        """Test-only: mark the popup as showing or hidden."""

        self._showing = showing

    @implementation
    def is_showing(self) -> bool:
        return self._showing

    @implementation
    def dismiss(self) -> None:
        self._showing = False

    @implementation
    def set_background_drawable(self, background: Any) -> None:
        self._background = background

    @implementation
    def get_background(self) -> Any:
        return self._background

    @implementation
    def set_touch_interceptor(self, listener: Optional[OnTouchListener]) -> None:
        self._touch_interceptor = listener

    def get_touch_interceptor(self) -> Optional[OnTouchListener]:
        return self._touch_interceptor

    @implementation
    def show_as_drop_down(self, anchor: View) -> None:
        del anchor
        container = LinearLayout(self._context)
        container.add_view(self._content_view)
        if self._window_manager is not None:
            self._window_manager.add_view(container, None)

    def dispatch_touch_event(self, event: MotionEvent) -> bool:
        """Test-only: feed ``event`` to the touch interceptor."""

        if self._touch_interceptor is None:
            return False
        return bool(
            self._touch_interceptor.on_touch(self.real.get_content_view(), event)
        )


__all__ = ["ShadowPopupWindow"]
