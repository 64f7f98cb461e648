"""Host widgets: ``TextView``, ``EditText`` and ``PopupWindow``."""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .content import Context
from .text import TextWatcher, URLSpan
from .view import MotionEvent, OnTouchListener, View


class EditorInfo:
    IME_ACTION_UNSPECIFIED = 0
    IME_ACTION_NONE = 1
    IME_ACTION_GO = 2
    IME_ACTION_SEARCH = 3
    IME_ACTION_SEND = 4
    IME_ACTION_NEXT = 5
    IME_ACTION_DONE = 6


class Gravity:
    NO_GRAVITY = 0
    CENTER_HORIZONTAL = 0x01
    LEFT = 0x03
    RIGHT = 0x05
    CENTER_VERTICAL = 0x10
    CENTER = 0x11
    TOP = 0x30
    BOTTOM = 0x50


class InputType:
    TYPE_NULL = 0
    TYPE_CLASS_TEXT = 0x01
    TYPE_CLASS_NUMBER = 0x02
    TYPE_CLASS_PHONE = 0x03
    TYPE_TEXT_VARIATION_PASSWORD = 0x80


class OnEditorActionListener(Protocol):
    def on_editor_action(
        self, view: "TextView", action_id: int, key_event: Any
    ) -> bool: ...


class MovementMethod(Protocol):
    def on_touch_event(self, widget: "TextView", text: Any, event: MotionEvent) -> bool: ...


class TextView(View):
    def get_text(self) -> str:
        return ""

    def set_text(self, text: Any) -> None:
        del text

    def append(self, text: Any) -> None:
        del text

    def length(self) -> int:
        return 0

    def get_editable_text(self) -> Any:
        return None

    def set_selection(self, start: int, end: Optional[int] = None) -> None:
        del start, end

    def get_selection_start(self) -> int:
        return -1

    def get_selection_end(self) -> int:
        return -1

    def has_selection(self) -> bool:
        return False

    def add_text_changed_listener(self, watcher: TextWatcher) -> None:
        del watcher

    def remove_text_changed_listener(self, watcher: TextWatcher) -> None:
        del watcher

    def get_urls(self) -> Sequence[URLSpan]:
        return ()

    def set_text_size(self, unit: int, size: float) -> None:
        del unit, size

    def get_text_size(self) -> float:
        return 0.0

    def set_text_color(self, color: int) -> None:
        del color

    def get_current_text_color(self) -> int:
        return 0

    def set_hint(self, hint: Any) -> None:
        del hint

    def get_hint(self) -> Optional[str]:
        return None

    def set_hint_text_color(self, color: int) -> None:
        del color

    def get_current_hint_text_color(self) -> int:
        return 0

    def set_gravity(self, gravity: int) -> None:
        del gravity

    def get_gravity(self) -> int:
        return Gravity.NO_GRAVITY

    def set_input_type(self, input_type: int) -> None:
        del input_type

    def get_input_type(self) -> int:
        return InputType.TYPE_NULL

    def set_typeface(self, typeface: Any) -> None:
        del typeface

    def get_typeface(self) -> Any:
        return None

    def set_error(self, error: Any) -> None:
        del error

    def get_error(self) -> Any:
        return None

    def set_filters(self, filters: Sequence[Any]) -> None:
        del filters

    def get_filters(self) -> Sequence[Any]:
        return ()

    def set_lines(self, lines: int) -> None:
        del lines

    def get_line_count(self) -> int:
        return 0

    def set_links_clickable(self, clickable: bool) -> None:
        del clickable

    def get_links_clickable(self) -> bool:
        return False

    def set_movement_method(self, movement: Optional[MovementMethod]) -> None:
        del movement

    def get_movement_method(self) -> Optional[MovementMethod]:
        return None

    def set_transformation_method(self, method: Any) -> None:
        del method

    def get_transformation_method(self) -> Any:
        return None

    def set_text_appearance(self, context: Optional[Context], res_id: int) -> None:
        del context, res_id

    def get_layout(self) -> Any:
        return None

    def set_on_editor_action_listener(
        self, listener: Optional[OnEditorActionListener]
    ) -> None:
        del listener

    def on_editor_action(self, action_code: int) -> None:
        del action_code


class EditText(TextView):
    def select_all(self) -> None:
        pass


class PopupWindow:
    def __init__(
        self,
        content_view: Optional[View] = None,
        width: int = 0,
        height: int = 0,
        focusable: bool = False,
    ) -> None:
        del content_view, width, height, focusable

    def set_content_view(self, content_view: Optional[View]) -> None:
        del content_view

    def get_content_view(self) -> Optional[View]:
        return None

    def set_width(self, width: int) -> None:
        del width

    def get_width(self) -> int:
        return 0

    def set_height(self, height: int) -> None:
        del height

    def get_height(self) -> int:
        return 0

    def set_focusable(self, focusable: bool) -> None:
        del focusable

    def is_focusable(self) -> bool:
        return False

    def set_touchable(self, touchable: bool) -> None:
        del touchable

    def is_touchable(self) -> bool:
        return False

    def set_outside_touchable(self, touchable: bool) -> None:
        del touchable

    def is_outside_touchable(self) -> bool:
        return False

    def is_showing(self) -> bool:
        return False

    def dismiss(self) -> None:
        pass

    def set_background_drawable(self, background: Any) -> None:
        del background

    def get_background(self) -> Any:
        return None

    def set_touch_interceptor(self, listener: Optional[OnTouchListener]) -> None:
        del listener

    def show_as_drop_down(self, anchor: View) -> None:
        del anchor


__all__ = [
    "EditorInfo",
    "Gravity",
    "InputType",
    "OnEditorActionListener",
    "MovementMethod",
    "TextView",
    "EditText",
    "PopupWindow",
]
