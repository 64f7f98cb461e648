"""Shadow for ``TextView`` hosting the editable text state machine."""

from __future__ import annotations

import re
from typing import Any, List, Optional, Sequence

from widget_shadows.binding import implementation, implements
from widget_shadows.host.content import DisplayMetrics
from widget_shadows.host.text import TextWatcher, TypedValue, URLSpan
from widget_shadows.host.view import MotionEvent
from widget_shadows.host.widget import (
    EditText,
    Gravity,
    InputType,
    MovementMethod,
    OnEditorActionListener,
    TextView,
)
from widget_shadows.runtime.config import load_settings

from .text import EditableText, UnsupportedArgumentError
from .view import ShadowView

URL_PATTERN = re.compile(r"(?:https?|ftp)://[^\s]+")
DEFAULT_TEXT_SIZE_SP = 14.0


@implements(TextView)
class ShadowTextView(ShadowView):
    """Text, selection and watchers live in one :class:`EditableText`."""

    def __init__(self) -> None:
        super().__init__()
        self._editable = EditableText(name="text_view")
        self._text_size: Optional[float] = None
        self._text_color = 0
        self._hint: Optional[str] = None
        self._hint_color = 0
        self._gravity = Gravity.TOP | Gravity.LEFT
        self._input_type = InputType.TYPE_NULL
        self._typeface: Any = None
        self._error: Any = None
        self._filters: Sequence[Any] = ()
        self._lines: Optional[int] = None
        self._links_clickable = False
        self._movement: Optional[MovementMethod] = None
        self._transformation: Any = None
        self._text_appearance_id = 0
        self._layout: Any = None
        self._editor_listener: Optional[OnEditorActionListener] = None

    # -- text -------------------------------------------------------------

    @implementation
    def set_text(self, text: Any) -> None:
        self._editable.set_text(text)

    @implementation
    def get_text(self) -> str:
        return self._editable.text

    @implementation
    def append(self, text: Any) -> None:
        self._editable.append(text)

    @implementation
    def length(self) -> int:
        return len(self._editable)

    @implementation
    def get_editable_text(self) -> EditableText:
        return self._editable

    # -- selection --------------------------------------------------------

    @implementation
    def set_selection(self, start: int, end: Optional[int] = None) -> None:
        self._editable.set_selection(start, end)

    @implementation
    def get_selection_start(self) -> int:
        return self._editable.selection_start()

    @implementation
    def get_selection_end(self) -> int:
        return self._editable.selection_end()

    @implementation
    def has_selection(self) -> bool:
        return self._editable.has_selection()

    # -- watchers ---------------------------------------------------------

    @implementation
    def add_text_changed_listener(self, watcher: TextWatcher) -> None:
        self._editable.add_watcher(watcher)

    @implementation
    def remove_text_changed_listener(self, watcher: TextWatcher) -> None:
        self._editable.remove_watcher(watcher)

    def get_watchers(self) -> List[TextWatcher]:
        """Test-only: registered watchers in notification order."""

        return list(self._editable.watchers)

    # -- derived ----------------------------------------------------------

    @implementation
    def get_urls(self) -> List[URLSpan]:
        """URL spans for every link-looking run in the current text."""

        return [URLSpan(match.group(0)) for match in URL_PATTERN.finditer(self._editable.text)]

    @implementation
    def set_text_size(self, unit: int, size: float) -> None:
        metrics = self._display_metrics()
        if unit == TypedValue.COMPLEX_UNIT_PX:
            self._text_size = float(size)
        elif unit == TypedValue.COMPLEX_UNIT_DIP:
            self._text_size = size * metrics.density
        elif unit == TypedValue.COMPLEX_UNIT_SP:
            self._text_size = size * metrics.scaled_density
        else:
            raise UnsupportedArgumentError(f"Unsupported text size unit: {unit}")

    @implementation
    def get_text_size(self) -> float:
        if self._text_size is None:
            return DEFAULT_TEXT_SIZE_SP * self._display_metrics().scaled_density
        return self._text_size

    @implementation
    def get_line_count(self) -> int:
        if self._lines is not None:
            return self._lines
        text = self._editable.text
        return text.count("\n") + 1 if text else 0

    @implementation
    def set_lines(self, lines: int) -> None:
        self._lines = lines

    def _display_metrics(self) -> DisplayMetrics:
        context = self._context
        resources = context.get_resources() if context is not None else None
        if resources is None:
            settings = load_settings()
            return DisplayMetrics(settings.density, settings.scaled_density)
        return resources.get_display_metrics()

    # -- events -----------------------------------------------------------

    @implementation
    def set_on_editor_action_listener(
        self, listener: Optional[OnEditorActionListener]
    ) -> None:
        self._editor_listener = listener

    @implementation
    def on_editor_action(self, action_code: int) -> None:
        if self._editor_listener is not None:
            self._editor_listener.on_editor_action(self.real, action_code, None)

    def trigger_editor_action(self, action_code: int) -> None:
        """Test-only: act as if the IME fired ``action_code``."""

        self.real.on_editor_action(action_code)

    @implementation
    def set_movement_method(self, movement: Optional[MovementMethod]) -> None:
        self._movement = movement

    @implementation
    def get_movement_method(self) -> Optional[MovementMethod]:
        return self._movement

    @implementation
    def on_touch_event(self, event: MotionEvent) -> bool:
        if self._movement is None:
            return False
        return bool(self._movement.on_touch_event(self.real, self._editable, event))

    # -- plain storage ----------------------------------------------------

    @implementation
    def set_text_color(self, color: int) -> None:
        self._text_color = color

    @implementation
    def get_current_text_color(self) -> int:
        return self._text_color

    @implementation
    def set_hint(self, hint: Any) -> None:
        self._hint = None if hint is None else str(hint)

    @implementation
    def get_hint(self) -> Optional[str]:
        return self._hint

    @implementation
    def set_hint_text_color(self, color: int) -> None:
        self._hint_color = color

    @implementation
    def get_current_hint_text_color(self) -> int:
        return self._hint_color

    @implementation
    def set_gravity(self, gravity: int) -> None:
        self._gravity = gravity

    @implementation
    def get_gravity(self) -> int:
        return self._gravity

    @implementation
    def set_input_type(self, input_type: int) -> None:
        self._input_type = input_type

    @implementation
    def get_input_type(self) -> int:
        return self._input_type

    @implementation
    def set_typeface(self, typeface: Any) -> None:
        self._typeface = typeface

    @implementation
    def get_typeface(self) -> Any:
        return self._typeface

    @implementation
    def set_error(self, error: Any) -> None:
        self._error = error

    @implementation
    def get_error(self) -> Any:
        return self._error

    @implementation
    def set_filters(self, filters: Sequence[Any]) -> None:
        self._filters = filters

    @implementation
    def get_filters(self) -> Sequence[Any]:
        return self._filters

    @implementation
    def set_links_clickable(self, clickable: bool) -> None:
        self._links_clickable = bool(clickable)

    @implementation
    def get_links_clickable(self) -> bool:
        return self._links_clickable

    @implementation
    def set_transformation_method(self, method: Any) -> None:
        self._transformation = method

    @implementation
    def get_transformation_method(self) -> Any:
        return self._transformation

    @implementation
    def set_text_appearance(self, context: Any, res_id: int) -> None:
        del context
        self._text_appearance_id = res_id

    def get_text_appearance_id(self) -> int:
        return self._text_appearance_id

    @implementation
    def get_layout(self) -> Any:
        return self._layout

    def set_layout(self, layout: Any) -> None:
        self._layout = layout


@implements(EditText)
class ShadowEditText(ShadowTextView):
    @implementation
    def select_all(self) -> None:
        self._editable.set_selection(0, len(self._editable))


__all__ = ["ShadowTextView", "ShadowEditText", "URL_PATTERN"]
