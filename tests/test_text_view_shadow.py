from __future__ import annotations

from typing import Any, List, Tuple

import pytest

from widget_shadows import shadow_of
from widget_shadows.binding import DispatchRouter, implementation, implements
from widget_shadows.host import (
    Context,
    EditorInfo,
    EditText,
    Gravity,
    MotionEvent,
    TextView,
    TypedValue,
)
from widget_shadows.shadows import ShadowTextView
from widget_shadows.shadows.text import InvalidRangeError, UnsupportedArgumentError


class Watcher:
    def __init__(self) -> None:
        self.calls: List[Tuple[Any, ...]] = []

    def before_text_changed(self, text: str, start: int, count: int, after: int) -> None:
        self.calls.append(("before", text, start, count, after))

    def on_text_changed(self, text: str, start: int, before: int, count: int) -> None:
        self.calls.append(("on", text, start, before, count))

    def after_text_changed(self, editable: Any) -> None:
        self.calls.append(("after", str(editable)))


def make_view(text: str = "") -> TextView:
    view = TextView(Context())
    if text:
        view.set_text(text)
    return view


def test_text_round_trips_through_shadow(shadow_router: DispatchRouter) -> None:
    view = make_view()

    view.set_text("hello")
    view.append(" world")

    assert view.get_text() == "hello world"
    assert view.length() == 11
    assert str(view.get_editable_text()) == "hello world"


def test_set_text_none_clears(shadow_router: DispatchRouter) -> None:
    view = make_view("abc")

    view.set_text(None)

    assert view.get_text() == ""


def test_watchers_see_append_in_order(shadow_router: DispatchRouter) -> None:
    view = make_view("12")
    watcher = Watcher()
    view.add_text_changed_listener(watcher)

    view.append("3")

    assert watcher.calls == [
        ("before", "12", 2, 0, 1),
        ("on", "123", 2, 0, 1),
        ("after", "123"),
    ]


def test_removed_watcher_is_not_notified(shadow_router: DispatchRouter) -> None:
    view = make_view()
    first, second = Watcher(), Watcher()
    view.add_text_changed_listener(first)
    view.add_text_changed_listener(second)

    view.remove_text_changed_listener(first)
    view.set_text("x")

    assert first.calls == []
    assert len(second.calls) == 3
    assert shadow_of(view).get_watchers() == [second]


def test_selection_follows_append_at_tail(shadow_router: DispatchRouter) -> None:
    view = make_view("12")
    view.set_selection(2, 2)

    view.append("3")

    assert (view.get_selection_start(), view.get_selection_end()) == (3, 3)


def test_selection_defaults_and_validation(shadow_router: DispatchRouter) -> None:
    view = make_view("abc")

    assert view.get_selection_start() == -1
    assert view.has_selection() is False
    with pytest.raises(InvalidRangeError):
        view.set_selection(1, 9)

    view.set_selection(1, 3)
    assert view.has_selection() is True


def test_select_all_on_edit_text(shadow_router: DispatchRouter) -> None:
    field = EditText(Context())
    field.set_text("select me")

    field.select_all()

    assert (field.get_selection_start(), field.get_selection_end()) == (0, 9)


def test_get_urls_scans_text(shadow_router: DispatchRouter) -> None:
    view = make_view("see https://example.com/a and ftp://files.example.org now")

    urls = [span.get_url() for span in view.get_urls()]

    assert urls == ["https://example.com/a", "ftp://files.example.org"]


def test_text_size_units(shadow_router: DispatchRouter) -> None:
    context = Context()
    resources = shadow_of(context.get_resources())
    resources.set_density(2.0)
    resources.set_scaled_density(1.5)
    view = TextView(context)

    view.set_text_size(TypedValue.COMPLEX_UNIT_PX, 10)
    assert view.get_text_size() == 10.0
    view.set_text_size(TypedValue.COMPLEX_UNIT_DIP, 10)
    assert view.get_text_size() == 20.0
    view.set_text_size(TypedValue.COMPLEX_UNIT_SP, 10)
    assert view.get_text_size() == 15.0

    with pytest.raises(UnsupportedArgumentError):
        view.set_text_size(TypedValue.COMPLEX_UNIT_MM, 10)


def test_editor_action_reaches_listener(shadow_router: DispatchRouter) -> None:
    view = make_view()
    seen: List[Tuple[Any, int, Any]] = []

    class Listener:
        def on_editor_action(self, source: Any, action: int, event: Any) -> bool:
            seen.append((source, action, event))
            return True

    view.set_on_editor_action_listener(Listener())
    shadow_of(view).trigger_editor_action(EditorInfo.IME_ACTION_GO)

    assert seen == [(view, EditorInfo.IME_ACTION_GO, None)]


def test_movement_method_receives_touch_events(shadow_router: DispatchRouter) -> None:
    view = make_view("tap")
    received: List[Tuple[Any, str, int]] = []

    class Movement:
        def on_touch_event(self, widget: Any, text: Any, event: MotionEvent) -> bool:
            received.append((widget, str(text), event.action))
            return True

    view.set_movement_method(Movement())
    event = MotionEvent.obtain(0, 0, MotionEvent.ACTION_UP, 1.0, 1.0)

    assert view.dispatch_touch_event(event) is True
    assert received == [(view, "tap", MotionEvent.ACTION_UP)]


def test_plain_properties_are_stored(shadow_router: DispatchRouter) -> None:
    view = make_view("one\ntwo")
    filters = ("max-length",)

    view.set_hint("type here")
    view.set_text_color(0xFF00FF00)
    view.set_gravity(Gravity.CENTER)
    view.set_filters(filters)
    view.set_links_clickable(True)
    view.set_error("required")
    view.set_text_appearance(view.get_context(), 42)

    assert view.get_hint() == "type here"
    assert view.get_current_text_color() == 0xFF00FF00
    assert view.get_gravity() == Gravity.CENTER
    assert view.get_filters() == filters
    assert view.get_links_clickable() is True
    assert view.get_error() == "required"
    assert view.get_line_count() == 2
    assert shadow_of(view).get_text_appearance_id() == 42

    view.set_lines(5)
    assert view.get_line_count() == 5


@implements(TextView)
class ShadowShoutingTextView(ShadowTextView):
    @implementation
    def get_text(self) -> str:
        return super().get_text().upper()


@pytest.mark.shadows.with_args(ShadowShoutingTextView)
def test_marker_layers_custom_shadow(shadow_router: DispatchRouter) -> None:
    view = make_view("quiet")

    assert view.get_text() == "QUIET"
    assert shadow_router.registry.stats().session_depth == 1


def test_marker_does_not_leak_into_next_test(shadow_router: DispatchRouter) -> None:
    assert make_view("quiet").get_text() == "quiet"
