"""Executable Textual app that drives a shadowed ``EditText``."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Any, Optional, Sequence

try:  # pragma: no cover - imported only when the inspector is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use widget_shadows.adapters.textual.app"
    ) from exc

from widget_shadows.binding import DispatchRouter
from widget_shadows.environment import create_router
from widget_shadows.host import Context, EditText

from .controller import InspectorHooks, TextMirror, TextViewInspector


@dataclass
class UIState:
    text: str = ""
    status_text: str = ""
    spans_text: str = ""


def render_mirror(mirror: TextMirror) -> str:
    """Text with the selection bracketed, e.g. ``ab[cd]e`` or ``abc|``."""

    if mirror.selection is None:
        return mirror.text
    start, end = mirror.selection
    if start == end:
        return f"{mirror.text[:start]}|{mirror.text[start:]}"
    return f"{mirror.text[:start]}[{mirror.text[start:end]}]{mirror.text[end:]}"


class WidgetInspectorApp(App[None]):
    """Minimal Textual UI typing into a shadowed text field."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#text-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		content-align: left top;
		overflow: auto;
	}

	#spans-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, initial_text: str = "") -> None:
        super().__init__()
        self._state = UIState()
        self._initial_text = initial_text
        self.router: DispatchRouter | None = None
        self.inspector: TextViewInspector | None = None
        self._text_widget: Static | None = None
        self._spans_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="text-area"):
            self._text_widget = Static("", id="text-view")
            yield self._text_widget
        self._spans_widget = Static("", id="spans-line")
        self._status_widget = Static("", id="status-line")
        yield self._spans_widget
        yield self._status_widget
        yield Footer()

    async def on_mount(self) -> None:
        self.router = create_router()
        view = EditText(Context())
        view.set_text(self._initial_text)
        hooks = InspectorHooks(
            update_text=self._update_text,
            update_status=self._update_status,
            handle_event=self._handle_event,
        )
        self.inspector = TextViewInspector(view, hooks, router=self.router)

    async def on_unmount(self) -> None:
        if self.inspector:
            self.inspector.detach()
            self.inspector = None
        if self.router:
            self.router.restore()
            self.router = None

    async def on_key(self, event: events.Key) -> None:
        if not self.inspector or event.key in {"ctrl+c", "ctrl+q"}:
            return
        text = event.character if event.is_printable else None
        if self.inspector.handle_key(event.key, text=text):
            event.stop()

    def _update_text(self, mirror: TextMirror) -> None:
        self._state.text = render_mirror(mirror)
        self._state.spans_text = " ".join(
            f"{name}[{start},{end})" for name, start, end in mirror.spans
        )
        if self._text_widget:
            self._text_widget.update(self._state.text)
        if self._spans_widget:
            self._spans_widget.update(self._state.spans_text)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if isinstance(payload, dict):
            self._update_status(f"{name}:{payload.get('inserted', 0)}")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Type into a shadowed EditText and watch its state."
    )
    parser.add_argument(
        "--text",
        default=os.environ.get("WIDGET_SHADOWS_INSPECTOR_TEXT", ""),
        help="Initial text for the field",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    app = WidgetInspectorApp(initial_text=args.text)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
