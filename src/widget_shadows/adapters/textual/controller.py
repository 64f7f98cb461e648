"""Inspector that mirrors a shadowed ``TextView`` into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from widget_shadows.binding import DispatchRouter
from widget_shadows.environment import shadow_of
from widget_shadows.host.widget import TextView
from widget_shadows.shadows.text import EditableText


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(frozen=True, slots=True)
class TextMirror:
    """Immutable snapshot of a text view's buffer."""

    text: str
    selection: Optional[Tuple[int, int]]
    spans: Tuple[Tuple[str, int, int], ...]
    version: int

    @classmethod
    def capture(cls, editable: EditableText) -> "TextMirror":
        records = tuple(editable.spans)
        return cls(
            text=editable.text,
            selection=(
                (editable.selection.start, editable.selection.end)
                if editable.selection is not None
                else None
            ),
            spans=tuple(
                (type(record.what).__name__, record.start, record.end)
                for record in records
            ),
            version=editable.version,
        )


@dataclass(slots=True)
class InspectorHooks:
    """Callbacks invoked by the inspector to update widgets."""

    update_text: Callable[[TextMirror], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextViewInspector:
    """Watches a text view and turns key presses into widget calls.

    The inspector registers itself as a text watcher, so every mutation
    (including ones made by other code) refreshes the mirror.
    """

    def __init__(
        self,
        view: TextView,
        hooks: InspectorHooks,
        *,
        router: Optional[DispatchRouter] = None,
    ) -> None:
        self.view = view
        self.hooks = hooks
        # fail early with ShadowBindingError when nothing shadows the view
        if router is not None:
            router.shadow_of(view)
        else:
            shadow_of(view)
        view.add_text_changed_listener(self)
        self._refresh()

    @property
    def editable(self) -> EditableText:
        return self.view.get_editable_text()

    def detach(self) -> None:
        self.view.remove_text_changed_listener(self)

    # -- input ------------------------------------------------------------

    def handle_key(self, key: str, *, text: Optional[str] = None) -> bool:
        """Apply one key press; returns ``False`` when the key is not handled."""

        self._log("key ->", key=key, text=text)
        if key == "backspace":
            length = self.view.length()
            if length:
                self.editable.delete(length - 1, length)
        elif key == "enter":
            self.view.append("\n")
        elif key == "ctrl+a":
            self.view.set_selection(0, self.view.length())
            self._refresh()
        elif key == "ctrl+l":
            self.view.set_text("")
        elif text:
            self.view.append(text)
        else:
            return False
        return True

    # -- watcher protocol -------------------------------------------------

    def before_text_changed(self, text: str, start: int, count: int, after: int) -> None:
        self._log(
            "before ->", length=len(text), start=start, removed=count, inserted=after
        )

    def on_text_changed(self, text: str, start: int, before: int, count: int) -> None:
        payload = {"start": start, "removed": before, "inserted": count}
        self.hooks.handle_event("text.changed", payload)
        self.hooks.update_status(f"changed@{start} -{before} +{count}")

    def after_text_changed(self, editable: Any) -> None:
        del editable
        self._refresh()

    # -- helpers ----------------------------------------------------------

    def _refresh(self) -> None:
        self.hooks.update_text(TextMirror.capture(self.editable))

    def _log(self, prefix: str, **fields: object) -> None:
        editable = self.editable
        snapshot: Dict[str, object] = {
            "version": editable.version,
            "length": len(editable),
            "selection": editable.selection,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = ["TextMirror", "InspectorHooks", "TextViewInspector"]
