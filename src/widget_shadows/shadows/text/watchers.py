"""Ordered watcher list and the three-stage change notification."""

from __future__ import annotations

from typing import Any, Iterator, List

from widget_shadows.host.text import TextWatcher


class WatcherList:
    """Watchers in registration order.

    The same watcher may be added more than once; each entry fires on its own.
    Removal takes out the first entry that *is* the given watcher.
    """

    def __init__(self) -> None:
        self._watchers: List[TextWatcher] = []

    def __len__(self) -> int:
        return len(self._watchers)

    def __iter__(self) -> Iterator[TextWatcher]:
        return iter(tuple(self._watchers))

    def __contains__(self, watcher: object) -> bool:
        return any(existing is watcher for existing in self._watchers)

    def add(self, watcher: TextWatcher) -> None:
        self._watchers.append(watcher)

    def remove(self, watcher: TextWatcher) -> bool:
        for index, existing in enumerate(self._watchers):
            if existing is watcher:
                del self._watchers[index]
                return True
        return False

    def snapshot(self) -> tuple[TextWatcher, ...]:
        return tuple(self._watchers)


def notify_before(
    watchers: tuple[TextWatcher, ...], text: str, start: int, removed: int, inserted: int
) -> None:
    for watcher in watchers:
        watcher.before_text_changed(text, start, removed, inserted)


def notify_changed(
    watchers: tuple[TextWatcher, ...], text: str, start: int, removed: int, inserted: int
) -> None:
    for watcher in watchers:
        watcher.on_text_changed(text, start, removed, inserted)


def notify_after(watchers: tuple[TextWatcher, ...], editable: Any) -> None:
    for watcher in watchers:
        watcher.after_text_changed(editable)


__all__ = ["WatcherList", "notify_before", "notify_changed", "notify_after"]
