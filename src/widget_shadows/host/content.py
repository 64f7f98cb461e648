"""Host context, resources and window-manager types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(slots=True)
class DisplayMetrics:
    density: float = 1.0
    scaled_density: float = 1.0


class Context:
    """Entry point to system services and resources."""

    WINDOW_SERVICE = "window"

    def __init__(self) -> None:
        pass

    def get_system_service(self, name: str) -> Any:
        del name
        return None

    def get_resources(self) -> Optional["Resources"]:
        return None


class Resources:
    def __init__(self) -> None:
        pass

    def get_display_metrics(self) -> DisplayMetrics:
        return DisplayMetrics()


class WindowManager:
    def __init__(self) -> None:
        pass

    def add_view(self, view: Any, params: Any = None) -> None:
        del view, params

    def remove_view(self, view: Any) -> None:
        del view


__all__ = ["Context", "DisplayMetrics", "Resources", "WindowManager"]
