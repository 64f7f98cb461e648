"""Shadows for contexts, resources and the window manager."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from widget_shadows.binding import implementation, implements
from widget_shadows.host.content import (
    Context,
    DisplayMetrics,
    Resources,
    WindowManager,
)
from widget_shadows.runtime.config import load_settings


@implements(Context)
class ShadowContext:
    def __init__(self) -> None:
        self._services: Dict[str, Any] = {}
        self._resources: Optional[Resources] = None

    @implementation
    def get_system_service(self, name: str) -> Any:
        if name not in self._services and name == Context.WINDOW_SERVICE:
            self._services[name] = WindowManager()
        return self._services.get(name)

    @implementation
    def get_resources(self) -> Resources:
        if self._resources is None:
            self._resources = Resources()
        return self._resources

    def set_system_service(self, name: str, service: Any) -> None:
        """Test-only: install ``service`` under ``name``."""

        self._services[name] = service


@implements(Resources)
class ShadowResources:
    def __init__(self) -> None:
        settings = load_settings()
        self.density = settings.density
        self.scaled_density = settings.scaled_density

    @implementation
    def get_display_metrics(self) -> DisplayMetrics:
        return DisplayMetrics(density=self.density, scaled_density=self.scaled_density)

    def set_density(self, density: float) -> None:
        self.density = density

    def set_scaled_density(self, scaled_density: float) -> None:
        self.scaled_density = scaled_density


@implements(WindowManager)
class ShadowWindowManager:
    def __init__(self) -> None:
        self._views: List[Any] = []

    @implementation
    def add_view(self, view: Any, params: Any = None) -> None:
        del params
        self._views.append(view)

    @implementation
    def remove_view(self, view: Any) -> None:
        self._views = [existing for existing in self._views if existing is not view]

    def get_views(self) -> list[Any]:
        """Test-only: views currently attached, oldest first."""

        return list(self._views)


__all__ = ["ShadowContext", "ShadowResources", "ShadowWindowManager"]
