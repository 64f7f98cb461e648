"""Entry points for building a ready-to-use shadow environment."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterable, Iterator, Optional

from widget_shadows.binding import DispatchRouter, ShadowBindingError, ShadowRegistry
from widget_shadows.binding.models import qualified_name
from widget_shadows.binding.router import ROUTER_ATTR
from widget_shadows.host import HOST_CLASSES
from widget_shadows.runtime import telemetry
from widget_shadows.shadows import load_default_shadows


def create_router(
    *,
    load_defaults: bool = True,
    instrument: bool = True,
    classes: Optional[Iterable[type]] = None,
    logger_name: str | None = None,
) -> DispatchRouter:
    """Router with the built-in shadows registered and host classes patched."""

    router = DispatchRouter(
        ShadowRegistry(logger_name="widget_shadows.registry"), logger_name=logger_name
    )
    if load_defaults:
        load_default_shadows(router.registry)
    if instrument:
        router.instrument(*(HOST_CLASSES if classes is None else tuple(classes)))
    telemetry.record_event(
        "environment.router_created",
        level="debug",
        data={
            "defaults": load_defaults,
            "instrumented": instrument,
            "registered": router.registry.stats().global_count,
        },
        logger_name="widget_shadows.environment",
    )
    return router


@contextmanager
def shadow_environment(
    *overrides: type, router: Optional[DispatchRouter] = None, label: str = ""
) -> Iterator[DispatchRouter]:
    """Run a block with ``overrides`` layered over the default shadows.

    A router created here is restored on exit; a router passed in only has
    its session popped.
    """

    owned = router is None
    active = router if router is not None else create_router()
    try:
        with active.session(overrides, label=label):
            yield active
    finally:
        if owned:
            active.restore()


def shadow_of(real: Any) -> Any:
    """Shadow bound to ``real`` through the router that instruments its class."""

    router = getattr(type(real), ROUTER_ATTR, None)
    if router is None:
        raise ShadowBindingError(
            f"{qualified_name(type(real))} is not instrumented", real=real
        )
    return router.shadow_of(real)


__all__ = ["create_router", "shadow_environment", "shadow_of"]
