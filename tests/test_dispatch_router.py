from __future__ import annotations

import gc
from typing import Iterator, List

import pytest

from widget_shadows.binding import (
    DispatchRouter,
    RealObject,
    ShadowBindingError,
    constructor,
    implementation,
    implements,
)
from widget_shadows.runtime import telemetry


class Gadget:
    def __init__(self, name: str = "plain") -> None:
        self.name = name

    def describe(self) -> str:
        return f"gadget {self.name}"

    def ping(self) -> str:
        return "pong"

    def fail(self) -> None:
        pass


class Unshadowed:
    def __init__(self) -> None:
        self.ready = True

    def value(self) -> int:
        return 7


@implements(Gadget)
class ShadowGadget:
    real = RealObject()
    constructions: List[str] = []

    def __init__(self) -> None:
        self.name = ""

    @constructor
    def __constructor__(self, name: str = "plain") -> None:
        ShadowGadget.constructions.append(name)
        self.name = name.upper()

    @implementation
    def describe(self) -> str:
        return f"shadow {self.name}"

    @implementation
    def fail(self) -> None:
        raise KeyError("boom")

    def current_name(self) -> str:
        return self.name


@implements(Gadget)
class ShadowQuietGadget:
    @implementation
    def describe(self) -> str:
        return "quiet"


def make_router(*shadows: type) -> DispatchRouter:
    router = DispatchRouter()
    for shadow_class in shadows:
        router.registry.register_shadow(shadow_class)
    return router


@pytest.fixture
def router() -> Iterator[DispatchRouter]:
    ShadowGadget.constructions.clear()
    router = make_router(ShadowGadget)
    router.instrument(Gadget, Unshadowed)
    try:
        yield router
    finally:
        router.restore()


def test_constructor_hook_replaces_real_init(router: DispatchRouter) -> None:
    gadget = Gadget("blue")

    assert ShadowGadget.constructions == ["blue"]
    assert not hasattr(gadget, "name")
    assert router.shadow_of(gadget).current_name() == "BLUE"


def test_constructor_hook_runs_once_per_instance(router: DispatchRouter) -> None:
    gadget = Gadget("blue")
    gadget.__init__("again")

    assert ShadowGadget.constructions == ["blue"]


def test_override_is_authoritative(router: DispatchRouter) -> None:
    gadget = Gadget("red")

    assert gadget.describe() == "shadow RED"


def test_missing_override_falls_back_to_real_method(router: DispatchRouter) -> None:
    assert Gadget().ping() == "pong"


def test_unshadowed_class_runs_real_code(router: DispatchRouter) -> None:
    obj = Unshadowed()

    assert obj.ready is True
    assert obj.value() == 7
    with pytest.raises(ShadowBindingError):
        router.shadow_of(obj)


def test_shadow_exceptions_propagate(router: DispatchRouter) -> None:
    with pytest.raises(KeyError):
        Gadget().fail()


def test_binding_is_reference_stable(router: DispatchRouter) -> None:
    gadget = Gadget()

    first = router.shadow_of(gadget)
    gadget.describe()

    assert router.shadow_of(gadget) is first
    assert first.real is gadget
    assert router.binding_of(gadget).constructed is True


def test_distinct_instances_get_distinct_shadows(router: DispatchRouter) -> None:
    one, two = Gadget("one"), Gadget("two")

    assert router.shadow_of(one) is not router.shadow_of(two)


def test_binding_dies_with_real_object(router: DispatchRouter) -> None:
    gadget = Gadget()
    router.shadow_of(gadget)
    assert len(router.store) == 1

    del gadget
    gc.collect()

    assert len(router.store) == 0


def test_session_layer_is_isolated(router: DispatchRouter) -> None:
    outside = Gadget("outside")

    with router.session([ShadowQuietGadget]):
        inside = Gadget("inside")
        assert inside.describe() == "quiet"
        assert outside.describe() == "shadow OUTSIDE"

    # bindings made inside the session are dropped with it
    assert router.binding_of(inside) is None
    assert inside.describe() == "shadow "
    assert outside.describe() == "shadow OUTSIDE"


def test_restore_puts_original_methods_back(router: DispatchRouter) -> None:
    router.restore(Gadget)

    gadget = Gadget("real")

    assert gadget.describe() == "gadget real"
    assert not router.is_instrumented(Gadget)


def test_class_can_only_be_instrumented_by_one_router(router: DispatchRouter) -> None:
    other = make_router(ShadowGadget)

    with pytest.raises(ShadowBindingError):
        other.instrument(Gadget)


def test_on_invoke_without_binding_or_fallback_returns_none() -> None:
    router = DispatchRouter()

    assert router.on_invoke(object(), "anything") is None
    assert router.on_construct(Unshadowed()) is False


def test_constructor_hook_once_across_many_calls(router: DispatchRouter) -> None:
    gadget = Gadget("green")

    gadget.describe()
    gadget.ping()
    gadget.describe()

    assert ShadowGadget.constructions == ["green"]
    assert router.shadow_of(gadget).current_name() == "GREEN"


def test_router_logs_under_its_own_logger_name(monkeypatch: pytest.MonkeyPatch) -> None:
    requested: List[str] = []
    original = telemetry.get_logger

    def recording_get_logger(name: str | None = None) -> object:
        requested.append(name or "")
        return original(name)

    monkeypatch.setattr(telemetry, "get_logger", recording_get_logger)
    router = DispatchRouter(logger_name="tests.router")
    router.registry.register_shadow(ShadowGadget)
    router.instrument(Gadget)
    try:
        assert requested.count("tests.router") == 0
        Gadget("logged")
    finally:
        router.restore()

    assert "tests.router" in requested
