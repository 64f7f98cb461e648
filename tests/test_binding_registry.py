import pytest

from widget_shadows.binding import (
    ShadowDeclarationError,
    ShadowRegistry,
    ShadowRegistryError,
    ShadowSpec,
    constructor,
    implementation,
    implements,
    RealObject,
)


class Widget:
    def label(self) -> str:
        return "widget"


class Button(Widget):
    pass


@implements(Widget)
class ShadowWidget:
    real = RealObject()

    @implementation
    def label(self) -> str:
        return "shadow widget"


@implements(Widget)
class ShadowLoudWidget:
    @implementation
    def label(self) -> str:
        return "LOUD"


@implements(Button)
class ShadowButton(ShadowWidget):
    @implementation
    def label(self) -> str:
        return "shadow button"


def make_registry(*shadows: type) -> ShadowRegistry:
    registry = ShadowRegistry()
    for shadow_class in shadows:
        registry.register_shadow(shadow_class)
    return registry


def test_spec_collects_overrides_and_real_slot() -> None:
    spec = ShadowSpec.build(ShadowButton)

    assert spec.real is Button
    assert spec.overrides_method("label")
    assert spec.overrides["label"] is ShadowButton.label
    assert spec.real_slot == "real"
    assert spec.constructor is None


def test_spec_rejects_two_constructor_hooks() -> None:
    class Broken:
        @constructor
        def first(self) -> None:
            pass

        @constructor
        def second(self) -> None:
            pass

    with pytest.raises(ShadowDeclarationError):
        ShadowSpec.build(Broken, Widget)


def test_spec_requires_a_target() -> None:
    class Unmarked:
        pass

    with pytest.raises(ShadowDeclarationError):
        ShadowSpec.build(Unmarked)


def test_resolve_walks_the_mro() -> None:
    registry = make_registry(ShadowWidget)

    class FancyButton(Button):
        pass

    spec = registry.resolve(FancyButton)

    assert spec is not None
    assert spec.shadow_class is ShadowWidget


def test_resolve_prefers_most_specific_mapping() -> None:
    registry = make_registry(ShadowWidget, ShadowButton)

    assert registry.resolve(Button).shadow_class is ShadowButton
    assert registry.resolve(Widget).shadow_class is ShadowWidget


def test_resolve_unmapped_class_returns_none() -> None:
    registry = make_registry(ShadowWidget)

    assert registry.resolve(int) is None


def test_duplicate_registration_last_write_wins() -> None:
    registry = make_registry(ShadowWidget)
    before = registry.revision()

    registry.register_shadow(ShadowLoudWidget)

    assert registry.resolve(Widget).shadow_class is ShadowLoudWidget
    assert registry.stats().global_count == 1
    assert registry.revision() > before


def test_register_by_dotted_name() -> None:
    registry = ShadowRegistry()
    registry.register(f"{Widget.__module__}.{Widget.__qualname__}", ShadowLoudWidget)

    assert registry.resolve(Button).shadow_class is ShadowLoudWidget


def test_session_overrides_shadow_global_mapping() -> None:
    registry = make_registry(ShadowWidget)

    with registry.session([ShadowLoudWidget], label="loud") as layer:
        assert registry.active_session is layer
        assert registry.resolve(Widget).shadow_class is ShadowLoudWidget
        assert registry.stats().session_depth == 1

    assert registry.active_session is None
    assert registry.resolve(Widget).shadow_class is ShadowWidget


def test_nested_sessions_innermost_wins() -> None:
    registry = make_registry()
    registry.begin_session([ShadowWidget])
    registry.begin_session([ShadowLoudWidget])

    assert registry.resolve(Widget).shadow_class is ShadowLoudWidget
    registry.end_session()
    assert registry.resolve(Widget).shadow_class is ShadowWidget
    registry.end_session()
    assert registry.resolve(Widget) is None


def test_end_session_without_session_raises() -> None:
    registry = ShadowRegistry()

    with pytest.raises(ShadowRegistryError):
        registry.end_session()


def test_session_scope_requires_active_session() -> None:
    registry = ShadowRegistry()

    with pytest.raises(ShadowRegistryError):
        registry.register(Widget, ShadowWidget, scope="session")


def test_session_end_notifies_listeners() -> None:
    registry = ShadowRegistry()
    ended = []
    registry.on_session_end(ended.append)

    layer = registry.begin_session([ShadowWidget])
    registry.end_session()

    assert ended == [layer]


def test_unregister_removes_mapping() -> None:
    registry = make_registry(ShadowWidget)

    removed = registry.unregister(Widget)

    assert removed is not None and removed.shadow_class is ShadowWidget
    assert registry.resolve(Widget) is None
    assert registry.unregister(Widget) is None
