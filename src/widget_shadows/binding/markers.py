"""Declarative markers shadow authors put on their classes.

A shadow class looks like this::

    @implements(PopupWindow)
    class ShadowPopupWindow:
        real = RealObject()

        @constructor
        def __constructor__(self, content_view, width=0, height=0, focusable=False):
            ...

        @implementation
        def get_width(self):
            return self._width

Only methods carrying ``@implementation`` replace host behaviour. Any other
public method on the shadow is reachable solely through ``shadow_of``.
"""

from __future__ import annotations

import weakref
from typing import Any, Callable, Optional, TypeVar, overload

IMPLEMENTS_ATTR = "__shadow_implements__"
IMPLEMENTATION_ATTR = "__shadow_implementation__"
CONSTRUCTOR_ATTR = "__shadow_constructor__"

ShadowT = TypeVar("ShadowT", bound=type)
FuncT = TypeVar("FuncT", bound=Callable[..., Any])


def implements(real: type | str) -> Callable[[ShadowT], ShadowT]:
    """Mark a class as the shadow for ``real`` (a class or dotted class name)."""

    if not isinstance(real, (type, str)) or (isinstance(real, str) and not real):
        raise TypeError("implements() expects a class or a dotted class name")

    def decorate(shadow_cls: ShadowT) -> ShadowT:
        setattr(shadow_cls, IMPLEMENTS_ATTR, real)
        return shadow_cls

    return decorate


def implemented_class(shadow_cls: type) -> Optional[type | str]:
    return getattr(shadow_cls, IMPLEMENTS_ATTR, None)


@overload
def implementation(func: FuncT) -> FuncT: ...


@overload
def implementation(*, name: str) -> Callable[[FuncT], FuncT]: ...


def implementation(func: Any = None, *, name: Optional[str] = None) -> Any:
    """Mark a shadow method as the override for the host method of the same name.

    ``@implementation(name="...")`` overrides a host method whose name differs
    from the shadow method's own name.
    """

    def decorate(target: FuncT) -> FuncT:
        setattr(target, IMPLEMENTATION_ATTR, name or target.__name__)
        return target

    if func is not None:
        return decorate(func)
    return decorate


def constructor(func: FuncT) -> FuncT:
    """Mark the single method that replaces the host ``__init__``."""

    setattr(func, CONSTRUCTOR_ATTR, True)
    return func


class RealObject:
    """Slot receiving the real instance a shadow stands in for.

    The slot keeps a weak reference: the real object owns its shadow, never the
    other way round.
    """

    def __init__(self) -> None:
        self.name = ""
        self._storage = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self._storage = f"_real_object_{name}"

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        ref = instance.__dict__.get(self._storage)
        return ref() if ref is not None else None

    def __set__(self, instance: Any, value: Any) -> None:
        instance.__dict__[self._storage] = weakref.ref(value) if value is not None else None


__all__ = [
    "implements",
    "implemented_class",
    "implementation",
    "constructor",
    "RealObject",
    "IMPLEMENTS_ATTR",
    "IMPLEMENTATION_ATTR",
    "CONSTRUCTOR_ATTR",
]
