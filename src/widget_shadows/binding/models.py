"""Dataclasses describing shadow dispatch tables and registry scopes."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .errors import ShadowDeclarationError
from .markers import (
    CONSTRUCTOR_ATTR,
    IMPLEMENTATION_ATTR,
    RealObject,
    implemented_class,
)

RealKey = Union[type, str]


def qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def describe_key(key: RealKey) -> str:
    return key if isinstance(key, str) else qualified_name(key)


@dataclass(frozen=True, slots=True)
class ShadowSpec:
    """Dispatch table for one shadow class, built once at registration."""

    real: RealKey
    shadow_class: type
    overrides: Mapping[str, Callable[..., Any]] = field(default_factory=dict)
    constructor: Optional[Callable[..., Any]] = None
    real_slot: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))

    @classmethod
    def build(cls, shadow_class: type, real: Optional[RealKey] = None) -> "ShadowSpec":
        target = real if real is not None else implemented_class(shadow_class)
        if target is None:
            raise ShadowDeclarationError(
                shadow_class, "no @implements marker and no real class given"
            )

        targets: Dict[str, str] = {}
        constructor_attr: Optional[str] = None
        real_slot: Optional[str] = None
        # base classes first so subclasses win on conflicting names
        for klass in reversed(shadow_class.__mro__):
            if klass is object:
                continue
            declared_constructors = []
            for attr, value in vars(klass).items():
                if isinstance(value, RealObject):
                    real_slot = attr
                    continue
                if getattr(value, CONSTRUCTOR_ATTR, False):
                    declared_constructors.append(attr)
                target_name = getattr(value, IMPLEMENTATION_ATTR, None)
                if target_name is None:
                    continue
                if target_name == "__init__":
                    raise ShadowDeclarationError(
                        shadow_class, f"'{attr}' overrides __init__; use @constructor"
                    )
                targets[target_name] = attr
            if len(declared_constructors) > 1:
                raise ShadowDeclarationError(
                    klass,
                    f"multiple @constructor hooks: {sorted(declared_constructors)}",
                )
            if declared_constructors:
                constructor_attr = declared_constructors[0]

        return cls(
            real=target,
            shadow_class=shadow_class,
            overrides={name: getattr(shadow_class, attr) for name, attr in targets.items()},
            constructor=(
                getattr(shadow_class, constructor_attr) if constructor_attr else None
            ),
            real_slot=real_slot,
        )

    @property
    def name(self) -> str:
        return self.shadow_class.__qualname__

    def overrides_method(self, method_name: str) -> bool:
        return method_name in self.overrides

    def instantiate(self, real: object) -> Any:
        shadow = self.shadow_class()
        if self.real_slot is not None:
            setattr(shadow, self.real_slot, real)
        return shadow


@dataclass(slots=True)
class SessionLayer:
    """One test's override set, stacked above the global mapping."""

    token: int
    label: str = ""
    mappings: Dict[RealKey, ShadowSpec] = field(default_factory=dict)


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    global_count: int
    session_depth: int
    session_count: int
    revision: int


__all__ = [
    "RealKey",
    "ShadowSpec",
    "SessionLayer",
    "RegistryStats",
    "qualified_name",
    "describe_key",
]
