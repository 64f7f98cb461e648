"""Shadow registry: which shadow class stands in for which real class.

Two scopes exist. The *global* mapping lives for the whole process; *session*
layers are pushed per test and stacked on top of it. Registering the same real
class twice in one scope replaces the earlier mapping (last write wins) and is
reported as a ``registry.replace`` event.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Dict, Iterable, Iterator, Literal, Optional

from widget_shadows.runtime.telemetry import record_event, span

from .errors import ShadowRegistryError
from .markers import implemented_class
from .models import (
    RealKey,
    RegistryStats,
    SessionLayer,
    ShadowSpec,
    describe_key,
    qualified_name,
)

Scope = Literal["global", "session"]
SessionListener = Callable[[SessionLayer], None]


class ShadowRegistry:
    """Owns the global mapping and the stack of session layers."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._global: Dict[RealKey, ShadowSpec] = {}
        self._sessions: list[SessionLayer] = []
        self._spec_cache: Dict[tuple[type, RealKey], ShadowSpec] = {}
        self._end_listeners: list[SessionListener] = []
        self._logger_name = logger_name
        self._revision = 0
        self._next_token = 1

    def revision(self) -> int:
        return self._revision

    @property
    def active_session(self) -> Optional[SessionLayer]:
        return self._sessions[-1] if self._sessions else None

    def register(
        self,
        real: RealKey,
        shadow_class: type,
        *,
        scope: Scope = "global",
    ) -> ShadowSpec:
        with span(
            "registry::register",
            logger_name=self._logger_name,
            component="registry",
            metadata={
                "real": describe_key(real),
                "shadow": shadow_class.__qualname__,
                "scope": scope,
            },
        ) as handle:
            table = self._table_for(scope)
            spec = self._spec_for(shadow_class, real)
            previous = table.get(real)
            table[real] = spec
            if previous is not None and previous is not spec:
                handle.add_metadata("replaced", previous.name)
                record_event(
                    "registry.replace",
                    level="debug",
                    data={
                        "real": describe_key(real),
                        "scope": scope,
                        "previous": previous.name,
                        "current": spec.name,
                    },
                    logger_name=self._logger_name,
                )
            self._touch()
            return spec

    def register_shadow(
        self, shadow_class: type, *, scope: Scope = "global"
    ) -> ShadowSpec:
        """Register ``shadow_class`` under the real class named by ``@implements``."""

        spec = self._spec_for(shadow_class, None)
        return self.register(spec.real, shadow_class, scope=scope)

    def unregister(
        self, real: RealKey, *, scope: Scope = "global"
    ) -> Optional[ShadowSpec]:
        with span(
            "registry::unregister",
            logger_name=self._logger_name,
            component="registry",
            metadata={"real": describe_key(real), "scope": scope},
        ):
            removed = self._table_for(scope).pop(real, None)
            if removed is not None:
                self._touch()
            return removed

    def resolve(self, real_class: type) -> Optional[ShadowSpec]:
        """Most specific mapping for ``real_class``, or ``None`` for no interception.

        Walks the MRO; at each class the session layers are consulted
        innermost-first before the global mapping.
        """

        for klass in real_class.__mro__:
            if klass is object:
                break
            keys = (klass, qualified_name(klass))
            for layer in reversed(self._sessions):
                spec = _lookup(layer.mappings, keys)
                if spec is not None:
                    return spec
            spec = _lookup(self._global, keys)
            if spec is not None:
                return spec
        return None

    def begin_session(
        self, overrides: Iterable[type] = (), *, label: str = ""
    ) -> SessionLayer:
        layer = SessionLayer(token=self._next_token, label=label)
        self._next_token += 1
        with span(
            "registry::begin_session",
            logger_name=self._logger_name,
            component="registry",
            metadata={"token": layer.token, "label": label},
        ):
            for shadow_class in overrides:
                spec = self._spec_for(shadow_class, None)
                layer.mappings[spec.real] = spec
            self._sessions.append(layer)
            self._touch()
        record_event(
            "registry.session_begin",
            level="debug",
            data={"token": layer.token, "overrides": len(layer.mappings)},
            logger_name=self._logger_name,
        )
        return layer

    def end_session(self) -> SessionLayer:
        if not self._sessions:
            raise ShadowRegistryError("end_session() called with no active session")
        layer = self._sessions.pop()
        self._touch()
        for listener in list(self._end_listeners):
            listener(layer)
        record_event(
            "registry.session_end",
            level="debug",
            data={"token": layer.token},
            logger_name=self._logger_name,
        )
        return layer

    @contextmanager
    def session(
        self, overrides: Iterable[type] = (), *, label: str = ""
    ) -> Iterator[SessionLayer]:
        layer = self.begin_session(overrides, label=label)
        try:
            yield layer
        finally:
            if self.active_session is layer:
                self.end_session()

    def on_session_end(self, listener: SessionListener) -> None:
        self._end_listeners.append(listener)

    def stats(self) -> RegistryStats:
        return RegistryStats(
            global_count=len(self._global),
            session_depth=len(self._sessions),
            session_count=sum(len(layer.mappings) for layer in self._sessions),
            revision=self._revision,
        )

    def _table_for(self, scope: Scope) -> Dict[RealKey, ShadowSpec]:
        if scope == "global":
            return self._global
        if scope == "session":
            layer = self.active_session
            if layer is None:
                raise ShadowRegistryError(
                    "scope='session' requires an active session; call begin_session()"
                )
            return layer.mappings
        raise ValueError(f"Unknown scope '{scope}'")

    def _spec_for(self, shadow_class: type, real: Optional[RealKey]) -> ShadowSpec:
        target = real if real is not None else implemented_class(shadow_class)
        cached = self._spec_cache.get((shadow_class, target))
        if cached is not None:
            return cached
        spec = ShadowSpec.build(shadow_class, target)
        self._spec_cache[(shadow_class, spec.real)] = spec
        return spec

    def _touch(self) -> None:
        self._revision += 1


def _lookup(
    table: Dict[RealKey, ShadowSpec], keys: tuple[RealKey, ...]
) -> Optional[ShadowSpec]:
    for key in keys:
        spec = table.get(key)
        if spec is not None:
            return spec
    return None


__all__ = ["ShadowRegistry", "Scope"]
