"""Dispatch router: routes construction and calls on real objects to shadows.

``instrument`` replaces ``__init__`` and every public function defined on a
host class with a trampoline that asks the router first. The trampoline for a
method calls :meth:`DispatchRouter.on_invoke` with the real method as the
fallback, so an unshadowed class, or a shadow without an override for the
name, keeps its own behaviour.
"""

from __future__ import annotations

import functools
import inspect
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterable, Iterator, Mapping, Optional

from widget_shadows.runtime import telemetry

from .errors import ShadowBindingError
from .models import SessionLayer, ShadowSpec, qualified_name
from .registry import ShadowRegistry
from .store import Binding, BindingStore

ROUTER_ATTR = "__shadow_router__"
TRAMPOLINE_ATTR = "__shadow_trampoline__"


class DispatchRouter:
    """Couples a registry and a binding store and intercepts host classes."""

    def __init__(
        self,
        registry: ShadowRegistry | None = None,
        store: BindingStore | None = None,
        *,
        logger_name: str | None = None,
    ) -> None:
        self._logger_name = logger_name or "widget_shadows.dispatch"
        self.registry = registry or ShadowRegistry(
            logger_name="widget_shadows.registry"
        )
        self.store = store or BindingStore()
        self._patched: Dict[type, Dict[str, Any]] = {}
        self.registry.on_session_end(self._drop_session_bindings)

    # -- interception -----------------------------------------------------

    def on_construct(
        self,
        real: object,
        args: tuple[Any, ...] = (),
        kwargs: Optional[Mapping[str, Any]] = None,
    ) -> bool:
        """Bind ``real`` and run its shadow's constructor hook.

        Returns ``True`` when the shadow took over construction; ``False``
        means the caller should run the real ``__init__``.
        """

        binding = self._binding_for(real)
        if binding is None:
            return False
        if binding.constructed:
            return True
        constructor = binding.spec.constructor
        if constructor is None:
            return False

        binding.constructed = True
        with telemetry.span(
            "dispatch::construct",
            logger_name=self._logger_name,
            component="dispatch",
            metadata={"real": type(real), "shadow": binding.spec.name},
        ):
            constructor(binding.shadow, *args, **dict(kwargs or {}))
        return True

    def on_invoke(
        self,
        real: object,
        method_name: str,
        args: tuple[Any, ...] = (),
        kwargs: Optional[Mapping[str, Any]] = None,
        *,
        fallback: Optional[Callable[..., Any]] = None,
    ) -> Any:
        """Call the shadow override for ``method_name`` or the fallback."""

        call_kwargs = dict(kwargs or {})
        binding = self._binding_for(real)
        override = binding.spec.overrides.get(method_name) if binding else None
        if override is None:
            if fallback is None:
                return None
            return fallback(*args, **call_kwargs)
        return override(binding.shadow, *args, **call_kwargs)

    def shadow_of(self, real: object) -> Any:
        """Return the shadow bound to ``real``, binding it on first access."""

        binding = self._binding_for(real)
        if binding is None:
            raise ShadowBindingError(
                f"No shadow registered for {qualified_name(type(real))}", real=real
            )
        return binding.shadow

    def binding_of(self, real: object) -> Optional[Binding]:
        return self.store.get(real)

    def _binding_for(self, real: object) -> Optional[Binding]:
        binding = self.store.get(real)
        if binding is not None:
            return binding
        spec = self.registry.resolve(type(real))
        if spec is None:
            return None
        return self._bind(real, spec)

    def _bind(self, real: object, spec: ShadowSpec) -> Binding:
        session = self.registry.active_session
        token = session.token if session is not None else 0
        binding = self.store.bind(real, spec, session_token=token)
        telemetry.record_event(
            "dispatch.bind",
            level="debug",
            data={"real": type(real), "shadow": spec.name, "session": token},
            logger_name=self._logger_name,
        )
        return binding

    # -- sessions ---------------------------------------------------------

    def begin_session(
        self, overrides: Iterable[type] = (), *, label: str = ""
    ) -> SessionLayer:
        return self.registry.begin_session(overrides, label=label)

    def end_session(self) -> SessionLayer:
        return self.registry.end_session()

    @contextmanager
    def session(
        self, overrides: Iterable[type] = (), *, label: str = ""
    ) -> Iterator[SessionLayer]:
        with self.registry.session(overrides, label=label) as layer:
            yield layer

    def _drop_session_bindings(self, layer: SessionLayer) -> None:
        dropped = self.store.discard_session(layer)
        if dropped:
            telemetry.record_event(
                "dispatch.session_bindings_dropped",
                level="debug",
                data={"session": layer.token, "count": dropped},
                logger_name=self._logger_name,
            )

    # -- instrumentation --------------------------------------------------

    def instrument(self, *classes: type) -> None:
        for cls in classes:
            if cls in self._patched:
                continue
            owner = cls.__dict__.get(ROUTER_ATTR)
            if owner is not None and owner is not self:
                raise ShadowBindingError(
                    f"{qualified_name(cls)} is already instrumented by another router"
                )
            originals: Dict[str, Any] = {}
            for attr, value in list(vars(cls).items()):
                if not _is_dispatchable(attr, value):
                    continue
                originals[attr] = value
                setattr(cls, attr, self._trampoline(attr, value))
            setattr(cls, ROUTER_ATTR, self)
            self._patched[cls] = originals

    def is_instrumented(self, cls: type) -> bool:
        return cls in self._patched

    def restore(self, *classes: type) -> None:
        """Put the original functions back; all classes when none are given."""

        targets = classes or tuple(self._patched)
        for cls in targets:
            originals = self._patched.pop(cls, None)
            if originals is None:
                continue
            for attr, value in originals.items():
                setattr(cls, attr, value)
            if cls.__dict__.get(ROUTER_ATTR) is self:
                delattr(cls, ROUTER_ATTR)

    def _trampoline(self, attr: str, original: Callable[..., Any]) -> Callable[..., Any]:
        router = self

        if attr == "__init__":

            @functools.wraps(original)
            def construct(real: Any, *args: Any, **kwargs: Any) -> None:
                if not router.on_construct(real, args, kwargs):
                    original(real, *args, **kwargs)

            setattr(construct, TRAMPOLINE_ATTR, True)
            return construct

        @functools.wraps(original)
        def invoke(real: Any, *args: Any, **kwargs: Any) -> Any:
            return router.on_invoke(
                real, attr, args, kwargs, fallback=functools.partial(original, real)
            )

        setattr(invoke, TRAMPOLINE_ATTR, True)
        return invoke


def _is_dispatchable(attr: str, value: Any) -> bool:
    if not inspect.isfunction(value) or getattr(value, TRAMPOLINE_ATTR, False):
        return False
    return attr == "__init__" or not attr.startswith("_")


__all__ = ["DispatchRouter", "ROUTER_ATTR"]
