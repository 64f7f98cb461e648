"""Side table pairing each live real object with exactly one shadow."""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional

from .errors import ShadowBindingError
from .models import SessionLayer, ShadowSpec


@dataclass(slots=True)
class Binding:
    """A real object and its shadow.

    ``session_token`` is the token of the session layer that was innermost
    when the binding was created, ``0`` when no session was active.
    """

    real_ref: weakref.ref
    shadow: Any
    spec: ShadowSpec
    session_token: int = 0
    constructed: bool = False

    @property
    def real(self) -> Any:
        return self.real_ref()


class BindingStore:
    """Identity-keyed bindings that die with their real objects.

    Only weak references to real objects are held, so the store never extends
    a real object's lifetime.
    """

    def __init__(self) -> None:
        self._bindings: Dict[int, Binding] = {}

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[Binding]:
        return iter(list(self._bindings.values()))

    def get(self, real: object) -> Optional[Binding]:
        binding = self._bindings.get(id(real))
        # ids are recycled after collection; only trust a live, identical referent
        if binding is None or binding.real is not real:
            return None
        return binding

    def bind(self, real: object, spec: ShadowSpec, *, session_token: int = 0) -> Binding:
        """Return the binding for ``real``, creating it on first use."""

        existing = self.get(real)
        if existing is not None:
            return existing

        key = id(real)
        try:
            ref = weakref.ref(real, lambda _ref, key=key: self._forget(key, _ref))
        except TypeError as exc:
            raise ShadowBindingError(
                f"{type(real).__qualname__} instances cannot be weakly referenced",
                real=real,
            ) from exc

        binding = Binding(
            real_ref=ref,
            shadow=spec.instantiate(real),
            spec=spec,
            session_token=session_token,
        )
        self._bindings[key] = binding
        return binding

    def discard(self, real: object) -> Optional[Binding]:
        binding = self.get(real)
        if binding is not None:
            del self._bindings[id(real)]
        return binding

    def discard_session(self, layer: SessionLayer) -> int:
        """Drop every binding created while ``layer`` was the innermost session."""

        doomed = [
            key
            for key, binding in self._bindings.items()
            if binding.session_token == layer.token
        ]
        for key in doomed:
            del self._bindings[key]
        return len(doomed)

    def clear(self) -> None:
        self._bindings.clear()

    def _forget(self, key: int, ref: weakref.ref) -> None:
        binding = self._bindings.get(key)
        if binding is not None and binding.real_ref is ref:
            del self._bindings[key]


__all__ = ["Binding", "BindingStore"]
