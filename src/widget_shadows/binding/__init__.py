"""Shadow binding runtime: registry, binding store and dispatch router."""

from .errors import (
    ShadowBindingError,
    ShadowDeclarationError,
    ShadowError,
    ShadowRegistryError,
)
from .markers import RealObject, constructor, implementation, implements
from .models import RegistryStats, SessionLayer, ShadowSpec
from .registry import ShadowRegistry
from .router import DispatchRouter
from .store import Binding, BindingStore

__all__ = [
    "ShadowError",
    "ShadowBindingError",
    "ShadowDeclarationError",
    "ShadowRegistryError",
    "RealObject",
    "constructor",
    "implementation",
    "implements",
    "RegistryStats",
    "SessionLayer",
    "ShadowSpec",
    "ShadowRegistry",
    "DispatchRouter",
    "Binding",
    "BindingStore",
]
