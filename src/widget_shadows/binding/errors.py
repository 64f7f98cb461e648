"""Exception hierarchy for the binding runtime."""

from __future__ import annotations


class ShadowError(RuntimeError):
    """Base class for shadow runtime failures."""


class ShadowDeclarationError(ShadowError):
    """Raised when a shadow class carries inconsistent markers."""

    def __init__(self, shadow_class: type, message: str) -> None:
        super().__init__(f"{shadow_class.__qualname__}: {message}")
        self.shadow_class = shadow_class


class ShadowRegistryError(ShadowError):
    """Raised for session misuse, such as ending a session that never began."""


class ShadowBindingError(ShadowError):
    """Raised when a real object cannot be bound to a shadow."""

    def __init__(self, message: str, *, real: object | None = None) -> None:
        super().__init__(message)
        self.real = real


__all__ = [
    "ShadowError",
    "ShadowDeclarationError",
    "ShadowRegistryError",
    "ShadowBindingError",
]
