"""Environment-driven settings shared by the runtime and the default shadows."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from .telemetry import ENV_PREFIX


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_float(name: str, default: float) -> float:
    raw = _env(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{ENV_PREFIX}{name} must be positive, got {value}")
    return value


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class RuntimeSettings:
    """Process defaults; tests override per object through shadow setters."""

    density: float = 1.0
    scaled_density: float = 1.0
    auto_instrument: bool = True

    @classmethod
    def from_env(cls) -> "RuntimeSettings":
        density = _env_float("DENSITY", 1.0)
        return cls(
            density=density,
            scaled_density=_env_float("SCALED_DENSITY", density),
            auto_instrument=_env_flag("AUTO_INSTRUMENT", True),
        )


@lru_cache(maxsize=1)
def load_settings() -> RuntimeSettings:
    return RuntimeSettings.from_env()


def reset_settings() -> None:
    """Drop the cached settings so the next ``load_settings`` re-reads env."""

    load_settings.cache_clear()


__all__ = ["RuntimeSettings", "load_settings", "reset_settings"]
