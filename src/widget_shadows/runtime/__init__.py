"""Process-level services: telemetry and settings."""

from . import telemetry
from .config import RuntimeSettings, load_settings, reset_settings

__all__ = ["telemetry", "RuntimeSettings", "load_settings", "reset_settings"]
