"""Shadow binding runtime for exercising widget code without a device."""

from .environment import create_router, shadow_environment, shadow_of

__all__ = [
    "adapters",
    "binding",
    "host",
    "runtime",
    "shadows",
    "testing",
    "create_router",
    "shadow_environment",
    "shadow_of",
]

__version__ = "0.1.0"
