"""Built-in shadows for the host widget classes."""

from __future__ import annotations

from typing import Iterable, Optional

from widget_shadows.binding import ShadowRegistry, ShadowSpec

from .context import ShadowContext, ShadowResources, ShadowWindowManager
from .popup_window import ShadowPopupWindow
from .spannable import ShadowSpannableStringBuilder
from .text_view import ShadowEditText, ShadowTextView
from .view import ShadowView, ShadowViewGroup

DEFAULT_SHADOWS: tuple[type, ...] = (
    ShadowContext,
    ShadowResources,
    ShadowWindowManager,
    ShadowView,
    ShadowViewGroup,
    ShadowTextView,
    ShadowEditText,
    ShadowPopupWindow,
    ShadowSpannableStringBuilder,
)


def load_default_shadows(
    registry: ShadowRegistry,
    include: Optional[Iterable[type]] = None,
    exclude: Iterable[type] = (),
) -> list[ShadowSpec]:
    """Register the built-in shadows globally and return their specs."""

    skipped = set(exclude)
    selected = DEFAULT_SHADOWS if include is None else tuple(include)
    return [
        registry.register_shadow(shadow_class)
        for shadow_class in selected
        if shadow_class not in skipped
    ]


__all__ = [
    "DEFAULT_SHADOWS",
    "load_default_shadows",
    "ShadowContext",
    "ShadowResources",
    "ShadowWindowManager",
    "ShadowView",
    "ShadowViewGroup",
    "ShadowTextView",
    "ShadowEditText",
    "ShadowPopupWindow",
    "ShadowSpannableStringBuilder",
]
