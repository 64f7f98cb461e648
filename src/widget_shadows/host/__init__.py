"""Host widget API whose own behaviour is inert until shadows are bound."""

from .content import Context, DisplayMetrics, Resources, WindowManager
from .text import (
    SpannableStringBuilder,
    Spanned,
    StyleSpan,
    TextWatcher,
    TypedValue,
    TypefaceSpan,
    URLSpan,
)
from .view import LinearLayout, MotionEvent, OnTouchListener, View, ViewGroup
from .widget import (
    EditorInfo,
    EditText,
    Gravity,
    InputType,
    MovementMethod,
    OnEditorActionListener,
    PopupWindow,
    TextView,
)

HOST_CLASSES: tuple[type, ...] = (
    Context,
    Resources,
    WindowManager,
    View,
    ViewGroup,
    LinearLayout,
    TextView,
    EditText,
    PopupWindow,
    SpannableStringBuilder,
)

__all__ = [
    "HOST_CLASSES",
    "Context",
    "DisplayMetrics",
    "Resources",
    "WindowManager",
    "SpannableStringBuilder",
    "Spanned",
    "StyleSpan",
    "TextWatcher",
    "TypedValue",
    "TypefaceSpan",
    "URLSpan",
    "LinearLayout",
    "MotionEvent",
    "OnTouchListener",
    "View",
    "ViewGroup",
    "EditorInfo",
    "EditText",
    "Gravity",
    "InputType",
    "MovementMethod",
    "OnEditorActionListener",
    "PopupWindow",
    "TextView",
]
