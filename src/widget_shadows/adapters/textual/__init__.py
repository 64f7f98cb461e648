"""Textual inspector for shadowed text views."""

from .controller import InspectorHooks, TextMirror, TextViewInspector

__all__ = ["InspectorHooks", "TextMirror", "TextViewInspector"]
