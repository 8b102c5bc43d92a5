"""Rendering surface and text sink capabilities.

The edit session never owns the map or the text field; it talks to them
through two small contracts:
- RenderingSurface: Registers rings for display and reports gestures
- TextSink: The settable string slot holding the canonical text

``InMemorySurface`` and ``TextField`` are headless implementations used
when the editor runs without a map (batch tools, tests).
"""

from poly_editor.surfaces.base import RenderingSurface, RingListener, TextSink
from poly_editor.surfaces.memory import InMemorySurface, TextField

__all__ = [
    "InMemorySurface",
    "RenderingSurface",
    "RingListener",
    "TextField",
    "TextSink",
]
