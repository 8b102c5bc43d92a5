"""Edit session — keeps the canonical text in sync with edited rings.

- EditSession: Owns the polygon set and re-derives the text after every mutation
- RingRegistration: Per-ring wiring from surface gestures to the session
- EventKind: Gesture events a surface reports
"""

from poly_editor.session.editor import EditSession
from poly_editor.session.events import EventKind, RingRegistration

__all__ = [
    "EditSession",
    "EventKind",
    "RingRegistration",
]
