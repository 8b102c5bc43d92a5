"""Per-ring event wiring.

Each ring in a session gets one ``RingRegistration``. The surface holds
the registration and calls ``dispatch`` when the user edits the ring;
the registration looks the event up in a handler table and forwards it
to the session. The back-reference to the session is weak, so a surface
that outlives its session cannot keep it alive.
"""

from __future__ import annotations

import enum
import logging
import weakref
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from poly_editor.models.ring import Ring
    from poly_editor.session.editor import EditSession

logger = logging.getLogger("poly_editor.session.events")


class EventKind(enum.Enum):
    """Gesture events reported by a rendering surface.

    Values:
        DRAG_END:         The whole ring was dragged.
        VERTEX_SET:       A vertex was moved.
        VERTEX_INSERT:    A vertex was inserted.
        VERTEX_REMOVE:    A vertex was removed.
        DELETE_REQUESTED: The user confirmed deleting the ring.
    """

    DRAG_END = "dragend"
    VERTEX_SET = "set_at"
    VERTEX_INSERT = "insert_at"
    VERTEX_REMOVE = "remove_at"
    DELETE_REQUESTED = "delete"


def _vertex_changed(session: EditSession, ring: Ring, **_payload: object) -> None:
    session.on_vertex_mutation(ring)


def _delete_requested(session: EditSession, ring: Ring, **payload: object) -> None:
    position = payload.get("position")
    if not isinstance(position, tuple):
        position = None
    session.on_delete_requested(ring, position)


_HANDLERS: dict[EventKind, Callable[..., None]] = {
    EventKind.DRAG_END: _vertex_changed,
    EventKind.VERTEX_SET: _vertex_changed,
    EventKind.VERTEX_INSERT: _vertex_changed,
    EventKind.VERTEX_REMOVE: _vertex_changed,
    EventKind.DELETE_REQUESTED: _delete_requested,
}


class RingRegistration:
    """Routes surface events for one ring to its session.

    Attributes:
        ring: The ring this registration wires.
        handle: Surface handle returned by ``register_ring`` (``None``
            until the ring is on the surface).
    """

    __slots__ = ("_session_ref", "handle", "ring")

    def __init__(self, session: EditSession, ring: Ring) -> None:
        self._session_ref: weakref.ReferenceType[EditSession] | None = weakref.ref(session)
        self.ring = ring
        self.handle: int | None = None

    @property
    def attached(self) -> bool:
        """Whether events are still forwarded to a live session."""
        return self._session_ref is not None and self._session_ref() is not None

    def detach(self) -> None:
        """Stop forwarding events; later dispatches are ignored."""
        self._session_ref = None

    def dispatch(self, kind: EventKind | str, **payload: object) -> None:
        """Forward a surface event to the session.

        Args:
            kind: The event kind, or its surface event name (``"set_at"``).
            payload: Event details (e.g. ``position`` for a delete request).

        Raises:
            ValueError: If *kind* is not a known event name.
        """
        kind = EventKind(kind)
        session = self._session_ref() if self._session_ref is not None else None
        if session is None:
            logger.debug("Dropping %s event for detached ring", kind.value)
            return
        _HANDLERS[kind](session, self.ring, **payload)
