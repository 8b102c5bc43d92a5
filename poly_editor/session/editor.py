"""Edit session: the live polygon set and its canonical text.

The session owns an ordered list of rings and two non-owned
capabilities: a ``RenderingSurface`` that displays the rings and reports
gestures, and a ``TextSink`` holding the canonical text. After every
completed mutation the sink holds ``serialize(rings)`` for the current
rings; it is never left stale.

Event handling is single-threaded: each handler runs to completion,
including the text write, before the next event is processed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from poly_editor.codec import deserialize, serialize
from poly_editor.core.config import EditorConfig
from poly_editor.core.exceptions import RingRegistrationError, SessionStateError
from poly_editor.session.events import RingRegistration

if TYPE_CHECKING:
    from poly_editor.models.ring import Ring
    from poly_editor.models.style import RingStyle
    from poly_editor.surfaces.base import RenderingSurface, TextSink

logger = logging.getLogger("poly_editor.session")


class EditSession:
    """Mediates between live geometry and its text form.

    Example usage::

        session = EditSession(field, surface)
        session.initialize()           # decode the field's current text
        surface.draw([(0, 0), (1, 0), (1, 1)])
        field.read()                   # 'POLYGON((0 0,1 0,1 1))'
    """

    def __init__(
        self,
        sink: TextSink,
        surface: RenderingSurface,
        config: EditorConfig | None = None,
        style: RingStyle | None = None,
    ) -> None:
        self._sink = sink
        self._surface = surface
        self._config = config or EditorConfig()
        self._style = style or self._config.ring_style()
        self._registrations: list[RingRegistration] = []
        self._initialized = False
        self._closed = False

    def __len__(self) -> int:
        return len(self._registrations)

    @property
    def config(self) -> EditorConfig:
        return self._config

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def rings(self) -> tuple[Ring, ...]:
        """The polygon set, in text emission order."""
        return tuple(reg.ring for reg in self._registrations)

    @property
    def text(self) -> str:
        """Canonical text for the current polygon set."""
        return serialize(self.rings)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self, initial_text: str | None = None) -> None:
        """Load the polygon set and wire every ring to the surface.

        When *initial_text* is ``None`` the sink is read instead. Malformed
        text degrades to an empty polygon set. Nothing is written back to
        the sink.

        Raises:
            SessionStateError: If the session is already initialized or closed.
        """
        if self._closed:
            raise SessionStateError("Edit session is closed", code="SESSION_CLOSED")
        if self._initialized:
            raise SessionStateError(
                "Edit session is already initialized",
                code="SESSION_ALREADY_INITIALIZED",
            )

        if initial_text is None:
            initial_text = self._sink.read()

        rings = deserialize(initial_text) if initial_text else []
        for ring in rings:
            self._register(ring)

        self._surface.on_polygon_complete(self.on_polygon_created)
        self._initialized = True

        if rings and self._config.fit_view_on_load:
            self._surface.fit_view_to(rings[0])

        logger.info("Edit session initialized with %d ring(s)", len(rings))

    def close(self) -> None:
        """Take every ring off the surface and stop receiving drawn rings.

        The text field keeps its last value. Closing twice is a no-op;
        any mutation handler called afterwards raises ``SessionStateError``.
        """
        if self._closed:
            return
        for registration in list(self._registrations):
            self._unregister(registration)
        if self._initialized:
            self._surface.off_polygon_complete(self.on_polygon_created)
        self._closed = True
        logger.info("Edit session closed")

    # ------------------------------------------------------------------
    # Mutation events
    # ------------------------------------------------------------------

    def on_polygon_created(self, ring: Ring) -> None:
        """Append a newly drawn ring and publish the updated text.

        Raises:
            SessionStateError: If the session is not initialized.
            RingRegistrationError: If *ring* is already in the polygon set.
        """
        self._require_initialized()
        if self._index_of(ring) is not None:
            msg = "Ring is already part of this edit session"
            raise RingRegistrationError(msg)

        if self._config.single_ring and self._registrations:
            logger.info("Single-ring mode: replacing %d ring(s)", len(self._registrations))
            for registration in list(self._registrations):
                self._unregister(registration)

        self._register(ring)
        logger.info(
            "Polygon created | vertices=%d | rings=%d",
            len(ring),
            len(self._registrations),
        )
        self._publish()

    def on_vertex_mutation(self, ring: Ring) -> None:
        """Publish the text after *ring* was changed in place.

        Raises:
            SessionStateError: If the session is not initialized.
        """
        self._require_initialized()
        self._publish()

    def on_delete_requested(
        self,
        ring: Ring,
        position: tuple[float, float] | None = None,
    ) -> None:
        """Remove *ring* from the polygon set and publish the updated text.

        With ``config.delete_removes_ring`` disabled the request is only
        logged and the polygon set is left unchanged.

        Raises:
            SessionStateError: If the session is not initialized.
        """
        self._require_initialized()

        if not self._config.delete_removes_ring:
            logger.warning("Delete requested at %s; ring removal is disabled", position)
            return

        index = self._index_of(ring)
        if index is None:
            logger.warning("Delete requested for a ring not in this session")
            return

        self._unregister(self._registrations[index])
        logger.info(
            "Polygon deleted | index=%d | position=%s | rings=%d",
            index,
            position,
            len(self._registrations),
        )
        self._publish()

    def center_on(self, ring: Ring) -> None:
        """Fit the surface's view to *ring*."""
        self._surface.fit_view_to(ring)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_initialized(self) -> None:
        if self._closed:
            raise SessionStateError("Edit session is closed", code="SESSION_CLOSED")
        if not self._initialized:
            raise SessionStateError(
                "Edit session is not initialized",
                code="SESSION_NOT_INITIALIZED",
            )

    def _index_of(self, ring: Ring) -> int | None:
        for index, registration in enumerate(self._registrations):
            if registration.ring is ring:
                return index
        return None

    def _register(self, ring: Ring) -> None:
        registration = RingRegistration(self, ring)
        registration.handle = self._surface.register_ring(ring, registration, self._style)
        self._registrations.append(registration)

    def _unregister(self, registration: RingRegistration) -> None:
        self._registrations.remove(registration)
        registration.detach()
        if registration.handle is not None:
            self._surface.unregister_ring(registration.handle)

    def _publish(self) -> None:
        text = self.text
        self._sink.write(text)
        logger.debug("Canonical text updated | rings=%d | length=%d", len(self), len(text))
