"""Capability contracts consumed by the edit session.

``RenderingSurface`` is the map: it draws rings, reports gestures on
them, and reports newly drawn rings. ``TextSink`` is the text field the
canonical text is written to. The session interacts exclusively with
these interfaces and never knows which concrete surface is behind them.

Lifecycle:
    1. ``on_polygon_complete(handler)`` — the session subscribes to new rings
       (``off_polygon_complete`` when it is closed).
    2. ``register_ring(ring, listener, style)`` — a ring is drawn and
       wired; gestures on it are reported through ``listener.dispatch``.
    3. ``fit_view_to(ring)`` — the view is fitted to a ring.
    4. ``unregister_ring(handle)`` — the ring is taken off the map.
"""

from __future__ import annotations

import abc
import inspect
import logging
import weakref
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable

    from poly_editor.models.ring import Ring
    from poly_editor.models.style import RingStyle
    from poly_editor.session.events import EventKind

logger = logging.getLogger("poly_editor.surfaces")


class RingListener(Protocol):
    """Receiver of gesture events for one registered ring."""

    def dispatch(self, kind: EventKind, **payload: object) -> None: ...


class RenderingSurface(abc.ABC):
    """Abstract base class for map surfaces.

    Concrete implementations must override ``register_ring``,
    ``unregister_ring`` and ``fit_view_to``. Drawing-mode completion is
    reported by calling ``_emit_polygon_complete`` with the new ring.
    """

    def __init__(self) -> None:
        self._complete_handlers: list[Callable[[], Callable[[Ring], None] | None]] = []

    def on_polygon_complete(self, handler: Callable[[Ring], None]) -> None:
        """Subscribe *handler* to rings finished in drawing mode.

        Bound methods are held weakly, so subscribing does not keep the
        handler's owner (typically an ``EditSession``) alive.
        """
        if inspect.ismethod(handler):
            self._complete_handlers.append(weakref.WeakMethod(handler))
        else:
            self._complete_handlers.append(lambda: handler)

    def off_polygon_complete(self, handler: Callable[[Ring], None]) -> None:
        """Unsubscribe *handler*; unknown handlers are ignored."""
        self._complete_handlers = [
            ref for ref in self._complete_handlers if ref() not in (None, handler)
        ]

    def _emit_polygon_complete(self, ring: Ring) -> None:
        handlers = [h for h in (ref() for ref in self._complete_handlers) if h is not None]
        if len(handlers) != len(self._complete_handlers):
            logger.debug(
                "Dropping %d completion handler(s) whose owner was collected",
                len(self._complete_handlers) - len(handlers),
            )
            self._complete_handlers = [ref for ref in self._complete_handlers if ref() is not None]
        if not handlers:
            logger.warning("Polygon drawn with no completion handler attached")
        for handler in handlers:
            handler(ring)

    # ------------------------------------------------------------------
    # Abstract methods — every surface must implement these
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def register_ring(self, ring: Ring, listener: RingListener, style: RingStyle) -> int:
        """Display *ring* and route its gesture events to *listener*.

        Returns:
            An opaque handle used to unregister the ring later.
        """

    @abc.abstractmethod
    def unregister_ring(self, handle: int) -> None:
        """Remove the ring identified by *handle* from the map."""

    @abc.abstractmethod
    def fit_view_to(self, ring: Ring) -> None:
        """Fit the visible area to the bounds of *ring*."""


class TextSink(abc.ABC):
    """A settable string slot: read once at start, written after every mutation."""

    @abc.abstractmethod
    def read(self) -> str | None:
        """Return the current text, or ``None`` when the slot is unset."""

    @abc.abstractmethod
    def write(self, text: str) -> None:
        """Replace the stored text."""
