"""Headless surface and text field.

``InMemorySurface`` keeps registered rings in a handle table instead of
drawing them. Its gesture methods (``drag``, ``set_vertex``, ...) do what
a map does when the user edits a ring: mutate the ring in place, then
report the matching event to the ring's listener.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from poly_editor.core.config import EditorConfig
from poly_editor.models.ring import Coordinate, Ring
from poly_editor.session.events import EventKind
from poly_editor.surfaces.base import RenderingSurface, TextSink

if TYPE_CHECKING:
    from collections.abc import Iterable

    from poly_editor.models.style import RingStyle
    from poly_editor.surfaces.base import RingListener

logger = logging.getLogger("poly_editor.surfaces.memory")


@dataclass(slots=True)
class _Entry:
    ring: Ring
    listener: RingListener
    style: RingStyle


class InMemorySurface(RenderingSurface):
    """A rendering surface with no display.

    Attributes:
        center: Current view centre as ``(lon, lat)``.
        zoom: Current zoom level.
        view_bounds: Bounds of the last ring the view was fitted to.
    """

    def __init__(self, config: EditorConfig | None = None) -> None:
        super().__init__()
        config = config or EditorConfig()
        self.center: tuple[float, float] = (config.default_center_lon, config.default_center_lat)
        self.zoom: int = config.default_zoom
        self.view_bounds: tuple[float, float, float, float] | None = None
        self._entries: dict[int, _Entry] = {}
        self._next_handle = 1

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def handles(self) -> list[int]:
        """Handles of the rings currently on the surface, in registration order."""
        return list(self._entries)

    def ring_for(self, handle: int) -> Ring:
        return self._entries[handle].ring

    def style_for(self, handle: int) -> RingStyle:
        return self._entries[handle].style

    def listener_for(self, handle: int) -> RingListener:
        return self._entries[handle].listener

    def handle_for(self, ring: Ring) -> int:
        """Return the handle of *ring* (matched by identity).

        Raises:
            KeyError: If *ring* is not registered.
        """
        for handle, entry in self._entries.items():
            if entry.ring is ring:
                return handle
        msg = f"Ring is not registered on this surface: {ring!r}"
        raise KeyError(msg)

    # ------------------------------------------------------------------
    # RenderingSurface
    # ------------------------------------------------------------------

    def register_ring(self, ring: Ring, listener: RingListener, style: RingStyle) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._entries[handle] = _Entry(ring=ring, listener=listener, style=style)
        logger.debug("Registered ring | handle=%d | vertices=%d", handle, len(ring))
        return handle

    def unregister_ring(self, handle: int) -> None:
        if self._entries.pop(handle, None) is None:
            logger.warning("Unregister requested for unknown handle %d", handle)
            return
        logger.debug("Unregistered ring | handle=%d", handle)

    def fit_view_to(self, ring: Ring) -> None:
        bounds = ring.bounds
        if bounds is None:
            logger.debug("Ignoring fit request for empty ring")
            return
        min_lon, min_lat, max_lon, max_lat = bounds
        self.view_bounds = bounds
        self.center = ((min_lon + max_lon) / 2, (min_lat + max_lat) / 2)

    # ------------------------------------------------------------------
    # Gestures
    # ------------------------------------------------------------------

    def draw(self, coords: Iterable[Coordinate | tuple[float, float]]) -> Ring:
        """Finish a ring in drawing mode and report it to the completion handlers."""
        ring = Ring(coords)
        self._emit_polygon_complete(ring)
        return ring

    def drag(self, handle: int, dlon: float, dlat: float) -> None:
        entry = self._entries[handle]
        entry.ring.translate(dlon, dlat)
        entry.listener.dispatch(EventKind.DRAG_END)

    def set_vertex(self, handle: int, index: int, coord: Coordinate | tuple[float, float]) -> None:
        entry = self._entries[handle]
        entry.ring.set_at(index, coord)
        entry.listener.dispatch(EventKind.VERTEX_SET, index=index)

    def insert_vertex(
        self, handle: int, index: int, coord: Coordinate | tuple[float, float]
    ) -> None:
        entry = self._entries[handle]
        entry.ring.insert_at(index, coord)
        entry.listener.dispatch(EventKind.VERTEX_INSERT, index=index)

    def remove_vertex(self, handle: int, index: int) -> None:
        entry = self._entries[handle]
        entry.ring.remove_at(index)
        entry.listener.dispatch(EventKind.VERTEX_REMOVE, index=index)

    def request_delete(self, handle: int, position: tuple[float, float] | None = None) -> None:
        """Confirm the delete menu opened on the ring at *position*."""
        entry = self._entries[handle]
        entry.listener.dispatch(EventKind.DELETE_REQUESTED, position=position)


class TextField(TextSink):
    """An in-memory text slot."""

    def __init__(self, value: str | None = None) -> None:
        self.value = value

    def read(self) -> str | None:
        return self.value

    def write(self, text: str) -> None:
        self.value = text
