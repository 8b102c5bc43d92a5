"""Geometry models for the polygon set.

A ``Ring`` is one polygon boundary: an ordered, mutable list of
``Coordinate`` values. Rings are mutated in place by map gestures
(vertex move, insertion, removal, whole-ring drag); the edit session
keeps track of them by identity, while equality compares content so
that decoded text can be checked against the rings it came from.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from poly_editor.core.exceptions import CoordinateValueError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A single vertex, longitude first.

    Attributes:
        lon: Longitude in degrees.
        lat: Latitude in degrees.

    Raises:
        CoordinateValueError: If either component is NaN or infinite.
    """

    lon: float
    lat: float

    def __post_init__(self) -> None:
        for name in ("lon", "lat"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int | float):
                msg = f"Coordinate {name} must be a number, got {type(value).__name__}"
                raise CoordinateValueError(msg, code="COORDINATE_NOT_NUMERIC")
            if not math.isfinite(value):
                msg = f"Coordinate {name} must be finite, got {value!r}"
                raise CoordinateValueError(msg)
            object.__setattr__(self, name, float(value))

    @classmethod
    def coerce(cls, value: Coordinate | tuple[float, float] | list[float]) -> Coordinate:
        """Return *value* as a ``Coordinate``, accepting ``(lon, lat)`` pairs."""
        if isinstance(value, Coordinate):
            return value
        if not isinstance(value, list | tuple) or len(value) != 2:
            msg = f"Expected a (lon, lat) pair, got {value!r}"
            raise CoordinateValueError(msg)
        return cls(value[0], value[1])

    def as_tuple(self) -> tuple[float, float]:
        return (self.lon, self.lat)


class Ring:
    """An ordered, mutable sequence of coordinates forming one boundary.

    No closure is enforced and rings of fewer than three coordinates are
    allowed. Two rings compare equal when they hold the same coordinates
    in the same order.
    """

    __slots__ = ("_coords",)

    def __init__(
        self,
        coords: Iterable[Coordinate | tuple[float, float] | list[float]] = (),
    ) -> None:
        self._coords: list[Coordinate] = [Coordinate.coerce(c) for c in coords]

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._coords)

    def __getitem__(self, index: int) -> Coordinate:
        return self._coords[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ring):
            return NotImplemented
        return self._coords == other._coords

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Ring({[c.as_tuple() for c in self._coords]!r})"

    @property
    def coords(self) -> list[Coordinate]:
        """Return a copy of the coordinate list."""
        return list(self._coords)

    # ------------------------------------------------------------------
    # In-place mutation (one method per map gesture)
    # ------------------------------------------------------------------

    def set_at(self, index: int, coord: Coordinate | tuple[float, float]) -> None:
        """Replace the vertex at *index* (vertex move)."""
        self._coords[index] = Coordinate.coerce(coord)

    def insert_at(self, index: int, coord: Coordinate | tuple[float, float]) -> None:
        """Insert a vertex before *index* (vertex insertion)."""
        self._coords.insert(index, Coordinate.coerce(coord))

    def remove_at(self, index: int) -> Coordinate:
        """Remove and return the vertex at *index* (vertex removal)."""
        return self._coords.pop(index)

    def translate(self, dlon: float, dlat: float) -> None:
        """Shift every vertex by ``(dlon, dlat)`` (whole-ring drag)."""
        self._coords = [Coordinate(c.lon + dlon, c.lat + dlat) for c in self._coords]

    # ------------------------------------------------------------------
    # Derived properties
    # ------------------------------------------------------------------

    @property
    def is_closed(self) -> bool:
        """Whether the first vertex is repeated as the last one."""
        return len(self._coords) > 1 and self._coords[0] == self._coords[-1]

    @property
    def bounds(self) -> tuple[float, float, float, float] | None:
        """Bounding box ``(min_lon, min_lat, max_lon, max_lat)``, ``None`` when empty."""
        if not self._coords:
            return None

        from shapely.geometry import MultiPoint

        return MultiPoint([c.as_tuple() for c in self._coords]).bounds

    def to_list(self) -> list[list[float]]:
        """Serialise to ``[[lon, lat], ...]``."""
        return [[c.lon, c.lat] for c in self._coords]
