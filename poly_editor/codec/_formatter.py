"""Canonical text emission.

Numbers are written in positional notation so that every emitted value
matches the coordinate grammar the parser accepts, using the shortest
decimal string that converts back to the identical float.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from poly_editor.core.constants import COORD_SEPARATOR, POLYGON_KEYWORD, RING_SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Iterable

    from poly_editor.models.ring import Ring


def format_number(value: float) -> str:
    """Format a finite float without exponent and without precision loss.

    Integral values drop the fractional part (``-67.0`` → ``-67``).
    """
    if value.is_integer():
        return str(int(value))
    # repr() is the shortest round-tripping form; Decimal expands any exponent.
    return format(Decimal(repr(value)), "f")


def format_ring(ring: Ring) -> str:
    """Format one ring as ``(<lon> <lat>,<lon> <lat>,...)``."""
    pairs = COORD_SEPARATOR.join(
        f"{format_number(c.lon)} {format_number(c.lat)}" for c in ring
    )
    return f"({pairs})"


def format_polygon_set(rings: Iterable[Ring]) -> str:
    """Format an ordered collection of rings as ``POLYGON(...)``."""
    body = RING_SEPARATOR.join(format_ring(ring) for ring in rings)
    return f"{POLYGON_KEYWORD}({body})"
