"""Data models.

Defines the geometry structures edited by a session:
- Coordinate: Immutable ``(lon, lat)`` pair
- Ring: Ordered, mutable list of coordinates (one polygon boundary)
- RingStyle: Rendering options handed to the surface on registration
"""

from poly_editor.models.ring import Coordinate, Ring
from poly_editor.models.style import RingStyle

__all__ = [
    "Coordinate",
    "Ring",
    "RingStyle",
]
