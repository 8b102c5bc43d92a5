"""Shared editor constants — single source of truth.

Centralises the literals of the canonical text format and the map
defaults so that the codec, the session and the configuration layer
never disagree about them.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Canonical text format
# ---------------------------------------------------------------------------

POLYGON_KEYWORD: str = "POLYGON"
"""Literal prefix of every canonical text value."""

RING_SEPARATOR: str = ", "
"""Separator emitted between serialized rings."""

COORD_SEPARATOR: str = ","
"""Separator emitted between coordinate pairs inside a ring."""

# ---------------------------------------------------------------------------
# Map defaults
# ---------------------------------------------------------------------------

DEFAULT_CENTER_LAT: float = -53.79087255
DEFAULT_CENTER_LON: float = -67.69589780000001
DEFAULT_ZOOM: int = 16

MIN_ZOOM: int = 0
MAX_ZOOM: int = 22

# WGS 84 bounds for the map centre
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0

# ---------------------------------------------------------------------------
# Ring style defaults
# ---------------------------------------------------------------------------

DEFAULT_RING_COLOR: str = "#548ce5"
"""Default stroke and fill colour for editable rings."""
