"""Pydantic model for the rendering options of an editable ring.

The surface receives one ``RingStyle`` per registered ring. The values
mirror the polygon options of the map the editor drives: every ring is
editable, clickable and draggable by default, drawn in a single colour.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from poly_editor.core.constants import DEFAULT_RING_COLOR

_COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"


class RingStyle(BaseModel):
    """Rendering options for one ring.

    Attributes:
        editable: Whether vertices can be moved, inserted and removed.
        clickable: Whether the ring receives click gestures (delete menu).
        draggable: Whether the whole ring can be dragged.
        stroke_color: Outline colour, ``#rrggbb``.
        fill_color: Fill colour, ``#rrggbb``.
    """

    model_config = ConfigDict(frozen=True)

    editable: bool = True
    clickable: bool = True
    draggable: bool = True
    stroke_color: str = Field(default=DEFAULT_RING_COLOR, pattern=_COLOR_PATTERN)
    fill_color: str = Field(default=DEFAULT_RING_COLOR, pattern=_COLOR_PATTERN)
