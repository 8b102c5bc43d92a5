"""Geometry codec — polygon rings to and from canonical ``POLYGON(...)`` text.

Pure, side-effect-free conversion between an ordered collection of
rings and the single text value stored in the editor's field:

- **serialize**: rings → ``POLYGON((lon lat,...), (lon lat,...))``
- **parse**: strict text → rings, raising ``MalformedTextError``
- **deserialize**: fail-closed text → rings; malformed input yields ``[]``

The codec is split into focused stages:
- **_parser**: recursive-descent grammar for the text form
- **_formatter**: exponent-free, round-trip-exact number formatting

Contract:
    ``deserialize(serialize(rings)) == rings`` for any polygon set.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from poly_editor.codec._formatter import format_number, format_polygon_set, format_ring
from poly_editor.codec._parser import PolygonTextParser, is_number_token
from poly_editor.core.exceptions import (
    GeometryTextError,
    InvalidCoordinateTokenError,
    MalformedTextError,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from poly_editor.models.ring import Ring

logger = logging.getLogger("poly_editor.codec")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "GeometryTextError",
    "InvalidCoordinateTokenError",
    "MalformedTextError",
    "deserialize",
    "format_number",
    "format_ring",
    "is_number_token",
    "is_valid_text",
    "parse",
    "serialize",
]


def serialize(rings: Iterable[Ring]) -> str:
    """Serialize an ordered collection of rings to canonical text.

    An empty collection serializes to ``POLYGON()``. Output is
    deterministic: identical rings always produce identical text.
    """
    return format_polygon_set(rings)


def parse(text: str) -> list[Ring]:
    """Parse canonical text into rings, raising on any grammar violation.

    Args:
        text: A ``POLYGON(...)`` string.

    Returns:
        Rings in their left-to-right order of appearance.

    Raises:
        MalformedTextError: If *text* does not match the grammar.
        InvalidCoordinateTokenError: If a coordinate token is not a
            valid number (e.g. ``1.2.3``).
    """
    return PolygonTextParser(text).parse()


def deserialize(text: str | None) -> list[Ring]:
    """Decode canonical text into rings, failing closed.

    ``None``, empty text and malformed text all yield an empty list.
    This function never raises for bad input: a corrupt stored value is
    treated as "no polygons".
    """
    if not text:
        return []

    try:
        rings = parse(text)
    except MalformedTextError as exc:
        logger.warning(
            "Rejected polygon text | code=%s | %s",
            exc.code,
            exc.message,
        )
        return []

    logger.debug("Decoded %d ring(s) from polygon text", len(rings))
    return rings


def is_valid_text(text: str | None) -> bool:
    """Return whether *text* is non-empty and matches the grammar."""
    if not text:
        return False
    try:
        parse(text)
    except MalformedTextError:
        return False
    return True
