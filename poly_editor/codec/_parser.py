"""Recursive-descent parser for the canonical ``POLYGON(...)`` text.

Grammar::

    polygon_set := "POLYGON(" ws* [ ring ( "," ws* ring )* ] ws* ")"
    ring        := "(" ws* [ pair ( "," ws* pair )* ] ws* ")"
    pair        := number ws+ number          ; longitude, latitude
    number      := "-"? digit+ ( "." digit+ )?

The parser is strict: it raises ``MalformedTextError`` at the first
deviation and never returns a partial result.
"""

from __future__ import annotations

import math

from poly_editor.core.constants import POLYGON_KEYWORD
from poly_editor.core.exceptions import InvalidCoordinateTokenError, MalformedTextError
from poly_editor.models.ring import Coordinate, Ring

_WHITESPACE = frozenset(" \t\r\n")
_DIGITS = frozenset("0123456789")
# Characters that end a coordinate token
_DELIMITERS = _WHITESPACE | frozenset(",()")


def is_number_token(token: str) -> bool:
    """Return whether *token* matches ``-?digits(.digits)?``."""
    body = token[1:] if token.startswith("-") else token
    integral, dot, fraction = body.partition(".")
    if not integral or not set(integral) <= _DIGITS:
        return False
    if dot and (not fraction or not set(fraction) <= _DIGITS):
        return False
    return True


class PolygonTextParser:
    """Single-use parser over one input string."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def parse(self) -> list[Ring]:
        """Parse the whole input into an ordered list of rings.

        Raises:
            MalformedTextError: If the text does not match the grammar.
            InvalidCoordinateTokenError: If a coordinate token is not a
                valid finite number.
        """
        self._expect(f"{POLYGON_KEYWORD}(")
        self._skip_whitespace()

        rings: list[Ring] = []
        if self._peek() == "(":
            rings.append(self._parse_ring())
            self._skip_whitespace()
            while self._peek() == ",":
                self._pos += 1
                self._skip_whitespace()
                rings.append(self._parse_ring())
                self._skip_whitespace()

        self._expect(")")
        if self._pos != len(self._text):
            raise MalformedTextError("Unexpected trailing characters", position=self._pos)
        return rings

    # ------------------------------------------------------------------
    # Productions
    # ------------------------------------------------------------------

    def _parse_ring(self) -> Ring:
        self._expect("(")
        self._skip_whitespace()

        coords: list[Coordinate] = []
        if self._peek() != ")":
            coords.append(self._parse_pair())
            self._skip_whitespace()
            while self._peek() == ",":
                self._pos += 1
                self._skip_whitespace()
                coords.append(self._parse_pair())
                self._skip_whitespace()

        self._expect(")")
        return Ring(coords)

    def _parse_pair(self) -> Coordinate:
        lon = self._parse_number()
        if self._peek() not in _WHITESPACE:
            raise MalformedTextError(
                "Expected whitespace between longitude and latitude", position=self._pos
            )
        self._skip_whitespace()
        lat = self._parse_number()
        return Coordinate(lon, lat)

    def _parse_number(self) -> float:
        start = self._pos
        while self._pos < len(self._text) and self._text[self._pos] not in _DELIMITERS:
            self._pos += 1

        token = self._text[start : self._pos]
        if not token:
            raise MalformedTextError("Expected a coordinate value", position=start)
        if not is_number_token(token):
            raise InvalidCoordinateTokenError(token, position=start)

        value = float(token)
        if not math.isfinite(value):
            raise InvalidCoordinateTokenError(token, position=start)
        return value

    # ------------------------------------------------------------------
    # Scanner helpers
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        """Return the current character, or ``""`` at end of input."""
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos] in _WHITESPACE:
            self._pos += 1

    def _expect(self, literal: str) -> None:
        if not self._text.startswith(literal, self._pos):
            found = self._text[self._pos : self._pos + len(literal)] or "end of input"
            raise MalformedTextError(f"Expected {literal!r}, found {found!r}", position=self._pos)
        self._pos += len(literal)
