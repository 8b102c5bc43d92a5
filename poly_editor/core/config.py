"""Editor configuration loaded from environment variables.

All configuration values have sensible defaults matching the map the
editor was first built for. Hosts that embed the editor may set the
``POLY_EDITOR_*`` variables to override them.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out
    of its valid range or cannot be parsed. This catches bad
    configuration at startup rather than at the first map event.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from poly_editor.core.constants import (
    DEFAULT_CENTER_LAT,
    DEFAULT_CENTER_LON,
    DEFAULT_RING_COLOR,
    DEFAULT_ZOOM,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MAX_ZOOM,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    MIN_ZOOM,
)
from poly_editor.core.exceptions import ValidationError

if TYPE_CHECKING:
    from poly_editor.models.style import RingStyle

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})
_COLOR_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Immutable editor configuration.

    Loaded once when the editing surface is created and handed to the
    ``EditSession``.

    Attributes:
        default_center_lat: Latitude the map opens on.
        default_center_lon: Longitude the map opens on.
        default_zoom: Zoom level the map opens on.
        delete_removes_ring: Whether a delete request removes the ring from
            the polygon set. ``False`` keeps the legacy log-only behaviour.
        single_ring: Whether a newly drawn ring replaces every existing one.
        fit_view_on_load: Whether the map is fitted to the first loaded ring.
        stroke_color: Outline colour of editable rings (``#rrggbb``).
        fill_color: Fill colour of editable rings (``#rrggbb``).
    """

    default_center_lat: float = DEFAULT_CENTER_LAT
    default_center_lon: float = DEFAULT_CENTER_LON
    default_zoom: int = DEFAULT_ZOOM
    delete_removes_ring: bool = True
    single_ring: bool = False
    fit_view_on_load: bool = True
    stroke_color: str = DEFAULT_RING_COLOR
    fill_color: str = DEFAULT_RING_COLOR

    @classmethod
    def from_env(cls) -> EditorConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or cannot
                be parsed.
        """
        config = cls(
            default_center_lat=_env_float("POLY_EDITOR_CENTER_LAT", DEFAULT_CENTER_LAT),
            default_center_lon=_env_float("POLY_EDITOR_CENTER_LON", DEFAULT_CENTER_LON),
            default_zoom=_env_int("POLY_EDITOR_ZOOM", DEFAULT_ZOOM),
            delete_removes_ring=_env_bool("POLY_EDITOR_DELETE_REMOVES_RING", default=True),
            single_ring=_env_bool("POLY_EDITOR_SINGLE_RING", default=False),
            fit_view_on_load=_env_bool("POLY_EDITOR_FIT_VIEW_ON_LOAD", default=True),
            stroke_color=os.getenv("POLY_EDITOR_STROKE_COLOR", DEFAULT_RING_COLOR),
            fill_color=os.getenv("POLY_EDITOR_FILL_COLOR", DEFAULT_RING_COLOR),
        )
        _validate(config)
        return config

    def ring_style(self) -> RingStyle:
        """Build the ``RingStyle`` applied to every registered ring."""
        from poly_editor.models.style import RingStyle

        return RingStyle(stroke_color=self.stroke_color, fill_color=self.fill_color)


def _env_float(key: str, default: float) -> float:
    raw = os.getenv(key)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigValidationError(key, raw, "must be a number") from exc


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigValidationError(key, raw, "must be an integer") from exc


def _env_bool(key: str, *, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigValidationError(key, raw, "must be a boolean (true/false, yes/no, on/off, 1/0)")


def _validate(config: EditorConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not MIN_LATITUDE <= config.default_center_lat <= MAX_LATITUDE:
        raise ConfigValidationError(
            "POLY_EDITOR_CENTER_LAT",
            config.default_center_lat,
            f"must be between {MIN_LATITUDE} and {MAX_LATITUDE} (degrees)",
        )

    if not MIN_LONGITUDE <= config.default_center_lon <= MAX_LONGITUDE:
        raise ConfigValidationError(
            "POLY_EDITOR_CENTER_LON",
            config.default_center_lon,
            f"must be between {MIN_LONGITUDE} and {MAX_LONGITUDE} (degrees)",
        )

    if not MIN_ZOOM <= config.default_zoom <= MAX_ZOOM:
        raise ConfigValidationError(
            "POLY_EDITOR_ZOOM",
            config.default_zoom,
            f"must be between {MIN_ZOOM} and {MAX_ZOOM}",
        )

    if not _COLOR_PATTERN.match(config.stroke_color):
        raise ConfigValidationError(
            "POLY_EDITOR_STROKE_COLOR",
            config.stroke_color,
            "must be a #rrggbb colour",
        )

    if not _COLOR_PATTERN.match(config.fill_color):
        raise ConfigValidationError(
            "POLY_EDITOR_FILL_COLOR",
            config.fill_color,
            "must be a #rrggbb colour",
        )
