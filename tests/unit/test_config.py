"""Tests for editor configuration.

Covers:
- Default values
- Loading from environment variables
- Type coercion (string env vars → numeric and boolean fields)
- Fail-fast range validation
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from poly_editor.core.config import ConfigValidationError, EditorConfig
from poly_editor.models import RingStyle


class TestEditorConfigDefaults:
    """Verify default configuration values."""

    def test_default_center(self) -> None:
        cfg = EditorConfig()
        assert cfg.default_center_lat == -53.79087255
        assert cfg.default_center_lon == -67.69589780000001

    def test_default_zoom(self) -> None:
        cfg = EditorConfig()
        assert cfg.default_zoom == 16

    def test_default_behaviour_flags(self) -> None:
        cfg = EditorConfig()
        assert cfg.delete_removes_ring is True
        assert cfg.single_ring is False
        assert cfg.fit_view_on_load is True

    def test_default_colours(self) -> None:
        cfg = EditorConfig()
        assert cfg.stroke_color == "#548ce5"
        assert cfg.fill_color == "#548ce5"

    def test_ring_style(self) -> None:
        style = EditorConfig(stroke_color="#000000", fill_color="#ffffff").ring_style()
        assert isinstance(style, RingStyle)
        assert style.stroke_color == "#000000"
        assert style.fill_color == "#ffffff"
        assert style.editable is True


class TestEditorConfigFromEnv:
    """Verify loading from environment variables."""

    def test_loads_from_environment(self) -> None:
        """All env vars are read and coerced to correct types."""
        env = {
            "POLY_EDITOR_CENTER_LAT": "10.5",
            "POLY_EDITOR_CENTER_LON": "-20.25",
            "POLY_EDITOR_ZOOM": "12",
            "POLY_EDITOR_DELETE_REMOVES_RING": "false",
            "POLY_EDITOR_SINGLE_RING": "yes",
            "POLY_EDITOR_FIT_VIEW_ON_LOAD": "0",
            "POLY_EDITOR_STROKE_COLOR": "#112233",
            "POLY_EDITOR_FILL_COLOR": "#445566",
        }
        with patch.dict(os.environ, env, clear=True):
            cfg = EditorConfig.from_env()

        assert cfg.default_center_lat == 10.5
        assert cfg.default_center_lon == -20.25
        assert cfg.default_zoom == 12
        assert cfg.delete_removes_ring is False
        assert cfg.single_ring is True
        assert cfg.fit_view_on_load is False
        assert cfg.stroke_color == "#112233"
        assert cfg.fill_color == "#445566"

    def test_defaults_when_env_missing(self) -> None:
        """Missing environment variables fall back to defaults."""
        with patch.dict(os.environ, {}, clear=True):
            cfg = EditorConfig.from_env()

        assert cfg == EditorConfig()

    @pytest.mark.parametrize("raw", ["1", "TRUE", "Yes", " on "])
    def test_truthy_booleans(self, raw: str) -> None:
        with patch.dict(os.environ, {"POLY_EDITOR_SINGLE_RING": raw}, clear=True):
            cfg = EditorConfig.from_env()
        assert cfg.single_ring is True

    def test_frozen_immutability(self) -> None:
        """EditorConfig is frozen (immutable)."""
        cfg = EditorConfig()
        with pytest.raises(AttributeError):
            cfg.default_zoom = 3  # type: ignore[misc]


class TestEditorConfigValidation:
    """Fail-fast range validation in from_env."""

    def test_latitude_out_of_range_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"POLY_EDITOR_CENTER_LAT": "91"}, clear=True),
            pytest.raises(ConfigValidationError, match="POLY_EDITOR_CENTER_LAT"),
        ):
            EditorConfig.from_env()

    def test_longitude_out_of_range_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"POLY_EDITOR_CENTER_LON": "-180.5"}, clear=True),
            pytest.raises(ConfigValidationError, match="POLY_EDITOR_CENTER_LON"),
        ):
            EditorConfig.from_env()

    def test_longitude_boundary_accepted(self) -> None:
        with patch.dict(os.environ, {"POLY_EDITOR_CENTER_LON": "180"}, clear=True):
            cfg = EditorConfig.from_env()
        assert cfg.default_center_lon == 180.0

    def test_zoom_out_of_range_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"POLY_EDITOR_ZOOM": "23"}, clear=True),
            pytest.raises(ConfigValidationError, match="between 0 and 22"),
        ):
            EditorConfig.from_env()

    def test_zoom_not_integer_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"POLY_EDITOR_ZOOM": "12.5"}, clear=True),
            pytest.raises(ConfigValidationError, match="integer"),
        ):
            EditorConfig.from_env()

    def test_non_numeric_latitude_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"POLY_EDITOR_CENTER_LAT": "abc"}, clear=True),
            pytest.raises(ConfigValidationError, match="must be a number"),
        ):
            EditorConfig.from_env()

    def test_invalid_boolean_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"POLY_EDITOR_DELETE_REMOVES_RING": "maybe"}, clear=True),
            pytest.raises(ConfigValidationError, match="POLY_EDITOR_DELETE_REMOVES_RING"),
        ):
            EditorConfig.from_env()

    def test_invalid_colour_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"POLY_EDITOR_FILL_COLOR": "blue"}, clear=True),
            pytest.raises(ConfigValidationError, match="#rrggbb"),
        ):
            EditorConfig.from_env()

    def test_error_contains_key_and_value(self) -> None:
        """ConfigValidationError includes key and value attributes."""
        with (
            patch.dict(os.environ, {"POLY_EDITOR_ZOOM": "40"}, clear=True),
            pytest.raises(ConfigValidationError) as exc_info,
        ):
            EditorConfig.from_env()
        assert exc_info.value.key == "POLY_EDITOR_ZOOM"
        assert exc_info.value.value == 40
        assert exc_info.value.code == "CONFIG_VALIDATION_FAILED"
        assert exc_info.value.stage == "config"
