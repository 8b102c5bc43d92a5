"""Shared pytest fixtures for the poly-editor test suite."""

from __future__ import annotations

import pytest

from poly_editor.core.config import EditorConfig
from poly_editor.session import EditSession
from poly_editor.surfaces import InMemorySurface, TextField


class CountingTextField(TextField):
    """Text field that records every write."""

    def __init__(self, value: str | None = None) -> None:
        super().__init__(value)
        self.writes: list[str] = []

    def write(self, text: str) -> None:
        self.writes.append(text)
        super().write(text)


@pytest.fixture()
def config() -> EditorConfig:
    """Default editor configuration."""
    return EditorConfig()


@pytest.fixture()
def surface(config: EditorConfig) -> InMemorySurface:
    """Headless rendering surface."""
    return InMemorySurface(config)


@pytest.fixture()
def field() -> CountingTextField:
    """Empty text field that records writes."""
    return CountingTextField()


@pytest.fixture()
def session(field: CountingTextField, surface: InMemorySurface, config: EditorConfig) -> EditSession:
    """Initialized session over an empty field."""
    session = EditSession(field, surface, config)
    session.initialize()
    return session


@pytest.fixture()
def make_session(surface: InMemorySurface):
    """Factory building an initialized session over a field holding *text*."""

    def _make(
        text: str | None = None, config: EditorConfig | None = None
    ) -> tuple[EditSession, CountingTextField]:
        text_field = CountingTextField(text)
        new_session = EditSession(text_field, surface, config)
        new_session.initialize()
        return new_session, text_field

    return _make
