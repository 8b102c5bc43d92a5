"""Unified editor exception taxonomy.

Every domain exception inherits from ``EditorError`` and carries
structured context fields (stage, code) so that hosts can log and report
failures consistently.

Taxonomy categories
-------------------
- ``ValidationError``    — input violations (bad text, bad coordinates,
  bad configuration, duplicate rings).
- ``SessionStateError``  — a session operation called in the wrong
  lifecycle state.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class EditorError(Exception):
    """Base exception for all editor-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Component where the error occurred
            (e.g. ``"codec"``, ``"session"``).
        code: Machine-readable error code (e.g. ``"GEOMETRY_TEXT_MALFORMED"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, SessionStateError):
            return "state"
        return "editor"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(EditorError):
    """Input or domain-model validation failure."""


class SessionStateError(EditorError):
    """An edit-session operation was called in the wrong lifecycle state."""

    default_stage = "session"
    default_code = "SESSION_STATE_INVALID"


# ---------------------------------------------------------------------------
# Geometry text errors
# ---------------------------------------------------------------------------


class GeometryTextError(ValidationError):
    """Base class for canonical-text decoding failures."""

    default_stage = "codec"
    default_code = "GEOMETRY_TEXT_INVALID"


class MalformedTextError(GeometryTextError):
    """Raised when text does not match the ``POLYGON(...)`` grammar.

    Attributes:
        position: Zero-based offset in the input where parsing failed.
    """

    default_code = "GEOMETRY_TEXT_MALFORMED"

    def __init__(self, message: str = "", *, position: int = -1, **kwargs: str) -> None:
        self.position = position
        if position >= 0:
            message = f"{message} (at offset {position})"
        super().__init__(message, **kwargs)

    def to_error_dict(self) -> dict[str, object]:
        payload = super().to_error_dict()
        payload["position"] = self.position
        return payload


class InvalidCoordinateTokenError(MalformedTextError):
    """Raised when a coordinate token is not a valid number (e.g. ``1.2.3``).

    Attributes:
        token: The offending token text.
    """

    default_code = "GEOMETRY_COORDINATE_TOKEN_INVALID"

    def __init__(self, token: str, *, position: int = -1) -> None:
        self.token = token
        super().__init__(f"Invalid coordinate token {token!r}", position=position)

    def to_error_dict(self) -> dict[str, object]:
        payload = super().to_error_dict()
        payload["token"] = self.token
        return payload


# ---------------------------------------------------------------------------
# Model and session errors
# ---------------------------------------------------------------------------


class CoordinateValueError(ValidationError):
    """Raised when a coordinate component is not a finite number."""

    default_stage = "models"
    default_code = "COORDINATE_NOT_FINITE"


class RingRegistrationError(ValidationError):
    """Raised when a ring is added to a session that already holds it."""

    default_stage = "session"
    default_code = "RING_ALREADY_REGISTERED"
