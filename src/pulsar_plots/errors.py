"""Exceptions raised by the layout engine and the style model.

Both concrete errors also subclass ValueError, so callers that already
guard against bad arguments keep working.
"""

from __future__ import annotations

from typing import Any


class PulsarError(Exception):
    """Base exception for all pulsar-plots errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class InvalidLayout(PulsarError, ValueError):
    """Layout parameters that admit no geometry (e.g. row_start >= row_count)."""


class InvalidStyle(PulsarError, ValueError):
    """Malformed style parameters, or an unknown shape/style name."""
