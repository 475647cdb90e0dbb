"""Clinivet exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clinivet.models.rut import RutValidationResult


class ClinivetError(Exception):
    """Base exception for all Clinivet errors."""


class InvalidRutError(ClinivetError):
    """A RUT failed validation where a valid one is required."""

    def __init__(self, result: RutValidationResult) -> None:
        self.result = result
        super().__init__(f"Invalid RUT {result.formatted!r}: {result.message}")


class DirectoryError(ClinivetError):
    """Pet directory backend operation failed."""
