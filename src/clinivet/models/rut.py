"""RUT validation outcome models."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel


class RutIssue(StrEnum):
    TOO_SHORT = "TOO_SHORT"
    NON_NUMERIC_BODY = "NON_NUMERIC_BODY"
    INVALID_LENGTH = "INVALID_LENGTH"
    CHECK_DIGIT_MISMATCH = "CHECK_DIGIT_MISMATCH"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


VALID_MESSAGE = "RUT válido"

ISSUE_MESSAGES: dict[RutIssue, str] = {
    RutIssue.TOO_SHORT: "RUT debe tener al menos 2 caracteres",
    RutIssue.NON_NUMERIC_BODY: "El cuerpo del RUT debe ser numérico",
    RutIssue.INVALID_LENGTH: "RUT debe tener entre 7 y 8 dígitos más el dígito verificador",
    RutIssue.CHECK_DIGIT_MISMATCH: "Dígito verificador inválido",
    RutIssue.UNEXPECTED_ERROR: "Error al validar RUT",
}


class RutValidationResult(BaseModel):
    """Outcome of validating one RUT.

    Either valid (``issue`` is None) or invalid with exactly one issue.
    Build instances through ``ok``/``invalid`` so message and issue agree.
    """

    is_valid: bool
    formatted: str
    message: str
    issue: Optional[RutIssue] = None

    model_config = {"frozen": True}

    @classmethod
    def ok(cls, formatted: str) -> RutValidationResult:
        return cls(is_valid=True, formatted=formatted, message=VALID_MESSAGE)

    @classmethod
    def invalid(cls, formatted: str, issue: RutIssue) -> RutValidationResult:
        return cls(
            is_valid=False,
            formatted=formatted,
            message=ISSUE_MESSAGES[issue],
            issue=issue,
        )
