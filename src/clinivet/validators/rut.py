"""RUT (Chilean national tax ID) formatting and modulus-11 validation.

Input is tolerant: dots, hyphens, spaces and any other symbol are discarded,
leaving digits and ``k``/``K``. The last remaining character is the check
character; everything before it is the body.
"""

from __future__ import annotations

import re

from clinivet.core.exceptions import InvalidRutError
from clinivet.core.logging import get_logger
from clinivet.core.types import CompactRut, Rut
from clinivet.models.rut import RutIssue, RutValidationResult

log = get_logger(__name__)

MIN_BODY_LENGTH = 7
MAX_BODY_LENGTH = 8

_NOT_RUT_CHAR = re.compile(r"[^0-9kK]")
_NUMERIC = re.compile(r"\d+", re.ASCII)
_THOUSANDS = re.compile(r"\B(?=(\d{3})+(?!\d))")


def _strip(rut: Rut) -> str:
    return _NOT_RUT_CHAR.sub("", rut)


def extract_rut_body(rut: Rut) -> str:
    """Return every significant character except the last. No validation."""
    return _strip(rut)[:-1]


def extract_check_character(rut: Rut) -> str:
    """Return the last significant character, uppercased. No validation."""
    return _strip(rut)[-1:].upper()


def clean_rut(rut: Rut) -> CompactRut:
    """Compact lookup form: body plus uppercase check character, no punctuation."""
    return extract_rut_body(rut) + extract_check_character(rut)


def format_rut(rut: Rut) -> str:
    """Canonical display form, e.g. ``"123456785"`` -> ``"12.345.678-5"``.

    Reformats only. Fewer than two significant characters are returned
    stripped but otherwise unchanged.
    """
    stripped = _strip(rut)
    if len(stripped) < 2:
        return stripped
    body, check = stripped[:-1], stripped[-1].upper()
    return f"{_THOUSANDS.sub('.', body)}-{check}"


def compute_check_character(body: str) -> str:
    """Modulus-11 check character for a digits-only body.

    Digits are weighted right to left with multipliers cycling 2..7.
    """
    if not _NUMERIC.fullmatch(body):
        raise ValueError(f"RUT body must be numeric, got {body!r}")

    total = 0
    multiplier = 2
    for digit in reversed(body):
        total += int(digit) * multiplier
        multiplier = 2 if multiplier == 7 else multiplier + 1

    value = 11 - total % 11
    if value == 11:
        return "0"
    if value == 10:
        return "K"
    return str(value)


def _check(rut: Rut) -> RutValidationResult:
    stripped = _strip(rut)
    formatted = format_rut(rut)

    if len(stripped) < 2:
        return RutValidationResult.invalid(formatted, RutIssue.TOO_SHORT)

    body, check = stripped[:-1], stripped[-1].upper()
    if not _NUMERIC.fullmatch(body):
        return RutValidationResult.invalid(formatted, RutIssue.NON_NUMERIC_BODY)
    if not MIN_BODY_LENGTH <= len(body) <= MAX_BODY_LENGTH:
        return RutValidationResult.invalid(formatted, RutIssue.INVALID_LENGTH)
    if check != compute_check_character(body):
        return RutValidationResult.invalid(formatted, RutIssue.CHECK_DIGIT_MISMATCH)

    return RutValidationResult.ok(formatted)


def validate_rut(rut: Rut) -> RutValidationResult:
    """Validate a RUT and report why it failed, in Spanish.

    Never raises: every outcome, including an unexpected internal failure,
    comes back as a ``RutValidationResult``.
    """
    try:
        result = _check(rut)
    except Exception:
        log.exception("rut_validation_error")
        return RutValidationResult.invalid(
            rut if isinstance(rut, str) else "", RutIssue.UNEXPECTED_ERROR
        )
    log.debug("rut_validated", is_valid=result.is_valid, issue=result.issue)
    return result


def is_valid_rut(rut: Rut) -> bool:
    return validate_rut(rut).is_valid


def require_valid_rut(rut: Rut) -> CompactRut:
    """Return the compact form of a valid RUT, or raise ``InvalidRutError``."""
    result = validate_rut(rut)
    if not result.is_valid:
        raise InvalidRutError(result)
    return clean_rut(rut)
