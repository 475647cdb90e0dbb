"""RUT formatting and validation endpoints for form-side checks."""

from __future__ import annotations

from fastapi import APIRouter

from clinivet.models.rut import RutValidationResult
from clinivet.validators.rut import format_rut, validate_rut

router = APIRouter(prefix="/rut", tags=["rut"])


@router.get("/validate", response_model=RutValidationResult)
async def validate(rut: str) -> RutValidationResult:
    """Validate a RUT. Invalid input is a normal 200 response with ``is_valid`` false."""
    return validate_rut(rut)


@router.get("/format")
async def format_(rut: str) -> dict[str, str]:
    return {"formatted": format_rut(rut)}
