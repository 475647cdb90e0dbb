"""Tutor portal: look up a tutor's pets by RUT."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from clinivet.core.exceptions import InvalidRutError
from clinivet.core.logging import get_logger
from clinivet.models.pet import Pet
from clinivet.validators.rut import require_valid_rut

router = APIRouter(prefix="/pets", tags=["pets"])

log = get_logger(__name__)


@router.get("/rut/{rut}", response_model=list[Pet])
async def pets_by_tutor_rut(rut: str, request: Request):
    """Return the pets registered under a tutor; 422 if the RUT is invalid."""
    try:
        compact = require_valid_rut(rut)
    except InvalidRutError as exc:
        return JSONResponse(status_code=422, content=exc.result.model_dump(mode="json"))

    pets = request.app.state.directory.pets_by_tutor(compact)
    log.info("tutor_pets_lookup", found=len(pets))
    return pets
