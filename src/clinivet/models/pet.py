"""Pet records as looked up from the tutor portal."""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from clinivet.core.exceptions import InvalidRutError
from clinivet.validators.rut import require_valid_rut


class Pet(BaseModel):
    """A patient registered under a tutor (pet owner)."""

    id: str
    name: str
    species: str = ""
    breed: str = ""
    tutor_rut: str  # stored in compact form, e.g. "12345678K"
    tutor_name: str = ""

    model_config = {"str_strip_whitespace": True}

    @field_validator("tutor_rut")
    @classmethod
    def _compact_tutor_rut(cls, value: str) -> str:
        try:
            return require_valid_rut(value)
        except InvalidRutError as exc:
            raise ValueError(exc.result.message) from exc
