"""In-memory pet directory: dict-backed, used in dev and unit tests."""

from __future__ import annotations

from clinivet.models.pet import Pet
from clinivet.validators.rut import clean_rut


class MemoryPetDirectory:
    """Dict-backed IPetDirectory."""

    def __init__(self) -> None:
        self._pets: dict[str, list[Pet]] = {}

    def add_pet(self, pet: Pet) -> None:
        self._pets.setdefault(pet.tutor_rut, []).append(pet)

    def pets_by_tutor(self, rut: str) -> list[Pet]:
        return list(self._pets.get(clean_rut(rut), []))

    def close(self) -> None:
        pass
