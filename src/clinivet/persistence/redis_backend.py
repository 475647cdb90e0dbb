"""Redis pet directory implementing IPetDirectory."""

from __future__ import annotations

import redis

from clinivet.core.exceptions import DirectoryError
from clinivet.core.logging import get_logger
from clinivet.models.pet import Pet
from clinivet.validators.rut import clean_rut

log = get_logger(__name__)


class RedisPetDirectory:
    """Production IPetDirectory: one Redis list of JSON pets per tutor."""

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        key_prefix: str = "clinivet",
    ) -> None:
        self._key_prefix = key_prefix
        self._client = redis.Redis(
            host=host, port=port, db=db, decode_responses=True,
        )

    def _key(self, compact_rut: str) -> str:
        return f"{self._key_prefix}:tutor:{compact_rut}:pets"

    def add_pet(self, pet: Pet) -> None:
        key = self._key(pet.tutor_rut)
        try:
            self._client.rpush(key, pet.model_dump_json())
        except Exception as exc:
            raise DirectoryError(f"Redis RPUSH failed for key={key!r}: {exc}") from exc
        log.info("pet_added", pet_id=pet.id)

    def pets_by_tutor(self, rut: str) -> list[Pet]:
        key = self._key(clean_rut(rut))
        try:
            raw = self._client.lrange(key, 0, -1)
        except Exception as exc:
            raise DirectoryError(f"Redis LRANGE failed for key={key!r}: {exc}") from exc
        return [Pet.model_validate_json(item) for item in raw]

    def close(self) -> None:
        try:
            self._client.close()
        except Exception as exc:
            raise DirectoryError(f"Redis close failed: {exc}") from exc
