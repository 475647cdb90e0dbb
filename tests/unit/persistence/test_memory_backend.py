"""Unit tests for MemoryPetDirectory and the directory factory."""

from __future__ import annotations

from clinivet.core.config import AppSettings, RedisConfig
from clinivet.core.protocols import IPetDirectory
from clinivet.models.pet import Pet
from clinivet.persistence import create_directory
from clinivet.persistence.memory_backend import MemoryPetDirectory


def _pet(pet_id: str, tutor_rut: str) -> Pet:
    return Pet(id=pet_id, name=f"pet-{pet_id}", species="canino", tutor_rut=tutor_rut)


class TestMemoryPetDirectory:
    def test_satisfies_protocol(self):
        assert isinstance(MemoryPetDirectory(), IPetDirectory)

    def test_lookup_ignores_punctuation(self):
        directory = MemoryPetDirectory()
        directory.add_pet(_pet("1", "12.344.678-K"))
        assert [p.id for p in directory.pets_by_tutor("12344678k")] == ["1"]
        assert [p.id for p in directory.pets_by_tutor("12 344 678 K")] == ["1"]

    def test_keeps_pets_per_tutor(self):
        directory = MemoryPetDirectory()
        directory.add_pet(_pet("1", "12345678-5"))
        directory.add_pet(_pet("2", "12345678-5"))
        directory.add_pet(_pet("3", "7654321-6"))
        assert [p.id for p in directory.pets_by_tutor("12.345.678-5")] == ["1", "2"]
        assert [p.id for p in directory.pets_by_tutor("7.654.321-6")] == ["3"]

    def test_unknown_tutor_returns_empty_list(self):
        assert MemoryPetDirectory().pets_by_tutor("11111111-1") == []


class TestCreateDirectory:
    def test_defaults_to_memory(self):
        assert isinstance(create_directory(AppSettings()), MemoryPetDirectory)

    def test_redis_when_enabled(self):
        from clinivet.persistence.redis_backend import RedisPetDirectory

        settings = AppSettings(redis=RedisConfig(enabled=True))
        assert isinstance(create_directory(settings), RedisPetDirectory)


def test_close_is_noop():
    directory = MemoryPetDirectory()
    directory.add_pet(_pet("1", "12345678-5"))
    directory.close()
    assert [p.id for p in directory.pets_by_tutor("12345678-5")] == ["1"]
