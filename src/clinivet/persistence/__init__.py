"""Pluggable pet directory backends behind the IPetDirectory protocol."""

from __future__ import annotations

from clinivet.core.config import AppSettings
from clinivet.core.protocols import IPetDirectory
from clinivet.persistence.memory_backend import MemoryPetDirectory
from clinivet.persistence.redis_backend import RedisPetDirectory


def create_directory(settings: AppSettings | None = None) -> IPetDirectory:
    """Create the pet directory selected by application settings."""
    if settings is None:
        settings = AppSettings()

    if not settings.redis.enabled:
        return MemoryPetDirectory()

    return RedisPetDirectory(
        host=settings.redis.host,
        port=settings.redis.port,
        db=settings.redis.db,
        key_prefix=settings.redis.key_prefix,
    )
