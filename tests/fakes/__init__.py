"""Shared test doubles: re-export memory backends."""

from __future__ import annotations

from clinivet.persistence.memory_backend import MemoryPetDirectory

__all__ = ["MemoryPetDirectory"]
