"""Protocol interfaces for Clinivet storage abstractions.

Structural typing: backends need no common base class and tests can swap
in dict-backed fakes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from clinivet.models.pet import Pet


# ---------------------------------------------------------------------------
# Persistence: Pet Directory
# ---------------------------------------------------------------------------

@runtime_checkable
class IPetDirectory(Protocol):
    """Tutor-portal lookup of pets keyed by the tutor's RUT."""

    def add_pet(self, pet: Pet) -> None: ...

    def pets_by_tutor(self, rut: str) -> list[Pet]: ...

    def close(self) -> None: ...
