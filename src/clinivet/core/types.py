"""Type aliases used across Clinivet."""

from __future__ import annotations

from typing import Any

JsonDict = dict[str, Any]
Rut = str
CompactRut = str  # digits + uppercase check character, no punctuation
