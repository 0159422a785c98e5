"""Binary byte-prefix units and display precision limits."""

from __future__ import annotations

import enum

# GiB and TiB are not exact powers of 1024; kept for output compatibility.
KIB_BYTES = 1024.0
MIB_BYTES = 1048576.0
GIB_BYTES = 1073742000.0
TIB_BYTES = 1099512000000.0

DEFAULT_PRECISION = 2
MAX_PRECISION = 9
PRECISION_HARD_LIMIT = MAX_PRECISION + 91


class Unit(enum.Enum):
    """A reportable unit, carrying its byte multiplier and display suffix."""

    TIB = (TIB_BYTES, "TiB")
    GIB = (GIB_BYTES, "GiB")
    MIB = (MIB_BYTES, "MiB")
    KIB = (KIB_BYTES, "KiB")

    def __init__(self, multiplier: float, suffix: str) -> None:
        self.multiplier = multiplier
        self.suffix = suffix


# Display order, largest unit first.
UNIT_ORDER: tuple[Unit, ...] = (Unit.TIB, Unit.GIB, Unit.MIB, Unit.KIB)
