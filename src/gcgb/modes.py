"""Resolution of unit selector flags into a reporting mode.

Each mode is one non-empty subset of {TiB, GiB, MiB, KiB}.  Its value is
the 4-bit selector pattern (TiB = 8, GiB = 4, MiB = 2, KiB = 1), so
resolving a set of flags is a direct lookup rather than a branch chain.
"""

from __future__ import annotations

import enum

from gcgb.units import UNIT_ORDER, Unit

_BITS = {
    Unit.TIB: 0b1000,
    Unit.GIB: 0b0100,
    Unit.MIB: 0b0010,
    Unit.KIB: 0b0001,
}


class Mode(enum.Enum):
    """The active subset of units to report."""

    T = 0b1000
    G = 0b0100
    M = 0b0010
    K = 0b0001
    TG = 0b1100
    TM = 0b1010
    TK = 0b1001
    GM = 0b0110
    GK = 0b0101
    MK = 0b0011
    TGM = 0b1110
    TMK = 0b1011
    TGK = 0b1101
    GMK = 0b0111
    TGMK = 0b1111

    @property
    def units(self) -> tuple[Unit, ...]:
        """Units in this mode, in display order."""
        return tuple(unit for unit in UNIT_ORDER if self.value & _BITS[unit])

    def __contains__(self, unit: object) -> bool:
        return isinstance(unit, Unit) and bool(self.value & _BITS[unit])


DEFAULT_MODE = Mode.G


def resolve_mode(
    tib: bool = False,
    gib: bool = False,
    mib: bool = False,
    kib: bool = False,
) -> Mode:
    """Map the four unit selectors to a ``Mode``.

    Args:
        tib: Report TiB.
        gib: Report GiB.
        mib: Report MiB.
        kib: Report KiB.

    Returns:
        The mode whose units are exactly the selected ones, or
        ``DEFAULT_MODE`` (GiB only) when nothing is selected.
    """
    pattern = (
        (_BITS[Unit.TIB] if tib else 0)
        | (_BITS[Unit.GIB] if gib else 0)
        | (_BITS[Unit.MIB] if mib else 0)
        | (_BITS[Unit.KIB] if kib else 0)
    )
    if pattern == 0:
        return DEFAULT_MODE
    return Mode(pattern)
