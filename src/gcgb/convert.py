"""Conversion of a raw byte count into per-unit magnitudes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from gcgb.modes import Mode
from gcgb.units import Unit


@dataclass(frozen=True)
class MagnitudeVector:
    """Converted magnitudes, one slot per unit.

    A slot is ``None`` when its unit is not part of the active mode and
    must not be displayed.
    """

    tib: float | None
    gib: float | None
    mib: float | None
    kib: float | None

    def __iter__(self) -> Iterator[tuple[Unit, float | None]]:
        yield Unit.TIB, self.tib
        yield Unit.GIB, self.gib
        yield Unit.MIB, self.mib
        yield Unit.KIB, self.kib

    def applicable(self) -> list[tuple[Unit, float]]:
        """Return ``(unit, value)`` pairs for the units in the mode, in order."""
        return [(unit, value) for unit, value in self if value is not None]


def convert(value: float, mode: Mode) -> MagnitudeVector:
    """Divide *value* by every unit multiplier and mask units outside *mode*.

    Args:
        value: Raw byte count.
        mode: Resolved reporting mode.

    Returns:
        A ``MagnitudeVector`` with numeric slots exactly for the units in
        *mode*.

    Raises:
        ValueError: If *mode* is not a ``Mode``.
    """
    if not isinstance(mode, Mode):
        msg = f"unhandled mode in convert(): {mode!r}"
        raise ValueError(msg)

    raw = {unit: value / unit.multiplier for unit in Unit}
    return MagnitudeVector(
        tib=raw[Unit.TIB] if Unit.TIB in mode else None,
        gib=raw[Unit.GIB] if Unit.GIB in mode else None,
        mib=raw[Unit.MIB] if Unit.MIB in mode else None,
        kib=raw[Unit.KIB] if Unit.KIB in mode else None,
    )
