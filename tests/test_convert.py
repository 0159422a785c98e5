"""Tests for ``gcgb.convert``."""

from __future__ import annotations

import pytest

from gcgb.convert import MagnitudeVector, convert
from gcgb.modes import Mode
from gcgb.units import Unit

BYTES = 1099512000000.0


class TestConvert:
    """Tests for ``convert``."""

    @pytest.mark.parametrize("mode", list(Mode))
    def test_only_mode_units_are_applicable(self, mode: Mode) -> None:
        """Exactly the units in the mode carry a value."""
        result = convert(BYTES, mode)
        applicable = result.applicable()

        assert [unit for unit, _ in applicable] == list(mode.units)
        for unit, value in applicable:
            assert value == BYTES / unit.multiplier
        masked = [unit for unit, value in result if value is None]
        assert len(masked) == 4 - len(mode.units)

    def test_gib_only(self) -> None:
        """The default mode yields a single GiB slot."""
        result = convert(1073742000.0, Mode.G)

        assert result == MagnitudeVector(tib=None, gib=1.0, mib=None, kib=None)

    def test_full_mode_values(self) -> None:
        """All four slots are filled for the full mode."""
        result = convert(BYTES, Mode.TGMK)

        assert result.tib == 1.0
        assert result.gib == BYTES / 1073742000.0
        assert result.mib == BYTES / 1048576.0
        assert result.kib == 1073742187.5

    def test_zero_and_negative(self) -> None:
        """Zero and negative byte counts divide like any other value."""
        assert convert(0.0, Mode.K).kib == 0.0
        assert convert(-2048.0, Mode.K).kib == -2.0

    def test_unknown_mode_rejected(self) -> None:
        """Anything that is not a ``Mode`` is an internal error."""
        with pytest.raises(ValueError, match="unhandled mode"):
            convert(1.0, 4)  # type: ignore[arg-type]


class TestMagnitudeVector:
    """Tests for ``MagnitudeVector`` iteration."""

    def test_iterates_in_display_order(self) -> None:
        """Iteration visits every slot, largest unit first."""
        vector = MagnitudeVector(tib=1.0, gib=None, mib=None, kib=4.0)

        assert [unit for unit, _ in vector] == [
            Unit.TIB,
            Unit.GIB,
            Unit.MIB,
            Unit.KIB,
        ]
        assert vector.applicable() == [(Unit.TIB, 1.0), (Unit.KIB, 4.0)]
