"""Tests for ``gcgb.config``."""

from __future__ import annotations

import logging

import pytest

from gcgb.config import PrecisionError, RunConfig, build_config, check_precision
from gcgb.modes import Mode


class TestCheckPrecision:
    """Tests for ``check_precision``."""

    @pytest.mark.parametrize("requested", [0, 2, 9])
    def test_within_range(self, requested: int) -> None:
        """Valid precisions pass through unchanged."""
        assert check_precision(requested) == requested

    def test_maximum_has_no_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """The maximum itself is accepted silently."""
        assert check_precision(9) == 9
        assert caplog.records == []

    @pytest.mark.parametrize("requested", [10, 50, 100])
    def test_clamped_with_warning(
        self, requested: int, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Values up to the hard limit clamp to the maximum and warn."""
        with caplog.at_level(logging.WARNING):
            assert check_precision(requested) == 9

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.WARNING
        assert f"`{requested}' is higher than the maximum" in caplog.text

    def test_hard_limit_exceeded(self) -> None:
        """Above the hard limit the precision is a configuration error."""
        with pytest.raises(PrecisionError, match="`101'"):
            check_precision(101)

    def test_negative_clamped_to_zero(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Negative precisions clamp to zero and warn."""
        with caplog.at_level(logging.WARNING):
            assert check_precision(-3) == 0
        assert "negative" in caplog.text


class TestBuildConfig:
    """Tests for ``build_config``."""

    def test_defaults(self) -> None:
        """No options give the GiB mode with two decimals."""
        assert build_config() == RunConfig(mode=Mode.G, precision=2)

    def test_options_carried(self) -> None:
        """Display options pass through unchanged."""
        config = build_config(
            tib=True,
            kib=True,
            precision=0,
            suppress_suffix=True,
            enumerate_lines=True,
            no_warn=True,
        )

        assert config.mode is Mode.TK
        assert config.precision == 0
        assert config.suppress_suffix
        assert config.enumerate_lines
        assert config.no_warn

    def test_precision_clamped(self) -> None:
        """An over-maximum precision is stored clamped."""
        assert build_config(precision=100).precision == 9

    def test_precision_error_propagates(self) -> None:
        """A fatal precision surfaces from ``build_config``."""
        with pytest.raises(PrecisionError):
            build_config(precision=101)

    def test_frozen(self) -> None:
        """The configuration cannot be mutated after assembly."""
        config = build_config()
        with pytest.raises(AttributeError):
            config.precision = 5  # type: ignore[misc]


class TestRunConfig:
    """Tests for ``RunConfig`` validation."""

    @pytest.mark.parametrize("precision", [0, 9])
    def test_precision_bounds_accepted(self, precision: int) -> None:
        """Both ends of ``0..MAX_PRECISION`` are valid."""
        assert RunConfig(precision=precision).precision == precision

    @pytest.mark.parametrize("precision", [-1, 10, 30])
    def test_precision_out_of_range_rejected(self, precision: int) -> None:
        """Unchecked precisions cannot reach the formatter."""
        with pytest.raises(PrecisionError, match="outside the range"):
            RunConfig(precision=precision)
