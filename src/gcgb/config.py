"""Run configuration assembled once from command-line options."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gcgb.modes import DEFAULT_MODE, Mode, resolve_mode
from gcgb.units import DEFAULT_PRECISION, MAX_PRECISION, PRECISION_HARD_LIMIT

logger = logging.getLogger(__name__)


class PrecisionError(ValueError):
    """Raised when the requested precision is beyond any sensible value."""


@dataclass(frozen=True)
class RunConfig:
    """Immutable options shared by every line of a run."""

    mode: Mode = DEFAULT_MODE
    precision: int = DEFAULT_PRECISION
    suppress_suffix: bool = False
    enumerate_lines: bool = False
    no_warn: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.precision <= MAX_PRECISION:
            msg = (
                f"precision `{self.precision}' is outside the range "
                f"0..{MAX_PRECISION}; pass it through check_precision() first"
            )
            raise PrecisionError(msg)


def check_precision(requested: int) -> int:
    """Clamp *requested* into ``[0, MAX_PRECISION]``.

    Values above ``MAX_PRECISION`` but not above ``PRECISION_HARD_LIMIT``
    are clamped with a warning.  Negative values are clamped to 0 with a
    warning.

    Args:
        requested: Number of decimal places asked for on the command line.

    Returns:
        The precision to format with.

    Raises:
        PrecisionError: If *requested* exceeds ``PRECISION_HARD_LIMIT``.
    """
    if requested > PRECISION_HARD_LIMIT:
        msg = (
            f"exceptionally high precision defined at commandline: `{requested}': "
            f"check -p argument, the maximum allowed is {MAX_PRECISION}"
        )
        raise PrecisionError(msg)

    if requested > MAX_PRECISION:
        logger.warning(
            "precision set to %d, `%d' is higher than the maximum",
            MAX_PRECISION,
            requested,
        )
        return MAX_PRECISION

    if requested < 0:
        logger.warning("precision set to 0, `%d' is negative", requested)
        return 0

    return requested


def build_config(
    *,
    tib: bool = False,
    gib: bool = False,
    mib: bool = False,
    kib: bool = False,
    precision: int = DEFAULT_PRECISION,
    suppress_suffix: bool = False,
    enumerate_lines: bool = False,
    no_warn: bool = False,
) -> RunConfig:
    """Resolve the mode and precision and freeze them into a ``RunConfig``.

    Raises:
        PrecisionError: Propagated from ``check_precision``.
    """
    mode = resolve_mode(tib, gib, mib, kib)
    checked = check_precision(precision)
    logger.debug("Resolved mode %s, precision %d", mode.name, checked)
    return RunConfig(
        mode=mode,
        precision=checked,
        suppress_suffix=suppress_suffix,
        enumerate_lines=enumerate_lines,
        no_warn=no_warn,
    )
