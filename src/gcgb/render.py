"""Formatting of converted magnitudes into output lines.

Lines are processed in order.  A line that is not a number is skipped
(with a warning unless warnings are disabled) and does not consume an
enumeration index; a numeric overflow aborts the batch.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from gcgb.config import RunConfig
from gcgb.convert import convert
from gcgb.parse import InvalidNumberError, parse_number, trim_line

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedLine:
    """A single line destined for the output or the warning stream."""

    text: str
    warning: bool = False


@dataclass
class RenderResult:
    """Collected output of ``render_batch``."""

    output: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def format_magnitude(value: float, precision: int) -> str:
    """Format *value* in fixed-point notation with *precision* decimals.

    Non-finite values are spelled ``+Inf``, ``-Inf`` and ``NaN``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return f"{value:.{precision}f}"


def iter_render(lines: Iterable[str], config: RunConfig) -> Iterator[RenderedLine]:
    """Yield rendered output and warning lines for *lines*, in order.

    Args:
        lines: Raw input lines, possibly ending in ``\\r\\n``.
        config: Run configuration.

    Yields:
        ``RenderedLine`` items; warnings have ``warning=True``.

    Raises:
        NumberRangeError: When a line holds a number too large for a float.
    """
    index = 0
    for line in lines:
        try:
            number = parse_number(trim_line(line))
        except InvalidNumberError as exc:
            if not config.no_warn:
                yield RenderedLine(str(exc), warning=True)
            continue

        for unit, value in convert(number, config.mode).applicable():
            text = format_magnitude(value, config.precision)
            if not config.suppress_suffix:
                text = f"{text} {unit.suffix}"
            if config.enumerate_lines:
                text = f"[{index}]: {text}"
            yield RenderedLine(text)
        index += 1


def render_batch(lines: Iterable[str], config: RunConfig) -> RenderResult:
    """Render a whole batch and collect output and warnings separately.

    Raises:
        NumberRangeError: Propagated from ``iter_render``.
    """
    result = RenderResult()
    for rendered in iter_render(lines, config):
        if rendered.warning:
            result.warnings.append(rendered.text)
        else:
            result.output.append(rendered.text)
    logger.debug(
        "Rendered %d output lines, %d warnings",
        len(result.output),
        len(result.warnings),
    )
    return result
