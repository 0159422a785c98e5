"""Strict parsing of input lines into 64-bit floats."""

from __future__ import annotations

import math

_INF_SPELLINGS = frozenset({"inf", "infinity"})


class InvalidNumberError(ValueError):
    """Raised when a token is not syntactically a number (recoverable)."""

    def __init__(self, token: str) -> None:
        super().__init__(f'"{token}" is not a number')
        self.token = token


class NumberRangeError(ValueError):
    """Raised when a numeric literal overflows a 64-bit float (fatal)."""

    def __init__(self, token: str) -> None:
        super().__init__(f'"{token}" is out of range for a 64-bit float')
        self.token = token


def trim_line(line: str) -> str:
    """Strip one trailing ``\\n`` and then one trailing ``\\r``."""
    return line.removesuffix("\n").removesuffix("\r")


def _parse_hex(text: str) -> float:
    """Parse a hexadecimal literal, which must carry a ``p`` exponent."""
    if "p" not in text.lower():
        raise InvalidNumberError(text)
    try:
        return float.fromhex(text)
    except OverflowError:
        raise NumberRangeError(text) from None
    except ValueError:
        raise InvalidNumberError(text) from None


def parse_number(text: str) -> float:
    """Parse *text* as a float, rejecting the laxities of ``float()``.

    Accepted: decimal and exponent notation with an optional sign,
    hexadecimal literals with a binary exponent (``0x1p10``), and
    ``inf``/``infinity``/``nan`` in any case.  ``nan`` takes no sign.
    ``float()`` also tolerates surrounding whitespace, digit-group
    underscores and non-ASCII digits; none of these count as numbers here.

    Args:
        text: A single trimmed input token.

    Returns:
        The parsed value.

    Raises:
        InvalidNumberError: If *text* is not a number.
        NumberRangeError: If *text* is a finite literal too large for a float.
    """
    if not text or not text.isascii() or text != text.strip() or "_" in text:
        raise InvalidNumberError(text)

    unsigned = text.lstrip("+-").lower()
    if len(text) - len(unsigned) > 1:
        raise InvalidNumberError(text)
    if unsigned.startswith("0x"):
        return _parse_hex(text)
    if unsigned == "nan" and unsigned != text.lower():
        raise InvalidNumberError(text)

    try:
        value = float(text)
    except ValueError:
        raise InvalidNumberError(text) from None

    if math.isinf(value) and unsigned not in _INF_SPELLINGS:
        raise NumberRangeError(text)
    return value
