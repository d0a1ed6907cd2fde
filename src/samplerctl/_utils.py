"""Text and number helpers shared by the enumerator and the command handlers."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any, Iterable

_LEADING_NUMBER = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII
)


def parse_float(text: Any) -> float:
    """Parse the leading decimal number of a string.

    Mirrors browser ``parseFloat``: leading whitespace is skipped, trailing
    garbage is ignored and text without a numeric prefix yields NaN.

    :param text: The text to parse. ``None`` parses as NaN.
    :return: The parsed number, possibly NaN or infinite.
    """
    if text is None:
        return math.nan
    match = _LEADING_NUMBER.match(str(text).lstrip())
    if match is None:
        return math.nan
    token = match.group(0)
    if token.lstrip("+-") == "Infinity":
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def format_number(number: float) -> str:
    """Render a number the way the host UI stores it in a control's value.

    Integral values drop the fractional part (``2`` not ``2.0``), non-finite
    values read ``NaN``/``Infinity`` and exponents carry no zero padding.
    """
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == int(number) and abs(number) < 1e21:
        return str(int(number))

    text = repr(float(number))
    if "e" not in text:
        return text
    if 1e-6 <= abs(number) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    sign = "-" if exponent.startswith("-") else "+"
    return f"{mantissa}e{sign}{exponent.lstrip('+-').lstrip('0')}"


def is_true_boolean(text: Any, truthy_tokens: Iterable[str]) -> bool:
    """Check whether ``text`` is one of the recognised truthy tokens."""
    if text is None:
        return False
    return str(text).strip().lower() in {t.lower() for t in truthy_tokens}
