"""Locale-aware number display.

Only digit grouping varies by locale.  ``en-IN`` uses the Indian system
(a group of three, then groups of two: 12,34,567.5); every other locale
groups by three.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

_INDIAN_GROUPING_LOCALES = {"en-IN", "hi-IN"}

# Wide enough for every finite double.
_WIDE = Context(prec=400)


def _group_digits(digits: str, locale: str) -> str:
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    size = 2 if locale in _INDIAN_GROUPING_LOCALES else 3
    groups = []
    while head:
        groups.insert(0, head[-size:])
        head = head[:-size]
    return ",".join(groups + [tail])


def format_number(value: float, max_fraction_digits: int = 2, locale: str = "en-IN") -> str:
    """Format with grouping and 0..``max_fraction_digits`` decimals.

    Halves round away from zero; trailing zeros are dropped, so 1200.5
    renders as ``1,200.5`` and 3.0 as ``3``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-∞" if value < 0 else "∞"

    quantum = Decimal(1).scaleb(-max_fraction_digits)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_WIDE)
    text = f"{abs(rounded):f}"
    whole, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0")

    out = _group_digits(whole, locale)
    if fraction:
        out = f"{out}.{fraction}"
    if rounded < 0:
        out = f"-{out}"
    return out
