"""Number formatting shared by labels and tooltips."""

from __future__ import annotations

import math
from decimal import Decimal


def format_number(value: float) -> str:
    """Format a number in its shortest round-trip form.

    Whole numbers drop the trailing ``.0`` (``11.0`` -> ``11``) and small or
    large magnitudes are written positionally instead of in exponent form
    (``1e-05`` -> ``0.00001``). Negative zero keeps its sign (``-0``).
    """
    if not math.isfinite(value):
        return str(value)
    if value == 0 and math.copysign(1.0, value) < 0:
        return "-0"
    if value == int(value):
        return str(int(value))
    return format(Decimal(repr(float(value))), "f")
