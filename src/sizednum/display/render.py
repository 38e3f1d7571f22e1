from __future__ import annotations
import math

import numpy as np

from ..errors import UnsupportedForTypeError
from ..models.display import (
    BinaryDisplay,
    DecimalDisplay,
    HexDisplay,
    NumberDisplay,
    OctalDisplay,
    ScientificDisplay,
)
from ..models.value import SizedFloat, SizedInteger, SizedValue

# Byte widths that get zero padding; anything else renders unpadded
PADDED_SIZES = frozenset({1, 2, 4, 8, 16})


def render(value: SizedValue, display: NumberDisplay) -> str:
    """
    Render an already-read value in the given display mode.

    Hex, octal and binary are integer-only and raise UnsupportedForTypeError
    for floats. Padding follows the value's stored width, not its magnitude.
    """
    if isinstance(value, SizedFloat):
        return render_float(value, display)
    return render_integer(value, display)


# -----------------------------
# Integers
# -----------------------------

def _bit_pattern(value: SizedInteger) -> int:
    """Two's complement pattern at the value's width (identity for unsigned)."""
    return value.value & ((1 << value.bits) - 1)

def _int_scientific(n: int) -> str:
    sign = "-" if n < 0 else ""
    digits = str(abs(n))
    exponent = len(digits) - 1
    mantissa = digits.rstrip("0") or "0"
    if len(mantissa) > 1:
        mantissa = f"{mantissa[0]}.{mantissa[1:]}"
    return f"{sign}{mantissa}e{exponent}"

def render_integer(value: SizedInteger, display: NumberDisplay) -> str:
    if isinstance(display, DecimalDisplay):
        return str(value.value)

    if isinstance(display, OctalDisplay):
        return format(_bit_pattern(value), "o")

    if isinstance(display, BinaryDisplay):
        digits = format(_bit_pattern(value), "b")
        if display.options.padded and value.size in PADDED_SIZES:
            digits = digits.zfill(value.bits)
        return digits

    if isinstance(display, HexDisplay):
        opts = display.options
        digits = format(_bit_pattern(value), "x")
        if opts.padded and value.size in PADDED_SIZES:
            digits = digits.zfill(value.size * 2)
        if opts.uppercase:
            digits = digits.upper()
        return "0x" + digits if opts.prefix else digits

    if isinstance(display, ScientificDisplay):
        out = _int_scientific(value.value)
        return out.replace("e", "E") if display.options.uppercase else out

    raise TypeError(f"unknown display mode {display!r}")


# -----------------------------
# Floats
# -----------------------------

def _as_numpy(value: SizedFloat):
    # float32 needs its own shortest repr: 3.14f is not 3.140000104904175
    return np.float32(value.value) if value.size == 4 else np.float64(value.value)

def _non_finite(x: float) -> str | None:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    return None

def _float_scientific(value: SizedFloat) -> str:
    text = np.format_float_scientific(_as_numpy(value), unique=True, trim="-", exp_digits=1)
    mantissa, _, exponent = text.partition("e")
    if "." in mantissa:
        mantissa = mantissa.rstrip("0").rstrip(".")
    return f"{mantissa}e{int(exponent)}"

def render_float(value: SizedFloat, display: NumberDisplay) -> str:
    if isinstance(display, DecimalDisplay):
        special = _non_finite(value.value)
        if special is not None:
            return special
        return np.format_float_positional(_as_numpy(value), unique=True, trim="-")

    if isinstance(display, ScientificDisplay):
        special = _non_finite(value.value)
        if special is not None:
            return special
        out = _float_scientific(value)
        return out.replace("e", "E") if display.options.uppercase else out

    if isinstance(display, (HexDisplay, OctalDisplay, BinaryDisplay)):
        raise UnsupportedForTypeError(display.kind, f"f{value.size * 8}")

    raise TypeError(f"unknown display mode {display!r}")
