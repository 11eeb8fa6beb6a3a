"""Number formatting and small numeric helpers."""

from __future__ import annotations

import random
import struct


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def i_toa(num: int) -> str:
    """Format an integer in base ten."""
    return str(int(num))


def power(num: int, n: int) -> int:
    """Multiply ``num`` by itself ``n`` times; exponents below 2 give ``num``."""
    base = num
    while n > 1:
        base *= num
        n -= 1
    return base


def _digits_with_point(value: int, point_at: int) -> str:
    """Write the digits of ``value``, putting a point once ``point_at`` characters are out."""
    out: list[str] = []
    for position, digit in enumerate(str(value)):
        if position > 0 and len(out) == point_at:
            out.append(".")
        out.append(digit)
    return "".join(out)


def f_toa(num: float) -> str:
    """Format the magnitude of a number with one decimal place scaled by its digit count.

    The sign is dropped. The value is scaled into (0, 1] by powers of ten,
    multiplied back out with one extra digit and printed with a decimal
    point after the integer part.
    """
    value = abs(_f32(num))
    shifts = 0
    while value > 1.0:
        value = _f32(value / 10)
        shifts += 1
    scaled = int(_f32(value * float(power(10, shifts + 1))))
    return _digits_with_point(scaled, shifts)


def get_random(upper: int, lower: int) -> int:
    """Return a random integer between ``lower`` and ``upper`` inclusive."""
    if upper < lower:
        raise ValueError(f"empty range: upper {upper} is below lower {lower}")
    return random.randint(lower, upper)