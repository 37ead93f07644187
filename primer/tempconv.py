"""Celsius and Fahrenheit temperatures and conversions between them."""

from __future__ import annotations

import math
import sys
from decimal import Decimal


def _format_g(x: float) -> str:
    """Format ``x`` with the shortest digits, switching to exponent form
    when the exponent is below -4 or at least 6."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    if x == 0:
        return "-0" if math.copysign(1.0, x) < 0 else "0"
    sign, digit_tuple, exponent = Decimal(repr(float(x))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    nd = len(digits)
    dp = nd + exponent
    exp = dp - 1
    prefix = "-" if sign else ""
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if nd > 1 else "")
        esign = "-" if exp < 0 else "+"
        return f"{prefix}{mantissa}e{esign}{abs(exp):02d}"
    if dp <= 0:
        body = "0." + "0" * -dp + digits
    elif dp >= nd:
        body = digits + "0" * (dp - nd)
    else:
        body = digits[:dp] + "." + digits[dp:]
    return prefix + body


class Celsius(float):
    """A temperature in degrees Celsius."""

    def __str__(self) -> str:
        return f"{_format_g(self)}°C"


class Fahrenheit(float):
    """A temperature in degrees Fahrenheit."""

    def __str__(self) -> str:
        return f"{_format_g(self)}°F"


ABSOLUTE_ZERO_C = Celsius(-273.15)
FREEZING_C = Celsius(0)
BOILING_C = Celsius(100)


def c_to_f(c: float) -> Fahrenheit:
    """Convert a Celsius temperature to Fahrenheit."""
    return Fahrenheit(c * 9 / 5 + 32)


def f_to_c(f: float) -> Celsius:
    """Convert a Fahrenheit temperature to Celsius."""
    return Celsius((f - 32) * 5 / 9)


def main(argv: list[str] | None = None) -> int:
    """Print each numeric argument as both Fahrenheit and Celsius."""
    args = sys.argv[1:] if argv is None else argv
    for arg in args:
        try:
            t = float(arg)
        except ValueError as exc:
            print(f"cf: {exc}", file=sys.stderr)
            return 1
        f = Fahrenheit(t)
        c = Celsius(t)
        print(f"{f} = {f_to_c(f)}, {c} = {c_to_f(c)}")
    return 0