"""Fractal images: the Mandelbrot set and a few other complex functions."""

from __future__ import annotations

import argparse
import cmath
import sys
from collections.abc import Callable

from PIL import Image

Color = tuple[int, int, int, int]

XMIN, YMIN, XMAX, YMAX = -2, -2, 2, 2
BLACK: Color = (0, 0, 0, 255)


def _gray(y: int) -> Color:
    y &= 0xFF
    return (y, y, y, 255)


def _clamp(v: int) -> int:
    return min(255, max(0, v >> 16))


def _ycbcr(y: int, cb: int, cr: int) -> Color:
    yy = y * 0x10101
    cb1 = cb - 128
    cr1 = cr - 128
    r = yy + 91881 * cr1
    g = yy - 22554 * cb1 - 46802 * cr1
    b = yy + 116130 * cb1
    return (_clamp(r), _clamp(g), _clamp(b), 255)


def _byte(x: float) -> int:
    return int(x) & 0xFF


def mandelbrot(z: complex) -> Color:
    """Shade ``z`` by how quickly it escapes under v = v*v + z."""
    iterations, contrast = 200, 15
    v = 0j
    for n in range(iterations):
        v = v * v + z
        if abs(v) > 2:
            return _gray(255 - contrast * n)
    return BLACK


def acos(z: complex) -> Color:
    v = cmath.acos(z)
    blue = (_byte(v.real * 128) + 127) & 0xFF
    red = (_byte(v.imag * 128) + 127) & 0xFF
    return _ycbcr(192, blue, red)


def sqrt(z: complex) -> Color:
    v = cmath.sqrt(z)
    blue = (_byte(v.real * 128) + 127) & 0xFF
    red = (_byte(v.imag * 128) + 127) & 0xFF
    return _ycbcr(128, blue, red)


def newton(z: complex) -> Color:
    """Shade ``z`` by how quickly Newton's method finds a root of z**4 - 1."""
    iterations, contrast = 37, 7
    for i in range(iterations):
        try:
            z -= (z - 1 / (z * z * z)) / 4
        except ZeroDivisionError:
            return BLACK
        if abs(z * z * z * z - 1) < 1e-6:
            return _gray(255 - contrast * i)
    return BLACK


def render(
    color_fn: Callable[[complex], Color] = mandelbrot,
    width: int = 1024,
    height: int = 1024,
) -> Image.Image:
    """Render ``color_fn`` over the square [-2, 2] x [-2, 2] of the complex plane."""
    img = Image.new("RGBA", (width, height))
    pixels = []
    for py in range(height):
        y = py / height * (YMAX - YMIN) + YMIN
        for px in range(width):
            x = px / width * (XMAX - XMIN) + XMIN
            pixels.append(color_fn(complex(x, y)))
    img.putdata(pixels)
    return img


_FUNCTIONS = {"mandelbrot": mandelbrot, "acos": acos, "sqrt": sqrt, "newton": newton}


def main(argv: list[str] | None = None) -> int:
    """Write a PNG image of a fractal to standard output."""
    parser = argparse.ArgumentParser(prog="mandelbrot", description="Emit a fractal PNG.")
    parser.add_argument("--func", choices=sorted(_FUNCTIONS), default="mandelbrot")
    parser.add_argument("--width", type=int, default=1024)
    parser.add_argument("--height", type=int, default=1024)
    ns = parser.parse_args(argv)
    img = render(_FUNCTIONS[ns.func], ns.width, ns.height)
    sys.stdout.flush()
    out = sys.stdout.buffer
    img.save(out, format="PNG")
    out.flush()
    return 0