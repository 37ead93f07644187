"""SVG rendering of a 3-D surface function."""

from __future__ import annotations

import argparse
import math
import sys

from primer.tempconv import _format_g

WIDTH, HEIGHT = 600, 320  # canvas size in pixels
CELLS = 100  # number of grid cells
XYRANGE = 30.0  # axis ranges (-XYRANGE..+XYRANGE)
XYSCALE = WIDTH / 2 / XYRANGE  # pixels per x or y unit
ZSCALE = HEIGHT * 0.4  # pixels per z unit
ANGLE = math.pi / 6  # angle of x, y axes (=30°)

SIN30, COS30 = math.sin(ANGLE), math.cos(ANGLE)


def f(x: float, y: float) -> float:
    """Height of the surface: sin(r)/r, NaN at the origin."""
    r = math.hypot(x, y)
    if r == 0:
        return math.nan
    return math.sin(r) / r


def corner(i: int, j: int) -> tuple[float, float]:
    """Project the corner of grid cell (i, j) onto the canvas."""
    x = XYRANGE * (i / CELLS - 0.5)
    y = XYRANGE * (j / CELLS - 0.5)
    z = f(x, y)
    sx = WIDTH / 2 + (x - y) * COS30 * XYSCALE
    sy = HEIGHT / 2 + (x + y) * SIN30 * XYSCALE - z * ZSCALE
    return sx, sy


def _point(p: tuple[float, float]) -> str:
    return f"{_format_g(p[0])},{_format_g(p[1])}"


def svg() -> str:
    """Return the whole SVG document."""
    parts = [
        "<svg xmlns='http://www.w3.org/2000/svg' "
        "style='stroke: grey; fill: white; stroke-width: 0.7' "
        f"width='{WIDTH}' height='{HEIGHT}'>"
    ]
    for i in range(CELLS):
        for j in range(CELLS):
            points = (corner(i + 1, j), corner(i, j), corner(i, j + 1), corner(i + 1, j + 1))
            parts.append("<polygon points='" + " ".join(map(_point, points)) + "'/>\n")
    parts.append("</svg>\n")
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Write the SVG document to standard output."""
    parser = argparse.ArgumentParser(
        prog="surface", description="Write an SVG rendering of a 3-D surface to standard output."
    )
    parser.parse_args(argv)
    sys.stdout.write(svg())
    sys.stdout.flush()
    return 0