import io

import pytest
from PIL import Image

from primer.mandelbrot import BLACK, acos, main, mandelbrot, newton, render, sqrt


def test_origin_is_in_the_set():
    assert mandelbrot(0j) == BLACK


def test_far_point_escapes_at_once():
    assert mandelbrot(2 + 2j) == (255, 255, 255, 255)


def test_escape_shades_are_gray():
    r, g, b, a = mandelbrot(0.5 + 0.5j)
    assert r == g == b
    assert a == 255


def test_newton_root_converges_immediately():
    assert newton(1 + 0j) == (255, 255, 255, 255)


def test_newton_zero_is_black():
    assert newton(0j) == BLACK


@pytest.mark.parametrize("fn", [acos, sqrt])
@pytest.mark.parametrize("z", [0j, 1 + 1j, -1.5 - 0.5j, 2 - 2j])
def test_other_functions_give_valid_colours(fn, z):
    color = fn(z)
    assert len(color) == 4
    assert color[3] == 255
    assert all(0 <= c <= 255 for c in color)


def test_render_size_and_corners():
    img = render(mandelbrot, 8, 8)
    assert img.size == (8, 8)
    assert img.getpixel((0, 0)) == (255, 255, 255, 255)
    assert img.getpixel((4, 4)) == BLACK


def test_main_writes_png(capsysbinary):
    assert main(["--width", "4", "--height", "4"]) == 0
    data = capsysbinary.readouterr().out
    assert data[:8] == b"\x89PNG\r\n\x1a\n"
    with Image.open(io.BytesIO(data)) as img:
        assert img.size == (4, 4)