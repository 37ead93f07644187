"""Animated GIFs of random Lissajous figures."""

from __future__ import annotations

import io
import logging
import math
import random
import sys
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import BinaryIO

from PIL import Image

_log = logging.getLogger(__name__)

CYCLES = 5  # number of complete x oscillator revolutions
RES = 0.001  # angular resolution
SIZE = 100  # image canvas covers [-SIZE..+SIZE]
NFRAMES = 64  # number of animation frames
DELAY = 8  # delay between frames in 10ms units

WHITE_INDEX = 0
BLACK_INDEX = 1
PALETTE = [255, 255, 255, 0, 0, 0]


def _angles() -> list[float]:
    limit = CYCLES * 2 * math.pi
    angles = []
    t = 0.0
    while t < limit:
        angles.append(t)
        t += RES
    return angles


def lissajous_frames(rng: random.Random | None = None) -> list[Image.Image]:
    """Draw the frames of one animation, using ``rng`` to pick the frequency."""
    if rng is None:
        rng = random.Random()
    freq = rng.random() * 3.0  # relative frequency of y oscillator
    angles = _angles()
    xs = [SIZE + int(math.sin(t) * SIZE + 0.5) for t in angles]
    side = 2 * SIZE + 1
    frames = []
    phase = 0.0
    for _ in range(NFRAMES):
        img = Image.new("P", (side, side), WHITE_INDEX)
        img.putpalette(PALETTE)
        pixels = img.load()
        for t, x in zip(angles, xs):
            y = SIZE + int(math.sin(t * freq + phase) * SIZE + 0.5)
            pixels[x, y] = BLACK_INDEX
        phase += 0.1
        frames.append(img)
    return frames


def lissajous(out: BinaryIO, rng: random.Random | None = None) -> None:
    """Write an animated GIF of a random Lissajous figure to ``out``."""
    frames = lissajous_frames(rng)
    frames[0].save(
        out,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        duration=DELAY * 10,
        loop=NFRAMES,
        optimize=False,
    )


class _GifHandler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:
        buf = io.BytesIO()
        lissajous(buf)
        body = buf.getvalue()
        self.send_response(200)
        self.send_header("Content-Type", "image/gif")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        _log.debug("%s - %s", self.address_string(), format % args)


def main(argv: list[str] | None = None) -> int:
    """Write a GIF to standard output, or serve GIFs when given ``web``."""
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] == "web":
        try:
            with ThreadingHTTPServer(("localhost", 8000), _GifHandler) as httpd:
                httpd.serve_forever()
        except OSError as exc:
            print(f"lissajous: {exc}", file=sys.stderr)
            return 1
        except KeyboardInterrupt:
            pass
        return 0
    sys.stdout.flush()
    out = sys.stdout.buffer
    lissajous(out)
    out.flush()
    return 0