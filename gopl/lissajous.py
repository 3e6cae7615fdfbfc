"""Animated GIFs of random Lissajous figures."""

from __future__ import annotations

import io
import math
import random
import re
import sys
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import BinaryIO
from urllib.parse import parse_qs, urlsplit

from PIL import Image

PALETTE = (0, 0, 0, 11, 156, 49, 0, 156, 255)

CYCLES = 5
NFRAMES = 64
_RES = 0.001
_SIZE = 100
_DELAY_MS = 80
_ADDRESS = ("localhost", 8000)


def lissajous_frames(cycles: int, nframes: int, freq: float) -> list[Image.Image]:
    """Draw nframes paletted frames; frame i is inked with palette index i % 3."""
    side = 2 * _SIZE + 1
    limit = cycles * 2 * math.pi
    frames = []
    phase = 0.0
    for i in range(nframes):
        pixels = bytearray(side * side)
        color = i % 3
        t = 0.0
        while t < limit:
            px = _SIZE + int(math.sin(t) * _SIZE + 0.5)
            py = _SIZE + int(math.sin(t * freq + phase) * _SIZE + 0.5)
            if 0 <= px < side and 0 <= py < side:
                pixels[py * side + px] = color
            t += _RES
        frame = Image.frombytes("P", (side, side), bytes(pixels))
        frame.putpalette(PALETTE)
        frames.append(frame)
        phase += 0.1
    return frames


def lissajous(
    out: BinaryIO,
    cycles: int = CYCLES,
    nframes: int = NFRAMES,
    rng: random.Random | None = None,
) -> None:
    """Write an animated GIF of a Lissajous figure with a random frequency.

    Nothing is written when there are no frames to encode.
    """
    rng = random.Random() if rng is None else rng
    freq = rng.random() * 3.0
    frames = lissajous_frames(cycles, nframes, freq)
    if not frames:
        return
    frames[0].save(
        out,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        duration=_DELAY_MS,
        loop=nframes,
        optimize=False,
    )


def _atoi(text: str) -> int:
    return int(text) if re.fullmatch(r"[+-]?[0-9]+", text) else 0


def _int_param(query: dict[str, list[str]], name: str, default: int) -> int:
    values = query.get(name)
    if not values or values[0] == "":
        return default
    return _atoi(values[0])


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:
        query = parse_qs(urlsplit(self.path).query, keep_blank_values=True)
        buffer = io.BytesIO()
        lissajous(
            buffer,
            _int_param(query, "cycles", CYCLES),
            _int_param(query, "nframes", NFRAMES),
        )
        body = buffer.getvalue()
        self.send_response(200)
        self.send_header("Content-Type", "image/gif")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args) -> None:
        pass


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] == "web":
        try:
            with ThreadingHTTPServer(_ADDRESS, _Handler) as server:
                server.serve_forever()
        except OSError as err:
            print(err, file=sys.stderr)
            return 1
        return 0
    lissajous(sys.stdout.buffer)
    sys.stdout.buffer.flush()
    return 0