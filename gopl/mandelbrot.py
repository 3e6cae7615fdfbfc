"""Images of the Mandelbrot set and a few other complex functions."""

from __future__ import annotations

import cmath
import sys

from PIL import Image

XMIN, YMIN, XMAX, YMAX = -2, -2, 2, 2
WIDTH, HEIGHT = 1024, 1024

BLACK = (0, 0, 0)

Color = tuple[int, int, int]


def _gray(y: int) -> Color:
    return (y, y, y)


def _clamp_shifted(value: int) -> int:
    return max(0, min(255, value >> 16))


def _ycbcr_to_rgb(y: int, cb: int, cr: int) -> Color:
    yy = y * 0x10101
    cb -= 128
    cr -= 128
    r = yy + 91881 * cr
    g = yy - 22554 * cb - 46802 * cr
    b = yy + 116130 * cb
    return _clamp_shifted(r), _clamp_shifted(g), _clamp_shifted(b)


def _to_uint8(x: float) -> int:
    return int(x) & 0xFF


def mandelbrot(z: complex) -> Color:
    """Shade z by how quickly it escapes; black if it stays bounded."""
    iterations, contrast = 200, 15
    v = 0j
    for n in range(iterations):
        v = v * v + z
        if abs(v) > 2:
            return _gray((255 - contrast * n) & 0xFF)
    return BLACK


def _from_components(y: int, v: complex) -> Color:
    blue = (_to_uint8(v.real * 128) + 127) & 0xFF
    red = (_to_uint8(v.imag * 128) + 127) & 0xFF
    return _ycbcr_to_rgb(y, blue, red)


def acos(z: complex) -> Color:
    """Colour z by its complex arc cosine."""
    return _from_components(192, cmath.acos(z))


def sqrt(z: complex) -> Color:
    """Colour z by its complex square root."""
    return _from_components(128, cmath.sqrt(z))


def newton(z: complex) -> Color:
    """Shade z by how fast Newton's method finds a root of z**4 - 1."""
    iterations, contrast = 37, 7
    for i in range(iterations):
        try:
            z -= (z - 1 / (z * z * z)) / 4
        except ZeroDivisionError:
            return BLACK
        if abs(z * z * z * z - 1) < 1e-6:
            return _gray(255 - contrast * i)
    return BLACK


def render(width: int = WIDTH, height: int = HEIGHT) -> Image.Image:
    """Render the Mandelbrot set over [-2, 2] x [-2, 2]."""
    img = Image.new("RGB", (width, height))
    img.putdata([
        mandelbrot(complex(
            px / width * (XMAX - XMIN) + XMIN,
            py / height * (YMAX - YMIN) + YMIN,
        ))
        for py in range(height)
        for px in range(width)
    ])
    return img


def main(argv: list[str] | None = None) -> int:
    render().save(sys.stdout.buffer, format="PNG")
    sys.stdout.buffer.flush()
    return 0