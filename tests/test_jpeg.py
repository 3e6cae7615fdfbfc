import io

import pytest
from PIL import Image

from gopl.jpeg import to_jpeg


def _encoded(img, fmt):
    buf = io.BytesIO()
    img.save(buf, format=fmt)
    buf.seek(0)
    return buf


def test_png_becomes_jpeg():
    src = _encoded(Image.new("RGB", (20, 10), (200, 30, 30)), "PNG")
    dst, log = io.BytesIO(), io.StringIO()
    to_jpeg(src, dst, log)
    assert log.getvalue() == "Input format = png\n"
    dst.seek(0)
    with Image.open(dst) as out:
        assert out.format == "JPEG"
        assert out.size == (20, 10)


def test_jpeg_input_is_accepted():
    src = _encoded(Image.new("RGB", (8, 8), (10, 20, 30)), "JPEG")
    dst, log = io.BytesIO(), io.StringIO()
    to_jpeg(src, dst, log)
    assert log.getvalue() == "Input format = jpeg\n"
    assert dst.getvalue()[:2] == b"\xff\xd8"


def test_alpha_is_dropped():
    src = _encoded(Image.new("RGBA", (4, 4), (0, 0, 255, 128)), "PNG")
    dst = io.BytesIO()
    to_jpeg(src, dst, io.StringIO())
    dst.seek(0)
    with Image.open(dst) as out:
        assert out.mode == "RGB"


def test_gray_stays_gray():
    src = _encoded(Image.new("L", (4, 4), 90), "PNG")
    dst = io.BytesIO()
    to_jpeg(src, dst, io.StringIO())
    dst.seek(0)
    with Image.open(dst) as out:
        assert out.mode == "L"


def test_gif_is_unknown_format():
    src = _encoded(Image.new("P", (4, 4)), "GIF")
    with pytest.raises(ValueError, match="image: unknown format"):
        to_jpeg(src, io.BytesIO(), io.StringIO())


def test_garbage_is_unknown_format():
    log = io.StringIO()
    with pytest.raises(ValueError, match="image: unknown format"):
        to_jpeg(io.BytesIO(b"not an image"), io.BytesIO(), log)
    assert log.getvalue() == ""