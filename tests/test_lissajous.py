import io
import random

from PIL import Image

from gopl.lissajous import PALETTE, lissajous, lissajous_frames


def test_frame_count_and_size():
    frames = lissajous_frames(1, 3, 1.0)
    assert len(frames) == 3
    assert all(frame.size == (201, 201) for frame in frames)


def test_frames_use_only_background_and_own_index():
    frames = lissajous_frames(1, 4, 1.5)
    for i, frame in enumerate(frames):
        assert set(frame.getdata()) <= {0, i % 3}
    assert 1 in set(frames[1].getdata())
    assert 2 in set(frames[2].getdata())


def test_first_frame_is_background_only():
    frames = lissajous_frames(1, 1, 2.0)
    assert set(frames[0].getdata()) == {0}


def test_frames_carry_palette():
    frame = lissajous_frames(1, 2, 1.0)[1]
    assert frame.getpalette()[: len(PALETTE)] == list(PALETTE)


def test_zero_cycles_draws_nothing():
    frames = lissajous_frames(0, 3, 1.0)
    assert all(set(frame.getdata()) == {0} for frame in frames)


def test_gif_round_trip():
    out = io.BytesIO()
    lissajous(out, 1, 3, random.Random(3))
    out.seek(0)
    with Image.open(out) as img:
        assert img.format == "GIF"
        assert img.size == (201, 201)
        assert img.n_frames == 3
        assert img.info["loop"] == 3
        assert img.info["duration"] == 80


def test_same_seed_same_output():
    a, b = io.BytesIO(), io.BytesIO()
    lissajous(a, 1, 2, random.Random(11))
    lissajous(b, 1, 2, random.Random(11))
    assert a.getvalue() == b.getvalue()
    assert a.getvalue().startswith(b"GIF89a")


def test_no_frames_writes_nothing():
    out = io.BytesIO()
    lissajous(out, 1, 0, random.Random(1))
    assert out.getvalue() == b""