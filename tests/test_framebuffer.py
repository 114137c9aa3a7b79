import numpy as np
import pytest
from PIL import Image

from spheretrace.core.vector import Vector3
from spheretrace.renderer.framebuffer import Framebuffer, OutputError
from spheretrace.renderer.tone_mapping import quantize


@pytest.fixture
def filled():
    """2x2 framebuffer with a distinct color in every cell."""
    fb = Framebuffer(2, 2)
    fb.set(0, 0, (1.0, 0.0, 0.0))   # bottom left
    fb.set(1, 0, (0.0, 1.0, 0.0))   # bottom right
    fb.set(0, 1, (0.0, 0.0, 1.0))   # top left
    fb.set(1, 1, (0.5, 0.5, 0.5))   # top right
    return fb


@pytest.mark.parametrize("x, y", [(2, 0), (0, 2), (-1, 0), (0, -1), (8, 8)])
def test_set_out_of_range(x, y):
    fb = Framebuffer(2, 2)
    with pytest.raises(IndexError, match="out of range"):
        fb.set(x, y, (0.0, 0.0, 0.0))


def test_get_out_of_range():
    with pytest.raises(IndexError):
        Framebuffer(4, 4).get(0, 4)


def test_set_twice_fails():
    fb = Framebuffer(2, 2)
    fb.set(1, 1, Vector3(0.1, 0.2, 0.3))
    with pytest.raises(RuntimeError, match="written twice"):
        fb.set(1, 1, Vector3(0.1, 0.2, 0.3))


def test_get_and_completion(filled):
    assert filled.get(1, 1) == Vector3(0.5, 0.5, 0.5)
    assert filled.written_count == 4
    assert filled.is_complete()

    fb = Framebuffer(3, 1)
    fb.set(0, 0, Vector3(1.0, 1.0, 1.0))
    assert fb.written_count == 1
    assert not fb.is_complete()


def test_quantize():
    values = np.array([0.0, 0.5, 1.0, 0.999])
    np.testing.assert_array_equal(quantize(values), [0, 127, 255, 254])
    assert quantize(values).dtype == np.uint8


@pytest.mark.parametrize("bad", [-0.01, 1.01, float("nan")])
def test_quantize_rejects_out_of_range(bad):
    with pytest.raises(ValueError, match="out of range"):
        quantize(np.array([0.5, bad]))


def test_ppm_layout(filled):
    data = filled.to_ppm_bytes()
    header = b"P6\n2 2\n255\n"
    assert data.startswith(header)
    pixels = data[len(header):]
    assert len(pixels) == 2 * 2 * 3
    # Top row first, left to right.
    assert pixels == bytes([0, 0, 255, 127, 127, 127,
                            255, 0, 0, 0, 255, 0])


def test_write_ppm(filled, tmp_path):
    path = tmp_path / "out.ppm"
    filled.write(str(path))
    assert path.read_bytes() == filled.to_ppm_bytes()


def test_unknown_suffix_writes_ppm(filled, tmp_path):
    path = tmp_path / "out.raw"
    filled.write(str(path))
    assert path.read_bytes().startswith(b"P6\n")


def test_write_png(filled, tmp_path):
    path = tmp_path / "out.png"
    filled.write(str(path))
    with Image.open(path) as img:
        assert img.size == (2, 2)
        assert img.convert("RGB").getpixel((0, 0)) == (0, 0, 255)
        assert img.convert("RGB").getpixel((0, 1)) == (255, 0, 0)


@pytest.mark.parametrize("name", ["out.ppm", "out.png"])
def test_write_failure_keeps_buffer(filled, tmp_path, name):
    before = filled.pixels.copy()
    bad_path = tmp_path / "missing" / name
    with pytest.raises(OutputError) as excinfo:
        filled.write(str(bad_path))
    assert isinstance(excinfo.value.__cause__, OSError)
    np.testing.assert_array_equal(filled.pixels, before)

    # The caller may retry somewhere else.
    good_path = tmp_path / name
    filled.write(str(good_path))
    assert good_path.exists()
