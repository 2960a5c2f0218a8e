import pytest

from circletasks.image import Image
from circletasks.ppm import (
    image_ppm_bytes,
    iteration_ppm_bytes,
    write_iteration_ppm,
    write_ppm_image,
)


def test_iteration_header_and_size():
    out = iteration_ppm_bytes([0, 256], 2, 1, 256)
    header = b"P6\n2 1\n255\n"
    assert out.startswith(header)
    assert len(out) == len(header) + 3 * 2


def test_iteration_extremes():
    out = iteration_ppm_bytes([0, 256], 2, 1, 256)
    body = out[len(b"P6\n2 1\n255\n"):]
    assert body == bytes([0, 0, 0, 255, 255, 255])


def test_iteration_clamped_to_max():
    assert iteration_ppm_bytes([1000], 1, 1, 256) == iteration_ppm_bytes([256], 1, 1, 256)


def test_iteration_brightness_is_monotonic():
    out = iteration_ppm_bytes(list(range(0, 257, 16)), 17, 1, 256)
    body = out[len(b"P6\n17 1\n255\n"):]
    levels = body[::3]
    assert list(levels) == sorted(levels)
    assert body[0::3] == body[1::3] == body[2::3]


def test_iteration_too_few_values():
    with pytest.raises(ValueError):
        iteration_ppm_bytes([1, 2, 3], 2, 2, 256)


def test_write_iteration_ppm(tmp_path, capsys):
    path = tmp_path / "mandel.ppm"
    write_iteration_ppm([0, 64, 128, 256], 2, 2, str(path), 256)
    assert path.read_bytes() == iteration_ppm_bytes([0, 64, 128, 256], 2, 2, 256)
    assert capsys.readouterr().out == f"Wrote image file {path}\n"


def test_image_rows_written_top_first():
    img = Image(1, 2)
    img.data[0:4] = [1.0, 0.0, 0.0, 1.0]   # row 0 (bottom)
    img.data[4:8] = [0.0, 0.0, 1.0, 1.0]   # row 1 (top)
    out = image_ppm_bytes(img)
    header = b"P6\n1 2\n255\n"
    assert out == header + bytes([0, 0, 255, 255, 0, 0])


def test_image_channels_clamped():
    img = Image(1, 1)
    img.data[:] = [2.0, -1.0, 1.0, 0.5]
    out = image_ppm_bytes(img)
    assert out[-3:] == bytes([255, 0, 255])


def test_write_ppm_image(tmp_path, capsys):
    img = Image(2, 2)
    img.clear(1.0, 1.0, 1.0, 1.0)
    path = tmp_path / "frame.ppm"
    write_ppm_image(img, str(path))
    data = path.read_bytes()
    assert data == b"P6\n2 2\n255\n" + bytes([255] * 12)
    assert "Wrote image file" in capsys.readouterr().out


def test_write_ppm_image_bad_path(tmp_path):
    with pytest.raises(OSError):
        write_ppm_image(Image(1, 1), str(tmp_path / "missing" / "x.ppm"))