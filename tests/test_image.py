import pytest

from softgl.image import convert_float_image, read_image_rgba, write_image


def test_rgba_round_trip(tmp_path):
    data = bytes([1, 2, 3, 4, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100, 110, 120])
    path = tmp_path / "img.png"
    write_image(path, 2, 2, 4, data, False)
    buf = read_image_rgba(path)
    assert (buf.width, buf.height) == (2, 2)
    assert buf.get(0, 0) == tuple(data[0:4])
    assert buf.get(1, 0) == tuple(data[4:8])
    assert buf.get(0, 1) == tuple(data[8:12])
    assert buf.get(1, 1) == tuple(data[12:16])


def test_flip_y_reverses_rows(tmp_path):
    data = bytes([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12])
    path = tmp_path / "flip.png"
    write_image(path, 2, 2, 3, data, True)
    buf = read_image_rgba(path)
    assert buf.get(0, 0)[:3] == tuple(data[6:9])
    assert buf.get(1, 1)[:3] == tuple(data[3:6])


def test_grey_expands_to_rgba(tmp_path):
    path = tmp_path / "grey.png"
    write_image(path, 2, 1, 1, bytes([10, 200]), False)
    buf = read_image_rgba(path)
    assert buf.get(0, 0) == (10, 10, 10, 255)
    assert buf.get(1, 0) == (200, 200, 200, 255)


def test_grey_alpha_keeps_alpha(tmp_path):
    path = tmp_path / "ga.png"
    write_image(path, 1, 1, 2, bytes([77, 33]), False)
    buf = read_image_rgba(path)
    assert buf.get(0, 0) == (77, 77, 77, 33)


def test_rgb_gets_opaque_alpha(tmp_path):
    path = tmp_path / "rgb.png"
    write_image(path, 1, 1, 3, bytes([5, 6, 7]), False)
    assert read_image_rgba(path).get(0, 0) == (5, 6, 7, 255)


def test_unreadable_file_returns_none(tmp_path):
    path = tmp_path / "bad.png"
    path.write_bytes(b"not an image at all")
    assert read_image_rgba(path) is None


def test_missing_file_returns_none(tmp_path):
    assert read_image_rgba(tmp_path / "missing.png") is None


def test_write_rejects_bad_channel_count(tmp_path):
    with pytest.raises(ValueError):
        write_image(tmp_path / "x.png", 1, 1, 5, bytes(5), False)


def test_write_rejects_wrong_length(tmp_path):
    with pytest.raises(ValueError):
        write_image(tmp_path / "x.png", 2, 2, 4, bytes(10), False)


def test_convert_float_image_spans_full_range():
    out = convert_float_image([2.0, 3.0, 4.0, 6.0], 2, 2)
    assert len(out) == 4
    assert out[0] == (0, 0, 0, 255)
    assert out[3] == (255, 255, 255, 255)
    greys = [p[0] for p in out]
    assert greys == sorted(greys)
    assert all(p[0] == p[1] == p[2] for p in out)


def test_convert_float_image_too_short():
    with pytest.raises(ValueError):
        convert_float_image([1.0, 2.0], 2, 2)