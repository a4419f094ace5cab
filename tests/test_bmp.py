from PIL import Image

from cubcast.bmp import encode_bmp, save_bmp
from cubcast.raycaster import Frame


def _frame():
    frame = Frame(2, 2)
    frame[0, 0] = 0xFF0000
    frame[1, 0] = 0x00FF00
    frame[0, 1] = 0x112233
    frame[1, 1] = 0x0000FF
    return frame


def test_header_fields():
    data = encode_bmp(_frame())
    assert data[:2] == b"BM"
    assert int.from_bytes(data[2:6], "little") == len(data)
    assert data[6:10] == bytes(4)
    assert int.from_bytes(data[10:14], "little") == 54
    assert int.from_bytes(data[14:18], "little") == 40
    assert int.from_bytes(data[18:22], "little") == 2
    assert int.from_bytes(data[22:26], "little") == 2
    assert int.from_bytes(data[26:28], "little") == 1
    assert int.from_bytes(data[28:30], "little") == 24
    assert data[30:54] == bytes(24)


def test_body_is_bottom_up_bgr_with_padding():
    data = encode_bmp(_frame())
    assert data[54:57] == bytes((0x33, 0x22, 0x11))
    assert data[57:60] == bytes((0xFF, 0x00, 0x00))
    assert data[60:62] == bytes(2)
    assert data[62:65] == bytes((0x00, 0x00, 0xFF))


def test_rows_are_four_byte_aligned():
    for width in range(1, 6):
        frame = Frame(width, 3)
        data = encode_bmp(frame)
        row_size = (len(data) - 54) // 3
        assert row_size % 4 == 0
        assert row_size >= width * 3


def test_save_round_trip(tmp_path):
    frame = _frame()
    path = tmp_path / "shot.bmp"
    save_bmp(path, frame)
    assert path.read_bytes() == encode_bmp(frame)
    with Image.open(path) as image:
        rgb = image.convert("RGB")
        assert rgb.size == (2, 2)
        assert rgb.getpixel((0, 0)) == (0xFF, 0x00, 0x00)
        assert rgb.getpixel((1, 0)) == (0x00, 0xFF, 0x00)
        assert rgb.getpixel((0, 1)) == (0x11, 0x22, 0x33)
        assert rgb.getpixel((1, 1)) == (0x00, 0x00, 0xFF)