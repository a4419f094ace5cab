import pytest
from PIL import Image

from cubcast.config import ConfigError
from cubcast.textures import Texture, TextureSet, load_texture, load_textures

XPM_TEXT = """/* XPM */
static char *tex[] = {
"2 2 2 1",
"a c #FF0000",
"b c #0000FF",
"ab",
"ba"
};
"""


def _png(path, size, color):
    Image.new("RGB", size, color).save(path)
    return str(path)


def test_texture_pixel_row_major():
    texture = Texture(2, 2, (1, 2, 3, 4))
    assert texture.pixel(1, 0) == 2
    assert texture.pixel(0, 1) == 3


def test_texture_pixel_out_of_range():
    texture = Texture(2, 1, (5, 6))
    with pytest.raises(IndexError):
        texture.pixel(2, 0)
    with pytest.raises(IndexError):
        texture.pixel(0, -1)


def test_texture_size_mismatch():
    with pytest.raises(ValueError):
        Texture(2, 2, (1, 2, 3))


def test_load_texture_png(tmp_path):
    image = Image.new("RGB", (3, 2), (0, 0, 0))
    image.putpixel((2, 1), (0x12, 0x34, 0x56))
    path = tmp_path / "wall.png"
    image.save(path)
    texture = load_texture(path)
    assert (texture.width, texture.height) == (3, 2)
    assert texture.pixel(2, 1) == 0x123456
    assert texture.pixel(0, 0) == 0


def test_load_texture_xpm_matches_png(tmp_path):
    xpm = tmp_path / "wall.xpm"
    xpm.write_text(XPM_TEXT)
    image = Image.new("RGB", (2, 2))
    image.putpixel((0, 0), (255, 0, 0))
    image.putpixel((1, 0), (0, 0, 255))
    image.putpixel((0, 1), (0, 0, 255))
    image.putpixel((1, 1), (255, 0, 0))
    png = tmp_path / "wall.png"
    image.save(png)
    assert load_texture(xpm) == load_texture(png)


def test_load_texture_errors(tmp_path):
    with pytest.raises(ConfigError):
        load_texture(tmp_path / "missing.xpm")
    garbage = tmp_path / "garbage.xpm"
    garbage.write_text("not an image")
    with pytest.raises(ConfigError):
        load_texture(garbage)


def test_load_textures(tmp_path):
    paths = {
        "NO": _png(tmp_path / "no.png", (1, 1), (1, 0, 0)),
        "SO": _png(tmp_path / "so.png", (2, 1), (2, 0, 0)),
        "WE": _png(tmp_path / "we.png", (3, 1), (3, 0, 0)),
        "EA": _png(tmp_path / "ea.png", (4, 1), (4, 0, 0)),
        "S": _png(tmp_path / "s.png", (5, 1), (5, 0, 0)),
    }
    textures = load_textures(paths)
    assert isinstance(textures, TextureSet)
    widths = [t.width for t in (textures.north, textures.south, textures.west,
                                textures.east, textures.sprite)]
    assert widths == [1, 2, 3, 4, 5]
    assert textures.east.pixel(0, 0) == load_texture(paths["EA"]).pixel(3, 0)


def test_load_textures_missing_tag(tmp_path):
    path = _png(tmp_path / "a.png", (1, 1), (0, 0, 0))
    with pytest.raises(ConfigError):
        load_textures({"NO": path, "SO": path, "WE": path, "EA": path})