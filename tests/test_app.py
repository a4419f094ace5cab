import pytest

from cubcast.app import UsageError, main, parse_args, take_screenshot, usage
from cubcast.bmp import encode_bmp
from cubcast.config import PlayerStart, SceneConfig
from cubcast.game import Game
from cubcast.textures import Texture, TextureSet


def make_game():
    grid = [list(row) for row in ["11111", "10001", "10001", "10001", "11111"]]
    config = SceneConfig(6, 4, 0x0000FF, 0x00FF00, {}, grid, PlayerStart(2.5, 2.5, 0.0))
    tex = Texture(1, 1, (0xABCDEF,))
    return Game(config, TextureSet(tex, tex, tex, tex, tex), minimap=False)


def test_parse_args_single_file():
    assert parse_args(["scene.cub"]) == ("scene.cub", False)


def test_parse_args_save():
    assert parse_args(["scene.cub", "--save"]) == ("scene.cub", True)


def test_parse_args_invalid_option():
    with pytest.raises(UsageError, match="invalid option"):
        parse_args(["scene.cub", "--bogus"])


@pytest.mark.parametrize("argv", [[], ["a.cub", "--save", "x"]])
def test_parse_args_wrong_count(argv):
    with pytest.raises(UsageError, match="one argument required"):
        parse_args(argv)


def test_usage_contains_message_and_help():
    text = usage("Error: oops")
    assert text.startswith("Error: oops")
    assert "Usage : ./cub3d FILE [--save]" in text
    assert "--save" in text


def test_take_screenshot_writes_bmp(tmp_path):
    game = make_game()
    target = tmp_path / "shot.bmp"
    frame = take_screenshot(game, str(target))
    data = target.read_bytes()
    assert data[:2] == b"BM"
    assert data == encode_bmp(frame)


def test_main_bad_option_prints_usage(capsys):
    assert main(["scene.cub", "--bad"]) == 1
    out = capsys.readouterr().out
    assert "Error: invalid option" in out
    assert "Usage" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.cub")]) == 1
    assert "File reading failed" in capsys.readouterr().out


def test_main_invalid_resolution(tmp_path, capsys):
    scene = tmp_path / "scene.cub"
    scene.write_text("R 0 600\nC 1,2,3\nF 4,5,6\n", encoding="utf-8")
    assert main([str(scene), "--save"]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Configuration file Error:")
    assert "Invalid resolution" in out