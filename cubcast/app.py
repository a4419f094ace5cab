"""Command line entry point: render a scene in a window or to a BMP file."""

from __future__ import annotations

import sys
from typing import Sequence

from cubcast.bmp import save_bmp
from cubcast.config import ConfigError, load_config
from cubcast.game import Game, Key
from cubcast.raycaster import Frame
from cubcast.textures import load_textures

SCREENSHOT_PATH = "cub3d.bmp"
SAVE_OPTION = "--save"
WINDOW_TITLE = "Cub3D"


class UsageError(Exception):
    """Raised when the command line arguments are wrong."""


def usage(message: str = "") -> str:
    """Return *message* followed by the usage text."""
    return (
        f"{message}\n\n"
        "Usage : ./cub3d FILE [--save]\n"
        "FILE: path to .cub configuration file\n"
        " --save,\toption to screenshot 1rst frame\n"
    )


def parse_args(argv: Sequence[str]) -> tuple[str, bool]:
    """Return (scene path, save flag) from the arguments after the program name."""
    argv = list(argv)
    if len(argv) == 2 and argv[1] != SAVE_OPTION:
        raise UsageError("Error: invalid option")
    if len(argv) not in (1, 2):
        raise UsageError("Error: one argument required")
    return argv[0], len(argv) == 2


def take_screenshot(game: Game, path: str = SCREENSHOT_PATH) -> Frame:
    """Render the first frame and write it to *path* as a BMP file."""
    game.update_direction()
    frame = game.render()
    save_bmp(path, frame)
    return frame


def _surface(pygame, frame: Frame):
    data = b"".join(color.to_bytes(3, "big") for color in frame.pixels)
    return pygame.image.frombuffer(data, (frame.width, frame.height), "RGB")


def run_window(game: Game) -> None:
    """Show the scene in a window until it is closed or escape is pressed."""
    import pygame

    keymap = {
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_w: Key.W,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
        pygame.K_ESCAPE: Key.ESCAPE,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.frame.width, game.frame.height))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN and event.key in keymap:
                    game.press(keymap[event.key])
                elif event.type == pygame.KEYUP and event.key in keymap:
                    game.release(keymap[event.key])
            if not game.running:
                break
            frame = game.render()
            screen.blit(_surface(pygame, frame), (0, 0))
            pygame.display.flip()
            game.update_direction()
            game.step()
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        path, save = parse_args(argv)
    except UsageError as exc:
        print(usage(str(exc)), end="")
        return 1
    try:
        config = load_config(path)
        textures = load_textures(config.textures)
    except ConfigError as exc:
        print(f"Configuration file Error: {exc}")
        return 1
    game = Game(config, textures, minimap=not save)
    if save:
        take_screenshot(game, SCREENSHOT_PATH)
    else:
        run_window(game)
    return 0