# cubcast

cubcast renders a first-person view of a grid maze using raycasting. A scene
is described by a `.cub` file that sets the screen resolution, the floor and
ceiling colours, the wall and sprite textures, and the map. The scene can be
explored in a window, or its first frame can be written to a BMP image.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

Open a window and walk around the scene:

```
cubcast scene.cub
```

The window shows a 200 x 200 overview of the map in its top-left corner:
open cells are white, every other cell is black, and the player is a red
square.

Render the first frame to `cub3d.bmp` in the current directory and exit,
without opening a window (the map overview is left out of the image):

```
cubcast scene.cub --save
```

Any option other than `--save`, or a wrong number of arguments, prints the
usage text and exits with status 1.

### Controls

| Key            | Action              |
| -------------- | ------------------- |
| W / Up         | move forward        |
| S / Down       | move backward       |
| A              | strafe left         |
| D              | strafe right        |
| Left / Right   | turn                |
| Escape         | quit                |

Closing the window also quits. Movement stops at walls.

## The `.cub` file

```
R 640 480
NO textures/north.xpm
SO textures/south.xpm
WE textures/west.xpm
EA textures/east.xpm
S  textures/sprite.xpm
F 100,80,60
C 120,180,255
MAP
111111
100201
1N0001
111111
```

- The file name must end in `.cub`.
- `R width height`: the resolution. Both must be positive; if either is above
  1920 x 1080, the resolution becomes 1920 x 1080.
- `NO`, `SO`, `WE`, `EA`, `S`: the wall and sprite textures. Each path must end
  in `.xpm` and be readable; images are loaded with Pillow.
- `F` and `C`: floor and ceiling colours as `r,g,b`, each 0 to 255.
- `MAP`: the lines that follow, each starting with `1`, form the map.
  Whitespace inside a map line is ignored. The map must be rectangular, have
  walls (`1`) all around its edge, and hold only `0` (empty), `1` (wall),
  `2` (sprite) and exactly one player start: `N`, `S`, `E` or `W`, which also
  sets the direction the player faces.

Any error stops the program with exit status 1 and a message such as
`Configuration file Error: Invalid resolution`.

## Using it as a library

```python
from cubcast.config import load_config
from cubcast.textures import load_textures
from cubcast.game import Game, Key
from cubcast.bmp import save_bmp

config = load_config("scene.cub")
game = Game(config, load_textures(config.textures), minimap=False)
game.press(Key.W)
game.step()
game.update_direction()
save_bmp("frame.bmp", game.render())
```

- `cubcast.config`: `load_config` reads a file and `parse_config` takes its
  lines; both return a `SceneConfig` or raise `ConfigError`. The individual
  parsers (`parse_resolution`, `parse_background_colors`,
  `parse_texture_paths`, `parse_map`, `validate_map`, `find_player`) are
  available too.
- `cubcast.textures`: `load_texture` and `load_textures` return `Texture`
  and `TextureSet` objects holding packed `0xRRGGBB` pixels.
- `cubcast.raycaster`: `Frame` is a pixel buffer indexed as `frame[x, y]`;
  `View.from_angle` builds a camera; `cast_ray` traces one ray; `render` draws
  a whole frame and returns the wall distance of each column.
- `cubcast.bmp`: `encode_bmp` returns a frame as 24-bit BMP bytes and
  `save_bmp` writes them to a file.
- `cubcast.game`: `Game` holds the player, the held keys and the frame;
  `draw_minimap` draws the map overview.
- `cubcast.app`: `main` is the command described above.

## Limitations

Sprites (`2` cells) are located and ordered by distance from the player
(`find_sprites`, `sort_sprites`), but they are not drawn: a sprite cell
renders as open floor, and the sprite texture is loaded but unused. There is
no running key, sound, mouse input or collision with sprites.