# raycube

A small raycasting engine for grid maps. It reads a scene description with
wall textures, floor and ceiling colours and a map, checks that the map is
closed and holds exactly one player, casts one ray per screen column with the
DDA algorithm and paints textured walls into an in-memory pixel buffer.

It has no dependencies beyond the standard library.

## Install

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Scene files

A scene lists four texture lines, two colour lines and the map:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
111111
100001
1000N1
111111
```

- A line containing `.xpm` is a texture line; the word after its last blank
  is the texture path (used as given, so relative paths are relative to the
  current directory).
- A line containing `,` is a colour line; its first three numbers are red,
  green and blue.
- Every other non-empty line is a map row. `0` is open floor, `1` is a wall,
  a blank is outside the map, and one of `N`, `S`, `W`, `E` marks the
  player's start and facing (90, 270, 180 and 0 degrees).

Every open cell and the start cell must be enclosed: not on the first or last
row or the first column, and with no blank or missing cell next to it.
Anything malformed raises `raycube.mapfile.MapError`.

## Modules

- `raycube.mapfile` — `load_scene(path)` / `parse_scene(lines)` build a
  `Scene` (`north`, `south`, `west`, `east`, `floor_color`, `ceiling_color`,
  `grid`, `player`, and the `width` / `height` properties). `read_lines`,
  `build_grid`, `check_closed` and `find_player` are the steps it uses.
- `raycube.xpm` — `load_xpm(path)`, `parse_xpm_text(text)` and
  `parse_xpm_lines(lines)` decode XPM images into an `Image`. Colours are
  `#RRGGBB` values or names looked up with
  `raycube.colornames.lookup_color`; `None` becomes the transparent pixel
  `0xFF000000`. Bad data raises `XpmError`.
- `raycube.image` — `Image(width, height)`, a 32-bit pixel buffer with
  `put_pixel`, `get_pixel` and `get_rgb`; `rgb_to_int`, `parse_rgb`
  (`"F 220,100,0"` → `0xDC6400`), and `mask_shifts` / `pack_color` for
  converting colours to lower-depth visuals.
- `raycube.motion` — `Player` with `forward`, `backward`, `strafe_left`,
  `strafe_right` and `rotate`; `handle_key(player, key, speed, rotation)`
  reacts to the `Key` codes and returns `True` for `Key.ESCAPE`;
  `handle_mouse(player, x, rotation)` turns towards the pointer's movement.
  `degree_to_radian` and `normalize_angle` are small angle helpers.
- `raycube.raycast` — `cast_ray(grid, player, x, width, height)` returns a
  `RayHit` with the wall cell, hit side, perpendicular distance and the rows
  the wall covers. It raises `ValueError` if the ray leaves the grid without
  meeting a wall.
- `raycube.render` — `load_textures(scene)` loads the four textures into a
  `Textures`; `draw_column` and `render_frame(image, scene, player, textures)`
  draw walls. Rows above the wall take the scene's floor colour and rows
  below it take the ceiling colour.
- `raycube.events` — `EventLoop` and `Window` with key, mouse, expose and
  generic hooks. Events are `Event` values posted with `EventLoop.post`;
  `run` dispatches them until every window is destroyed, `end` is called, or
  (without a loop hook) the queue is empty.

## Example

```python
from raycube.image import Image
from raycube.mapfile import load_scene
from raycube.motion import handle_key, Key
from raycube.render import load_textures, render_frame

scene = load_scene("level.cub")
textures = load_textures(scene)
frame = Image(640, 480)
handle_key(scene.player, Key.W, 0.1, 0.05)
render_frame(frame, scene, scene.player, textures)
print(hex(frame.get_pixel(320, 240)))
```

## What it does not do

raycube opens no window on screen and ships no command to play a level. The
rendered frame stays in an `Image` buffer, and input reaches the engine only
through events you post to an `EventLoop` or calls to `handle_key` and
`handle_mouse`; showing frames and reading a real keyboard or mouse is left
to the program that uses it.