import pytest

from raycube.image import Image
from raycube.mapfile import MapError, Scene
from raycube.motion import Player, Vec
from raycube.raycast import cast_ray
from raycube.render import Textures, draw_column, load_textures, render_frame

FLOOR = 0x112233
CEILING = 0x445566
NORTH = 0xAA0000
SOUTH = 0x00AA00
WEST = 0x0000AA
EAST = 0xAAAA00

CORRIDOR = [
    [1, 1, 1, 1, 1],
    [1, 0, 0, 0, 1],
    [1, 1, 1, 1, 1],
]


def solid(color, width=4, height=4):
    image = Image(width, height)
    for y in range(height):
        for x in range(width):
            image.put_pixel(x, y, color)
    return image


def make_textures():
    return Textures(
        north=solid(NORTH), south=solid(SOUTH), west=solid(WEST), east=solid(EAST)
    )


def make_scene(grid, player):
    return Scene(
        north="north.xpm",
        south="south.xpm",
        west="west.xpm",
        east="east.xpm",
        floor_color=FLOOR,
        ceiling_color=CEILING,
        grid=grid,
        player=player,
    )


def east_player():
    return Player(pos=Vec(1.5, 1.5), dir=Vec(1.0, 0.0), plane=Vec(0.0, 0.66))


def test_column_bands_and_texture_facing_east():
    player = east_player()
    scene = make_scene(CORRIDOR, player)
    image = Image(100, 100)
    hit = cast_ray(scene.grid, player, 50, 100, 100)
    draw_column(image, 50, hit, player, make_textures(), scene)
    assert image.get_pixel(50, 0) == FLOOR
    assert image.get_pixel(50, hit.draw_start - 1) == FLOOR
    assert image.get_pixel(50, hit.draw_start) == WEST
    assert image.get_pixel(50, hit.draw_end - 1) == WEST
    assert image.get_pixel(50, hit.draw_end) == CEILING
    assert image.get_pixel(50, 99) == CEILING


def test_column_facing_west_uses_east_texture():
    player = Player(pos=Vec(3.5, 1.5), dir=Vec(-1.0, 0.0), plane=Vec(0.0, -0.66))
    scene = make_scene(CORRIDOR, player)
    image = Image(100, 100)
    hit = cast_ray(scene.grid, player, 50, 100, 100)
    draw_column(image, 50, hit, player, make_textures(), scene)
    assert image.get_pixel(50, 50) == EAST


def test_column_facing_north_uses_south_texture():
    grid = [[1, 1, 1], [1, 0, 1], [1, 0, 1], [1, 0, 1], [1, 1, 1]]
    player = Player(pos=Vec(1.5, 3.5), dir=Vec(0.0, -1.0), plane=Vec(0.66, 0.0))
    scene = make_scene(grid, player)
    image = Image(100, 100)
    hit = cast_ray(grid, player, 50, 100, 100)
    draw_column(image, 50, hit, player, make_textures(), scene)
    assert image.get_pixel(50, 50) == SOUTH


def test_column_facing_south_uses_north_texture():
    grid = [[1, 1, 1], [1, 0, 1], [1, 0, 1], [1, 0, 1], [1, 1, 1]]
    player = Player(pos=Vec(1.5, 1.5), dir=Vec(0.0, 1.0), plane=Vec(-0.66, 0.0))
    scene = make_scene(grid, player)
    image = Image(100, 100)
    hit = cast_ray(grid, player, 50, 100, 100)
    draw_column(image, 50, hit, player, make_textures(), scene)
    assert image.get_pixel(50, 50) == NORTH


def test_texture_rows_map_top_to_bottom():
    top, bottom = 0xFF0000, 0x0000FF
    striped = Image(1, 2)
    striped.put_pixel(0, 0, top)
    striped.put_pixel(0, 1, bottom)
    textures = Textures(north=striped, south=striped, west=striped, east=striped)
    player = east_player()
    scene = make_scene(CORRIDOR, player)
    image = Image(100, 100)
    hit = cast_ray(scene.grid, player, 50, 100, 100)
    draw_column(image, 50, hit, player, textures, scene)
    assert image.get_pixel(50, hit.draw_start) == top
    assert image.get_pixel(50, hit.draw_end - 1) == bottom


def test_render_frame_fills_every_column():
    player = east_player()
    scene = make_scene(CORRIDOR, player)
    image = Image(40, 30)
    render_frame(image, scene, player, make_textures())
    for x in range(image.width):
        hit = cast_ray(scene.grid, player, x, image.width, image.height)
        if hit.draw_start > 0:
            assert image.get_pixel(x, 0) == FLOOR
        assert image.get_pixel(x, image.height - 1) == CEILING
        if hit.draw_end > hit.draw_start:
            assert image.get_pixel(x, hit.draw_start) in {NORTH, SOUTH, WEST, EAST}


XPM_TEMPLATE = """/* XPM */
static char *tex[] = {{
"2 2 1 1",
"a c {color}",
"aa",
"aa"
}};
"""


def test_load_textures_reads_all_four(tmp_path):
    colors = {"north": "#FF0000", "south": "#00FF00", "west": "#0000FF", "east": "white"}
    paths = {}
    for side, color in colors.items():
        path = tmp_path / f"{side}.xpm"
        path.write_text(XPM_TEMPLATE.format(color=color))
        paths[side] = str(path)
    scene = Scene(**paths)
    textures = load_textures(scene)
    assert textures.north.get_pixel(0, 0) == 0xFF0000
    assert textures.south.get_pixel(1, 1) == 0x00FF00
    assert textures.west.get_pixel(0, 1) == 0x0000FF
    assert textures.east.get_pixel(1, 0) == 0xFFFFFF


def test_load_textures_missing_file_raises(tmp_path):
    good = tmp_path / "good.xpm"
    good.write_text(XPM_TEMPLATE.format(color="#FF0000"))
    scene = Scene(
        north=str(good),
        south=str(good),
        west=str(tmp_path / "missing.xpm"),
        east=str(good),
    )
    with pytest.raises(MapError):
        load_textures(scene)


def test_load_textures_bad_xpm_raises(tmp_path):
    good = tmp_path / "good.xpm"
    good.write_text(XPM_TEMPLATE.format(color="#FF0000"))
    bad = tmp_path / "bad.xpm"
    bad.write_text('static char *x[] = { "0 0 0 0" };')
    scene = Scene(north=str(bad), south=str(good), west=str(good), east=str(good))
    with pytest.raises(MapError):
        load_textures(scene)