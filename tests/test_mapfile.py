import pytest

from raycube.image import rgb_to_int
from raycube.mapfile import (
    MapError,
    build_grid,
    check_closed,
    contains,
    find_player,
    load_scene,
    parse_scene,
    read_lines,
    texture_path,
)

HEADER = [
    "NO ./textures/north.xpm",
    "SO ./textures/south.xpm",
    "WE ./textures/west.xpm",
    "EA ./textures/east.xpm",
    "F 220,100,0",
    "C 225,30,0",
]
MAP = ["111111", "100001", "10N001", "111111"]


def test_texture_path_takes_last_word():
    assert texture_path("NO ./a/b.xpm") == "./a/b.xpm"
    assert texture_path("WE\t./west.xpm") == "./west.xpm"


def test_texture_path_without_space_is_whole_line():
    assert texture_path("abc") == "abc"
    assert texture_path("x") == "x"


def test_contains_basic():
    assert contains("NO ./n.xpm", "NO")
    assert not contains("SO ./s.xpm", "NO")
    assert contains("F 1,2,3", ",")


def test_contains_checks_last_occurrence_only():
    assert not contains("NO ./NAME.xpm", "NO")


def test_build_grid_pads_and_marks_blanks():
    assert build_grid(["1 1", "10"]) == [[1, -1, 1], [1, 0, -1]]


def test_build_grid_player_codes():
    assert build_grid(["N", "S", "W", "E"]) == [[30], [35], [39], [21]]


def test_check_closed_true():
    assert check_closed(build_grid(MAP)) is True


@pytest.mark.parametrize(
    "rows",
    [
        ["111", "101", "1 1"],
        ["101", "111", "111"],
        ["111", "110", "111"],
        ["111", "011", "111"],
        ["1111", "10", "1111"],
    ],
)
def test_check_closed_false(rows):
    assert check_closed(build_grid(rows)) is False


def test_find_player_east():
    grid = build_grid(["111", "1E1", "111"])
    player = find_player(grid)
    assert player.pos.x == 1.5 and player.pos.y == 1.5
    assert player.dir.x == pytest.approx(1.0)
    assert player.dir.y == pytest.approx(0.0, abs=1e-12)
    assert player.plane.y == pytest.approx(0.66)
    assert player.angle == 0
    assert grid[1][1] == 0


def test_find_player_north_and_south():
    north = find_player(build_grid(["111", "1N1", "111"]))
    assert north.dir.y == pytest.approx(-1.0)
    assert north.angle == 90
    south = find_player(build_grid(["111", "1S1", "111"]))
    assert south.dir.y == pytest.approx(1.0)
    west = find_player(build_grid(["111", "1W1", "111"]))
    assert west.dir.x == pytest.approx(-1.0)


@pytest.mark.parametrize(
    "rows",
    [
        ["111", "101", "111"],
        ["1111", "1NS1", "1111"],
        ["1111", "1N21", "1111"],
        ["1N1", "101", "111"],
    ],
)
def test_find_player_errors(rows):
    with pytest.raises(MapError):
        find_player(build_grid(rows))


def test_parse_scene_valid():
    scene = parse_scene(HEADER + MAP)
    assert scene.north == "./textures/north.xpm"
    assert scene.east == "./textures/east.xpm"
    assert scene.floor_color == rgb_to_int(220, 100, 0)
    assert scene.ceiling_color == rgb_to_int(225, 30, 0)
    assert (scene.width, scene.height) == (6, 4)
    assert scene.grid[2][2] == 0
    assert (scene.player.pos.x, scene.player.pos.y) == (2.5, 2.5)


@pytest.mark.parametrize(
    "lines",
    [
        HEADER[1:] + MAP,
        [HEADER[0]] + HEADER[:1] + HEADER[2:] + MAP,
        HEADER + ["F 1,2,3"] + MAP,
        HEADER,
        HEADER + ["111", "101", "1N "],
        HEADER[:4] + ["F 1,2", "C 1,2,3"] + MAP,
    ],
)
def test_parse_scene_errors(lines):
    with pytest.raises(MapError):
        parse_scene(lines)


def test_read_lines_drops_empty_lines(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text("abc\n\n\ndef\n")
    assert read_lines(path) == ["abc", "def"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(MapError):
        read_lines(tmp_path / "missing.cub")


def test_load_scene_round_trip(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text("\n\n".join(HEADER) + "\n\n" + "\n".join(MAP) + "\n")
    scene = load_scene(path)
    assert scene == parse_scene(HEADER + MAP)
    assert scene.south == "./textures/south.xpm"