"""Reading and validating scene description files."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from os import PathLike
import math

from raycube.image import parse_rgb
from raycube.motion import Player, Vec, degree_to_radian

EMPTY = 0
WALL = 1
VOID = -1
PLANE_SCALE = 0.66

_SPACES = frozenset(" \t\n\v\f\r")

# Grid values are the character code minus the code of "0".
_PLAYER_ANGLES = {
    ord("N") - ord("0"): 90.0,
    ord("S") - ord("0"): 270.0,
    ord("W") - ord("0"): 180.0,
    ord("E") - ord("0"): 0.0,
}


class MapError(ValueError):
    """Raised when a scene description is missing, malformed or not closed."""


@dataclass
class Scene:
    """Everything a scene file describes."""

    north: str
    south: str
    west: str
    east: str
    floor_color: int = 0
    ceiling_color: int = 0
    grid: list[list[int]] = field(default_factory=list)
    player: Player = field(default_factory=Player)

    @property
    def height(self) -> int:
        """Number of map rows."""
        return len(self.grid)

    @property
    def width(self) -> int:
        """Length of the longest map row."""
        return len(self.grid[0]) if self.grid else 0


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Return the non-empty lines of a file, without line endings."""
    try:
        with open(path, "rb") as handle:
            text = handle.read().decode("latin-1")
    except OSError as exc:
        raise MapError(f"cannot read {path}: {exc}") from exc
    return [line for line in text.split("\n") if line]


def texture_path(line: str) -> str:
    """Return what follows the last whitespace before the final character."""
    for i in range(len(line) - 2, -1, -1):
        if line[i] in _SPACES:
            return line[i + 1:]
    return line


def contains(source: str, find: str) -> bool:
    """Tell whether ``find`` starts at the last occurrence of its first char."""
    if not find:
        return True
    start = source.rfind(find[0])
    return start != -1 and source.startswith(find, start)


def build_grid(lines: Sequence[str]) -> list[list[int]]:
    """Turn map rows into a rectangular grid; blanks and padding are VOID."""
    width = max((len(line) for line in lines), default=0)
    return [
        [
            VOID if i >= len(line) or line[i] in _SPACES else ord(line[i]) - ord("0")
            for i in range(width)
        ]
        for line in lines
    ]


def _cell(grid: Sequence[Sequence[int]], y: int, x: int) -> int:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return VOID


def _enclosed(grid: Sequence[Sequence[int]], y: int, x: int) -> bool:
    if y == 0 or y == len(grid) - 1 or x == 0:
        return False
    return all(
        _cell(grid, ny, nx) != VOID
        for ny, nx in ((y - 1, x), (y + 1, x), (y, x - 1), (y, x + 1))
    )


def check_closed(grid: Sequence[Sequence[int]]) -> bool:
    """Tell whether every empty cell is surrounded by walls or floor."""
    return all(
        _enclosed(grid, y, x)
        for y, row in enumerate(grid)
        for x, value in enumerate(row)
        if value == EMPTY
    )


def _spawn(value: int, x: int, y: int) -> Player:
    angle = _PLAYER_ANGLES[value]
    radians = degree_to_radian(angle)
    direction = Vec(math.cos(radians), -math.sin(radians))
    plane = Vec(-PLANE_SCALE * direction.y, PLANE_SCALE * direction.x)
    return Player(pos=Vec(x + 0.5, y + 0.5), dir=direction, plane=plane, angle=angle)


def find_player(grid: list[list[int]]) -> Player:
    """Locate the single start cell, clear it and return the player there."""
    player: Player | None = None
    count = 0
    for y, row in enumerate(grid):
        for x, value in enumerate(row):
            if value <= WALL:
                continue
            count += 1
            if value in _PLAYER_ANGLES:
                if not _enclosed(grid, y, x):
                    raise MapError(f"start position ({x}, {y}) is not enclosed")
                player = _spawn(value, x, y)
                row[x] = EMPTY
    if count != 1 or player is None:
        raise MapError(f"expected exactly one start position, found {count}")
    return player


def parse_scene(lines: Iterable[str]) -> Scene:
    """Build a scene from the lines of a scene file."""
    textures: dict[str, str] = {}
    colors: dict[str, int] = {}
    texture_count = 0
    color_count = 0
    map_lines: list[str] = []
    for line in lines:
        if contains(line, ".xpm"):
            texture_count += 1
            for key in ("NO", "SO", "WE", "EA"):
                if contains(line, key):
                    textures[key] = texture_path(line)
                    break
        elif contains(line, ","):
            color_count += 1
            for key in ("F", "C"):
                if contains(line, key):
                    try:
                        colors[key] = parse_rgb(line)
                    except ValueError as exc:
                        raise MapError(str(exc)) from exc
                    break
        else:
            map_lines.append(line)
    if texture_count != 4 or len(textures) != 4:
        raise MapError("scene needs exactly one NO, SO, WE and EA texture")
    if color_count != 2:
        raise MapError("scene needs exactly two colour lines")
    if not map_lines:
        raise MapError("scene has no map")
    grid = build_grid(map_lines)
    if not check_closed(grid):
        raise MapError("map is not closed")
    player = find_player(grid)
    return Scene(
        north=textures["NO"],
        south=textures["SO"],
        west=textures["WE"],
        east=textures["EA"],
        floor_color=colors.get("F", 0),
        ceiling_color=colors.get("C", 0),
        grid=grid,
        player=player,
    )


def load_scene(path: str | PathLike[str]) -> Scene:
    """Read and parse a scene file."""
    return parse_scene(read_lines(path))