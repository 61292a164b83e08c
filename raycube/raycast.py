"""Casting a single camera ray through a grid map with DDA stepping."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from raycube.mapfile import WALL
from raycube.motion import Player, Vec


@dataclass(frozen=True)
class RayHit:
    """Where a camera ray met a wall and how tall that wall is on screen.

    ``side`` is 0 when the ray crossed a vertical grid line last (an east or
    west face) and 1 when it crossed a horizontal one (a north or south face).
    Rows ``draw_start`` up to but not including ``draw_end`` show the wall.
    """

    ray_dir: Vec
    map_x: int
    map_y: int
    step_x: int
    step_y: int
    side: int
    perp_wall_dist: float
    line_height: int
    draw_start: int
    draw_end: int


def _delta(component: float) -> float:
    return abs(1 / component) if component else math.inf


def _in_grid(grid: Sequence[Sequence[int]], y: int, x: int) -> bool:
    return 0 <= y < len(grid) and 0 <= x < len(grid[y])


def cast_ray(
    grid: Sequence[Sequence[int]],
    player: Player,
    x: int,
    width: int,
    height: int,
) -> RayHit:
    """Cast the ray for screen column ``x`` and return the first wall it hits.

    Raises ValueError if the screen size is not positive, if the ray has no
    direction, or if it leaves the grid without meeting a wall.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid screen size {width}x{height}")
    camera_x = 2 * x / width - 1
    ray = Vec(
        player.dir.x + player.plane.x * camera_x,
        player.dir.y + player.plane.y * camera_x,
    )
    if ray.x == 0 and ray.y == 0:
        raise ValueError("ray has no direction")

    pos = player.pos
    map_x, map_y = int(pos.x), int(pos.y)
    delta_x, delta_y = _delta(ray.x), _delta(ray.y)

    if ray.x < 0:
        step_x = -1
        side_x = (pos.x - map_x) * delta_x
    else:
        step_x = 1
        side_x = (map_x + 1.0 - pos.x) * delta_x
    if ray.y < 0:
        step_y = -1
        side_y = (pos.y - map_y) * delta_y
    else:
        step_y = 1
        side_y = (map_y + 1.0 - pos.y) * delta_y

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if not _in_grid(grid, map_y, map_x):
            raise ValueError(f"ray for column {x} left the map without a wall")
        if grid[map_y][map_x] == WALL:
            break

    if side == 0:
        perp = (map_x - pos.x + (1 - step_x) // 2) / ray.x
    else:
        perp = (map_y - pos.y + (1 - step_y) // 2) / ray.y

    half = height // 2
    line_height = int(half / perp) if perp > 0 else height
    draw_start = max(-(line_height // 2) + half, 0)
    draw_end = min(line_height // 2 + half, height - 1)
    return RayHit(
        ray_dir=ray,
        map_x=map_x,
        map_y=map_y,
        step_x=step_x,
        step_y=step_y,
        side=side,
        perp_wall_dist=perp,
        line_height=line_height,
        draw_start=draw_start,
        draw_end=draw_end,
    )