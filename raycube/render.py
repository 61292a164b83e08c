"""Drawing textured wall columns into an image."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raycube.image import Image, rgb_to_int
from raycube.mapfile import MapError, Scene
from raycube.motion import Player
from raycube.raycast import RayHit, cast_ray
from raycube.xpm import XpmError, load_xpm


@dataclass
class Textures:
    """The four wall textures of a scene."""

    north: Image
    south: Image
    west: Image
    east: Image


def load_textures(scene: Scene) -> Textures:
    """Load the scene's four XPM textures; raise MapError if one fails."""
    loaded: dict[str, Image] = {}
    for side in ("north", "south", "west", "east"):
        path = getattr(scene, side)
        try:
            loaded[side] = load_xpm(path)
        except (OSError, XpmError) as exc:
            raise MapError(f"cannot load {side} texture {path}: {exc}") from exc
    return Textures(**loaded)


def _pick_texture(hit: RayHit, textures: Textures) -> Image:
    if hit.side == 0:
        return textures.west if hit.ray_dir.x > 0 else textures.east
    return textures.north if hit.ray_dir.y > 0 else textures.south


def _wall_x(hit: RayHit, player: Player) -> float:
    if hit.side == 0:
        value = player.pos.y + hit.perp_wall_dist * hit.ray_dir.y
    else:
        value = player.pos.x + hit.perp_wall_dist * hit.ray_dir.x
    return value - math.floor(value)


def draw_column(
    image: Image,
    x: int,
    hit: RayHit,
    player: Player,
    textures: Textures,
    scene: Scene,
) -> None:
    """Draw one screen column: the band above the wall, the wall, the band below.

    Rows above the wall take the scene's floor colour and rows from
    ``draw_end`` down take its ceiling colour.
    """
    texture = _pick_texture(hit, textures)
    tex_x = int(_wall_x(hit, player) * texture.width)
    wall_height = hit.draw_end - hit.draw_start + 1
    scale = texture.height / wall_height

    for y in range(hit.draw_start):
        image.put_pixel(x, y, scene.floor_color)
    for row, y in enumerate(range(hit.draw_start, hit.draw_end)):
        tex_y = int(row * scale)
        image.put_pixel(x, y, rgb_to_int(*texture.get_rgb(tex_x, tex_y)))
    for y in range(hit.draw_end, image.height):
        image.put_pixel(x, y, scene.ceiling_color)


def render_frame(
    image: Image, scene: Scene, player: Player, textures: Textures
) -> None:
    """Render the view of ``player`` into every column of ``image``."""
    for x in range(image.width):
        hit = cast_ray(scene.grid, player, x, image.width, image.height)
        draw_column(image, x, hit, player, textures, scene)