"""Player movement and view rotation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum


def degree_to_radian(degree: float) -> float:
    """Convert degrees to radians."""
    return degree * math.pi / 180.0


def normalize_angle(angle: float) -> float:
    """Bring an angle back by one turn if it is above 360 or below 0."""
    if angle > 360:
        return angle - 360
    if angle < 0:
        return angle + 360
    return angle


@dataclass
class Vec:
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def rotated(self, angle: float) -> "Vec":
        """Return this vector rotated by ``angle`` radians."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return Vec(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)


class Key(IntEnum):
    """Key codes the game reacts to."""

    A = 0
    S = 1
    D = 2
    W = 13
    ESCAPE = 53
    LEFT = 123
    RIGHT = 124


@dataclass
class Player:
    """Position, viewing direction and camera plane of the player."""

    pos: Vec = field(default_factory=Vec)
    dir: Vec = field(default_factory=Vec)
    plane: Vec = field(default_factory=Vec)
    angle: float = 0.0
    mouse_x: int = 0

    def forward(self, speed: float) -> None:
        """Step along the viewing direction."""
        self.pos.x += self.dir.x * speed
        self.pos.y += self.dir.y * speed

    def backward(self, speed: float) -> None:
        """Step against the viewing direction."""
        self.pos.x -= self.dir.x * speed
        self.pos.y -= self.dir.y * speed

    def strafe_left(self, speed: float) -> None:
        """Step sideways to the left of the viewing direction."""
        self.pos.x -= -self.dir.y * speed
        self.pos.y -= self.dir.x * speed

    def strafe_right(self, speed: float) -> None:
        """Step sideways to the right of the viewing direction."""
        self.pos.x += -self.dir.y * speed
        self.pos.y += self.dir.x * speed

    def rotate(self, angle: float) -> None:
        """Turn the direction and camera plane by ``angle`` radians."""
        self.dir = self.dir.rotated(angle)
        self.plane = self.plane.rotated(angle)


def handle_key(player: Player, key: int, speed: float, rotation: float) -> bool:
    """Apply a key press to ``player``; return True if it asks to quit."""
    if key == Key.W:
        player.forward(speed)
    elif key == Key.S:
        player.backward(speed)
    elif key == Key.A:
        player.strafe_left(speed)
    elif key == Key.D:
        player.strafe_right(speed)
    elif key == Key.LEFT:
        player.rotate(-rotation)
    elif key == Key.RIGHT:
        player.rotate(rotation)
    elif key == Key.ESCAPE:
        return True
    return False


def handle_mouse(player: Player, x: int, rotation: float) -> None:
    """Turn the view towards the side the pointer moved to."""
    if player.mouse_x > x:
        player.rotate(-rotation)
    if player.mouse_x < x:
        player.rotate(rotation)
    player.mouse_x = x