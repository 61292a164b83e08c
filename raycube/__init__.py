"""Grid-map raycasting: scene parsing, XPM textures, ray casting, rendering into pixel buffers, and an event loop."""

__version__ = "0.1.0"

__all__ = [
    "colornames",
    "events",
    "image",
    "mapfile",
    "motion",
    "raycast",
    "render",
    "xpm",
]