"""Reading XPM pixmaps into images."""

from __future__ import annotations

import re
from collections.abc import Sequence
from os import PathLike

from raycube.colornames import lookup_color
from raycube.image import Image

TRANSPARENT_PIXEL = 0xFF000000
_NAME_LIMIT = 63
_QUOTED = re.compile(r'"([^"]*)"')
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_HEX_PREFIX = re.compile(r"\s*([+-]?)([0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


def split_words(text: str) -> list[str]:
    """Split on spaces and tabs, dropping empty words."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def _find_unquoted(text: str, find: str) -> int:
    quoted = False
    for pos, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    stop = min(stop, len(text))
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces."""
    while (begin := _find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        text = _blank(text, begin, begin + 3 if end == -1 else end + 2)
    while (begin := _find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        text = _blank(text, begin, begin + 2 if end == -1 else end + 1)
    return text


def parse_color_spec(name: str, qualifier: str | None = None) -> int:
    """Resolve an XPM colour value to 0xRRGGBB; -1 means transparent.

    Unknown names resolve to 0.
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name, 1)
        if not match:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if qualifier is not None:
        name = f"{name} {qualifier}"[:_NAME_LIMIT]
    color = lookup_color(name)
    return 0 if color is None else color


def _atoi(word: str) -> int:
    match = _INT_PREFIX.match(word)
    return int(match.group()) if match else 0


def parse_xpm_lines(lines: Sequence[str]) -> Image:
    """Build an image from the strings of an XPM array."""
    rows = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(rows)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise XpmError(f"invalid header {' '.join(header)!r}")

    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour in {line!r}") from None
        if index >= len(words):
            raise XpmError(f"no colour value in {line!r}")
        qualifier = words[index + 1] if index + 1 < len(words) else None
        color = parse_color_spec(words[index], qualifier)
        key = line[:cpp]
        if cpp <= 2:
            colors[key] = color
        else:
            colors.setdefault(key, color)

    image = Image(width, height)
    for y in range(height):
        line = next_line("pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            color = colors.get(line[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = TRANSPARENT_PIXEL
            image.put_pixel(x, y, color)
    return image


def parse_xpm_text(text: str) -> Image:
    """Parse the text of an XPM file."""
    return parse_xpm_lines(_QUOTED.findall(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> Image:
    """Read and parse an XPM file."""
    with open(path, "rb") as handle:
        text = handle.read().decode("latin-1")
    return parse_xpm_text(text)