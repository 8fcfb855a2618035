"""Color palette and color parsing.

Colors flow through the simulation as plain data (names, ``#RRGGBB`` strings or
RGB tuples) and are only resolved to RGB when a concrete surface draws them.
"""

from __future__ import annotations

from typing import Tuple, Union

RGB = Tuple[int, int, int]
Color = Union[str, RGB]


# Predefined color palette (RGB uint8 values)
COLOR_PALETTE: dict[str, RGB] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (220, 20, 60),
    "orange": (255, 140, 0),
    "yellow": (255, 215, 0),
    "green": (34, 139, 34),
    "cyan": (0, 206, 209),
    "blue": (30, 144, 255),
    "lightblue": (173, 216, 230),
    "purple": (138, 43, 226),
    "pink": (255, 105, 180),
    "brown": (139, 69, 19),
    "gray": (128, 128, 128),
    "lime": (50, 205, 50),
    "teal": (0, 128, 128),
    "indigo": (75, 0, 130),
    "magenta": (255, 0, 255),
}

# Tile colors: mint top faces, darker mint walls
TILE_TOP_COLOR = "#A8D5BA"
TILE_WALL_COLOR = "#8BB9A0"


def to_rgb(color: Color) -> RGB:
    """
    Resolve a color to an RGB tuple.

    Args:
        color: Palette name, ``#RRGGBB`` / ``#RGB`` hex string, or RGB tuple

    Returns:
        (r, g, b) tuple of ints in [0, 255]

    Raises:
        ValueError: if the color cannot be parsed
    """
    if isinstance(color, str):
        name = color.strip().lower()
        if name in COLOR_PALETTE:
            return COLOR_PALETTE[name]
        if name.startswith("#"):
            digits = name[1:]
            if len(digits) == 3:
                digits = "".join(c * 2 for c in digits)
            if len(digits) == 6:
                try:
                    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
                except ValueError:
                    pass
        raise ValueError(
            f"Unknown color: {color}. "
            f"Use a #RRGGBB string or one of: {list(COLOR_PALETTE.keys())}"
        )

    if len(color) != 3 or not all(0 <= int(c) <= 255 for c in color):
        raise ValueError(f"RGB color must be three ints in [0, 255], got {color}")
    return (int(color[0]), int(color[1]), int(color[2]))


def is_valid_color(color: Color) -> bool:
    try:
        to_rgb(color)
    except (ValueError, TypeError):
        return False
    return True
