"""Line style domain model and color helpers.

Colors are packed unsigned 32-bit ARGB integers (0xAARRGGBB).
"""

import re
from dataclasses import dataclass
from enum import Enum

BLACK = 0xFF000000
DKGRAY = 0xFF444444
GRAY = 0xFF888888
LTGRAY = 0xFFCCCCCC
WHITE = 0xFFFFFFFF
RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF
YELLOW = 0xFFFFFF00
CYAN = 0xFF00FFFF
MAGENTA = 0xFFFF00FF
TRANSPARENT = 0

BRIGHTNESS_THRESHOLD = 0.5

_COLOR_PATTERN = re.compile(r"#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")


class Shape(Enum):
    """Shape of a line badge."""

    RECT = "rect"
    ROUNDED = "rounded"
    CIRCLE = "circle"


@dataclass(frozen=True)
class Style:
    """Display style of a line badge."""

    background_color: int
    foreground_color: int
    shape: Shape = Shape.ROUNDED
    background_color2: int = TRANSPARENT
    border_color: int = TRANSPARENT

    def has_border(self) -> bool:
        return self.border_color != TRANSPARENT


def argb(alpha: int, red: int, green: int, blue: int) -> int:
    """Pack color components into an ARGB integer."""
    return (alpha << 24) | (red << 16) | (green << 8) | blue


def rgb(red: int, green: int, blue: int) -> int:
    """Pack an opaque color."""
    return argb(0xFF, red, green, blue)


def alpha(color: int) -> int:
    return (color >> 24) & 0xFF


def red(color: int) -> int:
    return (color >> 16) & 0xFF


def green(color: int) -> int:
    return (color >> 8) & 0xFF


def blue(color: int) -> int:
    return color & 0xFF


def parse_color(color_str: str) -> int:
    """Parse a color literal.

    Accepts ``#RRGGBB`` (alpha is amended to opaque) or eight hex digits, which
    are taken verbatim as packed ARGB. Hex digits are case-insensitive.

    Raises:
        ValueError: On any other length or non-hex content.
    """
    if not _COLOR_PATTERN.fullmatch(color_str):
        raise ValueError(f"Unknown color: {color_str!r}")
    color = int(color_str[1:], 16)
    if len(color_str) == 7:
        color |= 0xFF000000
    return color


def to_hex_string(color: int) -> str:
    """Render a color as ``#RRGGBB`` when opaque, else as eight hex digits."""
    if alpha(color) == 0xFF:
        return f"#{color & 0xFFFFFF:06X}"
    return f"#{color:08X}"


def perceived_brightness(color: int) -> float:
    """Perceived brightness in [0, 1), see http://www.w3.org/TR/AERT#color-contrast."""
    return (0.299 * red(color) + 0.587 * green(color) + 0.114 * blue(color)) / 256


def derive_foreground_color(background_color: int) -> int:
    """Pick white text for dark backgrounds and black text for light ones."""
    if perceived_brightness(background_color) < BRIGHTNESS_THRESHOLD:
        return WHITE
    return BLACK
