import colorsys
import math
import random

from rich.color import Color

RESET = "\x1b[0m"

# (1 + sqrt 5) * 60 degrees, consecutive keys land far apart on the wheel
GOLDEN_ANGLE = (1.0 + math.sqrt(5.0)) * 60.0

# black (0) and bright black (8) are left out, they vanish on dark terminals
_STANDARD_NUMBERS = [1, 2, 3, 4, 5, 6, 7, 9, 10, 11, 12, 13, 14, 15]

PALETTE_NAMES = ("discrete", "spread", "random")


def hex_to_rgb(hex_color):
    hex_color = hex_color.lstrip("#")
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def hsl_to_rgb(h: float, s: float, l: float):
    """Hue in degrees, saturation and lightness in [0, 1] -> 0..255 triple."""
    r, g, b = colorsys.hls_to_rgb((h % 360.0) / 360.0, l, s)
    return tuple(int(round(c * 255)) for c in (r, g, b))


def random_hex_color(rng=random):
    return "#{:06x}".format(rng.randint(0, 0xFFFFFF))


def ansi_prefix(color: Color) -> str:
    """Escape sequence that switches the foreground to ``color``."""
    return "\x1b[" + ";".join(color.get_ansi_codes(foreground=True)) + "m"


def style_of(color: Color) -> str:
    """prompt_toolkit style string for ``color``."""
    return f"fg:{color.get_truecolor().hex} bold"


class DiscretePalette:
    """A short cycle of the terminal's own foreground colors."""

    name = "discrete"

    def __init__(self, size=7):
        if size < 1:
            raise ValueError(f"discrete palette size must be positive, got {size}")
        # sizes past the table just use all of it
        self._colors = [Color.from_ansi(n) for n in _STANDARD_NUMBERS[:size]]

    def __len__(self):
        return len(self._colors)

    def __getitem__(self, index: int) -> Color:
        return self._colors[index % len(self._colors)]


class SpreadPalette:
    """Golden-angle hue walk at fixed saturation and lightness.

    Color ``n`` is a pure function of ``n``; ``size`` wraps the index
    before the hue is computed, ``None`` leaves it unbounded.
    """

    name = "spread"
    saturation = 0.9
    lightness = 0.6

    def __init__(self, size=None):
        if size is not None and size < 1:
            raise ValueError(f"spread palette size must be positive, got {size}")
        self.size = size

    def hue(self, index: int) -> float:
        if self.size is not None:
            index %= self.size
        return (index * GOLDEN_ANGLE) % 360.0

    def __getitem__(self, index: int) -> Color:
        return Color.from_rgb(*hsl_to_rgb(self.hue(index), self.saturation, self.lightness))


class RandomPalette:
    """A random true color per index, fixed once drawn."""

    name = "random"

    def __init__(self, size=None, seed=None):
        if size is not None and size < 1:
            raise ValueError(f"random palette size must be positive, got {size}")
        self.size = size
        self._rng = random.Random(seed)
        self._color_map = {}  # index -> hex color

    def __getitem__(self, index: int) -> Color:
        if self.size is not None:
            index %= self.size
        if index not in self._color_map:
            self._color_map[index] = random_hex_color(self._rng)
        return Color.from_rgb(*hex_to_rgb(self._color_map[index]))


def make_palette(name="discrete", size=None, seed=None):
    """Build a palette by name; ``size`` of None picks the palette's default."""
    if name == "discrete":
        return DiscretePalette() if size is None else DiscretePalette(size)
    if name == "spread":
        return SpreadPalette(size)
    if name == "random":
        return RandomPalette(size, seed)
    raise ValueError(f"unknown palette {name!r}, expected one of {', '.join(PALETTE_NAMES)}")
