"""The 256-entry xterm palette: 16 named colors, a 6x6x6 cube and a grey ramp."""

from __future__ import annotations

from ansihtml.models import Color, ColorCategory

_NORMAL = [
    ("black", (0, 0, 0)),
    ("red", (187, 0, 0)),
    ("green", (0, 187, 0)),
    ("yellow", (187, 187, 0)),
    ("blue", (0, 0, 187)),
    ("magenta", (187, 0, 187)),
    ("cyan", (0, 187, 187)),
    ("white", (255, 255, 255)),
]

_BRIGHT = [
    ("bright-black", (85, 85, 85)),
    ("bright-red", (255, 85, 85)),
    ("bright-green", (0, 255, 0)),
    ("bright-yellow", (255, 255, 85)),
    ("bright-blue", (85, 85, 255)),
    ("bright-magenta", (255, 85, 255)),
    ("bright-cyan", (85, 255, 255)),
    ("bright-white", (255, 255, 255)),
]

CUBE_LEVELS = (0, 95, 135, 175, 215, 255)
GREY_START = 8
GREY_STEP = 10


class Palette:
    """Read-only table of 256 colors, built once and shared by every converter."""

    def __init__(self) -> None:
        named = [
            Color(rgb, ColorCategory.NAMED16, f"ansi-{name}")
            for name, rgb in _NORMAL + _BRIGHT
        ]
        cube = [
            Color((r, g, b), ColorCategory.INDEXED)
            for r in CUBE_LEVELS
            for g in CUBE_LEVELS
            for b in CUBE_LEVELS
        ]
        greys = [
            Color((level, level, level), ColorCategory.INDEXED)
            for level in range(GREY_START, GREY_START + 24 * GREY_STEP, GREY_STEP)
        ]
        self._colors: tuple[Color, ...] = tuple(named + cube + greys)

    def __len__(self) -> int:
        return len(self._colors)

    def __getitem__(self, index: int) -> Color:
        return self._colors[index]

    def __iter__(self):
        return iter(self._colors)

    def normal(self, offset: int) -> Color:
        """One of the 8 normal colors (SGR 30-37 / 40-47)."""
        return self._colors[offset]

    def bright(self, offset: int) -> Color:
        """One of the 8 bright colors (SGR 90-97 / 100-107)."""
        return self._colors[8 + offset]

    @property
    def named(self) -> tuple[Color, ...]:
        return self._colors[:16]


DEFAULT_PALETTE = Palette()
