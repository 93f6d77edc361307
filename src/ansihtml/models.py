"""Data models shared by the scanner, style machine and renderer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ColorCategory(Enum):
    """Where a color came from."""

    NAMED16 = "named16"
    INDEXED = "indexed"
    TRUECOLOR = "truecolor"


@dataclass(frozen=True, slots=True)
class Color:
    """An immutable RGB color.

    ``name`` is the CSS class stem for the 16 named colors and None otherwise.
    """

    rgb: tuple[int, int, int]
    category: ColorCategory
    name: str | None = None

    @property
    def is_named(self) -> bool:
        return self.category is ColorCategory.NAMED16

    def css_rgb(self) -> str:
        r, g, b = self.rgb
        return f"rgb({r},{g},{b})"


class PacketKind(Enum):
    """Lexical unit kinds produced by the scanner."""

    EOS = "eos"
    TEXT = "text"
    INCOMPLETE = "incomplete"
    ESC = "esc"
    UNKNOWN = "unknown"
    SGR = "sgr"
    OSCURL = "oscurl"


@dataclass(frozen=True, slots=True)
class Packet:
    """One scanned unit. ``text`` holds plain text or SGR params; ``url`` is OSC-8 only."""

    kind: PacketKind
    text: str = ""
    url: str = ""


@dataclass(frozen=True, slots=True)
class Fragment:
    """Text paired with the style state that was active when it was scanned."""

    text: str
    bold: bool = False
    faint: bool = False
    italic: bool = False
    underline: bool = False
    fg: Color | None = None
    bg: Color | None = None

    @property
    def is_plain(self) -> bool:
        return not (
            self.bold
            or self.faint
            or self.italic
            or self.underline
            or self.fg is not None
            or self.bg is not None
        )
