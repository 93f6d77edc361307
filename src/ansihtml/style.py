"""Persistent text attribute and color state driven by SGR parameters."""

from __future__ import annotations

from collections.abc import Iterator

from ansihtml.models import Color, ColorCategory, Fragment
from ansihtml.palette import DEFAULT_PALETTE, Palette

_ATTRIBUTE_CODES = {
    1: ("bold", True),
    2: ("faint", True),
    3: ("italic", True),
    4: ("underline", True),
    21: ("bold", False),
    23: ("italic", False),
    24: ("underline", False),
}


def _to_int(token: str) -> int | None:
    try:
        return int(token, 10)
    except ValueError:
        return None


class _Params:
    """Forward-only cursor over semicolon separated SGR tokens."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split(";"))
        self._remaining = text.count(";") + 1

    def __len__(self) -> int:
        return self._remaining

    def __iter__(self) -> _Params:
        return self

    def __next__(self) -> str:
        token = next(self._tokens)
        self._remaining -= 1
        return token

    def take(self, count: int) -> list[str]:
        return [next(self) for _ in range(count)]


class StyleState:
    """Bold/faint/italic/underline flags plus foreground and background colors.

    Colors are references into the shared palette, or fresh 24-bit colors for
    ``38;2;r;g;b`` / ``48;2;r;g;b``. They are always replaced, never mutated.
    """

    def __init__(self, palette: Palette | None = None) -> None:
        self.palette = palette or DEFAULT_PALETTE
        self.reset()

    def reset(self) -> None:
        self.bold = False
        self.faint = False
        self.italic = False
        self.underline = False
        self.fg: Color | None = None
        self.bg: Color | None = None

    @property
    def is_default(self) -> bool:
        return self.snapshot("").is_plain

    def snapshot(self, text: str) -> Fragment:
        """Pair *text* with the current state."""
        return Fragment(
            text=text,
            bold=self.bold,
            faint=self.faint,
            italic=self.italic,
            underline=self.underline,
            fg=self.fg,
            bg=self.bg,
        )

    def apply_sgr(self, params: str) -> None:
        """Apply an SGR parameter string such as ``"1;38;5;196"``.

        Unknown codes are ignored. Malformed extended colors are dropped but
        still consume their operands so later codes stay aligned.
        """
        cursor = _Params(params)
        for token in cursor:
            code = _to_int(token)
            if code is None or code == 0:
                self.reset()
            elif code in _ATTRIBUTE_CODES:
                name, value = _ATTRIBUTE_CODES[code]
                setattr(self, name, value)
            elif code == 22:
                self.bold = False
                self.faint = False
            elif code == 39:
                self.fg = None
            elif code == 49:
                self.bg = None
            elif 30 <= code <= 37:
                self.fg = self.palette.normal(code - 30)
            elif 40 <= code <= 47:
                self.bg = self.palette.normal(code - 40)
            elif 90 <= code <= 97:
                self.fg = self.palette.bright(code - 90)
            elif 100 <= code <= 107:
                self.bg = self.palette.bright(code - 100)
            elif code in (38, 48):
                color = self._extended_color(cursor)
                if color is None:
                    continue
                if code == 38:
                    self.fg = color
                else:
                    self.bg = color

    def _extended_color(self, cursor: _Params) -> Color | None:
        if not len(cursor):
            return None
        mode = next(cursor)
        if mode == "5" and len(cursor):
            index = _to_int(next(cursor))
            if index is not None and 0 <= index <= 255:
                return self.palette[index]
        elif mode == "2" and len(cursor) >= 3:
            components = [_to_int(t) for t in cursor.take(3)]
            if all(c is not None and 0 <= c <= 255 for c in components):
                r, g, b = components
                return Color((r, g, b), ColorCategory.TRUECOLOR)
        return None
