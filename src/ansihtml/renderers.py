"""HTML rendering for styled text fragments and OSC-8 hyperlinks.

Also builds the class-mode stylesheet and wraps converted output in a
standalone HTML page.
"""

from __future__ import annotations

import logging
from xml.sax.saxutils import escape

from ansihtml.config import ConverterConfig
from ansihtml.models import Fragment, Packet
from ansihtml.palette import DEFAULT_PALETTE, Palette

logger = logging.getLogger(__name__)

_QUOTE_ENTITIES = {'"': "&quot;", "'": "&#x27;"}


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` for use in element content and attribute values."""
    return escape(text, _QUOTE_ENTITIES)


class HtmlRenderer:
    """Turns fragments and hyperlink packets into HTML using a shared config.

    The config is read on every call, so edits apply to the next fragment.
    """

    def __init__(self, config: ConverterConfig) -> None:
        self.config = config

    def _escape(self, text: str) -> str:
        if not self.config.escape_html:
            return text
        return escape_html(text)

    def render_fragment(self, fragment: Fragment) -> str:
        if not fragment.text:
            return ""
        text = self._escape(fragment.text)
        if fragment.is_plain:
            return text

        styles: list[str] = []
        classes: list[str] = []
        cfg = self.config
        fg, bg = fragment.fg, fragment.bg

        if not cfg.use_classes:
            if fragment.bold:
                styles.append(cfg.bold_style)
            if fragment.faint:
                styles.append(cfg.faint_style)
            if fragment.italic:
                styles.append(cfg.italic_style)
            if fragment.underline:
                styles.append(cfg.underline_style)
            if fg is not None:
                styles.append(f"color:{fg.css_rgb()}")
            if bg is not None:
                styles.append(f"background-color:{bg.css_rgb()}")
        else:
            if fragment.bold:
                classes.append("bold")
            if fragment.faint:
                classes.append("faint")
            if fragment.italic:
                classes.append("italic")
            if fragment.underline:
                classes.append("underline")
            # Only the 16 named colors have classes; anything else stays inline.
            if fg is not None:
                if fg.is_named:
                    classes.append(f"{fg.name}-fg")
                else:
                    styles.append(f"color:{fg.css_rgb()}")
            if bg is not None:
                if bg.is_named:
                    classes.append(f"{bg.name}-bg")
                else:
                    styles.append(f"background-color:{bg.css_rgb()}")

        style_attr = f' style="{";".join(styles)}"' if styles else ""
        class_attr = f' class="{" ".join(classes)}"' if classes else ""
        return f"<span{style_attr}{class_attr}>{text}</span>"

    def render_hyperlink(self, packet: Packet) -> str:
        """Render an OSC-8 packet as an anchor, or nothing if its scheme is not allowed."""
        scheme, sep, _ = packet.url.partition(":")
        if not sep or not self.config.url_allowlist.get(scheme):
            logger.debug("Dropping hyperlink with disallowed scheme: %r", packet.url)
            return ""
        return f'<a href="{self._escape(packet.url)}">{self._escape(packet.text)}</a>'


def stylesheet(config: ConverterConfig, palette: Palette | None = None) -> str:
    """CSS rules for the class names emitted when ``use_classes`` is on."""
    palette = palette or DEFAULT_PALETTE
    lines = [
        f".bold {{ {config.bold_style}; }}",
        f".faint {{ {config.faint_style}; }}",
        f".italic {{ {config.italic_style}; }}",
        f".underline {{ {config.underline_style}; }}",
    ]
    for color in palette.named:
        lines.append(f".{color.name}-fg {{ color: {color.css_rgb()}; }}")
        lines.append(f".{color.name}-bg {{ background-color: {color.css_rgb()}; }}")
    return "\n".join(lines) + "\n"


def wrap_document(body: str, title: str = "", css: str = "") -> str:
    """Wrap an HTML fragment in a complete page with a ``<pre>`` body."""
    parts = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '<meta charset="utf-8">',
        f"<title>{escape_html(title)}</title>",
    ]
    if css:
        parts.append(f"<style>\n{css}</style>")
    parts.extend(["</head>", "<body>", f"<pre>{body}</pre>", "</body>", "</html>"])
    return "\n".join(parts) + "\n"
