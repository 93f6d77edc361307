"""Streaming ANSI to HTML converter.

Usage:
    conv = AnsiToHtml()
    html = conv.convert(chunk)
    # ... more chunks ...
    html += conv.flush()
"""

from __future__ import annotations

import logging

from ansihtml.config import ConverterConfig
from ansihtml.models import PacketKind
from ansihtml.palette import DEFAULT_PALETTE, Palette
from ansihtml.renderers import HtmlRenderer
from ansihtml.scanner import PacketScanner
from ansihtml.style import StyleState

logger = logging.getLogger(__name__)


class AnsiToHtml:
    """Converts ANSI-escaped text to HTML across any number of chunks.

    Style state and any partial escape sequence carry over between calls.
    One instance per stream; instances are not thread-safe.
    """

    def __init__(
        self,
        config: ConverterConfig | None = None,
        palette: Palette | None = None,
    ) -> None:
        self.config = config or ConverterConfig()
        self.palette = palette or DEFAULT_PALETTE
        self.state = StyleState(self.palette)
        self._scanner = PacketScanner()
        self._renderer = HtmlRenderer(self.config)

    @property
    def config(self) -> ConverterConfig:
        return self._config

    @config.setter
    def config(self, value: ConverterConfig) -> None:
        self._config = value
        if hasattr(self, "_renderer"):
            self._renderer.config = value

    @property
    def pending(self) -> bool:
        """True if a partial escape sequence is waiting for more input."""
        return self._scanner.pending

    def convert(self, chunk: str) -> str:
        """Append *chunk* and return the HTML for everything that is complete."""
        self._scanner.feed(chunk)
        blocks: list[str] = []
        while True:
            packet = self._scanner.next_packet()
            kind = packet.kind
            if kind in (PacketKind.EOS, PacketKind.INCOMPLETE):
                break
            if kind is PacketKind.TEXT:
                blocks.append(self._renderer.render_fragment(self.state.snapshot(packet.text)))
            elif kind is PacketKind.SGR:
                self.state.apply_sgr(packet.text)
            elif kind is PacketKind.OSCURL:
                blocks.append(self._renderer.render_hyperlink(packet))
            # ESC and UNKNOWN produce no output.
        return "".join(blocks)

    def flush(self) -> str:
        """Finish the stream.

        Whatever is still buffered is rendered after skipping the ESC of each
        unterminated sequence, the same way malformed sequences are skipped.
        """
        blocks = [self.convert("")]
        while self._scanner.pending:
            logger.debug("Unterminated sequence at end of stream: %r", self._scanner.buffer[:8])
            self._scanner.skip_escape()
            blocks.append(self.convert(""))
        return "".join(blocks)

    def reset(self) -> None:
        """Forget buffered input and return to the default style."""
        self._scanner.reset()
        self.state.reset()


def ansi_to_html(text: str, config: ConverterConfig | None = None) -> str:
    """Convert a complete string in one call."""
    conv = AnsiToHtml(config)
    return conv.convert(text) + conv.flush()
