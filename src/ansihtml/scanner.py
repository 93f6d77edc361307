"""Streaming packet scanner for ANSI CSI and OSC-8 hyperlink sequences.

Input is appended to an internal buffer; ``next_packet`` pulls one lexical
unit at a time and advances past whatever it consumed. A sequence that is
cut off at the end of the buffer is reported as INCOMPLETE and left in place
so the next ``feed`` can finish it.
"""

from __future__ import annotations

import logging
import re

from ansihtml.models import Packet, PacketKind

logger = logging.getLogger(__name__)

ESC = "\x1b"

# Legal CSI first; the second branch catches a CSI interrupted by a control
# byte or ':' so the scanner can skip the leading ESC and resynchronize.
_CSI_RE = re.compile(
    r"(?:"
    r"\x1b\["
    r"([\x3c-\x3f]?)"  # private-mode marker
    r"([0-9;]*)"  # parameters
    r"([\x20-\x2f]?[\x40-\x7e])"  # intermediate + final byte
    r")"
    r"|"
    r"(?:"
    r"\x1b\["
    r"[\x20-\x7e]*"
    r"([\x00-\x1f:])"  # illegal byte
    r")"
)

# String terminator (ESC \ or BEL), or a control byte that cannot appear
# inside an OSC string.
_OSC_ST_RE = re.compile(
    r"(?:(\x1b\\)|(\x07))"
    r"|"
    r"([\x00-\x06\x08-\x1a\x1c-\x1f])"
)

_OSC_URL_RE = re.compile(
    r"\x1b\]8;"
    r"[\x20-\x3a\x3c-\x7e]*"  # params, no ';'
    r";"
    r"([\x21-\x7e]{1,512})"  # url
    r"(?:\x1b\\|\x07)"
    r"([\x20-\x7e]+)"  # link text
    r"\x1b\]8;;"
    r"(?:\x1b\\|\x07)"
)

_EOS = Packet(PacketKind.EOS)
_INCOMPLETE = Packet(PacketKind.INCOMPLETE)


class PacketScanner:
    """Buffer plus scanner. Holds exactly the unconsumed suffix of all input fed."""

    def __init__(self) -> None:
        self._buffer: str = ""

    def feed(self, text: str) -> None:
        """Append *text* to the unconsumed buffer."""
        self._buffer += text

    def reset(self) -> None:
        self._buffer = ""

    @property
    def pending(self) -> bool:
        """True if the buffer still holds unconsumed input."""
        return bool(self._buffer)

    @property
    def buffer(self) -> str:
        return self._buffer

    def _consume(self, count: int) -> str:
        taken = self._buffer[:count]
        self._buffer = self._buffer[count:]
        return taken

    def skip_escape(self) -> str:
        """Drop the leading character (normally ESC) and return it."""
        return self._consume(1)

    def _resync(self) -> Packet:
        logger.debug("Skipping unrecognized escape: %r", self._buffer[:8])
        return Packet(PacketKind.ESC, self.skip_escape())

    def next_packet(self) -> Packet:
        """Return the next packet and advance the buffer past it."""
        buf = self._buffer
        if not buf:
            return _EOS

        pos = buf.find(ESC)
        if pos == -1:
            return Packet(PacketKind.TEXT, self._consume(len(buf)))
        if pos > 0:
            return Packet(PacketKind.TEXT, self._consume(pos))

        if len(buf) < 3:
            return _INCOMPLETE

        introducer = buf[1]
        if introducer == "[":
            return self._scan_csi()
        if introducer == "]":
            return self._scan_osc()
        if introducer == "(":
            # Character set designation; the designator byte is not checked.
            self._consume(3)
            return Packet(PacketKind.UNKNOWN)
        return self._resync()

    def _scan_csi(self) -> Packet:
        match = _CSI_RE.match(self._buffer)
        if match is None:
            return _INCOMPLETE
        if match.group(4) is not None:
            return self._resync()

        private, params, command = match.group(1, 2, 3)
        self._consume(match.end())
        if private or command != "m":
            return Packet(PacketKind.UNKNOWN, params)
        return Packet(PacketKind.SGR, params)

    def _scan_osc(self) -> Packet:
        buf = self._buffer
        if len(buf) < 4:
            return _INCOMPLETE
        if buf[2:4] != "8;":
            return self._resync()

        # Opening and closing sequences each need their own terminator.
        search_from = 0
        for _ in range(2):
            st = _OSC_ST_RE.search(buf, search_from)
            if st is None:
                return _INCOMPLETE
            if st.group(3) is not None:
                return self._resync()
            search_from = st.end()

        match = _OSC_URL_RE.match(buf)
        if match is None:
            return self._resync()

        url, text = match.group(1, 2)
        self._consume(match.end())
        return Packet(PacketKind.OSCURL, text, url)
