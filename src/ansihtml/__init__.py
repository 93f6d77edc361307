"""Streaming ANSI escape sequence to HTML conversion."""

from __future__ import annotations

__version__ = "0.1.0"

from ansihtml.config import ConverterConfig
from ansihtml.converter import AnsiToHtml, ansi_to_html

__all__ = ["AnsiToHtml", "ConverterConfig", "ansi_to_html", "__version__"]
