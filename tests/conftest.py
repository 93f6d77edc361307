"""Shared test fixtures for ansihtml tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from ansihtml.config import DEFAULT_CONFIG, ConverterConfig
from ansihtml.converter import AnsiToHtml

SAMPLE_LOG = (
    "Compiling \x1b[1mcore\x1b[0m\n"
    "\x1b[32mok\x1b[0m test_a\n"
    "\x1b[1;31mFAILED\x1b[0m test_b <expected> & \"actual\"\n"
    "see \x1b]8;;https://example.com/job/1\x07job log\x1b]8;;\x07\n"
)


@pytest.fixture()
def converter() -> AnsiToHtml:
    """Converter with default (inline style) configuration."""
    return AnsiToHtml()


@pytest.fixture()
def class_converter() -> AnsiToHtml:
    """Converter emitting CSS classes for named colors."""
    return AnsiToHtml(ConverterConfig(use_classes=True))


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    """A valid JSON config file with class mode enabled."""
    data = dict(DEFAULT_CONFIG)
    data["use_classes"] = True
    path = tmp_path / "ansihtml.json"
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return path


@pytest.fixture()
def sample_log(tmp_path: Path) -> Path:
    """A small CI-style log with colors and a hyperlink."""
    path = tmp_path / "build.log"
    path.write_text(SAMPLE_LOG, encoding="utf-8")
    return path
