"""Converter configuration and JSON config file handling."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Error raised for unreadable or malformed config files."""


DEFAULT_URL_ALLOWLIST = {"http": True, "https": True}

_BOOL_KEYS = ("escape_html", "use_classes")
_STYLE_KEYS = ("bold_style", "faint_style", "italic_style", "underline_style")


@dataclass(slots=True)
class ConverterConfig:
    """Rendering options. Plain fields; changes apply to the next conversion call."""

    escape_html: bool = True
    use_classes: bool = False
    url_allowlist: dict[str, bool] = field(
        default_factory=lambda: dict(DEFAULT_URL_ALLOWLIST)
    )
    bold_style: str = "font-weight:bold"
    faint_style: str = "opacity:0.7"
    italic_style: str = "font-style:italic"
    underline_style: str = "text-decoration:underline"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConverterConfig:
        """Build a config from a dict, using defaults for missing keys.

        Raises:
            ConfigError: if a present key has the wrong type.
        """
        config = cls()
        for key in _BOOL_KEYS:
            if key in data:
                if not isinstance(data[key], bool):
                    raise ConfigError(f"'{key}' must be a boolean")
                setattr(config, key, data[key])
        for key in _STYLE_KEYS:
            if key in data:
                if not isinstance(data[key], str):
                    raise ConfigError(f"'{key}' must be a string")
                setattr(config, key, data[key])
        if "url_allowlist" in data:
            allowlist = data["url_allowlist"]
            if isinstance(allowlist, list):
                allowlist = {scheme: True for scheme in allowlist}
            if not isinstance(allowlist, dict):
                raise ConfigError("'url_allowlist' must be an object or a list of schemes")
            if not all(isinstance(v, bool) for v in allowlist.values()):
                raise ConfigError("'url_allowlist' values must be booleans")
            config.url_allowlist = {str(k): v for k, v in allowlist.items()}
        unknown = set(data) - set(DEFAULT_CONFIG)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))
        return config

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


DEFAULT_CONFIG: dict[str, Any] = ConverterConfig().to_dict()


def read_config(path: Path) -> ConverterConfig:
    """Load a ConverterConfig from a JSON file."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Corrupt config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must contain a JSON object")
    return ConverterConfig.from_dict(data)


def write_config(config: ConverterConfig, path: Path) -> None:
    """Write *config* to *path* as indented JSON."""
    path.write_text(json.dumps(config.to_dict(), indent=2) + "\n", encoding="utf-8")
