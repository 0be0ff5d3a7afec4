"""Dotenv file loading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Dict

from ..errors import ConfigurationError

_EXPORT_PREFIX = "export "


class DotenvLoader:
    """Loads default settings from .env-style files."""

    @staticmethod
    def load_from_file(path: Path) -> Dict[str, str]:
        """
        Load key-value pairs from a .env file.

        Args:
            path: Path to .env file

        Returns:
            Mapping of setting names to raw string values (empty if the file is absent)

        Raises:
            ConfigurationError: If the file exists but cannot be read
        """
        if not path.exists():
            return {}

        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigurationError.load_failed("configuration defaults", str(path)) from exc

        values: Dict[str, str] = {}
        for line in text.splitlines():
            stripped = line.strip()
            if DotenvLoader._should_skip_line(stripped):
                continue

            key, value = DotenvLoader._parse_env_line(stripped)
            if key:
                values[key] = value

        return values

    @staticmethod
    def _should_skip_line(line: str) -> bool:
        return not line or line.startswith("#") or "=" not in line

    @staticmethod
    def _parse_env_line(line: str) -> tuple[str, str]:
        """Split ``KEY=value`` (optionally prefixed with ``export``) into key and unquoted value."""
        if line.startswith(_EXPORT_PREFIX):
            line = line[len(_EXPORT_PREFIX) :]
        key, raw_value = line.split("=", 1)
        value = raw_value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        return key.strip(), value
