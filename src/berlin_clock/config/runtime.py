from __future__ import annotations

"""Runtime helpers for working with environment-backed configuration."""


import os
from pathlib import Path
from typing import Optional

from .errors import ConfigurationError

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}

_DOTENV_CANDIDATES = (Path(".env"), Path.home() / ".env")

_DEFAULT_VALUES: dict[str, str] | None = None


def _load_default_values() -> dict[str, str]:
    """Load configuration values from .env-style files, first file wins per key."""
    from .runtime_helpers import DotenvLoader

    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is not None:
        return _DEFAULT_VALUES

    defaults: dict[str, str] = {}
    for path in _DOTENV_CANDIDATES:
        for key, value in DotenvLoader.load_from_file(path).items():
            defaults.setdefault(key, value)

    _DEFAULT_VALUES = defaults
    return defaults


def _default_value(name: str) -> Optional[str]:
    return _load_default_values().get(name)


def env_str(
    name: str,
    or_value: str | None = None,
    *,
    required: bool = False,
    strip: bool = True,
) -> str | None:
    """Fetch a setting as a string, falling back to .env defaults and then *or_value*."""

    value = os.getenv(name)
    if value is None or value.strip() == "":
        value = _default_value(name)

    if value is None or value.strip() == "":
        if required:
            raise ConfigurationError.missing_value(name)
        return or_value
    return value.strip() if strip else value


def env_int(name: str, or_value: int | None = None, *, required: bool = False) -> int | None:
    """Fetch a setting and coerce it to ``int``."""

    raw = env_str(name)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError.missing_value(name)
        return or_value
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError.invalid_value(name, raw, "Expected an integer") from exc


def env_bool(name: str, or_value: bool | None = None, *, required: bool = False) -> bool | None:
    """Fetch a setting and coerce it to ``bool``."""

    raw = env_str(name)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError.missing_value(name)
        return or_value

    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError.invalid_value(name, raw, f"Expected one of {sorted(_TRUE_VALUES | _FALSE_VALUES)}")
