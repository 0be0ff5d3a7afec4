"""
Logging configuration for the berlin-clock command line.

setup_logging configures the root logger with:
- Console output on stdout (WARNING by default, DEBUG when verbose)
- Optional file output to {BERLIN_CLOCK_LOG_DIR}/{service_name}.log
- Fresh log file on each start unless LOG_APPEND=1
"""

import logging
import logging.handlers
import sys
import threading
from pathlib import Path
from typing import Optional

from .config import env_bool, env_str

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_UNKNOWN_LOGGER_NAME = "<unknown>"
_TECHNICAL_FORMAT = "%(asctime)s%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _close_handlers(logger: logging.Logger, logger_name: Optional[str] = None) -> None:
    """Close all handlers for a logger, logging any errors."""
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as e:  # Best-effort cleanup operation
            safe_name = logger_name if logger_name else _UNKNOWN_LOGGER_NAME
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", safe_name, e)


def _reset_root_handlers(root_logger: logging.Logger) -> None:
    _close_handlers(root_logger, "root")
    root_logger.handlers = []


def _build_console_handler(verbose: bool) -> logging.Handler:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT))
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return console_handler


def _resolve_log_directory() -> Path:
    configured_dir = env_str("BERLIN_CLOCK_LOG_DIR")
    if configured_dir:
        return Path(configured_dir).expanduser()
    return Path.cwd() / "logs"


def _configure_file_handler(service_name: Optional[str]) -> Optional[logging.Handler]:
    if not service_name:
        return None

    logs_dir = _resolve_log_directory()
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_path = logs_dir / f"{service_name}.log"
    file_mode = "a" if env_bool("LOG_APPEND", or_value=False) else "w"

    file_handler = logging.handlers.WatchedFileHandler(log_path, mode=file_mode)
    file_handler.setFormatter(logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT))
    file_handler.setLevel(logging.DEBUG)
    return file_handler


def setup_logging(service_name: Optional[str] = None, verbose: bool = False) -> None:
    """Configure the root logger; BERLIN_CLOCK_DEBUG=1 forces verbose console output."""

    with _config_lock:
        root_logger = logging.getLogger()
        verbose = verbose or bool(env_bool("BERLIN_CLOCK_DEBUG", or_value=False))

        _reset_root_handlers(root_logger)
        root_logger.addHandler(_build_console_handler(verbose))

        file_handler = _configure_file_handler(service_name)
        if file_handler:
            root_logger.addHandler(file_handler)

        root_logger.setLevel(logging.DEBUG if verbose or file_handler else logging.WARNING)


__all__ = ["setup_logging"]
