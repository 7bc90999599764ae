"""Centralized logging for fakeiban.

All loggers live under the ``fakeiban`` root so the CLI can configure the
whole tree at once and tests can capture a single namespace.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

APP_LOGGER_NAME = "fakeiban"

DEFAULT_FORMAT = "%(asctime)s [%(levelname).4s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "WARNING",
    log_file: str | Path | None = None,
    component_levels: dict[str, str] | None = None,
) -> logging.Logger:
    """Configure the ``fakeiban`` logger tree.

    Args:
        level: default level (DEBUG, INFO, WARNING, ERROR).
        log_file: optional file that receives the same records as stderr.
        component_levels: per-component overrides, e.g. ``{"generator": "DEBUG"}``.
    """

    root = logging.getLogger(APP_LOGGER_NAME)

    # Re-setup must not duplicate handlers.
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_path), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if component_levels:
        for component, component_level in component_levels.items():
            set_component_level(component, component_level)

    return root


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a component, namespaced as ``fakeiban.<name>``."""

    if name == APP_LOGGER_NAME or name.startswith(APP_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")


def set_component_level(component: str, level: str) -> None:
    numeric_level = getattr(logging, level.upper(), None)
    if isinstance(numeric_level, int):
        get_logger(component).setLevel(numeric_level)
