"""
Environment adapters - theme id and host platform from the process.
"""

from __future__ import annotations

import logging
import os
import sys

from terminal_panel.components.terminal_config.models import (
    Platform,
    UnsupportedPlatformError,
)

logger = logging.getLogger(__name__)

THEME_ENV_VAR = "TERMINAL_PANEL_THEME"
DEFAULT_THEME = "vs-dark"


class EnvironmentThemeAdapter:
    """ThemePort reading the active theme id from an environment variable."""

    def __init__(self, var: str = THEME_ENV_VAR, default: str = DEFAULT_THEME) -> None:
        self.var = var
        self.default = default

    def get_theme(self) -> str:
        theme_id = os.environ.get(self.var)
        if not theme_id:
            logger.debug(f"{self.var} not set, using theme {self.default!r}")
            return self.default
        return theme_id


def detect_platform(sys_platform: str | None = None) -> Platform:
    """
    Map sys.platform onto a Platform.

    Args:
        sys_platform: Value to map; defaults to the running interpreter's.

    Raises:
        UnsupportedPlatformError: not Linux, macOS or Windows
    """
    value = sys.platform if sys_platform is None else sys_platform
    if value.startswith("linux"):
        return Platform.LINUX
    if value == "darwin":
        return Platform.MAC
    if value in ("win32", "cygwin"):
        return Platform.WINDOWS
    raise UnsupportedPlatformError(value)
