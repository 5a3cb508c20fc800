"""
ConfigResolver - Effective terminal settings from layered configuration.

Derives the terminal font, shell executable and ANSI color table from
the generic ``editor`` settings, the ``terminal.integrated`` settings,
the host platform and the active UI theme.

Key behaviors:
- Terminal settings win over editor settings, field by field
- Shell lookup is per platform with no cross-platform fallback
- Theme classification by id prefix: hc-black, then vs-dark, else light
- Every query re-reads its ports; nothing is cached between calls
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .models import (
    FontDescriptor,
    Platform,
    ThemeCategory,
    UnsupportedPlatformError,
)
from .ports import ConfigurationPort, ThemePort
from .themes import COLOR_TABLES, DEFAULT_CATEGORY, THEME_PREFIXES

logger = logging.getLogger(__name__)

EDITOR_SECTION = "editor"
TERMINAL_SECTION = "terminal.integrated"

# Setting key per font field, shared by both layers.
FONT_FIELDS: dict[str, str] = {
    "font_family": "fontFamily",
    "font_size": "fontSize",
    "line_height": "lineHeight",
}

SHELL_KEYS: dict[Platform, str] = {
    Platform.LINUX: "linux",
    Platform.MAC: "osx",
    Platform.WINDOWS: "windows",
}


# --- Pure helpers ---


def is_unset(value: Any) -> bool:
    """True for values that count as "not configured"."""
    return value is None or value == ""


def first_set(specific: Any, general: Any) -> Any:
    """
    Pick the more specific value when it is set.

    The general value is returned verbatim otherwise, even if it is
    itself unset.
    """
    if not is_unset(specific):
        return specific
    return general


def read_setting(snapshot: Mapping[str, Any] | None, path: str) -> Any:
    """
    Read a dotted path such as 'terminal.integrated.fontSize'.

    Returns None when any segment is missing or a parent is not a mapping.
    """
    node: Any = snapshot
    for key in path.split("."):
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node


def theme_category_token(theme_id: str | None) -> str:
    """Leading segment of a theme id, up to the first space."""
    if not theme_id:
        return ""
    return theme_id.split(" ", 1)[0]


def classify_theme(theme_id: str | None) -> ThemeCategory:
    """Map an active theme id onto one of the built-in categories."""
    token = theme_category_token(theme_id)
    for prefix, category in THEME_PREFIXES:
        if token.startswith(prefix):
            return category
    return DEFAULT_CATEGORY


def color_table_for(category: ThemeCategory) -> list[str]:
    """Fresh copy of the 16-entry ANSI table for a category."""
    return list(COLOR_TABLES[category])


# --- Resolver ---


class ConfigResolver:
    """
    Terminal settings resolver.

    Provides:
    - get_font: per-field terminal-over-editor cascade
    - get_shell: shell path for the construction-time platform
    - get_theme: ANSI color table for the active UI theme
    """

    def __init__(
        self,
        platform: Platform,
        configuration: ConfigurationPort,
        theme: ThemePort,
    ) -> None:
        """
        Initialize the resolver.

        Args:
            platform: Host platform, fixed for the resolver's lifetime
            configuration: Settings accessor
            theme: Active theme accessor

        Raises:
            UnsupportedPlatformError: platform is not a Platform member
        """
        if not isinstance(platform, Platform):
            raise UnsupportedPlatformError(platform)
        self._platform = platform
        self._configuration = configuration
        self._theme = theme

    @property
    def platform(self) -> Platform:
        return self._platform

    def get_font(self) -> FontDescriptor:
        """
        Resolve font family, size and line height.

        Each field independently prefers terminal.integrated.<field> and
        falls back to editor.<field>.
        """
        snapshot = self._configuration.get_configuration()
        resolved: dict[str, Any] = {}
        for attr, key in FONT_FIELDS.items():
            specific = read_setting(snapshot, f"{TERMINAL_SECTION}.{key}")
            general = read_setting(snapshot, f"{EDITOR_SECTION}.{key}")
            resolved[attr] = first_set(specific, general)
            logger.debug(
                "font %s resolved from %s layer",
                key,
                "terminal" if not is_unset(specific) else "editor",
            )
        return FontDescriptor(**resolved)

    def get_shell(self) -> str | None:
        """Shell configured for this platform, or None."""
        key = SHELL_KEYS[self._platform]
        snapshot = self._configuration.get_configuration()
        shell = read_setting(snapshot, f"{TERMINAL_SECTION}.shell.{key}")
        if shell is None:
            logger.debug("No shell configured for %s", key)
        return shell

    def get_theme_category(self) -> ThemeCategory:
        """Category of the active UI theme."""
        theme_id = self._theme.get_theme()
        category = classify_theme(theme_id)
        logger.debug("Theme %r classified as %s", theme_id, category.value)
        return category

    def get_theme(self) -> list[str]:
        """16-entry ANSI color table matching the active UI theme."""
        return color_table_for(self.get_theme_category())
