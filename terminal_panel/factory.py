"""
Factory wiring ConfigResolver to the default adapters.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from terminal_panel.adapters.environment import EnvironmentThemeAdapter, detect_platform
from terminal_panel.adapters.memory import StaticConfigurationAdapter, StaticThemeAdapter
from terminal_panel.adapters.settings_file import YamlSettingsAdapter
from terminal_panel.components.terminal_config import (
    ConfigResolver,
    ConfigurationPort,
    Platform,
    ThemePort,
)


def create_config_resolver(
    settings: Path | str | Mapping[str, Any] | None = None,
    *,
    theme_id: str | None = None,
    platform: Platform | None = None,
) -> ConfigResolver:
    """
    Create a resolver for the running host.

    Args:
        settings: Path to a YAML settings file, or an already-loaded
            snapshot. None means no settings at all.
        theme_id: Active theme id. None reads TERMINAL_PANEL_THEME.
        platform: Host platform. None detects it from sys.platform.

    Returns:
        Configured ConfigResolver
    """
    config: ConfigurationPort
    if settings is None:
        config = StaticConfigurationAdapter()
    elif isinstance(settings, Mapping):
        config = StaticConfigurationAdapter(settings)
    else:
        config = YamlSettingsAdapter(settings)

    theme: ThemePort
    if theme_id is None:
        theme = EnvironmentThemeAdapter()
    else:
        theme = StaticThemeAdapter(theme_id)

    return ConfigResolver(platform or detect_platform(), config, theme)
