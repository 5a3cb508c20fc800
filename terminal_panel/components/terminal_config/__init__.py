"""
Terminal config component - Effective font, shell and color theme.
"""

from ._impl import (
    ConfigResolver,
    classify_theme,
    color_table_for,
    first_set,
    is_unset,
    read_setting,
    theme_category_token,
)
from .component import (
    run,
    run_get_font,
    run_get_shell,
    run_get_theme,
)
from .models import (
    FontDescriptor,
    GetFontInput,
    GetFontOutput,
    GetShellInput,
    GetShellOutput,
    GetThemeInput,
    GetThemeOutput,
    Platform,
    ThemeCategory,
    UnsupportedPlatformError,
)
from .ports import ConfigurationPort, ThemePort
from .themes import DARK_COLORS, HIGH_CONTRAST_COLORS, LIGHT_COLORS

__all__ = [
    # Component entry points
    "run",
    "run_get_font",
    "run_get_shell",
    "run_get_theme",
    # Resolver
    "ConfigResolver",
    # Models
    "FontDescriptor",
    "GetFontInput",
    "GetFontOutput",
    "GetShellInput",
    "GetShellOutput",
    "GetThemeInput",
    "GetThemeOutput",
    "Platform",
    "ThemeCategory",
    # Ports
    "ConfigurationPort",
    "ThemePort",
    # Exceptions
    "UnsupportedPlatformError",
    # Functions
    "classify_theme",
    "color_table_for",
    "first_set",
    "is_unset",
    "read_setting",
    "theme_category_token",
    # Constants
    "DARK_COLORS",
    "HIGH_CONTRAST_COLORS",
    "LIGHT_COLORS",
]
