"""
Settings files - YAML loading and shape checks.
"""

from .loader import expand_dotted_keys, load_settings_file
from .models import (
    EditorSettings,
    SettingsFile,
    ShellSettings,
    TerminalIntegratedSettings,
    TerminalSettings,
)

__all__ = [
    "load_settings_file",
    "expand_dotted_keys",
    "SettingsFile",
    "EditorSettings",
    "TerminalSettings",
    "TerminalIntegratedSettings",
    "ShellSettings",
]
