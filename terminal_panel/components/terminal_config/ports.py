"""
Terminal config component port definitions.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class ConfigurationPort(Protocol):
    """Read access to the already-loaded settings tree."""

    def get_configuration(self) -> Mapping[str, Any]:
        """Return the full nested settings snapshot."""
        ...


class ThemePort(Protocol):
    """Read access to the active UI theme."""

    def get_theme(self) -> str | None:
        """Return the active theme id, e.g. 'vs-dark vscode-theme-defaults-themes-dark_plus-json'."""
        ...
