"""
YAML settings file adapter for the terminal config component.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from terminal_panel.settings.loader import load_settings_file

logger = logging.getLogger(__name__)


class YamlSettingsAdapter:
    """
    ConfigurationPort backed by a YAML settings file.

    The file is read once at construction; get_configuration() returns the
    materialized snapshot without touching the disk. Call reload() after
    the file changes.
    """

    def __init__(self, path: Path | str) -> None:
        """
        Load the settings file.

        Raises:
            FileNotFoundError: the file does not exist
            ValueError: the file is not valid settings YAML
        """
        self._path = Path(path)
        self._snapshot: dict[str, Any] = load_settings_file(self._path)

    @property
    def path(self) -> Path:
        return self._path

    def get_configuration(self) -> dict[str, Any]:
        return self._snapshot

    def reload(self) -> None:
        """Re-read the settings file, keeping the old snapshot on failure."""
        self._snapshot = load_settings_file(self._path)
        logger.debug("Reloaded settings from %s", self._path)
