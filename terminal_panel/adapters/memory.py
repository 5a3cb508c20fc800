"""
In-memory configuration and theme adapters.

Hold a snapshot handed over by the host application. The host calls
update() when its settings or theme change, then re-queries the resolver.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class StaticConfigurationAdapter:
    """ConfigurationPort over a nested settings mapping."""

    snapshot: Mapping[str, Any] = field(default_factory=dict)

    def get_configuration(self) -> Mapping[str, Any]:
        return self.snapshot

    def update(self, snapshot: Mapping[str, Any]) -> None:
        """Replace the held settings snapshot."""
        self.snapshot = snapshot
        logger.debug(f"Configuration snapshot replaced ({len(snapshot)} sections)")


@dataclass
class StaticThemeAdapter:
    """ThemePort over a fixed theme id."""

    theme_id: str | None = None

    def get_theme(self) -> str | None:
        return self.theme_id

    def update(self, theme_id: str | None) -> None:
        """Replace the active theme id."""
        self.theme_id = theme_id
        logger.debug(f"Active theme set to {theme_id!r}")
