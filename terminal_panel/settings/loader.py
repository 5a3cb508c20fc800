import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from terminal_panel.settings.models import SettingsFile

logger = logging.getLogger(__name__)


def _merge(target: dict[str, Any], source: dict[str, Any]) -> None:
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        else:
            target[key] = value


def expand_dotted_keys(data: dict[str, Any]) -> dict[str, Any]:
    """
    Turn {"terminal.integrated.fontSize": 14} into nested mappings.

    Nested and dotted forms may be mixed; the later key wins for the
    same leaf.
    """
    result: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            value = expand_dotted_keys(value)
        parts = str(key).split(".")
        node = result
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        leaf = parts[-1]
        if isinstance(value, dict) and isinstance(node.get(leaf), dict):
            _merge(node[leaf], value)
        else:
            node[leaf] = value
    return result


def load_settings_file(path: Path) -> dict[str, Any]:
    """
    Load a YAML settings file into a nested settings snapshot.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML is invalid or a known setting has the wrong type.
    """
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in settings file: {e}") from e

    # An empty file is an empty configuration
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Settings file must contain a mapping, got {type(data).__name__}"
        )

    snapshot = expand_dotted_keys(data)

    try:
        SettingsFile.model_validate(snapshot)
    except ValidationError as e:
        raise ValueError(f"Settings validation failed:\n{e}") from e

    logger.info("Loaded settings from %s", path)
    return snapshot
