"""
Settings file loading: YAML parsing, dotted keys and shape checks.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from terminal_panel.adapters.memory import StaticThemeAdapter
from terminal_panel.adapters.settings_file import YamlSettingsAdapter
from terminal_panel.components.terminal_config import ConfigResolver, Platform
from terminal_panel.settings import expand_dotted_keys, load_settings_file


def write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "settings.yaml"
    path.write_text(content)
    return path


class TestExpandDottedKeys:
    def test_dotted_keys_become_nested(self) -> None:
        assert expand_dotted_keys({"terminal.integrated.fontSize": 14}) == {
            "terminal": {"integrated": {"fontSize": 14}}
        }

    def test_mixed_forms_merge(self) -> None:
        data = {
            "terminal.integrated.shell.linux": "/bin/bash",
            "terminal": {"integrated": {"fontSize": 13}},
            "editor.fontFamily": "Menlo",
        }
        assert expand_dotted_keys(data) == {
            "terminal": {"integrated": {"shell": {"linux": "/bin/bash"}, "fontSize": 13}},
            "editor": {"fontFamily": "Menlo"},
        }

    def test_later_key_wins(self) -> None:
        data = {"editor": {"fontSize": 10}, "editor.fontSize": 12}
        assert expand_dotted_keys(data) == {"editor": {"fontSize": 12}}


class TestLoadSettingsFile:
    def test_nested_yaml(self, tmp_path: Path) -> None:
        path = write(
            tmp_path,
            "editor:\n"
            "  fontFamily: Menlo\n"
            "  fontSize: 12\n"
            "terminal:\n"
            "  integrated:\n"
            "    shell:\n"
            "      linux: /bin/zsh\n",
        )
        snapshot = load_settings_file(path)
        assert snapshot["editor"] == {"fontFamily": "Menlo", "fontSize": 12}
        assert snapshot["terminal"]["integrated"]["shell"]["linux"] == "/bin/zsh"

    def test_dotted_yaml(self, tmp_path: Path) -> None:
        path = write(tmp_path, '"terminal.integrated.lineHeight": 1.2\n')
        assert load_settings_file(path) == {"terminal": {"integrated": {"lineHeight": 1.2}}}

    def test_empty_file(self, tmp_path: Path) -> None:
        assert load_settings_file(write(tmp_path, "")) == {}

    def test_null_values_allowed(self, tmp_path: Path) -> None:
        path = write(tmp_path, "terminal:\n  integrated:\n    fontFamily: null\n")
        assert load_settings_file(path)["terminal"]["integrated"]["fontFamily"] is None

    def test_unknown_keys_kept(self, tmp_path: Path) -> None:
        path = write(tmp_path, "workbench:\n  colorTheme: Monokai\n")
        assert load_settings_file(path) == {"workbench": {"colorTheme": "Monokai"}}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_settings_file(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_settings_file(write(tmp_path, "editor: [unclosed\n"))

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="mapping"):
            load_settings_file(write(tmp_path, "- a\n- b\n"))

    def test_wrong_leaf_type(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="validation failed"):
            load_settings_file(write(tmp_path, "editor:\n  fontSize: big\n"))


class TestYamlSettingsAdapter:
    def test_resolves_through_resolver(self, tmp_path: Path) -> None:
        path = write(
            tmp_path,
            "editor:\n"
            "  fontFamily: Menlo\n"
            "terminal.integrated.fontFamily: Hack\n"
            "terminal.integrated.shell.windows: powershell.exe\n",
        )
        resolver = ConfigResolver(
            Platform.WINDOWS, YamlSettingsAdapter(path), StaticThemeAdapter("vs")
        )
        assert resolver.get_font().font_family == "Hack"
        assert resolver.get_shell() == "powershell.exe"

    def test_snapshot_is_materialized(self, tmp_path: Path) -> None:
        path = write(tmp_path, "editor:\n  fontSize: 12\n")
        adapter = YamlSettingsAdapter(path)
        path.write_text("editor:\n  fontSize: 20\n")
        assert adapter.get_configuration()["editor"]["fontSize"] == 12

        adapter.reload()
        assert adapter.get_configuration()["editor"]["fontSize"] == 20

    def test_failed_reload_keeps_snapshot(self, tmp_path: Path) -> None:
        path = write(tmp_path, "editor:\n  fontSize: 12\n")
        adapter = YamlSettingsAdapter(str(path))
        path.write_text("editor: [broken\n")
        with pytest.raises(ValueError):
            adapter.reload()
        assert adapter.get_configuration() == {"editor": {"fontSize": 12}}
        assert adapter.path == path
