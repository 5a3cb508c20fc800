from pydantic import BaseModel, ConfigDict, Field


class _Section(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class EditorSettings(_Section):
    font_family: str | None = Field(default=None, alias="fontFamily")
    font_size: float | None = Field(default=None, alias="fontSize")
    line_height: float | None = Field(default=None, alias="lineHeight")


class ShellSettings(_Section):
    linux: str | None = None
    osx: str | None = None
    windows: str | None = None


class TerminalIntegratedSettings(_Section):
    font_family: str | None = Field(default=None, alias="fontFamily")
    font_size: float | None = Field(default=None, alias="fontSize")
    line_height: float | None = Field(default=None, alias="lineHeight")
    shell: ShellSettings | None = None


class TerminalSettings(_Section):
    integrated: TerminalIntegratedSettings | None = None


class SettingsFile(_Section):
    """Shape of a user settings file. Every section is optional."""

    editor: EditorSettings | None = None
    terminal: TerminalSettings | None = None

