"""
Terminal config component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Platform(str, Enum):
    """Host operating system the terminal runs on."""

    LINUX = "linux"
    MAC = "mac"
    WINDOWS = "windows"


class ThemeCategory(str, Enum):
    """Base UI theme family an active theme belongs to."""

    HIGH_CONTRAST = "hc-black"
    DARK = "vs-dark"
    LIGHT = "vs"


class UnsupportedPlatformError(ValueError):
    """Raised when a platform outside Linux/Mac/Windows is supplied."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Unsupported platform: {value!r}")


@dataclass(frozen=True)
class FontDescriptor:
    """Resolved terminal font settings.

    Fields are None when neither the terminal nor the editor layer sets them.
    """

    font_family: Any = None
    font_size: Any = None
    line_height: Any = None


@dataclass(frozen=True)
class GetFontInput:
    """Input for resolving the terminal font."""

    platform: Platform = Platform.LINUX


@dataclass(frozen=True)
class GetFontOutput:
    """Output from resolving the terminal font."""

    font: FontDescriptor


@dataclass(frozen=True)
class GetShellInput:
    """Input for resolving the shell executable."""

    platform: Platform


@dataclass(frozen=True)
class GetShellOutput:
    """Output from resolving the shell executable."""

    shell: str | None
    platform: Platform


@dataclass(frozen=True)
class GetThemeInput:
    """Input for resolving the ANSI color table."""

    platform: Platform = Platform.LINUX


@dataclass(frozen=True)
class GetThemeOutput:
    """Output from resolving the ANSI color table."""

    colors: list[str]
    category: ThemeCategory
