"""
Terminal config component - Resolve effective terminal settings.

Functional entry points over ConfigResolver. Ports are injected per call,
so each run reflects the current state of the accessors.
"""

from __future__ import annotations

from ._impl import ConfigResolver, color_table_for
from .models import (
    GetFontInput,
    GetFontOutput,
    GetShellInput,
    GetShellOutput,
    GetThemeInput,
    GetThemeOutput,
)
from .ports import ConfigurationPort, ThemePort

# --- Component Entry Points ---


def run_get_font(
    inp: GetFontInput,
    *,
    config: ConfigurationPort,
    theme: ThemePort,
) -> GetFontOutput:
    """
    Resolve the terminal font.

    Args:
        inp: Input carrying the host platform.
        config: Configuration port.
        theme: Theme port.

    Returns:
        GetFontOutput with the resolved FontDescriptor.
    """
    resolver = ConfigResolver(inp.platform, config, theme)
    return GetFontOutput(font=resolver.get_font())


def run_get_shell(
    inp: GetShellInput,
    *,
    config: ConfigurationPort,
    theme: ThemePort,
) -> GetShellOutput:
    """
    Resolve the shell executable for the input platform.

    The shell is None when nothing is configured for that platform;
    applying an OS default is left to the caller.
    """
    resolver = ConfigResolver(inp.platform, config, theme)
    return GetShellOutput(shell=resolver.get_shell(), platform=inp.platform)


def run_get_theme(
    inp: GetThemeInput,
    *,
    config: ConfigurationPort,
    theme: ThemePort,
) -> GetThemeOutput:
    """Resolve the ANSI color table for the active UI theme."""
    resolver = ConfigResolver(inp.platform, config, theme)
    category = resolver.get_theme_category()
    return GetThemeOutput(colors=color_table_for(category), category=category)


def run(
    inp: GetFontInput | GetShellInput | GetThemeInput,
    *,
    config: ConfigurationPort,
    theme: ThemePort,
) -> GetFontOutput | GetShellOutput | GetThemeOutput:
    """
    Main entry point for the terminal config component.

    Dispatches to appropriate handler based on input type.

    Args:
        inp: Input object (GetFontInput, GetShellInput, or GetThemeInput).
        config: Configuration port.
        theme: Theme port.

    Returns:
        Appropriate output object based on input type.
    """
    if isinstance(inp, GetFontInput):
        return run_get_font(inp, config=config, theme=theme)
    elif isinstance(inp, GetShellInput):
        return run_get_shell(inp, config=config, theme=theme)
    elif isinstance(inp, GetThemeInput):
        return run_get_theme(inp, config=config, theme=theme)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
