"""
Built-in ANSI color tables for the terminal.

Index 0-7 are black, red, green, yellow, blue, magenta, cyan, white;
8-15 are the bright variants in the same order.
"""

from __future__ import annotations

from .models import ThemeCategory

HIGH_CONTRAST_COLORS: tuple[str, ...] = (
    "#000000",
    "#cd0000",
    "#00cd00",
    "#cdcd00",
    "#0000ee",
    "#cd00cd",
    "#00cdcd",
    "#e5e5e5",
    "#7f7f7f",
    "#ff0000",
    "#00ff00",
    "#ffff00",
    "#5c5cff",
    "#ff00ff",
    "#00ffff",
    "#ffffff",
)

LIGHT_COLORS: tuple[str, ...] = (
    "#000000",
    "#cd3131",
    "#008000",
    "#949800",
    "#0451a5",
    "#bc05bc",
    "#0598bc",
    "#555555",
    "#666666",
    "#cd3131",
    "#00aa00",
    "#b5ba00",
    "#0451a5",
    "#bc05bc",
    "#0598bc",
    "#a5a5a5",
)

DARK_COLORS: tuple[str, ...] = (
    "#000000",
    "#cd3131",
    "#09885a",
    "#e5e510",
    "#2472c8",
    "#bc3fbc",
    "#11a8cd",
    "#e5e5e5",
    "#666666",
    "#f14c4c",
    "#17a773",
    "#f5f543",
    "#3b8eea",
    "#d670d6",
    "#29b8db",
    "#e5e5e5",
)

# First match wins; "vs-dark" must precede anything matching plain "vs".
THEME_PREFIXES: tuple[tuple[str, ThemeCategory], ...] = (
    ("hc-black", ThemeCategory.HIGH_CONTRAST),
    ("vs-dark", ThemeCategory.DARK),
)

DEFAULT_CATEGORY = ThemeCategory.LIGHT

COLOR_TABLES: dict[ThemeCategory, tuple[str, ...]] = {
    ThemeCategory.HIGH_CONTRAST: HIGH_CONTRAST_COLORS,
    ThemeCategory.DARK: DARK_COLORS,
    ThemeCategory.LIGHT: LIGHT_COLORS,
}
