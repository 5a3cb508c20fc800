"""
Terminal panel configuration: effective font, shell and ANSI colors.
"""

__version__ = "0.1.0"
