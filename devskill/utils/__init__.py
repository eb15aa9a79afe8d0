"""Utility functions."""

from .terminal import (
    ConsoleNotifier,
    choose_index,
    create_table,
    scanline_trim,
)

__all__ = [
    "ConsoleNotifier",
    "choose_index",
    "create_table",
    "scanline_trim",
]
