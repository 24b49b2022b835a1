"""Checking and loading of .fdf height-map files, with small text, memory and formatting helpers."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "convert",
    "memory",
    "textops",
    "linked",
    "putout",
    "printf",
    "lines",
    "mapfile",
]