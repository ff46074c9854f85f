"""Tetris with one shared game model shown in pygame and Tk views."""

__version__ = "0.1.0"

__all__ = [
    "types",
    "block",
    "factory",
    "shapes",
    "board",
    "game",
    "controller",
    "preview",
    "application",
    "pygame_view",
    "tk_view",
    "cli",
]