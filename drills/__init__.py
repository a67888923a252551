"""Small programming exercises: strings, grids, lists, tables and number puzzles."""

__version__ = "0.1.0"