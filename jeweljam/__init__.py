"""A match-3 puzzle game: board rules, score files, menus and a pygame window."""

__version__ = "0.1.0"