"""A Pac-Man style maze game for the terminal: maze, game rules and curses front end."""

__version__ = "0.1.0"
__all__ = ["board", "game", "cli"]