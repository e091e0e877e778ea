"""A grid-based snake game: the snake, apple and game rules, and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]