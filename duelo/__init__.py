"""A console role-playing duel game: weapons, magic items, characters, a factory and three commands."""

__version__ = "0.1.0"
__all__ = ["battle", "characters", "demo", "factory", "items", "roster", "weapons"]