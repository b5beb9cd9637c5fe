from backend.engine.levelloader.loader import BUILTIN_LEVEL, Level, LevelLoader

__all__ = ["BUILTIN_LEVEL", "Level", "LevelLoader"]
