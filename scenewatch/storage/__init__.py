"""In-memory storage."""

from scenewatch.storage.cache import ResultCache

__all__ = ["ResultCache"]
