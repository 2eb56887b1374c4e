"""Data models."""

from scenewatch.models.scene import (
    CachedResult,
    PublishedResult,
    SceneStatus,
    SearchCriteria,
    StatusReport,
)

__all__ = ["CachedResult", "PublishedResult", "SceneStatus", "SearchCriteria", "StatusReport"]
