"""Data models for scenes and their processing status."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class SceneStatus(Enum):
    """Where a scene sits in the provider's processing pipeline for one method."""

    NOT_YET_REQUESTED = "NOT_YET_REQUESTED"
    REQUESTED = "REQUESTED"
    READY = "READY"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class SearchCriteria:
    """Bounding condition and processing method used to find a scene."""

    latitude: float
    longitude: float
    method: str
    start_date: str = "2015-05-01"
    end_date: str = "2016-05-01"

    def to_query(self):
        """
        Build the Lucene-style search expression.

        The scene footprint must contain the center point and the acquisition
        date must fall within the configured window.

        Returns:
            Query string for the ``search`` parameter
        """
        lat, lon = self.latitude, self.longitude
        clauses = [
            f"upperLeftCornerLatitude:[{lat} TO 1000]",
            f"lowerRightCornerLatitude:[-1000 TO {lat}]",
            f"lowerLeftCornerLongitude:[-1000 TO {lon}]",
            f"upperRightCornerLongitude:[{lon} TO 1000]",
            f"acquisitionDate:[{self.start_date} TO {self.end_date}]",
        ]
        return " AND ".join(clauses)


@dataclass(frozen=True)
class PublishedResult:
    """A completed, renderable product."""

    scene_id: str
    map_id: str


@dataclass
class StatusReport:
    """Outcome of one status check."""

    scene_id: str
    status: SceneStatus
    result: Optional[PublishedResult] = None

    @property
    def is_ready(self):
        return self.status is SceneStatus.READY


@dataclass(frozen=True)
class CachedResult:
    """A published result as held by the result cache."""

    result: PublishedResult
    generation: int = 0
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def map_id(self):
        return self.result.map_id

    def to_dict(self):
        """Convert to dictionary for JSON serialization."""
        return {
            "map_id": self.result.map_id,
            "scene_id": self.result.scene_id,
            "generation": self.generation,
            "updated_at": self.updated_at.isoformat(),
        }
