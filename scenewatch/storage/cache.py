"""Single-slot cache for the latest published result."""
import logging
import threading

from scenewatch.models.scene import CachedResult

logger = logging.getLogger(__name__)


class ResultCache:
    """
    Thread-safe holder of the most recent ready result.

    Each write carries the generation of the search cycle that produced it.
    A write is accepted only when its generation is at least the stored one,
    so a slow chain from an older cycle cannot replace a newer result.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._entry = None

    def store(self, result, generation=0):
        """
        Store a ready result.

        Args:
            result: PublishedResult
            generation: Search cycle number that produced the result

        Returns:
            True if the result replaced the cached one, False if it was stale
        """
        with self._lock:
            if self._entry is not None and generation < self._entry.generation:
                logger.warning(
                    "Ignoring map %s from generation %d; generation %d is already cached",
                    result.map_id,
                    generation,
                    self._entry.generation,
                )
                return False
            self._entry = CachedResult(result=result, generation=generation)

        logger.info("Latest image is now %s (scene %s)", result.map_id, result.scene_id)
        return True

    def snapshot(self):
        """Return the cached CachedResult, or None if nothing is ready yet."""
        with self._lock:
            return self._entry

    def latest(self):
        """Return the latest map ID, or None if nothing is ready yet."""
        entry = self.snapshot()
        return entry.map_id if entry else None

    def clear(self):
        with self._lock:
            self._entry = None
