"""Reconciles a scene's pipeline status with the action it needs."""
import logging
import threading

from scenewatch.exceptions import TransportError, UnknownStatusError
from scenewatch.models.scene import SceneStatus

logger = logging.getLogger(__name__)


class SceneReconciler:
    """
    Drives one scene to the READY state.

    NOT_YET_REQUESTED publishes the scene and checks again later, REQUESTED
    just checks again later, READY stores the result and ends the chain.
    """

    def __init__(self, client, cache, method, email, recheck_interval, stop_event=None):
        """
        Initialize the reconciler.

        Args:
            client: AstroDigitalClient (or anything with get_status/publish)
            cache: ResultCache receiving ready results
            method: Processing method code
            email: Notification address sent with publish requests
            recheck_interval: Seconds between status checks
            stop_event: threading.Event that cancels every polling chain when set
        """
        self.client = client
        self.cache = cache
        self.method = method
        self.email = email
        self.recheck_interval = recheck_interval
        self.stop_event = stop_event or threading.Event()

    def check(self, scene_id, generation=0):
        """
        Run one status check and act on the result.

        Args:
            scene_id: Scene ID
            generation: Search cycle number forwarded to the cache on READY, or a
                callable returning it, read when the result is stored

        Returns:
            The observed SceneStatus

        Raises:
            TransportError: the status could not be fetched
            UnknownStatusError: the status is not one the tracker handles
        """
        report = self.client.get_status(scene_id, self.method)
        status = report.status
        logger.info("Checked status of %s: %s", scene_id, status)

        if status is SceneStatus.READY:
            if callable(generation):
                generation = generation()
            self.cache.store(report.result, generation)
        elif status is SceneStatus.NOT_YET_REQUESTED:
            logger.info("Requesting %s processing for %s", self.method, scene_id)
            self.client.publish(scene_id, self.method, self.email)
        elif status is not SceneStatus.REQUESTED:
            raise UnknownStatusError(f"Unhandled scene status {status!r}", scene_id=scene_id)

        return status

    def track(self, scene_id, generation=0):
        """
        Poll a scene until it is ready, an error ends the chain, or the
        stop event is set.

        The first check runs immediately; later checks follow every
        recheck_interval seconds, each one only after the previous finished.
        There is no overall timeout.

        Args:
            scene_id: Scene ID
            generation: Search cycle number, or a callable returning the
                current one, read again for every check

        Returns:
            SceneStatus.READY, or None if the chain ended without a result
        """
        while True:
            try:
                status = self.check(scene_id, generation)
            except (TransportError, UnknownStatusError) as e:
                logger.error("Stopped tracking %s: %s", scene_id, e)
                return None

            if status is SceneStatus.READY:
                return status

            if self.stop_event.wait(self.recheck_interval):
                logger.info("Tracking of %s cancelled", scene_id)
                return None
