"""Periodic search cycles and the polling chains they start."""
import logging
import threading
from concurrent.futures import Future

from scenewatch.exceptions import NoMatchError, TransportError

logger = logging.getLogger(__name__)


class PollingChain:
    """
    One scene's polling loop, running on its own daemon thread.

    The generation is raised when a newer search cycle joins the chain and
    is read by the reconciler at the moment a ready result is stored.
    """

    def __init__(self, scene_id, generation):
        self.scene_id = scene_id
        self.future = Future()
        self._generation = generation
        self._lock = threading.Lock()
        self._thread = None

    @property
    def generation(self):
        with self._lock:
            return self._generation

    def adopt(self, generation):
        """Raise the chain's generation to a newer search cycle's number."""
        with self._lock:
            self._generation = max(self._generation, generation)

    def start(self, target):
        self.future.set_running_or_notify_cancel()
        self._thread = threading.Thread(
            target=self._run,
            args=(target,),
            name=f"scene-chain-{self.scene_id}",
            daemon=True,
        )
        self._thread.start()

    def _run(self, target):
        try:
            result = target(self.scene_id, lambda: self.generation)
        except Exception as e:
            self.future.set_exception(e)
        else:
            self.future.set_result(result)

    def join(self, timeout=None):
        if self._thread is not None:
            self._thread.join(timeout)


class SceneScheduler:
    """
    Runs a search cycle at start-up and every search_interval seconds.

    Each cycle resolves one scene and hands it to the reconciler on a
    dedicated thread, so a scene that never becomes ready cannot hold up
    later ones. At most one polling chain runs per scene: a cycle that finds
    a scene whose chain is still polling joins that chain and hands it its
    newer generation instead of starting a second one.
    """

    def __init__(self, client, reconciler, criteria, search_interval):
        """
        Initialize the scheduler.

        Args:
            client: AstroDigitalClient used for searches
            reconciler: SceneReconciler that polls each scene
            criteria: SearchCriteria for every cycle
            search_interval: Seconds between search cycles
        """
        self.client = client
        self.reconciler = reconciler
        self.criteria = criteria
        self.search_interval = search_interval
        self.stop_event = reconciler.stop_event

        self._lock = threading.Lock()
        self._chains = {}
        self._generation = 0
        self._thread = None

    @property
    def generation(self):
        """Number of the most recently started search cycle."""
        with self._lock:
            return self._generation

    def _next_generation(self):
        with self._lock:
            self._generation += 1
            return self._generation

    def run_cycle(self):
        """
        Run one search cycle.

        Returns:
            Future of the polling chain for the found scene, or None if the
            search failed
        """
        generation = self._next_generation()
        try:
            scene_id = self.client.search(self.criteria)
        except (NoMatchError, TransportError) as e:
            logger.error("Search cycle %d failed: %s", generation, e)
            return None

        logger.info("Search cycle %d found scene %s", generation, scene_id)
        return self.track(scene_id, generation)

    def track(self, scene_id, generation=0):
        """
        Start polling a scene, or join the chain already polling it.

        Returns:
            Future resolving to the reconciler's track() result
        """
        with self._lock:
            chain = self._chains.get(scene_id)
            if chain is not None and not chain.future.done():
                chain.adopt(generation)
                logger.info(
                    "Already tracking %s; joining the running chain at generation %d",
                    scene_id,
                    chain.generation,
                )
                return chain.future

            chain = PollingChain(scene_id, generation)
            self._chains[scene_id] = chain

        chain.future.add_done_callback(lambda f: self._forget(scene_id, chain))
        chain.start(self.reconciler.track)
        return chain.future

    def _forget(self, scene_id, chain):
        with self._lock:
            if self._chains.get(scene_id) is chain:
                del self._chains[scene_id]

        if chain.future.exception() is not None:
            logger.error("Tracking of %s crashed", scene_id, exc_info=chain.future.exception())

    def active_scenes(self):
        """Scene IDs with a polling chain still running."""
        with self._lock:
            return [scene_id for scene_id, c in self._chains.items() if not c.future.done()]

    def _run(self):
        while not self.stop_event.is_set():
            try:
                self.run_cycle()
            except Exception:
                logger.exception("Search cycle crashed")
            if self.stop_event.wait(self.search_interval):
                break

    def start(self):
        """Start the search loop on a background thread."""
        if self._thread is not None:
            raise RuntimeError("Scheduler already started")

        self._thread = threading.Thread(target=self._run, name="scene-search", daemon=True)
        self._thread.start()
        logger.info("Searching every %s seconds", self.search_interval)

    def stop(self, wait=True):
        """Cancel the search loop and every polling chain."""
        self.stop_event.set()
        if wait:
            if self._thread is not None:
                self._thread.join()
            with self._lock:
                chains = list(self._chains.values())
            for chain in chains:
                chain.join()
        logger.info("Scheduler stopped")
