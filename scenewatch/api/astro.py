"""Astro Digital API client for scene search, status and publishing."""
import logging

import requests

from scenewatch.exceptions import NoMatchError, TransportError, UnknownStatusError
from scenewatch.models.scene import PublishedResult, SceneStatus, StatusReport

logger = logging.getLogger(__name__)


class AstroDigitalClient:
    """Client for interacting with the Astro Digital API."""

    def __init__(self, base_url, timeout=30, satellite="l8", session=None):
        if not base_url:
            raise ValueError("Astro Digital base URL not configured")

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.satellite = satellite
        self.session = session or requests.Session()

    def _request(self, method, path, **kwargs):
        """
        Make an HTTP request against the API.

        Network failures are raised as TransportError; the response is
        returned as-is so callers can decide what a non-success status means.
        """
        kwargs.setdefault("timeout", self.timeout)
        url = f"{self.base_url}{path}"
        try:
            return self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

    @staticmethod
    def _json(response, scene_id=None):
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                f"Unparseable response from {response.url}",
                scene_id=scene_id,
                status_code=response.status_code,
            ) from e

    def search(self, criteria):
        """
        Find the scene matching the search criteria.

        Args:
            criteria: SearchCriteria with center point, date window and method

        Returns:
            Trimmed scene ID of the first result

        Raises:
            NoMatchError: non-success response or no results
            TransportError: the request could not be made
        """
        response = self._request("GET", "/search", params={"search": criteria.to_query()})
        if response.status_code != 200:
            raise NoMatchError(
                f"Unable to find any matches for the search (HTTP {response.status_code})"
            )

        results = self._json(response).get("results") or []
        if not results:
            raise NoMatchError("Unable to find any matches for the search")

        scene_id = str(results[0].get("sceneID") or "").strip()
        if not scene_id:
            raise NoMatchError("First search result carries no scene ID")
        return scene_id

    def get_status(self, scene_id, method):
        """
        Get the pipeline status of a scene for one processing method.

        The status is derived from the full listing on every call; the
        provider is the source of truth.

        Args:
            scene_id: Scene ID
            method: Processing method code (e.g. 'trueColor')

        Returns:
            StatusReport

        Raises:
            TransportError: network failure, non-success response or bad body
            UnknownStatusError: matching entry with an unrecognized state
        """
        response = self._request("GET", "/scenes", params={"sceneID": scene_id})
        if response.status_code != 200:
            raise TransportError(
                f"Status check for {scene_id} returned HTTP {response.status_code}",
                scene_id=scene_id,
                status_code=response.status_code,
            )

        data = self._json(response, scene_id=scene_id)
        for entry in data.get("results") or []:
            process_method = entry.get("process_method") or {}
            if process_method.get("code") != method:
                continue

            ready = entry.get("ready")
            if ready is True:
                map_id = entry.get("map_id")
                if not map_id:
                    raise UnknownStatusError(
                        f"{scene_id} is ready for {method} but has no map ID", scene_id=scene_id
                    )
                return StatusReport(
                    scene_id, SceneStatus.READY, PublishedResult(scene_id=scene_id, map_id=map_id)
                )
            if ready is False:
                return StatusReport(scene_id, SceneStatus.REQUESTED)
            raise UnknownStatusError(
                f"Unrecognized ready value {ready!r} for {scene_id} ({method})", scene_id=scene_id
            )

        return StatusReport(scene_id, SceneStatus.NOT_YET_REQUESTED)

    def publish(self, scene_id, method, email):
        """
        Request that a scene be processed and published.

        Fire-and-forget: failures are logged, never raised. Completion is
        observed later through get_status.

        Args:
            scene_id: Scene ID
            method: Processing method code
            email: Address notified by the provider when processing finishes
        """
        form_data = {
            "satellite": self.satellite,
            "sceneID": scene_id,
            "email": email,
            "process": method,
        }
        try:
            response = self._request("POST", "/publish", data=form_data)
        except TransportError as e:
            logger.error("Publish request for %s failed: %s", scene_id, e)
            return

        if response.status_code != 200:
            logger.error(
                "Publish request for %s received HTTP %s: %s",
                scene_id,
                response.status_code,
                response.text,
            )
            return
        logger.info("Scene %s successfully queued for publishing", scene_id)

    def list_methods(self):
        """
        List the processing methods the provider offers.

        Returns:
            List of method metadata dicts
        """
        response = self._request("GET", "/methods")
        if response.status_code != 200:
            raise TransportError(
                f"Method listing returned HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return self._json(response).get("results") or []
