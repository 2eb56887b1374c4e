"""Tests for the Astro Digital API client.

HTTP is replaced by a mocked requests.Session.
"""
import logging

import pytest
import requests

from scenewatch.api.astro import AstroDigitalClient
from scenewatch.exceptions import NoMatchError, TransportError, UnknownStatusError
from scenewatch.models.scene import SceneStatus

BASE_URL = "https://api.example.test/v1"
SCENE_ID = "LC80100102015050LGN00"


@pytest.fixture()
def client(session):
    return AstroDigitalClient(BASE_URL, timeout=5, session=session)


def scene_entry(code, ready, map_id=None):
    entry = {"process_method": {"code": code}, "ready": ready}
    if map_id is not None:
        entry["map_id"] = map_id
    return entry


class TestSearch:
    def test_returns_first_trimmed_scene_id(self, client, session, make_response, criteria):
        session.request.return_value = make_response(
            payload={"results": [{"sceneID": f"  {SCENE_ID}\n"}, {"sceneID": "LC8OTHER"}]}
        )

        assert client.search(criteria) == SCENE_ID

    def test_builds_bounding_query(self, client, session, make_response, criteria):
        session.request.return_value = make_response(payload={"results": [{"sceneID": SCENE_ID}]})

        client.search(criteria)

        args, kwargs = session.request.call_args
        assert args == ("GET", f"{BASE_URL}/search")
        query = kwargs["params"]["search"]
        assert "upperLeftCornerLatitude:[37.7577 TO 1000]" in query
        assert "lowerRightCornerLatitude:[-1000 TO 37.7577]" in query
        assert "lowerLeftCornerLongitude:[-1000 TO -122.4376]" in query
        assert "upperRightCornerLongitude:[-122.4376 TO 1000]" in query
        assert "acquisitionDate:[2015-05-01 TO 2016-05-01]" in query
        assert kwargs["timeout"] == 5

    def test_zero_results_is_no_match(self, client, session, make_response, criteria):
        session.request.return_value = make_response(payload={"results": []})

        with pytest.raises(NoMatchError):
            client.search(criteria)

    def test_non_success_is_no_match(self, client, session, make_response, criteria):
        session.request.return_value = make_response(status_code=500)

        with pytest.raises(NoMatchError):
            client.search(criteria)

    def test_network_failure_is_transport_error(self, client, session, criteria):
        session.request.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(TransportError):
            client.search(criteria)


class TestGetStatus:
    @pytest.mark.parametrize(
        "entries, expected",
        [
            ([], SceneStatus.NOT_YET_REQUESTED),
            ([scene_entry("ndvi", True, "zzz")], SceneStatus.NOT_YET_REQUESTED),
            ([scene_entry("trueColor", False)], SceneStatus.REQUESTED),
            ([scene_entry("trueColor", True, "abc123")], SceneStatus.READY),
            ([scene_entry("ndvi", False), scene_entry("trueColor", True, "abc123")], SceneStatus.READY),
        ],
    )
    def test_status_mapping(self, client, session, make_response, entries, expected):
        session.request.return_value = make_response(
            payload={"count": len(entries), "results": entries}
        )

        report = client.get_status(SCENE_ID, "trueColor")

        assert report.status is expected
        assert report.scene_id == SCENE_ID

    def test_ready_carries_map_id(self, client, session, make_response):
        session.request.return_value = make_response(
            payload={"count": 1, "results": [scene_entry("trueColor", True, "abc123")]}
        )

        report = client.get_status(SCENE_ID, "trueColor")

        assert report.is_ready
        assert report.result.map_id == "abc123"
        assert report.result.scene_id == SCENE_ID

    def test_requested_has_no_result(self, client, session, make_response):
        session.request.return_value = make_response(
            payload={"count": 1, "results": [scene_entry("trueColor", False)]}
        )

        assert client.get_status(SCENE_ID, "trueColor").result is None

    def test_queries_by_scene_id(self, client, session, make_response):
        session.request.return_value = make_response(payload={"count": 0, "results": []})

        client.get_status(SCENE_ID, "trueColor")

        args, kwargs = session.request.call_args
        assert args == ("GET", f"{BASE_URL}/scenes")
        assert kwargs["params"] == {"sceneID": SCENE_ID}

    def test_entry_without_process_method_is_skipped(self, client, session, make_response):
        session.request.return_value = make_response(payload={"results": [{"ready": True}]})

        assert client.get_status(SCENE_ID, "trueColor").status is SceneStatus.NOT_YET_REQUESTED

    def test_unrecognized_ready_value(self, client, session, make_response):
        session.request.return_value = make_response(
            payload={"results": [scene_entry("trueColor", "maybe")]}
        )

        with pytest.raises(UnknownStatusError):
            client.get_status(SCENE_ID, "trueColor")

    def test_ready_without_map_id(self, client, session, make_response):
        session.request.return_value = make_response(
            payload={"results": [scene_entry("trueColor", True)]}
        )

        with pytest.raises(UnknownStatusError):
            client.get_status(SCENE_ID, "trueColor")

    def test_non_success_is_transport_error(self, client, session, make_response):
        session.request.return_value = make_response(status_code=503)

        with pytest.raises(TransportError) as exc_info:
            client.get_status(SCENE_ID, "trueColor")

        assert exc_info.value.status_code == 503
        assert exc_info.value.scene_id == SCENE_ID

    def test_invalid_json_is_transport_error(self, client, session, make_response):
        session.request.return_value = make_response(invalid_json=True)

        with pytest.raises(TransportError):
            client.get_status(SCENE_ID, "trueColor")

    def test_network_failure_is_not_retried(self, client, session):
        session.request.side_effect = requests.Timeout("timed out")

        with pytest.raises(TransportError):
            client.get_status(SCENE_ID, "trueColor")

        assert session.request.call_count == 1


class TestPublish:
    def test_posts_form_fields(self, client, session, make_response):
        session.request.return_value = make_response()

        assert client.publish(SCENE_ID, "trueColor", "watcher@example.com") is None

        args, kwargs = session.request.call_args
        assert args == ("POST", f"{BASE_URL}/publish")
        assert kwargs["data"] == {
            "satellite": "l8",
            "sceneID": SCENE_ID,
            "email": "watcher@example.com",
            "process": "trueColor",
        }

    def test_non_success_is_logged_not_raised(self, client, session, make_response, caplog):
        session.request.return_value = make_response(status_code=400, text="bad scene")

        with caplog.at_level(logging.ERROR, logger="scenewatch.api.astro"):
            client.publish(SCENE_ID, "trueColor", "watcher@example.com")

        assert "HTTP 400" in caplog.text
        assert "bad scene" in caplog.text

    def test_network_failure_is_logged_not_raised(self, client, session, caplog):
        session.request.side_effect = requests.ConnectionError("connection reset")

        with caplog.at_level(logging.ERROR, logger="scenewatch.api.astro"):
            client.publish(SCENE_ID, "trueColor", "watcher@example.com")

        assert "failed" in caplog.text


class TestListMethods:
    def test_returns_results(self, client, session, make_response):
        methods = [{"code": "trueColor", "name": "True Color"}, {"code": "ndvi"}]
        session.request.return_value = make_response(payload={"results": methods})

        assert client.list_methods() == methods
        assert session.request.call_args[0] == ("GET", f"{BASE_URL}/methods")

    def test_non_success_is_transport_error(self, client, session, make_response):
        session.request.return_value = make_response(status_code=500)

        with pytest.raises(TransportError):
            client.list_methods()


def test_requires_base_url():
    with pytest.raises(ValueError):
        AstroDigitalClient("")
