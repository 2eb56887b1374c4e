"""Shared pytest fixtures for the SceneWatch test suite."""
from unittest.mock import MagicMock

import pytest
import yaml

from scenewatch.models.scene import PublishedResult, SceneStatus, SearchCriteria, StatusReport
from scenewatch.storage.cache import ResultCache

SCENE_ID = "LC80100102015050LGN00"
METHOD = "trueColor"
EMAIL = "watcher@example.com"
BASE_URL = "https://api.example.test/v1"


@pytest.fixture()
def make_response():
    """Factory for fake requests.Response objects."""

    def _make(status_code=200, payload=None, text="", invalid_json=False):
        response = MagicMock()
        response.status_code = status_code
        response.text = text
        response.url = BASE_URL
        if invalid_json:
            response.json.side_effect = ValueError("No JSON object could be decoded")
        else:
            response.json.return_value = payload if payload is not None else {}
        return response

    return _make


@pytest.fixture()
def session():
    """Mocked requests.Session."""
    return MagicMock()


@pytest.fixture()
def criteria():
    return SearchCriteria(latitude=37.7577, longitude=-122.4376, method=METHOD)


@pytest.fixture()
def cache():
    return ResultCache()


class ReportFactory:
    """Builds StatusReport values for one scene."""

    def __init__(self, scene_id=SCENE_ID):
        self.scene_id = scene_id

    def of(self, status, map_id=None):
        result = PublishedResult(scene_id=self.scene_id, map_id=map_id) if map_id else None
        return StatusReport(scene_id=self.scene_id, status=status, result=result)

    def not_requested(self):
        return self.of(SceneStatus.NOT_YET_REQUESTED)

    def requested(self):
        return self.of(SceneStatus.REQUESTED)

    def ready(self, map_id="abc123"):
        return self.of(SceneStatus.READY, map_id)


@pytest.fixture()
def reports():
    """Factory for StatusReport values of the tracked scene."""
    return ReportFactory()


@pytest.fixture()
def config_data():
    """A complete, valid configuration."""
    return {
        "api": {"base_url": BASE_URL, "timeout": 5, "satellite": "l8"},
        "scene": {
            "method": METHOD,
            "center": {"latitude": 37.7577, "longitude": -122.4376},
            "acquisition": {"start": "2015-05-01", "end": "2016-05-01"},
        },
        "notifications": {"email": EMAIL},
        "schedule": {"search_interval": 86400, "recheck_interval": 600},
        "display": {
            "page_reload_interval": 3600,
            "tile_url_template": "https://tiles.example.test/{map_id}/{z}/{x}/{y}.png",
        },
        "server": {"host": "127.0.0.1", "port": 3000},
        "logging": {"level": "INFO", "format": "%(levelname)s %(message)s"},
    }


@pytest.fixture()
def write_config(tmp_path):
    """Write a config dict to a YAML file and return its path."""

    def _write(data):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump(data))
        return path

    return _write


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer environment overrides out of the tests."""
    for name in ("SCENEWATCH_EMAIL", "SCENEWATCH_METHOD", "SCENEWATCH_BASE_URL", "PORT", "SCENEWATCH_CONFIG"):
        monkeypatch.delenv(name, raising=False)
