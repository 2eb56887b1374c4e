"""Configuration management for SceneWatch."""
import os
from datetime import datetime
from pathlib import Path
import yaml
from dotenv import load_dotenv

from scenewatch.exceptions import ConfigError

load_dotenv()

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


class Config:
    """Application configuration loaded from config.yaml and environment variables."""

    def __init__(self, config_path=None):
        if config_path is None:
            config_path = os.getenv("SCENEWATCH_CONFIG") or DEFAULT_CONFIG_PATH

        self.config_path = Path(config_path)
        with open(self.config_path) as f:
            self._config = yaml.safe_load(f) or {}

        self._load_env_overrides()

    def _load_env_overrides(self):
        """Load environment variable overrides."""
        self._email = os.getenv("SCENEWATCH_EMAIL")
        self._method = os.getenv("SCENEWATCH_METHOD")
        self._base_url = os.getenv("SCENEWATCH_BASE_URL")
        self._port = os.getenv("PORT")

    def _get(self, section, key, default=None):
        return (self._config.get(section) or {}).get(key, default)

    @property
    def base_url(self):
        return (self._base_url or self._get("api", "base_url", "")).rstrip("/")

    @property
    def api_timeout(self):
        return self._get("api", "timeout", 30)

    @property
    def satellite(self):
        return self._get("api", "satellite", "l8")

    @property
    def method(self):
        return self._method or self._get("scene", "method")

    @property
    def image_center(self):
        """(latitude, longitude) of the image center, or None when unset."""
        center = self._get("scene", "center") or {}
        lat, lon = center.get("latitude"), center.get("longitude")
        if lat is None or lon is None or lat == "" or lon == "":
            return None
        return float(lat), float(lon)

    @property
    def acquisition_start(self):
        return str((self._get("scene", "acquisition") or {}).get("start", "2015-05-01"))

    @property
    def acquisition_end(self):
        return str((self._get("scene", "acquisition") or {}).get("end", "2016-05-01"))

    @property
    def email(self):
        return self._email or self._get("notifications", "email")

    @property
    def search_interval(self):
        return self._get("schedule", "search_interval")

    @property
    def recheck_interval(self):
        return self._get("schedule", "recheck_interval")

    @property
    def page_reload_interval(self):
        return self._get("display", "page_reload_interval", 3600)

    @property
    def tile_url_template(self):
        return self._get("display", "tile_url_template", "")

    @property
    def host(self):
        return self._get("server", "host", "0.0.0.0")

    @property
    def port(self):
        return int(self._port or self._get("server", "port", 3000))

    @property
    def log_level(self):
        return self._get("logging", "level", "INFO")

    @property
    def log_format(self):
        return self._get("logging", "format", "%(asctime)s %(levelname)s %(name)s: %(message)s")

    def validate(self):
        """
        Check that every value the tracker needs is present.

        Raises:
            ConfigError: listing all missing or invalid settings
        """
        problems = []

        if not self.method:
            problems.append("scene.method is required")
        if not self.email:
            problems.append("notifications.email is required")

        try:
            if self.image_center is None:
                problems.append("scene.center latitude and longitude are required")
        except (TypeError, ValueError):
            problems.append("scene.center must hold numeric latitude and longitude")

        for name in ("search_interval", "recheck_interval"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or isinstance(value, bool) or value <= 0:
                problems.append(f"schedule.{name} must be a positive number of seconds")

        for name in ("acquisition_start", "acquisition_end"):
            try:
                datetime.strptime(getattr(self, name), "%Y-%m-%d")
            except ValueError:
                problems.append(f"scene.acquisition {name.split('_')[1]} must be YYYY-MM-DD")

        if problems:
            raise ConfigError("Invalid configuration: " + "; ".join(problems), problems=problems)


# Global config instance
config = Config()
