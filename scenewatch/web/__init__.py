"""Web display of the latest imagery."""

from scenewatch.web.app import create_app

__all__ = ["create_app"]
