"""API clients for external services."""

from scenewatch.api.astro import AstroDigitalClient

__all__ = ["AstroDigitalClient"]
