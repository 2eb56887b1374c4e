"""Utility functions."""

from scenewatch.utils.log import setup_logging

__all__ = ["setup_logging"]
