"""Shared utilities for CLI commands."""
import click
from rich.console import Console

from scenewatch.api.astro import AstroDigitalClient
from scenewatch.config import config as default_config
from scenewatch.models.scene import SearchCriteria

# Global console for consistent output
console = Console()


def get_config(ctx=None):
    """Get the config selected on the command line, or the default one."""
    ctx = ctx or click.get_current_context(silent=True)
    if ctx is not None and ctx.obj and ctx.obj.get("config") is not None:
        return ctx.obj["config"]
    return default_config


def get_client(cfg):
    """Get initialized Astro Digital API client."""
    return AstroDigitalClient(cfg.base_url, timeout=cfg.api_timeout, satellite=cfg.satellite)


def get_criteria(cfg, latitude=None, longitude=None, method=None):
    """Build search criteria from config, with optional overrides."""
    center = cfg.image_center or (None, None)
    lat = latitude if latitude is not None else center[0]
    lon = longitude if longitude is not None else center[1]
    if lat is None or lon is None:
        raise click.UsageError("Image center is not configured; pass --lat and --lon")

    return SearchCriteria(
        latitude=lat,
        longitude=lon,
        method=method or cfg.method,
        start_date=cfg.acquisition_start,
        end_date=cfg.acquisition_end,
    )
