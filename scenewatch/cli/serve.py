"""Long-running tracker with the web display."""
import sys

import click

from scenewatch.cli.common import console, get_client, get_config, get_criteria
from scenewatch.exceptions import ConfigError
from scenewatch.storage.cache import ResultCache
from scenewatch.tracking.reconciler import SceneReconciler
from scenewatch.tracking.scheduler import SceneScheduler
from scenewatch.web.app import create_app


@click.command(name="serve")
@click.option("--host", default=None, help="Interface to bind (default: from config)")
@click.option("--port", default=None, type=int, help="Port to serve on (default: from config / $PORT)")
def serve(host, port):
    """Track the configured scene and serve the latest imagery."""
    cfg = get_config()
    try:
        cfg.validate()
    except ConfigError as e:
        console.print("[red]Uh oh, you are missing some required input data:[/red]")
        for problem in e.problems:
            console.print(f"[red]  - {problem}[/red]")
        sys.exit(1)

    client = get_client(cfg)
    cache = ResultCache()
    reconciler = SceneReconciler(
        client,
        cache,
        method=cfg.method,
        email=cfg.email,
        recheck_interval=cfg.recheck_interval,
    )
    scheduler = SceneScheduler(
        client, reconciler, get_criteria(cfg), search_interval=cfg.search_interval
    )
    app = create_app(
        cache,
        center=cfg.image_center,
        page_reload_interval=cfg.page_reload_interval,
        tile_url_template=cfg.tile_url_template,
    )

    host = host or cfg.host
    port = port or cfg.port
    console.print(f"[bold]Tracking:[/bold] {cfg.method} imagery around {cfg.image_center}")
    console.print(f"[bold]Web server:[/bold] http://{host}:{port}")

    scheduler.start()
    try:
        app.run(host=host, port=port)
    finally:
        scheduler.stop(wait=False)
