"""One-off provider commands: search, status, publish, methods."""
import sys

import click

from scenewatch.cli.common import console, get_client, get_config, get_criteria
from scenewatch.exceptions import SceneWatchError
from scenewatch.models.scene import SceneStatus


@click.command(name="search")
@click.option("--lat", "latitude", type=float, default=None, help="Center latitude (default: from config)")
@click.option("--lon", "longitude", type=float, default=None, help="Center longitude (default: from config)")
@click.option("--method", default=None, help="Processing method code (default: from config)")
def search(latitude, longitude, method):
    """Find the scene covering the image center."""
    cfg = get_config()
    criteria = get_criteria(cfg, latitude, longitude, method)
    console.print(f"[bold]Searching around:[/bold] {criteria.latitude}, {criteria.longitude}")

    try:
        scene_id = get_client(cfg).search(criteria)
    except SceneWatchError as e:
        console.print(f"[red]Error searching for scenes: {e}[/red]")
        sys.exit(1)

    console.print(f"[green]Scene found:[/green] {scene_id}")


@click.command(name="status")
@click.argument("scene_id")
@click.option("--method", default=None, help="Processing method code (default: from config)")
def status(scene_id, method):
    """Check where a scene is in the processing pipeline."""
    cfg = get_config()
    method = method or cfg.method

    try:
        report = get_client(cfg).get_status(scene_id, method)
    except SceneWatchError as e:
        console.print(f"[red]Error checking scene status: {e}[/red]")
        sys.exit(1)

    console.print(f"[bold]Scene:[/bold] {scene_id}")
    console.print(f"[bold]Method:[/bold] {method}")
    if report.status is SceneStatus.READY:
        console.print(f"[green]Ready![/green] Map ID: {report.result.map_id}")
    elif report.status is SceneStatus.REQUESTED:
        console.print("[yellow]Requested, still processing. Try again later.[/yellow]")
    else:
        console.print("[yellow]Not yet requested. Use 'scenewatch publish' to queue it.[/yellow]")


@click.command(name="publish")
@click.argument("scene_id")
@click.option("--method", default=None, help="Processing method code (default: from config)")
@click.option("--email", default=None, help="Notification email (default: from config)")
def publish(scene_id, method, email):
    """Queue a scene for processing."""
    cfg = get_config()
    method = method or cfg.method
    email = email or cfg.email
    if not email:
        console.print("[red]A notification email is required (--email or config)[/red]")
        sys.exit(1)

    get_client(cfg).publish(scene_id, method, email)
    console.print(f"[green]Publish requested for {scene_id} ({method})[/green]")
    console.print("[dim]Check progress with 'scenewatch status'[/dim]")


@click.command(name="methods")
def methods():
    """List available processing methods."""
    cfg = get_config()
    try:
        results = get_client(cfg).list_methods()
    except SceneWatchError as e:
        console.print(f"[red]Error fetching methods: {e}[/red]")
        sys.exit(1)

    if not results:
        console.print("[yellow]No processing methods found.[/yellow]")
        return

    console.print(f"\n[bold cyan]Found {len(results)} methods[/bold cyan]\n")
    for method in results:
        console.print(f"[bold]{method.get('code', 'N/A')}[/bold]")
        if method.get("name"):
            console.print(f"  Name: {method['name']}")
        if method.get("description"):
            console.print(f"  {method['description']}")
