"""Main CLI application entry point."""
import click

from scenewatch import __version__
from scenewatch.config import Config
from scenewatch.cli.common import get_config
from scenewatch.utils.log import setup_logging


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to config.yaml (default: packaged config or $SCENEWATCH_CONFIG)",
)
@click.pass_context
def cli(ctx, config_path):
    """SceneWatch - keep the latest processed satellite scene on display."""
    ctx.ensure_object(dict)
    if config_path:
        ctx.obj["config"] = Config(config_path)

    cfg = get_config(ctx)
    setup_logging(cfg.log_level, cfg.log_format)


# Import command modules
from scenewatch.cli import scenes, serve

# Register commands
cli.add_command(serve.serve)
cli.add_command(scenes.search)
cli.add_command(scenes.status)
cli.add_command(scenes.publish)
cli.add_command(scenes.methods)


if __name__ == "__main__":
    cli()
