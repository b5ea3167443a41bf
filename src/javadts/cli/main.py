"""javadts CLI."""

import click

from javadts import __version__
from javadts.cli.build import build_command
from javadts.cli.convert import convert_command
from javadts.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="javadts")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """javadts - TypeScript declarations from Java API sources."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(build_command, name="build")
cli.add_command(convert_command, name="convert")


if __name__ == "__main__":
    cli()
