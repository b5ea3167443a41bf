"""javadts convert command - render a single Java file."""

from pathlib import Path

import click

from javadts.build import convert_file
from javadts.config.loader import load_config
from javadts.core.errors import JavaDtsError
from javadts.render.options import RenderOptions
from javadts.syntax.parser import JavaParser


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write here instead of stdout",
)
def convert_command(file: Path, output: Path | None) -> None:
    """Render FILE as a TypeScript declaration, without mods or bundling."""
    try:
        config = load_config()
        text = convert_file(JavaParser(), file, RenderOptions.from_config(config.translate))
    except JavaDtsError as e:
        raise click.ClickException(str(e)) from e

    if output is None:
        click.echo(text, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
