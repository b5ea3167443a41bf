"""javadts build command - convert, patch and bundle a Java source tree."""

from pathlib import Path
from typing import Any

import click

from javadts.build import build
from javadts.config.loader import load_config
from javadts.core.errors import JavaDtsError
from javadts.core.formatting import build_summary
from javadts.core.logging import configure_logging, get_log_file_path
from javadts.core.progress import status


@click.command()
@click.argument(
    "project",
    default=".",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file to use instead of PROJECT/javadts.yaml",
)
@click.option(
    "--source",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Java source root (overrides source.root)",
)
@click.option("--out", "out_file", type=click.Path(path_type=Path), help="Artifact path")
@click.option("--no-mods", is_flag=True, help="Skip the hand corrections")
@click.option("--keep-scratch", is_flag=True, help="Keep the per-file declarations")
@click.pass_context
def build_command(
    ctx: click.Context,
    project: Path,
    config_file: Path | None,
    source: Path | None,
    out_file: Path | None,
    no_mods: bool,
    keep_scratch: bool,
) -> None:
    """Build the bundled declaration file.

    PROJECT is the directory holding javadts.yaml (default: current directory).
    """
    overrides: dict[str, Any] = {}
    if source is not None:
        overrides["source"] = {"root": source.resolve()}
    output: dict[str, Any] = {}
    if out_file is not None:
        output["out_file"] = out_file.resolve()
    if keep_scratch:
        output["keep_scratch"] = True
    if output:
        overrides["output"] = output
    if no_mods:
        overrides["mods"] = {"enabled": False}

    try:
        config = load_config(project.resolve(), config_file=config_file, **overrides)
        if not (ctx.obj or {}).get("verbose"):
            configure_logging(config=config.logging)
        if not config.source.root.is_dir():
            raise click.ClickException(f"Java source root not found: {config.source.root}")
        result = build(config)
    except JavaDtsError as e:
        message = str(e)
        log_file = get_log_file_path()
        if log_file is not None:
            message += f"\nSee log: {log_file}"
        raise click.ClickException(message) from e

    summary = build_summary(
        result.out_file, result.files_converted, len(result.namespaces), result.mods_applied
    )
    status(summary, style="success")
