from __future__ import annotations

import logging
from pathlib import Path

import typer

from valuediff.canonical import diff_to_json_line
from valuediff.config import DiffConfig, load_config
from valuediff.constants import EXIT_DIFFERENT, EXIT_INTERNAL_ERROR, EXIT_SUCCESS
from valuediff.core import deep_diff
from valuediff.decode import load_document
from valuediff.errors import ValueDiffError


def _version_callback(value: bool) -> None:
    if value:
        from valuediff import __version__

        typer.echo(f"valuediff {__version__}")
        raise typer.Exit()


app = typer.Typer(add_completion=False, help="Structural differences between nested documents")


@app.callback(invoke_without_command=True)
def _main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def diff(
    left: Path = typer.Argument(..., help="Left-hand document"),
    right: Path = typer.Argument(..., help="Right-hand document"),
    input_format: str = typer.Option("auto", "--format", help="Input format: auto | json | yaml"),
    config_path: Path | None = typer.Option(None, "--config", help="YAML file with diff settings"),
) -> None:
    """Print one canonical JSON line per difference between LEFT and RIGHT."""
    try:
        config = load_config(config_path) if config_path is not None else DiffConfig()
        left_value = load_document(left, input_format)
        right_value = load_document(right, input_format)
    except (ValueDiffError, OSError) as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(EXIT_INTERNAL_ERROR) from exc

    diffs = deep_diff(left_value, right_value, config=config)
    for item in diffs:
        typer.echo(diff_to_json_line(item, config.path_separator))
    raise typer.Exit(EXIT_DIFFERENT if diffs else EXIT_SUCCESS)


__all__ = ["app"]
