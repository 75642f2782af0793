from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from kvconf.cli.ui import get_ui
from kvconf.cli.utils.files import load_or_exit, setup_logging


def get_cmd(
    path: Path = typer.Argument(..., dir_okay=False, help="Config file to read."),
    key: str = typer.Argument(..., help="Key to look up."),
    default: Optional[str] = typer.Option(
        None, "--default", "-d", help="Value printed when the key is missing."
    ),
    as_uint: bool = typer.Option(
        False, "--uint", help="Read the value as an unsigned integer."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Print one value, falling back to --default."""
    setup_logging(verbose)
    store = load_or_exit(path, get_ui(stderr=True).console)

    if as_uint:
        d = 0
        if default is not None:
            try:
                d = int(default)
            except ValueError:
                raise typer.BadParameter("--default must be an integer with --uint")
            if d < 0:
                raise typer.BadParameter("--default must not be negative with --uint")
        typer.echo(str(store.get_uint(key, d)))
        return

    typer.echo(store.get_string(key, default if default is not None else ""))
