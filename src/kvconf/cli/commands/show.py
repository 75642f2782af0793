from __future__ import annotations

from pathlib import Path

import typer

from kvconf.cli.ui import get_ui, render_entries_table
from kvconf.cli.utils.files import load_or_exit, setup_logging


def show_cmd(
    path: Path = typer.Argument(..., dir_okay=False, help="Config file to show."),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Print every entry of a config file."""
    setup_logging(verbose)
    ui = get_ui(verbose=verbose)
    store = load_or_exit(path, get_ui(stderr=True).console)
    render_entries_table(ui.console, store, title=str(path))
