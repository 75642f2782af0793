from __future__ import annotations

from pathlib import Path
from typing import List

import typer

from kvconf.cli.ui import get_ui, render_unread
from kvconf.cli.utils.files import load_or_exit, setup_logging
from kvconf.core.errors import ExitCode


def check_cmd(
    path: Path = typer.Argument(..., dir_okay=False, help="Config file to check."),
    key: List[str] = typer.Option(
        [], "--key", "-k", help="Key the application reads (repeatable)."
    ),
    fail: bool = typer.Option(
        True, "--fail/--no-fail", help="Exit 1 if unread keys remain (CI mode)."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Validate a config file and list keys that were never read."""
    setup_logging(verbose)
    ui = get_ui(verbose=verbose)
    err_ui = get_ui(verbose=verbose, stderr=True)

    store = load_or_exit(path, err_ui.console)

    for k in key:
        store.get_string(k, "")

    report = store.unread_report(source=str(path))

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
    else:
        if ui.verbose:
            ui.console.print(
                f"[muted]{len(store)} entries, {len(key)} keys read[/muted]"
            )
        render_unread(ui.console, report.unread, source=str(path))

    if not report.ok and fail:
        raise typer.Exit(code=int(ExitCode.UNREAD))

    raise typer.Exit(code=int(ExitCode.OK))
