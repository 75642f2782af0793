from __future__ import annotations

import typer
from rich.console import Console

from kvconf import __version__
from kvconf.cli.commands.check import check_cmd
from kvconf.cli.commands.get import get_cmd
from kvconf.cli.commands.show import show_cmd

app = typer.Typer(
    name="kvconf",
    help="Inspect key=value config files and find settings nobody reads.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"kvconf {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", callback=_version_callback
    ),
) -> None:
    pass


app.command("check")(check_cmd)
app.command("show")(show_cmd)
app.command("get")(get_cmd)
