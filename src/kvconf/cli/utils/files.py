from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from kvconf.cli.ui import render_load_error
from kvconf.core.errors import ExitCode, ParseError
from kvconf.core.store import ConfigStore, read_config_file


def setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
        )


def load_or_exit(path: Path, console: Console) -> ConfigStore:
    """Parse `path`, or print why not and exit with ExitCode.ERROR."""
    try:
        return read_config_file(path)
    except (ParseError, OSError, UnicodeDecodeError) as e:
        render_load_error(console, str(path), e)
        raise typer.Exit(code=int(ExitCode.ERROR))
