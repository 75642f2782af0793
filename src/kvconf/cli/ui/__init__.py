from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.theme import Theme

from kvconf.cli.ui.formatters import (
    render_entries_table,
    render_load_error,
    render_unread,
)

THEME = Theme(
    {
        "ok": "green",
        "warn": "yellow",
        "err": "bold red",
        "muted": "dim",
    }
)


@dataclass(frozen=True)
class UI:
    console: Console
    verbose: bool = False


def get_ui(*, verbose: bool = False, stderr: bool = False) -> UI:
    return UI(console=Console(theme=THEME, stderr=stderr), verbose=verbose)


__all__ = [
    "UI",
    "get_ui",
    "render_entries_table",
    "render_load_error",
    "render_unread",
]
