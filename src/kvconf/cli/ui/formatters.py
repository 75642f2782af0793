from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from kvconf.core.errors import ParseError
from kvconf.core.models import UnreadKey
from kvconf.core.store import ConfigStore


def _short(s: str, max_len: int = 140) -> str:
    s = s or ""
    if len(s) <= max_len:
        return s
    return s[:max_len] + "…"


# ----------------------------
# Entries
# ----------------------------

def render_entries_table(
    console: Console,
    store: ConfigStore,
    *,
    title: Optional[str] = None,
) -> None:
    """Print every entry of `store` without marking anything read."""
    if not len(store):
        console.print("[muted]No entries.[/muted]")
        return

    table = Table(title=title or f"Entries ({len(store)})", show_lines=False)
    table.add_column("Line", justify="right", no_wrap=True)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value")

    for kv in store.items():
        table.add_row(str(kv.line), Text(kv.key), Text(_short(kv.value, 120)))

    console.print(table)


# ----------------------------
# Unread keys
# ----------------------------

def render_unread(
    console: Console,
    unread: Sequence[UnreadKey],
    *,
    source: Optional[str] = None,
) -> None:
    if not unread:
        console.print("[ok]✅ All keys were read.[/ok]")
        return

    title = f"Unread keys ({len(unread)})"
    if source:
        title += f" in {source}"
    table = Table(title=title, show_lines=False)
    table.add_column("Line", justify="right", no_wrap=True)
    table.add_column("Key", style="cyan")

    for u in sorted(unread, key=lambda u: (u.line, u.key)):
        table.add_row(str(u.line), Text(u.key))

    console.print(table)


# ----------------------------
# Errors
# ----------------------------

def render_load_error(console: Console, path: str, err: Exception) -> None:
    if isinstance(err, ParseError):
        console.print(
            f"[err]{escape(path)}:{err.line}: {err.reason.value}[/err] "
            f"[muted]{escape(_short(err.raw, 160))}[/muted]",
            highlight=False,
            soft_wrap=True,
        )
        return
    console.print(
        f"[err]{escape(path)}: {escape(_short(str(err), 160))}[/err]",
        highlight=False,
        soft_wrap=True,
    )
