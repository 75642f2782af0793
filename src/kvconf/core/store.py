from __future__ import annotations

import io
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import (
    Dict,
    Iterable,
    KeysView,
    List,
    Literal,
    Optional,
    Union,
    overload,
)

from kvconf.core.models import UnreadKey, UnreadReport
from kvconf.parsers.kv_parser import Line, iter_entries
from kvconf.parsers.types import ParsedKV

logger = logging.getLogger(__name__)

UINT_MAX = 2**64 - 1

_UINT_RE = re.compile(r"\+?[0-9]+", re.ASCII)


@dataclass
class Entry:
    value: str
    line: int
    was_read: bool = False


class ConfigStore:
    """
    Parsed key=value config with read tracking.

    Every accessor hit marks the entry as read; `check_unread()` then lists
    entries nobody asked for (typos, stale settings). The set of keys never
    changes after parsing.
    """

    def __init__(self, entries: Dict[str, Entry]) -> None:
        self._entries = entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return f"ConfigStore({len(self._entries)} entries)"

    def keys(self) -> KeysView[str]:
        return self._entries.keys()

    def items(self) -> List[ParsedKV]:
        """Entries in file order. Does not mark anything read."""
        out = [
            ParsedKV(key=k, value=e.value, line=e.line)
            for k, e in self._entries.items()
        ]
        out.sort(key=lambda kv: kv.line)
        return out

    def line_of(self, key: str) -> Optional[int]:
        e = self._entries.get(key)
        return e.line if e is not None else None

    def _take(self, key: str) -> Optional[Entry]:
        e = self._entries.get(key)
        if e is not None:
            e.was_read = True
        return e

    def get_string(self, key: str, default: str) -> str:
        e = self._take(key)
        if e is None:
            return default
        return e.value

    def get_uint(self, key: str, default: int) -> int:
        """
        Unsigned base-10 value of `key`, or `default`.

        Malformed values (non-numeric, negative, out of range) fall back to
        `default` without raising; the key still counts as read.
        """
        e = self._take(key)
        if e is None:
            return default
        if not _UINT_RE.fullmatch(e.value):
            return default
        v = int(e.value)
        if v > UINT_MAX:
            return default
        return v

    def check_unread(self) -> List[UnreadKey]:
        return [
            UnreadKey(key=k, line=e.line)
            for k, e in self._entries.items()
            if not e.was_read
        ]

    def format_unread(self) -> str:
        return " ".join(str(u) for u in self.check_unread())

    def unread_report(self, source: Optional[str] = None) -> UnreadReport:
        return UnreadReport(source=source, unread=self.check_unread())


def parse(source: Iterable[Line]) -> ConfigStore:
    """
    Build a ConfigStore from an iterable of str or bytes lines.

    Raises ParseError on the first malformed line; errors raised by the
    source itself propagate unchanged.
    """
    if isinstance(source, (str, bytes)):
        raise TypeError(
            "parse() takes an iterable of lines, not a whole document; "
            "use parse_string() for text or io.BytesIO() for bytes"
        )
    entries: Dict[str, Entry] = {}
    for kv in iter_entries(source):
        entries[kv.key] = Entry(value=kv.value, line=kv.line)
    logger.debug("parsed %d config entries", len(entries))
    return ConfigStore(entries)


def parse_string(text: str) -> ConfigStore:
    return parse(io.StringIO(text, newline="\n"))


@dataclass(frozen=True)
class LoadedConfig:
    store: ConfigStore
    path: Path
    raw: bytes


@overload
def read_config_file(
    path: Union[str, Path], *, keep_raw: Literal[False] = ...
) -> ConfigStore: ...


@overload
def read_config_file(
    path: Union[str, Path], *, keep_raw: Literal[True]
) -> LoadedConfig: ...


def read_config_file(
    path: Union[str, Path],
    *,
    keep_raw: bool = False,
) -> Union[ConfigStore, LoadedConfig]:
    """
    Parse the config file at `path`.

    With keep_raw=True the whole file is read first and returned alongside
    the store as a LoadedConfig.
    """
    p = Path(path)
    logger.debug("reading config file %s", p)

    if keep_raw:
        raw = p.read_bytes()
        return LoadedConfig(store=parse(io.BytesIO(raw)), path=p.resolve(), raw=raw)

    with p.open("rb") as f:
        return parse(f)
