from __future__ import annotations

from kvconf.parsers.kv_parser import iter_entries
from kvconf.parsers.types import ParsedKV

__all__ = ["ParsedKV", "iter_entries"]
