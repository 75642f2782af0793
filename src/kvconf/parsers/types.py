from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedKV:
    """ A key-value pair from one config line."""
    key: str
    value: str
    line: int
