from __future__ import annotations

from typing import Iterable, Iterator, Set, Union

from kvconf.core.errors import ParseError, ParseReason
from kvconf.parsers.types import ParsedKV

Line = Union[str, bytes]


def _as_text(raw: Line) -> str:
    if isinstance(raw, bytes):
        # comments are skipped before decoding so they may hold any bytes
        stripped = raw.strip()
        if stripped.startswith(b"#"):
            return ""
        return stripped.decode("utf-8")
    return raw


def iter_entries(lines: Iterable[Line]) -> Iterator[ParsedKV]:
    """
    Parse key=value lines into ParsedKV entries, lazily.

    Supported:
      key=value
      comments (# ...) and blank lines

    A value may not contain `=`: the line must split into exactly two parts.
    Raises ParseError on the first malformed line. Errors from the line
    source itself (OSError, UnicodeDecodeError) are not wrapped.
    """
    seen: Set[str] = set()

    for idx, raw in enumerate(lines, start=1):
        line = _as_text(raw).strip()
        if not line or line.startswith("#"):
            continue

        parts = line.split("=")
        if len(parts) != 2:
            raise ParseError(idx, line, ParseReason.MISSING_SEPARATOR)

        key = parts[0].strip()
        val = parts[1].strip()

        if not key:
            raise ParseError(idx, line, ParseReason.MISSING_KEY)
        if key in seen:
            raise ParseError(idx, line, ParseReason.DUPLICATE_KEY)
        seen.add(key)

        yield ParsedKV(key=key, value=val, line=idx)
