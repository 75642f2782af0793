from __future__ import annotations

from enum import Enum, IntEnum


class ExitCode(IntEnum):
    OK = 0
    UNREAD = 1
    ERROR = 2


class ParseReason(str, Enum):
    MISSING_SEPARATOR = "missing-separator"
    MISSING_KEY = "missing-key"
    DUPLICATE_KEY = "duplicate-key"


_REASON_DETAIL = {
    ParseReason.MISSING_SEPARATOR: "missing =",
    ParseReason.MISSING_KEY: "missing key",
    ParseReason.DUPLICATE_KEY: "repeated parameter",
}


class ConfigError(Exception):
    """Base class for kvconf errors."""


class ParseError(ConfigError, ValueError):
    """
    A malformed config line.

    Parsing stops at the first one, so `line` is always the first bad line
    of the input (1-based, blank and comment lines included).
    """

    def __init__(self, line: int, raw: str, reason: ParseReason) -> None:
        self.line = line
        self.raw = raw
        self.reason = ParseReason(reason)
        super().__init__(
            f"Config line {line} invalid: {raw} ({_REASON_DETAIL[self.reason]})"
        )
