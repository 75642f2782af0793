"""Read key=value config files and find the keys nobody used."""

from __future__ import annotations

from kvconf.core.errors import ConfigError, ExitCode, ParseError, ParseReason
from kvconf.core.models import UnreadKey, UnreadReport
from kvconf.core.store import (
    UINT_MAX,
    ConfigStore,
    Entry,
    LoadedConfig,
    parse,
    parse_string,
    read_config_file,
)

__version__ = "0.1.0"

__all__ = [
    "UINT_MAX",
    "ConfigError",
    "ConfigStore",
    "Entry",
    "ExitCode",
    "LoadedConfig",
    "ParseError",
    "ParseReason",
    "UnreadKey",
    "UnreadReport",
    "parse",
    "parse_string",
    "read_config_file",
]
