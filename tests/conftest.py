"""Shared fixtures for kvconf tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[[str], Path]:
    """Write `content` to a fresh config file and return its path."""
    counter = {"n": 0}

    def _make(content: str) -> Path:
        counter["n"] += 1
        p = tmp_path / f"conf{counter['n']}.conf"
        p.write_bytes(content.encode("utf-8"))
        return p

    return _make
