"""Tests for the kvconf command line."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

from typer.testing import CliRunner

from kvconf import __version__
from kvconf.cli.app import app
from kvconf.core.errors import ExitCode

runner = CliRunner()

MakeFile = Callable[[str], Path]


class TestCheck:
    """Tests for `kvconf check`."""

    def test_unread_keys_fail(self, make_file: MakeFile) -> None:
        path = make_file("foo=1\nbar=baz\n")

        result = runner.invoke(app, ["check", str(path), "--key", "foo"])

        assert result.exit_code == int(ExitCode.UNREAD)
        assert "bar" in result.output

    def test_no_fail(self, make_file: MakeFile) -> None:
        path = make_file("foo=1\nbar=baz\n")

        result = runner.invoke(app, ["check", str(path), "--no-fail"])

        assert result.exit_code == int(ExitCode.OK)

    def test_all_read(self, make_file: MakeFile) -> None:
        path = make_file("foo=1\n# c\nbar=baz\n")

        result = runner.invoke(app, ["check", str(path), "-k", "foo", "-k", "bar"])

        assert result.exit_code == int(ExitCode.OK)
        assert "All keys were read" in result.output

    def test_json(self, make_file: MakeFile) -> None:
        path = make_file("foo=1\n\nbar=baz\n")

        result = runner.invoke(app, ["check", str(path), "--json", "-k", "foo"])

        assert result.exit_code == int(ExitCode.UNREAD)
        data = json.loads(result.output)
        assert data["source"] == str(path)
        assert data["unread"] == [{"key": "bar", "line": 3}]

    def test_parse_error(self, make_file: MakeFile) -> None:
        path = make_file("foo=1\nfoo=2\n")

        result = runner.invoke(app, ["check", str(path)])

        assert result.exit_code == int(ExitCode.ERROR)
        assert "duplicate-key" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["check", str(tmp_path / "missing.conf")])

        assert result.exit_code == int(ExitCode.ERROR)


class TestShow:
    """Tests for `kvconf show`."""

    def test_lists_entries(self, make_file: MakeFile) -> None:
        path = make_file("alpha = one\nbeta=\n")

        result = runner.invoke(app, ["show", str(path)])

        assert result.exit_code == 0
        assert "alpha" in result.output
        assert "one" in result.output
        assert "beta" in result.output

    def test_empty_file(self, make_file: MakeFile) -> None:
        result = runner.invoke(app, ["show", str(make_file(""))])

        assert result.exit_code == 0
        assert "No entries" in result.output


class TestGet:
    """Tests for `kvconf get`."""

    def test_string(self, make_file: MakeFile) -> None:
        path = make_file("name = demo\n")

        result = runner.invoke(app, ["get", str(path), "name"])

        assert result.exit_code == 0
        assert result.output.strip() == "demo"

    def test_string_default(self, make_file: MakeFile) -> None:
        path = make_file("name = demo\n")

        result = runner.invoke(app, ["get", str(path), "other", "--default", "x"])

        assert result.output.strip() == "x"

    def test_uint_fallback(self, make_file: MakeFile) -> None:
        path = make_file("port = abc\n")

        result = runner.invoke(app, ["get", str(path), "port", "--uint", "-d", "8080"])

        assert result.exit_code == 0
        assert result.output.strip() == "8080"

    def test_uint(self, make_file: MakeFile) -> None:
        path = make_file("port = 9000\n")

        result = runner.invoke(app, ["get", str(path), "port", "--uint"])

        assert result.output.strip() == "9000"

    def test_uint_bad_default(self, make_file: MakeFile) -> None:
        path = make_file("port = 9000\n")

        result = runner.invoke(app, ["get", str(path), "port", "--uint", "-d", "x"])

        assert result.exit_code != 0


def test_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
