"""
Tests for the command line interface
"""

import json

import pytest
from click.testing import CliRunner

from src.cli import main

LINE = {"keys": {"k": 2}, "1": {"value": "5", "base": 10}, "2": {"value": "7", "base": 10}}


@pytest.fixture
def runner():
    return CliRunner()


class TestSingleInput:
    """stdin and single-file modes"""

    def test_stdin(self, runner) -> None:
        result = runner.invoke(main, [], input=json.dumps(LINE))
        assert result.exit_code == 0
        assert result.output.strip() == "3"

    def test_stdin_flag(self, runner) -> None:
        result = runner.invoke(main, ["--stdin"], input=json.dumps(LINE))
        assert result.exit_code == 0
        assert "3" in result.output

    def test_stdin_error(self, runner) -> None:
        result = runner.invoke(main, [], input='{"keys": {}}')
        assert result.exit_code == 1
        assert "ERROR:" in result.output
        assert "keys.k" in result.output

    def test_file(self, runner, tmp_path) -> None:
        path = tmp_path / "one.json"
        path.write_text(json.dumps(LINE), encoding="utf-8")
        result = runner.invoke(main, [str(path)])
        assert result.exit_code == 0
        assert result.output.strip() == "3"

    def test_missing_path(self, runner, tmp_path) -> None:
        result = runner.invoke(main, [str(tmp_path / "missing.json")])
        assert result.exit_code != 0


class TestBatchMode:
    """Directory mode"""

    def test_directory(self, runner, tmp_path) -> None:
        (tmp_path / "a.json").write_text(json.dumps(LINE), encoding="utf-8")
        (tmp_path / "b.json").write_text('{"keys": {"k": 0}}', encoding="utf-8")
        result = runner.invoke(main, [str(tmp_path), "--log-level", "ERROR"])
        assert result.exit_code == 1
        assert "a.json => 3" in result.output
        assert "b.json => ERROR:" in result.output

    def test_directory_all_ok(self, runner, tmp_path) -> None:
        (tmp_path / "a.json").write_text(json.dumps(LINE), encoding="utf-8")
        result = runner.invoke(main, [str(tmp_path), "--log-level", "ERROR"])
        assert result.exit_code == 0
        assert result.output.strip() == "a.json => 3"

    def test_empty_directory(self, runner, tmp_path) -> None:
        result = runner.invoke(main, [str(tmp_path)])
        assert result.exit_code == 1
        assert "No input files" in result.output
