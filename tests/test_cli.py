import json

import pytest
from typer.testing import CliRunner

from whatdidido import cli
from whatdidido.cli import app

runner = CliRunner()

# region Fixtures


@pytest.fixture
def cli_env(monkeypatch, tmp_path):
    """Point the CLI at a temporary data directory and shell history."""
    data_dir = tmp_path / "data"
    history_file = tmp_path / ".zsh_history"
    monkeypatch.setenv("WHATDIDIDO_DATA_DIR", str(data_dir))
    monkeypatch.setenv("WHATDIDIDO_SHELL_HISTORY", str(history_file))
    monkeypatch.setenv("WHATDIDIDO_LOG_LEVEL", "warning")
    monkeypatch.chdir(tmp_path)
    # Wide enough that table cells are never folded.
    monkeypatch.setattr(cli.console, "width", 200)
    return {"data_dir": data_dir, "history_file": history_file, "cwd": tmp_path}


def read_entries(data_dir):
    return json.loads((data_dir / "history.json").read_text())["entries"]


# endregion
# region add


class TestAdd:
    def test_add_records_entry(self, cli_env):
        result = runner.invoke(app, ["add", "git status"])
        assert result.exit_code == 0, result.output
        assert "Added entry #1" in result.output
        entries = read_entries(cli_env["data_dir"])
        assert entries[0]["content"] == "git status"
        assert entries[0]["workingDirectory"] == str(cli_env["cwd"])

    def test_add_duplicate_is_skipped(self, cli_env):
        runner.invoke(app, ["add", "ls"])
        result = runner.invoke(app, ["add", "ls"])
        assert result.exit_code == 0
        assert "SKIPPING" in result.output
        assert len(read_entries(cli_env["data_dir"])) == 1

    def test_add_requires_text(self, cli_env):
        result = runner.invoke(app, ["add"])
        assert result.exit_code != 0

    def test_add_rejects_blank_text(self, cli_env):
        result = runner.invoke(app, ["add", "  "])
        assert result.exit_code == 1

    def test_corrupt_history_reports_error(self, cli_env):
        cli_env["data_dir"].mkdir()
        (cli_env["data_dir"] / "history.json").write_text("{broken")
        result = runner.invoke(app, ["add", "ls"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_error_reported_once(self, cli_env):
        cli_env["data_dir"].mkdir()
        (cli_env["data_dir"] / "history.json").write_text("{broken")
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 1
        assert result.output.count("Error:") == 1
        assert "Command failed" not in result.output
        assert "Invalid JSON" not in result.output

    def test_invalid_utf8_history_reports_error(self, cli_env):
        cli_env["data_dir"].mkdir()
        (cli_env["data_dir"] / "history.json").write_bytes(b"\xff\xfe garbage")
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 1
        assert result.output.count("Error:") == 1
        assert not isinstance(result.exception, UnicodeDecodeError)


# endregion
# region list


class TestList:
    def test_empty(self, cli_env):
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "No command history" in result.output

    def test_shows_recent(self, cli_env):
        for command in ["ls", "pwd", "whoami"]:
            runner.invoke(app, ["add", command])
        result = runner.invoke(app, ["list", "--limit", "2"])
        assert result.exit_code == 0
        assert "pwd" in result.output
        assert "whoami" in result.output
        assert " ls " not in result.output

    def test_brackets_are_not_markup(self, cli_env):
        runner.invoke(app, ["add", "echo [bold]hi[/bold]"])
        result = runner.invoke(app, ["list"])
        assert "[bold]hi[/bold]" in result.output


# endregion
# region summary


class TestSummary:
    def test_no_activity(self, cli_env):
        result = runner.invoke(app, ["summary"])
        assert result.exit_code == 0
        assert "No activity logged today." in result.output

    def test_report(self, cli_env):
        for command in ["ls", "make", "ls"]:
            runner.invoke(app, ["add", command])
        result = runner.invoke(app, ["summary"])
        assert result.exit_code == 0
        assert "Directory Usage" in result.output
        assert "Command Usage" in result.output
        assert "Total entries: 3" in result.output
        assert "Most used command: ls (2 times)" in result.output

    def test_flat(self, cli_env):
        for command in ["ls", "make", "ls"]:
            runner.invoke(app, ["add", command])
        result = runner.invoke(app, ["summary", "--flat"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["ls", "make"]


# endregion
# region sync


class TestSync:
    def test_imports_shell_history(self, cli_env):
        cli_env["history_file"].write_text(
            ": 1700000000:0;git status\n: 1700000001:0;git status\n: 1700000002:0;ls\n"
        )
        result = runner.invoke(app, ["sync"])
        assert result.exit_code == 0, result.output
        assert "Imported 2 of 3 lines (1 duplicates skipped)" in result.output
        contents = [e["content"] for e in read_entries(cli_env["data_dir"])]
        assert contents == ["git status", "ls"]

    def test_missing_history_file(self, cli_env):
        result = runner.invoke(app, ["sync"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_explicit_file(self, cli_env, tmp_path):
        source = tmp_path / "other_history"
        source.write_text("a\nb\nc\n")
        result = runner.invoke(app, ["sync", "--file", str(source), "--limit", "2"])
        assert result.exit_code == 0
        assert "Imported 2 of 2 lines" in result.output


# endregion


def test_unknown_command(cli_env):
    result = runner.invoke(app, ["frobnicate"])
    assert result.exit_code != 0


def test_invalid_configuration(cli_env, monkeypatch):
    monkeypatch.setenv("WHATDIDIDO_MAX_ENTRIES", "0")
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 1
    assert "invalid configuration" in result.output
