from __future__ import annotations

import pytest
from typer.testing import CliRunner

import tuneview.cli as cli

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    # Keep the developer's .env and environment out of the results.
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TUNEVIEW_THEME", raising=False)


def test_show_prints_default_state():
    result = runner.invoke(cli.app, ["show"])

    assert result.exit_code == 0, result.output
    assert "UI State" in result.output
    assert "Home" in result.output
    assert "Unknown" in result.output


def test_show_replays_commands():
    result = runner.invoke(cli.app, ["show", "--do", "browse:album-1", "--do", "open_command_help"])

    assert result.exit_code == 0, result.output
    assert "Browse: album-1" in result.output
    assert "Commands" in result.output


def test_show_reports_unknown_commands():
    result = runner.invoke(cli.app, ["show", "-d", "dance"])

    assert result.exit_code == 0, result.output
    assert "Unknown command" in result.output


def test_show_uses_configured_theme(monkeypatch):
    monkeypatch.setenv("TUNEVIEW_THEME", "gruvbox")

    result = runner.invoke(cli.app, ["show"])

    assert result.exit_code == 0, result.output
    assert "gruvbox" in result.output


def test_themes_lists_builtin_themes():
    result = runner.invoke(cli.app, ["themes"])

    assert result.exit_code == 0, result.output
    for name in ("default", "dracula", "gruvbox"):
        assert name in result.output


def test_split_command():
    assert cli._split_command("browse:album:1") == ("browse", "album:1")
    assert cli._split_command("quit") == ("quit", None)
