"""Tests for CLI help text."""

from __future__ import annotations

import pytest

from code2md.cli import main


def _render_help(capsys: pytest.CaptureFixture[str]) -> str:
    """Run `code2md --help` via CLI entrypoint and return captured stdout."""
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    return capsys.readouterr().out


def test_help_includes_tagline(capsys: pytest.CaptureFixture[str]) -> None:
    out = _render_help(capsys)
    assert "code2md: Print files and directories as Markdown code blocks" in out


def test_help_includes_common_usage(capsys: pytest.CaptureFixture[str]) -> None:
    out = _render_help(capsys)
    assert "Common usage:" in out
    assert "code2md src/" in out
    assert "code2md --list-files ." in out


def test_help_lists_flags(capsys: pytest.CaptureFixture[str]) -> None:
    out = _render_help(capsys)
    for flag in ("--ignore", "--include-dotfiles", "--no-default-ignores", "--output"):
        assert flag in out


def test_no_args_is_an_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 1
    assert "No input specified" in capsys.readouterr().err


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--version"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith("v") or out.startswith("unknown")
