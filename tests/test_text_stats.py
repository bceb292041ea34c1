"""Tests for text statistics and display paths."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from code2md.text_stats import TextStats, count_text, file_stats, relative_to_cwd


def test_count_text():
    assert count_text("") == TextStats(lines=1, words=0, chars=0)
    assert count_text("a b\nc\n") == TextStats(lines=3, words=3, chars=6)
    assert count_text("héllo wörld") == TextStats(lines=1, words=2, chars=11)


def test_stats_add():
    total = TextStats(1, 2, 3) + TextStats(10, 20, 30)
    assert total == TextStats(11, 22, 33)
    assert total.describe() == "11 lines, 22 words, 33 characters"


def test_file_stats(tmp_path: Path):
    f = tmp_path / "f.txt"
    f.write_bytes("tab\there\n".encode())
    assert file_stats(str(f)) == TextStats(lines=2, words=2, chars=9)


def test_file_stats_missing(tmp_path: Path):
    with pytest.raises(OSError):
        file_stats(str(tmp_path / "missing"))


def test_relative_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    assert relative_to_cwd(str(tmp_path / "test.txt")) == "test.txt"
    assert relative_to_cwd(str(tmp_path / "sub" / "f.txt")) == os.path.join("sub", "f.txt")
    assert relative_to_cwd(str(tmp_path)) == "."
    assert relative_to_cwd(str(tmp_path.parent / "parent.txt")) == os.path.join("..", "parent.txt")


def test_relative_to_cwd_without_cwd(monkeypatch: pytest.MonkeyPatch):
    def _no_cwd() -> str:
        raise FileNotFoundError("cwd was removed")

    monkeypatch.setattr(os, "getcwd", _no_cwd)
    result = relative_to_cwd("/some/abs/path.txt")
    monkeypatch.undo()
    assert result == "/some/abs/path.txt"
