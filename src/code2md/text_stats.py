"""Line, word and character counts, plus cwd-relative display paths."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class TextStats:
    lines: int = 0
    words: int = 0
    chars: int = 0

    def __add__(self, other: TextStats) -> TextStats:
        return TextStats(
            lines=self.lines + other.lines,
            words=self.words + other.words,
            chars=self.chars + other.chars,
        )

    def describe(self) -> str:
        return f"{self.lines} lines, {self.words} words, {self.chars} characters"


def count_text(text: str) -> TextStats:
    """
    Count lines (newline-separated segments, so a trailing newline adds one),
    whitespace-separated words, and characters (code points).
    """
    return TextStats(lines=len(text.split("\n")), words=len(text.split()), chars=len(text))


def file_stats(path: str) -> TextStats:
    """Read a file and count it. Raises `OSError` if it can't be read."""
    with open(path, "rb") as f:
        data = f.read()
    return count_text(data.decode("utf-8", errors="replace"))


def relative_to_cwd(path: str) -> str:
    """
    Path relative to the current directory, or `path` unchanged if the cwd is
    gone or no relative form exists (e.g. a different drive on Windows).
    """
    try:
        return os.path.relpath(path, os.getcwd())
    except (OSError, ValueError):
        return path
