"""
Progress and skip notices emitted during gathering and rendering.

Notices are informational only: nothing in this package raises for a single
bad path. Callers choose where notices go by passing a sink; the default
prints them to stderr.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class NoticeKind(str, Enum):
    loading = "loading"
    ignored_dotfile = "ignored — dotfile"
    ignored_pattern = "ignored — pattern"
    error_resolve = "error — resolve"
    error_not_found = "error — not found"
    error_access = "error — access"
    skipped_content = "skipped — content"
    summary = "summary"


@dataclass(frozen=True)
class Notice:
    kind: NoticeKind
    path: str
    message: str

    def __str__(self) -> str:
        return self.message


NoticeSink = Callable[[Notice], None]


def stderr_sink(notice: Notice) -> None:
    print(notice, file=sys.stderr)


def null_sink(notice: Notice) -> None:  # pyright: ignore[reportUnusedParameter]
    pass


class NoticeCollector:
    """A sink that keeps every notice, mostly useful in tests."""

    def __init__(self) -> None:
        self.notices: list[Notice] = []

    def __call__(self, notice: Notice) -> None:
        self.notices.append(notice)

    def of_kind(self, kind: NoticeKind) -> list[Notice]:
        return [n for n in self.notices if n.kind == kind]
