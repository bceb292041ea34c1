"""
Depth-first directory walk that prunes dot directories and ignored directories
before reading them, so large dependency or VCS trees are never enumerated.
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Sequence

from code2md.file_gatherer.matcher import matches
from code2md.file_gatherer.notices import Notice, NoticeKind, NoticeSink, stderr_sink
from code2md.file_gatherer.types import GatherOptions, is_dotfile
from code2md.text_stats import file_stats, relative_to_cwd


def loading_notice(path: str) -> Notice:
    """Notice for a file being added, with its stats when it can be read."""
    rel = relative_to_cwd(path)
    try:
        stats = file_stats(path)
    except OSError:
        return Notice(NoticeKind.loading, path, f"Loading {rel}")
    return Notice(NoticeKind.loading, path, f"Loading {rel} ({stats.describe()})")


def _scan_sorted(directory: str, sink: NoticeSink) -> Iterator[os.DirEntry[str]] | None:
    """
    Entries of `directory` in name order, or `None` (with a notice) if the
    directory can't be listed.
    """
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        sink(
            Notice(
                NoticeKind.error_access,
                directory,
                f"Warning: Error exploring directory '{directory}': {e}",
            )
        )
        return None
    return iter(entries)


def walk(
    root: str,
    options: GatherOptions,
    patterns: Sequence[str],
    sink: NoticeSink = stderr_sink,
) -> list[str]:
    """
    Collect files under the absolute directory `root`, pre-order.

    The root itself is not checked against the rules; `gather()` does that.
    Symlinked directories are not followed. A file that can't be inspected, or a
    directory that can't be listed, is reported to `sink` and skipped.
    """
    result: list[str] = []

    top = _scan_sorted(root, sink)
    if top is None:
        return result
    stack: list[Iterator[os.DirEntry[str]]] = [top]

    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue

        name = entry.name
        if not options.include_dotfiles and is_dotfile(name):
            continue

        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            is_file = not is_dir and entry.is_file()
        except OSError as e:
            sink(
                Notice(
                    NoticeKind.error_access,
                    entry.path,
                    f"Warning: Error accessing '{entry.path}': {e}. Skipping.",
                )
            )
            continue

        if is_dir:
            if matches(name, patterns):
                sink(
                    Notice(NoticeKind.ignored_pattern, entry.path, f"Ignored (directory): {entry.path}")
                )
                continue
            children = _scan_sorted(entry.path, sink)
            if children is not None:
                stack.append(children)
        elif is_file:
            if matches(name, patterns):
                sink(Notice(NoticeKind.ignored_pattern, entry.path, f"Ignored (file): {entry.path}"))
                continue
            sink(loading_notice(entry.path))
            result.append(entry.path)

    return result
