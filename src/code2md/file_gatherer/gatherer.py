"""
`gather()`: main entry point for file gathering.

Turns a mix of file and directory arguments into a flat list of absolute file
paths, in input order, applying the dotfile and ignore-pattern rules.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Sequence

from code2md.errors import GatherError
from code2md.file_gatherer.matcher import matches
from code2md.file_gatherer.notices import Notice, NoticeKind, NoticeSink, stderr_sink
from code2md.file_gatherer.types import GatherOptions, is_dotfile
from code2md.file_gatherer.walker import loading_notice, walk


def gather(
    paths: Sequence[str],
    options: GatherOptions,
    sink: NoticeSink | None = None,
) -> list[str]:
    """
    Resolve input paths into a list of absolute file paths.

    Each input is handled as:
    - Existing file → included directly unless it is a dotfile (silently
      skipped when dotfiles are excluded) or its name matches an ignore pattern
    - Existing directory → walked, unless its own name is a dot name or matches
      an ignore pattern; the walk results are inserted as one contiguous block
    - Anything else (unresolvable, missing, inaccessible) → notice and skip

    Results are not de-duplicated: overlapping inputs can repeat paths.
    Raises `GatherError` only for malformed arguments, never for a bad path.
    """
    if isinstance(paths, (str, bytes)):
        raise GatherError("paths must be a sequence of path strings, not a single string")
    if not isinstance(options, GatherOptions):
        raise GatherError(f"options must be GatherOptions, got {type(options).__name__}")
    if sink is None:
        sink = stderr_sink

    patterns = options.effective_patterns
    result: list[str] = []

    for raw_path in paths:
        try:
            abs_path = os.path.abspath(raw_path)
        except (OSError, ValueError) as e:
            sink(
                Notice(
                    NoticeKind.error_resolve,
                    str(raw_path),
                    f"Warning: Error resolving path '{raw_path}': {e}. Skipping.",
                )
            )
            continue

        try:
            st = os.stat(abs_path)
        except (FileNotFoundError, NotADirectoryError, ValueError):
            sink(
                Notice(
                    NoticeKind.error_not_found,
                    raw_path,
                    f"Warning: Path '{raw_path}' not found. Skipping.",
                )
            )
            continue
        except OSError as e:
            sink(
                Notice(
                    NoticeKind.error_access,
                    raw_path,
                    f"Warning: Error accessing '{raw_path}': {e}. Skipping.",
                )
            )
            continue

        name = os.path.basename(abs_path)

        if stat.S_ISREG(st.st_mode):
            if not options.include_dotfiles and is_dotfile(name):
                continue
            if matches(name, patterns):
                sink(Notice(NoticeKind.ignored_pattern, abs_path, f"Ignored (file pattern): {abs_path}"))
                continue
            sink(loading_notice(abs_path))
            result.append(abs_path)
        elif stat.S_ISDIR(st.st_mode):
            if not options.include_dotfiles and is_dotfile(name):
                sink(Notice(NoticeKind.ignored_dotfile, raw_path, f"Ignored (dotdir): {raw_path}"))
                continue
            if matches(name, patterns):
                sink(
                    Notice(
                        NoticeKind.ignored_pattern,
                        raw_path,
                        f"Ignored (directory pattern): {raw_path}",
                    )
                )
                continue
            result.extend(walk(abs_path, options, patterns, sink))
        else:
            sink(
                Notice(
                    NoticeKind.error_access,
                    raw_path,
                    f"Warning: Path '{raw_path}' is not a regular file or directory. Skipping.",
                )
            )

    return result
