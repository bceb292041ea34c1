"""Ignore-pattern matching against a single base name."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

import pathspec

# Characters that make a pattern a glob rather than a literal/substring pattern.
_GLOB_CHARS = frozenset("*?[]")

# Leading characters that gitignore syntax treats as comment or negation.
_GITIGNORE_PREFIXES = ("#", "!")


def is_glob(pattern: str) -> bool:
    return any(c in _GLOB_CHARS for c in pattern)


@lru_cache(maxsize=256)
def _compile_glob(pattern: str) -> pathspec.PathSpec | None:
    """
    Compile one glob pattern, or return `None` if the pattern can never match
    a base name (an invalid glob, or one starting with `/`).

    Gitignore syntax is escaped where it differs from a plain glob: a leading
    `#` or `!` and trailing spaces stay literal.
    """
    if pattern.startswith("/"):
        # A gitignore root anchor; base names never contain a separator.
        return None
    if pattern.startswith(_GITIGNORE_PREFIXES):
        pattern = "\\" + pattern
    if pattern.endswith(" ") and not pattern.endswith("\\ "):
        stripped = pattern.rstrip(" ")
        pattern = stripped + "\\ " * (len(pattern) - len(stripped))
    try:
        return pathspec.PathSpec.from_lines("gitignore", [pattern])
    except ValueError:
        return None


def matches(name: str, patterns: Sequence[str]) -> bool:
    """
    True if `name` matches any of `patterns`.

    Glob patterns (containing `*`, `?`, `[` or `]`) are wildmatched against the
    whole name, with `**` support. Any other pattern matches if it equals the
    name or is a substring of it, so `temp` matches `template.txt`.
    """
    for pattern in patterns:
        if is_glob(pattern):
            spec = _compile_glob(pattern)
            if spec is not None and spec.match_file(name):
                return True
        elif pattern == name or pattern in name:
            return True
    return False
