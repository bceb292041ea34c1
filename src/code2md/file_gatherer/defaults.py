"""
Default ignore patterns for file gathering.

Patterns are matched against a single base name (see `matcher.matches`), never
against a full path. Directory patterns prune the whole subtree.
"""

from __future__ import annotations

# Common build output and dependency directories.
DEFAULT_IGNORES: tuple[str, ...] = (
    "__pycache__",
    "build*",
    "dist*",
    "*.egg-info",
    "node_modules",
)
