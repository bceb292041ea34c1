"""
File gathering with dotfile handling and ignore patterns.

Usage::

    from code2md.file_gatherer import GatherOptions, gather

    options = GatherOptions(user_ignore_patterns=("*.lock", "vendor"))
    files = gather(["src", "README.md"], options)

Ignore patterns are matched against base names only. Globs are wildmatched;
anything else matches as a substring. Directories that match are pruned
without being read.
"""

from code2md.file_gatherer.defaults import DEFAULT_IGNORES
from code2md.file_gatherer.gatherer import gather
from code2md.file_gatherer.matcher import matches
from code2md.file_gatherer.notices import (
    Notice,
    NoticeCollector,
    NoticeKind,
    NoticeSink,
    null_sink,
    stderr_sink,
)
from code2md.file_gatherer.types import GatherOptions
from code2md.file_gatherer.walker import walk

__all__ = [
    "DEFAULT_IGNORES",
    "GatherOptions",
    "Notice",
    "NoticeCollector",
    "NoticeKind",
    "NoticeSink",
    "gather",
    "matches",
    "null_sink",
    "stderr_sink",
    "walk",
]
