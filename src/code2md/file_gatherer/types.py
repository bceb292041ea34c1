"""Configuration types for file gathering."""

from __future__ import annotations

from dataclasses import dataclass

from code2md.file_gatherer.defaults import DEFAULT_IGNORES


@dataclass(frozen=True)
class GatherOptions:
    """
    Options for one `gather()` call.

    `user_ignore_patterns` are checked before the built-in `DEFAULT_IGNORES`,
    which are appended only when `apply_default_ignores` is set.
    """

    user_ignore_patterns: tuple[str, ...] = ()
    include_dotfiles: bool = False
    apply_default_ignores: bool = True

    def __post_init__(self) -> None:
        # Accept any iterable of patterns but always store an immutable tuple.
        object.__setattr__(self, "user_ignore_patterns", tuple(self.user_ignore_patterns))

    @property
    def effective_patterns(self) -> tuple[str, ...]:
        """Combined ignore patterns: user patterns + defaults (if enabled)."""
        if self.apply_default_ignores:
            return self.user_ignore_patterns + DEFAULT_IGNORES
        return self.user_ignore_patterns


def is_dotfile(name: str) -> bool:
    """True for any base name starting with `.` (dotfiles and dotdirs)."""
    return name.startswith(".")
