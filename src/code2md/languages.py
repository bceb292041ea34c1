"""Fence language tags inferred from file names and extensions."""

from __future__ import annotations

import os

# Keyed by lower-cased extension, including the leading dot.
_EXTENSION_LANGUAGES: dict[str, str] = {
    ".py": "python",
    ".pyw": "python",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".html": "html",
    ".htm": "html",
    ".css": "css",
    ".md": "markdown",
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".toml": "toml",
    ".sh": "bash",
    ".bash": "bash",
    ".zsh": "zsh",
    ".java": "java",
    ".c": "c",
    ".h": "c",
    ".cpp": "cpp",
    ".hpp": "cpp",
    ".cc": "cpp",
    ".hh": "cpp",
    ".cs": "csharp",
    ".go": "go",
    ".rs": "rust",
    ".php": "php",
    ".rb": "ruby",
    ".swift": "swift",
    ".kt": "kotlin",
    ".scala": "scala",
    ".r": "r",
    ".lock": "toml",
    ".sql": "sql",
    ".xml": "xml",
    ".dockerfile": "dockerfile",
}

# Exact base names, checked before extensions.
_FILENAME_LANGUAGES: dict[str, str] = {
    "Dockerfile": "dockerfile",
    "dockerfile": "dockerfile",
    ".gitignore": "gitignore",
    "Makefile": "makefile",
    "makefile": "makefile",
}


def _extension(name: str) -> str:
    # Everything from the last dot, so `.dockerfile` counts as an extension.
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def detect_language(path: str) -> str:
    """Language tag for a code fence, or `""` if unknown."""
    name = os.path.basename(path)
    if name in _FILENAME_LANGUAGES:
        return _FILENAME_LANGUAGES[name]
    return _EXTENSION_LANGUAGES.get(_extension(name).lower(), "")
