"""
Render gathered files as fenced Markdown code blocks.

Each file becomes:

    ```<lang>:<path relative to cwd>
    <content>
    ```

Files that can't be read, or aren't UTF-8 text, are skipped with a notice.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from strif import atomic_output_file

from code2md.errors import OutputError
from code2md.file_gatherer.notices import Notice, NoticeKind, NoticeSink, stderr_sink
from code2md.languages import detect_language
from code2md.text_stats import TextStats, count_text, relative_to_cwd


def is_binary(data: bytes) -> bool:
    """Binary if not valid UTF-8 or if it contains a NUL byte."""
    if b"\0" in data:
        return True
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return True
    return False


def format_block(lang: str, rel_path: str, content: str) -> str:
    return f"```{lang}:{rel_path}\n{content}\n```\n\n"


def write_markdown(
    files: Iterable[str],
    out: TextIO,
    sink: NoticeSink = stderr_sink,
) -> TextStats:
    """
    Write each file as a fenced block to `out` and return the combined stats of
    everything written. A `Total:` summary notice is sent to `sink` at the end.
    """
    totals = TextStats()

    for file_path in files:
        rel_path = relative_to_cwd(file_path)

        try:
            data = Path(file_path).read_bytes()
        except OSError as e:
            sink(
                Notice(
                    NoticeKind.skipped_content,
                    file_path,
                    f"Warning: Error reading file '{rel_path}': {e}. Skipping.",
                )
            )
            continue

        if is_binary(data):
            sink(
                Notice(
                    NoticeKind.skipped_content,
                    file_path,
                    f"Warning: File '{rel_path}' could not be read as UTF-8 text. Skipping.",
                )
            )
            continue

        content = data.decode("utf-8")
        totals = totals + count_text(content)
        out.write(format_block(detect_language(file_path), rel_path, content))

    sink(Notice(NoticeKind.summary, "", f"Total: {totals.describe()}"))
    return totals


def render_files(
    files: Iterable[str],
    output: str = "-",
    sink: NoticeSink = stderr_sink,
) -> TextStats:
    """
    Render to stdout when `output` is `-`, otherwise write `output` atomically
    (creating parent directories as needed).
    """
    if output == "-":
        return write_markdown(files, sys.stdout, sink)

    try:
        with atomic_output_file(output, make_parents=True) as tmp_path:
            with open(tmp_path, "w", encoding="utf-8", newline="\n") as f:
                return write_markdown(files, f, sink)
    except OSError as e:
        raise OutputError(f"Could not write output file '{output}': {e}") from e
