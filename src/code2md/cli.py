#!/usr/bin/env python3
"""
code2md: Print files and directories as Markdown code blocks

Common usage:
  code2md src/
  code2md . -i tests -i '*.lock'
  code2md README.md src/ -o context.md
  code2md --list-files .

Dotfiles, dot directories, and common build/dependency directories
(__pycache__, build*, dist*, *.egg-info, node_modules) are skipped by default.
Progress and skipped files are reported on stderr.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import sys
from dataclasses import dataclass
from pathlib import Path

from code2md.config import find_config_file, load_config, merge_cli_with_config
from code2md.errors import Code2mdError
from code2md.file_gatherer import GatherOptions, gather
from code2md.markdown_output import render_files


@dataclass
class Options:
    """Command-line options for the code2md tool."""

    files: list[str]
    output: str
    ignore: list[str]
    include_dotfiles: bool
    apply_default_ignores: bool
    list_files: bool
    version: bool


def _split_patterns(values: list[str] | None) -> list[str]:
    """Flatten repeated and comma-separated `--ignore` values."""
    patterns: list[str] = []
    for value in values or []:
        patterns.extend(p.strip() for p in value.split(",") if p.strip())
    return patterns


def _parse_args(args: list[str] | None = None) -> tuple[Options, set[str]]:
    """
    Parse command-line arguments.

    Returns a tuple of (options, explicit_flags) where `explicit_flags` tracks
    which flags the user explicitly passed (for config merge precedence).
    """
    # Use the module's docstring as the description
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        prog="code2md",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=str,
        default=[],
        help="Input files or directories (use '.' for current directory)",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        action="append",
        default=None,
        metavar="PATTERN",
        help="Name pattern to ignore (wildcards allowed; plain text matches any name "
        "containing it). Can be repeated or comma-separated",
    )
    parser.add_argument(
        "--include-dotfiles",
        action="store_true",
        dest="include_dotfiles",
        help="Include files and directories whose names start with '.'",
    )
    parser.add_argument(
        "--no-default-ignores",
        action="store_true",
        dest="no_default_ignores",
        help="Do not apply the default ignore patterns",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default="-",
        help="Output file (use '-' for stdout)",
    )
    parser.add_argument(
        "--list-files",
        action="store_true",
        dest="list_files",
        help="Print gathered file paths without rendering them",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    opts = parser.parse_args(args)

    # Track which flags the user explicitly set (for config merge precedence).
    _SENTINEL = object()
    _tracked_flags: dict[str, str] = {
        # argparse dest name -> Options field name
        "ignore": "ignore",
        "include_dotfiles": "include_dotfiles",
        "no_default_ignores": "apply_default_ignores",
    }
    # Re-parse with sentinel defaults to detect which flags were actually supplied.
    # The append action uses None as sentinel (argparse creates a list when used).
    sentinel_parser = argparse.ArgumentParser(add_help=False)
    sentinel_parser.add_argument("-i", "--ignore", action="append", default=None)
    sentinel_parser.add_argument(
        "--include-dotfiles", dest="include_dotfiles", action="store_true", default=_SENTINEL
    )
    sentinel_parser.add_argument(
        "--no-default-ignores", dest="no_default_ignores", action="store_true", default=_SENTINEL
    )
    sentinel_opts, _ = sentinel_parser.parse_known_args(args if args is not None else sys.argv[1:])

    explicit_flags: set[str] = set()
    for dest_name, field_name in _tracked_flags.items():
        val = getattr(sentinel_opts, dest_name, _SENTINEL)
        if dest_name == "ignore":
            if val is not None:
                explicit_flags.add(field_name)
        elif val is not _SENTINEL:
            explicit_flags.add(field_name)

    return (
        Options(
            files=opts.files,
            output=opts.output,
            ignore=_split_patterns(opts.ignore),
            include_dotfiles=opts.include_dotfiles,
            apply_default_ignores=not opts.no_default_ignores,
            list_files=opts.list_files,
            version=opts.version,
        ),
        explicit_flags,
    )


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the code2md CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    options, explicit_flags = _parse_args(args)

    if options.version:
        try:
            version = importlib.metadata.version("code2md")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    if not options.files:
        print(
            "Error: No input specified. Provide files or directories (use '.' for the"
            " current directory). Use --help for more options.",
            file=sys.stderr,
        )
        return 1

    try:
        # Load and merge config file settings
        try:
            config_path = find_config_file(Path.cwd())
        except OSError as e:
            print(f"Warning: could not look up config file: {e}", file=sys.stderr)
            config_path = None
        if config_path:
            config = load_config(config_path)
            merge_cli_with_config(options, config, explicit_flags)

        gather_options = GatherOptions(
            user_ignore_patterns=tuple(options.ignore),
            include_dotfiles=options.include_dotfiles,
            apply_default_ignores=options.apply_default_ignores,
        )
        files = gather(options.files, gather_options)

        if options.list_files:
            for f in files:
                print(f)
            return 0

        render_files(files, output=options.output)
    except Code2mdError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        # Catch other unexpected file or processing errors.
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
