"""
TOML-based config file loading for code2md.

Searches for `.code2md.toml`, `code2md.toml`, or `pyproject.toml [tool.code2md]`
walking up from the current directory. Config values are merged with CLI flags
using three-way precedence: explicit CLI flags > config file > built-in defaults.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, TypeVar, cast

from code2md.errors import ConfigError

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]


@dataclass
class Code2mdConfig:
    """
    Parsed config from a TOML file. Fields are `None` when not set in the config,
    allowing the merge logic to distinguish "not configured" from "explicitly set
    to default value".
    """

    ignore: list[str] | None = None
    include_dotfiles: bool | None = None
    default_ignores: bool | None = None


# Config file search order (first match wins within each directory level)
_CONFIG_FILENAMES = [".code2md.toml", "code2md.toml", "pyproject.toml"]

# Mapping from TOML kebab-case keys to Python snake_case field names
_KEBAB_TO_SNAKE: dict[str, str] = {
    "include-dotfiles": "include_dotfiles",
    "default-ignores": "default_ignores",
}

_VALID_FIELDS = {f.name for f in fields(Code2mdConfig)}

# Config field name -> CLI `Options` field name, where they differ.
_CONFIG_TO_OPTION: dict[str, str] = {
    "ignore": "ignore",
    "include_dotfiles": "include_dotfiles",
    "default_ignores": "apply_default_ignores",
}


def find_config_file(start_dir: Path) -> Path | None:
    """
    Walk up from `start_dir` looking for a config file. Returns the first
    found, or `None`. Search order per directory: `.code2md.toml` >
    `code2md.toml` > `pyproject.toml` (only if it has `[tool.code2md]`).
    """
    current = start_dir.resolve()
    while True:
        for filename in _CONFIG_FILENAMES:
            candidate = current / filename
            if candidate.is_file():
                if filename == "pyproject.toml":
                    if _pyproject_has_code2md_section(candidate):
                        return candidate
                else:
                    return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def _pyproject_has_code2md_section(path: Path) -> bool:
    """Check if a pyproject.toml has a [tool.code2md] section."""
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
        return "code2md" in data.get("tool", {})
    except (tomllib.TOMLDecodeError, OSError, UnicodeDecodeError):
        return False


def load_config(config_path: Path) -> Code2mdConfig:
    """
    Load a `Code2mdConfig` from a TOML file. Supports both standalone
    `code2md.toml` / `.code2md.toml` and `pyproject.toml` (extracts
    `[tool.code2md]`). Malformed TOML gives a warning and an empty config.
    """
    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        print(f"Warning: could not parse config file {config_path}: {e}", file=sys.stderr)
        return Code2mdConfig()

    if config_path.name == "pyproject.toml":
        data = data.get("tool", {}).get("code2md", {})

    return _parse_config_data(data, config_path)


def _parse_config_data(data: dict[str, Any], source: Path | None = None) -> Code2mdConfig:
    """Parse a flat or sectioned TOML dict into Code2mdConfig."""
    # Flatten sections: any [table] merges into the top level
    flat: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            for sub_key, sub_value in cast(dict[str, Any], value).items():
                flat[sub_key] = sub_value
        else:
            flat[key] = value

    mapped: dict[str, Any] = {}
    for key, value in flat.items():
        snake_key = _KEBAB_TO_SNAKE.get(key, key.replace("-", "_"))
        if snake_key not in _VALID_FIELDS:
            where = f" in {source}" if source else ""
            print(f"Warning: unrecognized config key '{key}'{where}", file=sys.stderr)
            continue
        mapped[snake_key] = value

    _check_types(mapped)
    return Code2mdConfig(**mapped)


def _check_types(mapped: dict[str, Any]) -> None:
    ignore = mapped.get("ignore")
    if ignore is not None:
        if not isinstance(ignore, list) or not all(
            isinstance(p, str) for p in cast(list[Any], ignore)
        ):
            raise ConfigError("config key 'ignore' must be a list of strings")
    for key in ("include_dotfiles", "default_ignores"):
        value = mapped.get(key)
        if value is not None and not isinstance(value, bool):
            raise ConfigError(f"config key '{key.replace('_', '-')}' must be true or false")


_T = TypeVar("_T")


def merge_cli_with_config(
    cli_opts: _T,
    config: Code2mdConfig | None,
    explicit_flags: set[str],
) -> _T:
    """
    Merge CLI options with config file settings.

    Precedence: explicit CLI flags > config file > built-in defaults.
    `explicit_flags` holds CLI `Options` field names the user actually passed.
    """
    if config is None:
        return cli_opts

    for cfg_field in fields(Code2mdConfig):
        cfg_value = getattr(config, cfg_field.name)
        if cfg_value is None:
            continue  # Not set in config

        option_name = _CONFIG_TO_OPTION[cfg_field.name]
        if option_name in explicit_flags:
            continue

        if hasattr(cli_opts, option_name):
            setattr(cli_opts, option_name, cfg_value)

    return cli_opts
