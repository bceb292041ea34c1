"""Tests for config file loading and merging."""

from __future__ import annotations

from pathlib import Path

import pytest

from code2md.cli import Options
from code2md.config import Code2mdConfig, find_config_file, load_config, merge_cli_with_config
from code2md.errors import ConfigError


def test_find_config_code2md_toml(tmp_path: Path) -> None:
    config_file = tmp_path / "code2md.toml"
    config_file.write_text('ignore = ["vendor"]\n')
    assert find_config_file(tmp_path) == config_file


def test_find_config_dot_code2md_toml_takes_precedence(tmp_path: Path) -> None:
    (tmp_path / "code2md.toml").write_text('ignore = ["a"]\n')
    dot_config = tmp_path / ".code2md.toml"
    dot_config.write_text('ignore = ["b"]\n')
    assert find_config_file(tmp_path) == dot_config


def test_find_config_pyproject_toml(tmp_path: Path) -> None:
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text('[tool.code2md]\nignore = ["tests"]\n')
    assert find_config_file(tmp_path) == config_file


def test_find_config_pyproject_without_section_skipped(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.ruff]\nline-length = 100\n")
    assert find_config_file(tmp_path) is None


def test_find_config_walks_up(tmp_path: Path) -> None:
    config_file = tmp_path / "code2md.toml"
    config_file.write_text("include-dotfiles = true\n")
    subdir = tmp_path / "sub" / "deep"
    subdir.mkdir(parents=True)
    assert find_config_file(subdir) == config_file


def test_find_config_none_when_missing(tmp_path: Path) -> None:
    assert find_config_file(tmp_path) is None


def test_load_config_code2md_toml(tmp_path: Path) -> None:
    config_file = tmp_path / "code2md.toml"
    config_file.write_text('ignore = ["vendor", "*.lock"]\ninclude-dotfiles = true\n')
    config = load_config(config_file)
    assert config.ignore == ["vendor", "*.lock"]
    assert config.include_dotfiles is True
    # Unset fields should be None (not set)
    assert config.default_ignores is None


def test_load_config_pyproject_toml(tmp_path: Path) -> None:
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text(
        '[project]\nname = "demo"\n\n[tool.code2md]\ndefault-ignores = false\n'
    )
    config = load_config(config_file)
    assert config.default_ignores is False
    assert config.ignore is None


def test_load_config_sections_are_flattened(tmp_path: Path) -> None:
    config_file = tmp_path / "code2md.toml"
    config_file.write_text('[file-selection]\nignore = ["docs"]\ndefault-ignores = false\n')
    config = load_config(config_file)
    assert config.ignore == ["docs"]
    assert config.default_ignores is False


def test_load_config_malformed_toml(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Malformed TOML should return an empty config, not crash."""
    config_file = tmp_path / "code2md.toml"
    config_file.write_text("this is not valid toml [[[")
    config = load_config(config_file)
    assert config == Code2mdConfig()
    assert "could not parse config file" in capsys.readouterr().err


def test_parse_config_warns_unknown_keys(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_file = tmp_path / "code2md.toml"
    config_file.write_text('unknown_key = true\nignore = ["x"]\n')
    config = load_config(config_file)
    assert config.ignore == ["x"]
    assert "unrecognized config key 'unknown_key'" in capsys.readouterr().err


def test_load_config_rejects_wrong_types(tmp_path: Path) -> None:
    config_file = tmp_path / "code2md.toml"
    config_file.write_text('ignore = "vendor"\n')
    with pytest.raises(ConfigError):
        load_config(config_file)

    config_file.write_text('include-dotfiles = "yes"\n')
    with pytest.raises(ConfigError):
        load_config(config_file)


def _make_options(
    files: list[str] | None = None,
    output: str = "-",
    ignore: list[str] | None = None,
    include_dotfiles: bool = False,
    apply_default_ignores: bool = True,
    list_files: bool = False,
    version: bool = False,
) -> Options:
    """Create an Options with defaults for all required fields."""
    return Options(
        files=files if files is not None else ["."],
        output=output,
        ignore=ignore if ignore is not None else [],
        include_dotfiles=include_dotfiles,
        apply_default_ignores=apply_default_ignores,
        list_files=list_files,
        version=version,
    )


def test_merge_no_config() -> None:
    opts = _make_options(ignore=["a"])
    result = merge_cli_with_config(opts, config=None, explicit_flags=set())
    assert result.ignore == ["a"]


def test_merge_config_overrides_defaults() -> None:
    opts = _make_options()
    config = Code2mdConfig(ignore=["vendor"], include_dotfiles=True, default_ignores=False)
    result = merge_cli_with_config(opts, config=config, explicit_flags=set())
    assert result.ignore == ["vendor"]
    assert result.include_dotfiles is True
    assert result.apply_default_ignores is False


def test_merge_explicit_cli_overrides_config() -> None:
    opts = _make_options(ignore=["cli"], apply_default_ignores=True)
    config = Code2mdConfig(ignore=["config"], default_ignores=False)
    result = merge_cli_with_config(
        opts, config=config, explicit_flags={"ignore", "apply_default_ignores"}
    )
    assert result.ignore == ["cli"]
    assert result.apply_default_ignores is True
