from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from term_markdown.config import (
    ConfigError,
    RenderConfig,
    apply_overrides,
    build_config,
    load_config,
    normalize_config,
    validate_config,
)


def _write_pyproject(base: Path, body: str) -> Path:
    path = base / "pyproject.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def _write_dotfile(base: Path, body: str) -> Path:
    path = base / ".term-markdown.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def test_loads_config_from_pyproject(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.term-markdown]
        width = 100
        rule_max_width = 30
        code_padding = 2
        list_padding = 0
        ellipsis = "…"
        color = false
        accent = "magenta"
        max_file_size = 1024
        """,
    )

    config = load_config(tmp_path)

    assert config == RenderConfig(
        width=100,
        rule_max_width=30,
        code_padding=2,
        list_padding=0,
        ellipsis="…",
        color=False,
        accent="magenta",
        max_file_size=1024,
    )


def test_loads_config_from_dotfile(tmp_path: Path):
    _write_dotfile(
        tmp_path,
        """
        [term-markdown]
        code = "green"
        """,
    )
    nested = tmp_path / "child"
    nested.mkdir()

    config = load_config(nested)

    assert config.code == "green"


def test_load_config_walks_up_directories(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.term-markdown]
        width = 72
        """,
    )
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert load_config(nested).width == 72


def test_pyproject_without_table_falls_back_to_defaults(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.other]
        key = "value"
        """,
    )

    assert load_config(tmp_path) == RenderConfig()


def test_invalid_toml_is_skipped(tmp_path: Path):
    (tmp_path / "pyproject.toml").write_text("[tool.term-markdown\nwidth = ", encoding="utf-8")

    assert load_config(tmp_path) == RenderConfig()


def test_unknown_keys_raise(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.term-markdown]
        colour = true
        """,
    )

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_non_mapping_table_raises(tmp_path: Path):
    _write_dotfile(tmp_path, 'term-markdown = "wide"\n')

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_normalize_config_canonicalizes_colors():
    config = normalize_config(RenderConfig(secondary="Bright-Black", accent=" CYAN "))

    assert config.secondary == "bright_black"
    assert config.accent == "cyan"


@pytest.mark.parametrize(
    "overrides",
    [
        {"width": 0},
        {"width": "80"},
        {"rule_max_width": 0},
        {"code_padding": -1},
        {"list_padding": -1},
        {"max_file_size": 0},
        {"ellipsis": 3},
        {"color": "yes"},
        {"accent": "chartreuse"},
        {"rule_max_width": True},
    ],
)
def test_validate_config_rejects_invalid_values(overrides):
    with pytest.raises(ConfigError):
        validate_config(RenderConfig(**overrides))


def test_validate_config_accepts_defaults():
    validate_config(RenderConfig())
    validate_config(RenderConfig(width=1, code_padding=0))


def test_apply_overrides_ignores_none_but_keeps_false():
    config = RenderConfig()

    assert apply_overrides(config, width=None) is config
    assert apply_overrides(config, color=False).color is False


def test_build_config_applies_overrides_over_file(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.term-markdown]
        width = 100
        accent = "Blue"
        """,
    )

    config = build_config(tmp_path, width=60)

    assert config.width == 60
    assert config.accent == "blue"


def test_build_config_validates(tmp_path: Path):
    with pytest.raises(ConfigError):
        build_config(tmp_path, width=-5)
