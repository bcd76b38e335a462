"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

# Color names accepted by `click.style`.
SUPPORTED_COLORS = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright_black",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "bright_white",
    "reset",
)


@dataclass
class RenderConfig:
    """Configuration for rendering Markdown into terminal blocks.

    Attributes:
        width: Target display width in columns. None means the terminal width
            is detected at runtime.
        rule_max_width: Upper bound for the horizontal rule length.
        code_padding: Left padding applied to code blocks.
        list_padding: Extra left padding added to list item indentation.
        ellipsis: Marker appended to truncated table cells.
        color: Whether terminal output is styled with ANSI sequences.
        primary: Color used for regular text.
        secondary: Color used for dimmed text and table borders.
        accent: Color used for top-level headers, table headers, and links.
        code: Color used for inline code and code blocks.
        max_file_size: Maximum file size in bytes that will be rendered.

    Examples:
        RenderConfig(width=100, accent="magenta")
    """

    # Layout
    width: int | None = None
    rule_max_width: int = 40
    code_padding: int = 1
    list_padding: int = 1
    ellipsis: str = "..."

    # Theme
    color: bool = True
    primary: str = "white"
    secondary: str = "bright_black"
    accent: str = "cyan"
    code: str = "yellow"

    # Limits
    max_file_size: int = 10 * 1024 * 1024


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`rule_max_width` must be a positive integer")
    """


def load_config(search_path: Path) -> RenderConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.term-markdown]`` table from `pyproject.toml` and the
    ``[term-markdown]`` or ``[tool.term-markdown]`` table from
    `.term-markdown.toml` when present. Returns default values when no
    configuration is found. TOML files that cannot be read or decoded are
    skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        RenderConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but is not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "term-markdown")]
        )
        if pyproject_config is not None:
            return normalize_config(pyproject_config)

        dotfile_config = _load_from_file(
            current / ".term-markdown.toml",
            table_paths=[("term-markdown",), ("tool", "term-markdown")],
        )
        if dotfile_config is not None:
            return normalize_config(dotfile_config)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return RenderConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> RenderConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> RenderConfig:
    table_display = ".".join(table_path)

    if raw_config is None:
        return RenderConfig()

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    if not raw_config:
        return RenderConfig()

    try:
        return RenderConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def normalize_config(config: RenderConfig) -> RenderConfig:
    """Canonicalize color names so ``"Bright-Black"`` and ``"bright_black"`` agree."""
    colors = {}
    for key in ("primary", "secondary", "accent", "code"):
        value = getattr(config, key)
        if isinstance(value, str):
            colors[key] = value.strip().lower().replace("-", "_")
    return replace(config, **colors)


def validate_config(config: RenderConfig) -> None:
    """Validate a `RenderConfig` instance.

    Args:
        config: Configuration to validate.

    Returns:
        None.

    Raises:
        ConfigError: If numeric fields are not positive integers, the ellipsis
            is not a string, or a theme color is not supported.

    Examples:
        validate_config(RenderConfig(width=120))
    """
    config = normalize_config(config)

    _ensure_integers(
        {
            "rule_max_width": config.rule_max_width,
            "code_padding": config.code_padding,
            "list_padding": config.list_padding,
            "max_file_size": config.max_file_size,
            **({"width": config.width} if config.width is not None else {}),
        }
    )

    if config.code_padding < 0:
        raise ConfigError("`code_padding` must be >= 0")
    if config.list_padding < 0:
        raise ConfigError("`list_padding` must be >= 0")

    if not isinstance(config.ellipsis, str):
        raise ConfigError("`ellipsis` must be a string")
    if not isinstance(config.color, bool):
        raise ConfigError("`color` must be a boolean")

    for key in ("primary", "secondary", "accent", "code"):
        value = getattr(config, key)
        if value not in SUPPORTED_COLORS:
            raise ConfigError(f"`{key}` must be one of: {', '.join(SUPPORTED_COLORS)}")

    _ensure_positive(
        {
            "rule_max_width": config.rule_max_width,
            "max_file_size": config.max_file_size,
            **({"width": config.width} if config.width is not None else {}),
        }
    )


def apply_overrides(config: RenderConfig, **overrides: object) -> RenderConfig:
    """Apply override values to a `RenderConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        RenderConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `RenderConfig`.

    Examples:
        updated = apply_overrides(config, width=100, color=False)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> RenderConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        RenderConfig: Validated configuration ready for rendering.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), width=100)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    config = normalize_config(config)
    validate_config(config)
    return config


def _ensure_positive(values: dict[str, int]) -> None:
    for key, value in values.items():
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
