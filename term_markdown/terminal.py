"""Turn render nodes into terminal lines."""

from __future__ import annotations

import click

from .config import RenderConfig
from .models import BoxNode, RenderNode, StyleRole, TextNode, TextRun


def _role_style(role: StyleRole, config: RenderConfig) -> dict[str, object]:
    if role is StyleRole.SECONDARY:
        return {"fg": config.secondary}
    if role is StyleRole.DIM:
        return {"fg": config.secondary, "dim": True}
    if role is StyleRole.ACCENT:
        return {"fg": config.accent}
    if role is StyleRole.BOLD:
        return {"fg": config.primary, "bold": True}
    if role is StyleRole.ITALIC:
        return {"fg": config.secondary, "italic": True}
    if role is StyleRole.CODE:
        return {"fg": config.code}
    return {"fg": config.primary}


def style_run(run: TextRun, config: RenderConfig) -> str:
    """Apply the theme color of the run's role plus its emphasis flags."""
    if not config.color:
        return run.text

    style = _role_style(run.role, config)
    for flag in ("bold", "italic", "underline", "strikethrough"):
        if getattr(run, flag):
            style[flag] = True
    return click.style(run.text, **style)


def format_line(node: TextNode, config: RenderConfig, indent: int = 0) -> str:
    if not node.runs:
        return ""
    padding = " " * (indent + node.indent)
    return padding + "".join(style_run(run, config) for run in node.runs)


def format_nodes(nodes: list[RenderNode], config: RenderConfig | None = None) -> list[str]:
    """Lay out render nodes vertically as terminal lines.

    Args:
        nodes: Output of `render_markdown`.
        config: Theme and color settings. Defaults to a new `RenderConfig`.

    Returns:
        list[str]: One string per terminal line, without line terminators.

    Examples:
        format_nodes(render_markdown("**hi**", 80), RenderConfig(color=False))  # ["hi"]
    """
    config = config or RenderConfig()
    lines: list[str] = []
    for node in nodes:
        if isinstance(node, BoxNode):
            lines.extend(format_line(child, config, node.indent) for child in node.children)
        else:
            lines.append(format_line(node, config))
    return lines
