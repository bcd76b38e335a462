"""Map parsed blocks to render nodes."""

from __future__ import annotations

from dataclasses import replace

from .config import RenderConfig
from .constants import BORDER_VERTICAL, RULE_CHAR, RULE_MARGIN
from .exceptions import InvalidWidthError
from .inline import tokenize_inline
from .layout import border_line, compute_table_layout, fit_cell
from .models import (
    AutoLink,
    Block,
    Bold,
    BoxNode,
    Code,
    CodeBlock,
    Header,
    HorizontalRule,
    InlineSpan,
    Italic,
    Link,
    ListItem,
    ListKind,
    Paragraph,
    RenderNode,
    Spacer,
    Strike,
    StyleRole,
    Table,
    TextNode,
    TextRun,
    Underline,
)
from .parser import parse_blocks
from .width import display_width

_BASE = TextRun("")
_HEADER_STYLES = {
    1: TextRun("", role=StyleRole.ACCENT, bold=True),
    2: TextRun("", role=StyleRole.ACCENT, bold=True),
    3: TextRun("", role=StyleRole.BOLD, bold=True),
    4: TextRun("", role=StyleRole.ITALIC, italic=True),
}
_TABLE_HEADER = TextRun("", role=StyleRole.ACCENT, bold=True)
_BORDER = TextRun("", role=StyleRole.SECONDARY)


def render_markdown(
    text: str, width: int, config: RenderConfig | None = None
) -> list[RenderNode]:
    """Render Markdown text into nodes sized for `width` columns.

    Pure function: the same arguments always give equal output and nothing
    is kept between calls.

    Args:
        text: Markdown source, with ``\\n`` or ``\\r\\n`` line endings.
        width: Display width in terminal columns.
        config: Layout tunables (rule length, paddings, ellipsis). Defaults
            to a new `RenderConfig` when omitted.

    Returns:
        list[RenderNode]: Nodes in display order; empty for empty text.

    Raises:
        InvalidWidthError: If `width` is not a positive integer.

    Examples:
        render_markdown("# Title", 80)
    """
    if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
        raise InvalidWidthError(width)

    config = config or RenderConfig()
    nodes: list[RenderNode] = []
    for block in parse_blocks(text):
        nodes.extend(render_block(block, width, config))
    return nodes


def render_block(block: Block, width: int, config: RenderConfig | None = None) -> list[RenderNode]:
    """Dispatch a single block to its renderer."""
    config = config or RenderConfig()

    if isinstance(block, Paragraph):
        return [TextNode(runs=spans_to_runs(tokenize_inline(block.text)))]
    if isinstance(block, Header):
        return [_render_header(block)]
    if isinstance(block, ListItem):
        return [_render_list_item(block, config)]
    if isinstance(block, CodeBlock):
        return [_render_code_block(block, config)]
    if isinstance(block, Table):
        return [_render_table(block, width, config)]
    if isinstance(block, HorizontalRule):
        length = max(0, min(config.rule_max_width, width - RULE_MARGIN))
        return [TextNode(runs=[TextRun(RULE_CHAR * length, role=StyleRole.DIM)])]
    if isinstance(block, Spacer):
        return [TextNode()]
    raise TypeError(f"Unsupported block type: {type(block).__name__}")


def spans_to_runs(
    spans: list[InlineSpan], base: TextRun = _BASE, expand_links: bool = True
) -> list[TextRun]:
    """Convert inline spans to styled runs layered over a base style.

    Args:
        spans: Spans produced by the tokenizer.
        base: Style inherited by every run; span emphasis is added on top.
        expand_links: Render links as ``label (url)``. Table cells pass False
            and show only the label, matching how their width is measured.

    Returns:
        list[TextRun]: Runs in display order.
    """
    runs: list[TextRun] = []
    for span in spans:
        if isinstance(span, Bold):
            runs.append(replace(base, text=span.text, bold=True))
        elif isinstance(span, Italic):
            runs.append(replace(base, text=span.text, italic=True))
        elif isinstance(span, Strike):
            runs.append(replace(base, text=span.text, strikethrough=True))
        elif isinstance(span, Underline):
            runs.append(replace(base, text=span.text, underline=True))
        elif isinstance(span, Code):
            runs.append(replace(base, text=span.text, role=StyleRole.CODE))
        elif isinstance(span, AutoLink):
            runs.append(replace(base, text=span.url, role=StyleRole.ACCENT))
        elif isinstance(span, Link):
            if expand_links:
                runs.append(replace(base, text=span.label))
                runs.append(replace(base, text=f" ({span.url})", role=StyleRole.ACCENT))
            else:
                runs.append(replace(base, text=span.label, role=StyleRole.ACCENT, underline=True))
        else:
            runs.append(replace(base, text=span.text))
    return runs


def _render_header(block: Header) -> TextNode:
    base = _HEADER_STYLES.get(block.level, _BASE)
    return TextNode(runs=spans_to_runs(tokenize_inline(block.text), base))


def _render_list_item(block: ListItem, config: RenderConfig) -> TextNode:
    if block.kind is ListKind.ORDERED:
        prefix = f"{block.marker}. "
    else:
        prefix = f"{block.marker} "
    runs = [TextRun(prefix)] + spans_to_runs(tokenize_inline(block.text))
    return TextNode(runs=runs, indent=len(block.indent) + config.list_padding)


def _render_code_block(block: CodeBlock, config: RenderConfig) -> BoxNode:
    children = []
    if block.language:
        children.append(TextNode(runs=[TextRun(block.language, role=StyleRole.DIM)]))
    for line in block.lines:
        children.append(TextNode(runs=[TextRun(line, role=StyleRole.CODE)]))
    return BoxNode(children=children, indent=config.code_padding)


def _render_table(block: Table, width: int, config: RenderConfig) -> BoxNode:
    layout = compute_table_layout(block.headers, block.rows, width)

    def row_node(cells: list[str], base: TextRun) -> TextNode:
        # Each cell spans exactly its column width, so rows match the borders.
        runs = []
        for column, (column_width, inner_width) in enumerate(
            zip(layout.column_widths, layout.inner_widths)
        ):
            cell = cells[column] if column < len(cells) else ""
            cell_runs = spans_to_runs(
                fit_cell(cell, inner_width, config.ellipsis), base, expand_links=False
            )
            lead = min(1, column_width)
            used = sum(display_width(run.text) for run in cell_runs)
            runs.append(replace(_BORDER, text=BORDER_VERTICAL))
            runs.append(TextRun(" " * lead))
            runs.extend(cell_runs)
            runs.append(TextRun(" " * max(0, column_width - lead - used)))
        runs.append(replace(_BORDER, text=BORDER_VERTICAL))
        return TextNode(runs=[run for run in runs if run.text])

    children = [TextNode(runs=[replace(_BORDER, text=border_line(layout, "top"))])]
    children.append(row_node(block.headers, _TABLE_HEADER))
    children.append(TextNode(runs=[replace(_BORDER, text=border_line(layout, "middle"))]))
    for row in block.rows:
        children.append(row_node(row, _BASE))
    children.append(TextNode(runs=[replace(_BORDER, text=border_line(layout, "bottom"))]))
    return BoxNode(children=children)
