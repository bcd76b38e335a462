"""Line-oriented Markdown block parser."""

from __future__ import annotations

import re

from .constants import (
    CODE_FENCE_PATTERN,
    HEADER_PATTERN,
    HORIZONTAL_RULE_PATTERN,
    ORDERED_LIST_PATTERN,
    TABLE_ROW_PATTERN,
    TABLE_SEPARATOR_PATTERN,
    UNORDERED_LIST_PATTERN,
)
from .layout import coerce_cells
from .models import (
    Block,
    CodeBlock,
    Header,
    HorizontalRule,
    ListItem,
    ListKind,
    Paragraph,
    ParserContext,
    ParserState,
    Spacer,
    Table,
)

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(content: str) -> list[str]:
    """Split text on ``\\n`` or ``\\r\\n``.

    A single trailing line break terminates the last line instead of starting
    an empty one.

    Examples:
        split_lines("a\\r\\nb\\n")  # ["a", "b"]
        split_lines("a\\n\\n")  # ["a", ""]
    """
    if not content:
        return []
    lines = _LINE_BREAK.split(content)
    if lines[-1] == "":
        lines.pop()
    return lines


def split_cells(line: str) -> list[str] | None:
    """Return the trimmed cells of a pipe-delimited row, or None for other lines."""
    row_match = TABLE_ROW_PATTERN.match(line)
    if not row_match:
        return None
    return [cell.strip() for cell in row_match.group("cells").split("|")]


def _emit(ctx: ParserContext, blocks: list[Block], block: Block) -> None:
    """Append a block, collapsing runs of spacers into one."""
    if isinstance(block, Spacer):
        if ctx.previous_blank:
            return
        ctx.previous_blank = True
    else:
        ctx.previous_blank = False
    blocks.append(block)


def _try_open_fence(ctx: ParserContext, line: str) -> bool:
    """Detect the start of a fenced code block.

    Args:
        ctx: Parser context to update when a fence opens.
        line: Current line being scanned.

    Returns:
        bool: True when the line begins a fence and the context is updated.

    Examples:
        _try_open_fence(ParserContext(), "```python")  # True
    """
    if ctx.state is not ParserState.NORMAL:
        return False

    fence_match = CODE_FENCE_PATTERN.match(line)
    if not fence_match:
        return False

    fence_sequence = fence_match.group("fence")
    ctx.state = ParserState.IN_CODE_BLOCK
    ctx.fence_char = fence_sequence[0]
    ctx.fence_length = len(fence_sequence)
    ctx.language = fence_match.group("language") or None
    ctx.code_lines = []
    return True


def _try_close_fence(ctx: ParserContext, line: str) -> bool:
    """Attempt to close the active code block.

    A closing fence is any line the fence pattern accepts whose run uses the
    opening character and is at least as long as the opening run. A trailing
    language tag is allowed and ignored.

    Examples:
        ctx = ParserContext(state=ParserState.IN_CODE_BLOCK, fence_char="`", fence_length=3)
        _try_close_fence(ctx, "````")  # True
        _try_close_fence(ctx, "```js")  # True
    """
    if ctx.state is not ParserState.IN_CODE_BLOCK or ctx.fence_char is None:
        return False

    fence_match = CODE_FENCE_PATTERN.match(line)
    if not fence_match:
        return False

    fence_sequence = fence_match.group("fence")
    return fence_sequence[0] == ctx.fence_char and len(fence_sequence) >= ctx.fence_length


def _flush_code_block(ctx: ParserContext, blocks: list[Block]) -> None:
    _emit(ctx, blocks, CodeBlock(lines=ctx.code_lines, language=ctx.language))
    ctx.state = ParserState.NORMAL
    ctx.fence_char = None
    ctx.fence_length = 0
    ctx.language = None
    ctx.code_lines = []


def _try_open_table(ctx: ParserContext, line: str, next_line: str | None) -> bool | None:
    """Start a table when a row is followed by a separator row.

    Returns:
        bool | None: None when the line is not a pipe row at all, True when a
            table was opened, False when the row lacks a separator and should
            be treated as paragraph text.
    """
    cells = split_cells(line)
    if cells is None:
        return None

    if next_line is None or not TABLE_SEPARATOR_PATTERN.match(next_line):
        return False

    ctx.state = ParserState.IN_TABLE
    ctx.header_cells = cells
    ctx.table_rows = []
    return True


def _try_extend_table(ctx: ParserContext, line: str) -> bool:
    """Consume a separator or data row; False means the table has ended."""
    if TABLE_SEPARATOR_PATTERN.match(line):
        return True

    cells = split_cells(line)
    if cells is None:
        return False

    ctx.table_rows.append(coerce_cells(cells, len(ctx.header_cells)))
    return True


def _flush_table(ctx: ParserContext, blocks: list[Block]) -> None:
    # A header without data rows produces nothing at all.
    if ctx.header_cells and ctx.table_rows:
        _emit(ctx, blocks, Table(headers=ctx.header_cells, rows=ctx.table_rows))
    ctx.state = ParserState.NORMAL
    ctx.header_cells = []
    ctx.table_rows = []


def _classify_line(line: str) -> Block:
    """Classify a line that is neither a fence nor a table start."""
    header_match = HEADER_PATTERN.match(line)
    if header_match:
        return Header(level=len(header_match.group("hashes")), text=header_match.group("text"))

    if HORIZONTAL_RULE_PATTERN.match(line):
        return HorizontalRule()

    list_match = UNORDERED_LIST_PATTERN.match(line)
    if list_match:
        return ListItem(
            kind=ListKind.UNORDERED,
            marker=list_match.group("marker"),
            indent=list_match.group("indent"),
            text=list_match.group("text"),
        )

    list_match = ORDERED_LIST_PATTERN.match(line)
    if list_match:
        return ListItem(
            kind=ListKind.ORDERED,
            marker=list_match.group("marker"),
            indent=list_match.group("indent"),
            text=list_match.group("text"),
        )

    if not line.strip():
        return Spacer()

    return Paragraph(text=line)


def parse_blocks(content: str) -> list[Block]:
    """Parse Markdown content into a flat list of blocks.

    Walks the lines once. Code fences and pipe tables span several lines and
    are tracked through `ParserContext`; every other non-blank line becomes
    exactly one block. Runs of blank lines collapse into a single `Spacer`,
    and blank lines before the first block produce nothing. Constructs still
    open at the end of input are flushed: a code block keeps whatever was
    buffered, a table is kept only if it collected at least one data row.

    Args:
        content: The Markdown text to parse.

    Returns:
        list[Block]: Blocks in source order.

    Examples:
        parse_blocks("# Title\\n\\ntext\\n")  # [Header(1, "Title"), Spacer(), Paragraph("text")]
    """
    lines = split_lines(content)
    blocks: list[Block] = []
    ctx = ParserContext()

    index = 0
    while index < len(lines):
        line = lines[index]

        if ctx.state is ParserState.IN_CODE_BLOCK:
            if _try_close_fence(ctx, line):
                _flush_code_block(ctx, blocks)
            else:
                ctx.code_lines.append(line)
            index += 1
            continue

        if ctx.state is ParserState.IN_TABLE:
            if _try_extend_table(ctx, line):
                index += 1
                continue
            # The line that ended the table is classified again as normal text.
            _flush_table(ctx, blocks)
            continue

        if _try_open_fence(ctx, line):
            index += 1
            continue

        next_line = lines[index + 1] if index + 1 < len(lines) else None
        opened = _try_open_table(ctx, line, next_line)
        if opened:
            index += 1
            continue
        if opened is False:
            _emit(ctx, blocks, Paragraph(text=line))
            index += 1
            continue

        _emit(ctx, blocks, _classify_line(line))
        index += 1

    if ctx.state is ParserState.IN_CODE_BLOCK:
        _flush_code_block(ctx, blocks)
    elif ctx.state is ParserState.IN_TABLE:
        _flush_table(ctx, blocks)

    return blocks
