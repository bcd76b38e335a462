from term_markdown.models import CodeBlock, Paragraph, ParserContext, ParserState, Spacer, Table
from term_markdown.parser import (
    _emit,
    _flush_code_block,
    _flush_table,
    _try_close_fence,
    _try_extend_table,
    _try_open_fence,
    _try_open_table,
)


def test_try_open_fence_sets_context_fields():
    ctx = ParserContext()

    opened = _try_open_fence(ctx, "  ```python")

    assert opened is True
    assert ctx.state is ParserState.IN_CODE_BLOCK
    assert ctx.fence_char == "`"
    assert ctx.fence_length == 3
    assert ctx.language == "python"


def test_try_open_fence_without_language():
    ctx = ParserContext()

    assert _try_open_fence(ctx, "~~~~") is True
    assert ctx.fence_char == "~"
    assert ctx.fence_length == 4
    assert ctx.language is None


def test_try_open_fence_ignored_when_already_in_code():
    ctx = ParserContext(state=ParserState.IN_CODE_BLOCK, fence_char="~", fence_length=3)

    assert _try_open_fence(ctx, "```") is False
    assert ctx.fence_char == "~"
    assert ctx.fence_length == 3


def test_try_open_fence_rejects_short_runs():
    ctx = ParserContext()

    assert _try_open_fence(ctx, "``") is False
    assert ctx.state is ParserState.NORMAL


def test_try_close_fence_requires_same_char_and_length():
    ctx = ParserContext(state=ParserState.IN_CODE_BLOCK, fence_char="`", fence_length=4)

    assert _try_close_fence(ctx, "```") is False
    assert _try_close_fence(ctx, "~~~~") is False
    assert _try_close_fence(ctx, "```js") is False
    assert _try_close_fence(ctx, "`````") is True


def test_try_close_fence_accepts_language_tag():
    ctx = ParserContext(state=ParserState.IN_CODE_BLOCK, fence_char="`", fence_length=3)

    assert _try_close_fence(ctx, "````js") is True
    assert _try_close_fence(ctx, "  ```c++  ") is True
    assert _try_close_fence(ctx, "``` two words") is False


def test_flush_code_block_resets_context():
    ctx = ParserContext(
        state=ParserState.IN_CODE_BLOCK,
        fence_char="`",
        fence_length=3,
        language="sh",
        code_lines=["ls"],
    )
    blocks = []

    _flush_code_block(ctx, blocks)

    assert blocks == [CodeBlock(lines=["ls"], language="sh")]
    assert ctx.state is ParserState.NORMAL
    assert ctx.fence_char is None
    assert ctx.fence_length == 0
    assert ctx.language is None
    assert ctx.code_lines == []


def test_try_open_table_needs_separator():
    ctx = ParserContext()

    assert _try_open_table(ctx, "plain text", "| - | - |") is None
    assert _try_open_table(ctx, "| A | B |", "not a separator") is False
    assert _try_open_table(ctx, "| A | B |", None) is False
    assert ctx.state is ParserState.NORMAL

    assert _try_open_table(ctx, "| A | B |", "|---|:--:|") is True
    assert ctx.state is ParserState.IN_TABLE
    assert ctx.header_cells == ["A", "B"]


def test_try_extend_table_skips_separators_and_coerces_rows():
    ctx = ParserContext(state=ParserState.IN_TABLE, header_cells=["A", "B"])

    assert _try_extend_table(ctx, "| --- | --- |") is True
    assert _try_extend_table(ctx, "| 1 |") is True
    assert _try_extend_table(ctx, "| 1 | 2 | 3 |") is True
    assert _try_extend_table(ctx, "after") is False

    assert ctx.table_rows == [["1", ""], ["1", "2"]]


def test_flush_table_drops_tables_without_rows():
    ctx = ParserContext(state=ParserState.IN_TABLE, header_cells=["A"])
    blocks = []

    _flush_table(ctx, blocks)

    assert blocks == []
    assert ctx.state is ParserState.NORMAL
    assert ctx.header_cells == []


def test_flush_table_emits_collected_rows():
    ctx = ParserContext(state=ParserState.IN_TABLE, header_cells=["A"], table_rows=[["1"]])
    blocks = []

    _flush_table(ctx, blocks)

    assert blocks == [Table(headers=["A"], rows=[["1"]])]


def test_emit_collapses_spacers():
    ctx = ParserContext()
    blocks = []

    _emit(ctx, blocks, Spacer())
    _emit(ctx, blocks, Paragraph("a"))
    _emit(ctx, blocks, Spacer())
    _emit(ctx, blocks, Spacer())

    assert blocks == [Paragraph("a"), Spacer()]
    assert ctx.previous_blank is True
