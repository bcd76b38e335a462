"""Table layout: fit pipe-table content into a bounded width."""

from __future__ import annotations

from dataclasses import replace

from .constants import (
    BORDER_BOTTOM,
    BORDER_LINE,
    BORDER_MIDDLE,
    BORDER_TOP,
    CELL_PADDING,
    ELLIPSIS,
)
from .inline import span_content, tokenize_inline
from .models import AutoLink, InlineSpan, Link, Plain, TableLayout
from .width import display_width, markdown_width, take_columns, truncate_to_width

_BORDERS = {
    "top": BORDER_TOP,
    "middle": BORDER_MIDDLE,
    "bottom": BORDER_BOTTOM,
}


def compute_table_layout(
    headers: list[str], rows: list[list[str]], available_width: int
) -> TableLayout:
    """Compute column widths for a table rendered into `available_width` columns.

    Each column wants the widest of its cells (markup stripped) plus two
    padding columns. Together with one border character per column and one
    closing border this gives the required width. When the required width
    exceeds the available width, every column is scaled by
    ``available / required`` and floored; the small overflow that flooring can
    leave behind is accepted.

    Args:
        headers: Header cell texts.
        rows: Data rows, each already coerced to ``len(headers)`` cells.
        available_width: Columns available for the whole table.

    Returns:
        TableLayout: Final column widths and the inner (content) width of each
            column.

    Examples:
        compute_table_layout(["A", "B"], [["1", "2"]], 80).column_widths  # [3, 3]
    """
    desired = []
    for column, header in enumerate(headers):
        widest = markdown_width(header)
        for row in rows:
            if column < len(row):
                widest = max(widest, markdown_width(row[column]))
        desired.append(widest + CELL_PADDING)

    required = sum(desired) + len(desired) + 1
    shrunk = required > available_width
    if shrunk:
        final = [width * max(0, available_width) // required for width in desired]
    else:
        final = desired

    return TableLayout(
        column_widths=final,
        inner_widths=[max(0, width - CELL_PADDING) for width in final],
        required_width=required,
        shrunk=shrunk,
    )


def fit_cell(text: str, inner_width: int, ellipsis: str = ELLIPSIS) -> list[InlineSpan]:
    """Tokenize a cell and truncate it to `inner_width` columns.

    Truncation keeps the styling of the spans that survive and appends
    `ellipsis` so that content plus ellipsis never exceeds `inner_width`.

    Args:
        text: Raw cell text.
        inner_width: Columns available for the cell content.
        ellipsis: Marker appended when the content is cut.

    Returns:
        list[InlineSpan]: Spans whose visible content fits the column.

    Examples:
        fit_cell("**important**", 6)  # [Bold("imp"), Plain("...")]
    """
    spans = tokenize_inline(text)
    if markdown_width(text) <= inner_width:
        return spans

    if display_width(ellipsis) > inner_width:
        clipped = truncate_to_width(ellipsis, inner_width)
        return [Plain(clipped)] if clipped else []

    budget = inner_width - display_width(ellipsis)
    fitted: list[InlineSpan] = []
    for span in spans:
        content = span_content(span)
        width = display_width(content)
        if width <= budget:
            fitted.append(span)
            budget -= width
            continue
        head = take_columns(content, budget)
        if head:
            fitted.append(_with_content(span, head))
        break

    fitted.append(Plain(ellipsis))
    return fitted


def border_line(layout: TableLayout, position: str) -> str:
    """Build the ``top``, ``middle``, or ``bottom`` border for a layout."""
    left, junction, right = _BORDERS[position]
    segments = [BORDER_LINE * width for width in layout.column_widths]
    return left + junction.join(segments) + right


def coerce_cells(cells: list[str], count: int) -> list[str]:
    """Pad with empty cells or drop extra cells so exactly `count` remain."""
    if len(cells) < count:
        return cells + [""] * (count - len(cells))
    return cells[:count]


def _with_content(span: InlineSpan, content: str) -> InlineSpan:
    if isinstance(span, Link):
        return replace(span, label=content)
    if isinstance(span, AutoLink):
        return replace(span, url=content)
    return replace(span, text=content)
