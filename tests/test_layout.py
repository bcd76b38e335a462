from __future__ import annotations

from term_markdown.inline import span_content
from term_markdown.layout import border_line, coerce_cells, compute_table_layout, fit_cell
from term_markdown.models import Bold, Link, Plain, TableLayout
from term_markdown.width import display_width


def _visible(spans) -> str:
    return "".join(span_content(span) for span in spans)


def test_layout_uses_widest_cell_plus_padding():
    layout = compute_table_layout(["Name", "Qty"], [["apple", "3"], ["kiwi", "12345"]], 80)

    assert layout.column_widths == [7, 7]
    assert layout.inner_widths == [5, 5]
    assert layout.required_width == 17
    assert layout.shrunk is False


def test_layout_ignores_markup_and_counts_wide_glyphs():
    layout = compute_table_layout(["**Bold**", "한글"], [["`x`", "a"]], 80)

    assert layout.column_widths == [6, 6]


def test_layout_scales_columns_when_too_wide():
    headers = ["A" * 30, "B" * 10]
    layout = compute_table_layout(headers, [["1", "2"]], 20)

    # desired 32 and 12, required 32 + 12 + 3 = 47
    assert layout.required_width == 47
    assert layout.shrunk is True
    assert layout.column_widths == [32 * 20 // 47, 12 * 20 // 47]
    assert layout.inner_widths == [11, 3]


def test_layout_scaled_widths_never_exceed_proportional_target():
    headers = ["alpha", "beta", "gamma delta epsilon"]
    rows = [["x" * 50, "y", "z" * 17]]
    available = 40

    layout = compute_table_layout(headers, rows, available)

    desired = [52, 6, 21]
    required = sum(desired) + len(desired) + 1
    for final, wanted in zip(layout.column_widths, desired):
        assert final <= wanted * available / required


def test_layout_with_tiny_width_has_no_negative_inner_width():
    layout = compute_table_layout(["abc", "def"], [["1", "2"]], 1)

    assert all(width >= 0 for width in layout.column_widths)
    assert all(width >= 0 for width in layout.inner_widths)


def test_fit_cell_returns_spans_that_fit():
    assert fit_cell("**ok**", 5) == [Bold("ok")]


def test_fit_cell_truncates_with_ellipsis():
    assert fit_cell("**important**", 6) == [Bold("imp"), Plain("...")]


def test_fit_cell_truncates_across_spans():
    spans = fit_cell("ab **cdef** gh", 7)

    assert spans == [Plain("ab "), Bold("c"), Plain("...")]
    assert display_width(_visible(spans)) <= 7


def test_fit_cell_truncates_link_labels():
    assert fit_cell("[documentation](https://x.io)", 8) == [
        Link("docum", "https://x.io"),
        Plain("..."),
    ]


def test_fit_cell_keeps_wide_glyphs_whole():
    spans = fit_cell("漢字漢字", 6)

    assert spans == [Plain("漢"), Plain("...")]
    assert display_width(_visible(spans)) <= 6


def test_fit_cell_with_room_only_for_part_of_the_ellipsis():
    assert fit_cell("abcdef", 2) == [Plain("..")]
    assert fit_cell("abcdef", 0) == []


def test_fit_cell_custom_ellipsis():
    assert fit_cell("abcdef", 4, "…") == [Plain("abc"), Plain("…")]


def test_border_lines_follow_column_widths():
    layout = TableLayout(column_widths=[3, 5], inner_widths=[1, 3], required_width=11)

    assert border_line(layout, "top") == "┌───┬─────┐"
    assert border_line(layout, "middle") == "├───┼─────┤"
    assert border_line(layout, "bottom") == "└───┴─────┘"


def test_coerce_cells():
    assert coerce_cells(["a"], 3) == ["a", "", ""]
    assert coerce_cells(["a", "b", "c"], 2) == ["a", "b"]
    assert coerce_cells(["a", "b"], 2) == ["a", "b"]
