"""Display width measurement for terminal output."""

from __future__ import annotations

from .constants import WIDE_RANGES
from .inline import span_content, tokenize_inline


def char_width(character: str) -> int:
    """Return the number of terminal columns a single character occupies.

    Args:
        character: A single code point.

    Returns:
        int: 2 for characters in the wide glyph ranges, otherwise 1.

    Examples:
        char_width("a")  # 1
        char_width("漢")  # 2
    """
    code_point = ord(character)
    if code_point < WIDE_RANGES[0][0]:
        return 1
    for start, end in WIDE_RANGES:
        if start <= code_point <= end:
            return 2
    return 1


def display_width(text: str) -> int:
    """Count the terminal columns occupied by `text`.

    Args:
        text: Text to measure, without markup.

    Returns:
        int: Sum of the column widths of each character.

    Examples:
        display_width("abc")  # 3
        display_width("한글")  # 4
    """
    return sum(char_width(character) for character in text)


def strip_markup(text: str) -> str:
    """Remove inline Markdown markers, keeping only what a reader sees.

    Uses the inline tokenizer so the markers removed here are exactly the ones
    the renderer interprets. Links are reduced to their label.

    Examples:
        strip_markup("**bold** and `code`")  # "bold and code"
        strip_markup("see [docs](https://example.com)")  # "see docs"
    """
    return "".join(span_content(span) for span in tokenize_inline(text))


def markdown_width(text: str) -> int:
    """Measure Markdown-bearing text after stripping its markup."""
    return display_width(strip_markup(text))


def truncate_to_width(text: str, max_width: int, ellipsis: str = "") -> str:
    """Cut `text` so that it fits into `max_width` columns.

    When the text is too wide, characters are dropped from the end until the
    remaining text plus `ellipsis` fits. A wide glyph is never split; the
    result may be one column narrower than `max_width` instead.

    Args:
        text: Plain text to truncate.
        max_width: Column budget, ellipsis included.
        ellipsis: Marker appended when truncation happens.

    Returns:
        str: `text` unchanged when it fits, otherwise the truncated text with
            the ellipsis appended. When even the ellipsis does not fit, the
            ellipsis itself is truncated.

    Examples:
        truncate_to_width("abcdef", 5, "...")  # "ab..."
        truncate_to_width("abc", 5, "...")  # "abc"
    """
    max_width = max(0, max_width)
    if display_width(text) <= max_width:
        return text

    ellipsis_width = display_width(ellipsis)
    if ellipsis_width > max_width:
        return truncate_to_width(ellipsis, max_width)

    return take_columns(text, max_width - ellipsis_width) + ellipsis


def take_columns(text: str, budget: int) -> str:
    """Return the longest prefix of `text` that fits into `budget` columns."""
    used = 0
    for index, character in enumerate(text):
        used += char_width(character)
        if used > budget:
            return text[:index]
    return text
