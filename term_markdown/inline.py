"""Inline span tokenizer."""

from __future__ import annotations

import logging
import re

from .constants import INLINE_PATTERN, INLINE_TRIGGER_PATTERN, WORD_CHAR_PATTERN
from .exceptions import InlineMatchError
from .models import (
    AutoLink,
    Bold,
    Code,
    InlineSpan,
    Italic,
    Link,
    Plain,
    Strike,
    Underline,
)

logger = logging.getLogger(__name__)


def tokenize_inline(text: str) -> list[InlineSpan]:
    """Split one line of Markdown text into styled spans.

    Scans left to right. At every candidate position the alternatives are
    tried in priority order: bold, italic, strikethrough, link, inline code,
    underline, bare URL. Text between matches becomes `Plain` spans, so the
    result covers the whole input without overlaps and never contains two
    adjacent `Plain` spans. Unterminated or rejected markers stay literal.

    Args:
        text: Raw text of a paragraph, header, list item, or table cell.

    Returns:
        list[InlineSpan]: Ordered spans; empty when `text` is empty.

    Examples:
        tokenize_inline("plain")  # [Plain("plain")]
        tokenize_inline("a **b**")  # [Plain("a "), Bold("b")]
    """
    if not text:
        return []

    if not INLINE_TRIGGER_PATTERN.search(text):
        return [Plain(text)]

    spans: list[InlineSpan] = []
    plain_start = 0
    position = 0

    while position < len(text):
        match = INLINE_PATTERN.search(text, position)
        if match is None:
            break

        try:
            span = _build_span(text, match)
        except InlineMatchError as error:
            logger.debug("%s; keeping it as literal text", error)
            position = match.end()
            continue

        if span is None:
            # Only the rejected opener is literal; a later marker inside the
            # candidate may still start a valid span.
            position = match.start() + 1
            continue

        if match.start() > plain_start:
            spans.append(Plain(text[plain_start : match.start()]))
        spans.append(span)
        plain_start = position = match.end()

    if plain_start < len(text):
        spans.append(Plain(text[plain_start:]))

    return spans


def span_content(span: InlineSpan) -> str:
    """Return the visible content of a span with markers removed.

    Links contribute only their label, matching how widths are estimated.
    """
    if isinstance(span, Link):
        return span.label
    return span.text


def _build_span(text: str, match: re.Match[str]) -> InlineSpan | None:
    """Turn a regex match into a span.

    Returns:
        InlineSpan | None: The span, or None when the italic context check
            rejects the candidate.

    Raises:
        InlineMatchError: If the candidate is structurally unusable.
    """
    groups = match.groupdict()

    if groups["bold"] is not None:
        return Bold(groups["bold"])

    for name in ("star_italic", "underscore_italic"):
        if groups[name] is not None:
            if _touches_word(text, match.start(), match.end()):
                return None
            return Italic(groups[name])

    if groups["strike"] is not None:
        return Strike(groups["strike"])

    if groups["url"] is not None:
        if not groups["url"].strip():
            raise InlineMatchError(match.group(0), "empty link target")
        return Link(groups["label"], groups["url"].strip())

    if groups["code"] is not None:
        return Code(groups["code"])

    if groups["underline"] is not None:
        if not groups["underline"]:
            raise InlineMatchError(match.group(0), "empty underline")
        return Underline(groups["underline"])

    if groups["autolink"] is not None:
        return AutoLink(groups["autolink"])

    raise InlineMatchError(match.group(0), "no alternative matched")


def _touches_word(text: str, start: int, end: int) -> bool:
    """Check whether a word character sits right outside `text[start:end]`."""
    before = text[start - 1] if start > 0 else ""
    after = text[end] if end < len(text) else ""
    return bool(WORD_CHAR_PATTERN.match(before) or WORD_CHAR_PATTERN.match(after))
