"""Constants used across the term-markdown package."""

from __future__ import annotations

import re

from .config import RenderConfig

DEFAULT_CONFIG = RenderConfig()
DEFAULT_WIDTH = 80
DEFAULT_MAX_FILE_SIZE = DEFAULT_CONFIG.max_file_size
MARKDOWN_EXTENSIONS = (".md", ".markdown", ".mdown", ".mkd", ".mkdn", ".txt")

# Block patterns
CODE_FENCE_PATTERN = re.compile(r"^ *(?P<fence>`{3,}|~{3,}) *(?P<language>[\w+#.-]*) *$")
HEADER_PATTERN = re.compile(r"^ *(?P<hashes>#{1,4}) +(?P<text>.*)$")
HORIZONTAL_RULE_PATTERN = re.compile(r"^ *(?:[-*_] *){3,}$")
UNORDERED_LIST_PATTERN = re.compile(r"^(?P<indent>[ \t]*)(?P<marker>[-*+]) +(?P<text>.*)$")
ORDERED_LIST_PATTERN = re.compile(r"^(?P<indent>[ \t]*)(?P<marker>\d+)\. +(?P<text>.*)$")
TABLE_ROW_PATTERN = re.compile(r"^\s*\|(?P<cells>.+)\|\s*$")
TABLE_SEPARATOR_PATTERN = re.compile(r"^\s*\|?\s*:?-+:?\s*(?:\|\s*:?-+:?\s*)+\|?\s*$")

# Inline patterns, alternatives listed in priority order
INLINE_TRIGGER_PATTERN = re.compile(r"[*_~`<\[]|http")
INLINE_PATTERN = re.compile(
    r"\*\*(?P<bold>.+?)\*\*"
    r"|\*(?P<star_italic>.+?)\*"
    r"|_(?P<underscore_italic>.+?)_"
    r"|~~(?P<strike>.+?)~~"
    r"|\[(?P<label>[^\]]*)\]\((?P<url>[^)]*)\)"
    r"|(?<!`)(?P<ticks>`+)(?!`)(?P<code>.+?)(?<!`)(?P=ticks)(?!`)"
    r"|<u>(?P<underline>.*?)</u>"
    r"|(?P<autolink>https?://\S+)"
)
WORD_CHAR_PATTERN = re.compile(r"\w")

# Wide glyph ranges (inclusive); everything else is one column wide.
WIDE_RANGES = (
    (0x1100, 0x115F),  # Hangul Jamo
    (0x2329, 0x232A),  # angle brackets
    (0x2E80, 0x303E),  # CJK radicals, symbols and punctuation
    (0x3040, 0xA4CF),  # kana, CJK unified ideographs, Yi
    (0xAC00, 0xD7A3),  # Hangul syllables
    (0xF900, 0xFAFF),  # CJK compatibility ideographs
    (0xFE10, 0xFE1F),  # vertical forms
    (0xFE30, 0xFE6F),  # CJK compatibility forms, small forms
    (0xFF00, 0xFF60),  # fullwidth forms
    (0xFFE0, 0xFFE6),  # fullwidth signs
)

# Table borders
BORDER_TOP = ("┌", "┬", "┐")
BORDER_MIDDLE = ("├", "┼", "┤")
BORDER_BOTTOM = ("└", "┴", "┘")
BORDER_LINE = "─"
BORDER_VERTICAL = "│"
CELL_PADDING = 2

# Rendering defaults
RULE_CHAR = "─"
RULE_MARGIN = 4
ELLIPSIS = DEFAULT_CONFIG.ellipsis
