"""Data models for term-markdown."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union


class ParserState(Enum):
    """Parser states used while scanning Markdown content.

    Attributes:
        NORMAL: Default state for regular text.
        IN_CODE_BLOCK: Inside a fenced code block.
        IN_TABLE: Collecting rows of a pipe table.
    """

    NORMAL = auto()
    IN_CODE_BLOCK = auto()
    IN_TABLE = auto()


@dataclass
class ParserContext:
    """Encapsulate parser state while walking Markdown text.

    Lives for a single parse call only.

    Attributes:
        state: Current parser state.
        fence_char: Fence character that opened a code block, if any.
        fence_length: Number of fence characters that opened the block.
        language: Language tag of the open code block, if any.
        code_lines: Lines buffered inside the open code block.
        header_cells: Header cells of the open table.
        table_rows: Data rows collected for the open table.
        previous_blank: Whether the last emitted block was a spacer (or nothing
            has been emitted yet).
    """

    state: ParserState = ParserState.NORMAL
    fence_char: str | None = None
    fence_length: int = 0
    language: str | None = None
    code_lines: list[str] = field(default_factory=list)
    header_cells: list[str] = field(default_factory=list)
    table_rows: list[list[str]] = field(default_factory=list)
    previous_blank: bool = True


# Blocks


class ListKind(Enum):
    ORDERED = "ordered"
    UNORDERED = "unordered"


@dataclass
class Paragraph:
    text: str


@dataclass
class Header:
    """ATX header; `level` is between 1 and 4."""

    level: int
    text: str


@dataclass
class ListItem:
    """Single list item.

    Attributes:
        kind: Ordered (``1.``) or unordered (``-``, ``*``, ``+``) item.
        marker: Bullet character or item number as written in the source.
        indent: Leading whitespace captured before the marker.
        text: Item text, tokenized at render time.
    """

    kind: ListKind
    marker: str
    indent: str
    text: str


@dataclass
class CodeBlock:
    lines: list[str]
    language: str | None = None


@dataclass
class Table:
    headers: list[str]
    rows: list[list[str]]


@dataclass
class HorizontalRule:
    pass


@dataclass
class Spacer:
    pass


Block = Union[Paragraph, Header, ListItem, CodeBlock, Table, HorizontalRule, Spacer]


# Inline spans


@dataclass
class Plain:
    text: str


@dataclass
class Bold:
    text: str


@dataclass
class Italic:
    text: str


@dataclass
class Strike:
    text: str


@dataclass
class Code:
    text: str


@dataclass
class Link:
    label: str
    url: str

    @property
    def text(self) -> str:
        return f"{self.label} ({self.url})"


@dataclass
class Underline:
    text: str


@dataclass
class AutoLink:
    url: str

    @property
    def text(self) -> str:
        return self.url


InlineSpan = Union[Plain, Bold, Italic, Strike, Code, Link, Underline, AutoLink]


# Layout and render output


@dataclass
class TableLayout:
    """Column geometry computed for one table.

    Attributes:
        column_widths: Final width of each column, padding included.
        inner_widths: Width available to cell content in each column.
        required_width: Width the table would need without shrinking.
        shrunk: Whether the columns were scaled down to fit.
    """

    column_widths: list[int]
    inner_widths: list[int]
    required_width: int
    shrunk: bool = False


class StyleRole(Enum):
    """Presentation role of a text run; the host maps roles to colors."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    DIM = "dim"
    ACCENT = "accent"
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"


@dataclass
class TextRun:
    text: str
    role: StyleRole = StyleRole.PRIMARY
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False


@dataclass
class TextNode:
    """Flat line of styled runs, shifted right by `indent` columns."""

    runs: list[TextRun] = field(default_factory=list)
    indent: int = 0

    @property
    def plain_text(self) -> str:
        return "".join(run.text for run in self.runs)


@dataclass
class BoxNode:
    """Vertical arrangement of lines, used for code blocks and tables."""

    children: list[TextNode] = field(default_factory=list)
    indent: int = 0


RenderNode = Union[TextNode, BoxNode]
