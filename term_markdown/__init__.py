"""
term-markdown: render Markdown into styled blocks sized to a terminal width.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    term-markdown README.md --width 100

Library Usage:
    from term_markdown import render_markdown, format_nodes

    nodes = render_markdown("# Title\\n\\nSome **bold** text.", 80)
    print("\\n".join(format_nodes(nodes)))
"""

from .config import RenderConfig
from .exceptions import InlineMatchError, InvalidWidthError, RenderError
from .inline import tokenize_inline
from .layout import compute_table_layout, fit_cell
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
    Plain,
    RenderNode,
    Spacer,
    Strike,
    StyleRole,
    Table,
    TableLayout,
    TextNode,
    TextRun,
    Underline,
)
from .parser import parse_blocks
from .renderer import render_block, render_markdown
from .terminal import format_nodes
from .width import display_width, markdown_width, strip_markup

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "render_markdown",
    "render_block",
    "parse_blocks",
    "tokenize_inline",
    "compute_table_layout",
    "fit_cell",
    "format_nodes",
    # Width
    "display_width",
    "markdown_width",
    "strip_markup",
    # Configuration
    "RenderConfig",
    # Data models
    "Block",
    "Paragraph",
    "Header",
    "ListItem",
    "ListKind",
    "CodeBlock",
    "Table",
    "HorizontalRule",
    "Spacer",
    "InlineSpan",
    "Plain",
    "Bold",
    "Italic",
    "Strike",
    "Code",
    "Link",
    "Underline",
    "AutoLink",
    "TableLayout",
    "RenderNode",
    "TextNode",
    "BoxNode",
    "TextRun",
    "StyleRole",
    # Exceptions
    "RenderError",
    "InvalidWidthError",
    "InlineMatchError",
    # Version
    "__version__",
]
