from __future__ import annotations

import os

import pytest
from term_markdown.inline import span_content, tokenize_inline
from term_markdown.renderer import render_markdown
from term_markdown.width import display_width

atheris = pytest.importorskip("atheris")


def test_tokenize_inline_with_fuzzed_input():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    exercised = 0

    for _ in range(128):
        if provider.remaining_bytes() == 0:
            break
        text = provider.ConsumeUnicodeNoSurrogates(64)
        spans = tokenize_inline(text)
        assert display_width("".join(span_content(span) for span in spans)) <= 2 * len(text)
        exercised += 1

    assert exercised


def test_render_markdown_with_fuzzed_documents():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    lines: list[str] = []

    while provider.remaining_bytes() > 0 and len(lines) < 64:
        prefix = provider.PickValueInList(["", "# ", "- ", "1. ", "| ", "```", "---", "> "])
        lines.append(prefix + provider.ConsumeUnicodeNoSurrogates(32))

    width = 1 + len(lines) % 120
    nodes = render_markdown("\n".join(lines), width)
    assert nodes == render_markdown("\n".join(lines), width)
