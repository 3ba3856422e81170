"""
Module: builder.output.preview

Purpose:
    Render a DocumentModel as plain text for logs and quick checks.
    Binary document output is left to the external serializer.

Key Functions:
    - render_text(): Main rendering function
"""

from __future__ import annotations

from typing import List

from pattern_worksheet.builder.layout.models import BlockKind, DocumentModel

RULE_WIDTH = 60
PAGE_BREAK_MARKER = "\f"


def render_text(document: DocumentModel) -> str:
    """
    Render a document as plain text, one line per block.

    Headings are underlined with dashes, rules become a line of
    underscores and page breaks become a form feed line.

    Example:
        >>> print(render_text(document))
        Pattern Practice Worksheet
        Pattern Level A - Patterns: 2, 5
        ...
    """
    lines: List[str] = []
    for block in document.blocks:
        if block.kind is BlockKind.PAGE_BREAK:
            lines.append(PAGE_BREAK_MARKER)
        elif block.kind is BlockKind.RULE:
            lines.append("_" * RULE_WIDTH)
        elif block.kind is BlockKind.HEADING:
            lines.append(block.text)
            lines.append("-" * len(block.text))
        else:
            lines.append(block.text)
    return "\n".join(lines)
