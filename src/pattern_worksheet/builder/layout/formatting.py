"""
Module: builder.layout.formatting

Purpose:
    Text formatting for worksheet question lines.

Key Functions:
    - numbered_line(): "<n>. <text>"
    - unscramble_line(): "<n>. <prompt> (<hint>)"
"""

from __future__ import annotations

from pattern_worksheet.core.models import QuestionItem


def numbered_line(number: int, text: str) -> str:
    """
    Format a numbered question line.

    Example:
        >>> numbered_line(3, "What do you want?")
        '3. What do you want?'
    """
    return f"{number}. {text}"


def unscramble_line(number: int, item: QuestionItem) -> str:
    """
    Format an Unscramble line. The hint is appended only when present.

    Example:
        >>> unscramble_line(1, QuestionItem("그는 간다", "he/goes"))
        '1. 그는 간다 (he/goes)'
        >>> unscramble_line(2, QuestionItem("그는 간다"))
        '2. 그는 간다'
    """
    line = numbered_line(number, item.prompt_text)
    if item.has_hint:
        line = f"{line} ({item.scrambled_hint})"
    return line
