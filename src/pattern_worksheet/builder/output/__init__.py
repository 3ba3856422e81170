"""
Module: builder.output

Purpose:
    Text rendering of assembled worksheets.

Key Functions:
    - render_text(): Plain-text preview of a DocumentModel
"""

from .preview import render_text

__all__ = ["render_text"]
