"""
Module: builder.layout.layout_mode

Purpose:
    Enum selecting the worksheet shape produced by the assembler.

Key Classes:
    - LayoutMode: Two-state enum for worksheet layout

Used By:
    - builder.layout.assembler: assemble
    - builder.config: WorksheetConfig
    - session.state: SessionState
"""

from enum import Enum


class LayoutMode(Enum):
    """
    Worksheet layout.

    Attributes:
        COMBINED_SHEET: One worksheet for all selected patterns. Questions
            are distributed across patterns so each section holds the
            target count in total.
        PER_PATTERN_PAGINATED: One full worksheet per selected pattern,
            each taking that pattern's own first questions, separated by
            page breaks.

    Example:
        >>> LayoutMode("combined")
        <LayoutMode.COMBINED_SHEET: 'combined'>
    """

    COMBINED_SHEET = "combined"
    PER_PATTERN_PAGINATED = "per_pattern"
