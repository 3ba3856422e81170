"""
Module: builder.config

Purpose:
    Configuration dataclass for one worksheet generation call. Immutable
    configuration with validation on construction.

Key Classes:
    - WorksheetConfig: Main configuration for building worksheets

Dependencies:
    - dataclasses (std)

Used By:
    - builder.controller: Main build controller
    - session.state: Builds configs from the current selection
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from pattern_worksheet.builder.distribution import DEFAULT_TARGET_COUNT
from pattern_worksheet.builder.layout import LayoutMode, WorksheetStyle

# Most patterns a user may select at once
MAX_SELECTION = 5


@dataclass(frozen=True)
class WorksheetConfig:
    """
    Configuration for building a worksheet (immutable).

    The selection cap is enforced where the selection is made, not
    here; max_selection is recorded for metadata only.

    Attributes:
        selected_numbers: Selected pattern numbers, any order
        target_count: Questions per worksheet section
        layout_mode: Combined sheet or one sheet per pattern
        max_selection: Selection cap in effect
        dataset_file: Dataset the patterns came from, if known
        style: Worksheet text and presentation metadata

    Example:
        >>> config = WorksheetConfig(selected_numbers=(5, 2))
        >>> config.sorted_numbers
        (2, 5)
    """

    # Required
    selected_numbers: tuple[int, ...]

    # Selection behavior
    target_count: int = DEFAULT_TARGET_COUNT
    layout_mode: LayoutMode = LayoutMode.COMBINED_SHEET
    max_selection: int = MAX_SELECTION

    # Source
    dataset_file: Optional[str] = None

    # Presentation
    style: WorksheetStyle = field(default_factory=WorksheetStyle)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.target_count <= 0:
            raise ValueError(f"target_count must be positive: {self.target_count}")
        if self.max_selection <= 0:
            raise ValueError(f"max_selection must be positive: {self.max_selection}")
        if len(set(self.selected_numbers)) != len(self.selected_numbers):
            raise ValueError(f"selected_numbers must be unique: {self.selected_numbers}")

    @property
    def sorted_numbers(self) -> tuple[int, ...]:
        """Selected numbers in ascending order."""
        return tuple(sorted(self.selected_numbers))
