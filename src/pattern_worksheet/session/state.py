"""
Selection state for the pattern picker.

The picker's state is a single immutable value: the loaded dataset, the
current selection and the selection cap. Every change returns a new
SessionState, and the builder receives a WorksheetConfig built from it,
so nothing is shared between generation calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, Optional

from pattern_worksheet.builder.config import MAX_SELECTION, WorksheetConfig
from pattern_worksheet.builder.distribution import DEFAULT_TARGET_COUNT
from pattern_worksheet.builder.layout import LayoutMode
from pattern_worksheet.core.models import PatternRecord, sort_patterns

from .datasets import DATASETS, DatasetEntry, find_dataset

logger = logging.getLogger(__name__)


class SelectionLimitError(Exception):
    """Raised when selecting more patterns than the cap allows."""

    def __init__(self, limit: int):
        super().__init__(f"At most {limit} patterns can be selected")
        self.limit = limit


class SelectionEmptyError(Exception):
    """Raised when a worksheet is requested with nothing selected."""
    pass


@dataclass(frozen=True)
class SessionState:
    """
    Pattern picker state (immutable).

    Attributes:
        dataset_file: Dataset currently loaded, if any
        patterns: Loaded patterns, sorted by number
        selected: Selected pattern numbers
        max_selection: Most patterns selectable at once
        datasets: Datasets offered by the picker, in display order
    """

    dataset_file: Optional[str] = None
    patterns: tuple[PatternRecord, ...] = ()
    selected: FrozenSet[int] = field(default_factory=frozenset)
    max_selection: int = MAX_SELECTION
    datasets: tuple[DatasetEntry, ...] = DATASETS

    def __post_init__(self) -> None:
        if self.max_selection <= 0:
            raise ValueError(f"max_selection must be positive: {self.max_selection}")

    def load_dataset(self, dataset_file: str, patterns: Iterable[PatternRecord]) -> "SessionState":
        """Switch datasets. The selection is cleared."""
        records = tuple(sort_patterns(patterns))
        logger.info(f"Loaded {len(records)} patterns ({dataset_file})")
        return replace(self, dataset_file=dataset_file, patterns=records, selected=frozenset())

    @property
    def default_dataset(self) -> Optional[DatasetEntry]:
        """Dataset loaded when the picker starts, if the catalog has one."""
        return self.datasets[0] if self.datasets else None

    @property
    def dataset_label(self) -> Optional[str]:
        """Display label of the loaded dataset; unlisted files show their name."""
        if self.dataset_file is None:
            return None
        entry = find_dataset(self.dataset_file, self.datasets)
        return entry.label if entry else self.dataset_file

    def toggle(self, number: int) -> "SessionState":
        """
        Select or deselect a pattern.

        Raises:
            KeyError: If the number is not in the loaded dataset
            SelectionLimitError: If selecting would exceed the cap
        """
        if number not in self.pattern_numbers:
            raise KeyError(number)
        if number in self.selected:
            return replace(self, selected=self.selected - {number})
        if self.is_full:
            raise SelectionLimitError(self.max_selection)
        return replace(self, selected=self.selected | {number})

    def deselect_all(self) -> "SessionState":
        return replace(self, selected=frozenset())

    @property
    def pattern_numbers(self) -> FrozenSet[int]:
        return frozenset(record.number for record in self.patterns)

    @property
    def selected_numbers(self) -> tuple[int, ...]:
        return tuple(sorted(self.selected))

    @property
    def selected_count(self) -> int:
        return len(self.selected)

    @property
    def is_full(self) -> bool:
        return self.selected_count >= self.max_selection

    def is_selectable(self, number: int) -> bool:
        """False for unselected patterns once the cap is reached."""
        return number in self.selected or not self.is_full

    @property
    def summary(self) -> str:
        return f"Selected patterns: {self.selected_count} / max {self.max_selection}"

    def to_config(
        self,
        layout_mode: LayoutMode = LayoutMode.COMBINED_SHEET,
        target_count: int = DEFAULT_TARGET_COUNT,
    ) -> WorksheetConfig:
        """
        Build the configuration for generating a worksheet.

        Raises:
            SelectionEmptyError: If no pattern is selected
        """
        if not self.selected:
            raise SelectionEmptyError("Select at least one pattern")
        return WorksheetConfig(
            selected_numbers=self.selected_numbers,
            target_count=target_count,
            layout_mode=layout_mode,
            max_selection=self.max_selection,
            dataset_file=self.dataset_file,
        )
