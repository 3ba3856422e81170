"""
Module: session.datasets

Purpose:
    Catalog of selectable pattern datasets with their display labels.
    The picker lists these in order and loads the first one on start.

Key Classes:
    - DatasetEntry: One dataset file and its label

Key Functions:
    - find_dataset(): Look up a catalog entry by file name

Used By:
    - session.state: SessionState
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class DatasetEntry:
    """
    A selectable dataset (immutable).

    Attributes:
        file: Dataset file name, e.g. "patterns_book1.json"
        label: Display label shown in the dataset picker
    """
    file: str
    label: str

    def __post_init__(self) -> None:
        if not self.file:
            raise ValueError("file must not be empty")
        if not self.label:
            raise ValueError(f"label must not be empty for {self.file}")


DATASETS: tuple[DatasetEntry, ...] = (
    DatasetEntry("patterns_book1.json", "Book 1 - 기본 패턴"),
    DatasetEntry("patterns_book2.json", "Book 2 - 감정 표현"),
)


def find_dataset(
    file: str,
    catalog: Sequence[DatasetEntry] = DATASETS,
) -> Optional[DatasetEntry]:
    """Return the catalog entry for file, or None if it is not listed."""
    for entry in catalog:
        if entry.file == file:
            return entry
    return None
