"""
Session Package

Immutable selection state for the pattern picker and the catalog of
selectable datasets.
"""

from .datasets import DATASETS, DatasetEntry, find_dataset
from .state import SessionState, SelectionLimitError, SelectionEmptyError

__all__ = [
    "DATASETS",
    "DatasetEntry",
    "find_dataset",
    "SessionState",
    "SelectionLimitError",
    "SelectionEmptyError",
]
