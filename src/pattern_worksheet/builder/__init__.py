"""
Module: builder

Purpose:
    Worksheet building pipeline. Distributes questions from the selected
    patterns into fixed-size sections and assembles them into a document
    model for the external serializer.

Key Functions:
    - distribute(): Per-section question distribution
    - assemble(): Document assembly
    - build_worksheet(): Main entry point for worksheet generation

Key Classes:
    - WorksheetConfig: Configuration for building
    - WorksheetStyle: Worksheet text and presentation metadata
    - LayoutMode: Combined or per-pattern layout
    - DocumentModel: Assembled worksheet

Used By:
    - pattern_worksheet.session: Selection state
"""

from .config import WorksheetConfig, MAX_SELECTION
from .distribution import distribute, allocate_takes, DEFAULT_TARGET_COUNT
from .layout import (
    LayoutMode,
    WorksheetStyle,
    Block,
    BlockKind,
    BlockRole,
    DocumentModel,
    assemble,
    InvalidInputError,
)
from .controller import build_worksheet, suggest_filename, WorksheetResult, BuildError

__all__ = [
    # Config
    "WorksheetConfig",
    "WorksheetStyle",
    "LayoutMode",
    "MAX_SELECTION",
    "DEFAULT_TARGET_COUNT",
    # Distribution
    "distribute",
    "allocate_takes",
    # Layout
    "Block",
    "BlockKind",
    "BlockRole",
    "DocumentModel",
    "assemble",
    "InvalidInputError",
    # Controller
    "build_worksheet",
    "suggest_filename",
    "WorksheetResult",
    "BuildError",
]
