"""
Module: builder.layout

Purpose:
    Worksheet assembly.
    Converts distributed questions into an ordered document model.

Key Functions:
    - assemble(): Main entry point for assembly

Key Classes:
    - LayoutMode: Combined or per-pattern worksheet
    - WorksheetStyle: Worksheet text and presentation metadata
    - Block: One document element
    - DocumentModel: Whole worksheet

Used By:
    - builder.controller: Main build controller
"""

from .layout_mode import LayoutMode
from .config import WorksheetStyle, DEFAULT_SPEAKING_PROMPTS
from .models import Block, BlockKind, BlockRole, DocumentModel
from .assembler import assemble, assemble_combined, assemble_per_pattern, InvalidInputError

__all__ = [
    # Config
    "LayoutMode",
    "WorksheetStyle",
    "DEFAULT_SPEAKING_PROMPTS",
    # Models
    "Block",
    "BlockKind",
    "BlockRole",
    "DocumentModel",
    # Functions
    "assemble",
    "assemble_combined",
    "assemble_per_pattern",
    "InvalidInputError",
]
