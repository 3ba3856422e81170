"""
Module: builder.layout.models

Purpose:
    Data models for the assembled worksheet document.
    Immutable dataclasses handed to the external document serializer.

Key Classes:
    - BlockKind: Tag of a block
    - BlockRole: What a paragraph is for
    - Block: One document element with presentation metadata
    - DocumentModel: Ordered blocks of a whole worksheet

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.assembler: Creates Blocks
    - builder.output.preview: Renders DocumentModel as text
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pattern_worksheet.core.models import SectionKind

from .layout_mode import LayoutMode


class BlockKind(Enum):
    """Block element tag."""

    TITLE = "title"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    RULE = "rule"
    PAGE_BREAK = "page_break"


class BlockRole(Enum):
    """Purpose of a paragraph block."""

    SUBTITLE = "subtitle"
    NAME_DATE = "name_date"
    QUESTION = "question"
    FOOTER = "footer"


@dataclass(frozen=True)
class Block:
    """
    Document block (immutable).

    Attributes:
        kind: Block tag
        text: Text content (empty for rules and page breaks)
        bold: Bold emphasis
        italic: Italic emphasis
        underline: Underline emphasis
        size: Font size in points, None for the serializer default
        space_after: Space after the block in points
        role: Paragraph purpose, None for non-paragraphs
        section: Section the block belongs to, if any
        pattern_number: Pattern the block belongs to (per-pattern layout)

    Example:
        >>> Block.heading("Speaking I", size=14).kind
        <BlockKind.HEADING: 'heading'>
    """

    kind: BlockKind
    text: str = ""
    bold: bool = False
    italic: bool = False
    underline: bool = False
    size: Optional[int] = None
    space_after: int = 0
    role: Optional[BlockRole] = None
    section: Optional[SectionKind] = None
    pattern_number: Optional[int] = None

    @classmethod
    def title(cls, text: str, *, size: int, space_after: int = 0) -> "Block":
        return cls(BlockKind.TITLE, text, bold=True, size=size, space_after=space_after)

    @classmethod
    def heading(
        cls,
        text: str,
        *,
        size: int,
        space_after: int = 0,
        section: Optional[SectionKind] = None,
    ) -> "Block":
        return cls(
            BlockKind.HEADING, text, bold=True, size=size,
            space_after=space_after, section=section,
        )

    @classmethod
    def paragraph(
        cls,
        text: str,
        *,
        role: BlockRole,
        size: Optional[int] = None,
        bold: bool = False,
        italic: bool = False,
        space_after: int = 0,
        section: Optional[SectionKind] = None,
    ) -> "Block":
        return cls(
            BlockKind.PARAGRAPH, text, bold=bold, italic=italic, size=size,
            space_after=space_after, role=role, section=section,
        )

    @classmethod
    def rule(cls, *, space_after: int = 0, section: Optional[SectionKind] = None) -> "Block":
        """Underline-style separator reserved as handwriting space."""
        return cls(BlockKind.RULE, underline=True, space_after=space_after, section=section)

    @classmethod
    def page_break(cls) -> "Block":
        return cls(BlockKind.PAGE_BREAK)


@dataclass(frozen=True)
class DocumentModel:
    """
    Assembled worksheet (immutable).

    Attributes:
        blocks: Blocks in document order
        layout_mode: Layout the document was assembled with

    Example:
        >>> document = assemble([2, 5], patterns, LayoutMode.PER_PATTERN_PAGINATED)
        >>> document.page_count
        2
    """

    blocks: tuple[Block, ...]
    layout_mode: LayoutMode = LayoutMode.COMBINED_SHEET

    def count(self, kind: BlockKind) -> int:
        """Number of blocks of a kind."""
        return sum(1 for block in self.blocks if block.kind is kind)

    def questions(self, section: SectionKind) -> tuple[Block, ...]:
        """Question lines of a section, in document order."""
        return tuple(
            block for block in self.blocks
            if block.role is BlockRole.QUESTION and block.section is section
        )

    @property
    def pages(self) -> tuple[tuple[Block, ...], ...]:
        """Blocks split at page breaks (page breaks excluded)."""
        pages: List[tuple[Block, ...]] = []
        current: List[Block] = []
        for block in self.blocks:
            if block.kind is BlockKind.PAGE_BREAK:
                pages.append(tuple(current))
                current = []
            else:
                current.append(block)
        if current or pages:
            pages.append(tuple(current))
        return tuple(pages)

    @property
    def page_count(self) -> int:
        """Number of explicit pages (page breaks + 1)."""
        return len(self.pages)

    @property
    def is_empty(self) -> bool:
        """True if the document has no blocks."""
        return not self.blocks
