"""
Module: builder.layout.assembler

Purpose:
    Assemble the worksheet DocumentModel from the selected patterns.

Key Functions:
    - assemble(): Main entry point for assembly
    - assemble_combined(): One sheet for all patterns
    - assemble_per_pattern(): One sheet per pattern, separated by page breaks

Block order of every sheet:
    Title -> subtitle -> name/date -> Speaking I -> Speaking II
    -> Unscramble -> grade/remark

Dependencies:
    - builder.distribution: distribute
    - builder.layout.models: Block, DocumentModel
    - builder.layout.config: WorksheetStyle

Used By:
    - builder.controller: Main build controller
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Mapping, Optional, Sequence

from pattern_worksheet.core.models import (
    DistributionResult,
    PatternRecord,
    QuestionItem,
    SectionKind,
)
from pattern_worksheet.builder.distribution import DEFAULT_TARGET_COUNT, distribute

from .config import WorksheetStyle
from .formatting import numbered_line, unscramble_line
from .layout_mode import LayoutMode
from .models import Block, BlockRole, DocumentModel

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Selection cannot produce a worksheet."""
    pass


def assemble(
    selected_numbers: Iterable[int],
    patterns_by_number: Mapping[int, PatternRecord],
    mode: LayoutMode = LayoutMode.COMBINED_SHEET,
    *,
    target_count: int = DEFAULT_TARGET_COUNT,
    style: Optional[WorksheetStyle] = None,
    distribution: Optional[DistributionResult] = None,
) -> DocumentModel:
    """
    Assemble a worksheet for the selected patterns.

    Selected numbers are deduplicated and sorted before use. Numbers
    without a record are skipped.

    Args:
        selected_numbers: Selected pattern numbers, any order
        patterns_by_number: Lookup from number to record
        mode: Worksheet layout
        target_count: Questions per section
        style: Worksheet text and presentation metadata
        distribution: Precomputed distribution for target_count (combined layout only)

    Returns:
        DocumentModel ready for the serializer

    Raises:
        InvalidInputError: If nothing is selected, no selected pattern
            exists, or distribution disagrees with target_count
    """
    numbers = sorted(set(selected_numbers))
    if not numbers:
        raise InvalidInputError("No patterns selected")

    style = style or WorksheetStyle()

    if mode is LayoutMode.PER_PATTERN_PAGINATED:
        return assemble_per_pattern(numbers, patterns_by_number, target_count=target_count, style=style)
    return assemble_combined(
        numbers,
        patterns_by_number,
        target_count=target_count,
        style=style,
        distribution=distribution,
    )


def assemble_combined(
    numbers: Sequence[int],
    patterns_by_number: Mapping[int, PatternRecord],
    *,
    target_count: int,
    style: WorksheetStyle,
    distribution: Optional[DistributionResult] = None,
) -> DocumentModel:
    """
    Assemble one worksheet combining all selected patterns.

    Speaking I shows the fixed prompts. Speaking II and Unscramble show
    the distributed questions; under-filled sections show fewer lines.

    Raises:
        InvalidInputError: If no selected pattern exists, or the given
            distribution was made for another target_count
    """
    records = [patterns_by_number[n] for n in numbers if n in patterns_by_number]
    if not records:
        raise InvalidInputError(f"None of the selected patterns exist: {list(numbers)}")

    if distribution is None:
        distribution = distribute(records, target_count)
    elif distribution.target_count != target_count:
        raise InvalidInputError(
            f"Distribution target_count {distribution.target_count} "
            f"does not match {target_count}"
        )

    blocks: List[Block] = []
    blocks.extend(_header(numbers, style))
    blocks.extend(_speaking_section(
        SectionKind.SPEAKING_I,
        [style.speaking_prompt(slot) for slot in range(len(style.speaking_prompts))],
        style,
    ))
    blocks.extend(_speaking_section(SectionKind.SPEAKING_II, distribution.speaking2, style))
    blocks.extend(_unscramble_section(distribution.unscramble, style))
    blocks.extend(_footer(style))

    logger.debug(f"Assembled combined sheet for patterns {numbers}: {len(blocks)} blocks")
    return DocumentModel(blocks=tuple(blocks), layout_mode=LayoutMode.COMBINED_SHEET)


def assemble_per_pattern(
    numbers: Sequence[int],
    patterns_by_number: Mapping[int, PatternRecord],
    *,
    target_count: int,
    style: WorksheetStyle,
) -> DocumentModel:
    """
    Assemble one full worksheet per selected pattern.

    Each sheet takes the pattern's own first target_count questions per
    section and pads short sections. A page break separates consecutive
    sheets.
    """
    records = []
    for number in numbers:
        record = patterns_by_number.get(number)
        if record is None:
            logger.debug(f"Skipping pattern {number}: not in dataset")
            continue
        records.append(record)

    if not records:
        raise InvalidInputError(f"None of the selected patterns exist: {list(numbers)}")

    blocks: List[Block] = []
    for idx, record in enumerate(records):
        if idx > 0:
            blocks.append(Block.page_break())
        blocks.extend(_pattern_sheet(record, target_count, style))

    logger.debug(f"Assembled {len(records)} pattern sheets: {len(blocks)} blocks")
    return DocumentModel(blocks=tuple(blocks), layout_mode=LayoutMode.PER_PATTERN_PAGINATED)


def _pattern_sheet(record: PatternRecord, target_count: int, style: WorksheetStyle) -> List[Block]:
    """Blocks for a single pattern's sheet, padded to target_count."""
    placeholder = style.placeholder(record.number)

    speaking1 = [item.prompt_text for item in record.pool(SectionKind.SPEAKING_I)[:target_count]]
    speaking1 += [style.speaking_prompt(slot) for slot in range(len(speaking1), target_count)]

    speaking2 = [item.prompt_text for item in record.pool(SectionKind.SPEAKING_II)[:target_count]]
    speaking2 += [placeholder] * (target_count - len(speaking2))

    unscramble = list(record.pool(SectionKind.UNSCRAMBLE)[:target_count])
    unscramble += [QuestionItem(prompt_text=placeholder)] * (target_count - len(unscramble))

    blocks: List[Block] = []
    blocks.extend(_header([record.number], style, name=record.name))
    blocks.extend(_speaking_section(SectionKind.SPEAKING_I, speaking1, style))
    blocks.extend(_speaking_section(SectionKind.SPEAKING_II, speaking2, style))
    blocks.extend(_unscramble_section(unscramble, style))
    blocks.extend(_footer(style))

    return [replace(block, pattern_number=record.number) for block in blocks]


def _header(numbers: Sequence[int], style: WorksheetStyle, name: str = "") -> List[Block]:
    subtitle = style.subtitle(numbers)
    if name:
        subtitle = f"{subtitle} - {name}"
    return [
        Block.title(style.title, size=style.title_size, space_after=style.title_spacing),
        Block.paragraph(
            subtitle,
            role=BlockRole.SUBTITLE,
            size=style.subtitle_size,
            italic=True,
            space_after=style.title_spacing,
        ),
        Block.paragraph(
            style.name_date_text,
            role=BlockRole.NAME_DATE,
            size=style.body_size,
            space_after=style.section_spacing,
        ),
    ]


def _speaking_section(kind: SectionKind, prompts: Sequence[str], style: WorksheetStyle) -> List[Block]:
    blocks = [_section_heading(kind, style)]
    for number, prompt in enumerate(prompts, start=1):
        blocks.append(Block.paragraph(
            numbered_line(number, prompt),
            role=BlockRole.QUESTION,
            size=style.body_size,
            space_after=style.line_spacing,
            section=kind,
        ))
    return _end_section(blocks, style)


def _unscramble_section(items: Sequence[QuestionItem], style: WorksheetStyle) -> List[Block]:
    kind = SectionKind.UNSCRAMBLE
    blocks = [_section_heading(kind, style)]
    for number, item in enumerate(items, start=1):
        blocks.append(Block.paragraph(
            unscramble_line(number, item),
            role=BlockRole.QUESTION,
            size=style.body_size,
            space_after=style.line_spacing,
            section=kind,
        ))
        blocks.append(Block.rule(space_after=style.rule_spacing, section=kind))
    return _end_section(blocks, style)


def _section_heading(kind: SectionKind, style: WorksheetStyle) -> Block:
    return Block.heading(
        kind.heading,
        size=style.heading_size,
        space_after=style.heading_spacing,
        section=kind,
    )


def _end_section(blocks: List[Block], style: WorksheetStyle) -> List[Block]:
    """Widen the gap after a section's last block."""
    blocks[-1] = replace(blocks[-1], space_after=max(blocks[-1].space_after, style.section_spacing))
    return blocks


def _footer(style: WorksheetStyle) -> List[Block]:
    return [
        Block.paragraph(
            style.grade_text,
            role=BlockRole.FOOTER,
            size=style.body_size,
            bold=True,
            space_after=style.line_spacing,
        ),
        Block.paragraph(
            style.remark_text,
            role=BlockRole.FOOTER,
            size=style.body_size,
            bold=True,
        ),
    ]
