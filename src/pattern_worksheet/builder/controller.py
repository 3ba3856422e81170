"""
Module: builder.controller

Purpose:
    Orchestrate one worksheet generation call.
    Index → Select → Distribute → Assemble

Key Functions:
    - build_worksheet(): Main entry point for building a worksheet

Key Classes:
    - WorksheetResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - builder.distribution: Question distribution
    - builder.layout: Document assembly

Used By:
    - session.state: Selection UI state
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, List, Optional

from pattern_worksheet.core.models import (
    DistributionResult,
    PatternRecord,
    SectionKind,
    sort_patterns,
)
from pattern_worksheet.core.utils.serialization import index_patterns

from .config import WorksheetConfig
from .distribution import distribute
from .layout import DocumentModel, InvalidInputError, LayoutMode, assemble
from .output import render_text

logger = logging.getLogger(__name__)

FILENAME_EXTENSION = ".docx"


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class WorksheetResult:
    """
    Complete build result (immutable).

    Attributes:
        document: Assembled worksheet for the serializer
        distribution: Distributed questions (combined layout only, else None)
        patterns: Selected patterns found in the dataset, sorted by number
        missing_numbers: Selected numbers with no pattern in the dataset
        warnings: Skipped patterns and under-filled sections
        metadata: Build metadata dictionary
        filename: Suggested download filename

    Example:
        >>> result = build_worksheet(config, patterns)
        >>> result.filename
        'Worksheet_Patterns_2_5_2026-10-18.docx'
    """
    document: DocumentModel
    distribution: Optional[DistributionResult]
    patterns: tuple[PatternRecord, ...]
    missing_numbers: tuple[int, ...]
    warnings: tuple[str, ...]
    metadata: dict
    filename: str


def build_worksheet(
    config: WorksheetConfig,
    patterns: Iterable[PatternRecord],
    *,
    today: Optional[date] = None,
) -> WorksheetResult:
    """
    Build a worksheet from start to finish.

    Pipeline:
    1. Index the dataset by pattern number
    2. Resolve the selection, skipping missing numbers
    3. Distribute questions across the selected patterns
    4. Assemble the document in the configured layout

    Args:
        config: Build configuration
        patterns: Loaded dataset records, any order
        today: Date used in the filename (defaults to today)

    Returns:
        WorksheetResult with the document and metadata

    Raises:
        BuildError: If the selection cannot produce a worksheet
    """
    warnings: List[str] = []
    start_time = time.perf_counter()

    numbers = config.sorted_numbers
    logger.info(
        f"Starting build for patterns {list(numbers)} "
        f"({config.layout_mode.value}, {config.target_count} per section)"
    )

    if not numbers:
        raise BuildError("No patterns selected")

    # 1. Index dataset
    by_number = index_patterns(patterns)

    # 2. Resolve selection
    missing = tuple(n for n in numbers if n not in by_number)
    for number in missing:
        message = f"Pattern {number} not found in dataset; skipped"
        logger.warning(message)
        warnings.append(message)

    selected = tuple(sort_patterns(by_number[n] for n in numbers if n in by_number))

    # 3. Distribute (per-pattern sheets draw on their own pools)
    distribution: Optional[DistributionResult] = None
    if config.layout_mode is LayoutMode.COMBINED_SHEET:
        distribution = distribute(selected, config.target_count)

    # 4. Assemble
    try:
        document = assemble(
            numbers,
            by_number,
            config.layout_mode,
            target_count=config.target_count,
            style=config.style,
            distribution=distribution,
        )
    except InvalidInputError as e:
        raise BuildError(f"Failed to assemble worksheet: {e}") from e

    underfilled = _underfill_warnings(config, selected, distribution)
    for message in underfilled:
        logger.info(message)
    warnings.extend(underfilled)

    logger.debug(f"Worksheet preview:\n{render_text(document)}")

    elapsed = time.perf_counter() - start_time
    logger.info(
        f"Worksheet built in {elapsed:.3f}s: {len(document.blocks)} blocks, "
        f"{document.page_count} page(s)"
    )

    return WorksheetResult(
        document=document,
        distribution=distribution,
        patterns=selected,
        missing_numbers=missing,
        warnings=tuple(warnings),
        metadata=_build_metadata(config, selected, missing, distribution, document),
        filename=suggest_filename(numbers, today=today),
    )


def suggest_filename(numbers: Iterable[int], *, today: Optional[date] = None) -> str:
    """
    Suggest a download filename for a worksheet.

    Example:
        >>> suggest_filename([5, 2], today=date(2026, 10, 18))
        'Worksheet_Patterns_2_5_2026-10-18.docx'
    """
    day = today or date.today()
    joined = "_".join(str(n) for n in sorted(numbers))
    return f"Worksheet_Patterns_{joined}_{day.isoformat()}{FILENAME_EXTENSION}"


def _underfill_warnings(
    config: WorksheetConfig,
    selected: tuple[PatternRecord, ...],
    distribution: Optional[DistributionResult],
) -> List[str]:
    """Describe sections that hold fewer questions than the target."""
    warnings: List[str] = []

    if distribution is not None:
        # Speaking I is fixed text on the combined sheet
        for kind in (SectionKind.SPEAKING_II, SectionKind.UNSCRAMBLE):
            if distribution.is_underfilled(kind):
                warnings.append(
                    f"{kind.key}: {len(distribution.for_section(kind))} of "
                    f"{config.target_count} questions available"
                )
        return warnings

    for record in selected:
        for kind in SectionKind:
            available = len(record.pool(kind))
            if available < config.target_count:
                warnings.append(
                    f"Pattern {record.number} {kind.key}: {available} of "
                    f"{config.target_count} questions available; padded"
                )
    return warnings


def _build_metadata(
    config: WorksheetConfig,
    selected: tuple[PatternRecord, ...],
    missing: tuple[int, ...],
    distribution: Optional[DistributionResult],
    document: DocumentModel,
) -> dict:
    """
    Build metadata dictionary for a generated worksheet.

    distributed_counts is only present for the combined layout.

    Returns:
        Metadata dictionary ready for JSON serialization
    """
    metadata = {
        "generated_at": datetime.now().isoformat(),
        "dataset_file": config.dataset_file,
        "selected_numbers": list(config.sorted_numbers),
        "used_numbers": [record.number for record in selected],
        "missing_numbers": list(missing),
        "layout_mode": config.layout_mode.value,
        "target_count": config.target_count,
        "max_selection": config.max_selection,
        "section_counts": {
            kind.key: len(document.questions(kind)) for kind in SectionKind
        },
        "block_count": len(document.blocks),
        "page_count": document.page_count,
    }
    if distribution is not None:
        metadata["distributed_counts"] = {
            kind.key: len(distribution.for_section(kind)) for kind in SectionKind
        }
    return metadata
