"""
Module: builder.distribution.distributor

Purpose:
    Distribute a target number of questions per section across the
    selected patterns.

Key Functions:
    - allocate_takes(): Base + remainder allocation per pattern
    - distribute(): Main entry point

Algorithm:
    For each section independently:
    1. base, remainder = divmod(target_count, len(patterns))
    2. Pattern at index idx takes base + 1 if idx < remainder, else base
    3. Take the first min(take, len(pool)) items of that pattern's pool
    4. Concatenate in pattern order and cap at target_count

    Short pools under-fill the section. The shortfall is never taken
    from neighbouring patterns.

Dependencies:
    - pattern_worksheet.core.models: PatternRecord, DistributionResult

Used By:
    - builder.controller: Main build controller
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from pattern_worksheet.core.models import (
    DistributionResult,
    PatternRecord,
    QuestionItem,
    SectionKind,
)

logger = logging.getLogger(__name__)

DEFAULT_TARGET_COUNT = 5


def allocate_takes(pattern_count: int, target_count: int) -> tuple[int, ...]:
    """
    Split target_count across pattern_count patterns.

    The first (target_count mod pattern_count) patterns get one extra
    item, so the allocation depends on pattern order.

    Args:
        pattern_count: Number of contributing patterns
        target_count: Items wanted in the section

    Returns:
        Tuple of takes, one per pattern, summing to target_count

    Example:
        >>> allocate_takes(3, 5)
        (2, 2, 1)
        >>> allocate_takes(3, 7)
        (3, 2, 2)
    """
    if target_count < 0:
        raise ValueError(f"target_count must be non-negative: {target_count}")
    if pattern_count <= 0:
        return ()

    base, remainder = divmod(target_count, pattern_count)
    return tuple(base + (1 if idx < remainder else 0) for idx in range(pattern_count))


def distribute(
    patterns: Sequence[PatternRecord],
    target_count: int = DEFAULT_TARGET_COUNT,
) -> DistributionResult:
    """
    Distribute questions from the given patterns into each section.

    Patterns are used in the order given; callers pass them sorted by
    number. Inputs are never modified.

    Args:
        patterns: Selected pattern records, sorted by number
        target_count: Questions wanted per section

    Returns:
        DistributionResult with at most target_count items per section

    Example:
        >>> result = distribute([p2, p5], target_count=5)
        >>> len(result.unscramble)  # p2 has 1 item, p5 has 2
        3
    """
    takes = allocate_takes(len(patterns), target_count)

    if not patterns:
        return DistributionResult(target_count=target_count)

    speaking1 = [item.prompt_text for item in _collect(patterns, takes, SectionKind.SPEAKING_I, target_count)]
    speaking2 = [item.prompt_text for item in _collect(patterns, takes, SectionKind.SPEAKING_II, target_count)]
    unscramble = _collect(patterns, takes, SectionKind.UNSCRAMBLE, target_count)

    result = DistributionResult(
        speaking1=tuple(speaking1),
        speaking2=tuple(speaking2),
        unscramble=tuple(unscramble),
        target_count=target_count,
    )

    logger.debug(
        f"Distributed {result.total_items} items from {len(patterns)} patterns "
        f"(takes={list(takes)}, target={target_count})"
    )
    return result


def _collect(
    patterns: Sequence[PatternRecord],
    takes: Sequence[int],
    kind: SectionKind,
    target_count: int,
) -> List[QuestionItem]:
    """Collect one section's items across patterns, capped at target_count."""
    collected: List[QuestionItem] = []

    for pattern, take in zip(patterns, takes):
        pool = pattern.pool(kind)
        taken = pool[:take]
        if len(taken) < take:
            logger.debug(
                f"Pattern {pattern.number} has {len(pool)} {kind.key} items, "
                f"{take} allocated"
            )
        collected.extend(taken)

    return collected[:target_count]
