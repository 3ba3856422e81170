"""
Module: distribution

Purpose:
    Provides the DistributionResult dataclass - the per-section ordered
    question lists produced by the distributor and consumed by the
    assembler.

Dependencies:
    - dataclasses (std)
    - .questions.QuestionItem
    - .sections.SectionKind

Used By:
    - builder.distribution.distributor
    - builder.layout.assembler
    - builder.controller
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .questions import QuestionItem
from .sections import SectionKind


@dataclass(frozen=True)
class DistributionResult:
    """
    Distributed questions for each worksheet section (immutable).

    Attributes:
        speaking1: Speaking I prompts, in pattern then pool order
        speaking2: Speaking II prompts, in pattern then pool order
        unscramble: Unscramble items with their scrambled hints
        target_count: Requested questions per section

    Invariants:
        - every sequence has length <= target_count
    """

    speaking1: tuple[str, ...] = ()
    speaking2: tuple[str, ...] = ()
    unscramble: tuple[QuestionItem, ...] = ()
    target_count: int = 0

    def __post_init__(self) -> None:
        """Validate result on construction."""
        for kind in SectionKind:
            count = len(self.for_section(kind))
            if count > self.target_count:
                raise ValueError(
                    f"{kind.key} has {count} items, more than target {self.target_count}"
                )

    def for_section(self, kind: SectionKind) -> tuple[Union[str, QuestionItem], ...]:
        """Get the distributed items for a section."""
        if kind is SectionKind.SPEAKING_I:
            return self.speaking1
        if kind is SectionKind.SPEAKING_II:
            return self.speaking2
        return self.unscramble

    def is_underfilled(self, kind: SectionKind) -> bool:
        """True if a section holds fewer items than the target."""
        return len(self.for_section(kind)) < self.target_count

    @property
    def total_items(self) -> int:
        """Total items across all sections."""
        return len(self.speaking1) + len(self.speaking2) + len(self.unscramble)

    @property
    def is_empty(self) -> bool:
        """True if no section holds any item."""
        return self.total_items == 0
