"""
Core Models Package

Immutable data models shared by the builder pipeline.

All models in this package are frozen dataclasses, so a loaded dataset
can be handed to the distributor and assembler without being mutated.
Pool items are normalized to QuestionItem when a record is built.
"""

from .sections import SectionKind
from .questions import QuestionItem
from .patterns import PatternRecord, sort_patterns
from .distribution import DistributionResult

__all__ = [
    "SectionKind",
    "QuestionItem",
    "PatternRecord",
    "sort_patterns",
    "DistributionResult",
]
