"""
Module: patterns

Purpose:
    Provides the PatternRecord dataclass - one teachable language pattern
    with its per-section question pools. Records are immutable once
    loaded and are passed by reference into the builder for a single
    generation call.

Key Functions:
    - PatternRecord.pool(kind): Question pool for a section (never fails)
    - PatternRecord.to_dict() / PatternRecord.from_dict(): Serialization
    - sort_patterns(): Order records by pattern number

Dependencies:
    - dataclasses (std)
    - .questions.QuestionItem
    - .sections.SectionKind

Used By:
    - builder.distribution.distributor
    - builder.layout.assembler
    - core.utils.serialization
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping

from .questions import QuestionItem
from .sections import SectionKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternRecord:
    """
    A single language pattern (immutable).

    Attributes:
        number: Stable pattern number, unique within a dataset (sort key)
        name: Display name such as "I want ~"
        sections: Question pools keyed by section; pools keep dataset order

    Invariants:
        - pools are tuples of normalized QuestionItems
        - sections is a read-only mapping; records hash by number and name
        - an absent section behaves as an empty pool

    Example:
        >>> record = PatternRecord(
        ...     number=2,
        ...     name="I want ~",
        ...     sections={SectionKind.UNSCRAMBLE: (QuestionItem("나는 사과를 원해", "I/want/an/apple"),)},
        ... )
        >>> len(record.pool(SectionKind.UNSCRAMBLE))
        1
        >>> record.pool(SectionKind.SPEAKING_II)
        ()
    """

    number: int
    name: str = ""
    sections: Mapping[SectionKind, tuple[QuestionItem, ...]] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        """Validate record on construction."""
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise ValueError(f"number must be an integer: {self.number!r}")
        object.__setattr__(
            self,
            "sections",
            MappingProxyType({kind: tuple(items) for kind, items in self.sections.items()}),
        )

    def __reduce__(self):
        """Copy and pickle through the constructor; mapping proxies cannot be pickled."""
        return (type(self), (self.number, self.name, dict(self.sections)))

    def pool(self, kind: SectionKind) -> tuple[QuestionItem, ...]:
        """
        Get the question pool for a section.

        Returns:
            Tuple of items in dataset order, empty if the section is absent
        """
        return self.sections.get(kind, ())

    @property
    def label(self) -> str:
        """Label as shown in the selection grid, e.g. "2. I want ~"."""
        return f"{self.number}. {self.name}" if self.name else str(self.number)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the dataset shape."""
        return {
            "number": self.number,
            "name": self.name,
            "sections": {
                kind.key: [item.to_dict() for item in self.pool(kind)]
                for kind in SectionKind
                if kind in self.sections
            },
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PatternRecord":
        """
        Create a record from a dataset mapping.

        Pool items are normalized to QuestionItem. Section keys that are
        not worksheet sections are ignored.
        """
        raw_sections = data.get("sections") or {}
        sections: Dict[SectionKind, tuple[QuestionItem, ...]] = {}
        for key, items in raw_sections.items():
            try:
                kind = SectionKind.from_key(key)
            except ValueError:
                logger.debug(f"Ignoring unknown section {key!r} in pattern {data.get('number')}")
                continue
            sections[kind] = tuple(QuestionItem.from_raw(item) for item in items or ())

        return cls(
            number=data["number"],
            name=str(data.get("name") or ""),
            sections=sections,
        )


def sort_patterns(records: Iterable[PatternRecord]) -> List[PatternRecord]:
    """Return records ordered by pattern number ascending."""
    return sorted(records, key=lambda r: r.number)
