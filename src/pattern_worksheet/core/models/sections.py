"""
Module: sections

Purpose:
    Provides the SectionKind enum - the three fixed categories of practice
    question a worksheet always presents, in fixed order.

Key Classes:
    - SectionKind: Section tag with dataset key and display heading

Used By:
    - core.models.patterns.PatternRecord
    - builder.distribution.distributor
    - builder.layout.assembler
"""

from __future__ import annotations

from enum import Enum


class SectionKind(Enum):
    """
    Section of a worksheet.

    The enum value is the key used for the section in dataset payloads.
    Declaration order is the order sections appear on a worksheet.

    Example:
        >>> SectionKind.from_key("Speaking II")
        <SectionKind.SPEAKING_II: 'Speaking II'>
        >>> SectionKind.UNSCRAMBLE.heading
        'Unscramble'
    """

    SPEAKING_I = "Speaking I"
    SPEAKING_II = "Speaking II"
    UNSCRAMBLE = "Unscramble"

    @property
    def key(self) -> str:
        """Dataset key for this section."""
        return self.value

    @property
    def heading(self) -> str:
        """Heading text shown above the section on a worksheet."""
        return self.value

    @classmethod
    def from_key(cls, key: str) -> "SectionKind":
        """
        Look up a section by its dataset key.

        Raises:
            ValueError: If key is not a known section
        """
        return cls(key)
