"""
Module: questions

Purpose:
    Provides QuestionItem - the single canonical shape of a pool question.
    Dataset pools hold either plain strings or mappings; both are
    normalized here, once, before any distribution logic runs.

Key Functions:
    - QuestionItem.from_raw(): Normalize a raw pool item
    - QuestionItem.to_dict(): Back to the dataset mapping shape

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.patterns.PatternRecord
    - core.models.distribution.DistributionResult
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

# Dataset field names for structured pool items
PROMPT_FIELD = "koreanOrQuestion"
HINT_FIELD = "scrambled"


@dataclass(frozen=True)
class QuestionItem:
    """
    A single pool question (immutable).

    Attributes:
        prompt_text: Question or sentence shown to the student
        scrambled_hint: Scrambled word order shown after the prompt
            (Unscramble only, empty when absent)

    Example:
        >>> QuestionItem.from_raw({"koreanOrQuestion": "그는 간다", "scrambled": "he/goes"})
        QuestionItem(prompt_text='그는 간다', scrambled_hint='he/goes')
        >>> QuestionItem.from_raw("What do you want?")
        QuestionItem(prompt_text='What do you want?', scrambled_hint='')
    """

    prompt_text: str = ""
    scrambled_hint: str = ""

    @property
    def has_hint(self) -> bool:
        """True if a scrambled hint should be shown."""
        return bool(self.scrambled_hint)

    @classmethod
    def from_raw(cls, raw: Any) -> "QuestionItem":
        """
        Normalize a raw pool item.

        Strings pass through verbatim as the prompt. Mappings read the
        prompt and hint fields, with missing or null fields defaulting
        to an empty string.

        Raises:
            TypeError: If raw is neither a string nor a mapping
        """
        if isinstance(raw, str):
            return cls(prompt_text=raw)
        if isinstance(raw, Mapping):
            return cls(
                prompt_text=_text(raw.get(PROMPT_FIELD)),
                scrambled_hint=_text(raw.get(HINT_FIELD)),
            )
        raise TypeError(f"Unsupported question item: {type(raw).__name__}")

    def to_dict(self) -> Dict[str, str]:
        """Serialize to the dataset mapping shape."""
        return {PROMPT_FIELD: self.prompt_text, HINT_FIELD: self.scrambled_hint}


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
