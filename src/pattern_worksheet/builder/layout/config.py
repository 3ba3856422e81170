"""
Module: builder.layout.config

Purpose:
    Configuration for worksheet assembly.
    Defines the fixed worksheet text, font sizes and spacing metadata
    attached to each block.

Key Classes:
    - WorksheetStyle: Immutable worksheet style

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.assembler: Block creation
    - builder.config: WorksheetConfig
"""

from __future__ import annotations

from dataclasses import dataclass


DEFAULT_SPEAKING_PROMPTS = (
    "What is your name?",
    "How old are you?",
    "Where do you live?",
    "What do you like to do after school?",
    "How are you feeling today?",
)


@dataclass(frozen=True)
class WorksheetStyle:
    """
    Worksheet text and presentation metadata (immutable).

    Sizes and spacing are in points. They are attached to blocks for the
    document serializer and are never used for layout here.

    Attributes:
        title: Worksheet title
        level: Level shown in the subtitle
        speaking_prompts: Fixed Speaking I prompts
        placeholder_template: Text for empty slots, formatted with {number}
        name_date_text: Name/date line
        grade_text: Grade footer line
        remark_text: Remark footer line
        title_size: Title font size
        subtitle_size: Subtitle font size
        heading_size: Section heading font size
        body_size: Question and footer font size
        title_spacing: Space after title and subtitle
        heading_spacing: Space after a section heading
        line_spacing: Space after a question line
        rule_spacing: Space after an answer rule
        section_spacing: Space after the last block of a section

    Example:
        >>> style = WorksheetStyle(level="B")
        >>> style.subtitle([2, 5])
        'Pattern Level B - Patterns: 2, 5'
    """

    # Text
    title: str = "Pattern Practice Worksheet"
    level: str = "A"
    speaking_prompts: tuple[str, ...] = DEFAULT_SPEAKING_PROMPTS
    placeholder_template: str = "Pattern {number}"
    name_date_text: str = "Name: ____________________    Date: ____________________"
    grade_text: str = "GRADE: ____________________"
    remark_text: str = "REMARK: ____________________"

    # Font sizes
    title_size: int = 18
    subtitle_size: int = 12
    heading_size: int = 14
    body_size: int = 11

    # Spacing
    title_spacing: int = 6
    heading_spacing: int = 6
    line_spacing: int = 4
    rule_spacing: int = 12
    section_spacing: int = 18

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.speaking_prompts:
            raise ValueError("speaking_prompts must not be empty")
        for name in ("title_size", "subtitle_size", "heading_size", "body_size"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive: {getattr(self, name)}")
        for name in ("title_spacing", "heading_spacing", "line_spacing", "rule_spacing", "section_spacing"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative: {getattr(self, name)}")

    def subtitle(self, numbers) -> str:
        """Subtitle listing pattern numbers, comma-joined."""
        joined = ", ".join(str(n) for n in numbers)
        return f"Pattern Level {self.level} - Patterns: {joined}"

    def placeholder(self, number: int) -> str:
        """Placeholder text for an empty slot of a pattern's sheet."""
        return self.placeholder_template.format(number=number)

    def speaking_prompt(self, slot: int) -> str:
        """Fixed Speaking I prompt for a 0-based slot."""
        return self.speaking_prompts[slot % len(self.speaking_prompts)]
