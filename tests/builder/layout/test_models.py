"""
Unit tests for worksheet style and document models.
"""

import pytest

from pattern_worksheet.core.models import SectionKind
from pattern_worksheet.builder.layout import (
    Block,
    BlockKind,
    BlockRole,
    DocumentModel,
    LayoutMode,
    WorksheetStyle,
    DEFAULT_SPEAKING_PROMPTS,
)


class TestWorksheetStyle:
    """Tests for WorksheetStyle dataclass."""

    def test_init_when_defaults_then_five_speaking_prompts(self):
        # Act
        style = WorksheetStyle()

        # Assert
        assert style.speaking_prompts == DEFAULT_SPEAKING_PROMPTS
        assert len(style.speaking_prompts) == 5

    def test_subtitle_when_numbers_then_comma_joined(self):
        assert WorksheetStyle().subtitle([2, 5]) == "Pattern Level A - Patterns: 2, 5"

    def test_subtitle_when_level_changed_then_used(self):
        assert WorksheetStyle(level="B").subtitle([1]) == "Pattern Level B - Patterns: 1"

    def test_placeholder_when_number_then_formatted(self):
        assert WorksheetStyle().placeholder(7) == "Pattern 7"

    def test_speaking_prompt_when_slot_past_end_then_wraps(self):
        style = WorksheetStyle(speaking_prompts=("a", "b"))

        assert [style.speaking_prompt(slot) for slot in range(5)] == ["a", "b", "a", "b", "a"]

    def test_init_when_no_prompts_then_raises_error(self):
        with pytest.raises(ValueError, match="speaking_prompts must not be empty"):
            WorksheetStyle(speaking_prompts=())

    def test_init_when_zero_size_then_raises_error(self):
        with pytest.raises(ValueError, match="heading_size must be positive"):
            WorksheetStyle(heading_size=0)

    def test_init_when_negative_spacing_then_raises_error(self):
        with pytest.raises(ValueError, match="rule_spacing must be non-negative"):
            WorksheetStyle(rule_spacing=-1)


class TestBlock:
    """Tests for Block factories."""

    def test_title_when_created_then_bold_title(self):
        block = Block.title("Worksheet", size=18, space_after=6)

        assert block.kind is BlockKind.TITLE
        assert block.bold is True
        assert block.size == 18
        assert block.space_after == 6

    def test_rule_when_created_then_underlined_without_text(self):
        block = Block.rule(space_after=12, section=SectionKind.UNSCRAMBLE)

        assert block.kind is BlockKind.RULE
        assert block.text == ""
        assert block.underline is True
        assert block.section is SectionKind.UNSCRAMBLE

    def test_paragraph_when_created_then_role_set(self):
        block = Block.paragraph("1. Hi", role=BlockRole.QUESTION, size=11)

        assert block.kind is BlockKind.PARAGRAPH
        assert block.role is BlockRole.QUESTION


class TestDocumentModel:
    """Tests for DocumentModel dataclass."""

    @pytest.fixture
    def two_page_document(self) -> DocumentModel:
        return DocumentModel(
            blocks=(
                Block.title("A", size=18),
                Block.paragraph("1. x", role=BlockRole.QUESTION, section=SectionKind.SPEAKING_II),
                Block.page_break(),
                Block.title("B", size=18),
                Block.paragraph("1. y", role=BlockRole.QUESTION, section=SectionKind.UNSCRAMBLE),
                Block.rule(section=SectionKind.UNSCRAMBLE),
            ),
            layout_mode=LayoutMode.PER_PATTERN_PAGINATED,
        )

    def test_count_when_blocks_then_counts_by_kind(self, two_page_document):
        assert two_page_document.count(BlockKind.TITLE) == 2
        assert two_page_document.count(BlockKind.PAGE_BREAK) == 1
        assert two_page_document.count(BlockKind.HEADING) == 0

    def test_pages_when_page_break_then_split(self, two_page_document):
        # Act
        pages = two_page_document.pages

        # Assert
        assert two_page_document.page_count == 2
        assert [block.text for block in pages[0]] == ["A", "1. x"]
        assert [block.kind for block in pages[1]] == [
            BlockKind.TITLE, BlockKind.PARAGRAPH, BlockKind.RULE,
        ]

    def test_questions_when_section_then_question_lines_only(self, two_page_document):
        questions = two_page_document.questions(SectionKind.UNSCRAMBLE)

        assert [block.text for block in questions] == ["1. y"]

    def test_page_count_when_empty_then_zero(self):
        document = DocumentModel(blocks=())

        assert document.is_empty
        assert document.page_count == 0
