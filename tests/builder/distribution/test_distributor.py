"""
Tests for question distribution across selected patterns.

Verifies:
1. Allocation: base + remainder takes, extra items to the first patterns
2. Pool shortage: short pools under-fill, nothing is redistributed
3. Determinism: same inputs give equal results
"""

import copy

import pytest

from pattern_worksheet.core.models import (
    DistributionResult,
    PatternRecord,
    QuestionItem,
    SectionKind,
)
from pattern_worksheet.builder.distribution import allocate_takes, distribute


class TestAllocateTakes:
    """Tests for the base + remainder allocation rule."""

    @pytest.mark.parametrize(
        "pattern_count, target_count, expected",
        [
            (3, 5, (2, 2, 1)),
            (3, 7, (3, 2, 2)),
            (1, 5, (5,)),
            (5, 5, (1, 1, 1, 1, 1)),
            (2, 5, (3, 2)),
            (4, 3, (1, 1, 1, 0)),
            (3, 0, (0, 0, 0)),
        ],
    )
    def test_allocate_when_counts_given_then_expected_takes(
        self, pattern_count, target_count, expected
    ):
        # Act
        takes = allocate_takes(pattern_count, target_count)

        # Assert
        assert takes == expected
        assert sum(takes) == target_count

    def test_allocate_when_no_patterns_then_empty(self):
        assert allocate_takes(0, 5) == ()

    def test_allocate_when_negative_target_then_raises_error(self):
        with pytest.raises(ValueError, match="target_count must be non-negative"):
            allocate_takes(3, -1)


class TestDistribute:
    """Tests for distribute."""

    def test_distribute_when_three_patterns_target_five_then_takes_2_2_1(self, pattern_factory):
        """Each section takes [2, 2, 1] items from three full pools."""
        # Arrange
        patterns = [pattern_factory(n, speaking1=5, speaking2=5, unscramble=5) for n in (1, 2, 3)]

        # Act
        result = distribute(patterns, target_count=5)

        # Assert
        assert result.speaking2 == (
            "p1 s2 q1", "p1 s2 q2",
            "p2 s2 q1", "p2 s2 q2",
            "p3 s2 q1",
        )
        assert [item.prompt_text for item in result.unscramble] == [
            "p1 u q1", "p1 u q2", "p2 u q1", "p2 u q2", "p3 u q1",
        ]
        assert len(result.speaking1) == 5

    def test_distribute_when_three_patterns_target_seven_then_takes_3_2_2(self, pattern_factory):
        # Arrange
        patterns = [pattern_factory(n, speaking2=5) for n in (1, 2, 3)]

        # Act
        result = distribute(patterns, target_count=7)

        # Assert
        sources = [text.split()[0] for text in result.speaking2]
        assert sources == ["p1", "p1", "p1", "p2", "p2", "p3", "p3"]

    def test_distribute_when_reordered_then_extra_goes_to_new_first(self, pattern_factory):
        """Distribution depends on the order patterns are given in."""
        # Arrange
        a = pattern_factory(1, speaking2=5)
        b = pattern_factory(2, speaking2=5)

        # Act
        forward = distribute([a, b], target_count=5)
        backward = distribute([b, a], target_count=5)

        # Assert
        assert [t.split()[0] for t in forward.speaking2] == ["p1", "p1", "p1", "p2", "p2"]
        assert [t.split()[0] for t in backward.speaking2] == ["p2", "p2", "p2", "p1", "p1"]

    def test_distribute_when_pool_short_then_no_redistribution(self, pattern_factory):
        """A pool with 1 item and take 3 contributes 1; the gap stays empty."""
        # Arrange
        patterns = [
            pattern_factory(1, unscramble=1),
            pattern_factory(2, unscramble=5),
            pattern_factory(3, unscramble=5),
        ]

        # Act
        result = distribute(patterns, target_count=7)  # takes (3, 2, 2)

        # Assert
        assert [item.prompt_text for item in result.unscramble] == [
            "p1 u q1", "p2 u q1", "p2 u q2", "p3 u q1", "p3 u q2",
        ]
        assert result.is_underfilled(SectionKind.UNSCRAMBLE)

    def test_distribute_when_pool_empty_then_contributes_nothing(self, pattern_factory):
        # Arrange
        patterns = [pattern_factory(1), pattern_factory(2, speaking2=5)]

        # Act
        result = distribute(patterns, target_count=4)  # takes (2, 2)

        # Assert
        assert result.speaking2 == ("p2 s2 q1", "p2 s2 q2")

    def test_distribute_when_example_dataset_then_three_unscramble_items(self, sample_patterns):
        """Takes [3, 2] over pools of [1, 2] give three items, under target."""
        # Act
        result = distribute(sample_patterns, target_count=5)

        # Assert
        assert result.unscramble == (
            QuestionItem("나는 사과를 원해", "I/want/an/apple"),
            QuestionItem("그는 간다", "he/goes"),
            QuestionItem("우리는 먹는다", "we/eat"),
        )

    def test_distribute_when_structured_speaking_items_then_prompt_text(self, sample_patterns):
        """Strings pass through verbatim; structured items give their prompt."""
        # Act
        result = distribute(sample_patterns, target_count=5)

        # Assert
        assert result.speaking2 == ("What do you want?", "Where does he go?", "Where do we eat?")

    def test_distribute_when_prompt_missing_then_empty_string(self):
        # Arrange
        record = PatternRecord.from_dict({"number": 1, "sections": {"Speaking II": [{}]}})

        # Act
        result = distribute([record], target_count=5)

        # Assert
        assert result.speaking2 == ("",)

    def test_distribute_when_no_patterns_then_all_empty(self):
        # Act
        result = distribute([], target_count=5)

        # Assert
        assert result == DistributionResult(target_count=5)
        assert result.is_empty

    def test_distribute_when_target_zero_then_all_empty(self, pattern_factory):
        # Act
        result = distribute([pattern_factory(1, speaking1=3, speaking2=3, unscramble=3)], target_count=0)

        # Assert
        assert result.speaking1 == ()
        assert result.speaking2 == ()
        assert result.unscramble == ()

    def test_distribute_when_called_twice_then_equal_results(self, pattern_factory):
        # Arrange
        patterns = [pattern_factory(n, speaking1=2, speaking2=4, unscramble=3) for n in (1, 4)]

        # Act & Assert
        assert distribute(patterns, 5) == distribute(patterns, 5)

    def test_distribute_when_called_then_inputs_unchanged(self, sample_patterns):
        # Arrange
        before = copy.deepcopy(sample_patterns)

        # Act
        distribute(sample_patterns, target_count=5)

        # Assert
        assert sample_patterns == before

    def test_distribute_when_default_target_then_five(self, pattern_factory):
        result = distribute([pattern_factory(1, speaking2=9)])

        assert len(result.speaking2) == 5
        assert result.target_count == 5

    def test_distribute_when_sections_allocated_independently(self, pattern_factory):
        """Each section uses the same takes regardless of the other pools."""
        # Arrange
        patterns = [
            pattern_factory(1, speaking2=5, unscramble=0),
            pattern_factory(2, speaking2=0, unscramble=5),
        ]

        # Act
        result = distribute(patterns, target_count=5)  # takes (3, 2)

        # Assert
        assert len(result.speaking2) == 3
        assert len(result.unscramble) == 2


class TestDistributionResult:
    """Tests for DistributionResult."""

    def test_init_when_more_items_than_target_then_raises_error(self):
        """Sections are always capped at the target."""
        with pytest.raises(ValueError, match="more than target"):
            DistributionResult(speaking2=("a", "b"), target_count=1)

    def test_for_section_when_kind_then_matching_sequence(self):
        result = DistributionResult(
            speaking1=("a",),
            speaking2=("b",),
            unscramble=(QuestionItem("c"),),
            target_count=1,
        )

        assert result.for_section(SectionKind.SPEAKING_I) == ("a",)
        assert result.for_section(SectionKind.SPEAKING_II) == ("b",)
        assert result.for_section(SectionKind.UNSCRAMBLE) == (QuestionItem("c"),)
        assert result.total_items == 3


class TestCollectCap:
    """Tests for the per-section cap applied after concatenation."""

    def test_collect_when_takes_exceed_target_then_capped(self, pattern_factory):
        """Collected items never exceed the target, whatever the takes."""
        from pattern_worksheet.builder.distribution.distributor import _collect

        # Arrange
        patterns = [pattern_factory(1, speaking2=5), pattern_factory(2, speaking2=5)]

        # Act
        items = _collect(patterns, (4, 4), SectionKind.SPEAKING_II, 5)

        # Assert
        assert [item.prompt_text for item in items] == [
            "p1 s2 q1", "p1 s2 q2", "p1 s2 q3", "p1 s2 q4", "p2 s2 q1",
        ]
