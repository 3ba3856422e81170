import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import pattern_worksheet
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from pattern_worksheet.core.models import PatternRecord, QuestionItem, SectionKind


def make_pattern(
    number: int,
    *,
    name: str = "",
    speaking1: int = 0,
    speaking2: int = 0,
    unscramble: int = 0,
) -> PatternRecord:
    """Create a pattern with numbered placeholder questions in each pool."""
    sections = {}
    if speaking1:
        sections[SectionKind.SPEAKING_I] = tuple(
            QuestionItem(f"p{number} s1 q{i}") for i in range(1, speaking1 + 1)
        )
    if speaking2:
        sections[SectionKind.SPEAKING_II] = tuple(
            QuestionItem(f"p{number} s2 q{i}") for i in range(1, speaking2 + 1)
        )
    if unscramble:
        sections[SectionKind.UNSCRAMBLE] = tuple(
            QuestionItem(f"p{number} u q{i}", f"w{i}/x{i}") for i in range(1, unscramble + 1)
        )
    return PatternRecord(number=number, name=name, sections=sections)


# Common test fixtures
@pytest.fixture
def pattern_factory():
    """Return the make_pattern factory."""
    return make_pattern


@pytest.fixture
def sample_payload() -> list[dict]:
    """Decoded dataset with two patterns, in arrival (unsorted) order."""
    return [
        {
            "number": 5,
            "name": "He goes ~",
            "sections": {
                "Speaking II": [
                    "Where does he go?",
                    {"koreanOrQuestion": "Where do we eat?"},
                ],
                "Unscramble": [
                    {"koreanOrQuestion": "그는 간다", "scrambled": "he/goes"},
                    {"koreanOrQuestion": "우리는 먹는다", "scrambled": "we/eat"},
                ],
            },
        },
        {
            "number": 2,
            "name": "I want ~",
            "sections": {
                "Speaking II": ["What do you want?"],
                "Unscramble": [
                    {"koreanOrQuestion": "나는 사과를 원해", "scrambled": "I/want/an/apple"},
                ],
            },
        },
    ]


@pytest.fixture
def sample_patterns(sample_payload) -> list[PatternRecord]:
    """Sample payload as PatternRecords, sorted by number."""
    return sorted(
        (PatternRecord.from_dict(data) for data in sample_payload),
        key=lambda r: r.number,
    )
