"""
Serialization Utilities

Converts decoded dataset payloads to and from PatternRecords.

Validation runs before deserialization, and the returned records are
always sorted by pattern number so the distributor sees them in a
stable order.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List

from ..models.patterns import PatternRecord, sort_patterns
from ..schemas.validator import validate_pattern, validate_patterns

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Pattern Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_pattern(record: PatternRecord) -> dict[str, Any]:
    """
    Serialize a PatternRecord to a dictionary.

    Pool items are written in the structured mapping shape.
    """
    return record.to_dict()


def deserialize_pattern(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> PatternRecord:
    """
    Deserialize a PatternRecord from a dictionary.

    Args:
        data: Decoded pattern mapping
        validate: Whether to validate before deserializing
        strict: Whether validation also runs the JSON schema

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_pattern(data, strict=strict)
    return PatternRecord.from_dict(data)


def deserialize_patterns(
    payload: List[dict[str, Any]],
    *,
    validate: bool = True,
    strict: bool = False,
) -> List[PatternRecord]:
    """
    Deserialize a whole dataset payload.

    Args:
        payload: Decoded dataset (list of pattern mappings, any order)
        validate: Whether to validate before deserializing
        strict: Whether validation also runs the JSON schema

    Returns:
        PatternRecords sorted by number ascending

    Raises:
        ValidationError: If validate=True and payload is invalid
    """
    if validate:
        validate_patterns(payload, strict=strict)

    records = sort_patterns(PatternRecord.from_dict(data) for data in payload)
    logger.debug(f"Deserialized {len(records)} patterns")
    return records


def index_patterns(records: Iterable[PatternRecord]) -> Dict[int, PatternRecord]:
    """Build a lookup from pattern number to record."""
    return {record.number: record for record in records}
