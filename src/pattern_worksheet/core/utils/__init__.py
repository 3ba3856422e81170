"""
Utils Package

Serialization helpers for dataset payloads.
"""

from .serialization import (
    serialize_pattern,
    deserialize_pattern,
    deserialize_patterns,
    index_patterns,
)

__all__ = [
    "serialize_pattern",
    "deserialize_pattern",
    "deserialize_patterns",
    "index_patterns",
]
