"""
Schemas Package

Validation for decoded dataset payloads.
"""

from .validator import (
    validate_pattern,
    validate_patterns,
    ValidationError,
)

__all__ = [
    "validate_pattern",
    "validate_patterns",
    "ValidationError",
]
