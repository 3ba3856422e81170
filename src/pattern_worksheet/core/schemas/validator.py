"""
Schema Validation Utilities

Validates decoded dataset payloads before they become PatternRecords.

Basic checks always run and report the exact path of the first problem.
Strict mode additionally validates each record with jsonschema against
the packaged pattern.schema.json.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import jsonschema

from ..models.questions import HINT_FIELD, PROMPT_FIELD


_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_pattern(data: Any, *, strict: bool = False, path: str = "") -> None:
    """
    Validate a single pattern payload.

    Args:
        data: Decoded pattern mapping
        strict: If True, also validate with jsonschema
        path: Path prefix used in error messages

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, Mapping):
        raise ValidationError(
            f"Pattern must be an object, got {type(data).__name__}",
            path=path,
        )

    if "number" not in data:
        raise ValidationError(
            "Missing required fields: ['number']",
            path=path,
            errors=["Missing field: number"],
        )

    number = data["number"]
    if isinstance(number, bool) or not isinstance(number, int):
        raise ValidationError(
            f"Invalid number: {number!r} (must be an integer)",
            path=_join(path, "number"),
        )

    name = data.get("name")
    if name is not None and not isinstance(name, str):
        raise ValidationError(
            f"Invalid name: {name!r} (must be a string)",
            path=_join(path, "name"),
        )

    sections = data.get("sections")
    if sections is not None:
        if not isinstance(sections, Mapping):
            raise ValidationError(
                "sections must be an object",
                path=_join(path, "sections"),
            )
        for key, items in sections.items():
            _validate_pool(items, _join(path, f"sections.{key}"))

    if strict:
        schema = _load_schema("pattern")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=_join(path, ".".join(str(p) for p in e.absolute_path)),
                errors=[e.message],
            ) from e


def validate_patterns(payload: Any, *, strict: bool = False) -> None:
    """
    Validate a whole dataset payload (a list of patterns).

    Pattern numbers must be unique across the dataset.

    Raises:
        ValidationError: If payload is invalid
    """
    if not isinstance(payload, list):
        raise ValidationError(
            f"Dataset must be a list of patterns, got {type(payload).__name__}"
        )

    seen: set[int] = set()
    for i, data in enumerate(payload):
        validate_pattern(data, strict=strict, path=f"[{i}]")
        number = data["number"]
        if number in seen:
            raise ValidationError(
                f"Duplicate pattern number: {number}",
                path=f"[{i}].number",
            )
        seen.add(number)


def _validate_pool(items: Any, path: str) -> None:
    """Validate one section pool."""
    if items is None:
        return
    if not isinstance(items, list):
        raise ValidationError("Section pool must be a list", path=path)

    for i, item in enumerate(items):
        item_path = f"{path}[{i}]"
        if isinstance(item, str):
            continue
        if not isinstance(item, Mapping):
            raise ValidationError(
                f"Invalid question item: {item!r} (must be a string or object)",
                path=item_path,
            )
        for field_name in (PROMPT_FIELD, HINT_FIELD):
            value = item.get(field_name)
            if value is not None and not isinstance(value, str):
                raise ValidationError(
                    f"Invalid {field_name}: {value!r} (must be a string)",
                    path=f"{item_path}.{field_name}",
                )


def _join(prefix: str, name: str) -> str:
    if not prefix:
        return name
    if not name:
        return prefix
    return f"{prefix}.{name}"
