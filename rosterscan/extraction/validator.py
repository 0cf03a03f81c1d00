"""Parses raw model output and projects every row onto the field schema."""

import json
from typing import Any

from rosterscan.extraction.exceptions import MalformedResponseError, UnexpectedShapeError
from rosterscan.extraction.models import CellValue, ExtractedRow, ExtractionResult
from rosterscan.extraction.schema import FIELD_SCHEMA


def validate_and_build(
    raw: str,
    schema: tuple[str, ...] = FIELD_SCHEMA,
) -> ExtractionResult:
    """Parse a model response and build a schema-conformant ExtractionResult.

    Headers always equal the full schema, since the complete schema is
    requested on every call.

    Raises:
        MalformedResponseError: if the body is not valid JSON.
        UnexpectedShapeError: if the body is not an array of objects.
    """
    items = parse_rows(raw)
    rows = [sanitize_row(item, schema) for item in items]
    return ExtractionResult(rows=rows, headers=list(schema))


def parse_rows(raw: str) -> list[dict[str, Any]]:
    cleaned = _strip_code_fences(raw)
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(f"Failed to parse AI response as JSON: {exc}") from exc

    if not isinstance(parsed, list):
        raise UnexpectedShapeError(
            f"AI response was not an array (got {type(parsed).__name__})"
        )
    for i, item in enumerate(parsed):
        if not isinstance(item, dict):
            raise UnexpectedShapeError(
                f"Row at index {i} must be an object, got {type(item).__name__}"
            )
    return parsed


def sanitize_row(
    raw_object: dict[str, Any],
    schema: tuple[str, ...] = FIELD_SCHEMA,
) -> ExtractedRow:
    """Project one raw object onto exactly the schema fields.

    Missing or null values become "". Keys outside the schema are dropped.
    """
    return {name: _cell(raw_object.get(name)) for name in schema}


def _cell(value: Any) -> CellValue:
    if value is None:
        return ""
    if isinstance(value, (str, int, float, bool)):
        return value
    return json.dumps(value, ensure_ascii=False)


def _strip_code_fences(raw: str) -> str:
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)
    return cleaned
