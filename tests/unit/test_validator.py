"""Tests for response parsing and schema sanitization."""

import json

import pytest

from rosterscan.extraction.exceptions import MalformedResponseError, UnexpectedShapeError
from rosterscan.extraction.schema import FIELD_SCHEMA
from rosterscan.extraction.validator import parse_rows, sanitize_row, validate_and_build


def _full_row(**overrides: object) -> dict[str, object]:
    row: dict[str, object] = {
        "序号": 1,
        "平台": "TikTok",
        "昵称": "John Doe",
        "链接": "https://www.tiktok.com/@johndoe123",
        "账号类型": "时尚",
        "粉丝数（W）": "10",
        "国家/地区": "美国",
    }
    row.update(overrides)
    return row


class TestParseRows:
    def test_parses_array_of_objects(self) -> None:
        rows = parse_rows(json.dumps([_full_row()]))
        assert rows[0]["平台"] == "TikTok"

    def test_empty_array(self) -> None:
        assert parse_rows("[]") == []

    def test_strips_markdown_code_fences(self) -> None:
        content = "```json\n" + json.dumps([_full_row()]) + "\n```"
        assert len(parse_rows(content)) == 1

    def test_strips_plain_code_fences(self) -> None:
        content = "```\n" + json.dumps([_full_row()]) + "\n```"
        assert len(parse_rows(content)) == 1

    def test_not_json_raises_malformed(self) -> None:
        with pytest.raises(MalformedResponseError, match="parse"):
            parse_rows("not json")

    def test_scalar_raises_unexpected_shape(self) -> None:
        with pytest.raises(UnexpectedShapeError, match="not an array"):
            parse_rows("42")

    def test_single_object_raises_unexpected_shape(self) -> None:
        with pytest.raises(UnexpectedShapeError, match="not an array"):
            parse_rows(json.dumps(_full_row()))

    def test_non_object_element_raises_unexpected_shape(self) -> None:
        with pytest.raises(UnexpectedShapeError, match="index 1"):
            parse_rows(json.dumps([_full_row(), "stray"]))


class TestSanitizeRow:
    def test_key_set_equals_schema(self) -> None:
        row = sanitize_row(_full_row())
        assert list(row) == list(FIELD_SCHEMA)

    def test_drops_extra_keys(self) -> None:
        row = sanitize_row(_full_row(notes="x"))
        assert "notes" not in row
        assert set(row) == set(FIELD_SCHEMA)

    def test_missing_fields_default_to_empty_string(self) -> None:
        row = sanitize_row({"平台": "YouTube"})
        assert row["平台"] == "YouTube"
        assert row["昵称"] == ""
        assert row["国家/地区"] == ""
        assert set(row) == set(FIELD_SCHEMA)

    def test_null_values_become_empty_string(self) -> None:
        row = sanitize_row(_full_row(**{"国家/地区": None}))
        assert row["国家/地区"] == ""

    def test_keeps_scalar_types(self) -> None:
        row = sanitize_row(_full_row(**{"粉丝数（W）": 12.5, "序号": 3}))
        assert row["粉丝数（W）"] == 12.5
        assert row["序号"] == 3

    def test_keeps_false_value(self) -> None:
        row = sanitize_row(_full_row(**{"国家/地区": False}))
        assert row["国家/地区"] is False

    def test_flattens_nested_values_to_json(self) -> None:
        row = sanitize_row(_full_row(**{"国家/地区": ["美国", "加拿大"]}))
        assert row["国家/地区"] == '["美国", "加拿大"]'

    def test_custom_schema(self) -> None:
        row = sanitize_row({"a": 1, "b": 2}, ("b", "c"))
        assert row == {"b": 2, "c": ""}


class TestValidateAndBuild:
    def test_headers_are_full_schema(self) -> None:
        result = validate_and_build(json.dumps([{"平台": "TikTok"}]))
        assert result.headers == list(FIELD_SCHEMA)

    def test_empty_array_still_reports_headers(self) -> None:
        result = validate_and_build("[]")
        assert result.rows == []
        assert result.headers == list(FIELD_SCHEMA)

    def test_preserves_row_order(self) -> None:
        raw = json.dumps([_full_row(昵称="A"), _full_row(昵称="B"), _full_row(昵称="C")])
        result = validate_and_build(raw)
        assert [r["昵称"] for r in result.rows] == ["A", "B", "C"]

    def test_every_row_conforms_to_schema(self) -> None:
        raw = json.dumps([_full_row(extra=1), {"平台": "X"}, {}])
        result = validate_and_build(raw)
        assert all(set(r) == set(FIELD_SCHEMA) for r in result.rows)
