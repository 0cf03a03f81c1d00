"""Tests for the ExtractionRequester (one image -> sanitized rows)."""

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from rosterscan.extraction.exceptions import (
    EmptyResponseError,
    ExtractionNetworkError,
    MalformedResponseError,
    UnexpectedShapeError,
)
from rosterscan.extraction.models import ImagePayload
from rosterscan.extraction.requester import ExtractionRequester
from rosterscan.extraction.schema import FIELD_SCHEMA


def _make_client(content: str | None = "[]") -> MagicMock:
    client = MagicMock()
    client.create_completion = AsyncMock(return_value=content)
    return client


def _make_requester(client: MagicMock, **kwargs: object) -> ExtractionRequester:
    return ExtractionRequester(client=client, model="test-model", **kwargs)  # type: ignore[arg-type]


def _rows_response(*nicknames: str) -> str:
    return json.dumps(
        [{"序号": i + 1, "平台": "TikTok", "昵称": name} for i, name in enumerate(nicknames)],
        ensure_ascii=False,
    )


class TestExtractSuccess:
    @pytest.mark.asyncio
    async def test_returns_sanitized_rows(self, image_payload: ImagePayload) -> None:
        client = _make_client(_rows_response("A", "B"))
        result = await _make_requester(client).extract(image_payload)
        assert [r["昵称"] for r in result.rows] == ["A", "B"]
        assert all(set(r) == set(FIELD_SCHEMA) for r in result.rows)
        assert result.headers == list(FIELD_SCHEMA)

    @pytest.mark.asyncio
    async def test_makes_exactly_one_call(self, image_payload: ImagePayload) -> None:
        client = _make_client()
        await _make_requester(client).extract(image_payload)
        assert client.create_completion.await_count == 1

    @pytest.mark.asyncio
    async def test_passes_image_and_mime_type(self, image_payload: ImagePayload) -> None:
        client = _make_client()
        await _make_requester(client).extract(image_payload)
        kwargs = client.create_completion.call_args.kwargs
        assert kwargs["image_data"] == image_payload.data
        assert kwargs["mime_type"] == "image/png"
        assert kwargs["model"] == "test-model"

    @pytest.mark.asyncio
    async def test_prompt_lists_every_field(self, image_payload: ImagePayload) -> None:
        client = _make_client()
        await _make_requester(client).extract(image_payload)
        prompt = client.create_completion.call_args.kwargs["prompt"]
        for name in FIELD_SCHEMA:
            assert f'"{name}"' in prompt
        assert "https://www.tiktok.com/@user123" in prompt
        assert "Simplified Chinese" in prompt
        assert "JSON array" in prompt

    @pytest.mark.asyncio
    async def test_clamps_temperature(self, image_payload: ImagePayload) -> None:
        client = _make_client()
        await _make_requester(client, temperature=0.9).extract(image_payload)
        assert client.create_completion.call_args.kwargs["temperature"] == 0.2

    def test_custom_prompt_template(self, tmp_path: Path) -> None:
        template = tmp_path / "prompt.txt"
        template.write_text("Fields: {field_list}", encoding="utf-8")
        requester = _make_requester(
            _make_client(), schema=("a", "b"), prompt_template_path=template
        )
        assert requester.prompt == 'Fields: "a", "b"'


class TestExtractFailures:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [None, "", "   \n"])
    async def test_empty_body_raises_empty_response(
        self, image_payload: ImagePayload, content: str | None
    ) -> None:
        client = _make_client(content)
        with pytest.raises(EmptyResponseError):
            await _make_requester(client).extract(image_payload)

    @pytest.mark.asyncio
    async def test_not_json_raises_malformed(self, image_payload: ImagePayload) -> None:
        client = _make_client("not json")
        with pytest.raises(MalformedResponseError):
            await _make_requester(client).extract(image_payload)

    @pytest.mark.asyncio
    async def test_object_raises_unexpected_shape(self, image_payload: ImagePayload) -> None:
        client = _make_client('{"序号": 1}')
        with pytest.raises(UnexpectedShapeError):
            await _make_requester(client).extract(image_payload)

    @pytest.mark.asyncio
    async def test_client_error_propagates_unchanged(self, image_payload: ImagePayload) -> None:
        error = ExtractionNetworkError("quota exceeded")
        client = MagicMock()
        client.create_completion = AsyncMock(side_effect=error)
        with pytest.raises(ExtractionNetworkError) as exc_info:
            await _make_requester(client).extract(image_payload)
        assert exc_info.value is error
        assert client.create_completion.await_count == 1


class TestLogging:
    @pytest.mark.asyncio
    async def test_logs_prompt_in_debug(self, image_payload: ImagePayload) -> None:
        with patch("rosterscan.extraction.requester.Log") as mock_log:
            await _make_requester(_make_client()).extract(image_payload)
            assert "prompt" in mock_log.debug.call_args_list[0].args[0].lower()

    @pytest.mark.asyncio
    async def test_logs_row_count_in_info(self, image_payload: ImagePayload) -> None:
        with patch("rosterscan.extraction.requester.Log") as mock_log:
            await _make_requester(_make_client(_rows_response("A"))).extract(image_payload)
            assert any("1 rows" in c.args[0] for c in mock_log.info.call_args_list)
