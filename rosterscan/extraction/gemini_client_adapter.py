import httpx
from google import genai
from google.genai import errors, types

from rosterscan.extraction.client_base import BaseVisionClient
from rosterscan.extraction.exceptions import ExtractionNetworkError


class GeminiClientAdapter(BaseVisionClient):
    """Vision client adapter built on the Google Gen AI SDK."""

    def __init__(self, *, api_key: str, timeout_seconds: int) -> None:
        self._client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=timeout_seconds * 1000),
        )

    async def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        image_data: bytes,
        mime_type: str,
    ) -> str | None:
        try:
            response = await self._client.aio.models.generate_content(
                model=model,
                contents=[
                    types.Part.from_bytes(data=image_data, mime_type=mime_type),
                    prompt,
                ],
                config=types.GenerateContentConfig(
                    temperature=temperature,
                    response_mime_type="application/json",
                ),
            )
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ExtractionNetworkError(f"AI provider network error: {exc}") from exc
        except errors.APIError as exc:
            raise ExtractionNetworkError(f"AI provider API error: {exc}") from exc

        return response.text
