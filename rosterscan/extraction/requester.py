"""AI-powered roster extraction for a single image."""

from pathlib import Path

from rosterscan.extraction.base import BaseRequester
from rosterscan.extraction.client_base import BaseVisionClient
from rosterscan.extraction.exceptions import EmptyResponseError
from rosterscan.extraction.models import ExtractionResult, ImagePayload
from rosterscan.extraction.prompt_loader import load_prompt_template
from rosterscan.extraction.schema import FIELD_SCHEMA, quoted_field_list
from rosterscan.extraction.validator import validate_and_build
from rosterscan.logging.logger import Log


class ExtractionRequester(BaseRequester):
    """Extracts roster rows from one image using a vision model provider."""

    def __init__(
        self,
        *,
        client: BaseVisionClient,
        model: str,
        temperature: float = 0.0,
        schema: tuple[str, ...] = FIELD_SCHEMA,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._schema = schema
        self._prompt = load_prompt_template(prompt_template_path).format(
            field_list=quoted_field_list(schema),
        )

    @property
    def prompt(self) -> str:
        return self._prompt

    async def extract(self, image: ImagePayload) -> ExtractionResult:
        """Extract schema-conformant rows from one image."""
        Log.info(
            f"Extracting rows from image '{image.name}' "
            f"({len(image.data)} bytes, {image.mime_type})"
        )
        Log.debug(f"Extraction prompt:\n{self._prompt}")

        raw_response = await self._client.create_completion(
            model=self._model,
            temperature=self._temperature,
            prompt=self._prompt,
            image_data=image.data,
            mime_type=image.mime_type,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        if not raw_response or not raw_response.strip():
            raise EmptyResponseError("No data returned from AI")

        result = validate_and_build(raw_response, self._schema)
        Log.info(f"Extraction complete for '{image.name}': {len(result.rows)} rows")
        return result
