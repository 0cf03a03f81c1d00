from abc import ABC, abstractmethod

from rosterscan.extraction.models import ExtractionResult, ImagePayload


class BaseRequester(ABC):
    """Contract for all per-image extraction requesters."""

    @abstractmethod
    async def extract(self, image: ImagePayload) -> ExtractionResult:
        """Extract schema-conformant rows from one image.

        Args:
            image: Raw image bytes and media type.

        Returns:
            ExtractionResult with sanitized rows and the schema headers.

        Raises:
            ExtractionError: on any failure. Provider errors are re-raised unchanged.
        """
