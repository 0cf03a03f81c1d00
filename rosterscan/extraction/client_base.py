from abc import ABC, abstractmethod


class BaseVisionClient(ABC):
    """Contract for provider-specific vision model clients."""

    @abstractmethod
    async def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        image_data: bytes,
        mime_type: str,
    ) -> str | None:
        """Send one image plus instruction text and return the response body.

        Returns None when the provider answered without any text.

        Raises:
            ExtractionNetworkError: on network, auth or quota failures.
        """
