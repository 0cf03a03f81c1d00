from typing import ClassVar, NamedTuple

from rosterscan.config.settings import Settings
from rosterscan.extraction.base import BaseRequester
from rosterscan.extraction.example_client_adapter import ExampleClientAdapter
from rosterscan.extraction.gemini_client_adapter import GeminiClientAdapter
from rosterscan.extraction.openai_client_adapter import OpenAIClientAdapter
from rosterscan.extraction.requester import ExtractionRequester


class ProviderOptions(NamedTuple):
    api_key: str
    model_name: str
    timeout_seconds: int


class RequesterFactory:
    """Creates the configured extraction requester.

    Every chat-completions provider reads its options from settings fields
    named ``extraction_<provider>_api_key``, ``..._model_name`` and
    ``..._timeout_seconds``.
    """

    # None means the provider's URL comes from settings or the SDK default.
    CHAT_PROVIDER_BASE_URLS: ClassVar[dict[str, str | None]] = {
        "openai": None,
        "openai_compatible": None,
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseRequester:
        """Create a configured requester from application settings."""
        provider = settings.extraction_provider.lower()
        if provider == "example":
            return ExtractionRequester(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
            )
        if provider == "gemini":
            options = cls.provider_options(provider, settings)
            return ExtractionRequester(
                client=GeminiClientAdapter(
                    api_key=options.api_key,
                    timeout_seconds=options.timeout_seconds,
                ),
                model=options.model_name,
                temperature=settings.extraction_temperature,
            )
        if provider not in cls.CHAT_PROVIDER_BASE_URLS:
            supported = ["example", "gemini", *cls.CHAT_PROVIDER_BASE_URLS]
            raise ValueError(
                f"Unknown extraction provider '{provider}'. Choose from: {supported}"
            )

        options = cls.provider_options(provider, settings)
        client = OpenAIClientAdapter(
            api_key=options.api_key,
            timeout_seconds=options.timeout_seconds,
            base_url=cls._base_url(provider, settings),
        )
        return ExtractionRequester(
            client=client,
            model=options.model_name,
            temperature=settings.extraction_temperature,
        )

    @staticmethod
    def provider_options(provider: str, settings: Settings) -> ProviderOptions:
        prefix = f"extraction_{provider}_"
        return ProviderOptions(
            api_key=getattr(settings, prefix + "api_key") or "",
            model_name=getattr(settings, prefix + "model_name") or "",
            timeout_seconds=getattr(settings, prefix + "timeout_seconds") or 60,
        )

    @classmethod
    def _base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider != "openai_compatible":
            return cls.CHAT_PROVIDER_BASE_URLS[provider]
        url = settings.extraction_openai_compatible_base_url.strip()
        if not url:
            raise ValueError(
                "extraction_openai_compatible_base_url is required for "
                "extraction_provider=openai_compatible"
            )
        return url
