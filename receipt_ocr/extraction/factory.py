from receipt_ocr.config.settings import Settings
from receipt_ocr.extraction.base import BaseExtractor
from receipt_ocr.extraction.client_base import BaseVisionClient
from receipt_ocr.extraction.example_client_adapter import ExampleClientAdapter
from receipt_ocr.extraction.extractor import Extractor
from receipt_ocr.extraction.gemini_client_adapter import GeminiClientAdapter
from receipt_ocr.extraction.openai_client_adapter import OpenAIClientAdapter
from receipt_ocr.extraction.schemas import get_record_schema


class ExtractorFactory:
    """Creates the configured extractor with its vision client."""

    PROVIDERS: tuple[str, ...] = ("vertexai", "openai", "openai_compatible", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseExtractor:
        """Create a configured extractor from application settings."""
        return Extractor(
            client=cls.create_client(settings),
            schema=get_record_schema(settings.record_schema),
        )

    @classmethod
    def create_client(cls, settings: Settings) -> BaseVisionClient:
        provider = settings.vision_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "vertexai":
            return GeminiClientAdapter(
                model=settings.vertex_model_name,
                location=settings.vertex_location,
                project=settings.gcp_project or None,
                temperature=settings.vision_temperature,
            )
        if provider == "openai":
            return OpenAIClientAdapter(
                api_key=settings.openai_api_key,
                model=settings.openai_model_name,
                timeout_seconds=settings.openai_timeout_seconds,
                temperature=settings.vision_temperature,
            )
        if provider == "openai_compatible":
            base_url = settings.openai_compatible_base_url.strip()
            if not base_url:
                raise ValueError(
                    "openai_compatible_base_url is required for "
                    "vision_provider=openai_compatible"
                )
            return OpenAIClientAdapter(
                api_key=settings.openai_compatible_api_key,
                model=settings.openai_compatible_model_name,
                timeout_seconds=settings.openai_compatible_timeout_seconds,
                base_url=base_url,
                temperature=settings.vision_temperature,
            )
        raise ValueError(
            f"Unknown vision provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
