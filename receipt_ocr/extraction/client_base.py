from abc import ABC, abstractmethod


class BaseVisionClient(ABC):
    """Contract for provider-specific vision model clients."""

    @abstractmethod
    def generate(
        self,
        *,
        image_base64: str,
        mime_type: str,
        prompt: str,
        response_schema: dict[str, object],
    ) -> str:
        """Return the provider's JSON answer as plain text."""
