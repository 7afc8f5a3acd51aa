import base64
import binascii

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from receipt_ocr.extraction.client_base import BaseVisionClient
from receipt_ocr.extraction.exceptions import ExtractionError, ExtractionNetworkError


class GeminiClientAdapter(BaseVisionClient):
    """Vision client adapter for Gemini models served by Vertex AI."""

    def __init__(
        self,
        *,
        model: str,
        location: str,
        project: str | None = None,
        temperature: float = 0.0,
    ) -> None:
        self._client = genai.Client(vertexai=True, project=project or None, location=location)
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))

    def generate(
        self,
        *,
        image_base64: str,
        mime_type: str,
        prompt: str,
        response_schema: dict[str, object],
    ) -> str:
        try:
            image = base64.b64decode(image_base64, validate=True)
        except binascii.Error as exc:
            raise ExtractionError(f"Image payload is not valid base64: {exc}") from exc

        try:
            response = self._client.models.generate_content(
                model=self._model,
                contents=[types.Part.from_bytes(data=image, mime_type=mime_type), prompt],
                config=types.GenerateContentConfig(
                    temperature=self._temperature,
                    response_mime_type="application/json",
                    response_schema=response_schema,
                ),
            )
        except genai_errors.APIError as exc:
            raise ExtractionNetworkError(f"Gemini API error: {exc}") from exc

        text = response.text
        if not text:
            raise ExtractionError("Gemini returned empty response")
        return text
