"""AI-powered structured data extractor for receipt and invoice images."""

import json
from pathlib import Path

from receipt_ocr.extraction.base import BaseExtractor
from receipt_ocr.extraction.client_base import BaseVisionClient
from receipt_ocr.extraction.exceptions import ExtractionParseError
from receipt_ocr.extraction.models import ExtractedRecord, RecordSchema
from receipt_ocr.extraction.prompt_loader import load_prompt, load_response_schema
from receipt_ocr.extraction.record_builder import build_record
from receipt_ocr.logging.logger import Log


class Extractor(BaseExtractor):
    """Extracts a fixed field set from an image using a vision model."""

    def __init__(
        self,
        *,
        client: BaseVisionClient,
        schema: RecordSchema,
        prompt_path: Path | None = None,
        response_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self.schema = schema
        self._prompt = load_prompt(schema.name, prompt_path)
        self._response_schema = json.loads(load_response_schema(schema.name, response_schema_path))

    def extract(self, image_base64: str, mime_type: str) -> ExtractedRecord:
        raw_response = self._client.generate(
            image_base64=image_base64,
            mime_type=mime_type,
            prompt=self._prompt,
            response_schema=self._response_schema,
        )
        Log.debug(f"Vision model raw response:\n{raw_response}")

        record = build_record(self._parse_json(raw_response), self.schema)
        Log.info(f"Extraction complete: {record.values}")
        return record

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise ExtractionParseError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise ExtractionParseError("JSON response must be an object")
        return parsed
