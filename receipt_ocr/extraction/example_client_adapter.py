"""Example vision client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseVisionClient and register the provider in ExtractorFactory.
"""

import json
from typing import ClassVar

from receipt_ocr.extraction.client_base import BaseVisionClient


class ExampleClientAdapter(BaseVisionClient):
    """Returns a fixed answer for every image. No network calls.

    The answer carries the keys of both built-in schemas, so it parses under
    either of them.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "store_name": "Example Store",
        "total_amount": 0,
        "transaction_date": "N/A",
        "invoice_number": "N/A",
        "company_name": "Example Company",
        "invoice_date": "N/A",
    }

    def __init__(self, response: dict[str, object] | None = None) -> None:
        self._response = response if response is not None else self.DEFAULT_RESPONSE

    def generate(
        self,
        *,
        image_base64: str,
        mime_type: str,
        prompt: str,
        response_schema: dict[str, object],
    ) -> str:
        _ = image_base64, mime_type, prompt, response_schema
        return json.dumps(self._response)
