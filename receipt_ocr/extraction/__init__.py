from receipt_ocr.extraction.base import BaseExtractor
from receipt_ocr.extraction.extractor import Extractor
from receipt_ocr.extraction.factory import ExtractorFactory

__all__ = ["BaseExtractor", "Extractor", "ExtractorFactory"]

