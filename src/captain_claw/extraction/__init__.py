"""Document text extraction for captain_claw.

This module exports the extractor base class, registry and facade.
"""

from captain_claw.extraction.base import DocumentExtractor, normalize_extension
from captain_claw.extraction.extractor import TextExtractor
from captain_claw.extraction.pdf import PdfExtractor
from captain_claw.extraction.registry import ExtractorRegistry
from captain_claw.extraction.spreadsheet import XlsExtractor, XlsxExtractor
from captain_claw.extraction.word import WordExtractor

__all__ = [
    "DocumentExtractor",
    "ExtractorRegistry",
    "PdfExtractor",
    "TextExtractor",
    "WordExtractor",
    "XlsExtractor",
    "XlsxExtractor",
    "normalize_extension",
]
