"""Extractor registry for captain_claw.

This module maps declared file extensions to extractor instances.
"""

from captain_claw.exceptions import UnsupportedTypeError
from captain_claw.extraction.base import DocumentExtractor, normalize_extension
from captain_claw.extraction.pdf import PdfExtractor
from captain_claw.extraction.spreadsheet import XlsExtractor, XlsxExtractor
from captain_claw.extraction.word import WordExtractor

__all__ = [
    "ExtractorRegistry",
    "default_extractors",
]


def default_extractors() -> list[DocumentExtractor]:
    """Create the built-in extractors for pdf, xlsx, xls, docx and doc."""
    return [PdfExtractor(), XlsxExtractor(), XlsExtractor(), WordExtractor()]


class ExtractorRegistry:
    """Registry of document extractors keyed by extension.

    Each registry is an independent instance; nothing is shared
    between registries.

    Example:
        registry = ExtractorRegistry()
        registry.register(CsvExtractor())
        extractor = registry.get(".CSV")
    """

    def __init__(self, extractors: list[DocumentExtractor] | None = None) -> None:
        self._extractors: dict[str, DocumentExtractor] = {}
        for extractor in default_extractors() if extractors is None else extractors:
            self.register(extractor)

    def register(self, extractor: DocumentExtractor) -> None:
        """Register an extractor for all of its extensions.

        A later registration for the same extension replaces the earlier one.
        """
        for extension in extractor.extensions:
            self._extractors[normalize_extension(extension)] = extractor

    def get(self, declared_type: str) -> DocumentExtractor:
        """Get the extractor for a declared type.

        Args:
            declared_type: Extension, with or without leading dot, any case

        Returns:
            Registered extractor

        Raises:
            UnsupportedTypeError: If no extractor handles the extension
        """
        extension = normalize_extension(declared_type)
        extractor = self._extractors.get(extension)
        if extractor is None:
            raise UnsupportedTypeError(extension or declared_type)
        return extractor

    def is_supported(self, declared_type: str) -> bool:
        """Check if a declared type has a registered extractor."""
        return normalize_extension(declared_type) in self._extractors

    def list_extensions(self) -> list[str]:
        """List all registered extensions."""
        return sorted(self._extractors)
