"""Text extraction facade for captain_claw.

TextExtractor dispatches on declared type and normalizes failures:
extract() raises, extract_document() degrades to placeholder text.
"""

import asyncio
from pathlib import Path

from captain_claw.exceptions import ExtractionError
from captain_claw.extraction.base import normalize_extension
from captain_claw.extraction.registry import ExtractorRegistry
from captain_claw.logging import get_logger
from captain_claw.models.document import (
    EXTRACTION_FAILED_TEXT,
    ExtractedDocument,
    ExtractionStatus,
)

__all__ = [
    "TextExtractor",
]

logger = get_logger(__name__)


class TextExtractor:
    """Extracts plain text from uploaded documents.

    Example:
        extractor = TextExtractor()
        text = extractor.extract("report.pdf", ".pdf")
        document = extractor.extract_document("broken.xlsx", "xlsx")
        if not document.ok:
            ...
    """

    def __init__(
        self,
        registry: ExtractorRegistry | None = None,
        failed_text: str = EXTRACTION_FAILED_TEXT,
    ) -> None:
        """Initialize extractor.

        Args:
            registry: Extractor registry (defaults to the built-in formats)
            failed_text: Placeholder text stored when extraction fails
        """
        self._registry = registry or ExtractorRegistry()
        self._failed_text = failed_text

    @property
    def registry(self) -> ExtractorRegistry:
        return self._registry

    def supports(self, declared_type: str) -> bool:
        """Check if a declared type can be extracted."""
        return self._registry.is_supported(declared_type)

    def extract(self, path: str | Path, declared_type: str) -> str:
        """Extract text from a file.

        The type is checked before the file is touched.

        Args:
            path: File to read
            declared_type: Declared extension (case-insensitive)

        Returns:
            Extracted plain text

        Raises:
            UnsupportedTypeError: If the type is not supported
            ExtractionError: If the file cannot be read
        """
        extractor = self._registry.get(declared_type)
        file_path = Path(path)
        extension = normalize_extension(declared_type)

        try:
            text = extractor.extract(file_path)
        except Exception as e:
            logger.warning(
                "text_extraction_failed",
                path=str(file_path),
                declared_type=extension,
                extractor=extractor.name,
                error=str(e),
            )
            raise ExtractionError(str(file_path), extension, str(e) or type(e).__name__) from e

        logger.debug(
            "text_extracted",
            path=str(file_path),
            declared_type=extension,
            characters=len(text),
        )
        return text

    def extract_document(self, path: str | Path, declared_type: str) -> ExtractedDocument:
        """Extract text, recovering read failures as a failed document.

        Unsupported types still raise, since nothing can be stored for them.

        Raises:
            UnsupportedTypeError: If the type is not supported
        """
        extension = normalize_extension(declared_type)
        try:
            text = self.extract(path, declared_type)
        except ExtractionError as e:
            return ExtractedDocument(
                source_path=str(path),
                declared_type=extension,
                text=self._failed_text,
                status=ExtractionStatus.FAILED,
                failure_reason=e.reason,
            )
        return ExtractedDocument(
            source_path=str(path),
            declared_type=extension,
            text=text,
        )

    async def extract_async(self, path: str | Path, declared_type: str) -> str:
        """Run extract() in a worker thread."""
        return await asyncio.to_thread(self.extract, path, declared_type)

    async def extract_document_async(
        self,
        path: str | Path,
        declared_type: str,
    ) -> ExtractedDocument:
        """Run extract_document() in a worker thread."""
        return await asyncio.to_thread(self.extract_document, path, declared_type)
