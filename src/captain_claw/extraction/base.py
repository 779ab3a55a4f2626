"""Base document extractor for captain_claw.

This module defines the abstract base class for per-format extractors.
"""

from abc import ABC, abstractmethod
from pathlib import Path

__all__ = [
    "DocumentExtractor",
    "normalize_extension",
]


def normalize_extension(declared_type: str) -> str:
    """Normalize a declared file type to a bare lowercase extension.

    ".PDF", "pdf" and " Pdf " all become "pdf".
    """
    return declared_type.strip().lower().lstrip(".")


class DocumentExtractor(ABC):
    """Abstract base class for document text extractors.

    Extractors turn one file format into plain text. They must not
    persist anything; any library error is left to propagate so the
    caller can wrap it.

    Example:
        class CsvExtractor(DocumentExtractor):
            extensions = ("csv",)

            def extract(self, path: Path) -> str:
                return path.read_text(encoding="utf-8")
    """

    extensions: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        """Return a short identifier used in logs."""
        return type(self).__name__

    @abstractmethod
    def extract(self, path: Path) -> str:
        """Extract plain text from the file at path.

        Args:
            path: File to read

        Returns:
            Extracted text (may be empty)
        """
        ...
