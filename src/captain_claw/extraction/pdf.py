"""PDF text extraction using pypdf."""

from pathlib import Path

from pypdf import PdfReader

from captain_claw.extraction.base import DocumentExtractor

__all__ = [
    "PdfExtractor",
]


class PdfExtractor(DocumentExtractor):
    """Extracts page text in document order.

    Pages are joined with a newline only; no page markers are emitted.
    """

    extensions = ("pdf",)

    def extract(self, path: Path) -> str:
        reader = PdfReader(path)
        return "\n".join(page.extract_text() or "" for page in reader.pages)
