"""Extracted document models for captain_claw.

These models represent the plain-text form of an uploaded document.
"""

from enum import StrEnum

from pydantic import BaseModel, Field

from captain_claw.utils.text import summarize_text, text_metadata

__all__ = [
    "EXTRACTION_FAILED_TEXT",
    "ExtractedDocument",
    "ExtractionStatus",
]

EXTRACTION_FAILED_TEXT = "[Text extraction failed - file may be corrupted]"


class ExtractionStatus(StrEnum):
    """Outcome of a text extraction."""

    OK = "ok"
    FAILED = "failed"


class ExtractedDocument(BaseModel, frozen=True):
    """Plain-text representation of an uploaded document.

    Produced once at upload time. A failed extraction still yields a
    document: its text is the fixed placeholder so it can be used as
    chat context, and status/failure_reason tell callers what happened.

    Attributes:
        source_path: Path the text was read from
        declared_type: Normalized extension (without leading dot)
        text: Extracted text, or the placeholder on failure
        status: Extraction outcome
        failure_reason: Error description when status is FAILED
    """

    source_path: str
    declared_type: str
    text: str = ""
    status: ExtractionStatus = Field(default=ExtractionStatus.OK)
    failure_reason: str | None = None

    @property
    def ok(self) -> bool:
        """Check if the text came from a successful extraction."""
        return self.status == ExtractionStatus.OK

    def summary(self, max_length: int = 500) -> str:
        """Get a short preview of the extracted text."""
        return summarize_text(self.text, max_length)

    def metadata(self) -> dict[str, int]:
        """Get character/word/line/paragraph counts for the text."""
        return text_metadata(self.text)
