"""Persisted record models for captain_claw.

These mirror the rows the storage layer keeps for projects,
conversations, messages and uploaded files.
"""

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from captain_claw.models.document import ExtractionStatus

__all__ = [
    "ConversationRecord",
    "FileRecord",
    "MessageRecord",
    "ProjectRecord",
    "utc_now",
]


def utc_now() -> datetime:
    """Get the current time as an aware UTC datetime."""
    return datetime.now(UTC)


class ProjectRecord(BaseModel, frozen=True):
    """A project with its assistant and document formatting preferences."""

    id: str
    name: str
    description: str = ""
    system_prompt: str = ""
    tone: str = "professional"
    language: str = "English"
    font_family: str = "Times New Roman"
    font_size: int = 12
    line_spacing: float = 1.5
    heading_font_size: int = 14
    heading_bold: bool = True
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class ConversationRecord(BaseModel, frozen=True):
    """A conversation inside a project."""

    id: str
    project_id: str
    title: str = "New Conversation"
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class MessageRecord(BaseModel, frozen=True):
    """A stored chat message.

    Role is a free string: stored history may contain rows (tool output,
    system notes) that must never be forwarded to a provider as history.
    """

    id: str
    conversation_id: str
    role: str
    content: str
    referenced_files: list[str] = Field(default_factory=list)
    model_used: str | None = None
    tokens_used: int | None = None
    created_at: datetime = Field(default_factory=utc_now)


class FileRecord(BaseModel, frozen=True):
    """An uploaded document with its extracted text."""

    id: str
    project_id: str
    filename: str
    file_path: str
    file_type: str
    file_size: int = 0
    extracted_text: str = ""
    extraction_status: ExtractionStatus = ExtractionStatus.OK
    created_at: datetime = Field(default_factory=utc_now)
