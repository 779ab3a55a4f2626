"""Storage interface for captain_claw.

This module defines the Protocol for the persistence collaborator.
"""

from collections.abc import Sequence
from datetime import datetime
from typing import ClassVar, Literal, Protocol, runtime_checkable

from captain_claw.models.records import (
    ConversationRecord,
    FileRecord,
    MessageRecord,
    ProjectRecord,
)

__all__ = [
    "StorageInterface",
]


@runtime_checkable
class StorageInterface(Protocol):
    """Contract for row-level persistence by id.

    Implementations provide lookups and inserts for projects,
    conversations, messages and uploaded files.
    """

    config_class: ClassVar[type | None] = None

    # Project operations
    async def save_project(self, project: ProjectRecord) -> str:
        """Save or replace a project.

        Returns:
            Project ID
        """
        ...

    async def get_project(self, project_id: str) -> ProjectRecord | None:
        """Get a project by ID.

        Returns:
            ProjectRecord if found, None otherwise
        """
        ...

    # Conversation operations
    async def save_conversation(self, conversation: ConversationRecord) -> str:
        """Save or replace a conversation.

        Returns:
            Conversation ID
        """
        ...

    async def get_conversation(self, conversation_id: str) -> ConversationRecord | None:
        """Get a conversation by ID.

        Returns:
            ConversationRecord if found, None otherwise
        """
        ...

    async def touch_conversation(
        self,
        conversation_id: str,
        when: datetime | None = None,
    ) -> None:
        """Set a conversation's updated_at (defaults to now)."""
        ...

    # Message operations
    async def insert_message(self, message: MessageRecord) -> str:
        """Append a message.

        Returns:
            Message ID
        """
        ...

    async def get_messages_since(
        self,
        conversation_id: str,
        limit: int,
        order: Literal["asc", "desc"] = "asc",
    ) -> list[MessageRecord]:
        """Get up to limit messages of a conversation by creation time.

        With order="asc" the most recent limit messages are returned,
        oldest first. With order="desc" they are returned newest first.

        Args:
            conversation_id: Conversation to query
            limit: Maximum number of messages
            order: Ordering of the returned list

        Returns:
            List of messages
        """
        ...

    async def get_all_messages(self, conversation_id: str) -> list[MessageRecord]:
        """Get every message of a conversation, oldest first."""
        ...

    # File operations
    async def insert_file(self, file: FileRecord) -> str:
        """Save an uploaded file record.

        Returns:
            File ID
        """
        ...

    async def get_files_by_ids(self, file_ids: Sequence[str]) -> list[FileRecord]:
        """Get file records for the given IDs.

        Unknown IDs are skipped; result order is unspecified.
        """
        ...
