"""MongoDB repositories for captain_claw.

This module provides the StorageInterface implementation for MongoDB.
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Any, Literal, Self

from captain_claw.config import MongoSettings
from captain_claw.infra.mongo.client import MongoClient
from captain_claw.interfaces.storage import StorageInterface
from captain_claw.logging import get_logger
from captain_claw.models.records import (
    ConversationRecord,
    FileRecord,
    MessageRecord,
    ProjectRecord,
    utc_now,
)

__all__ = [
    "MongoStorageRepository",
]

logger = get_logger(__name__)

# Rows written in the same millisecond fall back to insertion order (_id)
_OLDEST_FIRST = [("created_at", 1), ("_id", 1)]
_NEWEST_FIRST = [("created_at", -1), ("_id", -1)]


class MongoStorageRepository(StorageInterface):
    """MongoDB implementation of StorageInterface.

    Records are stored as their pydantic dumps; Mongo's "_id" is
    stripped on the way out.
    """

    config_class = MongoSettings

    def __init__(self, client: MongoClient) -> None:
        """Initialize repository with MongoDB client.

        Args:
            client: Connected MongoClient instance
        """
        self._client = client
        self._owns_client = False

    @classmethod
    async def from_config(cls, config: MongoSettings) -> Self:
        """Create a MongoClient, connect, create indexes and return a repository."""
        client = MongoClient(config)
        await client.connect()
        await client.create_indexes()

        instance = cls(client)
        instance._owns_client = True
        return instance

    @classmethod
    async def from_dict(cls, config: dict[str, Any]) -> Self:
        """Factory method for custom config dict."""
        return await cls.from_config(MongoSettings(**config))

    async def close(self) -> None:
        """Close owned resources."""
        if self._owns_client and self._client:
            await self._client.disconnect()

    # Project operations
    async def save_project(self, project: ProjectRecord) -> str:
        await self._client.projects.replace_one(
            {"id": project.id}, project.model_dump(), upsert=True
        )
        return project.id

    async def get_project(self, project_id: str) -> ProjectRecord | None:
        doc = await self._client.projects.find_one({"id": project_id})
        return ProjectRecord.model_validate(_strip_id(doc)) if doc else None

    # Conversation operations
    async def save_conversation(self, conversation: ConversationRecord) -> str:
        await self._client.conversations.replace_one(
            {"id": conversation.id}, conversation.model_dump(), upsert=True
        )
        return conversation.id

    async def get_conversation(self, conversation_id: str) -> ConversationRecord | None:
        doc = await self._client.conversations.find_one({"id": conversation_id})
        return ConversationRecord.model_validate(_strip_id(doc)) if doc else None

    async def touch_conversation(
        self,
        conversation_id: str,
        when: datetime | None = None,
    ) -> None:
        await self._client.conversations.update_one(
            {"id": conversation_id},
            {"$set": {"updated_at": when or utc_now()}},
        )

    # Message operations
    async def insert_message(self, message: MessageRecord) -> str:
        await self._client.messages.insert_one(message.model_dump())
        return message.id

    async def get_messages_since(
        self,
        conversation_id: str,
        limit: int,
        order: Literal["asc", "desc"] = "asc",
    ) -> list[MessageRecord]:
        """Get the most recent limit messages in the requested order."""
        cursor = (
            self._client.messages.find({"conversation_id": conversation_id})
            .sort(_NEWEST_FIRST)
            .limit(limit)
        )
        newest_first = [MessageRecord.model_validate(_strip_id(doc)) async for doc in cursor]
        if order == "asc":
            newest_first.reverse()
        return newest_first

    async def get_all_messages(self, conversation_id: str) -> list[MessageRecord]:
        cursor = self._client.messages.find({"conversation_id": conversation_id}).sort(
            _OLDEST_FIRST
        )
        return [MessageRecord.model_validate(_strip_id(doc)) async for doc in cursor]

    # File operations
    async def insert_file(self, file: FileRecord) -> str:
        await self._client.files.insert_one(file.model_dump())
        return file.id

    async def get_files_by_ids(self, file_ids: Sequence[str]) -> list[FileRecord]:
        if not file_ids:
            return []
        cursor = self._client.files.find({"id": {"$in": list(file_ids)}})
        return [FileRecord.model_validate(_strip_id(doc)) async for doc in cursor]


def _strip_id(doc: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in doc.items() if key != "_id"}
