"""Conversation service for captain_claw.

This module answers a message inside a stored conversation and
persists the exchange.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from captain_claw.exceptions import NotFoundError, ValidationError
from captain_claw.interfaces.storage import StorageInterface
from captain_claw.logging import get_logger
from captain_claw.models.records import MessageRecord, utc_now
from captain_claw.orchestrator import ChatOrchestrator
from captain_claw.utils.ids import new_id

__all__ = [
    "ConversationService",
    "SentMessage",
]

logger = get_logger(__name__)

DEFAULT_MODEL = "openrouter/anthropic/claude-haiku-4.5"


@dataclass(frozen=True)
class SentMessage:
    """Outcome of sending one message."""

    user_message_id: str
    assistant_message_id: str
    response: str
    model: str
    tokens_used: int


class ConversationService:
    """Service for chatting inside a stored conversation.

    Loads project, conversation and recent history, runs the chat, then
    writes the user row, the assistant row and touches the conversation.
    Nothing is written when the provider call fails.

    Example:
        service = ConversationService(storage, orchestrator)
        sent = await service.send_message(project_id, conversation_id, "hi")
    """

    def __init__(
        self,
        storage: StorageInterface,
        orchestrator: ChatOrchestrator,
        *,
        history_limit: int = 10,
        default_model: str = DEFAULT_MODEL,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            storage: Storage interface for persistence
            orchestrator: Chat orchestrator used to answer
            history_limit: Number of stored messages loaded as history
            default_model: Model used when the request names none
        """
        self._storage = storage
        self._orchestrator = orchestrator
        self._history_limit = history_limit
        self._default_model = default_model

    async def send_message(
        self,
        project_id: str,
        conversation_id: str,
        message: str,
        referenced_file_ids: Sequence[str] = (),
        model: str | None = None,
    ) -> SentMessage:
        """Send a message and store both sides of the exchange.

        Raises:
            ValidationError: If required fields are missing
            NotFoundError: If project or conversation does not exist
            ProviderError: If the provider call fails
        """
        if not project_id or not conversation_id or not message:
            raise ValidationError("Missing required fields")

        project = await self._storage.get_project(project_id)
        if project is None:
            raise NotFoundError("project", project_id)

        conversation = await self._storage.get_conversation(conversation_id)
        if conversation is None or conversation.project_id != project_id:
            raise NotFoundError("conversation", conversation_id)

        history = await self._storage.get_messages_since(
            conversation_id, self._history_limit, order="asc"
        )

        result = await self._orchestrator.handle_chat(
            system_prompt=project.system_prompt,
            new_message=message,
            file_refs=referenced_file_ids,
            history=history,
            explicit_model=model or self._default_model,
        )

        user_message = MessageRecord(
            id=new_id(),
            conversation_id=conversation_id,
            role="user",
            content=message,
            referenced_files=list(referenced_file_ids),
            created_at=utc_now(),
        )
        await self._storage.insert_message(user_message)

        assistant_message = MessageRecord(
            id=new_id(),
            conversation_id=conversation_id,
            role="assistant",
            content=result.content,
            model_used=result.model_id,
            tokens_used=result.token_count,
            created_at=utc_now(),
        )
        await self._storage.insert_message(assistant_message)

        await self._storage.touch_conversation(conversation_id)

        logger.info(
            "message_exchanged",
            conversation_id=conversation_id,
            model_id=result.model_id,
            token_count=result.token_count,
            referenced_files=len(referenced_file_ids),
        )

        return SentMessage(
            user_message_id=user_message.id,
            assistant_message_id=assistant_message.id,
            response=result.content,
            model=result.model_id,
            tokens_used=result.token_count,
        )

    async def get_history(self, conversation_id: str) -> list[MessageRecord]:
        """Get every message of a conversation, oldest first."""
        return await self._storage.get_all_messages(conversation_id)
