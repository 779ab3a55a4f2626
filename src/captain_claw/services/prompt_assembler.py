"""Prompt assembly service for captain_claw.

This module merges document context, truncated history and the new
user message into the ordered turn list sent to a provider.
"""

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from captain_claw.logging import get_logger
from captain_claw.models.records import FileRecord
from captain_claw.models.turn import ConversationTurn, Role

__all__ = [
    "AssembledPrompt",
    "HistoryEntry",
    "PromptAssembler",
]

logger = get_logger(__name__)

HISTORY_ROLES = frozenset({Role.USER.value, Role.ASSISTANT.value})


class HistoryEntry(Protocol):
    """Anything with a role and content, such as a stored message row."""

    @property
    def role(self) -> str: ...

    @property
    def content(self) -> Any: ...


@dataclass(frozen=True)
class AssembledPrompt:
    """System prompt plus the ordered turns for one provider call.

    The system prompt is kept apart from the turns; each provider
    variant decides how to inject it.
    """

    system_prompt: str
    turns: tuple[ConversationTurn, ...]


class PromptAssembler:
    """Builds provider-ready turn lists.

    Example:
        assembler = PromptAssembler(history_limit=10)
        prompt = assembler.assemble("You are terse.", "", history, "hi")
    """

    def __init__(self, history_limit: int = 10) -> None:
        """Initialize assembler.

        Args:
            history_limit: Number of most recent history entries considered
        """
        if history_limit < 0:
            raise ValueError("history_limit must be >= 0")
        self._history_limit = history_limit

    @property
    def history_limit(self) -> int:
        return self._history_limit

    def assemble(
        self,
        system_prompt: str | None,
        file_context: str | None,
        history: Sequence[HistoryEntry],
        new_message: str,
    ) -> AssembledPrompt:
        """Assemble the turns for a chat request.

        Takes the most recent history_limit entries (history is expected
        oldest first), drops any entry that is not a user or assistant
        turn, then appends the new user turn. File context goes in front
        of the new message inside that same final turn.

        Args:
            system_prompt: Project system prompt
            file_context: Concatenated document text, may be empty
            history: Stored messages ordered by creation time ascending
            new_message: Raw text of the new user message

        Returns:
            AssembledPrompt with the system prompt and ordered turns
        """
        window = list(history)[-self._history_limit :] if self._history_limit else []
        turns = [
            ConversationTurn(role=Role(entry.role), content=self._content_text(entry.content))
            for entry in window
            if entry.role in HISTORY_ROLES
        ]

        content = new_message
        if file_context:
            content = f"Document Context:\n{file_context}\n\n{new_message}"
        turns.append(ConversationTurn(role=Role.USER, content=content))

        logger.debug(
            "prompt_assembled",
            history_considered=len(window),
            history_used=len(turns) - 1,
            has_file_context=bool(file_context),
        )

        return AssembledPrompt(system_prompt=system_prompt or "", turns=tuple(turns))

    @staticmethod
    def build_file_context(files: Sequence[FileRecord]) -> str:
        """Concatenate extracted file text with a header per file.

        Files keep the order given.
        """
        return "\n---\n".join(
            f"\n[File: {file.filename}]\n{file.extracted_text}" for file in files
        )

    @staticmethod
    def _content_text(content: Any) -> str:
        if isinstance(content, str):
            return content
        return json.dumps(content, ensure_ascii=False)
