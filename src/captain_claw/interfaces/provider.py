"""LLM provider interface for captain_claw.

This module defines the Protocol every chat provider variant implements.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from captain_claw.models.result import ChatResult
from captain_claw.models.routing import ProviderFamily
from captain_claw.models.turn import ConversationTurn

__all__ = [
    "ProviderInterface",
]


@runtime_checkable
class ProviderInterface(Protocol):
    """Contract for sending an assembled conversation to an LLM backend."""

    family: ProviderFamily

    async def send(
        self,
        turns: Sequence[ConversationTurn],
        system_prompt: str | None,
        canonical_id: str,
    ) -> ChatResult:
        """Send turns to the provider and normalize the reply.

        Implementations inject a non-empty system prompt as one leading
        system turn and must not retry failed calls.

        Args:
            turns: Assembled history plus the new user turn
            system_prompt: Project system prompt, may be empty
            canonical_id: Provider-prefixed model id

        Returns:
            ChatResult with text, model id and token count

        Raises:
            AuthError: Credential missing or rejected
            RateLimitError: Provider rate limit hit
            UnavailableError: Local runtime not reachable
            ProviderError: Any other provider failure
        """
        ...

    async def close(self) -> None:
        """Release HTTP resources."""
        ...
