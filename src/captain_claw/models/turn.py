"""Conversation turn models for captain_claw.

Turns are the role-tagged units sent to an LLM provider.
"""

from enum import StrEnum

from pydantic import BaseModel

__all__ = [
    "ConversationTurn",
    "Role",
]


class Role(StrEnum):
    """Roles a provider understands."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class ConversationTurn(BaseModel, frozen=True):
    """One role-tagged message in the ordered sequence sent to a provider.

    Attributes:
        role: Speaker role
        content: Message text
    """

    role: Role
    content: str

    def to_message(self) -> dict[str, str]:
        """Convert to the OpenAI-style wire dict."""
        return {"role": self.role.value, "content": self.content}
