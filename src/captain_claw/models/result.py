"""Chat result model for captain_claw."""

from pydantic import BaseModel, Field

__all__ = [
    "ChatResult",
]


class ChatResult(BaseModel, frozen=True):
    """Provider-independent chat completion result.

    Attributes:
        content: Completion text
        model_id: Model id that served the request
        token_count: Total tokens reported by the provider (0 when the
            provider does not report usage)
    """

    content: str
    model_id: str
    token_count: int = Field(default=0, ge=0)
