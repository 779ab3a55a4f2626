"""Model routing models for captain_claw."""

from enum import StrEnum

from pydantic import BaseModel

__all__ = [
    "ComplexityHint",
    "ModelSelection",
    "ProviderFamily",
]


class ProviderFamily(StrEnum):
    """Backend families a canonical model id can dispatch to."""

    OPENAI = "openai"
    OPENROUTER = "openrouter"
    LOCAL = "local"


class ComplexityHint(StrEnum):
    """Coarse request categories used when no model is requested."""

    SIMPLE = "simple"
    CODING = "coding"
    FRONTEND = "frontend"
    HARD = "hard"


class ModelSelection(BaseModel, frozen=True):
    """A canonical model id tagged with the provider family serving it.

    Recomputed on every request, never persisted.
    """

    canonical_id: str
    provider_family: ProviderFamily
