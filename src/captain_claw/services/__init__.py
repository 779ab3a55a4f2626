"""Service layer for captain_claw.

This module exports the main service entry points.
"""

from captain_claw.services.gateway import ProviderGateway
from captain_claw.services.model_router import (
    COMPLEXITY_ROUTES,
    MODEL_ALIASES,
    ModelRouter,
    provider_family_for,
)
from captain_claw.services.prompt_assembler import AssembledPrompt, PromptAssembler
from captain_claw.services.upload import UploadService

__all__ = [
    "COMPLEXITY_ROUTES",
    "MODEL_ALIASES",
    "AssembledPrompt",
    "ModelRouter",
    "PromptAssembler",
    "ProviderGateway",
    "UploadService",
    "provider_family_for",
]
