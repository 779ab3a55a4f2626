"""captain_claw - LLM chat orchestration and document extraction core.

This package provides tools for:
- Extracting plain text from uploaded PDF, Excel and Word documents
- Routing requests to OpenAI, OpenRouter or a local Ollama model
- Assembling document context and recent history into one prompt
- Normalizing provider replies into a uniform chat result

Example usage:
    from captain_claw import ChatOrchestrator, MongoStorageRepository
    from captain_claw.config import MongoSettings

    storage = await MongoStorageRepository.from_config(MongoSettings())
    async with ChatOrchestrator.from_config(storage) as chat:
        result = await chat.handle_chat(
            system_prompt="You are terse.",
            new_message="Summarize the attached report",
            file_refs=[file_id],
        )
"""

__version__ = "0.1.0"

# Config
from captain_claw.config import CaptainClawConfig

# Errors
from captain_claw.exceptions import (
    AuthError,
    CaptainClawError,
    ConfigurationError,
    ExtractionError,
    NotFoundError,
    ProviderError,
    RateLimitError,
    UnavailableError,
    UnsupportedTypeError,
    ValidationError,
)

# Extraction
from captain_claw.extraction import ExtractorRegistry, TextExtractor

# Implementations
from captain_claw.infra.llm import OllamaProvider, OpenAIProvider, OpenRouterProvider
from captain_claw.infra.mongo import MongoStorageRepository

# Interfaces
from captain_claw.interfaces import ProviderInterface, StorageInterface

# Models
from captain_claw.models import (
    ChatResult,
    ConversationRecord,
    ConversationTurn,
    ExtractedDocument,
    FileRecord,
    MessageRecord,
    ModelSelection,
    ProjectRecord,
)

# Orchestrator
from captain_claw.orchestrator import ChatOrchestrator

# Services
from captain_claw.services import ModelRouter, PromptAssembler, ProviderGateway, UploadService
from captain_claw.services.conversation import ConversationService, SentMessage

__all__ = [  # noqa: RUF022
    # Config
    "CaptainClawConfig",
    # Orchestrator
    "ChatOrchestrator",
    # Services
    "ConversationService",
    "ModelRouter",
    "PromptAssembler",
    "ProviderGateway",
    "SentMessage",
    "UploadService",
    # Extraction
    "ExtractorRegistry",
    "TextExtractor",
    # Implementations
    "MongoStorageRepository",
    "OllamaProvider",
    "OpenAIProvider",
    "OpenRouterProvider",
    # Interfaces
    "ProviderInterface",
    "StorageInterface",
    # Models
    "ChatResult",
    "ConversationRecord",
    "ConversationTurn",
    "ExtractedDocument",
    "FileRecord",
    "MessageRecord",
    "ModelSelection",
    "ProjectRecord",
    # Errors
    "AuthError",
    "CaptainClawError",
    "ConfigurationError",
    "ExtractionError",
    "NotFoundError",
    "ProviderError",
    "RateLimitError",
    "UnavailableError",
    "UnsupportedTypeError",
    "ValidationError",
]
