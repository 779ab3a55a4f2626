"""Public models for captain_claw.

This module exports all public data transfer objects.
"""

from captain_claw.models.document import (
    EXTRACTION_FAILED_TEXT,
    ExtractedDocument,
    ExtractionStatus,
)
from captain_claw.models.records import (
    ConversationRecord,
    FileRecord,
    MessageRecord,
    ProjectRecord,
)
from captain_claw.models.result import ChatResult
from captain_claw.models.routing import ComplexityHint, ModelSelection, ProviderFamily
from captain_claw.models.turn import ConversationTurn, Role

__all__ = [
    "EXTRACTION_FAILED_TEXT",
    "ChatResult",
    "ComplexityHint",
    "ConversationRecord",
    "ConversationTurn",
    "ExtractedDocument",
    "ExtractionStatus",
    "FileRecord",
    "MessageRecord",
    "ModelSelection",
    "ProjectRecord",
    "ProviderFamily",
    "Role",
]
