"""Chat orchestrator for captain_claw.

This module provides the top-level chat entry point: it routes the
model, gathers persisted document text, assembles the prompt and
dispatches it to a provider.
"""

from collections.abc import Sequence
from typing import Any

from captain_claw.config import CaptainClawConfig
from captain_claw.exceptions import CaptainClawError
from captain_claw.interfaces.storage import StorageInterface
from captain_claw.logging import get_logger
from captain_claw.models.records import FileRecord
from captain_claw.models.result import ChatResult
from captain_claw.models.routing import ComplexityHint
from captain_claw.services.gateway import ProviderGateway
from captain_claw.services.model_router import ModelRouter
from captain_claw.services.prompt_assembler import HistoryEntry, PromptAssembler

__all__ = ["ChatOrchestrator"]

logger = get_logger(__name__)


class ChatOrchestrator:
    """Runs one chat request end to end, without persisting it.

    Steps run strictly in order: resolve model, read file text,
    assemble prompt, dispatch. Provider failures propagate unchanged;
    nothing is retried.

    Example:
        async with ChatOrchestrator.from_config(storage) as chat:
            result = await chat.handle_chat("You are terse.", "hi")
    """

    def __init__(
        self,
        storage: StorageInterface,
        gateway: ProviderGateway,
        *,
        router: ModelRouter | None = None,
        assembler: PromptAssembler | None = None,
    ) -> None:
        """Initialize orchestrator with its collaborators.

        Args:
            storage: Storage used to read persisted file text
            gateway: Provider gateway for dispatch
            router: Model router (defaults to the built-in tables)
            assembler: Prompt assembler (defaults to a 10-turn history)
        """
        self._storage = storage
        self._gateway = gateway
        self._router = router or ModelRouter()
        self._assembler = assembler or PromptAssembler()

    @classmethod
    def from_config(
        cls,
        storage: StorageInterface,
        config: CaptainClawConfig | None = None,
    ) -> "ChatOrchestrator":
        """Build an orchestrator with providers from configuration."""
        config = config or CaptainClawConfig()
        return cls(
            storage,
            ProviderGateway.from_settings(config.llm),
            assembler=PromptAssembler(history_limit=config.chat.history_limit),
        )

    @property
    def router(self) -> ModelRouter:
        return self._router

    @property
    def assembler(self) -> PromptAssembler:
        return self._assembler

    async def close(self) -> None:
        """Close provider clients."""
        await self._gateway.close()

    async def __aenter__(self) -> "ChatOrchestrator":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        await self.close()

    async def handle_chat(
        self,
        system_prompt: str | None,
        new_message: str,
        file_refs: Sequence[str] = (),
        history: Sequence[HistoryEntry] = (),
        explicit_model: str | None = None,
        complexity_hint: ComplexityHint | str | None = None,
    ) -> ChatResult:
        """Answer a chat message.

        Args:
            system_prompt: Project system prompt
            new_message: New user message text
            file_refs: IDs of uploaded files to use as context, in order
            history: Stored messages, oldest first
            explicit_model: Canonical model id requested by the user
            complexity_hint: Routing hint used when no model is requested

        Returns:
            ChatResult from the provider

        Raises:
            ConfigurationError: If the model id cannot be routed
            ProviderError: If the provider call fails (or a subclass)
        """
        # Step 1: Routing errors surface before any I/O
        selection = self._router.resolve(explicit_model, complexity_hint)

        # Step 2: Read already-extracted text for referenced files
        file_context = ""
        if file_refs:
            files = await self._load_files(file_refs)
            file_context = self._assembler.build_file_context(files)

        # Step 3: Assemble
        prompt = self._assembler.assemble(system_prompt, file_context, history, new_message)

        # Step 4: Dispatch
        try:
            return await self._gateway.send(prompt.turns, prompt.system_prompt, selection)
        except CaptainClawError as e:
            logger.warning(
                "chat_dispatch_failed",
                model_id=selection.canonical_id,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise

    async def _load_files(self, file_refs: Sequence[str]) -> list[FileRecord]:
        """Fetch file records and order them as referenced."""
        records = await self._storage.get_files_by_ids(list(file_refs))
        by_id = {record.id: record for record in records}

        missing = [ref for ref in file_refs if ref not in by_id]
        if missing:
            logger.warning("referenced_files_missing", file_ids=missing)

        return [by_id[ref] for ref in dict.fromkeys(file_refs) if ref in by_id]
