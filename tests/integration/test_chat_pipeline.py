"""Integration tests for the upload-then-chat pipeline."""

from pathlib import Path
from unittest.mock import MagicMock

import httpx
import openai
import pytest
import pytest_asyncio

from captain_claw.config import LLMSettings
from captain_claw.exceptions import RateLimitError
from captain_claw.extraction import TextExtractor
from captain_claw.infra.llm import OpenRouterProvider
from captain_claw.infra.mongo.repositories import MongoStorageRepository
from captain_claw.models.document import EXTRACTION_FAILED_TEXT, ExtractionStatus
from captain_claw.models.records import ConversationRecord, ProjectRecord
from captain_claw.models.routing import ProviderFamily
from captain_claw.orchestrator import ChatOrchestrator
from captain_claw.services.conversation import ConversationService
from captain_claw.services.gateway import ProviderGateway
from captain_claw.services.upload import UploadService

from mocks.factories import make_completion
from mocks.mock_mongo import MockMongoClient

HAIKU = "openrouter/anthropic/claude-haiku-4.5"


@pytest_asyncio.fixture
async def repository(
    sample_project: ProjectRecord,
    sample_conversation: ConversationRecord,
) -> MongoStorageRepository:
    """Create repository seeded with a project and a conversation."""
    repository = MongoStorageRepository(MockMongoClient())
    await repository.save_project(sample_project)
    await repository.save_conversation(sample_conversation)
    return repository


@pytest.fixture
def chat_service(
    repository: MongoStorageRepository,
    llm_settings: LLMSettings,
    mock_openai_client: MagicMock,
) -> ConversationService:
    """Create conversation service dispatching to a mocked OpenRouter client."""
    provider = OpenRouterProvider(llm_settings, client=mock_openai_client)
    orchestrator = ChatOrchestrator(
        repository,
        ProviderGateway({ProviderFamily.OPENROUTER: provider}),
    )
    return ConversationService(repository, orchestrator)


@pytest.fixture
def upload_service(repository: MongoStorageRepository) -> UploadService:
    """Create upload service with the built-in extractors."""
    return UploadService(repository, TextExtractor())


def _sent_messages(client: MagicMock, call_index: int = -1) -> list[dict[str, str]]:
    return client.chat.completions.create.call_args_list[call_index].kwargs["messages"]


class TestUploadThenChat:
    """Upload documents, then ask about them."""

    @pytest.mark.asyncio
    async def test_document_text_reaches_provider(
        self,
        upload_service: UploadService,
        chat_service: ConversationService,
        mock_openai_client: MagicMock,
        docx_file: Path,
        xlsx_file: Path,
    ) -> None:
        report = await upload_service.upload("proj-1", docx_file, "report.docx")
        budget = await upload_service.upload("proj-1", xlsx_file, "budget.xlsx")

        sent = await chat_service.send_message(
            "proj-1", "conv-1", "What grew?", referenced_file_ids=[budget.id, report.id]
        )

        messages = _sent_messages(mock_openai_client)
        assert messages[0]["role"] == "system"
        final = messages[-1]["content"]
        assert final.startswith("Document Context:\n\n[File: budget.xlsx]\n")
        assert "Widgets\t42" in final
        assert "Revenue grew in every region." in final
        assert final.index("budget.xlsx") < final.index("report.docx")
        assert final.endswith("\n\nWhat grew?")
        assert sent.model == HAIKU
        assert sent.tokens_used == 42

    @pytest.mark.asyncio
    async def test_corrupt_upload_is_still_usable(
        self,
        upload_service: UploadService,
        chat_service: ConversationService,
        repository: MongoStorageRepository,
        mock_openai_client: MagicMock,
        tmp_path: Path,
    ) -> None:
        path = tmp_path / "upload.pdf"
        path.write_bytes(b"%PDF-1.4 truncated")

        record = await upload_service.upload("proj-1", path, "scan.pdf")
        stored = await repository.get_files_by_ids([record.id])

        assert stored[0].extraction_status == ExtractionStatus.FAILED
        assert stored[0].extracted_text == EXTRACTION_FAILED_TEXT

        await chat_service.send_message(
            "proj-1", "conv-1", "Read this", referenced_file_ids=[record.id]
        )
        assert EXTRACTION_FAILED_TEXT in _sent_messages(mock_openai_client)[-1]["content"]


class TestConversationFlow:
    """Multi-turn conversations against stored history."""

    @pytest.mark.asyncio
    async def test_second_message_sees_first_exchange(
        self,
        chat_service: ConversationService,
        mock_openai_client: MagicMock,
    ) -> None:
        mock_openai_client.chat.completions.create.side_effect = [
            make_completion("First answer"),
            make_completion("Second answer"),
        ]

        await chat_service.send_message("proj-1", "conv-1", "First question")
        await chat_service.send_message("proj-1", "conv-1", "Second question")

        messages = _sent_messages(mock_openai_client)
        assert [(m["role"], m["content"]) for m in messages[1:]] == [
            ("user", "First question"),
            ("assistant", "First answer"),
            ("user", "Second question"),
        ]

        history = await chat_service.get_history("conv-1")
        assert [m.content for m in history] == [
            "First question",
            "First answer",
            "Second question",
            "Second answer",
        ]
        assert history[1].model_used == HAIKU

    @pytest.mark.asyncio
    async def test_touch_updates_conversation(
        self,
        chat_service: ConversationService,
        repository: MongoStorageRepository,
        sample_conversation: ConversationRecord,
    ) -> None:
        await chat_service.send_message("proj-1", "conv-1", "hi")

        conversation = await repository.get_conversation("conv-1")
        assert conversation is not None
        assert conversation.updated_at > sample_conversation.updated_at

    @pytest.mark.asyncio
    async def test_rate_limit_leaves_history_untouched(
        self,
        chat_service: ConversationService,
        mock_openai_client: MagicMock,
    ) -> None:
        response = httpx.Response(
            429, request=httpx.Request("POST", "https://openrouter.ai/api/v1/chat/completions")
        )
        mock_openai_client.chat.completions.create.side_effect = openai.RateLimitError(
            "slow down", response=response, body=None
        )

        with pytest.raises(RateLimitError):
            await chat_service.send_message("proj-1", "conv-1", "hi")

        assert await chat_service.get_history("conv-1") == []
        assert mock_openai_client.chat.completions.create.call_count == 1
