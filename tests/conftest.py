"""Shared test fixtures for captain_claw.

This module provides pytest fixtures used across all tests.
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from captain_claw.config import LLMSettings
from captain_claw.models.records import (
    ConversationRecord,
    FileRecord,
    MessageRecord,
    ProjectRecord,
)
from captain_claw.models.result import ChatResult

from mocks.factories import make_completion, make_message


# Settings fixtures
@pytest.fixture
def llm_settings() -> LLMSettings:
    """LLM settings with both remote credentials set."""
    return LLMSettings(
        openai_api_key="sk-openai-test",
        openrouter_api_key="sk-or-test",
        ollama_model="mistral:latest",
        ollama_base_url="http://localhost:11434",
    )


@pytest.fixture
def keyless_settings() -> LLMSettings:
    """LLM settings with no remote credentials."""
    return LLMSettings(openai_api_key=None, openrouter_api_key=None)


# Mock fixtures
@pytest.fixture
def mock_openai_client() -> MagicMock:
    """Create mock AsyncOpenAI client."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=make_completion())
    client.close = AsyncMock()
    return client


@pytest.fixture
def mock_storage(
    sample_project: ProjectRecord,
    sample_conversation: ConversationRecord,
) -> AsyncMock:
    """Create mock storage interface."""
    storage = AsyncMock()
    storage.get_project.return_value = sample_project
    storage.get_conversation.return_value = sample_conversation
    storage.get_messages_since.return_value = []
    storage.get_all_messages.return_value = []
    storage.get_files_by_ids.return_value = []
    storage.insert_message.side_effect = lambda message: message.id
    storage.insert_file.side_effect = lambda file: file.id
    return storage


@pytest.fixture
def mock_gateway() -> AsyncMock:
    """Create mock provider gateway."""
    gateway = AsyncMock()
    gateway.send.return_value = ChatResult(
        content="Hi there!",
        model_id="openrouter/anthropic/claude-haiku-4.5",
        token_count=12,
    )
    return gateway


# Sample data fixtures
@pytest.fixture
def sample_project() -> ProjectRecord:
    """Create sample ProjectRecord."""
    return ProjectRecord(
        id="proj-1",
        name="Sample Project",
        description="Test project to get started",
        system_prompt="You are a helpful AI assistant. Respond in a friendly and clear manner.",
        tone="friendly",
        language="Swedish",
    )


@pytest.fixture
def sample_conversation() -> ConversationRecord:
    """Create sample ConversationRecord."""
    return ConversationRecord(id="conv-1", project_id="proj-1", title="Budget review")


@pytest.fixture
def sample_files() -> list[FileRecord]:
    """Create sample FileRecords with extracted text."""
    return [
        FileRecord(
            id="file-a",
            project_id="proj-1",
            filename="budget.xlsx",
            file_path="/uploads/a.xlsx",
            file_type=".xlsx",
            extracted_text="\n=== Sheet: Q1 ===\nRent\t1200\n",
        ),
        FileRecord(
            id="file-b",
            project_id="proj-1",
            filename="notes.docx",
            file_path="/uploads/b.docx",
            file_type=".docx",
            extracted_text="Cut travel costs.",
        ),
    ]


@pytest.fixture
def stored_history() -> list[MessageRecord]:
    """Create 15 stored messages alternating user/assistant, oldest first."""
    return [
        make_message("user" if i % 2 == 0 else "assistant", f"message {i}", i)
        for i in range(15)
    ]


# Document fixtures
@pytest.fixture
def docx_file(tmp_path: Path) -> Path:
    """Create a small Word document with a paragraph and a table."""
    from docx import Document

    document = Document()
    document.add_heading("Quarterly Report", level=1)
    document.add_paragraph("Revenue grew in every region.")
    table = document.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Region"
    table.cell(0, 1).text = "Growth"
    table.cell(1, 0).text = "North"
    table.cell(1, 1).text = "12%"
    document.add_paragraph("Outlook remains positive.")

    path = tmp_path / "report.docx"
    document.save(str(path))
    return path


@pytest.fixture
def xlsx_file(tmp_path: Path) -> Path:
    """Create a workbook with two sheets and an empty cell."""
    from openpyxl import Workbook

    workbook = Workbook()
    summary = workbook.active
    summary.title = "Summary"
    summary.append(["Item", "Amount"])
    summary.append(["Widgets", 42])
    summary.append(["Gadgets", None])
    notes = workbook.create_sheet("Notes")
    notes.append(["Remember the audit"])

    path = tmp_path / "budget.xlsx"
    workbook.save(str(path))
    return path


@pytest.fixture
def xls_file(tmp_path: Path) -> Path:
    """Create a legacy Excel 97-2003 workbook with two sheets."""
    import xlwt

    workbook = xlwt.Workbook()
    legacy = workbook.add_sheet("Legacy")
    legacy.write(0, 0, "Year")
    legacy.write(0, 1, "Total")
    legacy.write(1, 0, 2024)
    legacy.write(1, 1, 1234.5)
    archive = workbook.add_sheet("Archive")
    archive.write(0, 0, "Closed books")

    path = tmp_path / "ledger.xls"
    workbook.save(str(path))
    return path


@pytest.fixture
def pdf_file(tmp_path: Path) -> Path:
    """Create a two-page PDF."""
    from reportlab.lib.pagesizes import letter
    from reportlab.pdfgen import canvas

    path = tmp_path / "brief.pdf"
    pdf = canvas.Canvas(str(path), pagesize=letter)
    pdf.drawString(72, 720, "First page introduction")
    pdf.showPage()
    pdf.drawString(72, 720, "Second page conclusion")
    pdf.showPage()
    pdf.save()
    return path
