import asyncio
import sys
from pathlib import Path

from captain_claw import (
    CaptainClawConfig,
    ChatOrchestrator,
    ConversationRecord,
    ConversationService,
    MongoStorageRepository,
    ProjectRecord,
    TextExtractor,
    UploadService,
)


# Upload a document and ask about it - config loaded from .env automatically
async def main(document: Path, question: str) -> None:
    config = CaptainClawConfig()
    storage = await MongoStorageRepository.from_config(config.mongo)

    try:
        project_id = await storage.save_project(
            ProjectRecord(id="demo", name="Demo", system_prompt="You are a concise analyst.")
        )
        conversation_id = await storage.save_conversation(
            ConversationRecord(id="demo-chat", project_id=project_id)
        )

        uploads = UploadService(storage, TextExtractor())
        record = await uploads.upload(project_id, document, document.name)
        print(f"{record.filename}: {record.extraction_status} ({len(record.extracted_text)} chars)")

        async with ChatOrchestrator.from_config(storage, config) as orchestrator:
            chat = ConversationService(
                storage,
                orchestrator,
                history_limit=config.chat.history_limit,
                default_model=config.chat.default_model,
            )
            sent = await chat.send_message(
                project_id, conversation_id, question, referenced_file_ids=[record.id]
            )
        print(f"[{sent.model}, {sent.tokens_used} tokens]\n{sent.response}")
    finally:
        await storage.close()


if __name__ == "__main__":
    if len(sys.argv) < 2:
        sys.exit("usage: chat_demo.py DOCUMENT [QUESTION]")
    asyncio.run(main(Path(sys.argv[1]), " ".join(sys.argv[2:]) or "Summarize this document."))
