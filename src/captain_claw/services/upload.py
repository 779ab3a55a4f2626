"""Upload service for captain_claw.

This module extracts text from an uploaded document once and stores
the file record. Extraction failures never block the upload.
"""

from pathlib import Path

from captain_claw.exceptions import NotFoundError, UnsupportedTypeError
from captain_claw.extraction.base import normalize_extension
from captain_claw.extraction.extractor import TextExtractor
from captain_claw.interfaces.storage import StorageInterface
from captain_claw.logging import get_logger
from captain_claw.models.records import FileRecord, utc_now
from captain_claw.utils.ids import new_id

__all__ = [
    "UploadService",
]

logger = get_logger(__name__)


class UploadService:
    """Service for registering uploaded documents.

    Example:
        service = UploadService(storage, TextExtractor())
        record = await service.upload(project_id, "/uploads/ab12.pdf", "report.pdf")
    """

    def __init__(self, storage: StorageInterface, extractor: TextExtractor) -> None:
        """Initialize service with dependencies.

        Args:
            storage: Storage interface for persistence
            extractor: Text extractor
        """
        self._storage = storage
        self._extractor = extractor

    async def upload(
        self,
        project_id: str,
        file_path: str | Path,
        original_filename: str,
        file_size: int | None = None,
    ) -> FileRecord:
        """Extract text from a stored upload and save its record.

        Args:
            project_id: Owning project
            file_path: Where the uploaded bytes were written
            original_filename: Name the user uploaded; its extension
                is the declared type
            file_size: Size in bytes (read from disk when omitted)

        Returns:
            Saved FileRecord; failed extractions carry placeholder text
            and extraction_status=failed

        Raises:
            NotFoundError: If the project does not exist
            UnsupportedTypeError: If the file type is not supported
        """
        project = await self._storage.get_project(project_id)
        if project is None:
            raise NotFoundError("project", project_id)

        declared_type = normalize_extension(Path(original_filename).suffix)
        if not self._extractor.supports(declared_type):
            raise UnsupportedTypeError(declared_type or original_filename)

        path = Path(file_path)
        if file_size is None:
            file_size = _size_on_disk(path)

        document = await self._extractor.extract_document_async(path, declared_type)
        if not document.ok:
            logger.warning(
                "upload_extraction_recovered",
                project_id=project_id,
                filename=original_filename,
                reason=document.failure_reason,
            )

        record = FileRecord(
            id=new_id(),
            project_id=project_id,
            filename=original_filename,
            file_path=str(path),
            file_type=f".{declared_type}",
            file_size=file_size,
            extracted_text=document.text,
            extraction_status=document.status,
            created_at=utc_now(),
        )
        await self._storage.insert_file(record)

        logger.info(
            "file_uploaded",
            file_id=record.id,
            project_id=project_id,
            file_type=record.file_type,
            status=document.status.value,
            characters=len(document.text),
        )
        return record


def _size_on_disk(path: Path) -> int:
    try:
        return path.stat().st_size
    except OSError as e:
        logger.warning("upload_size_unavailable", path=str(path), error=str(e))
        return 0
