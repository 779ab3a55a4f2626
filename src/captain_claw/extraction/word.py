"""Word document text extraction using python-docx."""

from pathlib import Path

from docx import Document
from docx.table import Table

from captain_claw.extraction.base import DocumentExtractor

__all__ = [
    "WordExtractor",
]


class WordExtractor(DocumentExtractor):
    """Extracts raw paragraph and table text, discarding formatting.

    Tables are flattened to one tab-separated line per row. Legacy
    binary .doc files are not OOXML packages and fail to open.
    """

    extensions = ("docx", "doc")

    def extract(self, path: Path) -> str:
        document = Document(str(path))
        lines: list[str] = []
        for block in document.iter_inner_content():
            if isinstance(block, Table):
                for row in block.rows:
                    lines.append("\t".join(cell.text for cell in row.cells))
            else:
                lines.append(block.text)
        return "\n".join(lines).strip()
