"""Spreadsheet text extraction for captain_claw.

Workbooks become one header line per sheet followed by one
tab-separated line per non-empty row.
"""

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

import xlrd
from openpyxl import load_workbook

from captain_claw.extraction.base import DocumentExtractor

__all__ = [
    "XlsExtractor",
    "XlsxExtractor",
    "format_cell",
    "render_sheets",
]


def format_cell(value: Any) -> str:
    """Render a cell value as text; empty cells become ""."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        # xlrd stores every number as float
        return str(int(value))
    return str(value)


def render_sheets(sheets: Iterable[tuple[str, Iterable[Iterable[Any]]]]) -> str:
    """Render (sheet name, rows) pairs as text in the given order.

    Args:
        sheets: Sheet names with their row value iterables

    Returns:
        Text with a "=== Sheet: name ===" header per sheet and one
        tab-joined line per row that has at least one value
    """
    lines: list[str] = []
    for name, rows in sheets:
        lines.append(f"\n=== Sheet: {name} ===")
        for row in rows:
            cells = [format_cell(value) for value in row]
            if any(cells):
                lines.append("\t".join(cells))
    return "\n".join(lines) + "\n" if lines else ""


class XlsxExtractor(DocumentExtractor):
    """Extracts sheets in workbook order from Office Open XML workbooks."""

    extensions = ("xlsx",)

    def extract(self, path: Path) -> str:
        workbook = load_workbook(path, read_only=True, data_only=True)
        try:
            return render_sheets(
                (sheet.title, sheet.iter_rows(values_only=True))
                for sheet in workbook.worksheets
            )
        finally:
            workbook.close()


class XlsExtractor(DocumentExtractor):
    """Extracts sheets in workbook order from legacy Excel 97-2003 files."""

    extensions = ("xls",)

    def extract(self, path: Path) -> str:
        book = xlrd.open_workbook(str(path))
        try:
            return render_sheets((sheet.name, _xls_rows(sheet)) for sheet in book.sheets())
        finally:
            book.release_resources()


def _xls_rows(sheet: Any) -> Iterator[list[Any]]:
    for index in range(sheet.nrows):
        yield sheet.row_values(index)
