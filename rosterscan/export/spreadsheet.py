from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.worksheet.worksheet import Worksheet

from rosterscan.export.exceptions import ExportError
from rosterscan.logging.logger import Log

SHEET_TITLE = "Data"


class BaseSpreadsheetWriter(ABC):
    """Contract for spreadsheet file writers."""

    @abstractmethod
    def write(
        self,
        rows: Sequence[Mapping[str, object]],
        headers: Sequence[str],
        file_name: str,
    ) -> Path:
        """Write rows under headers, in header order, and return the file path.

        Raises:
            ExportError: if the file cannot be written.
        """


class OpenpyxlSpreadsheetWriter(BaseSpreadsheetWriter):
    """Writes a single-sheet .xlsx workbook with openpyxl."""

    def __init__(self, output_dir: Path | None = None) -> None:
        self._output_dir = output_dir if output_dir is not None else Path(".")

    def write(
        self,
        rows: Sequence[Mapping[str, object]],
        headers: Sequence[str],
        file_name: str,
    ) -> Path:
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = SHEET_TITLE
        _write_row(sheet, 1, headers)
        for row_index, row in enumerate(rows, start=2):
            _write_row(sheet, row_index, [row.get(header) for header in headers])

        path = self._output_dir / f"{file_name}.xlsx"
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            workbook.save(path)
        except OSError as exc:
            raise ExportError(f"Failed to write spreadsheet {path}: {exc}") from exc
        return path


def export_spreadsheet(
    rows: Sequence[Mapping[str, object]],
    headers: Sequence[str],
    file_name: str,
    writer: BaseSpreadsheetWriter,
) -> Path | None:
    """Write the dataset through writer; no-op when there are no rows."""
    if not rows:
        Log.info("Nothing to export: dataset is empty")
        return None
    path = writer.write(rows, headers, file_name)
    Log.info(f"Exported {len(rows)} rows to {path}")
    return path


def _cell(value: object) -> object:
    if value is None or value == "":
        return None
    if isinstance(value, (int, float, bool)):
        return value
    # Control characters are not allowed in worksheet XML.
    return ILLEGAL_CHARACTERS_RE.sub("", str(value)) or None


def _write_row(sheet: Worksheet, row_index: int, values: Sequence[object]) -> None:
    # Strings stay literal text even when they start with "=".
    for column_index, value in enumerate(values, start=1):
        cell = sheet.cell(row=row_index, column=column_index, value=_cell(value))
        if isinstance(cell.value, str):
            cell.data_type = "s"
