"""Spreadsheet parsing for CSV, XLS and XLSX uploads.

Only the first sheet of a workbook is read. The header row is kept as
row 0 without any typing, blank rows are skipped and trailing empty cells
are trimmed from each row.
"""

import csv
import datetime
import io
from pathlib import Path

import openpyxl
import xlrd

from app.extraction.base import BaseExtractor
from app.extraction.exceptions import ExtractionError
from app.extraction.file_kinds import file_extension
from app.extraction.models import CellValue, ExtractionResult, TableResult, TableRows
from app.extraction.text_extractor import decode_text


def flatten_rows(rows: TableRows) -> str:
    """Cells joined by tabs, rows by newlines; None renders as ''."""
    return "\n".join(
        "\t".join("" if cell is None else str(cell) for cell in row) for row in rows
    )


def _normalize_cell(value: object) -> CellValue:
    if value is None or isinstance(value, (str, bool, int)):
        return value  # type: ignore[return-value]
    if isinstance(value, float):
        return int(value) if value.is_integer() else value
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    return str(value)


def _clean_row(row: list[CellValue]) -> list[CellValue]:
    end = len(row)
    while end and row[end - 1] in (None, ""):
        end -= 1
    return row[:end]


class TableExtractor:
    """Reads the first sheet of a spreadsheet-like file into rows."""

    def extract_table_and_text(self, file_path: Path) -> TableResult:
        ext = file_extension(file_path.name)
        try:
            if ext == ".csv":
                raw_rows = self._read_csv(file_path)
            elif ext == ".xls":
                raw_rows = self._read_xls(file_path)
            else:
                raw_rows = self._read_xlsx(file_path)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"Could not parse {file_path.name} as a table: {exc}") from exc

        rows = [cleaned for cleaned in (_clean_row(r) for r in raw_rows) if cleaned]
        return TableResult(rows=rows, text=flatten_rows(rows))

    @staticmethod
    def _read_csv(file_path: Path) -> list[list[CellValue]]:
        text = decode_text(file_path.read_bytes(), "utf-8-sig")
        return [list(row) for row in csv.reader(io.StringIO(text, newline=""))]

    @staticmethod
    def _read_xlsx(file_path: Path) -> list[list[CellValue]]:
        workbook = openpyxl.load_workbook(file_path, read_only=True, data_only=True)
        try:
            if not workbook.worksheets:
                return []
            sheet = workbook.worksheets[0]
            return [
                [_normalize_cell(v) for v in row]
                for row in sheet.iter_rows(values_only=True)
            ]
        finally:
            workbook.close()

    @staticmethod
    def _read_xls(file_path: Path) -> list[list[CellValue]]:
        book = xlrd.open_workbook(str(file_path))
        if book.nsheets == 0:
            return []
        sheet = book.sheet_by_index(0)
        rows: list[list[CellValue]] = []
        for index in range(sheet.nrows):
            row: list[CellValue] = []
            for cell in sheet.row(index):
                if cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK):
                    row.append(None)
                elif cell.ctype == xlrd.XL_CELL_DATE:
                    row.append(
                        _normalize_cell(xlrd.xldate_as_datetime(cell.value, book.datemode))
                    )
                elif cell.ctype == xlrd.XL_CELL_BOOLEAN:
                    row.append(bool(cell.value))
                else:
                    row.append(_normalize_cell(cell.value))
            rows.append(row)
        return rows


class TableContentExtractor(BaseExtractor):
    """Adapts TableExtractor to the per-format extractor contract."""

    def __init__(self, table_extractor: TableExtractor | None = None) -> None:
        self._table_extractor = table_extractor or TableExtractor()

    def extract(self, file_path: Path) -> ExtractionResult:
        table = self._table_extractor.extract_table_and_text(file_path)
        return ExtractionResult(
            extracted_text=table.text,
            table_rows=table.rows,
            is_table=True,
        )
