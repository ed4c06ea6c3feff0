from dataclasses import dataclass

CellValue = str | int | float | bool | None
TableRows = list[list[CellValue]]


@dataclass(frozen=True)
class TableResult:
    """First-sheet rows of a spreadsheet plus their flattened text."""

    rows: TableRows
    text: str


@dataclass(frozen=True)
class ExtractionResult:
    """Output of the content extractor for a single file."""

    extracted_text: str = ""
    table_rows: TableRows | None = None
    is_table: bool = False
