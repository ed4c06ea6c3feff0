"""Canonical PDF rendering with reportlab.

Text documents become single-column, left-aligned pages. Tabular documents
become a fixed grid whose column count is taken from the header row.
"""

from pathlib import Path

from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from app.extraction.models import TableRows
from app.logging.logger import Log
from app.rendering.exceptions import RenderError

MARGIN = 40
FONT_NAME = "Helvetica"
TEXT_FONT_SIZE = 12
TEXT_LEADING = 14.4
CELL_FONT_SIZE = 10
CELL_PADDING = 4
ROW_HEIGHT = 20
HEADER_FILL = HexColor("#f3f4f6")
CELL_TEXT_COLOR = HexColor("#111827")
ELLIPSIS = "…"


def fit_to_width(text: str, max_width: float, font_name: str, font_size: float) -> str:
    """Truncate text with an ellipsis so it renders within max_width points."""
    if stringWidth(text, font_name, font_size) <= max_width:
        return text
    if stringWidth(ELLIPSIS, font_name, font_size) > max_width:
        return ""
    low, high = 0, len(text)
    while low < high:
        mid = (low + high + 1) // 2
        if stringWidth(text[:mid] + ELLIPSIS, font_name, font_size) <= max_width:
            low = mid
        else:
            high = mid - 1
    return text[:low].rstrip() + ELLIPSIS


def cell_text(cell: object) -> str:
    return "" if cell is None else str(cell).replace("\r", " ").replace("\n", " ")


class PdfRenderer:
    """Writes canonical PDFs for text and tabular content."""

    def __init__(self, pagesize: tuple[float, float] = A4) -> None:
        self._pagesize = pagesize

    def create_pdf_from_text(self, text: str, output_path: Path) -> Path:
        """Render plain text as wrapped 12pt body copy. Empty text yields a blank page."""
        width, height = self._pagesize
        usable_width = width - 2 * MARGIN

        def draw(pdf: canvas.Canvas) -> None:
            pdf.setFont(FONT_NAME, TEXT_FONT_SIZE)
            y = height - MARGIN - TEXT_FONT_SIZE
            for paragraph in (text or "").splitlines():
                lines = simpleSplit(paragraph.expandtabs(4), FONT_NAME, TEXT_FONT_SIZE, usable_width)
                for line in lines or [""]:
                    if y < MARGIN:
                        pdf.showPage()
                        pdf.setFont(FONT_NAME, TEXT_FONT_SIZE)
                        y = height - MARGIN - TEXT_FONT_SIZE
                    pdf.drawString(MARGIN, y, line)
                    y -= TEXT_LEADING

        return self._render(output_path, draw)

    def create_pdf_from_table(self, rows: TableRows, output_path: Path) -> Path:
        """Render rows as a grid; row 0 is shaded as the header."""
        width, height = self._pagesize
        usable_width = width - 2 * MARGIN
        col_count = len(rows[0]) if rows else 0
        col_width = usable_width / col_count if col_count > 0 else usable_width
        max_cols = max(col_count, 1)

        def draw(pdf: canvas.Canvas) -> None:
            pdf.setFont(FONT_NAME, CELL_FONT_SIZE)
            top = height - MARGIN
            for row_index, row in enumerate(rows):
                if top - ROW_HEIGHT < MARGIN:
                    pdf.showPage()
                    top = height - MARGIN
                y = top - ROW_HEIGHT

                if row_index == 0:
                    pdf.setFillColor(HEADER_FILL)
                    pdf.rect(MARGIN, y, usable_width, ROW_HEIGHT, stroke=0, fill=1)

                pdf.setFont(FONT_NAME, CELL_FONT_SIZE)
                for col_index in range(max_cols):
                    x = MARGIN + col_index * col_width
                    pdf.rect(x, y, col_width, ROW_HEIGHT, stroke=1, fill=0)
                    if col_index >= len(row):
                        continue
                    label = fit_to_width(
                        cell_text(row[col_index]),
                        col_width - 2 * CELL_PADDING,
                        FONT_NAME,
                        CELL_FONT_SIZE,
                    )
                    pdf.setFillColor(CELL_TEXT_COLOR)
                    pdf.drawString(x + CELL_PADDING, y + CELL_PADDING + 2, label)
                top = y

        return self._render(output_path, draw)

    def _render(self, output_path: Path, draw) -> Path:  # type: ignore[no-untyped-def]
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            pdf = canvas.Canvas(str(output_path), pagesize=self._pagesize)
            draw(pdf)
            pdf.save()
        except Exception as exc:
            raise RenderError(f"Could not render {output_path.name}: {exc}") from exc
        Log.info(f"Rendered canonical PDF {output_path.name}")
        return output_path
