from __future__ import annotations

import csv
import io
from datetime import date
from typing import Sequence

from openpyxl import Workbook
from openpyxl.styles import Font

from ..core.constants import REPORT_FILE_PREFIX, REPORT_SHEET_TITLE

CSV_MIMETYPE = "text/csv"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class ReportExporter:
    """Serialize flat report rows; performs no file I/O of its own."""

    def to_csv(self, rows: Sequence[dict], labels: Sequence[str]) -> bytes:
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=list(labels), lineterminator="\n")
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        # BOM so spreadsheet apps pick up UTF-8
        return out.getvalue().encode("utf-8-sig")

    def to_xlsx(self, rows: Sequence[dict], labels: Sequence[str]) -> bytes:
        wb = Workbook()
        ws = wb.active
        ws.title = REPORT_SHEET_TITLE

        ws.append(list(labels))
        for cell in ws[1]:
            cell.font = Font(bold=True)
        for row in rows:
            ws.append([row.get(label) for label in labels])

        buf = io.BytesIO()
        wb.save(buf)
        return buf.getvalue()

    @staticmethod
    def filename(extension: str, *, today: date) -> str:
        return f"{REPORT_FILE_PREFIX}_{today.strftime('%Y-%m-%d')}.{extension}"
