"""
Excel export service for the business summary report.
"""

import io
import logging

from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill
from openpyxl.utils import get_column_letter

from app.core.config import settings
from app.schemas.report import ReportSummaryResponse

logger = logging.getLogger(__name__)

HEADER_FILL = PatternFill(start_color="1B2A4A", end_color="1B2A4A", fill_type="solid")
HEADER_FONT = Font(bold=True, color="FFFFFF")
MONEY_FORMAT = '"$"#,##0.00'


class ReportExcelService:
    """Renders a ReportSummaryResponse as an .xlsx workbook."""

    def _header_row(self, ws, row: int, titles: list) -> None:
        for col, title in enumerate(titles, start=1):
            cell = ws.cell(row=row, column=col, value=title)
            cell.font = HEADER_FONT
            cell.fill = HEADER_FILL
            cell.alignment = Alignment(horizontal="center")

    def _autosize(self, ws) -> None:
        for column_cells in ws.columns:
            col_letter = get_column_letter(column_cells[0].column)
            max_length = max(len(str(cell.value)) if cell.value is not None else 0 for cell in column_cells)
            ws.column_dimensions[col_letter].width = min(max(max_length + 2, 10), 50)

    def export_summary(self, report: ReportSummaryResponse) -> io.BytesIO:
        """Build the workbook: Summary, Monthly and Clients sheets."""
        wb = Workbook()

        ws = wb.active
        ws.title = "Summary"
        ws.cell(row=1, column=1, value=f"{settings.COMPANY_NAME} - Business Summary").font = Font(bold=True, size=14)
        ws.cell(row=2, column=1, value=f"{report.start_date.isoformat()} to {report.end_date.isoformat()}")
        self._header_row(ws, 4, ["Metric", "Value"])
        rows = [
            ("New clients", report.new_clients, None),
            ("Completed projects", report.completed_projects, None),
            ("Total revenue", float(report.total_revenue), MONEY_FORMAT),
            ("Conversion rate (%)", report.conversion_rate, "0.0"),
            ("Average project value", float(report.average_project_value), MONEY_FORMAT),
        ]
        for offset, (label, value, number_format) in enumerate(rows, start=5):
            ws.cell(row=offset, column=1, value=label)
            cell = ws.cell(row=offset, column=2, value=value)
            if number_format:
                cell.number_format = number_format
        self._autosize(ws)

        monthly = wb.create_sheet("Monthly")
        self._header_row(monthly, 1, ["Month", "Revenue", "Quotes"])
        for row, point in enumerate(report.monthly, start=2):
            monthly.cell(row=row, column=1, value=point.month)
            monthly.cell(row=row, column=2, value=float(point.revenue)).number_format = MONEY_FORMAT
            monthly.cell(row=row, column=3, value=point.quotes)
        self._autosize(monthly)

        clients = wb.create_sheet("Clients")
        self._header_row(clients, 1, ["Classification", "Clients"])
        for row, item in enumerate(report.client_distribution, start=2):
            clients.cell(row=row, column=1, value=item.classification.capitalize())
            clients.cell(row=row, column=2, value=item.count)
        self._autosize(clients)

        output = io.BytesIO()
        wb.save(output)
        output.seek(0)
        logger.info("Report workbook generated", extra={"range": report.range.value})
        return output
