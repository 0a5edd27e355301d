"""
Report controller.
"""

import io
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.report_service import ReportService
from app.services.report_excel_service import ReportExcelService
from app.schemas.report import ReportRange, ReportSummaryResponse


class ReportController(BaseController):
    """Controller for business reports."""

    def __init__(self, session: AsyncSession):
        self.report_service = ReportService(session)
        self.excel_service = ReportExcelService()

    async def get_summary(self, report_range: ReportRange) -> ReportSummaryResponse:
        """Business summary for the range."""
        return await self.report_service.get_summary(report_range)

    async def export_summary(self, report_range: ReportRange) -> io.BytesIO:
        """Business summary for the range as an Excel workbook."""
        report = await self.report_service.get_summary(report_range)
        return self.excel_service.export_summary(report)
