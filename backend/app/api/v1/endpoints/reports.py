"""
Report API endpoints.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.controllers.report_controller import ReportController
from app.schemas.report import ReportRange, ReportSummaryResponse

router = APIRouter()


@router.get("/summary", response_model=ReportSummaryResponse)
async def get_report_summary(
    report_range: ReportRange = Query(ReportRange.LAST_6_MONTHS, alias="range"),
    db: AsyncSession = Depends(get_db),
) -> ReportSummaryResponse:
    """Business summary for the selected range."""
    controller = ReportController(db)
    return await controller.get_summary(report_range)


@router.get("/summary/export")
async def export_report_summary(
    report_range: ReportRange = Query(ReportRange.LAST_6_MONTHS, alias="range"),
    db: AsyncSession = Depends(get_db),
):
    """Download the business summary as an Excel workbook."""
    controller = ReportController(db)
    output = await controller.export_summary(report_range)
    return StreamingResponse(
        output,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={
            "Content-Disposition": f"attachment; filename=report_{report_range.value}.xlsx"
        },
    )
