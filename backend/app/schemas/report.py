"""
Reporting schemas.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from pydantic import BaseModel
from typing import List


class ReportRange(str, Enum):
    """Look-back windows offered by the reports page."""
    LAST_MONTH = "last_month"
    LAST_3_MONTHS = "last_3_months"
    LAST_6_MONTHS = "last_6_months"
    LAST_YEAR = "last_year"


class MonthlyPoint(BaseModel):
    """One month of the revenue/quote series."""
    month: str  # YYYY-MM
    revenue: Decimal
    quotes: int


class ClientDistribution(BaseModel):
    classification: str
    count: int


class ReportSummaryResponse(BaseModel):
    """Business summary for a date range."""
    range: ReportRange
    start_date: date
    end_date: date
    new_clients: int
    completed_projects: int
    total_revenue: Decimal
    conversion_rate: float
    average_project_value: Decimal
    monthly: List[MonthlyPoint]
    client_distribution: List[ClientDistribution]
