"""
PDF export for quotes and service orders.

Documents are drawn on a reportlab canvas: each block is placed at the
current y cursor, and a new page starts whenever the next block would
cross the bottom margin.
"""

import base64
import io
import logging
import re
from datetime import date
from decimal import Decimal
from typing import Any, List, Optional, Sequence

from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.utils import ImageReader, simpleSplit
from reportlab.pdfgen import canvas

from app.core.config import settings
from app.models.quote import Quote
from app.models.service_order import ServiceOrder
from app.utils.line_items import LaborItem, MaterialItem, parse_items
from app.utils.quote_calculator import format_money

logger = logging.getLogger(__name__)

PAGE_W, PAGE_H = LETTER
MARGIN = 50
CONTENT_W = PAGE_W - 2 * MARGIN

NAVY = HexColor("#1B2A4A")
SLATE = HexColor("#64748B")
RULE = HexColor("#CBD5E1")

BODY_FONT = "Helvetica"
BOLD_FONT = "Helvetica-Bold"

_BULLET = re.compile(r"^\s*(?:[-*•·]|\d+[.)])\s+")


def document_number(prefix: str, entity_id: Any) -> str:
    """Short reference printed on documents, e.g. Q-1A2B3C4D."""
    return f"{prefix}-{str(entity_id).replace('-', '')[:8].upper()}"


def normalize_bullets(text: str) -> List[str]:
    """Split text into lines, rewriting -, *, and numbered markers as bullets."""
    lines = []
    for raw in (text or "").splitlines():
        if not raw.strip():
            continue
        if _BULLET.match(raw):
            lines.append("• " + _BULLET.sub("", raw, count=1).strip())
        else:
            lines.append(raw.strip())
    return lines


def _format_date(value: Optional[date]) -> str:
    return value.strftime("%B %d, %Y") if value else "N/A"


def _format_number(value: Decimal) -> str:
    return f"{Decimal(value).normalize():f}"


class PdfWriter:
    """Cursor-based layout helper over a reportlab canvas."""

    def __init__(self, title: str):
        self.buffer = io.BytesIO()
        self.c = canvas.Canvas(self.buffer, pagesize=LETTER)
        self.c.setTitle(title)
        self.c.setAuthor(settings.COMPANY_NAME)
        self.page_num = 1
        self.y = PAGE_H - MARGIN

    def ensure_space(self, height: float) -> None:
        """Start a new page if height does not fit above the bottom margin."""
        if self.y - height < MARGIN:
            self._footer()
            self.c.showPage()
            self.page_num += 1
            self.y = PAGE_H - MARGIN

    def _footer(self) -> None:
        self.c.setFont(BODY_FONT, 8)
        self.c.setFillColor(SLATE)
        self.c.drawRightString(PAGE_W - MARGIN, MARGIN / 2, f"Page {self.page_num}")
        self.c.setFillColor(NAVY)

    def text(self, value: str, size: float = 10, bold: bool = False, indent: float = 0) -> None:
        """Wrapped paragraph at the cursor."""
        font = BOLD_FONT if bold else BODY_FONT
        leading = size * 1.35
        for line in simpleSplit(value or "", font, size, CONTENT_W - indent) or [""]:
            self.ensure_space(leading)
            self.c.setFont(font, size)
            self.c.drawString(MARGIN + indent, self.y - size, line)
            self.y -= leading

    def heading(self, value: str) -> None:
        self.ensure_space(30)
        self.y -= 8
        self.c.setFillColor(NAVY)
        self.text(value, size=12, bold=True)
        self.rule()

    def rule(self) -> None:
        self.c.setStrokeColor(RULE)
        self.c.setLineWidth(0.5)
        self.c.line(MARGIN, self.y, PAGE_W - MARGIN, self.y)
        self.y -= 6

    def key_values(self, pairs: Sequence[tuple]) -> None:
        for label, value in pairs:
            self.ensure_space(14)
            self.c.setFont(BOLD_FONT, 10)
            self.c.drawString(MARGIN, self.y - 10, f"{label}:")
            self.c.setFont(BODY_FONT, 10)
            self.c.drawString(MARGIN + 110, self.y - 10, str(value if value not in (None, "") else "N/A"))
            self.y -= 14

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]], widths: Sequence[float]) -> None:
        """Simple table; first column is left aligned, the others right aligned."""
        row_h = 16
        self.ensure_space(row_h * 2)
        self._table_row(headers, widths, bold=True)
        self.rule()
        for row in rows:
            self.ensure_space(row_h)
            self._table_row(row, widths)

    def _table_row(self, cells: Sequence[str], widths: Sequence[float], bold: bool = False) -> None:
        self.c.setFont(BOLD_FONT if bold else BODY_FONT, 9)
        x = MARGIN
        for index, (cell, width) in enumerate(zip(cells, widths)):
            if index == 0:
                label = simpleSplit(str(cell), BODY_FONT, 9, width - 4)
                self.c.drawString(x, self.y - 10, label[0] if label else "")
            else:
                self.c.drawRightString(x + width, self.y - 10, str(cell))
            x += width
        self.y -= 16

    def company_header(self, document_title: str, reference: str) -> None:
        self.c.setFillColor(NAVY)
        self.c.setFont(BOLD_FONT, 18)
        self.c.drawString(MARGIN, self.y - 18, settings.COMPANY_NAME.upper())
        self.c.setFont(BOLD_FONT, 14)
        self.c.drawRightString(PAGE_W - MARGIN, self.y - 18, document_title)
        self.c.setFont(BODY_FONT, 10)
        self.c.drawRightString(PAGE_W - MARGIN, self.y - 34, reference)
        self.y -= 34
        self.c.setFillColor(SLATE)
        for line in (
            settings.COMPANY_TAGLINE,
            settings.COMPANY_ADDRESS,
            settings.COMPANY_PHONE,
            settings.COMPANY_EMAIL,
        ):
            if line:
                self.c.setFont(BODY_FONT, 9)
                self.c.drawString(MARGIN, self.y - 9, line)
                self.y -= 12
        self.c.setFillColor(NAVY)
        self.y -= 6
        self.rule()

    def image(self, data: bytes, max_w: float = 200, max_h: float = 80) -> None:
        reader = ImageReader(io.BytesIO(data))
        width, height = reader.getSize()
        scale = min(max_w / width, max_h / height, 1)
        self.ensure_space(height * scale + 6)
        self.c.drawImage(reader, MARGIN, self.y - height * scale, width * scale, height * scale, mask="auto")
        self.y -= height * scale + 6

    def finish(self) -> bytes:
        self._footer()
        self.c.save()
        return self.buffer.getvalue()


def _decode_data_url(value: str) -> bytes:
    """Bytes of a base64 data URL (or bare base64)."""
    payload = value.split(",", 1)[1] if value.startswith("data:") else value
    return base64.b64decode(payload, validate=True)


class DocumentExportService:
    """Renders quotes and service orders to PDF bytes."""

    def render_quote(self, quote: Quote) -> bytes:
        """
        Quote PDF: header, client and project blocks, scope of work,
        materials and labor tables and the total.

        quote.project and quote.project.client must be loaded.
        """
        project = quote.project
        client = project.client if project is not None else None
        pdf = PdfWriter(f"Quote {document_number('Q', quote.id)}")

        pdf.company_header("QUOTE", document_number("Q", quote.id))
        pdf.key_values([
            ("Date", _format_date(quote.created_at.date() if quote.created_at else None)),
            ("Valid until", _format_date(quote.valid_until)),
            ("Status", quote.status.value.capitalize()),
        ])

        pdf.heading("Client")
        pdf.key_values([
            ("Name", client.name if client else None),
            ("Email", client.email if client else None),
            ("Phone", client.phone if client else None),
            ("Address", client.address if client else None),
        ])

        pdf.heading("Project")
        pdf.key_values([
            ("Title", project.title if project else None),
            ("Service type", project.service_type if project else None),
            ("Address", project.address if project else None),
        ])

        scope_lines = normalize_bullets(quote.scope_of_work)
        if scope_lines:
            pdf.heading("Scope of Work")
            for line in scope_lines:
                pdf.text(line, indent=10 if line.startswith("• ") else 0)

        materials = [m for m in parse_items(quote.materials_estimate, MaterialItem) if m.enabled]
        if materials:
            pdf.heading("Materials")
            pdf.table(
                ["Item", "Qty", "Unit price", "Total"],
                [
                    [m.name, _format_number(m.quantity), format_money(m.unit_price), format_money(m.line_total)]
                    for m in materials
                ],
                [CONTENT_W * 0.49, CONTENT_W * 0.13, CONTENT_W * 0.19, CONTENT_W * 0.19],
            )

        labor = [item for item in parse_items(quote.labor_estimate, LaborItem) if item.enabled]
        if labor:
            pdf.heading("Labor")
            pdf.table(
                ["Task", "Hours", "Rate", "Total"],
                [
                    [l.description, _format_number(l.hours), format_money(l.hourly_rate), format_money(l.line_total)]
                    for l in labor
                ],
                [CONTENT_W * 0.49, CONTENT_W * 0.13, CONTENT_W * 0.19, CONTENT_W * 0.19],
            )

        pdf.ensure_space(40)
        pdf.y -= 10
        pdf.rule()
        if quote.additional_costs:
            pdf.key_values([("Additional costs", format_money(quote.additional_costs))])
        pdf.text(f"TOTAL: {format_money(quote.total_estimate)}", size=14, bold=True)

        if quote.notes:
            pdf.heading("Notes")
            pdf.text(quote.notes)

        logger.info(f"Quote PDF rendered for {quote.id}", extra={"pages": pdf.page_num})
        return pdf.finish()

    def render_service_order(self, order: ServiceOrder, assignee_name: Optional[str] = None) -> bytes:
        """
        Service order PDF: header, order metadata, assignment, details,
        materials, instructions, safety and signature status. No prices.

        order.project and order.project.client must be loaded.
        """
        project = order.project
        client = project.client if project is not None else None
        pdf = PdfWriter(f"Service Order {document_number('SO', order.id)}")

        pdf.company_header("SERVICE ORDER", document_number("SO", order.id))
        pdf.key_values([
            ("Date", _format_date(order.created_at.date() if order.created_at else None)),
            ("Status", order.status.value.replace("_", " ").capitalize()),
            ("Start date", _format_date(order.start_date)),
            ("Due date", _format_date(order.due_date)),
        ])

        pdf.heading("Project Information")
        pdf.key_values([
            ("Name", project.title if project else None),
            ("Address", project.address if project else None),
            ("Client", client.name if client else None),
            ("Client phone", client.phone if client else None),
        ])

        pdf.heading("Assignment")
        pdf.key_values([
            ("Assigned to", assignee_name or "Not Assigned"),
            ("Type", order.assigned_type.value.capitalize() if order.assigned_type else None),
        ])

        pdf.heading("Service Details")
        details = normalize_bullets(order.details)
        if details:
            for line in details:
                pdf.text(line, indent=10 if line.startswith("• ") else 0)
        else:
            pdf.text("No specific details provided.")

        for title, body in (
            ("Materials Required", order.materials_required),
            ("Special Instructions", order.special_instructions),
            ("Safety Requirements", order.safety_requirements),
        ):
            if body:
                pdf.heading(title)
                for line in normalize_bullets(body):
                    pdf.text(line)

        pdf.heading("Client Approval")
        if order.client_signature:
            signed = order.signed_date.strftime("%B %d, %Y %H:%M") if order.signed_date else "N/A"
            pdf.text(f"Signed by client on {signed}")
            try:
                pdf.image(_decode_data_url(order.client_signature))
            except Exception as e:
                logger.warning(f"Signature image for service order {order.id} could not be drawn: {e}")
                pdf.text("Error displaying signature image")
        else:
            pdf.text("Not yet signed by client")

        logger.info(f"Service order PDF rendered for {order.id}", extra={"pages": pdf.page_num})
        return pdf.finish()
