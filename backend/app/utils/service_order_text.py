"""
Work instructions for service orders.

A service order must never show prices, so text copied from a quote is
filtered before it reaches the crew.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

_PRICED_LINE = re.compile(r".*\$[\d,]+\.?\d*.*\n?")
_TOTAL_LINE = re.compile(r".*TOTAL PROJECT COST.*\n?")
_BREAKDOWN_HEADER = re.compile(r"Project Breakdown:[ \t]*(\n\s*|$)")
_PRICED_BULLET = re.compile(r"• .*\$[\d,]+\.?\d*.*")
_BLANK_LINES = re.compile(r"\n\s*\n")

INCLUDED_SERVICES = (
    "Prep: Power washing as needed, scraping and sanding, removing old caulk and re-caulking gaps",
    "Protection: Cover and protect all landscaping, walkways, and adjacent surfaces",
    "Clean-up: Complete site clean-up and proper disposal of all materials",
)

FALLBACK_DETAILS = "Service order created from quote - please review and add specific work details."


def strip_pricing(text: Optional[str]) -> str:
    """Remove dollar amounts, totals and the breakdown header from text."""
    if not text:
        return ""
    text = _PRICED_LINE.sub("", text)
    text = _TOTAL_LINE.sub("", text)
    text = _BREAKDOWN_HEADER.sub("", text)
    text = _PRICED_BULLET.sub("", text)
    text = _BLANK_LINES.sub("\n", text)
    return text.strip()


def _get(item: Any, name: str) -> Any:
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def _format_quantity(value: Any) -> str:
    """Render 10.00 as 10 and 2.50 as 2.5; 0, None and garbage render empty."""
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return ""
    if not number.is_finite() or number == 0:
        return ""
    return f"{number.normalize():f}"


def build_service_order_details(project: Any, quote: Any) -> str:
    """
    Compose crew-facing details for a service order created from a quote.

    Sections: project metadata, materials (name and quantity), work tasks
    (description and estimated hours), price-free scope, the standard
    included services and price-free notes.
    """
    details = ""

    if project is not None:
        details += f"PROJECT: {project.title}\n"
        details += f"SERVICE TYPE: {project.service_type}\n"
        if project.description:
            details += f"DESCRIPTION: {project.description}\n\n"

    details += "WORK TO BE PERFORMED:\n\n"

    materials = [m for m in (quote.materials_estimate or []) if _get(m, "enabled") is not False]
    if materials:
        details += "MATERIALS REQUIRED:\n"
        for item in materials:
            name = _get(item, "name")
            if name:
                quantity = _format_quantity(_get(item, "quantity"))
                details += f"• {name}{f' (Qty: {quantity})' if quantity else ''}\n"
        details += "\n"

    tasks = [t for t in (quote.labor_estimate or []) if _get(t, "enabled") is not False]
    if tasks:
        details += "WORK TASKS:\n"
        for item in tasks:
            description = _get(item, "description")
            if description:
                hours = _format_quantity(_get(item, "hours"))
                details += f"• {description}{f' (Est. {hours} hours)' if hours else ''}\n"
        details += "\n"

    scope = strip_pricing(quote.scope_of_work)
    if scope:
        details += f"ADDITIONAL WORK DETAILS:\n{scope}\n\n"

    details += "INCLUDED SERVICES:\n"
    for service in INCLUDED_SERVICES:
        details += f"• {service}\n"
    details += "\n"

    notes = strip_pricing(quote.notes)
    if notes:
        details += f"ADDITIONAL NOTES:\n{notes}\n\n"

    details = details.strip()
    return details or FALLBACK_DETAILS


def materials_summary(quote: Any) -> str:
    """One line per enabled material, without prices, for materials_required."""
    lines = []
    for item in quote.materials_estimate or []:
        if _get(item, "enabled") is False or not _get(item, "name"):
            continue
        quantity = _format_quantity(_get(item, "quantity"))
        lines.append(f"{_get(item, 'name')}{f' x {quantity}' if quantity else ''}")
    return "\n".join(lines)
