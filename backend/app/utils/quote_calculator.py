"""
Quote cost calculator.

Derives a quote total from material and labor lines, a profit margin and
flat additional costs, and renders the "Project Breakdown:" block that is
kept at the end of a quote's scope of work.

All arithmetic is done on Decimal; the only rounding is the final
half-up quantize of the total.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Iterable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

BREAKDOWN_SENTINEL = "Project Breakdown:"
TOTAL_LABEL = "TOTAL PROJECT COST"

CENTS = Decimal("0.01")
ZERO = Decimal("0")

# Text appended to the breakdown for each selected optional service
OPTIONAL_SERVICES = {
    "prep": "Prep: Power washing as needed, scraping and sanding, removing old caulk and re-caulking gaps.",
    "primer": "Prime: Apply high-quality primer to all surfaces to ensure proper paint adhesion.",
    "protection": "Protection: Cover and protect all landscaping, walkways, and adjacent surfaces.",
    "cleanup": "Clean-up: Complete site clean-up and proper disposal of all materials.",
    "warranty": "Warranty: 2-year warranty on workmanship and materials against defects.",
}


@dataclass(frozen=True)
class CalculatedLine:
    """A priced line as it appears in the breakdown."""
    kind: str
    label: str
    enabled: bool
    line_total: Decimal


@dataclass(frozen=True)
class QuoteCalculation:
    """Result of calculate_quote."""
    lines: Tuple[CalculatedLine, ...]
    materials_subtotal: Decimal
    labor_subtotal: Decimal
    base_subtotal: Decimal
    additional_costs: Decimal
    profit_margin: Decimal
    profit_amount: Decimal
    total_estimate: Decimal
    breakdown: str
    warnings: Tuple[str, ...] = field(default_factory=tuple)


def round2(value: Decimal) -> Decimal:
    """Round half-up to cents."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_money(value: Decimal) -> str:
    return f"${round2(value):,.2f}"


def _format_percent(value: Decimal) -> str:
    normalized = value.normalize()
    return f"{normalized:f}"


def _to_decimal(value: Any, label: str, warnings: List[str]) -> Decimal:
    """
    Coerce a numeric input to Decimal.

    None, NaN, infinities and unparseable values become 0; each coercion is
    logged and recorded in warnings.
    """
    if isinstance(value, bool):
        result = None
    elif isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip().replace(",", ""))
        except InvalidOperation:
            result = None
    else:
        result = None

    if result is None or not result.is_finite():
        message = f"{label}: invalid value {value!r} treated as 0"
        logger.warning(message)
        warnings.append(message)
        return ZERO
    return result


def _get(item: Any, name: str, default: Any = None) -> Any:
    if isinstance(item, dict):
        return item.get(name, default)
    return getattr(item, name, default)


def _price_lines(
    items: Iterable[Any],
    kind: str,
    label_field: str,
    amount_field: str,
    rate_field: str,
    warnings: List[str],
) -> List[CalculatedLine]:
    lines = []
    for position, item in enumerate(items or (), start=1):
        label = (_get(item, label_field) or "").strip() or f"{kind.title()} {position}"
        amount = _to_decimal(_get(item, amount_field), f"{label} {amount_field}", warnings)
        rate = _to_decimal(_get(item, rate_field), f"{label} {rate_field}", warnings)
        enabled = _get(item, "enabled", True)
        lines.append(CalculatedLine(
            kind=kind,
            label=label,
            enabled=True if enabled is None else bool(enabled),
            line_total=amount * rate,
        ))
    return lines


def build_breakdown(
    lines: Sequence[CalculatedLine],
    materials_subtotal: Decimal,
    labor_subtotal: Decimal,
    additional_costs: Decimal,
    profit_margin: Decimal,
    profit_amount: Decimal,
    total_estimate: Decimal,
    optional_services: Optional[Iterable[str]] = None,
) -> str:
    """Render the breakdown block, starting with the sentinel header."""
    text = f"{BREAKDOWN_SENTINEL}\n\n"
    for line in lines:
        if line.enabled and line.line_total != 0:
            text += f"• {line.label}: {format_money(line.line_total)}\n"
    text += f"\nMaterials Subtotal: {format_money(materials_subtotal)}\n"
    text += f"Labor Subtotal: {format_money(labor_subtotal)}\n"
    if additional_costs != 0:
        text += f"Additional Costs: {format_money(additional_costs)}\n"
    if profit_amount != 0:
        text += f"Profit ({_format_percent(profit_margin)}%): {format_money(profit_amount)}\n"
    text += f"\n{TOTAL_LABEL}: {format_money(total_estimate)}"

    services = [OPTIONAL_SERVICES[key] for key in (optional_services or ()) if key in OPTIONAL_SERVICES]
    if services:
        text += "\n\nAdditional Services:"
        for service in services:
            text += f"\n• {service}"
    return text


def calculate_quote(
    material_items: Optional[Iterable[Any]],
    labor_items: Optional[Iterable[Any]],
    additional_costs: Any = 0,
    profit_margin: Any = 0,
    optional_services: Optional[Iterable[str]] = None,
) -> QuoteCalculation:
    """
    Price a quote.

    Items may be line item models or plain dicts as stored in the quote's
    JSON columns (materials: name/quantity/unit_price, labor:
    description/hours/hourly_rate, both with an optional enabled flag).

    Returns:
        QuoteCalculation with subtotals, the rounded total and breakdown text
    """
    warnings: List[str] = []
    optional_services = list(optional_services or ())

    material_lines = _price_lines(material_items, "material", "name", "quantity", "unit_price", warnings)
    labor_lines = _price_lines(labor_items, "labor", "description", "hours", "hourly_rate", warnings)
    additional = _to_decimal(additional_costs, "additional_costs", warnings)
    margin = _to_decimal(profit_margin, "profit_margin", warnings)

    for key in optional_services:
        if key not in OPTIONAL_SERVICES:
            message = f"Unknown optional service {key!r} ignored"
            logger.warning(message)
            warnings.append(message)

    materials_subtotal = sum((line.line_total for line in material_lines if line.enabled), ZERO)
    labor_subtotal = sum((line.line_total for line in labor_lines if line.enabled), ZERO)
    base_subtotal = materials_subtotal + labor_subtotal
    profit_amount = base_subtotal * margin / Decimal(100)
    total_estimate = round2(base_subtotal + additional + profit_amount)

    lines = tuple(material_lines + labor_lines)
    breakdown = build_breakdown(
        lines,
        materials_subtotal,
        labor_subtotal,
        additional,
        margin,
        profit_amount,
        total_estimate,
        optional_services,
    )
    return QuoteCalculation(
        lines=lines,
        materials_subtotal=materials_subtotal,
        labor_subtotal=labor_subtotal,
        base_subtotal=base_subtotal,
        additional_costs=additional,
        profit_margin=margin,
        profit_amount=profit_amount,
        total_estimate=total_estimate,
        breakdown=breakdown,
        warnings=tuple(warnings),
    )


def apply_breakdown(scope_of_work: Optional[str], breakdown: str) -> str:
    """
    Put breakdown at the end of scope_of_work.

    Anything from the sentinel header onwards is replaced, so applying the
    same breakdown twice gives the same text.
    """
    scope = scope_of_work or ""
    before = scope.split(BREAKDOWN_SENTINEL)[0].strip()
    if before:
        return f"{before}\n\n{breakdown}"
    return breakdown
