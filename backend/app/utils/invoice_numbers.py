"""
Human-readable document numbers for invoices and purchase orders.
"""

import re
import secrets
import string
from datetime import date
from typing import Optional

_ALPHABET = string.ascii_uppercase + string.digits

INVOICE_NUMBER_PATTERN = re.compile(r"^INV-\d{8}-[A-Z0-9]{6}$")


def generate_document_number(prefix: str, on: Optional[date] = None, suffix_length: int = 6) -> str:
    """Return PREFIX-YYYYMMDD-XXXXXX with a random uppercase alphanumeric suffix."""
    on = on or date.today()
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(suffix_length))
    return f"{prefix}-{on.strftime('%Y%m%d')}-{suffix}"


def generate_invoice_number(on: Optional[date] = None) -> str:
    return generate_document_number("INV", on)


def generate_purchase_order_number(on: Optional[date] = None) -> str:
    return generate_document_number("PO", on)
