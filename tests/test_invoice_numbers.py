"""
Document number generator tests.
"""

from datetime import date

from app.utils.invoice_numbers import (
    INVOICE_NUMBER_PATTERN,
    generate_invoice_number,
    generate_purchase_order_number,
)


def test_invoice_number_format():
    number = generate_invoice_number(date(2024, 3, 9))

    assert INVOICE_NUMBER_PATTERN.match(number)
    assert number.startswith("INV-20240309-")


def test_purchase_order_number_format():
    number = generate_purchase_order_number(date(2024, 3, 9))

    assert number.startswith("PO-20240309-")
    assert len(number.split("-")[-1]) == 6


def test_numbers_are_random():
    numbers = {generate_invoice_number() for _ in range(50)}

    assert len(numbers) > 1
