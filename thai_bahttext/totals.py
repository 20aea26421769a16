"""
Document totals: subtotal → VAT → total → withholding → net total → words.

    subtotal     = Σ top-level item amounts (sub-items are descriptive only)
    vat          = subtotal × VAT rate            (if the document has VAT)
    total        = subtotal + vat
    withholding  = subtotal × percent / 100       (invoices only)
    net total    = total − withholding

Every money line is rounded half-up to satang, the same rounding the
converter applies, so the words always match the printed figure.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from .config import DEFAULT_VAT_RATE, DEFAULT_WITHHOLDING_PERCENT
from .converter import convert_amount_to_thai_text, format_amount_in_parentheses
from .models import BusinessDocument, DocumentTotals, DocumentType

_CENTS = Decimal("0.01")


def _money(value: Decimal) -> Decimal:
    return value.quantize(_CENTS, rounding=ROUND_HALF_UP)


def calculate_totals(
    document: BusinessDocument,
    vat_rate: Decimal = DEFAULT_VAT_RATE,
    default_withholding_percent: Decimal = DEFAULT_WITHHOLDING_PERCENT,
) -> DocumentTotals:
    """Compute the money lines and the amount in words for a document."""
    subtotal = _money(sum((item.amount for item in document.items), Decimal(0)))

    applied_vat_rate = vat_rate if document.has_vat else Decimal(0)
    vat_amount = _money(subtotal * applied_vat_rate)
    total = subtotal + vat_amount

    # Withholding tax is deducted by the payer, so only invoices show it
    withholding_percent = Decimal(0)
    if document.has_withholding_tax and document.document_type == DocumentType.INVOICE:
        withholding_percent = (
            document.withholding_tax_percent
            if document.withholding_tax_percent is not None
            else default_withholding_percent
        )
    withholding_amount = _money(subtotal * withholding_percent / 100)

    net_total = total - withholding_amount

    return DocumentTotals(
        subtotal=subtotal,
        vat_rate=applied_vat_rate,
        vat_amount=vat_amount,
        total=total,
        withholding_tax_percent=withholding_percent,
        withholding_tax_amount=withholding_amount,
        net_total=net_total,
        amount_in_words=convert_amount_to_thai_text(net_total),
        amount_in_words_display=format_amount_in_parentheses(net_total),
    )
