"""
Thai Bahttext — amounts in Thai words for quotations, invoices and receipts.

Core:     convert_amount_to_thai_text(1234.56) → "หนึ่งพันสองร้อยสามสิบสี่บาทห้าสิบหกสตางค์"
Around it: document totals (VAT, withholding) and amount-in-words checks.
"""

from .converter import (
    BATHTEXT,
    baht_text_with_symbol,
    bahttext,
    convert_amount_to_thai_text,
    convert_integer_to_thai_words,
    format_amount_in_parentheses,
)

__version__ = "1.0.0"

__all__ = [
    "BATHTEXT",
    "baht_text_with_symbol",
    "bahttext",
    "convert_amount_to_thai_text",
    "convert_integer_to_thai_words",
    "format_amount_in_parentheses",
]
