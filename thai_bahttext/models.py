"""
Pydantic models for quotations, invoices and receipts.

Money is always Decimal. Floats are accepted at the boundary and converted by
pydantic, never used for arithmetic.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field


# ─── Severity Levels ────────────────────────────────────────────────


class Severity(str, Enum):
    """Severity of a validation finding."""

    ERROR = "ERROR"  # Document must not be issued
    WARNING = "WARNING"  # Unusual, needs a human look
    INFO = "INFO"


class DocumentType(str, Enum):
    QUOTATION = "QUOTATION"
    INVOICE = "INVOICE"
    RECEIPT = "RECEIPT"


# ─── Validation Finding ─────────────────────────────────────────────


class ValidationFinding(BaseModel):
    """A single validation finding with severity, machine-readable code, and details."""

    severity: Severity
    code: str  # e.g. "AMOUNT_IN_WORDS_MISMATCH"
    field: str
    message: str
    details: dict = Field(default_factory=dict)


# ─── Document Models ────────────────────────────────────────────────


class LineItem(BaseModel):
    """One row of a document. Sub-items describe the row and carry no price of their own."""

    description: str = ""
    quantity: Decimal = Decimal(1)
    unit: str = "ชิ้น"
    price_per_unit: Decimal = Decimal(0)
    sub_items: list[LineItem] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def amount(self) -> Decimal:
        return self.quantity * self.price_per_unit


class BusinessDocument(BaseModel):
    """A quotation, invoice or receipt as entered on the form."""

    document_type: DocumentType = DocumentType.INVOICE
    document_number: str = "UNNUMBERED"
    customer_name: str = ""
    customer_address: str = ""
    customer_tax_id: Optional[str] = None
    issue_date: Optional[date] = None
    due_date: Optional[date] = None
    items: list[LineItem] = Field(default_factory=list)
    has_vat: bool = True
    has_withholding_tax: bool = False
    withholding_tax_percent: Optional[Decimal] = None  # None → configured default
    amount_in_words: Optional[str] = None  # As written on the document, if any


class DocumentTotals(BaseModel):
    """Computed money lines for the bottom of a document."""

    subtotal: Decimal
    vat_rate: Decimal
    vat_amount: Decimal
    total: Decimal
    withholding_tax_percent: Decimal
    withholding_tax_amount: Decimal
    net_total: Decimal
    amount_in_words: str
    amount_in_words_display: str  # Parenthesized, as printed


# ─── Validation Report ──────────────────────────────────────────────


class ValidationReport(BaseModel):
    """The final output of the document pipeline."""

    document_number: str
    document_type: DocumentType
    is_valid: bool
    findings: list[ValidationFinding] = Field(default_factory=list)
    totals: Optional[DocumentTotals] = None
    document_hash: str = ""  # SHA-256 of the canonical document JSON
