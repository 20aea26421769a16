"""
Deterministic checks on a business document before it is issued.

Each validator function:
  - Takes the document (and its computed totals where needed)
  - Returns a list of ValidationFinding objects (empty = all clear)
  - Is independently testable

The validate_all() function runs every check and aggregates findings.
"""

from __future__ import annotations

from decimal import Decimal

from .converter import convert_amount_to_thai_text
from .models import BusinessDocument, DocumentTotals, Severity, ValidationFinding


# ─── Orchestrator ────────────────────────────────────────────────────


def validate_all(
    document: BusinessDocument, totals: DocumentTotals
) -> list[ValidationFinding]:
    """Run ALL validators and collect findings."""
    findings: list[ValidationFinding] = []
    findings.extend(validate_customer(document))
    findings.extend(validate_dates(document))
    findings.extend(validate_line_items(document))
    findings.extend(validate_withholding_percent(document))
    findings.extend(validate_amount_in_words(document, totals))
    findings.extend(validate_net_total(totals))
    return findings


# ─── Individual Validators ───────────────────────────────────────────


def _required(value: str | None) -> bool:
    return bool(value and value.strip())


def validate_customer(document: BusinessDocument) -> list[ValidationFinding]:
    findings: list[ValidationFinding] = []

    if not _required(document.customer_name):
        findings.append(
            ValidationFinding(
                severity=Severity.ERROR,
                code="CUSTOMER_NAME_REQUIRED",
                field="customer_name",
                message="Customer name is required.",
            )
        )
    if not _required(document.customer_address):
        findings.append(
            ValidationFinding(
                severity=Severity.ERROR,
                code="CUSTOMER_ADDRESS_REQUIRED",
                field="customer_address",
                message="Customer address is required.",
            )
        )

    return findings


def validate_dates(document: BusinessDocument) -> list[ValidationFinding]:
    """A due date, when given, cannot come before the issue date."""
    findings: list[ValidationFinding] = []

    if document.issue_date and document.due_date and document.due_date < document.issue_date:
        gap = (document.issue_date - document.due_date).days
        findings.append(
            ValidationFinding(
                severity=Severity.ERROR,
                code="DUE_DATE_BEFORE_ISSUE_DATE",
                field="due_date",
                message=(
                    f"Due date ({document.due_date}) is {gap} day(s) before "
                    f"the issue date ({document.issue_date})."
                ),
                details={
                    "issue_date": str(document.issue_date),
                    "due_date": str(document.due_date),
                    "gap_days": gap,
                },
            )
        )

    return findings


def validate_line_items(document: BusinessDocument) -> list[ValidationFinding]:
    """At least one item; every item needs a description, unit, positive qty and a price ≥ 0."""
    findings: list[ValidationFinding] = []

    if not document.items:
        findings.append(
            ValidationFinding(
                severity=Severity.ERROR,
                code="NO_LINE_ITEMS",
                field="items",
                message="At least one item is required.",
            )
        )
        return findings

    for number, item in enumerate(document.items, start=1):
        field = f"items[{number - 1}]"
        if not _required(item.description):
            findings.append(
                ValidationFinding(
                    severity=Severity.ERROR,
                    code="ITEM_DESCRIPTION_REQUIRED",
                    field=f"{field}.description",
                    message=f"Item {number}: description is required.",
                )
            )
        if item.quantity <= 0:
            findings.append(
                ValidationFinding(
                    severity=Severity.ERROR,
                    code="ITEM_QUANTITY_NOT_POSITIVE",
                    field=f"{field}.quantity",
                    message=f"Item {number}: quantity must be greater than 0.",
                    details={"quantity": str(item.quantity)},
                )
            )
        if not _required(item.unit):
            findings.append(
                ValidationFinding(
                    severity=Severity.ERROR,
                    code="ITEM_UNIT_REQUIRED",
                    field=f"{field}.unit",
                    message=f"Item {number}: unit is required.",
                )
            )
        if item.price_per_unit < 0:
            findings.append(
                ValidationFinding(
                    severity=Severity.ERROR,
                    code="ITEM_PRICE_NEGATIVE",
                    field=f"{field}.price_per_unit",
                    message=f"Item {number}: price per unit must be 0 or greater.",
                    details={"price_per_unit": str(item.price_per_unit)},
                )
            )

    return findings


def validate_withholding_percent(document: BusinessDocument) -> list[ValidationFinding]:
    findings: list[ValidationFinding] = []

    percent = document.withholding_tax_percent
    if document.has_withholding_tax and percent is not None and not 0 <= percent <= 100:
        findings.append(
            ValidationFinding(
                severity=Severity.ERROR,
                code="WITHHOLDING_PERCENT_OUT_OF_RANGE",
                field="withholding_tax_percent",
                message=f"Withholding tax percentage must be between 0 and 100, got {percent}.",
                details={"withholding_tax_percent": str(percent)},
            )
        )

    return findings


def _normalize_words(text: str) -> str:
    """Drop surrounding parentheses and all whitespace; Thai has no word spacing."""
    return "".join(text.strip().strip("()").split())


def validate_amount_in_words(
    document: BusinessDocument, totals: DocumentTotals
) -> list[ValidationFinding]:
    """Cross-check the written amount against the Bahttext of the net total.

    Documents print both "25,145.00" and "(สองหมื่นห้าพัน...บาทถ้วน)". If a
    hand-edited line disagrees with the figure, the document is wrong.
    """
    findings: list[ValidationFinding] = []

    if document.amount_in_words is None:
        return findings

    expected = convert_amount_to_thai_text(totals.net_total)
    if _normalize_words(document.amount_in_words) != expected:
        findings.append(
            ValidationFinding(
                severity=Severity.ERROR,
                code="AMOUNT_IN_WORDS_MISMATCH",
                field="amount_in_words",
                message=(
                    f"Written amount \"{document.amount_in_words}\" does not match "
                    f"the net total {totals.net_total:,.2f} (\"{expected}\")."
                ),
                details={
                    "stated": document.amount_in_words,
                    "expected": expected,
                    "net_total": str(totals.net_total),
                },
            )
        )

    return findings


def validate_net_total(totals: DocumentTotals) -> list[ValidationFinding]:
    findings: list[ValidationFinding] = []

    if totals.net_total < Decimal(0):
        findings.append(
            ValidationFinding(
                severity=Severity.WARNING,
                code="NEGATIVE_NET_TOTAL",
                field="net_total",
                message=f"Net total is negative ({totals.net_total:,.2f}).",
                details={"net_total": str(totals.net_total)},
            )
        )

    return findings
