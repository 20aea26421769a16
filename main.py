#!/usr/bin/env python3
"""
Thai Bahttext — Entry Point
===========================

Usage:
    python main.py 1234.56 -100 0.25     # Print each amount in Thai words
    python main.py                       # Run a demo invoice through the pipeline
"""

from __future__ import annotations

import sys
from datetime import date
from decimal import Decimal

from thai_bahttext.config import configure_logging, load_settings
from thai_bahttext.converter import convert_amount_to_thai_text
from thai_bahttext.exceptions import BahtTextError
from thai_bahttext.models import BusinessDocument, DocumentType, LineItem, Severity
from thai_bahttext.pipeline import DocumentPipeline


# ─── Demo Invoice — one mistake on purpose ──────────────────────────

DEMO_INVOICE = BusinessDocument(
    document_type=DocumentType.INVOICE,
    document_number="INV-20250122-0001",
    customer_name="บริษัท ตัวอย่าง จำกัด",
    customer_address="123 ถนนสุขุมวิท กรุงเทพฯ 10110",
    issue_date=date(2025, 1, 22),
    due_date=date(2025, 2, 21),
    items=[
        LineItem(description="ออกแบบระบบ", quantity=Decimal(1), price_per_unit=Decimal(10000)),
        LineItem(description="ติดตั้ง", quantity=Decimal(2), price_per_unit=Decimal(5000)),
        LineItem(description="อบรมผู้ใช้", quantity=Decimal(1), unit="ครั้ง", price_per_unit=Decimal(3500)),
    ],
    has_vat=True,
    has_withholding_tax=True,
    withholding_tax_percent=Decimal(3),
    # Net total is 24,440.00, written here as 25,145 (the total before withholding)
    amount_in_words="(สองหมื่นห้าพันหนึ่งร้อยสี่สิบห้าบาทถ้วน)",
)


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_YELLOW = "\033[93m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def _print_totals(totals) -> None:
    print(f"  Subtotal:     {totals.subtotal:>14,.2f}")
    print(f"  VAT {totals.vat_rate:.0%}:      {totals.vat_amount:>14,.2f}")
    print(f"  Total:        {totals.total:>14,.2f}")
    if totals.withholding_tax_amount:
        print(f"  WHT {totals.withholding_tax_percent}%:       {-totals.withholding_tax_amount:>14,.2f}")
    print(f"  {_BOLD}Net total:    {totals.net_total:>14,.2f}{_RESET}")
    print(f"  {_DIM}{totals.amount_in_words_display}{_RESET}")


def print_report(report) -> int:
    """Pretty-print the validation report.

    Returns:
        0 if the document passed, 1 if it has errors.
    """
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  DOCUMENT CHECK — {report.document_type.value}{_RESET}")
    print(f"{'=' * _WIDTH}")
    print(f"  Document:    {report.document_number}")
    print(f"  Audit Hash:  {_DIM}{report.document_hash[:16]}...{_RESET}")
    print(f"{'─' * _WIDTH}")

    if report.totals:
        _print_totals(report.totals)

    print(f"{'─' * _WIDTH}")
    for severity, color in ((Severity.ERROR, _RED), (Severity.WARNING, _YELLOW)):
        group = [f for f in report.findings if f.severity == severity]
        if not group:
            continue
        print(f"\n  {color}{_BOLD}{severity.value}S ({len(group)}){_RESET}")
        for f in group:
            print(f"    {color}[{f.code}]{_RESET}")
            print(f"    {f.message}")
        print()

    print(f"{'=' * _WIDTH}")
    if report.is_valid:
        print(f"  {_GREEN}{_BOLD}DOCUMENT PASSED ALL CHECKS{_RESET}")
    else:
        errors = sum(1 for f in report.findings if f.severity == Severity.ERROR)
        print(f"  {_RED}{_BOLD}DOCUMENT REJECTED  --  {errors} error(s) found{_RESET}")
    print(f"{'=' * _WIDTH}\n")

    return 0 if report.is_valid else 1


def convert_amounts(amounts: list[str]) -> int:
    """Print one line per amount. Returns 1 if any amount was rejected."""
    exit_code = 0
    for raw in amounts:
        try:
            print(f"{raw}\t{convert_amount_to_thai_text(raw)}")
        except BahtTextError as e:
            print(f"{raw}\t{_RED}[{e.code}] {e}{_RESET}", file=sys.stderr)
            exit_code = 1
    return exit_code


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    settings = load_settings()
    configure_logging(settings)

    if args:
        return convert_amounts(args)

    pipeline = DocumentPipeline(settings)
    return print_report(pipeline.run(DEMO_INVOICE))


if __name__ == "__main__":
    sys.exit(main())
