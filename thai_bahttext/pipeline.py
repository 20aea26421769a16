"""
Document pipeline — totals, amount in words, and pre-issue checks.

Flow:
  ┌──────────┐
  │ Document │
  └────┬─────┘
       │
  ┌────▼─────┐
  │  Audit   │   ← SHA-256 of the canonical JSON
  │   hash   │
  └────┬─────┘
       │
  ┌────▼─────┐
  │  Totals  │   ← VAT, withholding, net total, Bahttext
  └────┬─────┘
       │
  ┌────▼─────┐
  │Validators│   ← Pure code checks
  └────┬─────┘
       │
  ┌────▼─────┐
  │  Report  │   ← Typed findings + pass/fail
  └──────────┘
"""

from __future__ import annotations

import hashlib
import logging

from .config import Settings, load_settings
from .models import BusinessDocument, DocumentTotals, Severity, ValidationReport
from .totals import calculate_totals
from .validators import validate_all

logger = logging.getLogger(__name__)


class DocumentPipeline:
    """Computes totals for a document and validates it.

    Usage:
        pipeline = DocumentPipeline()
        report = pipeline.run(document)
        print(report.totals.amount_in_words_display)
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or load_settings()

    def run(self, document: BusinessDocument) -> ValidationReport:
        """Execute the full pipeline on one document."""
        # ── Step 0: Audit hash of the input ─────────────────────────
        canonical = document.model_dump_json()
        doc_hash = hashlib.sha256(canonical.encode("utf-8")).hexdigest()

        # ── Step 1: Totals ──────────────────────────────────────────
        logger.info(
            "Calculating totals for %s %s (%d item(s))",
            document.document_type.value,
            document.document_number,
            len(document.items),
        )
        totals = self.calculate_totals(document)

        # ── Step 2: Validate ────────────────────────────────────────
        findings = validate_all(document, totals)
        has_errors = any(f.severity == Severity.ERROR for f in findings)
        if has_errors:
            logger.warning(
                "%s %s failed validation: %s",
                document.document_type.value,
                document.document_number,
                ", ".join(f.code for f in findings if f.severity == Severity.ERROR),
            )
        else:
            logger.info("%s passed all checks", document.document_number)

        # ── Step 3: Report ──────────────────────────────────────────
        return ValidationReport(
            document_number=document.document_number,
            document_type=document.document_type,
            is_valid=not has_errors,
            findings=findings,
            totals=totals,
            document_hash=doc_hash,
        )

    def calculate_totals(self, document: BusinessDocument) -> DocumentTotals:
        return calculate_totals(
            document,
            vat_rate=self.settings.vat_rate,
            default_withholding_percent=self.settings.default_withholding_percent,
        )
