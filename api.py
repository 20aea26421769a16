"""
Thai Bahttext — FastAPI Server
==============================

HTTP front for the Bahttext converter and the document totals pipeline.

Endpoints:
    POST /bahttext              Convert an amount to Thai words
    GET  /bahttext/{amount}     Same, amount in the path
    POST /documents/totals      Subtotal, VAT, withholding, net total + words
    POST /documents/validate    Totals plus pre-issue checks
    GET  /health                Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from decimal import Decimal

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from thai_bahttext import __version__
from thai_bahttext.config import configure_logging, load_settings
from thai_bahttext.converter import convert_amount_to_thai_text
from thai_bahttext.exceptions import BahtTextError
from thai_bahttext.models import BusinessDocument, DocumentTotals, ValidationReport
from thai_bahttext.pipeline import DocumentPipeline


# ─── Application Lifespan ───────────────────────────────────────────

_pipeline: DocumentPipeline | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Read settings once on startup."""
    global _pipeline  # noqa: PLW0603
    settings = load_settings()
    configure_logging(settings)
    _pipeline = DocumentPipeline(settings)
    yield
    _pipeline = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Thai Bahttext API",
    description=(
        "Converts monetary amounts to Thai words (บาท/สตางค์) and computes "
        "quotation, invoice and receipt totals with the amount in words."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class BahtTextRequest(BaseModel):
    """Request body for the /bahttext endpoint."""

    amount: Decimal = Field(
        ...,
        description="Amount in Baht; rounded half-up to satang.",
        json_schema_extra={"example": "1234.56"},
    )


class BahtTextResponse(BaseModel):
    amount: str
    text: str
    text_in_parentheses: str

    model_config = {"json_schema_extra": {"example": {
        "amount": "1234.56",
        "text": "หนึ่งพันสองร้อยสามสิบสี่บาทห้าสิบหกสตางค์",
        "text_in_parentheses": "(หนึ่งพันสองร้อยสามสิบสี่บาทห้าสิบหกสตางค์)",
    }}}


class HealthResponse(BaseModel):
    status: str
    version: str
    vat_rate: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_pipeline() -> DocumentPipeline:
    if _pipeline is None:
        raise HTTPException(status_code=503, detail="Pipeline not initialised")
    return _pipeline


def _convert(amount: Decimal | str) -> BahtTextResponse:
    text = convert_amount_to_thai_text(amount)
    return BahtTextResponse(
        amount=str(amount),
        text=text,
        text_in_parentheses=f"({text})",
    )


@app.exception_handler(BahtTextError)
async def _bahttext_error_handler(request: Request, exc: BahtTextError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"code": exc.code, "message": exc.message, "details": exc.details},
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/bahttext",
    summary="Convert an amount to Thai words",
    tags=["Bahttext"],
)
def bahttext_from_body(request: BahtTextRequest) -> BahtTextResponse:
    """Returns the Bahttext and its parenthesized display form."""
    return _convert(request.amount)


@app.get(
    "/bahttext/{amount}",
    summary="Convert an amount given in the path",
    tags=["Bahttext"],
    responses={422: {"description": "Amount is not a finite number, or is too large"}},
)
def bahttext_from_path(amount: str) -> BahtTextResponse:
    return _convert(amount)


@app.post(
    "/documents/totals",
    summary="Compute document totals",
    tags=["Documents"],
    responses={503: {"description": "Pipeline not yet initialised"}},
)
def document_totals(document: BusinessDocument) -> DocumentTotals:
    """Subtotal, VAT, withholding tax, net total and the net total in words."""
    return _get_pipeline().calculate_totals(document)


@app.post(
    "/documents/validate",
    summary="Validate a document before issuing it",
    tags=["Documents"],
    responses={503: {"description": "Pipeline not yet initialised"}},
)
def validate_document(document: BusinessDocument) -> ValidationReport:
    """Run totals and all pre-issue checks.

    Returns a structured report with:
    - **is_valid**: `true` if the document has no ERROR findings
    - **findings**: errors and warnings
    - **totals**: the computed money lines and amount in words
    - **document_hash**: SHA-256 of the submitted document
    """
    return _get_pipeline().run(document)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Pipeline not yet initialised"}},
)
def health_check() -> HealthResponse:
    pipeline = _get_pipeline()
    return HealthResponse(
        status="healthy",
        version=__version__,
        vat_rate=str(pipeline.settings.vat_rate),
    )
