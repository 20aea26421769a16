"""
FastAPI endpoint tests for the Thai Bahttext API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

from decimal import Decimal

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from thai_bahttext.config import Settings
from thai_bahttext.pipeline import DocumentPipeline

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _warm_pipeline() -> None:
    """Initialise the pipeline once for all API tests (bypasses lifespan)."""
    api._pipeline = DocumentPipeline(Settings())
    yield  # type: ignore[misc]
    api._pipeline = None


INVOICE = {
    "document_type": "INVOICE",
    "document_number": "INV-20250122-0001",
    "customer_name": "บริษัท ตัวอย่าง จำกัด",
    "customer_address": "123 ถนนสุขุมวิท กรุงเทพฯ",
    "issue_date": "2025-01-22",
    "due_date": "2025-02-21",
    "items": [
        {"description": "ออกแบบระบบ", "quantity": 1, "price_per_unit": 10000},
        {"description": "ติดตั้ง", "quantity": 2, "price_per_unit": 5000},
        {"description": "อบรม", "quantity": 1, "price_per_unit": 3500},
    ],
    "has_vat": True,
    "has_withholding_tax": True,
    "withholding_tax_percent": 3,
}


class TestHealthEndpoint:
    def test_health_response_shape(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["vat_rate"] == "0.07"


class TestBahtTextEndpoints:
    def test_post_amount(self) -> None:
        resp = client.post("/bahttext", json={"amount": "1234.56"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["text"] == "หนึ่งพันสองร้อยสามสิบสี่บาทห้าสิบหกสตางค์"
        assert data["text_in_parentheses"] == "(หนึ่งพันสองร้อยสามสิบสี่บาทห้าสิบหกสตางค์)"

    def test_post_numeric_amount(self) -> None:
        data = client.post("/bahttext", json={"amount": 25145}).json()
        assert data["text"] == "สองหมื่นห้าพันหนึ่งร้อยสี่สิบห้าบาทถ้วน"

    def test_post_rounding_boundary(self) -> None:
        data = client.post("/bahttext", json={"amount": "1.005"}).json()
        assert data["text"] == "หนึ่งบาทหนึ่งสตางค์"

    def test_get_amount_in_path(self) -> None:
        resp = client.get("/bahttext/-100")
        assert resp.status_code == 200
        assert resp.json()["text"] == "ลบหนึ่งร้อยบาทถ้วน"

    def test_missing_amount_returns_422(self) -> None:
        assert client.post("/bahttext", json={}).status_code == 422

    def test_non_numeric_body_returns_422(self) -> None:
        assert client.post("/bahttext", json={"amount": "lots"}).status_code == 422

    def test_non_finite_path_amount(self) -> None:
        resp = client.get("/bahttext/nan")
        assert resp.status_code == 422
        assert resp.json()["code"] == "NON_FINITE_AMOUNT"

    def test_garbage_path_amount(self) -> None:
        resp = client.get("/bahttext/abc")
        assert resp.status_code == 422
        assert resp.json()["code"] == "INVALID_AMOUNT"

    def test_too_large_path_amount(self) -> None:
        resp = client.get("/bahttext/1e1000000")
        assert resp.status_code == 422
        data = resp.json()
        assert data["code"] == "AMOUNT_OUT_OF_RANGE"
        assert data["details"]["max_digits"] == 1000

    def test_too_large_body_amount(self) -> None:
        resp = client.post("/bahttext", json={"amount": "1" + "0" * 1000})
        assert resp.status_code == 422

    def test_largest_path_amount_converts(self) -> None:
        resp = client.get("/bahttext/1e999")
        assert resp.status_code == 200
        assert resp.json()["text"] == "หนึ่งพัน" + "ล้าน" * 166 + "บาทถ้วน"

    def test_parenthesized_text_matches_text(self) -> None:
        data = client.get("/bahttext/0.25").json()
        assert data["text_in_parentheses"] == f"({data['text']})"


class TestDocumentEndpoints:
    def test_totals(self) -> None:
        resp = client.post("/documents/totals", json=INVOICE)
        assert resp.status_code == 200
        data = resp.json()
        assert Decimal(data["subtotal"]) == Decimal("23500")
        assert Decimal(data["vat_amount"]) == Decimal("1645")
        assert Decimal(data["withholding_tax_amount"]) == Decimal("705")
        assert Decimal(data["net_total"]) == Decimal("24440")
        assert data["amount_in_words"] == "สองหมื่นสี่พันสี่ร้อยสี่สิบบาทถ้วน"

    def test_validate_clean_invoice(self) -> None:
        data = client.post("/documents/validate", json=INVOICE).json()
        assert data["is_valid"] is True
        assert data["findings"] == []
        assert len(data["document_hash"]) == 64

    def test_validate_catches_wrong_words(self) -> None:
        body = dict(INVOICE, amount_in_words="(สองหมื่นห้าพันหนึ่งร้อยสี่สิบห้าบาทถ้วน)")
        data = client.post("/documents/validate", json=body).json()
        assert data["is_valid"] is False
        codes = {f["code"] for f in data["findings"]}
        assert codes == {"AMOUNT_IN_WORDS_MISMATCH"}

    def test_bad_document_type_returns_422(self) -> None:
        body = dict(INVOICE, document_type="PURCHASE_ORDER")
        assert client.post("/documents/totals", json=body).status_code == 422
