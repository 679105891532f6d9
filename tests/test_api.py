"""
API Integration Tests — Endpoint Verification

Tests every public API endpoint using FastAPI's TestClient.

These tests catch:
  - Schema mismatches (response model vs actual data)
  - Route registration issues
  - Input validation regressions
  - Response format regressions
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

SCAM_POSTING = (
    "wire money now to secure this high paying remote job, $15000/month, "
    "immediate hiring!!!"
)

ACME_POSTING = (
    "Acme Corporation Inc. is hiring a Software Engineer. Visit www.acmecorp.com "
    "or email careers@acmecorp.com. Benefits include 401k, health insurance, and "
    "dental. Founded in 2005, we have 500 employees. Call (555) 123-4567."
)


# --- Fixtures ---

@pytest.fixture(scope="module")
def client():
    """Create a test client for the jobscreen API."""
    from api.main import app
    with TestClient(app) as c:
        yield c


# ============================================================
# HEALTH
# ============================================================

class TestHealth:

    def test_health_returns_200(self, client):
        r = client.get("/health")
        assert r.status_code == 200

    def test_health_fields(self, client):
        data = client.get("/health").json()
        assert data["status"] == "operational"
        assert data["version"]
        assert data["library_version"]


# ============================================================
# PREDICT
# ============================================================

class TestPredict:

    def test_scam_posting_is_fake(self, client):
        r = client.post("/predict", json={"text": SCAM_POSTING})
        assert r.status_code == 200
        data = r.json()
        assert data["verdict"] == "FAKE"
        labels = [f["label"] for f in data["red_flags"]]
        assert "REQUEST_MONEY" in labels
        assert "COMPANY_NAME_MISSING" in labels

    def test_legitimate_posting_is_real(self, client):
        r = client.post("/predict", json={"text": ACME_POSTING})
        assert r.status_code == 200
        data = r.json()
        assert data["verdict"] == "REAL"
        assert data["metadata"]["company_score"] > 6
        assert "Acme Corporation" in data["metadata"]["company_name"]

    def test_response_schema_fields(self, client):
        data = client.post("/predict", json={"text": ACME_POSTING}).json()
        for field in ("verdict", "confidence", "explanation", "recommendations",
                      "red_flags", "metadata"):
            assert field in data, f"Missing field: {field}"
        assert len(data["metadata"]["company_indicators"]) == 9

    def test_flag_structure(self, client):
        data = client.post("/predict", json={"text": SCAM_POSTING}).json()
        flag = data["red_flags"][0]
        for field in ("label", "match_count", "severity", "description", "source"):
            assert field in flag

    def test_short_text_rejected(self, client):
        r = client.post("/predict", json={"text": "Apply now!"})
        assert r.status_code == 422

    def test_long_text_rejected(self, client):
        r = client.post("/predict", json={"text": "a" * 10_001})
        assert r.status_code == 422

    def test_missing_text_rejected(self, client):
        r = client.post("/predict", json={})
        assert r.status_code == 422


# ============================================================
# PREDICT BATCH
# ============================================================

class TestPredictBatch:

    def test_batch_returns_results_in_order(self, client):
        r = client.post("/predict/batch", json={
            "items": [{"text": SCAM_POSTING}, {"text": ACME_POSTING}],
        })
        assert r.status_code == 200
        data = r.json()
        assert data["total"] == 2
        assert [res["verdict"] for res in data["results"]] == ["FAKE", "REAL"]

    def test_batch_empty_rejected(self, client):
        r = client.post("/predict/batch", json={"items": []})
        assert r.status_code == 422

    def test_batch_item_validated(self, client):
        r = client.post("/predict/batch", json={"items": [{"text": "short"}]})
        assert r.status_code == 422


# ============================================================
# PATTERNS
# ============================================================

class TestPatterns:

    def test_patterns_returns_all(self, client):
        r = client.get("/patterns")
        assert r.status_code == 200
        data = r.json()
        assert data["total"] == 13
        assert data["library_version"]

    def test_patterns_by_family(self, client):
        data = client.get("/patterns?family=positive").json()
        assert data["total"] == 4
        assert all(p["weight"] < 0 for p in data["patterns"])

    def test_unknown_family_rejected(self, client):
        r = client.get("/patterns?family=bogus")
        assert r.status_code == 422
