"""
Integration tests for the HTTP API.

These tests exercise the FastAPI application end to end through an
in-process ASGI transport: request validation, service calls and
response serialization.

Author: TenderCortex Team
"""

import httpx
import pytest
import pytest_asyncio

from app.core import Settings
from app.main import app, create_app


def _supplier(name: str, response_id: str, **signals) -> dict:
    return {
        "identity": {
            "response_id": response_id,
            "supplier_name": name,
            "supplier_email": f"{name.lower()}@example.com",
        },
        **signals,
    }


COHORT = [
    _supplier(
        "Acme", "r-1",
        requirements_coverage={"coverage_percentage": 80},
        pricing={"total_cost": 100000},
        technical_claims=["SSO", "Audit log"],
        differentiators=["On-prem option"],
        risk_flags=[
            {"severity": "LOW", "category": "staffing"},
            {"severity": "MEDIUM", "category": "delivery"},
        ],
        assumptions=["Client provides test data"],
        demo_summary={"key_capabilities": ["a", "b", "c"], "gaps": ["d"]},
    ),
    _supplier(
        "Globex", "r-2",
        requirements_coverage={"coverage_percentage": 95},
        pricing={"total_cost": 150000},
        technical_claims=["c1", "c2", "c3", "c4", "c5", "c6"],
        differentiators=["d1", "d2", "d3"],
        risk_flags=[],
        assumptions=[],
        demo_summary={"key_capabilities": ["a", "b", "c", "d", "e"], "gaps": []},
    ),
]


@pytest_asyncio.fixture
async def client():
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.mark.integration
class TestHealth:
    """Tests for the health endpoint."""

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    @pytest.mark.asyncio
    async def test_health_reports_app_settings(self):
        custom = create_app(Settings(app_env="staging", max_cohort_size=5))
        transport = httpx.ASGITransport(app=custom)

        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
            response = await ac.get("/health")

        assert response.json() == {
            "status": "ok",
            "env": "staging",
            "version": "0.1.0",
            "max_cohort_size": 5,
        }


@pytest.mark.integration
class TestComparisonEndpoint:
    """Tests for POST /api/comparison/run."""

    @pytest.mark.asyncio
    async def test_run_with_default_weights(self, client):
        response = await client.post("/api/comparison/run", json={"suppliers": COHORT})

        assert response.status_code == 200
        body = response.json()
        assert body["matrix_used"] is False
        assert body["matrix_name"] == "Default Weights"
        assert body["weights"]["requirementsCoverage"] == 30
        assert [c["supplier_name"] for c in body["comparisons"]] == ["Acme", "Globex"]
        assert [c["rank"] for c in body["comparisons"]] == [1, 2]
        assert [c["total_score"] for c in body["comparisons"]] == [70, 62]
        assert body["comparisons"][0]["metrics"]["technical_strength"] == 20

    @pytest.mark.asyncio
    async def test_run_with_unknown_criteria(self, client):
        payload = {
            "suppliers": COHORT,
            "evaluation_matrix": {
                "name": "Buyer Matrix",
                "criteria": [{"id": "vendorStability", "weight": 20}],
            },
        }

        response = await client.post("/api/comparison/run", json=payload)

        assert response.status_code == 200
        body = response.json()
        assert body["weight_status"] == "warning"
        assert body["unknown_criteria"] == ["vendorStability"]

    @pytest.mark.asyncio
    async def test_empty_cohort(self, client):
        response = await client.post("/api/comparison/run", json={"suppliers": []})

        assert response.status_code == 200
        assert response.json()["comparisons"] == []

    @pytest.mark.asyncio
    async def test_duplicate_response_ids_rejected(self, client):
        cohort = [_supplier("A", "dup"), _supplier("B", "dup")]

        response = await client.post("/api/comparison/run", json={"suppliers": cohort})

        assert response.status_code == 400
        assert "Duplicate response ids" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_negative_weight_is_invalid(self, client):
        payload = {
            "suppliers": COHORT,
            "evaluation_matrix": {"criteria": [{"id": "riskProfile", "weight": -5}]},
        }

        response = await client.post("/api/comparison/run", json=payload)

        assert response.status_code == 422


@pytest.mark.integration
class TestReadinessEndpoints:
    """Tests for the readiness endpoints."""

    @pytest.mark.asyncio
    async def test_classify(self, client):
        cohort = [
            _supplier("Clean", "c-1", compliance_findings={"overall_compliance_score": 92}),
            _supplier(
                "Blocked", "b-1",
                mandatory_status={"unmet_mandatory_count": 3},
            ),
        ]

        response = await client.post("/api/readiness/classify", json={"suppliers": cohort})

        assert response.status_code == 200
        body = response.json()
        assert body["suppliers_analyzed"] == 2
        assert body["summary"] == {"ready": 1, "conditional": 0, "not_ready": 1}
        assert body["suppliers"][0]["label"] == "Ready"
        assert body["suppliers"][1]["readiness"]["indicator"] == "NOT_READY"

    @pytest.mark.asyncio
    async def test_classify_rejects_invalid_severity(self, client):
        cohort = [_supplier("X", "x-1", risk_flags=[{"severity": "EXTREME", "category": "legal"}])]

        response = await client.post("/api/readiness/classify", json={"suppliers": cohort})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_categories(self, client):
        payload = {
            "structured_data": {
                "executiveSummary": "Overview",
                "certifications": ["SOC 2 Type II"],
                "dataPrivacy": "GDPR",
            }
        }

        response = await client.post("/api/readiness/categories", json=payload)

        assert response.status_code == 200
        body = response.json()
        assert len(body["categories"]) == 6
        flag_types = [f["flag_type"] for f in body["compliance_flags"]]
        assert "Missing Certification" not in flag_types
        assert "Data Privacy" not in flag_types
        assert "Executive Summary" not in [m["requirement"] for m in body["missing_requirements"]]

    @pytest.mark.asyncio
    async def test_categories_empty_body(self, client):
        response = await client.post("/api/readiness/categories", json={})

        assert response.status_code == 200
        assert response.json()["overall_score"] == 0
