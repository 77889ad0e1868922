"""
Tests for the HTTP adapter
"""
import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from programme_eligibility.main import app
from programme_eligibility.routes import scoring as scoring_routes


@pytest.fixture
def client():
    return TestClient(app)


BENEFICIARY = {"id": "BEN-1", "region_id": "Dakar", "sector": "Agriculture", "ninea": "123", "employee_count": 3}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "programme-eligibility"}


def test_root(client):
    assert "version" in client.get("/").json()


class TestEligibilityRoutes:

    def test_check_reports_reasons(self, client):
        response = client.post("/api/v1/eligibility/check", json={
            "beneficiary": BENEFICIARY,
            "programme": {"status": "OUVERT", "target_regions": ["Thiès"], "criteria": {"min_employees": 5}},
        })

        assert response.status_code == 200
        assert response.json() == {
            "eligible": False,
            "reasons": ["Region not eligible", "Insufficient employee count (minimum: 5)"],
        }

    def test_check_accepts_store_column_names(self, client):
        response = client.post("/api/v1/eligibility/check", json={
            "beneficiary": {"region_id": "Dakar", "secteur": "Commerce"},
            "programme": {"statut": "OUVERT", "criteres_eligibilite": {"secteurs": ["Commerce"]}},
        })
        assert response.json() == {"eligible": True, "reasons": ["Eligible"]}

    def test_check_accepts_null_answers(self, client):
        response = client.post("/api/v1/eligibility/check", json={
            "beneficiary": BENEFICIARY,
            "programme": {"status": "OUVERT"},
            "responses": {"B1": None, "C2": 3},
        })
        assert response.json() == {"eligible": True, "reasons": ["Eligible"]}

    def test_invalid_beneficiary_rejected(self, client):
        response = client.post("/api/v1/eligibility/check", json={
            "beneficiary": {"employee_count": -3},
            "programme": {},
        })
        assert response.status_code == 422

    def test_programmes_filtered(self, client):
        response = client.post("/api/v1/eligibility/programmes", json={
            "beneficiary": BENEFICIARY,
            "reference_date": "2025-06-01",
            "programmes": [
                {"id": "a", "status": "OUVERT", "start_date": "2025-01-01", "end_date": "2025-12-31"},
                {"id": "b", "status": "FERMÉ"},
                {"id": "c", "status": "EN_COURS", "end_date": "2025-05-31"},
                {"id": "d", "status": "EN_COURS", "target_regions": ["Dakar"]},
            ],
        })

        body = response.json()
        assert response.status_code == 200
        assert body["total_programmes_checked"] == 4
        assert body["eligible_count"] == 2
        assert [p["id"] for p in body["eligible_programmes"]] == ["a", "d"]

    def test_assess(self, client, full_responses):
        response = client.post("/api/v1/eligibility/assess", json={
            "beneficiary": BENEFICIARY,
            "programme": {"status": "OUVERT"},
            "responses": full_responses,
        })

        body = response.json()
        assert body["verdict"]["eligible"] is True
        assert body["score"] == 100
        assert body["recommendation"]["decision"] == "ACCEPTED"


class TestScoringRoutes:

    def test_score(self, client):
        response = client.post("/api/v1/scoring/score", json={"responses": {"B1": "oui", "C1": "oui"}})

        body = response.json()
        assert body["score"] == 15
        assert body["breakdown"]["score"] == 15
        assert body["recommendation"]["decision"] == "REJECTED"

    def test_unanswered_and_malformed_answers_score_zero(self, client):
        response = client.post(
            "/api/v1/scoring/score",
            json={"responses": {"B1": "oui", "A5": None, "C2": 3, "D4": "", "A6": None}}
        )

        assert response.status_code == 200
        assert response.json()["score"] == 5

    def test_http_errors_pass_through(self, client, monkeypatch):
        def unavailable(responses, criteria=None):
            raise HTTPException(status_code=503, detail="Scoring unavailable")

        monkeypatch.setattr(scoring_routes, "calculate_score", unavailable)
        response = client.post("/api/v1/scoring/score", json={"responses": {}})

        assert response.status_code == 503
        assert response.json()["detail"] == "Scoring unavailable"

    def test_recommendation(self, client):
        response = client.get("/api/v1/scoring/recommendation/60")
        assert response.json() == {"label": "Good application", "color": "#14b8a6", "decision": "ACCEPTED"}

    @pytest.mark.parametrize("score", [-1, 101])
    def test_recommendation_out_of_range(self, client, score):
        assert client.get(f"/api/v1/scoring/recommendation/{score}").status_code == 422

    def test_rubric(self, client):
        rubric = client.get("/api/v1/scoring/rubric").json()

        assert [c["weight"] for c in rubric] == [20, 25, 25, 15, 10, 5]
        for category in rubric:
            assert sum(item["points"] for item in category["items"]) == category["weight"]


class TestProgrammeRoutes:

    def test_validate(self, client):
        response = client.post("/api/v1/programmes/validate", json={"name": "Appui PME", "budget": -10})

        body = response.json()
        assert body["valid"] is False
        assert [e["rule_id"] for e in body["errors"]] == ["PROG-001"]
