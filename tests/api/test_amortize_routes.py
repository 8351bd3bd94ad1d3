import pytest
from fastapi.testclient import TestClient

from mortgage_calc.api import app as app_module
from mortgage_calc.api.app import app
from mortgage_calc.api.schemas import AmortizeRequest
from mortgage_calc.config import settings
from mortgage_calc.engine import calculator
from mortgage_calc.engine.errors import NumericOverflow


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestAmortize:
    def test_defaults_when_body_empty(self, client):
        resp = client.post("/api/v1/amortize", json={})
        assert resp.status_code == 200
        data = resp.json()
        assert data["loan_amount"] == 300000
        assert data["annual_rate"] == 6.5
        assert data["years"] == 30
        assert len(data["schedule"]) == 30
        assert 22000 <= data["annual_payment"] <= 24000

    def test_zero_rate(self, client):
        resp = client.post(
            "/api/v1/amortize",
            json={"loan_amount": 120000, "annual_rate": 0, "years": 10},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["annual_payment"] == 12000
        assert data["totals"] == {
            "payment": 120000,
            "interest": 0,
            "principal": 120000,
            "ending_balance": 0,
            "interest_share": 0,
        }
        assert data["schedule"][0] == {
            "year": 1,
            "payment": 12000,
            "interest": 0,
            "principal": 12000,
            "ending_balance": 108000,
        }
        assert data["schedule"][-1]["ending_balance"] == 0

    def test_fractional_years_rounded(self, client):
        resp = client.post("/api/v1/amortize", json={"years": 14.5})
        assert resp.status_code == 200
        assert resp.json()["years"] == 15

    def test_validation_errors(self, client):
        resp = client.post(
            "/api/v1/amortize",
            json={"loan_amount": 500, "annual_rate": 6.5, "years": 41},
        )
        assert resp.status_code == 422
        errors = resp.json()["detail"]["errors"]
        assert errors == {
            "loan_amount": "Loan amount must be between $1,000 and $10,000,000",
            "years": "Term must be between 1 and 40 years",
        }

    def test_engine_failure_is_400(self, client, monkeypatch):
        def overflow(*args):
            raise NumericOverflow("factor out of range")

        monkeypatch.setattr(calculator, "compute_schedule", overflow)
        resp = client.post("/api/v1/amortize", json={})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "factor out of range"


class TestLimits:
    def test_limits(self, client):
        resp = client.get("/api/v1/amortize/limits")
        assert resp.status_code == 200
        fields = resp.json()["fields"]
        assert set(fields) == {"loan_amount", "annual_rate", "years"}
        assert fields["years"]["min"] == 1
        assert fields["years"]["max"] == 40
        assert fields["annual_rate"]["label"] == "Annual Interest Rate (%)"


class TestDefaults:
    def test_request_fills_from_calculator_defaults(self, monkeypatch):
        monkeypatch.setattr(settings, "default_years", 15)
        inputs = AmortizeRequest(loan_amount=200000).to_inputs()
        assert inputs == {"loan_amount": 200000, "annual_rate": 6.5, "years": 15}

    def test_empty_body_uses_configured_defaults(self, client, monkeypatch):
        monkeypatch.setattr(settings, "default_years", 15)
        resp = client.post("/api/v1/amortize", json={})
        assert resp.status_code == 200
        assert resp.json()["years"] == 15

    def test_tiny_rate_accepted(self, client):
        resp = client.post(
            "/api/v1/amortize",
            json={"loan_amount": 300000, "annual_rate": 1e-14, "years": 30},
        )
        assert resp.status_code == 200
        assert resp.json()["annual_payment"] == pytest.approx(10000, rel=1e-6)


class TestServerRunner:
    def test_run_serves_app_with_configured_address(self, monkeypatch):
        calls = []
        monkeypatch.setattr(app_module.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
        app_module.run()
        assert calls == [((app,), {"host": settings.host, "port": settings.port, "log_level": "info"})]
