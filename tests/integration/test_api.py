"""Integration tests for API endpoints"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from assetflow.config import settings


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert "X-Request-ID" in response.headers


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post(
        "/v1/projection",
        json={"bills": [], "income": [], "historical_expenses": [], "start": "2024-01-10"},
    )

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "assetflow_projection_total" in response.text


def test_occurrences_every_x_days_alias(client: TestClient):
    """Stored EVERY_X_DAYS spelling is accepted and previewed"""
    response = client.post(
        "/v1/occurrences",
        json={"anchor_date": "2024-01-01", "frequency": "EVERY_X_DAYS", "custom_value": 28, "count": 4},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["frequency"] == "EVERY_N_DAYS"
    assert data["description"] == "Every 28 days"
    assert data["dates"] == ["2024-01-01", "2024-01-29", "2024-02-26", "2024-03-25"]


def test_occurrences_default_count(client: TestClient):
    response = client.post(
        "/v1/occurrences",
        json={"anchor_date": "2024-03-31", "frequency": "SPECIFIC_DAY", "custom_value": 31, "context": "PAYDAY"},
    )

    assert response.status_code == 200
    data = response.json()
    assert len(data["dates"]) == settings.preview_count
    assert data["dates"][:2] == ["2024-03-31", "2024-04-30"]
    assert data["description"] == "On the 31st of every month"


@pytest.mark.parametrize("custom_value", [0, 32])
def test_occurrences_invalid_custom_value(client: TestClient, custom_value: int):
    response = client.post(
        "/v1/occurrences",
        json={"anchor_date": "2024-01-01", "frequency": "SPECIFIC_DAY_OF_MONTH", "custom_value": custom_value},
    )

    assert response.status_code == 422


def test_occurrences_unknown_frequency(client: TestClient):
    response = client.post(
        "/v1/occurrences",
        json={"anchor_date": "2024-01-01", "frequency": "HOURLY"},
    )

    assert response.status_code == 422


def test_occurrences_benefit_rejects_custom_schedule(client: TestClient):
    response = client.post(
        "/v1/occurrences",
        json={
            "anchor_date": "2024-01-01",
            "frequency": "EVERY_N_DAYS",
            "custom_value": 10,
            "context": "BENEFIT",
        },
    )

    assert response.status_code == 422


def test_projection_endpoint(client: TestClient):
    """Monthly $1000 bill, no history, default six-month horizon"""
    response = client.post(
        "/v1/projection",
        json={
            "bills": [
                {"amount": 1000, "frequency": "MONTHLY", "anchor_date": "2024-01-01", "label": "Rent"},
            ],
            "start": "2024-11-05",
        },
    )

    assert response.status_code == 200
    data = response.json()
    base = settings.base_income_assumption
    assert data["projected_expense"] == 1000.0
    assert data["total_monthly_income"] == base
    assert len(data["points"]) == settings.projection_months
    assert data["points"][0]["month_label"] == "Nov 2024"
    assert data["points"][2]["month_label"] == "Jan 2025"
    for i, point in enumerate(data["points"]):
        assert point["cumulative_savings"] == pytest.approx((base - 1000.0) * (i + 1))


def test_projection_with_benefits_and_history(client: TestClient):
    response = client.post(
        "/v1/projection",
        json={
            "income": [
                {
                    "amount": 120,
                    "frequency": "WEEKLY",
                    "anchor_date": "2024-01-03",
                    "context": "BENEFIT",
                },
            ],
            "bills": [
                {"amount": 73, "frequency": "EVERY_X_DAYS", "custom_value": 10, "anchor_date": "2024-01-01"},
            ],
            "historical_expenses": [300, 300, 300],
            "months": 3,
            "start": "2024-06-01",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert len(data["points"]) == 3
    assert data["total_monthly_income"] == pytest.approx(settings.base_income_assumption + 520.0)
    expected_expense = 73 * 365 / 10 / 12 + settings.variable_spend_weight * 300.0
    assert data["projected_expense"] == pytest.approx(expected_expense)


def test_projection_rejects_invalid_record(client: TestClient):
    response = client.post(
        "/v1/projection",
        json={
            "bills": [
                {"amount": 50, "frequency": "SPECIFIC_DAY", "custom_value": 0, "anchor_date": "2024-01-01"},
            ],
        },
    )

    assert response.status_code == 422


def test_projection_rejects_negative_amount(client: TestClient):
    response = client.post(
        "/v1/projection",
        json={"bills": [{"amount": -5, "frequency": "MONTHLY", "anchor_date": "2024-01-01"}]},
    )

    assert response.status_code == 422


def test_projection_zero_months(client: TestClient):
    response = client.post("/v1/projection", json={"months": 0, "start": "2024-01-01"})

    assert response.status_code == 200
    data = response.json()
    assert data["points"] == []
    assert data["projected_expense"] == settings.fallback_monthly_expense


def test_month_summary_endpoint(client: TestClient):
    response = client.post(
        "/v1/summary/month",
        json={
            "income": [
                {"amount": 2500, "date": "2024-05-01"},
                {"amount": 2500, "date": "2024-04-01"},
            ],
            "expenses": [{"amount": 400, "date": "2024-05-12"}],
            "month": "2024-05-20",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["month_start"] == date(2024, 5, 1).isoformat()
    assert data["income"] == 2500.0
    assert data["expenses"] == 400.0
    assert data["balance"] == 2100.0


def test_request_id_is_propagated(client: TestClient):
    """Caller-supplied request IDs are echoed back"""
    response = client.get("/health", headers={"X-Request-ID": "dashboard-42"})

    assert response.headers["X-Request-ID"] == "dashboard-42"


def test_occurrences_past_year_9999_rejected(client: TestClient):
    response = client.post(
        "/v1/occurrences",
        json={"anchor_date": "2024-01-01", "frequency": "EVERY_N_DAYS", "custom_value": 1000000, "count": 4},
    )

    assert response.status_code == 422


def test_projection_income_defaults_to_benefit_context(client: TestClient):
    """Income records without a context get the benefit frequency restriction"""
    income = {"amount": 100, "frequency": "EVERY_N_DAYS", "custom_value": 10, "anchor_date": "2024-01-01"}

    rejected = client.post("/v1/projection", json={"income": [income]})
    accepted = client.post(
        "/v1/projection",
        json={"income": [{**income, "context": "PAYDAY"}], "months": 1, "start": "2024-01-01"},
    )

    assert rejected.status_code == 422
    assert accepted.status_code == 200
    assert accepted.json()["total_monthly_income"] == pytest.approx(
        settings.base_income_assumption + 100 * 365 / 10 / 12
    )


def test_projection_headline_figures_match_first_month(client: TestClient):
    response = client.post(
        "/v1/projection",
        json={
            "income": [{"amount": 600, "frequency": "MONTHLY", "anchor_date": "2024-01-15"}],
            "bills": [{"amount": 900, "frequency": "MONTHLY", "anchor_date": "2024-01-01"}],
            "historical_expenses": [150, 150],
            "months": 4,
            "start": "2024-01-01",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["total_monthly_income"] == data["points"][0]["projected_income"]
    assert data["projected_expense"] == data["points"][0]["projected_expense"]
