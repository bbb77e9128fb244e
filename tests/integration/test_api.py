"""Integration tests for API endpoints"""

import pytest
from unittest.mock import MagicMock, patch
from fastapi.testclient import TestClient
from financing_gateway.api.main import create_app


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "financing_simulation_total" in response.text


def test_simulation_price(client: TestClient, simulation_payload: dict):
    """Test POST /v1/simulation with PRICE regime"""
    response = client.post("/v1/simulation", json=simulation_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["calculation_type"] == "PRICE"
    assert data["financed_amount_cents"] == 40_000_000
    assert data["first_installment_cents"] == 285_759
    assert data["last_installment_cents"] == 285_759
    assert data["total_paid_cents"] == 285_759 * 360
    assert data["total_interest_cents"] == 285_759 * 360 - 40_000_000
    assert data["monthly_interest_rate"] == pytest.approx(0.0064340301, abs=1e-9)


def test_simulation_sac(client: TestClient, simulation_payload: dict):
    """Test POST /v1/simulation with SAC regime"""
    simulation_payload["calculation_type"] = "SAC"
    response = client.post("/v1/simulation", json=simulation_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["calculation_type"] == "SAC"
    assert data["first_installment_cents"] == 368_472
    assert data["last_installment_cents"] == 111_826
    assert data["total_paid_cents"] == 40_000_000 + data["total_interest_cents"]


def test_simulation_zero_interest(client: TestClient):
    """Test 0% simulation returns principal split evenly"""
    response = client.post(
        "/v1/simulation",
        json={
            "property_value_cents": 120_000,
            "annual_interest_rate": 0,
            "term_months": 12,
            "calculation_type": "PRICE",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["first_installment_cents"] == 10_000
    assert data["total_paid_cents"] == 120_000
    assert data["total_interest_cents"] == 0
    assert data["monthly_interest_rate"] == 0


def test_simulation_down_payment_covers_property(client: TestClient, simulation_payload: dict):
    """Test financed amount <= 0 is rejected by the engine with 422"""
    simulation_payload["down_payment_cents"] = simulation_payload["property_value_cents"]
    response = client.post("/v1/simulation", json=simulation_payload)

    assert response.status_code == 422
    assert "Financed amount must be positive" in response.json()["detail"]


@pytest.mark.parametrize(
    "field, value",
    [
        ("annual_interest_rate", -0.01),
        ("term_months", 0),
        ("term_months", 421),
        ("property_value_cents", 0),
        ("down_payment_cents", -1),
        ("calculation_type", "BULLET"),
    ],
)
def test_simulation_schema_validation(client: TestClient, simulation_payload: dict, field: str, value):
    """Test request schema rejects out-of-range fields"""
    simulation_payload[field] = value
    response = client.post("/v1/simulation", json=simulation_payload)
    assert response.status_code == 422


def test_request_id_generated(client: TestClient):
    """Test every response carries a request ID"""
    response = client.get("/health")
    assert response.headers["X-Request-ID"]


def test_request_id_propagated(client: TestClient, simulation_payload: dict):
    """Test caller-supplied request ID is echoed back"""
    response = client.post(
        "/v1/simulation",
        json=simulation_payload,
        headers={"X-Request-ID": "sim-123"},
    )
    assert response.headers["X-Request-ID"] == "sim-123"


def test_simulation_recorded_in_metrics(client: TestClient, simulation_payload: dict):
    """Test regime counter is exposed after a simulation"""
    client.post("/v1/simulation", json=simulation_payload)

    response = client.get("/metrics")
    assert 'financing_simulation_total{regime="PRICE"}' in response.text


def test_invalid_input_recorded_as_rejection(client: TestClient, simulation_payload: dict):
    """Test engine input errors are counted by reason and keep the request ID"""
    simulation_payload["down_payment_cents"] = simulation_payload["property_value_cents"] + 1
    response = client.post(
        "/v1/simulation",
        json=simulation_payload,
        headers={"X-Request-ID": "sim-rejected"},
    )

    assert response.status_code == 422
    assert response.headers["X-Request-ID"] == "sim-rejected"

    metrics = client.get("/metrics").text
    assert 'financing_simulation_rejected_total{reason="invalid_principal"}' in metrics


@patch("financing_gateway.api.v1.simulation.compute_schedule")
def test_unexpected_error_returns_500(mock_compute: MagicMock, simulation_payload: dict):
    """Test unexpected engine failures map to a generic 500"""
    mock_compute.side_effect = RuntimeError("boom")
    client = TestClient(create_app(), raise_server_exceptions=False)

    response = client.post("/v1/simulation", json=simulation_payload)

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
