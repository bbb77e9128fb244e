"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from financing_gateway.api.main import create_app
from financing_gateway.domain.models import CalculationInput


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def thirty_year_loan() -> CalculationInput:
    """R$400,000 financed at 8% a.a. over 360 months"""
    return CalculationInput(
        financed_amount_cents=40_000_000,
        annual_interest_rate=0.08,
        term_months=360,
    )


@pytest.fixture
def simulation_payload() -> dict:
    """Valid POST /v1/simulation body: R$500k property, R$100k down payment"""
    return {
        "property_value_cents": 50_000_000,
        "down_payment_cents": 10_000_000,
        "annual_interest_rate": 0.08,
        "term_months": 360,
        "calculation_type": "PRICE",
    }
