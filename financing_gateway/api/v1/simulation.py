"""POST /v1/simulation - Real-estate financing simulation endpoint"""

import time
from fastapi import APIRouter, Request

from financing_gateway.api.v1.schemas import SimulationRequest, SimulationResponse
from financing_gateway.api.dependencies import get_request_id
from financing_gateway.domain.amortization import compute_schedule
from financing_gateway.domain.models import CalculationInput
from financing_gateway.domain.rates import monthly_rate_from_annual
from financing_gateway.infrastructure.observability.metrics import record_simulation
from financing_gateway.infrastructure.observability.logging import log_simulation

router = APIRouter()


@router.post("/simulation", response_model=SimulationResponse)
def create_simulation(request_body: SimulationRequest, request: Request):
    """
    Simulate a real-estate financing under the SAC or PRICE regime.

    Flow:
    1. Derive financed amount (property value - down payment)
    2. Validate engine input (InvalidCalculationInputError -> 422 via app handler)
    3. Compute schedule summary for the selected regime
    4. Record metrics and logs
    5. Return first/last installment and totals in cents
    """
    start_time = time.time()
    request_id = get_request_id(request)
    regime = request_body.calculation_type

    calculation_input = CalculationInput(
        financed_amount_cents=request_body.financed_amount_cents,
        annual_interest_rate=request_body.annual_interest_rate,
        term_months=request_body.term_months,
    )
    result = compute_schedule(regime, calculation_input)

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_simulation(regime.value, calculation_input.term_months)
    log_simulation(
        request_id,
        regime.value,
        calculation_input.term_months,
        calculation_input.financed_amount_cents,
        result.first_installment_cents,
        duration_ms,
    )

    return SimulationResponse(
        calculation_type=regime,
        financed_amount_cents=calculation_input.financed_amount_cents,
        monthly_interest_rate=float(monthly_rate_from_annual(calculation_input.annual_interest_rate)),
        first_installment_cents=result.first_installment_cents,
        last_installment_cents=result.last_installment_cents,
        total_paid_cents=result.total_paid_cents,
        total_interest_cents=result.total_interest_cents,
    )
