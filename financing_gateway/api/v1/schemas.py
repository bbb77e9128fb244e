"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field

from financing_gateway.config import settings
from financing_gateway.domain.models import AmortizationRegime


class SimulationRequest(BaseModel):
    """Request body for POST /v1/simulation"""

    property_value_cents: int = Field(..., gt=0, description="Property value in cents")
    down_payment_cents: int = Field(0, ge=0, description="Down payment in cents")
    annual_interest_rate: float = Field(..., ge=0, description="Annual effective rate as a fraction (0.08 = 8%)")
    term_months: int = Field(..., ge=1, le=settings.max_term_months, description="Number of monthly installments")
    calculation_type: AmortizationRegime = Field(..., description="Amortization regime: SAC or PRICE")

    @property
    def financed_amount_cents(self) -> int:
        return self.property_value_cents - self.down_payment_cents


class SimulationResponse(BaseModel):
    """Response for POST /v1/simulation"""

    calculation_type: AmortizationRegime
    financed_amount_cents: int
    monthly_interest_rate: float
    first_installment_cents: int
    last_installment_cents: int
    total_paid_cents: int
    total_interest_cents: int
