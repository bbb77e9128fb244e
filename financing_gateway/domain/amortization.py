"""SAC and PRICE amortization engine - summary schedules in integer cents"""

import logging
from decimal import Decimal, localcontext
from typing import Callable, Dict, Union

from financing_gateway.domain.models import AmortizationRegime, CalculationInput, CalculationResult
from financing_gateway.domain.rates import monthly_rate_from_annual
from financing_gateway.domain.rounding import ENGINE_CONTEXT, to_cents

logger = logging.getLogger(__name__)


def compute_sac_schedule(calculation_input: CalculationInput) -> CalculationResult:
    """
    Constant amortization (SAC): fixed principal share, declining installment.

    Each month repays financed / term of principal plus interest on the
    outstanding balance. Balance, amortization share and the interest sum
    are carried unrounded through the loop; only the first installment,
    the last installment and the total interest are rounded to cents.

    Example:
        100000 cents, 12% a.a., 2 months (r_m ~ 0.9489%)
        month 1: 50000 + 100000 * r_m = 50948.88 -> 50949
        month 2: 50000 +  50000 * r_m = 50474.44 -> 50474
        total interest: 1423.32 -> 1423, total paid: 101423
    """
    principal = calculation_input.financed_amount_cents
    term = calculation_input.term_months
    monthly_rate = monthly_rate_from_annual(calculation_input.annual_interest_rate)

    first_installment = 0
    last_installment = 0

    with localcontext(ENGINE_CONTEXT):
        amortization = Decimal(principal) / term
        outstanding_balance = Decimal(principal)
        total_interest = Decimal(0)

        for month in range(1, term + 1):
            interest = outstanding_balance * monthly_rate
            installment = amortization + interest
            total_interest += interest

            if month == 1:
                first_installment = to_cents(installment)
            if month == term:
                last_installment = to_cents(installment)

            outstanding_balance -= amortization

    total_interest_cents = to_cents(total_interest)

    return CalculationResult(
        first_installment_cents=first_installment,
        last_installment_cents=last_installment,
        total_paid_cents=principal + total_interest_cents,
        total_interest_cents=total_interest_cents,
    )


def compute_price_schedule(calculation_input: CalculationInput) -> CalculationResult:
    """
    Constant installment (PRICE): ordinary annuity payment.

    PMT = PV * i * (1+i)^n / ((1+i)^n - 1)

    Every installment is the same rounded PMT. The rounding remainder is not
    pushed into the last installment, so total paid is exactly
    installment * n and may differ from the annuity value by up to n/2 cents.
    """
    principal = calculation_input.financed_amount_cents
    term = calculation_input.term_months
    monthly_rate = monthly_rate_from_annual(calculation_input.annual_interest_rate)

    with localcontext(ENGINE_CONTEXT):
        if monthly_rate == 0:
            # Formula divides by (1+i)^n - 1 = 0
            installment = to_cents(Decimal(principal) / term)
            return CalculationResult(
                first_installment_cents=installment,
                last_installment_cents=installment,
                total_paid_cents=installment * term,
                total_interest_cents=0,
            )

        # Same factor in numerator and denominator
        growth_factor = (1 + monthly_rate) ** term
        payment = principal * monthly_rate * growth_factor / (growth_factor - 1)

    installment = to_cents(payment)
    total_paid = installment * term

    return CalculationResult(
        first_installment_cents=installment,
        last_installment_cents=installment,
        total_paid_cents=total_paid,
        total_interest_cents=total_paid - principal,
    )


_STRATEGIES: Dict[AmortizationRegime, Callable[[CalculationInput], CalculationResult]] = {
    AmortizationRegime.SAC: compute_sac_schedule,
    AmortizationRegime.PRICE: compute_price_schedule,
}


def compute_schedule(regime: Union[AmortizationRegime, str], calculation_input: CalculationInput) -> CalculationResult:
    """
    Main entry point: compute the schedule summary for the selected regime.

    Accepts the enum or its string value ("SAC" / "PRICE").
    """
    regime = AmortizationRegime(regime)
    result = _STRATEGIES[regime](calculation_input)

    logger.debug(
        "Schedule computed",
        extra={
            "regime": regime.value,
            "term_months": calculation_input.term_months,
            "financed_amount_cents": calculation_input.financed_amount_cents,
            "first_installment_cents": result.first_installment_cents,
            "total_interest_cents": result.total_interest_cents,
        },
    )
    return result
