"""Interest rate conversion between annual and monthly effective rates"""

from decimal import Decimal, localcontext

from financing_gateway.domain.rounding import ENGINE_CONTEXT

MONTHS_PER_YEAR = 12


def monthly_rate_from_annual(annual_rate: Decimal) -> Decimal:
    """
    Convert an annual effective rate to the equivalent monthly effective rate.

    Uses compound conversion, (1 + r_m)^12 = 1 + r_a, so
    r_m = (1 + r_a)^(1/12) - 1. An 8% annual rate gives ~0.6434% per month,
    not 0.08 / 12.
    """
    if annual_rate == 0:
        return Decimal(0)

    with localcontext(ENGINE_CONTEXT):
        return (1 + Decimal(annual_rate)) ** (Decimal(1) / MONTHS_PER_YEAR) - 1


def annual_rate_from_monthly(monthly_rate: Decimal) -> Decimal:
    """Compound a monthly effective rate back to its annual equivalent"""
    with localcontext(ENGINE_CONTEXT):
        return (1 + Decimal(monthly_rate)) ** MONTHS_PER_YEAR - 1
