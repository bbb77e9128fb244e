"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union

from financing_gateway.domain.exceptions import (
    InvalidPrincipalError,
    InvalidRateError,
    InvalidTermError,
)

RateLike = Union[Decimal, int, float]


class AmortizationRegime(str, Enum):
    """Repayment regime used to build the schedule"""

    SAC = "SAC"  # constant amortization, declining installment
    PRICE = "PRICE"  # constant installment (annuity)


def _to_decimal_rate(value: RateLike) -> Decimal:
    # str() keeps 0.08 as Decimal("0.08") instead of its binary expansion
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float)):
        raise InvalidRateError(f"Annual interest rate must be a number, got {value!r}")
    rate = value if isinstance(value, Decimal) else Decimal(str(value))

    if not rate.is_finite():
        raise InvalidRateError(f"Annual interest rate must be finite, got {value!r}")
    return rate


@dataclass(frozen=True)
class CalculationInput:
    """Financing parameters for a single schedule calculation"""

    financed_amount_cents: int
    annual_interest_rate: RateLike  # normalized to Decimal on construction
    term_months: int

    def __post_init__(self) -> None:
        if isinstance(self.financed_amount_cents, bool) or not isinstance(self.financed_amount_cents, int):
            raise InvalidPrincipalError(
                f"Financed amount must be an integer number of cents, got {self.financed_amount_cents!r}"
            )
        if self.financed_amount_cents <= 0:
            raise InvalidPrincipalError(
                f"Financed amount must be positive, got {self.financed_amount_cents} cents"
            )

        if isinstance(self.term_months, bool) or not isinstance(self.term_months, int):
            raise InvalidTermError(f"Term must be an integer number of months, got {self.term_months!r}")
        if self.term_months <= 0:
            raise InvalidTermError(f"Term must be at least 1 month, got {self.term_months}")

        rate = _to_decimal_rate(self.annual_interest_rate)
        if rate < 0:
            raise InvalidRateError(f"Annual interest rate must not be negative, got {rate}")

        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "annual_interest_rate", rate)


@dataclass(frozen=True)
class CalculationResult:
    """Summary of an amortization schedule, all amounts in cents"""

    first_installment_cents: int
    last_installment_cents: int
    total_paid_cents: int
    total_interest_cents: int
