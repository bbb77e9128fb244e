"""Currency normalization - the single rounding rule for reported amounts"""

from decimal import ROUND_HALF_UP, Context, Decimal

# Significant digits for every intermediate computation in the engine
DECIMAL_PRECISION = 34

ENGINE_CONTEXT = Context(prec=DECIMAL_PRECISION, rounding=ROUND_HALF_UP)

_ONE_CENT = Decimal(1)


def to_cents(value: Decimal) -> int:
    """
    Round a real-valued amount of cents to a whole number of cents.

    Rule: round half away from zero (decimal.ROUND_HALF_UP), so
    10.5 -> 11, 11.5 -> 12 and -10.5 -> -11. Banker's rounding is not used.
    Always runs under ENGINE_CONTEXT, never the caller's decimal context.
    """
    return int(value.quantize(_ONE_CENT, rounding=ROUND_HALF_UP, context=ENGINE_CONTEXT))
