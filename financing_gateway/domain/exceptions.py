"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidCalculationInputError(DomainException):
    """Calculation input violates an engine precondition"""

    reason = "invalid_input"


class InvalidPrincipalError(InvalidCalculationInputError):
    """Financed amount is not a positive number of cents"""

    reason = "invalid_principal"


class InvalidTermError(InvalidCalculationInputError):
    """Term is not a positive number of months"""

    reason = "invalid_term"


class InvalidRateError(InvalidCalculationInputError):
    """Annual interest rate is negative or not a finite number"""

    reason = "invalid_rate"
