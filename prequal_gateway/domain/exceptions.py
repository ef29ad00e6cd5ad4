"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Applicant or product data is malformed or out of range"""

    pass


class ComputationDegenerateError(DomainException):
    """Amortization inputs cannot produce a finite repayment schedule"""

    pass


class UnknownProductError(DomainException):
    """Requested loan product is not in the catalog"""

    pass
