"""EMI and amortization math for fixed-rate installment loans"""

import math
import re
from enum import Enum
from typing import Tuple

from prequal_gateway.domain.exceptions import ComputationDegenerateError, InvalidInputError
from prequal_gateway.domain.models import AmortizationResult
from prequal_gateway.utils.money import round_half_up

MONTHS_PER_YEAR = 12

_RATE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*%")


class TenureUnit(str, Enum):
    YEARS = "years"
    MONTHS = "months"


def to_term_months(tenure: float, unit: TenureUnit = TenureUnit.YEARS) -> int:
    """
    Normalize a tenure given in years or months to a whole number of months.

    Raises:
        InvalidInputError: If the tenure does not come to a whole number of months
    """
    unit = TenureUnit(unit)
    months = tenure * MONTHS_PER_YEAR if unit is TenureUnit.YEARS else tenure

    if not math.isfinite(months) or months != int(months):
        raise InvalidInputError(f"Tenure of {tenure} {unit.value} is not a whole number of months")
    return int(months)


def compute_amortization(principal: float, annual_rate_percent: float, term_months: int) -> AmortizationResult:
    """
    Compute the equated monthly installment and repayment totals.

    EMI = P * r * (1+r)^n / ((1+r)^n - 1), with r the monthly rate and n
    the number of months; a zero rate spreads principal evenly. All
    intermediate values keep full float precision and only the three
    monetary outputs are rounded half-up to cents.

    Raises:
        ComputationDegenerateError: On non-positive principal or term, or a negative rate,
            or when the repayment figures overflow

    Example:
        1,000,000 at 10% over 240 months -> EMI 9650.22
    """
    if not (math.isfinite(principal) and principal > 0):
        raise ComputationDegenerateError(f"Principal must be positive, got {principal}")
    if term_months <= 0:
        raise ComputationDegenerateError(f"Term must be at least one month, got {term_months}")
    if not (math.isfinite(annual_rate_percent) and annual_rate_percent >= 0):
        raise ComputationDegenerateError(f"Interest rate must not be negative, got {annual_rate_percent}")

    monthly_rate = annual_rate_percent / 12 / 100

    if monthly_rate == 0:
        emi = principal / term_months
    else:
        # expm1/log1p keep (1+r)^n - 1 nonzero for rates below float resolution
        try:
            growth_less_one = math.expm1(term_months * math.log1p(monthly_rate))
        except OverflowError as e:
            raise ComputationDegenerateError(
                f"Repayment growth overflows for {annual_rate_percent}% over {term_months} months"
            ) from e
        emi = principal * (monthly_rate / growth_less_one) * (growth_less_one + 1)

    total_payment = emi * term_months
    total_interest = total_payment - principal

    if not (math.isfinite(emi) and math.isfinite(total_payment)):
        raise ComputationDegenerateError("Amortization produced a non-finite installment")

    return AmortizationResult(
        principal=principal,
        annual_rate_percent=annual_rate_percent,
        term_months=term_months,
        emi=round_half_up(emi),
        total_interest=round_half_up(total_interest),
        total_payment=round_half_up(total_payment),
    )


def compute_amortization_for_tenure(
    principal: float,
    annual_rate_percent: float,
    tenure: float,
    unit: TenureUnit = TenureUnit.YEARS,
) -> AmortizationResult:
    """Normalize the tenure to months, then amortize"""
    return compute_amortization(principal, annual_rate_percent, to_term_months(tenure, unit))


def parse_rate_range(text: str) -> Tuple[float, float]:
    """
    Read the bounds of a catalog rate range such as "8.50% - 9.50%".

    A single rate ("10%") yields equal bounds.

    Raises:
        InvalidInputError: If the text contains no percentage
    """
    rates = [float(match) for match in _RATE_PATTERN.findall(text)]
    if not rates:
        raise InvalidInputError(f"No interest rate found in {text!r}")
    return min(rates), max(rates)
