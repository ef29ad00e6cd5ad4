"""Domain models - pure Python dataclasses representing business entities"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from prequal_gateway.domain.exceptions import InvalidInputError

CREDIT_SCORE_RANGE = (300, 900)
AGE_RANGE = (18, 100)


class EmploymentCategory(str, Enum):
    GOVERNMENT = "government"
    PRIVATE = "private"
    SELF_EMPLOYED = "self-employed"


class ApprovalTier(str, Enum):
    HIGH = "High"
    GOOD = "Good"
    MODERATE = "Moderate"
    LOW = "Low"
    VERY_LOW = "VeryLow"


def _require_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}")


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be a finite number, got {value}")
    if value < 0:
        raise InvalidInputError(f"{name} must not be negative, got {value}")


@dataclass(frozen=True)
class ApplicantProfile:
    """Financial attributes of a single applicant"""

    credit_score: int
    monthly_income: float
    employment_category: EmploymentCategory
    age: int
    existing_monthly_debt: float = 0.0

    def __post_init__(self) -> None:
        _require_int("credit_score", self.credit_score)
        _require_int("age", self.age)

        low, high = CREDIT_SCORE_RANGE
        if not low <= self.credit_score <= high:
            raise InvalidInputError(f"Credit score must be between {low} and {high}, got {self.credit_score}")

        low, high = AGE_RANGE
        if not low <= self.age <= high:
            raise InvalidInputError(f"Age must be between {low} and {high}, got {self.age}")

        _require_finite("monthly_income", self.monthly_income)
        _require_finite("existing_monthly_debt", self.existing_monthly_debt)

        try:
            category = EmploymentCategory(self.employment_category)
        except ValueError as e:
            raise InvalidInputError(f"Unknown employment category: {self.employment_category!r}") from e
        # Accept plain strings at construction, store the enum
        object.__setattr__(self, "employment_category", category)


@dataclass(frozen=True)
class ProductDefinition:
    """Static thresholds for one loan product"""

    id: str
    name: str
    min_amount: int
    max_amount: int
    min_income: float
    min_credit_score: int
    nominal_rate_range_text: str
    max_term_years: int
    description: str = ""

    def __post_init__(self) -> None:
        if self.min_amount < 0 or self.max_amount < self.min_amount:
            raise InvalidInputError(
                f"Product {self.id!r} has invalid amount bounds {self.min_amount}..{self.max_amount}"
            )
        if self.max_term_years <= 0:
            raise InvalidInputError(f"Product {self.id!r} must allow a positive term")


@dataclass(frozen=True)
class EligibilityDecision:
    """Output of a pre-qualification check"""

    eligible: bool
    approval_tier: ApprovalTier
    approval_probability_percent: int
    max_eligible_amount: int
    recommended_lender_class: str
    narrative_message: str
    reasons: Tuple[str, ...]
    score_band: str
    dti_ratio: Optional[float] = None


@dataclass(frozen=True)
class AmortizationResult:
    """Fixed-installment repayment figures, rounded to cents"""

    principal: float
    annual_rate_percent: float
    term_months: int
    emi: float
    total_interest: float
    total_payment: float
