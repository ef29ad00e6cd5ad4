"""Eligibility thresholds, multipliers and weights used by the evaluator"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from prequal_gateway.domain.models import ApprovalTier, EmploymentCategory

GOV = EmploymentCategory.GOVERNMENT
PRIVATE = EmploymentCategory.PRIVATE
SELF = EmploymentCategory.SELF_EMPLOYED


@dataclass(frozen=True)
class EligibilityPolicy:
    """
    Every tunable number the eligibility gates read.

    Score bands and probability bands are ordered highest threshold first;
    the first band whose threshold the value meets wins. Per-category tables
    fall back to the matching ``default_*`` value for a category they do
    not list.
    """

    # (min score, label, provisional tier)
    score_bands: Tuple[Tuple[int, str, ApprovalTier], ...] = (
        (750, "Excellent", ApprovalTier.HIGH),
        (650, "Good", ApprovalTier.MODERATE),
        (600, "Fair", ApprovalTier.LOW),
        (0, "Poor", ApprovalTier.VERY_LOW),
    )

    # Age gate
    min_age: int = 21
    age_ceilings: Dict[EmploymentCategory, int] = field(
        default_factory=lambda: {GOV: 65, PRIVATE: 60, SELF: 65}
    )
    default_age_ceiling: int = 60

    # Debt-to-income gate, percent
    max_dti_percent: float = 50.0

    # Maximum amount: monthly income x multiplier
    income_multipliers: Dict[EmploymentCategory, float] = field(
        default_factory=lambda: {GOV: 75, PRIVATE: 60, SELF: 50}
    )
    default_income_multiplier: float = 60
    strong_score: int = 750
    strong_score_factor: float = 1.2
    weak_score: int = 650
    weak_score_factor: float = 0.7

    lender_classes: Dict[EmploymentCategory, str] = field(
        default_factory=lambda: {
            GOV: "Public Sector Bank (SBI, Bank of Baroda, PNB)",
            PRIVATE: "Private Bank (HDFC, ICICI, Axis)",
            SELF: "NBFC (Bajaj Finance, Capital Float)",
        }
    )
    default_lender_class: str = "Private Bank (HDFC, ICICI, Axis)"

    # Final determination
    eligible_min_score: int = 650
    high_tier_score: int = 750
    good_tier_score: int = 700

    # Employment annotation: (label, approval weight)
    employment_notes: Dict[EmploymentCategory, Tuple[str, str]] = field(
        default_factory=lambda: {
            GOV: ("Government Employee", "Higher approval weight"),
            PRIVATE: ("Private Employee", "Standard approval weight"),
            SELF: ("Self-Employed", "Stricter approval criteria"),
        }
    )

    # Approval probability components
    score_points: Tuple[Tuple[int, int], ...] = ((750, 40), (700, 30), (650, 20))
    score_points_floor: int = 5
    dti_points: Tuple[Tuple[float, int], ...] = ((30.0, 30), (40.0, 20))
    dti_points_floor: int = 10
    employment_points: Dict[EmploymentCategory, int] = field(
        default_factory=lambda: {GOV: 20, PRIVATE: 15, SELF: 10}
    )
    default_employment_points: int = 10
    young_applicant_age: int = 35
    young_applicant_bonus: int = 10
    max_probability_percent: int = 95

    def age_ceiling(self, category: EmploymentCategory) -> int:
        return self.age_ceilings.get(category, self.default_age_ceiling)

    def income_multiplier(self, category: EmploymentCategory) -> float:
        return self.income_multipliers.get(category, self.default_income_multiplier)

    def lender_class(self, category: EmploymentCategory) -> str:
        return self.lender_classes.get(category, self.default_lender_class)


DEFAULT_POLICY = EligibilityPolicy()
