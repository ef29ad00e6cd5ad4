"""Eligibility engine - ordered gates that turn an applicant profile into a decision"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from prequal_gateway.domain.exceptions import InvalidInputError
from prequal_gateway.domain.models import (
    ApplicantProfile,
    ApprovalTier,
    EligibilityDecision,
    ProductDefinition,
)
from prequal_gateway.domain.policy import DEFAULT_POLICY, EligibilityPolicy
from prequal_gateway.utils.money import round_to_whole


@dataclass(frozen=True)
class GateOutcome:
    """Result of one gate: whether it passed, what it logged, and whether a failure stops evaluation"""

    passed: bool = True
    reason: Optional[str] = None
    terminal: bool = False
    message: Optional[str] = None


PASS = GateOutcome()


def _note(reason: str, message: Optional[str] = None) -> GateOutcome:
    return GateOutcome(passed=True, reason=reason, message=message)


def _reject(reason: str, message: str) -> GateOutcome:
    return GateOutcome(passed=False, reason=reason, terminal=True, message=message)


@dataclass
class Assessment:
    """Working state threaded through the gates of a single evaluation"""

    profile: ApplicantProfile
    product: ProductDefinition
    requested_amount: Optional[float]
    policy: EligibilityPolicy
    reasons: List[str] = field(default_factory=list)
    message: str = ""
    score_band: str = ""
    tier: ApprovalTier = ApprovalTier.LOW
    dti_ratio: Optional[float] = None
    max_eligible_amount: int = 0
    lender_class: str = ""
    eligible: bool = False
    approval_probability: int = 0

    def to_decision(self) -> EligibilityDecision:
        return EligibilityDecision(
            eligible=self.eligible,
            approval_tier=self.tier,
            approval_probability_percent=self.approval_probability,
            max_eligible_amount=self.max_eligible_amount,
            recommended_lender_class=self.lender_class,
            narrative_message=self.message,
            reasons=tuple(self.reasons),
            score_band=self.score_band,
            dti_ratio=self.dti_ratio,
        )


Gate = Callable[[Assessment], GateOutcome]


# --- Pure calculations -------------------------------------------------------


def score_band(credit_score: int, policy: EligibilityPolicy = DEFAULT_POLICY) -> Tuple[str, ApprovalTier]:
    """
    Map a credit score to its band label and provisional approval tier.

    Default bands:
    - 750+:    Excellent (High)
    - 650-749: Good (Moderate)
    - 600-649: Fair (Low)
    - <600:    Poor (VeryLow)
    """
    for threshold, label, tier in policy.score_bands:
        if credit_score >= threshold:
            return label, tier
    _, label, tier = policy.score_bands[-1]
    return label, tier


def debt_to_income_ratio(existing_monthly_debt: float, monthly_income: float) -> float:
    """
    Existing monthly debt as a percentage of monthly income.

    Raises:
        InvalidInputError: If monthly income is zero, where the ratio is undefined
    """
    if monthly_income <= 0:
        raise InvalidInputError("Monthly income must be greater than zero to compute debt-to-income ratio")
    return existing_monthly_debt / monthly_income * 100


def max_eligible_amount(
    profile: ApplicantProfile,
    product: ProductDefinition,
    policy: EligibilityPolicy = DEFAULT_POLICY,
) -> int:
    """
    Largest loan the applicant's income supports, capped at the product maximum.

    Monthly income times a per-category multiplier, scaled up for strong
    scores and down for weak ones.
    """
    multiplier = policy.income_multiplier(profile.employment_category)
    if profile.credit_score >= policy.strong_score:
        multiplier *= policy.strong_score_factor
    elif profile.credit_score < policy.weak_score:
        multiplier *= policy.weak_score_factor

    return min(round_to_whole(profile.monthly_income * multiplier), product.max_amount)


def approval_probability(
    profile: ApplicantProfile,
    dti_ratio: float,
    policy: EligibilityPolicy = DEFAULT_POLICY,
) -> int:
    """
    Additive approval likelihood estimate in percent.

    Sum of score, DTI, employment and age components, capped at
    ``policy.max_probability_percent``.
    """
    score_component = next(
        (points for threshold, points in policy.score_points if profile.credit_score >= threshold),
        policy.score_points_floor,
    )
    dti_component = next(
        (points for ceiling, points in policy.dti_points if dti_ratio <= ceiling),
        policy.dti_points_floor,
    )
    employment_component = policy.employment_points.get(
        profile.employment_category, policy.default_employment_points
    )
    age_component = policy.young_applicant_bonus if profile.age <= policy.young_applicant_age else 0

    total = score_component + dti_component + employment_component + age_component
    return max(0, min(total, policy.max_probability_percent))


# --- Gates, in evaluation order ----------------------------------------------


def band_credit_score(a: Assessment) -> GateOutcome:
    a.score_band, a.tier = score_band(a.profile.credit_score, a.policy)
    return _note(f"Credit score: {a.profile.credit_score} ({a.score_band})")


def check_age(a: Assessment) -> GateOutcome:
    age = a.profile.age
    category = a.profile.employment_category.value
    ceiling = a.policy.age_ceiling(a.profile.employment_category)

    if age < a.policy.min_age:
        return _reject(
            f"Age {age} is below minimum requirement of {a.policy.min_age} years",
            f"Age must be at least {a.policy.min_age} years",
        )
    if age > ceiling:
        return _reject(
            f"Age {age} exceeds maximum age ceiling of {ceiling} for {category} employees",
            f"Maximum age for {category} employees is {ceiling} years",
        )
    return PASS


def check_debt_to_income(a: Assessment) -> GateOutcome:
    dti = debt_to_income_ratio(a.profile.existing_monthly_debt, a.profile.monthly_income)
    limit = a.policy.max_dti_percent
    a.dti_ratio = dti

    if dti > limit:
        return _reject(
            f"Debt-to-income ratio: {dti:.1f}% (exceeds {limit:g}% limit)",
            f"Your existing EMI obligations exceed {limit:g}% of your income",
        )
    return PASS


def compute_max_amount(a: Assessment) -> GateOutcome:
    a.max_eligible_amount = max_eligible_amount(a.profile, a.product, a.policy)
    a.lender_class = a.policy.lender_class(a.profile.employment_category)
    return PASS


def advise_requested_amount(a: Assessment) -> GateOutcome:
    # Advisory only: an oversized request never makes the applicant ineligible
    if a.requested_amount and a.requested_amount > a.max_eligible_amount:
        return _note(
            f"Requested loan amount {a.requested_amount:,.0f} exceeds maximum eligible amount "
            f"{a.max_eligible_amount:,}",
            message=f"Maximum eligible loan amount is {a.max_eligible_amount:,}",
        )
    return PASS


def check_minimum_income(a: Assessment) -> GateOutcome:
    income = a.profile.monthly_income
    minimum = a.product.min_income
    if income < minimum:
        return _reject(
            f"Monthly income {income:,.0f} is below minimum requirement of {minimum:,.0f} for {a.product.name}",
            f"Minimum monthly income required is {minimum:,.0f}",
        )
    return PASS


def check_minimum_score(a: Assessment) -> GateOutcome:
    score = a.profile.credit_score
    minimum = a.product.min_credit_score
    if score < minimum:
        return _reject(
            f"Credit score {score} is below minimum requirement of {minimum} for {a.product.name}",
            f"Minimum credit score required is {minimum}",
        )
    return PASS


def determine_eligibility(a: Assessment) -> GateOutcome:
    score = a.profile.credit_score
    policy = a.policy

    if score >= policy.eligible_min_score and a.dti_ratio <= policy.max_dti_percent:
        a.eligible = True
        if score >= policy.high_tier_score:
            a.tier = ApprovalTier.HIGH
            a.message = "Excellent! You have high chances of loan approval"
        elif score >= policy.good_tier_score:
            a.tier = ApprovalTier.GOOD
            a.message = "Good chances of loan approval"
        else:
            a.tier = ApprovalTier.MODERATE
            a.message = "Moderate chances of loan approval"
    elif score < policy.eligible_min_score:
        a.eligible = False
        a.message = "Credit score needs improvement for loan approval"
    else:
        a.eligible = False
        a.message = "High existing debt needs to be reduced"
    return PASS


def annotate_employment(a: Assessment) -> GateOutcome:
    category = a.profile.employment_category
    label, weight = a.policy.employment_notes.get(category, (category.value, "Standard approval weight"))
    return _note(f"{label} - {weight}")


def estimate_approval_probability(a: Assessment) -> GateOutcome:
    a.approval_probability = approval_probability(a.profile, a.dti_ratio, a.policy)
    return PASS


GATES: Tuple[Gate, ...] = (
    band_credit_score,
    check_age,
    check_debt_to_income,
    compute_max_amount,
    advise_requested_amount,
    check_minimum_income,
    check_minimum_score,
    determine_eligibility,
    annotate_employment,
    estimate_approval_probability,
)


def evaluate(
    profile: ApplicantProfile,
    product: ProductDefinition,
    requested_amount: Optional[float] = None,
    policy: EligibilityPolicy = DEFAULT_POLICY,
) -> EligibilityDecision:
    """
    Main entry point: run the gates in order and build the decision.

    A failing terminal gate ends evaluation with eligible=False; its reason is
    the last entry in the reason log. Ineligibility is never raised.

    Raises:
        InvalidInputError: If monthly income is zero when the DTI gate runs
    """
    assessment = Assessment(
        profile=profile,
        product=product,
        requested_amount=requested_amount,
        policy=policy,
    )

    for gate in GATES:
        outcome = gate(assessment)
        if outcome.reason:
            assessment.reasons.append(outcome.reason)
        if outcome.message:
            assessment.message = outcome.message
        if outcome.terminal and not outcome.passed:
            assessment.eligible = False
            assessment.approval_probability = 0
            break

    return assessment.to_decision()
