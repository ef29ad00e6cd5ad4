"""Unit tests for the eligibility gates"""

import pytest
from prequal_gateway.domain.catalog import DEFAULT_PRODUCTS, default_catalog
from prequal_gateway.domain.eligibility import (
    approval_probability,
    debt_to_income_ratio,
    evaluate,
    max_eligible_amount,
    score_band,
)
from prequal_gateway.domain.exceptions import InvalidInputError
from prequal_gateway.domain.models import ApplicantProfile, ApprovalTier, EmploymentCategory
from prequal_gateway.domain.policy import EligibilityPolicy


@pytest.mark.parametrize(
    "score, label",
    [
        (300, "Poor"),
        (599, "Poor"),
        (600, "Fair"),
        (649, "Fair"),
        (650, "Good"),
        (749, "Good"),
        (750, "Excellent"),
        (899, "Excellent"),
    ],
)
def test_score_band_boundaries(score, label):
    """Test banding labels at every boundary"""
    assert score_band(score)[0] == label


def test_score_band_provisional_tiers():
    """Test each band carries its provisional tier"""
    assert score_band(780)[1] == ApprovalTier.HIGH
    assert score_band(700)[1] == ApprovalTier.MODERATE
    assert score_band(620)[1] == ApprovalTier.LOW
    assert score_band(550)[1] == ApprovalTier.VERY_LOW


def test_scenario_strong_government_applicant(strong_applicant, personal_loan):
    """Test excellent-score government employee gets the capped maximum and top probability"""
    decision = evaluate(strong_applicant, personal_loan)

    assert decision.eligible is True
    assert decision.approval_tier == ApprovalTier.HIGH
    # round(100000 * 75 * 1.2) = 9,000,000, capped at 2,500,000
    assert decision.max_eligible_amount == 2_500_000
    # 40 + 30 + 20 + 10
    assert decision.approval_probability_percent == 95
    assert decision.recommended_lender_class.startswith("Public Sector Bank")
    assert decision.narrative_message == "Excellent! You have high chances of loan approval"
    assert decision.reasons == (
        "Credit score: 780 (Excellent)",
        "Government Employee - Higher approval weight",
    )


def test_scenario_high_debt_stops_at_dti_gate(make_applicant, personal_loan):
    """Test DTI rejection logs only the band and the DTI reason"""
    applicant = make_applicant(credit_score=600, monthly_income=30_000, existing_monthly_debt=20_000)

    decision = evaluate(applicant, personal_loan)

    assert decision.eligible is False
    assert decision.max_eligible_amount == 0
    assert decision.approval_probability_percent == 0
    assert decision.approval_tier == ApprovalTier.LOW
    assert decision.reasons == (
        "Credit score: 600 (Fair)",
        "Debt-to-income ratio: 66.7% (exceeds 50% limit)",
    )
    assert decision.narrative_message == "Your existing EMI obligations exceed 50% of your income"


@pytest.mark.parametrize("category", list(EmploymentCategory))
def test_age_below_minimum_rejected(make_applicant, personal_loan, category):
    """Test age 20 is rejected for every employment category"""
    decision = evaluate(make_applicant(age=20, employment_category=category), personal_loan)

    assert decision.eligible is False
    assert decision.max_eligible_amount == 0
    assert len(decision.reasons) == 2
    assert "below minimum" in decision.reasons[-1]
    assert decision.narrative_message == "Age must be at least 21 years"


def test_age_ceiling_depends_on_category(make_applicant, personal_loan):
    """Test age 65 exceeds the private ceiling but not the government one"""
    private = evaluate(make_applicant(age=65, employment_category="private"), personal_loan)
    assert private.eligible is False
    assert "exceeds maximum age ceiling of 60 for private" in private.reasons[-1]
    assert private.dti_ratio is None

    government = evaluate(make_applicant(age=65, employment_category="government"), personal_loan)
    assert government.eligible is True
    assert not any("Age" in reason for reason in government.reasons)


def test_dti_exactly_at_limit_passes(make_applicant, personal_loan):
    """Test 50.0% DTI is allowed"""
    decision = evaluate(make_applicant(monthly_income=40_000, existing_monthly_debt=20_000), personal_loan)

    assert decision.dti_ratio == 50.0
    assert decision.eligible is True
    # DTI above 40 earns the floor component: 30 + 10 + 15
    assert decision.approval_probability_percent == 55


def test_dti_just_over_limit_rejects(make_applicant, personal_loan):
    """Test 50.01% DTI is rejected"""
    decision = evaluate(make_applicant(monthly_income=40_000, existing_monthly_debt=20_004), personal_loan)

    assert decision.eligible is False
    assert decision.reasons[-1].startswith("Debt-to-income ratio: 50.0%")


def test_zero_income_is_invalid_input(make_applicant, personal_loan):
    """Test zero income raises instead of producing an infinite ratio"""
    with pytest.raises(InvalidInputError):
        evaluate(make_applicant(monthly_income=0, existing_monthly_debt=0), personal_loan)

    with pytest.raises(InvalidInputError):
        debt_to_income_ratio(1000, 0)


def test_zero_income_after_age_rejection_returns_decision(make_applicant, personal_loan):
    """Test the age gate runs before the income guard"""
    decision = evaluate(make_applicant(age=20, monthly_income=0), personal_loan)
    assert decision.eligible is False


def test_max_amount_multipliers(make_applicant, personal_loan):
    """Test category multipliers and score scaling"""
    private = make_applicant(credit_score=700, monthly_income=30_000)
    assert max_eligible_amount(private, personal_loan) == 1_800_000  # 60x

    self_employed_weak = make_applicant(
        credit_score=620, monthly_income=30_000, employment_category="self-employed"
    )
    assert max_eligible_amount(self_employed_weak, personal_loan) == 1_050_000  # 50x * 0.7

    government_strong = make_applicant(
        credit_score=760, monthly_income=20_000, employment_category="government"
    )
    assert max_eligible_amount(government_strong, personal_loan) == 1_800_000  # 75x * 1.2


def test_max_amount_never_exceeds_product_cap(make_applicant):
    """Test every product caps the eligible amount"""
    for product in DEFAULT_PRODUCTS:
        for category in EmploymentCategory:
            for score in (300, 649, 650, 750, 900):
                for income in (1, 25_000, 1_000_000, 50_000_000):
                    applicant = make_applicant(
                        credit_score=score, monthly_income=income, employment_category=category
                    )
                    assert max_eligible_amount(applicant, product) <= product.max_amount


def test_requested_amount_above_max_is_advisory(make_applicant, personal_loan):
    """Test an oversized request adds a reason but stays eligible"""
    applicant = make_applicant(credit_score=700, monthly_income=30_000, existing_monthly_debt=0)

    decision = evaluate(applicant, personal_loan, requested_amount=2_000_000)

    assert decision.eligible is True
    assert decision.max_eligible_amount == 1_800_000
    assert decision.reasons[1] == "Requested loan amount 2,000,000 exceeds maximum eligible amount 1,800,000"
    assert decision.narrative_message == "Good chances of loan approval"


def test_requested_amount_within_max_adds_nothing(make_applicant, personal_loan):
    applicant = make_applicant(credit_score=700, monthly_income=30_000, existing_monthly_debt=0)
    decision = evaluate(applicant, personal_loan, requested_amount=500_000)
    assert len(decision.reasons) == 2


def test_advisory_logged_before_income_floor(make_applicant, personal_loan):
    """Test the advisory reason precedes a minimum income rejection"""
    applicant = make_applicant(monthly_income=15_000, existing_monthly_debt=0)

    decision = evaluate(applicant, personal_loan, requested_amount=2_000_000)

    assert decision.eligible is False
    assert len(decision.reasons) == 3
    assert decision.reasons[1].startswith("Requested loan amount")
    assert decision.reasons[2] == "Monthly income 15,000 is below minimum requirement of 20,000 for Personal Loan"
    assert decision.narrative_message == "Minimum monthly income required is 20,000"
    # Computed before the floor gate, so it is kept
    assert decision.max_eligible_amount == 900_000


def test_product_minimum_score_rejects(make_applicant, education_loan):
    """Test a score below the product floor stops evaluation"""
    applicant = make_applicant(credit_score=580, monthly_income=30_000, existing_monthly_debt=0)

    decision = evaluate(applicant, education_loan)

    assert decision.eligible is False
    assert decision.approval_tier == ApprovalTier.VERY_LOW
    assert decision.reasons[-1] == "Credit score 580 is below minimum requirement of 600 for Education Loan"
    assert decision.max_eligible_amount == 1_260_000
    assert decision.approval_probability_percent == 0


def test_score_below_eligibility_line_is_score_driven(make_applicant, education_loan):
    """Test a score that clears the product floor but not 650 is ineligible"""
    applicant = make_applicant(credit_score=620, monthly_income=30_000, existing_monthly_debt=0, age=30)

    decision = evaluate(applicant, education_loan)

    assert decision.eligible is False
    assert decision.approval_tier == ApprovalTier.LOW
    assert decision.narrative_message == "Credit score needs improvement for loan approval"
    assert decision.reasons[-1] == "Private Employee - Standard approval weight"
    # 5 + 30 + 15 + 10
    assert decision.approval_probability_percent == 60


@pytest.mark.parametrize(
    "score, tier",
    [(750, ApprovalTier.HIGH), (700, ApprovalTier.GOOD), (699, ApprovalTier.MODERATE), (650, ApprovalTier.MODERATE)],
)
def test_final_tiers(make_applicant, personal_loan, score, tier):
    decision = evaluate(make_applicant(credit_score=score), personal_loan)
    assert decision.eligible is True
    assert decision.approval_tier == tier


def test_self_employed_annotation(make_applicant, personal_loan):
    decision = evaluate(make_applicant(employment_category="self-employed"), personal_loan)
    assert decision.reasons[-1] == "Self-Employed - Stricter approval criteria"
    assert decision.recommended_lender_class.startswith("NBFC")


def test_approval_probability_bounds(make_applicant):
    """Test probability stays within 0-95 across the input space"""
    for score in (300, 599, 650, 700, 750, 900):
        for debt in (0, 15_000, 20_000, 25_000):
            for category in EmploymentCategory:
                for age in (18, 35, 36, 100):
                    applicant = make_applicant(
                        credit_score=score,
                        monthly_income=50_000,
                        existing_monthly_debt=debt,
                        employment_category=category,
                        age=age,
                    )
                    dti = debt_to_income_ratio(debt, 50_000)
                    assert 0 <= approval_probability(applicant, dti) <= 95


def test_evaluate_is_idempotent(strong_applicant, personal_loan):
    """Test identical inputs give identical decisions"""
    first = evaluate(strong_applicant, personal_loan, requested_amount=3_000_000)
    second = evaluate(strong_applicant, personal_loan, requested_amount=3_000_000)

    assert first == second
    assert repr(first) == repr(second)


def test_custom_policy_overrides_thresholds(make_applicant, personal_loan):
    """Test thresholds come from the policy passed in"""
    strict = EligibilityPolicy(max_dti_percent=40.0)
    applicant = make_applicant(monthly_income=40_000, existing_monthly_debt=18_000)

    assert evaluate(applicant, personal_loan).eligible is True

    decision = evaluate(applicant, personal_loan, policy=strict)
    assert decision.eligible is False
    assert decision.reasons[-1] == "Debt-to-income ratio: 45.0% (exceeds 40% limit)"


def test_policy_falls_back_to_default_age_ceiling(make_applicant, personal_loan):
    policy = EligibilityPolicy(age_ceilings={})
    decision = evaluate(make_applicant(age=62, employment_category="government"), personal_loan, policy=policy)
    assert decision.eligible is False
    assert "ceiling of 60" in decision.reasons[-1]


@pytest.mark.parametrize(
    "overrides",
    [
        {"credit_score": 250},
        {"credit_score": 901},
        {"age": 17},
        {"age": 101},
        {"monthly_income": -1},
        {"existing_monthly_debt": -500},
        {"monthly_income": float("nan")},
        {"monthly_income": float("inf")},
        {"employment_category": "contractor"},
        {"credit_score": 700.5},
        {"credit_score": True},
        {"age": 30.0},
    ],
)
def test_profile_rejects_invalid_input(make_applicant, overrides):
    """Test out-of-range profiles fail explicitly"""
    with pytest.raises(InvalidInputError):
        make_applicant(**overrides)


def test_profile_coerces_category_string():
    applicant = ApplicantProfile(credit_score=700, monthly_income=1, employment_category="private", age=30)
    assert applicant.employment_category is EmploymentCategory.PRIVATE


def test_catalog_lookup():
    assert default_catalog.get("home").max_amount == 50_000_000
    assert "car" in default_catalog
    assert [p.id for p in default_catalog.list()] == ["home", "personal", "car", "education"]
