"""POST /v1/loan/check - Loan pre-qualification endpoint"""

import time
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Request

from prequal_gateway.api.v1.schemas import EligibilityRequest, EligibilityResponse
from prequal_gateway.api.dependencies import get_catalog, get_policy, get_request_id
from prequal_gateway.domain.amortization import compute_amortization_for_tenure, parse_rate_range
from prequal_gateway.domain.catalog import ProductCatalog
from prequal_gateway.domain.eligibility import evaluate
from prequal_gateway.domain.exceptions import InvalidInputError, UnknownProductError
from prequal_gateway.domain.models import ApplicantProfile, EligibilityDecision, ProductDefinition
from prequal_gateway.domain.policy import EligibilityPolicy
from prequal_gateway.infrastructure.observability.metrics import record_decision, invalid_input_counter
from prequal_gateway.infrastructure.observability.logging import log_decision

router = APIRouter()


def indicative_emi(
    decision: EligibilityDecision, product: ProductDefinition, requested_amount: Optional[float]
) -> Optional[float]:
    """EMI on the amount on offer at the product's lowest rate and longest tenure"""
    if not decision.eligible or decision.max_eligible_amount <= 0:
        return None

    amount = decision.max_eligible_amount
    if requested_amount:
        amount = min(requested_amount, amount)

    low_rate, _ = parse_rate_range(product.nominal_rate_range_text)
    return compute_amortization_for_tenure(amount, low_rate, product.max_term_years).emi


@router.post("/loan/check", response_model=EligibilityResponse)
async def check_eligibility(
    request_body: EligibilityRequest,
    request: Request,
    catalog: ProductCatalog = Depends(get_catalog),
    policy: EligibilityPolicy = Depends(get_policy),
):
    """
    Pre-qualify an applicant for a catalog product.

    Flow:
    1. Resolve the product from the catalog
    2. Build the applicant profile
    3. Run the eligibility gates
    4. Record metrics and logs
    5. Return the decision with the product's rate range

    An ineligible applicant is a normal 200 response with eligible=false.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        product = catalog.get(request_body.loan_type)

        profile = ApplicantProfile(
            credit_score=request_body.credit_score,
            monthly_income=request_body.monthly_income,
            existing_monthly_debt=request_body.existing_monthly_debt,
            employment_category=request_body.employment_type,
            age=request_body.age,
        )

        decision = evaluate(profile, product, request_body.loan_amount, policy)

    except UnknownProductError as e:
        logging.warning(f"Unknown product: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    except InvalidInputError as e:
        invalid_input_counter.labels(operation="eligibility").inc()
        logging.warning(f"Invalid applicant data: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_decision(product.id, decision.eligible, decision.approval_tier.value, decision.max_eligible_amount)
    log_decision(request_id, product.id, decision, request_body.loan_amount, duration_ms)

    return EligibilityResponse(
        loan_type=product.name,
        eligible=decision.eligible,
        approval_chance=decision.approval_tier,
        approval_percentage=decision.approval_probability_percent,
        max_loan_amount=decision.max_eligible_amount,
        suggested_bank_type=decision.recommended_lender_class,
        interest_rate=product.nominal_rate_range_text,
        message=decision.narrative_message,
        reasons=list(decision.reasons),
        score_band=decision.score_band,
        dti_ratio=round(decision.dti_ratio, 2) if decision.dti_ratio is not None else None,
        indicative_emi=indicative_emi(decision, product, request_body.loan_amount),
    )
