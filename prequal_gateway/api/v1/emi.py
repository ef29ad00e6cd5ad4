"""POST /v1/loan/calculate-emi - EMI calculator endpoint"""

import logging
from fastapi import APIRouter, HTTPException, Request

from prequal_gateway.api.v1.schemas import EMIRequest, EMIResponse, EMIBreakdown
from prequal_gateway.api.dependencies import get_request_id
from prequal_gateway.domain.amortization import compute_amortization_for_tenure
from prequal_gateway.domain.exceptions import ComputationDegenerateError, InvalidInputError
from prequal_gateway.infrastructure.observability.metrics import emi_calculation_counter, invalid_input_counter
from prequal_gateway.infrastructure.observability.logging import log_amortization

router = APIRouter()


@router.post("/loan/calculate-emi", response_model=EMIResponse)
def calculate_emi(request_body: EMIRequest, request: Request):
    """
    Compute monthly EMI, total interest and total payment.

    Tenure is given in years by default; pass tenure_unit="months" for a
    month count.
    """
    request_id = get_request_id(request)

    try:
        result = compute_amortization_for_tenure(
            request_body.principal,
            request_body.interest_rate,
            request_body.tenure,
            request_body.tenure_unit,
        )
    except (ComputationDegenerateError, InvalidInputError) as e:
        invalid_input_counter.labels(operation="emi").inc()
        logging.warning(f"EMI calculation rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    emi_calculation_counter.inc()
    log_amortization(request_id, result)

    return EMIResponse(
        emi=result.emi,
        principal=result.principal,
        interest_rate=result.annual_rate_percent,
        tenure_months=result.term_months,
        total_interest=result.total_interest,
        total_payment=result.total_payment,
        breakdown=EMIBreakdown(
            monthly_emi=result.emi,
            total_interest=result.total_interest,
            total_payment=result.total_payment,
        ),
    )
