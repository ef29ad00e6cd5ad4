"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import List, Optional

from prequal_gateway.config import settings
from prequal_gateway.domain.amortization import TenureUnit
from prequal_gateway.domain.models import ApprovalTier, EmploymentCategory


class EligibilityRequest(BaseModel):
    """Request body for POST /v1/loan/check"""

    loan_type: str = Field(..., min_length=1, description="Catalog product id")
    credit_score: int = Field(..., ge=300, le=900, description="Credit score (300-900)")
    monthly_income: float = Field(..., ge=0, description="Monthly income")
    existing_monthly_debt: float = Field(0, ge=0, description="Existing monthly EMI obligations")
    employment_type: EmploymentCategory
    age: int = Field(..., ge=18, le=100, description="Applicant age in years")
    loan_amount: Optional[float] = Field(None, ge=0, description="Requested loan amount")


class EligibilityResponse(BaseModel):
    """Response for POST /v1/loan/check"""

    loan_type: str
    eligible: bool
    approval_chance: ApprovalTier
    approval_percentage: int
    max_loan_amount: int
    suggested_bank_type: str
    interest_rate: str
    message: str
    reasons: List[str]
    score_band: str
    dti_ratio: Optional[float] = None
    indicative_emi: Optional[float] = Field(
        None, description="EMI on the offered amount at the lowest catalog rate over the maximum tenure"
    )


class ProductSchema(BaseModel):
    """Single product in the catalog"""

    id: str
    name: str
    description: str
    min_amount: int
    max_amount: int
    min_income: float
    min_credit_score: int
    interest_rate: str
    max_tenure_years: int


class ProductListResponse(BaseModel):
    """Response for GET /v1/loan/types"""

    loan_types: List[ProductSchema]


class EMIRequest(BaseModel):
    """Request body for POST /v1/loan/calculate-emi"""

    principal: float = Field(..., gt=0, description="Loan amount")
    interest_rate: float = Field(..., ge=0, description="Annual interest rate in percent")
    tenure: float = Field(..., gt=0, description="Loan tenure")
    tenure_unit: TenureUnit = Field(TenureUnit(settings.default_tenure_unit), description="Unit of tenure")


class EMIBreakdown(BaseModel):
    monthly_emi: float
    total_interest: float
    total_payment: float


class EMIResponse(BaseModel):
    """Response for POST /v1/loan/calculate-emi"""

    emi: float
    principal: float
    interest_rate: float
    tenure_months: int
    total_interest: float
    total_payment: float
    breakdown: EMIBreakdown
