"""GET /v1/loan/types - List available loan products"""

from fastapi import APIRouter, Depends

from prequal_gateway.api.v1.schemas import ProductListResponse, ProductSchema
from prequal_gateway.api.dependencies import get_catalog
from prequal_gateway.domain.catalog import ProductCatalog

router = APIRouter()


@router.get("/loan/types", response_model=ProductListResponse)
def list_loan_types(catalog: ProductCatalog = Depends(get_catalog)):
    """Return every product with its thresholds and rate range"""
    return ProductListResponse(
        loan_types=[
            ProductSchema(
                id=p.id,
                name=p.name,
                description=p.description,
                min_amount=p.min_amount,
                max_amount=p.max_amount,
                min_income=p.min_income,
                min_credit_score=p.min_credit_score,
                interest_rate=p.nominal_rate_range_text,
                max_tenure_years=p.max_term_years,
            )
            for p in catalog.list()
        ]
    )
